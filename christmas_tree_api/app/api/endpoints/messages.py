"""
Message board endpoints.

``POST /api/message?description=...`` stores a new message and
``GET /api/message`` lists every stored message.  Both routes are
public; there is no pagination or filtering.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from christmas_tree_api.app.schemas.message import MessageRead
from christmas_tree_api.app.services.message_service import MessageService, get_message_service


router = APIRouter()


@router.post("", response_model=MessageRead)
def create_message(
    description: Optional[str] = Query(None, description="Message text"),
    service: MessageService = Depends(get_message_service),
) -> MessageRead:
    """Create a message from the ``description`` query parameter.

    Returns HTTP 400 when the parameter is absent.  An empty value is
    accepted and stored as-is.
    """
    if description is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter 'description' is required",
        )
    message = service.create_message(description)
    return MessageRead(id=message.id, description=message.description)


@router.get("", response_model=List[MessageRead])
def list_messages(service: MessageService = Depends(get_message_service)) -> List[MessageRead]:
    """Return all messages (an empty list if there are none)."""
    return [MessageRead(id=m.id, description=m.description) for m in service.get_messages()]
