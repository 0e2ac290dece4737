"""
Pydantic schemas for board messages.

A message is a generated integer ``id`` plus a free-text
``description``.  ``Message`` is the value passed between the service
and repository; its ``id`` is unset until the store assigns one.
``MessageRead`` is the response shape returned by the API.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Message(BaseModel):
    """A board message, persisted or not yet persisted."""

    id: Optional[int] = Field(None, description="Identifier assigned by the store on insert")
    description: str = Field(..., description="Message text")


class MessageRead(BaseModel):
    """Schema for reading a stored message."""

    id: int
    description: str
