"""
Service layer for board messages.

The service performs no validation or normalisation of its own: a
description is stored exactly as given, empty strings included.  All
persistence is delegated to a :class:`MessageRepository`.
"""

from typing import List

from christmas_tree_api.app.repositories.message_repository import (
    MessageRepository,
    SQLiteMessageRepository,
)
from christmas_tree_api.app.schemas.message import Message


class MessageService:
    """Create and list board messages."""

    def __init__(self, repository: MessageRepository) -> None:
        self.repository = repository

    def create_message(self, description: str) -> Message:
        """Store a new message and return it with its assigned ``id``."""
        return self.repository.save(Message(description=description))

    def get_messages(self) -> List[Message]:
        """Return all stored messages."""
        return self.repository.find_all()


def get_message_service() -> MessageService:
    """FastAPI dependency providing the SQLite-backed service."""
    return MessageService(SQLiteMessageRepository())
