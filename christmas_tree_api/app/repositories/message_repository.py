"""
Persistence for board messages.

``MessageRepository`` defines the two operations the service needs:
inserting a new message and listing every stored message.
``SQLiteMessageRepository`` implements them against the ``message``
table created by :func:`christmas_tree_api.app.core.db.init_db`.  Each
call opens and closes its own connection; concurrent writers rely on
SQLite's locking and ``AUTOINCREMENT`` for unique identifiers.

Any ``sqlite3.Error`` raised by the store, including constraint
violations such as an over-long description, surfaces as
:class:`StorageError`.
"""

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import List

from christmas_tree_api.app.core.db import get_connection
from christmas_tree_api.app.schemas.message import Message


logger = logging.getLogger(__name__)


class StorageError(Exception):
    """The message store is unreachable or rejected the operation."""


class MessageRepository(ABC):
    """Insert and list operations over the message store."""

    @abstractmethod
    def save(self, message: Message) -> Message:
        """Persist a new message and return it with its assigned ``id``."""

    @abstractmethod
    def find_all(self) -> List[Message]:
        """Return every stored message.  Order is not guaranteed."""


class SQLiteMessageRepository(MessageRepository):
    """``MessageRepository`` backed by the SQLite ``message`` table."""

    def save(self, message: Message) -> Message:
        try:
            conn = get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT INTO message (description) VALUES (?)",
                    (message.description,),
                )
                message_id = cursor.lastrowid
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to save message: {exc}") from exc
        logger.info("Created message %s", message_id)
        return Message(id=message_id, description=message.description)

    def find_all(self) -> List[Message]:
        try:
            conn = get_connection()
            try:
                rows = conn.execute("SELECT id, description FROM message").fetchall()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to list messages: {exc}") from exc
        return [Message(id=row["id"], description=row["description"]) for row in rows]
