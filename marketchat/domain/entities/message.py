"""
Message Entity - A single message in a chat room.

Immutable once created except for the read flag. Total order inside a room is
(created_at, id) ascending; the surrogate id breaks timestamp ties.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from marketchat.domain.exceptions.validation_error import EmptyContentError
from marketchat.domain.value_objects.chat_room_id import ChatRoomId
from marketchat.domain.value_objects.message_id import MessageId
from marketchat.domain.value_objects.user_id import UserId


@dataclass
class Message:
    id: Optional[MessageId]
    room_id: ChatRoomId
    sender_id: UserId
    content: str
    created_at: datetime
    is_read: bool = False

    def __post_init__(self):
        if not self.content or not self.content.strip():
            raise EmptyContentError()

    @classmethod
    def create(cls, room_id: ChatRoomId, sender_id: UserId, content: str) -> Message:
        """Factory method to create a new unread Message stamped with the current time."""
        return cls(
            id=None,
            room_id=room_id,
            sender_id=sender_id,
            content=content,
            created_at=datetime.now(timezone.utc),
            is_read=False,
        )

    @property
    def sort_key(self) -> tuple[datetime, int]:
        return (self.created_at, self.id.value if self.id else 0)

    def is_unread_for(self, reader_id: UserId) -> bool:
        """Authors never have unread messages of their own."""
        return not self.is_read and self.sender_id != reader_id

    def mark_read(self) -> None:
        self.is_read = True
