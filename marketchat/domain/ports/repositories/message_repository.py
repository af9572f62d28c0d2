"""
Message Repository Port - Interface for the per-room message log.
Implementation: marketchat/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from marketchat.domain.entities.message import Message
from marketchat.domain.value_objects.chat_room_id import ChatRoomId
from marketchat.domain.value_objects.user_id import UserId


class MessageRepository(ABC):
    @abstractmethod
    async def add(self, message: Message) -> Message:
        """Append a message and return it with its assigned id."""
        ...

    @abstractmethod
    async def list_by_room(self, room_id: ChatRoomId) -> list[Message]:
        """All messages of the room ordered by (created_at, id) ascending."""
        ...

    @abstractmethod
    async def get_latest(self, room_id: ChatRoomId) -> Optional[Message]: ...

    @abstractmethod
    async def count_unread(self, room_id: ChatRoomId, reader_id: UserId) -> int:
        """Messages in the room not sent by reader_id and still unread."""
        ...

    @abstractmethod
    async def mark_read_for_reader(self, room_id: ChatRoomId, reader_id: UserId) -> int:
        """
        Flip every unread message in the room not sent by reader_id to read,
        in one bulk update.

        Returns:
            Number of messages transitioned.
        """
        ...
