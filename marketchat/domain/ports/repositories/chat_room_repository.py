"""
ChatRoom Repository Port - Interface for chat room persistence.
Implementation: marketchat/infrastructure/persistence/prisma_chat_room_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from marketchat.domain.entities.chat_room import ChatRoom
from marketchat.domain.value_objects.chat_room_id import ChatRoomId
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.domain.value_objects.user_id import UserId


class ChatRoomRepository(ABC):
    @abstractmethod
    async def get_by_id(self, room_id: ChatRoomId) -> Optional[ChatRoom]: ...

    @abstractmethod
    async def get_by_participants(
        self, buyer_id: UserId, seller_id: UserId, product_id: ProductId
    ) -> Optional[ChatRoom]: ...

    @abstractmethod
    async def list_by_participant(self, user_id: UserId) -> list[ChatRoom]:
        """Rooms where the user is buyer or seller, newest first."""
        ...

    @abstractmethod
    async def add(self, room: ChatRoom) -> ChatRoom:
        """
        Insert a new room and return it with its assigned id.

        Raises:
            DuplicateChatRoomError: If the (buyer, seller, product) triple
                already exists (unique index violation).
        """
        ...

    @abstractmethod
    async def delete(self, room_id: ChatRoomId) -> bool:
        """Delete the room and, by cascade, its messages. True if a row was removed."""
        ...
