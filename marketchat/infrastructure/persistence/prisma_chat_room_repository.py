"""
Prisma ChatRoom Repository Implementation.

Mapping:
- Prisma model fields: id, buyer_id, seller_id, product_id, created_at
- Domain entity: ChatRoom with value objects (ChatRoomId, UserId, ProductId)

The @@unique([buyer_id, seller_id, product_id]) index is the arbiter for
concurrent creations: the losing insert surfaces as DuplicateChatRoomError.
"""

from typing import Optional, TYPE_CHECKING
from prisma.errors import UniqueViolationError
from marketchat.domain.entities.chat_room import ChatRoom
from marketchat.domain.exceptions import DuplicateChatRoomError
from marketchat.domain.ports.repositories import ChatRoomRepository
from marketchat.domain.value_objects.chat_room_id import ChatRoomId
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import ChatRoom as PrismaChatRoom


class PrismaChatRoomRepository(ChatRoomRepository):
    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        self._prisma = prisma

    def _to_entity(self, record: "PrismaChatRoom") -> ChatRoom:
        """Map Prisma record to domain entity."""
        return ChatRoom(
            id=ChatRoomId(record.id),
            buyer_id=UserId(record.buyer_id),
            seller_id=UserId(record.seller_id),
            product_id=ProductId(record.product_id),
            created_at=record.created_at,
        )

    async def get_by_id(self, room_id: ChatRoomId) -> Optional[ChatRoom]:
        record = await self._prisma.chatroom.find_unique(where={"id": room_id.value})
        return self._to_entity(record) if record else None

    async def get_by_participants(
        self, buyer_id: UserId, seller_id: UserId, product_id: ProductId
    ) -> Optional[ChatRoom]:
        record = await self._prisma.chatroom.find_unique(
            where={
                "buyer_id_seller_id_product_id": {
                    "buyer_id": buyer_id.value,
                    "seller_id": seller_id.value,
                    "product_id": product_id.value,
                }
            }
        )
        return self._to_entity(record) if record else None

    async def list_by_participant(self, user_id: UserId) -> list[ChatRoom]:
        records = await self._prisma.chatroom.find_many(
            where={
                "OR": [
                    {"buyer_id": user_id.value},
                    {"seller_id": user_id.value},
                ]
            },
            order=[{"created_at": "desc"}, {"id": "desc"}],
        )
        return [self._to_entity(record) for record in records]

    async def add(self, room: ChatRoom) -> ChatRoom:
        try:
            record = await self._prisma.chatroom.create(
                data={
                    "buyer_id": room.buyer_id.value,
                    "seller_id": room.seller_id.value,
                    "product_id": room.product_id.value,
                    "created_at": room.created_at,
                }
            )
        except UniqueViolationError as e:
            raise DuplicateChatRoomError(
                room.buyer_id.value, room.seller_id.value, room.product_id.value
            ) from e
        return self._to_entity(record)

    async def delete(self, room_id: ChatRoomId) -> bool:
        """Messages go with the room through the ON DELETE CASCADE foreign key."""
        record = await self._prisma.chatroom.delete(where={"id": room_id.value})
        return record is not None
