"""
Prisma Message Repository Implementation.

Mapping:
- Prisma model fields: id, chat_room_id, sender_id, content, is_read, created_at
- Domain entity: Message with value objects (MessageId, ChatRoomId, UserId)
"""

from typing import Optional, TYPE_CHECKING
from marketchat.domain.entities.message import Message
from marketchat.domain.ports.repositories import MessageRepository
from marketchat.domain.value_objects.chat_room_id import ChatRoomId
from marketchat.domain.value_objects.message_id import MessageId
from marketchat.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Message as PrismaMessage


class PrismaMessageRepository(MessageRepository):
    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        self._prisma = prisma

    def _to_entity(self, record: "PrismaMessage") -> Message:
        """Map Prisma record to domain entity."""
        return Message(
            id=MessageId(record.id),
            room_id=ChatRoomId(record.chat_room_id),
            sender_id=UserId(record.sender_id),
            content=record.content,
            created_at=record.created_at,
            is_read=record.is_read,
        )

    def _unread_for(self, room_id: ChatRoomId, reader_id: UserId) -> dict:
        return {
            "chat_room_id": room_id.value,
            "sender_id": {"not": reader_id.value},
            "is_read": False,
        }

    async def add(self, message: Message) -> Message:
        record = await self._prisma.message.create(
            data={
                "chat_room_id": message.room_id.value,
                "sender_id": message.sender_id.value,
                "content": message.content,
                "is_read": message.is_read,
                "created_at": message.created_at,
            }
        )
        return self._to_entity(record)

    async def list_by_room(self, room_id: ChatRoomId) -> list[Message]:
        records = await self._prisma.message.find_many(
            where={"chat_room_id": room_id.value},
            order=[{"created_at": "asc"}, {"id": "asc"}],
        )
        return [self._to_entity(record) for record in records]

    async def get_latest(self, room_id: ChatRoomId) -> Optional[Message]:
        record = await self._prisma.message.find_first(
            where={"chat_room_id": room_id.value},
            order=[{"created_at": "desc"}, {"id": "desc"}],
        )
        return self._to_entity(record) if record else None

    async def count_unread(self, room_id: ChatRoomId, reader_id: UserId) -> int:
        return await self._prisma.message.count(
            where=self._unread_for(room_id, reader_id)
        )

    async def mark_read_for_reader(self, room_id: ChatRoomId, reader_id: UserId) -> int:
        # Single UPDATE ... WHERE is_read = false: concurrent readers never double count.
        return await self._prisma.message.update_many(
            where=self._unread_for(room_id, reader_id),
            data={"is_read": True},
        )
