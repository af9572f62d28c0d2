"""
ListRoomMessages Query - Full message log of one room.

Returns every message ascending by (created_at, id). Pure read, safe to repeat.
There is no pagination: a room covers a single product negotiation.
"""

from dataclasses import dataclass

from marketchat.application.common.interfaces import Query, QueryHandler
from marketchat.domain.entities.message import Message
from marketchat.domain.exceptions import ChatRoomNotFoundError
from marketchat.domain.ports.repositories import ChatRoomRepository, MessageRepository
from marketchat.domain.value_objects.chat_room_id import ChatRoomId


@dataclass(frozen=True)
class ListRoomMessagesQuery(Query[list[Message]]):
    room_id: ChatRoomId


class ListRoomMessagesHandler(QueryHandler[list[Message]]):
    def __init__(
        self,
        room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ):
        self._room_repository = room_repository
        self._message_repository = message_repository

    async def execute(self, query: ListRoomMessagesQuery) -> list[Message]:
        """
        Raises:
            ChatRoomNotFoundError: If the room doesn't exist
        """
        room = await self._room_repository.get_by_id(query.room_id)
        if not room:
            raise ChatRoomNotFoundError(query.room_id.value)

        return await self._message_repository.list_by_room(room.id)
