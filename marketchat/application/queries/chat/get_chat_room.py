"""Get Chat Room Query."""

from dataclasses import dataclass
from marketchat.application.common.interfaces import Query, QueryHandler
from marketchat.domain.entities.chat_room import ChatRoom
from marketchat.domain.exceptions import ChatRoomNotFoundError
from marketchat.domain.ports.repositories import ChatRoomRepository
from marketchat.domain.value_objects.chat_room_id import ChatRoomId


@dataclass(frozen=True)
class GetChatRoomQuery(Query[ChatRoom]):
    room_id: ChatRoomId


class GetChatRoomHandler(QueryHandler[ChatRoom]):
    def __init__(self, room_repository: ChatRoomRepository):
        self._room_repository = room_repository

    async def execute(self, query: GetChatRoomQuery) -> ChatRoom:
        room = await self._room_repository.get_by_id(query.room_id)
        if not room:
            raise ChatRoomNotFoundError(query.room_id.value)
        return room
