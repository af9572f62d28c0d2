"""Count Unread Messages Query - unread count for a room/participant pair."""

from dataclasses import dataclass

from marketchat.application.common.interfaces import Query, QueryHandler
from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.domain.exceptions import ChatRoomNotFoundError, ReaderNotFoundError
from marketchat.domain.ports.repositories import ChatRoomRepository, MessageRepository
from marketchat.domain.value_objects.chat_room_id import ChatRoomId


@dataclass(frozen=True)
class CountUnreadMessagesQuery(Query[int]):
    room_id: ChatRoomId
    reader_id: int  # internal or external id


class CountUnreadMessagesHandler(QueryHandler[int]):
    def __init__(
        self,
        identity_resolver: IdentityResolver,
        room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ):
        self._identity = identity_resolver
        self._room_repository = room_repository
        self._message_repository = message_repository

    async def execute(self, query: CountUnreadMessagesQuery) -> int:
        room = await self._room_repository.get_by_id(query.room_id)
        if not room:
            raise ChatRoomNotFoundError(query.room_id.value)

        reader = await self._identity.require(query.reader_id, ReaderNotFoundError)
        return await self._message_repository.count_unread(room.id, reader.id)
