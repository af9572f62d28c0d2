"""
ListUserChatRooms Query - The chat inbox of one user.

Every room where the resolved user is buyer or seller, newest room first, each
with its latest message and how many of the counterpart's messages the user
has not read yet.
"""

from dataclasses import dataclass
from typing import Optional

from marketchat.application.common.interfaces import Query, QueryHandler
from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.domain.entities.chat_room import ChatRoom
from marketchat.domain.entities.message import Message
from marketchat.domain.exceptions import UserNotFoundError
from marketchat.domain.ports.repositories import ChatRoomRepository, MessageRepository


@dataclass
class ChatRoomSummary:
    room: ChatRoom
    last_message: Optional[Message]
    unread_count: int


@dataclass(frozen=True)
class ListUserChatRoomsQuery(Query[list[ChatRoomSummary]]):
    user_id: int  # internal or external id


class ListUserChatRoomsHandler(QueryHandler[list[ChatRoomSummary]]):
    def __init__(
        self,
        identity_resolver: IdentityResolver,
        room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ):
        self._identity = identity_resolver
        self._room_repository = room_repository
        self._message_repository = message_repository

    async def execute(self, query: ListUserChatRoomsQuery) -> list[ChatRoomSummary]:
        user = await self._identity.require(query.user_id, UserNotFoundError)

        rooms = await self._room_repository.list_by_participant(user.id)
        summaries = []
        for room in rooms:
            summaries.append(
                ChatRoomSummary(
                    room=room,
                    last_message=await self._message_repository.get_latest(room.id),
                    unread_count=await self._message_repository.count_unread(
                        room.id, user.id
                    ),
                )
            )
        return summaries
