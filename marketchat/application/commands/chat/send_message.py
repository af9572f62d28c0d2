"""
SendMessage Command - Append a message to a room's log.

Validation order:
1. Content must be non-empty after trimming
2. Room must exist
3. Sender must resolve (internal id, then external id)
4. Resolved sender must be the room's buyer or seller
"""

import logging
from dataclasses import dataclass

from marketchat.application.common.interfaces import Command, CommandHandler
from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.domain.entities.message import Message
from marketchat.domain.exceptions import (
    ChatRoomNotFoundError,
    EmptyContentError,
    SenderNotFoundError,
    SenderNotParticipantError,
)
from marketchat.domain.ports.repositories import ChatRoomRepository, MessageRepository
from marketchat.domain.value_objects.chat_room_id import ChatRoomId
from marketchat.observability.metrics import increment_messages_sent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    room_id: ChatRoomId
    sender_id: int  # internal or external id
    content: str


class SendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        identity_resolver: IdentityResolver,
        room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ):
        self._identity = identity_resolver
        self._room_repository = room_repository
        self._message_repository = message_repository

    async def execute(self, command: SendMessageCommand) -> Message:
        if not command.content or not command.content.strip():
            raise EmptyContentError()

        room = await self._room_repository.get_by_id(command.room_id)
        if not room:
            raise ChatRoomNotFoundError(command.room_id.value)

        sender = await self._identity.require(command.sender_id, SenderNotFoundError)
        if not room.has_participant(sender.id):
            raise SenderNotParticipantError(room.id.value, sender.id.value)

        message = await self._message_repository.add(
            Message.create(room_id=room.id, sender_id=sender.id, content=command.content)
        )
        increment_messages_sent()
        logger.info(
            f"Message {message.id.value} appended to room {room.id.value} "
            f"by user {sender.id.value}"
        )
        return message
