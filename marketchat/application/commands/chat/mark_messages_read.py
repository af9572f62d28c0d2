"""
MarkMessagesRead Command - Flip the counterpart's unread messages to read.

Only messages authored by someone other than the reader change; the reader's
own messages are never touched. Running it twice is a no-op the second time.
"""

import logging
from dataclasses import dataclass

from marketchat.application.common.interfaces import Command, CommandHandler
from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.domain.exceptions import ChatRoomNotFoundError, ReaderNotFoundError
from marketchat.domain.ports.repositories import ChatRoomRepository, MessageRepository
from marketchat.domain.value_objects.chat_room_id import ChatRoomId
from marketchat.observability.metrics import increment_messages_read

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkMessagesReadCommand(Command[int]):
    room_id: ChatRoomId
    reader_id: int  # internal or external id


class MarkMessagesReadHandler(CommandHandler[int]):
    def __init__(
        self,
        identity_resolver: IdentityResolver,
        room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ):
        self._identity = identity_resolver
        self._room_repository = room_repository
        self._message_repository = message_repository

    async def execute(self, command: MarkMessagesReadCommand) -> int:
        """Returns the number of messages that transitioned to read."""
        room = await self._room_repository.get_by_id(command.room_id)
        if not room:
            raise ChatRoomNotFoundError(command.room_id.value)

        reader = await self._identity.require(command.reader_id, ReaderNotFoundError)

        updated = await self._message_repository.mark_read_for_reader(room.id, reader.id)
        increment_messages_read(updated)
        if updated:
            logger.info(
                f"Marked {updated} message(s) read in room {room.id.value} "
                f"for user {reader.id.value}"
            )
        return updated
