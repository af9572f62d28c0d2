"""Delete Chat Room Command. Messages go with the room (cascade)."""

import logging
from dataclasses import dataclass

from marketchat.application.common.interfaces import Command, CommandHandler
from marketchat.domain.exceptions import ChatRoomNotFoundError
from marketchat.domain.ports.repositories import ChatRoomRepository
from marketchat.domain.value_objects.chat_room_id import ChatRoomId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteChatRoomCommand(Command[bool]):
    room_id: ChatRoomId


class DeleteChatRoomHandler(CommandHandler[bool]):
    def __init__(self, room_repository: ChatRoomRepository):
        self._room_repository = room_repository

    async def execute(self, command: DeleteChatRoomCommand) -> bool:
        room = await self._room_repository.get_by_id(command.room_id)
        if not room:
            raise ChatRoomNotFoundError(command.room_id.value)

        deleted = await self._room_repository.delete(command.room_id)
        if not deleted:
            # Removed by a concurrent request between the read and the delete
            raise ChatRoomNotFoundError(command.room_id.value)

        logger.info(f"Chat room {command.room_id.value} deleted")
        return True
