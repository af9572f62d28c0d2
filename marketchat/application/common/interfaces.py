"""
CQRS building blocks shared by every use case.

- Commands change state (rooms, messages, read flags, likes, reputation)
- Queries only read; calling one twice gives the same answer
- Handlers receive their ports through __init__ and signal failure with
  domain exceptions, never with HTTP types

Usage:
    @dataclass(frozen=True)
    class DeleteChatRoomCommand(Command[bool]):
        room_id: ChatRoomId

    class DeleteChatRoomHandler(CommandHandler[bool]):
        def __init__(self, room_repository: ChatRoomRepository):
            self._room_repository = room_repository

        async def execute(self, command: DeleteChatRoomCommand) -> bool:
            ...
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

ResultT = TypeVar("ResultT")


class Command(ABC, Generic[ResultT]):
    """Immutable request to change state; ResultT is what its handler returns."""


class CommandHandler(ABC, Generic[ResultT]):
    @abstractmethod
    async def execute(self, command: Command[ResultT]) -> ResultT: ...


class Query(ABC, Generic[ResultT]):
    """Immutable read request."""


class QueryHandler(ABC, Generic[ResultT]):
    @abstractmethod
    async def execute(self, query: Query[ResultT]) -> ResultT: ...
