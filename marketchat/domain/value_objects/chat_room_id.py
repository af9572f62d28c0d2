"""
ChatRoomId Value Object
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChatRoomId:
    value: int  # chat_rooms.id

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"ChatRoomId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"ChatRoomId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
