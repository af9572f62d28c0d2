"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- chat.py → ChatRoomDTO, MessageDTO, ChatRoomSummaryDTO
- like.py → LikeDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
Field names are snake_case in Python and camelCase on the wire.
"""

from marketchat.application.dto.chat import ChatRoomDTO, ChatRoomSummaryDTO, MessageDTO
from marketchat.application.dto.like import LikeDTO

__all__ = [
    "ChatRoomDTO",
    "ChatRoomSummaryDTO",
    "MessageDTO",
    "LikeDTO",
]
