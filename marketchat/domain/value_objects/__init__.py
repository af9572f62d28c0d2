"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from marketchat.domain.value_objects.user_id import UserId
from marketchat.domain.value_objects.external_id import ExternalId
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.domain.value_objects.chat_room_id import ChatRoomId
from marketchat.domain.value_objects.message_id import MessageId
from marketchat.domain.value_objects.like_id import LikeId

__all__ = [
    "UserId",
    "ExternalId",
    "ProductId",
    "ChatRoomId",
    "MessageId",
    "LikeId",
]
