"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier (assigned by storage, so None until persisted)
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from marketchat.domain.entities.user import User
from marketchat.domain.entities.product import Product
from marketchat.domain.entities.chat_room import ChatRoom
from marketchat.domain.entities.message import Message
from marketchat.domain.entities.like import Like

__all__ = [
    "User",
    "Product",
    "ChatRoom",
    "Message",
    "Like",
]
