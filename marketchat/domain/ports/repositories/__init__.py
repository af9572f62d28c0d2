"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, SQLAlchemy, in-memory, etc.)
- Returns entity snapshots, never live handles into storage

Infrastructure layer provides implementations.
"""

from marketchat.domain.ports.repositories.user_repository import UserRepository
from marketchat.domain.ports.repositories.product_repository import ProductRepository
from marketchat.domain.ports.repositories.chat_room_repository import ChatRoomRepository
from marketchat.domain.ports.repositories.message_repository import MessageRepository
from marketchat.domain.ports.repositories.like_repository import LikeRepository

__all__ = [
    "UserRepository",
    "ProductRepository",
    "ChatRoomRepository",
    "MessageRepository",
    "LikeRepository",
]
