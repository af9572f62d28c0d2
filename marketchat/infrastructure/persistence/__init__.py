"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
Requires a generated Prisma client (`prisma generate`, schema in prisma/schema.prisma).
"""

from marketchat.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)
from marketchat.infrastructure.persistence.prisma_product_repository import (
    PrismaProductRepository,
)
from marketchat.infrastructure.persistence.prisma_chat_room_repository import (
    PrismaChatRoomRepository,
)
from marketchat.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from marketchat.infrastructure.persistence.prisma_like_repository import (
    PrismaLikeRepository,
)

__all__ = [
    "PrismaUserRepository",
    "PrismaProductRepository",
    "PrismaChatRoomRepository",
    "PrismaMessageRepository",
    "PrismaLikeRepository",
]
