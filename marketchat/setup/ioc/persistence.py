"""
Prisma-backed storage provider.

Kept apart from AppProvider so that importing the handlers never requires a
generated Prisma client.
"""

from typing import AsyncIterable
from dishka import Provider, Scope, provide
from prisma import Prisma
from marketchat.domain.ports.repositories import (
    ChatRoomRepository,
    LikeRepository,
    MessageRepository,
    ProductRepository,
    UserRepository,
)
from marketchat.infrastructure.persistence import (
    PrismaChatRoomRepository,
    PrismaLikeRepository,
    PrismaMessageRepository,
    PrismaProductRepository,
    PrismaUserRepository,
)


class PersistenceProvider(Provider):

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = connected ONCE, shared across all requests
        - Disconnected when the container closes
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_product_repository(self, prisma: Prisma) -> ProductRepository:
        return PrismaProductRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_chat_room_repository(self, prisma: Prisma) -> ChatRoomRepository:
        return PrismaChatRoomRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, prisma: Prisma) -> LikeRepository:
        return PrismaLikeRepository(prisma)
