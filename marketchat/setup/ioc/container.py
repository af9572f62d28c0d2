"""
Dishka DI Container Setup.

Guidelines:
- Registers services and command/query handlers
- Handlers depend on repository PORTS only; some other provider must map
  those ports to implementations (PersistenceProvider in production,
  an in-memory provider in tests)
- Manages lifecycle (APP = singleton, REQUEST = per-request)

Flow:
  Container → provides → SendMessageHandler
                              ↓
                  uses ChatRoomRepository / MessageRepository interfaces
                              ↓
           PersistenceProvider → PrismaChatRoomRepository, PrismaMessageRepository
"""

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from marketchat.application.commands.chat import (
    DeleteChatRoomHandler,
    GetOrCreateChatRoomHandler,
    MarkMessagesReadHandler,
    SendMessageHandler,
)
from marketchat.application.commands.likes import AddLikeHandler, RemoveLikeHandler
from marketchat.application.queries.chat import (
    CountUnreadMessagesHandler,
    GetChatRoomHandler,
    ListRoomMessagesHandler,
    ListUserChatRoomsHandler,
)
from marketchat.application.queries.likes import IsLikedHandler, ListUserLikesHandler
from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.application.services.reputation_ledger import ReputationLedger
from marketchat.config.settings import Config
from marketchat.domain.ports.repositories import (
    ChatRoomRepository,
    LikeRepository,
    MessageRepository,
    ProductRepository,
    UserRepository,
)
from marketchat.domain.services import ReputationPolicy


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers services and handlers. Repositories are resolved from
    whichever storage provider the container was built with.
    """

    # ==================== DOMAIN SERVICES ====================

    @provide(scope=Scope.APP)
    def get_reputation_policy(self) -> ReputationPolicy:
        return ReputationPolicy(
            baseline=Config.REPUTATION_BASELINE,
            ceiling=Config.REPUTATION_CEILING,
            delta=Config.REPUTATION_DELTA,
        )

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_identity_resolver(self, user_repository: UserRepository) -> IdentityResolver:
        return IdentityResolver(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_reputation_ledger(
        self, user_repository: UserRepository, policy: ReputationPolicy
    ) -> ReputationLedger:
        return ReputationLedger(user_repository, policy)

    # ==================== CHAT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_or_create_chat_room_handler(
        self,
        identity_resolver: IdentityResolver,
        room_repository: ChatRoomRepository,
        product_repository: ProductRepository,
    ) -> GetOrCreateChatRoomHandler:
        return GetOrCreateChatRoomHandler(
            identity_resolver,
            room_repository,
            product_repository,
            max_attempts=Config.ROOM_CREATE_MAX_ATTEMPTS,
        )

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        identity_resolver: IdentityResolver,
        room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ) -> SendMessageHandler:
        return SendMessageHandler(identity_resolver, room_repository, message_repository)

    @provide(scope=Scope.REQUEST)
    def get_mark_messages_read_handler(
        self,
        identity_resolver: IdentityResolver,
        room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ) -> MarkMessagesReadHandler:
        return MarkMessagesReadHandler(
            identity_resolver, room_repository, message_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_chat_room_handler(
        self, room_repository: ChatRoomRepository
    ) -> DeleteChatRoomHandler:
        return DeleteChatRoomHandler(room_repository)

    @provide(scope=Scope.REQUEST)
    def get_chat_room_handler(
        self, room_repository: ChatRoomRepository
    ) -> GetChatRoomHandler:
        return GetChatRoomHandler(room_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_room_messages_handler(
        self,
        room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ) -> ListRoomMessagesHandler:
        return ListRoomMessagesHandler(room_repository, message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_user_chat_rooms_handler(
        self,
        identity_resolver: IdentityResolver,
        room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ) -> ListUserChatRoomsHandler:
        return ListUserChatRoomsHandler(
            identity_resolver, room_repository, message_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_count_unread_messages_handler(
        self,
        identity_resolver: IdentityResolver,
        room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ) -> CountUnreadMessagesHandler:
        return CountUnreadMessagesHandler(
            identity_resolver, room_repository, message_repository
        )

    # ==================== LIKE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_add_like_handler(
        self,
        identity_resolver: IdentityResolver,
        product_repository: ProductRepository,
        like_repository: LikeRepository,
        reputation_ledger: ReputationLedger,
    ) -> AddLikeHandler:
        return AddLikeHandler(
            identity_resolver, product_repository, like_repository, reputation_ledger
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_like_handler(
        self,
        identity_resolver: IdentityResolver,
        product_repository: ProductRepository,
        like_repository: LikeRepository,
        reputation_ledger: ReputationLedger,
    ) -> RemoveLikeHandler:
        return RemoveLikeHandler(
            identity_resolver, product_repository, like_repository, reputation_ledger
        )

    @provide(scope=Scope.REQUEST)
    def get_list_user_likes_handler(
        self, identity_resolver: IdentityResolver, like_repository: LikeRepository
    ) -> ListUserLikesHandler:
        return ListUserLikesHandler(identity_resolver, like_repository)

    @provide(scope=Scope.REQUEST)
    def get_is_liked_handler(
        self,
        identity_resolver: IdentityResolver,
        product_repository: ProductRepository,
        like_repository: LikeRepository,
    ) -> IsLikedHandler:
        return IsLikedHandler(identity_resolver, product_repository, like_repository)


def create_container(*storage_providers: Provider) -> AsyncContainer:
    """
    Create and configure the DI container.

    - storage_providers must map every repository port
    - Call this ONCE at app startup
    """
    return make_async_container(*storage_providers, AppProvider())
