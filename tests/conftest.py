import pytest
from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

from marketchat.application.commands.chat import (
    GetOrCreateChatRoomCommand,
    GetOrCreateChatRoomHandler,
)
from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.application.services.reputation_ledger import ReputationLedger
from marketchat.domain.ports.repositories import (
    ChatRoomRepository,
    LikeRepository,
    MessageRepository,
    ProductRepository,
    UserRepository,
)
from marketchat.domain.services import ReputationPolicy
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.fastapi_app import create_fastapi_app
from marketchat.setup.ioc.container import create_container
from tests.fakes import (
    BUYER_ID,
    LIKER_ID,
    OUTSIDER_ID,
    OUTSIDER_PRODUCT_ID,
    PRODUCT_ID,
    SELLER_ID,
    external_id_of,
    InMemoryChatRoomRepository,
    InMemoryLikeRepository,
    InMemoryMessageRepository,
    InMemoryProductRepository,
    InMemoryStore,
    InMemoryUserRepository,
)


class InMemoryProvider(Provider):
    """Maps every repository port to the in-memory store."""

    def __init__(self, store: InMemoryStore):
        super().__init__()
        self._store = store

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return InMemoryUserRepository(self._store)

    @provide(scope=Scope.APP)
    def get_product_repository(self) -> ProductRepository:
        return InMemoryProductRepository(self._store)

    @provide(scope=Scope.APP)
    def get_chat_room_repository(self) -> ChatRoomRepository:
        return InMemoryChatRoomRepository(self._store)

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return InMemoryMessageRepository(self._store)

    @provide(scope=Scope.APP)
    def get_like_repository(self) -> LikeRepository:
        return InMemoryLikeRepository(self._store)


@pytest.fixture()
def store():
    """Buyer 1, seller 2 (owns product 10), outsider 3 (owns product 20), liker 5."""
    store = InMemoryStore()
    store.add_user(BUYER_ID, external_id_of(BUYER_ID), "buyer")
    store.add_user(SELLER_ID, external_id_of(SELLER_ID), "seller")
    store.add_user(OUTSIDER_ID, external_id_of(OUTSIDER_ID), "outsider")
    store.add_user(LIKER_ID, external_id_of(LIKER_ID), "liker")
    store.add_product(PRODUCT_ID, SELLER_ID, "camping chair")
    store.add_product(OUTSIDER_PRODUCT_ID, OUTSIDER_ID, "desk lamp")
    return store


@pytest.fixture()
def user_repository(store):
    return InMemoryUserRepository(store)


@pytest.fixture()
def product_repository(store):
    return InMemoryProductRepository(store)


@pytest.fixture()
def room_repository(store):
    return InMemoryChatRoomRepository(store)


@pytest.fixture()
def message_repository(store):
    return InMemoryMessageRepository(store)


@pytest.fixture()
def like_repository(store):
    return InMemoryLikeRepository(store)


@pytest.fixture()
def identity_resolver(user_repository):
    return IdentityResolver(user_repository)


@pytest.fixture()
def reputation_policy():
    return ReputationPolicy()


@pytest.fixture()
def reputation_ledger(user_repository, reputation_policy):
    return ReputationLedger(user_repository, reputation_policy)


@pytest.fixture()
def app(store):
    """FastAPI app wired to the in-memory store."""
    return create_fastapi_app(create_container(InMemoryProvider(store)))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (runs lifespan)."""
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def open_room(identity_resolver, room_repository, product_repository):
    """Coroutine factory: get-or-create a room (buyer 1 / seller 2 / product 10 by default)."""
    handler = GetOrCreateChatRoomHandler(
        identity_resolver, room_repository, product_repository
    )

    async def _open(buyer_id=BUYER_ID, seller_id=SELLER_ID, product_id=PRODUCT_ID):
        result = await handler.execute(
            GetOrCreateChatRoomCommand(
                buyer_id=buyer_id, seller_id=seller_id, product_id=ProductId(product_id)
            )
        )
        return result.room

    return _open
