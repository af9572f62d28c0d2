"""
Tests for like/unlike orchestration and the seller reputation it drives.

Run with: pytest tests/test_likes.py -v
"""

import pytest

from marketchat.application.commands.likes import (
    AddLikeCommand,
    AddLikeHandler,
    RemoveLikeCommand,
    RemoveLikeHandler,
)
from marketchat.application.queries.likes import (
    IsLikedHandler,
    IsLikedQuery,
    ListUserLikesHandler,
    ListUserLikesQuery,
)
from marketchat.application.services.reputation_ledger import ReputationLedger
from marketchat.domain.exceptions import (
    AlreadyLikedError,
    NotLikedError,
    ProductNotFoundError,
    UserNotFoundError,
)
from marketchat.domain.value_objects.product_id import ProductId
from tests.fakes import (
    BUYER_ID,
    LIKER_ID,
    OUTSIDER_ID,
    OUTSIDER_PRODUCT_ID,
    PRODUCT_ID,
    SELLER_ID,
    FailingUserRepository,
    external_id_of,
)


def like_command(user_id=LIKER_ID, product_id=PRODUCT_ID):
    return AddLikeCommand(user_id=user_id, product_id=ProductId(product_id))


def unlike_command(user_id=LIKER_ID, product_id=PRODUCT_ID):
    return RemoveLikeCommand(user_id=user_id, product_id=ProductId(product_id))


@pytest.fixture()
def like(identity_resolver, product_repository, like_repository, reputation_ledger):
    return AddLikeHandler(
        identity_resolver, product_repository, like_repository, reputation_ledger
    )


@pytest.fixture()
def unlike(identity_resolver, product_repository, like_repository, reputation_ledger):
    return RemoveLikeHandler(
        identity_resolver, product_repository, like_repository, reputation_ledger
    )


class TestAddLike:
    @pytest.mark.asyncio
    async def test_like_is_recorded_and_seller_warms_up(self, like, store):
        created = await like.execute(like_command())

        assert created.id is not None
        assert created.user_id.value == LIKER_ID
        assert created.product_id.value == PRODUCT_ID
        assert len(store.likes) == 1
        assert store.score_of(SELLER_ID) == pytest.approx(36.6)

    @pytest.mark.asyncio
    async def test_liker_reputation_untouched(self, like, store):
        await like.execute(like_command())

        assert store.score_of(LIKER_ID) == pytest.approx(36.5)

    @pytest.mark.asyncio
    async def test_second_like_rejected_and_score_unchanged(self, like, store):
        await like.execute(like_command())

        with pytest.raises(AlreadyLikedError):
            await like.execute(like_command())

        assert len(store.likes) == 1
        assert store.score_of(SELLER_ID) == pytest.approx(36.6)

    @pytest.mark.asyncio
    async def test_external_id_refers_to_same_like(self, like):
        await like.execute(like_command())

        with pytest.raises(AlreadyLikedError):
            await like.execute(like_command(user_id=external_id_of(LIKER_ID)))

    @pytest.mark.asyncio
    async def test_unknown_user(self, like):
        with pytest.raises(UserNotFoundError):
            await like.execute(like_command(user_id=999))

    @pytest.mark.asyncio
    async def test_unknown_product(self, like):
        with pytest.raises(ProductNotFoundError):
            await like.execute(like_command(product_id=999))

    @pytest.mark.asyncio
    async def test_reputation_failure_does_not_undo_like(
        self, store, identity_resolver, product_repository, like_repository, reputation_policy
    ):
        """Test that a failed reputation update leaves the like in place."""
        ledger = ReputationLedger(FailingUserRepository(store), reputation_policy)
        handler = AddLikeHandler(identity_resolver, product_repository, like_repository, ledger)

        created = await handler.execute(like_command())

        assert created.id is not None
        assert len(store.likes) == 1
        assert store.score_of(SELLER_ID) == pytest.approx(36.5)

    @pytest.mark.asyncio
    async def test_missing_seller_row_does_not_undo_like(
        self, store, like, like_repository
    ):
        del store.users[SELLER_ID]

        created = await like.execute(like_command())

        assert await like_repository.get(created.user_id, created.product_id) is not None


class TestRemoveLike:
    @pytest.mark.asyncio
    async def test_unlike_restores_score(self, like, unlike, store):
        await like.execute(like_command())

        assert await unlike.execute(unlike_command()) is True

        assert store.likes == {}
        assert store.score_of(SELLER_ID) == pytest.approx(36.5)

    @pytest.mark.asyncio
    async def test_unlike_without_like(self, unlike):
        with pytest.raises(NotLikedError):
            await unlike.execute(unlike_command())

    @pytest.mark.asyncio
    async def test_second_unlike_rejected(self, like, unlike):
        await like.execute(like_command())
        await unlike.execute(unlike_command())

        with pytest.raises(NotLikedError):
            await unlike.execute(unlike_command())

    @pytest.mark.asyncio
    async def test_relike_after_unlike(self, like, unlike, store):
        await like.execute(like_command())
        await unlike.execute(unlike_command())

        await like.execute(like_command())

        assert len(store.likes) == 1
        assert store.score_of(SELLER_ID) == pytest.approx(36.6)

    @pytest.mark.asyncio
    async def test_unlike_at_baseline_stays_at_baseline(self, like, unlike, store):
        """Score was never raised (e.g. failed reward): unlike must not go below 36.5."""
        await like.execute(like_command())
        store.users[SELLER_ID].reputation_score = 36.5

        await unlike.execute(unlike_command())

        assert store.score_of(SELLER_ID) == pytest.approx(36.5)

    @pytest.mark.asyncio
    async def test_reputation_failure_does_not_undo_unlike(
        self, store, like, identity_resolver, product_repository, like_repository, reputation_policy
    ):
        await like.execute(like_command())
        ledger = ReputationLedger(FailingUserRepository(store), reputation_policy)
        handler = RemoveLikeHandler(
            identity_resolver, product_repository, like_repository, ledger
        )

        assert await handler.execute(unlike_command()) is True
        assert store.likes == {}

    @pytest.mark.asyncio
    async def test_unknown_user(self, unlike):
        with pytest.raises(UserNotFoundError):
            await unlike.execute(unlike_command(user_id=999))

    @pytest.mark.asyncio
    async def test_unknown_product(self, unlike):
        with pytest.raises(ProductNotFoundError):
            await unlike.execute(unlike_command(product_id=999))


class TestLikeQueries:
    @pytest.fixture()
    def list_likes(self, identity_resolver, like_repository):
        return ListUserLikesHandler(identity_resolver, like_repository)

    @pytest.fixture()
    def is_liked(self, identity_resolver, product_repository, like_repository):
        return IsLikedHandler(identity_resolver, product_repository, like_repository)

    @pytest.mark.asyncio
    async def test_list_likes_newest_first(self, like, list_likes):
        first = await like.execute(like_command())
        second = await like.execute(like_command(product_id=OUTSIDER_PRODUCT_ID))

        likes = await list_likes.execute(ListUserLikesQuery(user_id=LIKER_ID))

        assert [l.id for l in likes] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_list_likes_unknown_user(self, list_likes):
        with pytest.raises(UserNotFoundError):
            await list_likes.execute(ListUserLikesQuery(user_id=999))

    @pytest.mark.asyncio
    async def test_is_liked_follows_state(self, like, unlike, is_liked):
        query = IsLikedQuery(user_id=LIKER_ID, product_id=ProductId(PRODUCT_ID))

        assert await is_liked.execute(query) is False
        await like.execute(like_command())
        assert await is_liked.execute(query) is True
        await unlike.execute(unlike_command())
        assert await is_liked.execute(query) is False

    @pytest.mark.asyncio
    async def test_is_liked_is_per_user(self, like, is_liked):
        await like.execute(like_command())

        assert await is_liked.execute(
            IsLikedQuery(user_id=BUYER_ID, product_id=ProductId(PRODUCT_ID))
        ) is False

    @pytest.mark.asyncio
    async def test_is_liked_unknown_user_or_product(self, is_liked):
        assert await is_liked.execute(
            IsLikedQuery(user_id=999, product_id=ProductId(PRODUCT_ID))
        ) is False
        assert await is_liked.execute(
            IsLikedQuery(user_id=LIKER_ID, product_id=ProductId(999))
        ) is False


class TestLikeScenario:
    @pytest.mark.asyncio
    async def test_like_twice_then_unlike(self, like, unlike, store):
        """Seller starts at 36.5: like → 36.6, repeat like fails, unlike → 36.5."""
        assert store.score_of(SELLER_ID) == pytest.approx(36.5)

        await like.execute(like_command(user_id=LIKER_ID, product_id=PRODUCT_ID))
        assert store.score_of(SELLER_ID) == pytest.approx(36.6)

        with pytest.raises(AlreadyLikedError):
            await like.execute(like_command(user_id=LIKER_ID, product_id=PRODUCT_ID))
        assert store.score_of(SELLER_ID) == pytest.approx(36.6)

        await unlike.execute(unlike_command(user_id=LIKER_ID, product_id=PRODUCT_ID))
        assert store.score_of(SELLER_ID) == pytest.approx(36.5)

    @pytest.mark.asyncio
    async def test_likes_on_other_sellers_products_do_not_leak(self, like, store):
        await like.execute(like_command(product_id=OUTSIDER_PRODUCT_ID))

        assert store.score_of(OUTSIDER_ID) == pytest.approx(36.6)
        assert store.score_of(SELLER_ID) == pytest.approx(36.5)
