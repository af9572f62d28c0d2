"""
Tests for the reputation policy, the ledger and their bounds.

Run with: pytest tests/test_reputation.py -v
"""

import asyncio

import pytest

from marketchat.application.commands.likes import (
    AddLikeCommand,
    AddLikeHandler,
    RemoveLikeCommand,
    RemoveLikeHandler,
)
from marketchat.application.services.reputation_ledger import ReputationLedger
from marketchat.domain.exceptions import DependencyFailureError
from marketchat.domain.services import ReputationPolicy
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.domain.value_objects.user_id import UserId
from tests.fakes import PRODUCT_ID, SELLER_ID, FailingUserRepository


class TestReputationPolicy:
    def test_defaults(self):
        policy = ReputationPolicy()

        assert (policy.baseline, policy.ceiling, policy.delta) == (36.5, 99.9, 0.1)

    def test_raised_and_lowered_step_by_delta(self):
        policy = ReputationPolicy()

        assert policy.raised(36.5) == pytest.approx(36.6)
        assert policy.lowered(36.6) == pytest.approx(36.5)

    def test_clamped_to_bounds(self):
        policy = ReputationPolicy()

        assert policy.raised(99.9) == pytest.approx(99.9)
        assert policy.lowered(36.5) == pytest.approx(36.5)
        assert policy.clamp(150.0) == pytest.approx(99.9)
        assert policy.clamp(0.0) == pytest.approx(36.5)

    def test_rounding_prevents_float_drift(self):
        policy = ReputationPolicy()
        score = 36.5
        for _ in range(30):
            score = policy.raised(score)

        assert score == 39.5

    @pytest.mark.parametrize(
        "kwargs",
        [{"delta": 0}, {"delta": -0.1}, {"baseline": 50.0, "ceiling": 40.0}],
    )
    def test_invalid_policy(self, kwargs):
        with pytest.raises(ValueError):
            ReputationPolicy(**kwargs)


class TestReputationLedger:
    @pytest.mark.asyncio
    async def test_reward_and_penalize(self, reputation_ledger, store):
        assert await reputation_ledger.reward(UserId(SELLER_ID)) == pytest.approx(36.6)
        assert await reputation_ledger.penalize(UserId(SELLER_ID)) == pytest.approx(36.5)
        assert store.score_of(SELLER_ID) == pytest.approx(36.5)

    @pytest.mark.asyncio
    async def test_thousand_rewards_stop_at_ceiling(self, reputation_ledger, store):
        for _ in range(1000):
            await reputation_ledger.reward(UserId(SELLER_ID))

        assert store.score_of(SELLER_ID) == pytest.approx(99.9)

    @pytest.mark.asyncio
    async def test_thousand_penalties_stop_at_baseline(self, reputation_ledger, store):
        store.users[SELLER_ID].reputation_score = 99.9

        for _ in range(1000):
            await reputation_ledger.penalize(UserId(SELLER_ID))

        assert store.score_of(SELLER_ID) == pytest.approx(36.5)

    @pytest.mark.asyncio
    async def test_concurrent_rewards_are_not_lost(self, reputation_ledger, store):
        await asyncio.gather(
            *(reputation_ledger.reward(UserId(SELLER_ID)) for _ in range(50))
        )

        assert store.score_of(SELLER_ID) == pytest.approx(41.5)

    @pytest.mark.asyncio
    async def test_policy_bounds_and_step_reach_storage(self, user_repository, store):
        ledger = ReputationLedger(user_repository, ReputationPolicy(ceiling=36.7, delta=0.2))

        assert await ledger.reward(UserId(SELLER_ID)) == pytest.approx(36.7)
        assert await ledger.reward(UserId(SELLER_ID)) == pytest.approx(36.7)
        assert await ledger.penalize(UserId(SELLER_ID)) == pytest.approx(36.5)
        assert store.score_of(SELLER_ID) == pytest.approx(36.5)

    @pytest.mark.asyncio
    async def test_missing_user_is_dependency_failure(self, reputation_ledger):
        with pytest.raises(DependencyFailureError):
            await reputation_ledger.reward(UserId(999))

    @pytest.mark.asyncio
    async def test_storage_error_is_dependency_failure(self, store, reputation_policy):
        ledger = ReputationLedger(FailingUserRepository(store), reputation_policy)

        with pytest.raises(DependencyFailureError) as exc_info:
            await ledger.penalize(UserId(SELLER_ID))

        assert isinstance(exc_info.value.__cause__, ConnectionError)


class TestReputationThroughLikes:
    @pytest.fixture()
    def likers(self, store):
        """A thousand distinct users, ids 100..1099."""
        ids = list(range(100, 1100))
        for user_id in ids:
            store.add_user(user_id, 50000 + user_id, f"fan {user_id}")
        return ids

    @pytest.mark.asyncio
    async def test_thousand_likes_and_unlikes_stay_in_bounds(
        self, store, likers, identity_resolver, product_repository, like_repository,
        reputation_ledger,
    ):
        like = AddLikeHandler(
            identity_resolver, product_repository, like_repository, reputation_ledger
        )
        unlike = RemoveLikeHandler(
            identity_resolver, product_repository, like_repository, reputation_ledger
        )

        for user_id in likers:
            await like.execute(AddLikeCommand(user_id, ProductId(PRODUCT_ID)))
        assert store.score_of(SELLER_ID) == pytest.approx(99.9)

        for user_id in likers:
            await unlike.execute(RemoveLikeCommand(user_id, ProductId(PRODUCT_ID)))
        assert store.score_of(SELLER_ID) == pytest.approx(36.5)
        assert store.likes == {}

    @pytest.mark.asyncio
    async def test_concurrent_likes_each_count_once(
        self, store, likers, identity_resolver, product_repository, like_repository,
        reputation_ledger,
    ):
        like = AddLikeHandler(
            identity_resolver, product_repository, like_repository, reputation_ledger
        )

        await asyncio.gather(
            *(like.execute(AddLikeCommand(user_id, ProductId(PRODUCT_ID))) for user_id in likers[:20])
        )

        assert len(store.likes) == 20
        assert store.score_of(SELLER_ID) == pytest.approx(38.5)
