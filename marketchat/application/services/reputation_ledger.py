"""
Reputation Ledger - applies like/unlike driven changes to a seller's score.

The score is shared by every like/unlike on any of the seller's products, so
each change is delegated to UserRepository.adjust_reputation, which performs
the clamp-and-write as one storage-side statement.

Every failure (missing seller row, storage error) is reported as
DependencyFailureError so callers can treat reputation as best-effort.
"""

import logging

from marketchat.domain.exceptions.dependency_failure import DependencyFailureError
from marketchat.domain.ports.repositories.user_repository import UserRepository
from marketchat.domain.services.reputation_policy import ReputationPolicy
from marketchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class ReputationLedger:
    def __init__(self, user_repository: UserRepository, policy: ReputationPolicy):
        self._user_repository = user_repository
        self._policy = policy

    async def reward(self, seller_id: UserId) -> float:
        """Raise the seller's score by one step, capped at the ceiling."""
        return await self._adjust(seller_id, self._policy.delta)

    async def penalize(self, seller_id: UserId) -> float:
        """Lower the seller's score by one step, floored at the baseline."""
        return await self._adjust(seller_id, -self._policy.delta)

    async def _adjust(self, seller_id: UserId, delta: float) -> float:
        try:
            score = await self._user_repository.adjust_reputation(
                seller_id,
                delta,
                floor=self._policy.baseline,
                ceiling=self._policy.ceiling,
            )
        except Exception as e:
            raise DependencyFailureError(
                f"Reputation update failed for seller {seller_id.value}: {e}"
            ) from e

        if score is None:
            raise DependencyFailureError(
                f"Seller {seller_id.value} not found for reputation update"
            )

        logger.info(f"Seller {seller_id.value} reputation {delta:+.1f} -> {score}")
        return score
