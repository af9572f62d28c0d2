"""
RemoveLike Command - Liked -> NotLiked for a (user, product) pair.

Mirror of AddLike: NotLikedError if there is nothing to remove; on success the
seller's reputation is lowered one step (floored at the baseline) on a
best-effort basis.
"""

import logging
from dataclasses import dataclass

from marketchat.application.common.interfaces import Command, CommandHandler
from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.application.services.reputation_ledger import ReputationLedger
from marketchat.domain.exceptions import (
    DependencyFailureError,
    NotLikedError,
    ProductNotFoundError,
    UserNotFoundError,
)
from marketchat.domain.ports.repositories import LikeRepository, ProductRepository
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.observability.metrics import (
    LikeAction,
    increment_like_action,
    increment_reputation_failure,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoveLikeCommand(Command[bool]):
    user_id: int  # internal or external id
    product_id: ProductId


class RemoveLikeHandler(CommandHandler[bool]):
    def __init__(
        self,
        identity_resolver: IdentityResolver,
        product_repository: ProductRepository,
        like_repository: LikeRepository,
        reputation_ledger: ReputationLedger,
    ):
        self._identity = identity_resolver
        self._product_repository = product_repository
        self._like_repository = like_repository
        self._ledger = reputation_ledger

    async def execute(self, command: RemoveLikeCommand) -> bool:
        user = await self._identity.require(command.user_id, UserNotFoundError)
        product = await self._product_repository.get_by_id(command.product_id)
        if not product:
            raise ProductNotFoundError(command.product_id.value)

        # delete() is the existence check: of two concurrent unlikes only one sees True
        if not await self._like_repository.delete(user.id, product.id):
            raise NotLikedError(user.id.value, product.id.value)

        increment_like_action(LikeAction.UNLIKE)
        logger.info(f"User {user.id.value} unliked product {product.id.value}")

        try:
            await self._ledger.penalize(product.seller_id)
        except DependencyFailureError as e:
            increment_reputation_failure(LikeAction.UNLIKE)
            logger.warning(
                f"Unlike of product {product.id.value} by user {user.id.value} "
                f"recorded but seller reputation not lowered: {e}"
            )

        return True
