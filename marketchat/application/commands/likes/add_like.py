"""
AddLike Command - NotLiked -> Liked for a (user, product) pair.

Handler:
1. Resolve the user (internal id, then external id)
2. Load the product
3. Fail with AlreadyLikedError if the pair already exists
4. Record the like (the unique index catches concurrent duplicates)
5. Reward the product's seller on the reputation ledger

Step 5 is best-effort: the like is the primary fact, reputation is derived.
A DependencyFailureError from the ledger is logged and counted, never raised.
"""

import logging
from dataclasses import dataclass

from marketchat.application.common.interfaces import Command, CommandHandler
from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.application.services.reputation_ledger import ReputationLedger
from marketchat.domain.entities.like import Like
from marketchat.domain.exceptions import (
    AlreadyLikedError,
    DependencyFailureError,
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
class AddLikeCommand(Command[Like]):
    user_id: int  # internal or external id
    product_id: ProductId


class AddLikeHandler(CommandHandler[Like]):
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

    async def execute(self, command: AddLikeCommand) -> Like:
        user = await self._identity.require(command.user_id, UserNotFoundError)
        product = await self._product_repository.get_by_id(command.product_id)
        if not product:
            raise ProductNotFoundError(command.product_id.value)

        if await self._like_repository.get(user.id, product.id):
            raise AlreadyLikedError(user.id.value, product.id.value)

        like = await self._like_repository.add(Like.create(user.id, product.id))
        increment_like_action(LikeAction.LIKE)
        logger.info(f"User {user.id.value} liked product {product.id.value}")

        try:
            await self._ledger.reward(product.seller_id)
        except DependencyFailureError as e:
            increment_reputation_failure(LikeAction.LIKE)
            logger.warning(
                f"Like {like.id.value} recorded but seller reputation not raised: {e}"
            )

        return like
