"""
IsLiked Query - Does the user currently like the product?

A predicate, not a command: an unknown user or product simply answers False.
"""

from dataclasses import dataclass
from marketchat.application.common.interfaces import Query, QueryHandler
from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.domain.ports.repositories import LikeRepository, ProductRepository
from marketchat.domain.value_objects.product_id import ProductId


@dataclass(frozen=True)
class IsLikedQuery(Query[bool]):
    user_id: int  # internal or external id
    product_id: ProductId


class IsLikedHandler(QueryHandler[bool]):
    def __init__(
        self,
        identity_resolver: IdentityResolver,
        product_repository: ProductRepository,
        like_repository: LikeRepository,
    ):
        self._identity = identity_resolver
        self._product_repository = product_repository
        self._like_repository = like_repository

    async def execute(self, query: IsLikedQuery) -> bool:
        user = await self._identity.resolve(query.user_id)
        if user is None:
            return False
        product = await self._product_repository.get_by_id(query.product_id)
        if product is None:
            return False
        return await self._like_repository.get(user.id, product.id) is not None
