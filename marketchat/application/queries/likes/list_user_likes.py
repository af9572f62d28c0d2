"""List User Likes Query."""

from dataclasses import dataclass
from marketchat.application.common.interfaces import Query, QueryHandler
from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.domain.entities.like import Like
from marketchat.domain.exceptions import UserNotFoundError
from marketchat.domain.ports.repositories import LikeRepository


@dataclass(frozen=True)
class ListUserLikesQuery(Query[list[Like]]):
    user_id: int  # internal or external id


class ListUserLikesHandler(QueryHandler[list[Like]]):
    def __init__(
        self, identity_resolver: IdentityResolver, like_repository: LikeRepository
    ):
        self._identity = identity_resolver
        self._like_repository = like_repository

    async def execute(self, query: ListUserLikesQuery) -> list[Like]:
        user = await self._identity.require(query.user_id, UserNotFoundError)
        return await self._like_repository.list_by_user(user.id)
