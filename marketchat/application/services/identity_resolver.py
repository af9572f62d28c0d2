"""
Identity Resolver - turns a caller-supplied numeric user id into a User.

Callers hand us ids of ambiguous provenance: sometimes the internal surrogate
key, sometimes the external identity provider's id. Every entry point that
accepts a user id goes through here so the lookup policy stays identical:

1. look up by internal id
2. fall back to external provider id
3. give up (None / role-specific NotFound)
"""

import logging
from typing import Optional

from marketchat.domain.entities.user import User
from marketchat.domain.exceptions.entity_not_found import UserNotFoundError
from marketchat.domain.ports.repositories.user_repository import UserRepository
from marketchat.domain.value_objects.external_id import ExternalId
from marketchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class IdentityResolver:
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def resolve(self, raw_id: int) -> Optional[User]:
        """Pure read; returns None if neither key space knows the id."""
        if isinstance(raw_id, bool) or not isinstance(raw_id, int) or raw_id <= 0:
            return None

        user = await self._user_repository.get_by_id(UserId(raw_id))
        if user is not None:
            return user

        user = await self._user_repository.get_by_external_id(ExternalId(raw_id))
        if user is not None:
            logger.debug(f"Resolved {raw_id} via external id -> user {user.id.value}")
        return user

    async def require(
        self, raw_id: int, error_cls: type[UserNotFoundError] = UserNotFoundError
    ) -> User:
        """Resolve or raise `error_cls` (BuyerNotFoundError, SenderNotFoundError, ...)."""
        user = await self.resolve(raw_id)
        if user is None:
            raise error_cls(raw_id)
        return user
