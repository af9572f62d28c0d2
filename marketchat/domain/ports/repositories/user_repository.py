"""
User Repository Port - Interface for user lookups and reputation updates.
Implementation: marketchat/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from marketchat.domain.entities.user import User
from marketchat.domain.value_objects.external_id import ExternalId
from marketchat.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_by_external_id(self, external_id: ExternalId) -> Optional[User]: ...

    @abstractmethod
    async def adjust_reputation(
        self, user_id: UserId, delta: float, floor: float, ceiling: float
    ) -> Optional[float]:
        """
        Atomically add `delta` to the user's reputation score, clamp the result
        to [floor, ceiling] and round it to one decimal place.

        Must be a single storage-side update (atomic increment or row lock),
        never a read-then-write in application memory.

        Returns:
            The new score, or None if the user row does not exist.
        """
        ...
