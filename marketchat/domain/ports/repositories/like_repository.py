"""
Like Repository Port - Interface for the (user, product) like relation.
Implementation: marketchat/infrastructure/persistence/prisma_like_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from marketchat.domain.entities.like import Like
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.domain.value_objects.user_id import UserId


class LikeRepository(ABC):
    @abstractmethod
    async def get(self, user_id: UserId, product_id: ProductId) -> Optional[Like]: ...

    @abstractmethod
    async def list_by_user(self, user_id: UserId) -> list[Like]:
        """Likes of the user, newest first."""
        ...

    @abstractmethod
    async def add(self, like: Like) -> Like:
        """
        Raises:
            AlreadyLikedError: If the (user, product) pair already exists.
        """
        ...

    @abstractmethod
    async def delete(self, user_id: UserId, product_id: ProductId) -> bool: ...
