"""
Prisma Like Repository Implementation.

Mapping:
- Prisma model fields: id, user_id, product_id, created_at
- Domain entity: Like with value objects (LikeId, UserId, ProductId)
"""

from typing import Optional, TYPE_CHECKING
from prisma.errors import UniqueViolationError
from marketchat.domain.entities.like import Like
from marketchat.domain.exceptions import AlreadyLikedError
from marketchat.domain.ports.repositories import LikeRepository
from marketchat.domain.value_objects.like_id import LikeId
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Like as PrismaLike


class PrismaLikeRepository(LikeRepository):
    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        self._prisma = prisma

    def _to_entity(self, record: "PrismaLike") -> Like:
        return Like(
            id=LikeId(record.id),
            user_id=UserId(record.user_id),
            product_id=ProductId(record.product_id),
            created_at=record.created_at,
        )

    def _pair(self, user_id: UserId, product_id: ProductId) -> dict:
        return {
            "user_id_product_id": {
                "user_id": user_id.value,
                "product_id": product_id.value,
            }
        }

    async def get(self, user_id: UserId, product_id: ProductId) -> Optional[Like]:
        record = await self._prisma.like.find_unique(where=self._pair(user_id, product_id))
        return self._to_entity(record) if record else None

    async def list_by_user(self, user_id: UserId) -> list[Like]:
        records = await self._prisma.like.find_many(
            where={"user_id": user_id.value},
            order=[{"created_at": "desc"}, {"id": "desc"}],
        )
        return [self._to_entity(record) for record in records]

    async def add(self, like: Like) -> Like:
        try:
            record = await self._prisma.like.create(
                data={
                    "user_id": like.user_id.value,
                    "product_id": like.product_id.value,
                    "created_at": like.created_at,
                }
            )
        except UniqueViolationError as e:
            raise AlreadyLikedError(like.user_id.value, like.product_id.value) from e
        return self._to_entity(record)

    async def delete(self, user_id: UserId, product_id: ProductId) -> bool:
        record = await self._prisma.like.delete(where=self._pair(user_id, product_id))
        return record is not None
