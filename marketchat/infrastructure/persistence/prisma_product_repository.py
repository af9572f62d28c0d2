"""Prisma Product Repository Implementation (read-only)."""

from typing import Optional, TYPE_CHECKING
from marketchat.domain.entities.product import Product
from marketchat.domain.ports.repositories import ProductRepository
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Product as PrismaProduct


class PrismaProductRepository(ProductRepository):
    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        self._prisma = prisma

    def _to_entity(self, record: "PrismaProduct") -> Product:
        return Product(
            id=ProductId(record.id),
            seller_id=UserId(record.seller_id),
            category_id=record.category_id,
            title=record.title,
            price=record.price,
            status=record.status,
        )

    async def get_by_id(self, product_id: ProductId) -> Optional[Product]:
        record = await self._prisma.product.find_unique(where={"id": product_id.value})
        return self._to_entity(record) if record else None
