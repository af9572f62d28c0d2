"""
Product Repository Port - Read-only view of products needed by chat and likes.
Implementation: marketchat/infrastructure/persistence/prisma_product_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from marketchat.domain.entities.product import Product
from marketchat.domain.value_objects.product_id import ProductId


class ProductRepository(ABC):
    @abstractmethod
    async def get_by_id(self, product_id: ProductId) -> Optional[Product]: ...
