"""
Product Entity - A listing owned by its seller.

Only the fields the chat and like flows depend on are modelled here; product
CRUD lives outside this service.
"""

from dataclasses import dataclass
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.domain.value_objects.user_id import UserId


@dataclass
class Product:
    id: ProductId
    seller_id: UserId
    category_id: int
    title: str
    price: int
    status: str = "ON_SALE"
