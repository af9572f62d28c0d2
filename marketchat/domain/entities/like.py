"""
Like Entity - A user's bookmark of a product. At most one per (user, product).
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from marketchat.domain.value_objects.like_id import LikeId
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.domain.value_objects.user_id import UserId


@dataclass
class Like:
    id: Optional[LikeId]
    user_id: UserId
    product_id: ProductId
    created_at: datetime

    @classmethod
    def create(cls, user_id: UserId, product_id: ProductId) -> Like:
        return cls(
            id=None,
            user_id=user_id,
            product_id=product_id,
            created_at=datetime.now(timezone.utc),
        )
