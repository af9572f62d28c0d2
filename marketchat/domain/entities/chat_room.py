"""
ChatRoom Entity - A negotiation channel between one buyer and one seller
about one product.

The (buyer_id, seller_id, product_id) triple is unique for the lifetime of
the system; storage enforces it with a unique index.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from marketchat.domain.value_objects.chat_room_id import ChatRoomId
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.domain.value_objects.user_id import UserId


@dataclass
class ChatRoom:
    id: Optional[ChatRoomId]
    buyer_id: UserId
    seller_id: UserId
    product_id: ProductId
    created_at: datetime

    @classmethod
    def open(cls, buyer_id: UserId, seller_id: UserId, product_id: ProductId) -> ChatRoom:
        """Build a not-yet-persisted room for the given triple."""
        return cls(
            id=None,
            buyer_id=buyer_id,
            seller_id=seller_id,
            product_id=product_id,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def triple(self) -> tuple[int, int, int]:
        return (self.buyer_id.value, self.seller_id.value, self.product_id.value)

    def has_participant(self, user_id: UserId) -> bool:
        return user_id == self.buyer_id or user_id == self.seller_id
