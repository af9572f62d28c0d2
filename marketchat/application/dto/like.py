"""Like DTOs for API request/response."""

from datetime import datetime

from marketchat.application.dto.base import CamelModel
from marketchat.domain.entities.like import Like


class LikeDTO(CamelModel):
    id: int
    user_id: int
    product_id: int
    created_at: datetime

    @classmethod
    def from_entity(cls, like: Like) -> "LikeDTO":
        return cls(
            id=like.id.value,
            user_id=like.user_id.value,
            product_id=like.product_id.value,
            created_at=like.created_at,
        )
