"""Like-related queries."""

from marketchat.application.queries.likes.list_user_likes import (
    ListUserLikesQuery,
    ListUserLikesHandler,
)
from marketchat.application.queries.likes.is_liked import IsLikedQuery, IsLikedHandler

__all__ = [
    "ListUserLikesQuery",
    "ListUserLikesHandler",
    "IsLikedQuery",
    "IsLikedHandler",
]
