"""Like/unlike commands."""

from .add_like import AddLikeCommand, AddLikeHandler
from .remove_like import RemoveLikeCommand, RemoveLikeHandler

__all__ = [
    "AddLikeCommand",
    "AddLikeHandler",
    "RemoveLikeCommand",
    "RemoveLikeHandler",
]
