"""
ConflictError - Raised when a write would violate a uniqueness constraint.
Maps to: HTTP 409 Conflict
"""


class ConflictError(Exception):
    """Exception raised on uniqueness violations."""

    def __init__(self, message: str = "The entity already exists."):
        super().__init__(message)


class DuplicateChatRoomError(ConflictError):
    """A room for the (buyer, seller, product) triple already exists.

    Raised by the persistence layer when the unique index rejects an insert.
    The room registry recovers from it by re-reading the existing row.
    """

    def __init__(self, buyer_id: int, seller_id: int, product_id: int):
        self.buyer_id = buyer_id
        self.seller_id = seller_id
        self.product_id = product_id
        super().__init__(
            f"Chat room for buyer={buyer_id}, seller={seller_id}, "
            f"product={product_id} already exists."
        )


class AlreadyLikedError(ConflictError):
    def __init__(self, user_id: int, product_id: int):
        self.user_id = user_id
        self.product_id = product_id
        super().__init__(f"User {user_id} already likes product {product_id}.")
