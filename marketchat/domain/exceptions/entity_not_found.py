"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)


class UserNotFoundError(EntityNotFoundError):
    """A caller-supplied user id matched neither an internal nor an external id."""

    role = "user"

    def __init__(self, raw_id: int):
        self.raw_id = raw_id
        super().__init__(f"{self.role.capitalize()} {raw_id} not found.")


class BuyerNotFoundError(UserNotFoundError):
    role = "buyer"


class SellerNotFoundError(UserNotFoundError):
    role = "seller"


class SenderNotFoundError(UserNotFoundError):
    role = "sender"


class ReaderNotFoundError(UserNotFoundError):
    role = "reader"


class ProductNotFoundError(EntityNotFoundError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found.")


class ChatRoomNotFoundError(EntityNotFoundError):
    def __init__(self, room_id: int):
        self.room_id = room_id
        super().__init__(f"Chat room {room_id} not found.")
