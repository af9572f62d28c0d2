"""
InvalidStateError - Raised when an operation is not legal in the current state.
Maps to: HTTP 409 Conflict
"""


class InvalidStateError(Exception):
    """Exception raised when the current state forbids the operation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotLikedError(InvalidStateError):
    def __init__(self, user_id: int, product_id: int):
        self.user_id = user_id
        self.product_id = product_id
        super().__init__(f"User {user_id} does not like product {product_id}.")
