"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain/application logic and caught by the
presentation layer, which maps each family to an HTTP status code:

- EntityNotFoundError    -> 404 (room, user, product absent)
- ConflictError          -> 409 (uniqueness violation)
- InvalidStateError      -> 409 (operation not legal in current state)
- DomainValidationError  -> 400 (bad input, non-participant sender)
- DependencyFailureError -> never surfaced; recovered by the caller
"""

from marketchat.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    UserNotFoundError,
    BuyerNotFoundError,
    SellerNotFoundError,
    SenderNotFoundError,
    ReaderNotFoundError,
    ProductNotFoundError,
    ChatRoomNotFoundError,
)
from marketchat.domain.exceptions.conflict import (
    ConflictError,
    DuplicateChatRoomError,
    AlreadyLikedError,
)
from marketchat.domain.exceptions.invalid_state import InvalidStateError, NotLikedError
from marketchat.domain.exceptions.validation_error import (
    DomainValidationError,
    EmptyContentError,
    SenderNotParticipantError,
)
from marketchat.domain.exceptions.dependency_failure import DependencyFailureError

__all__ = [
    "EntityNotFoundError",
    "UserNotFoundError",
    "BuyerNotFoundError",
    "SellerNotFoundError",
    "SenderNotFoundError",
    "ReaderNotFoundError",
    "ProductNotFoundError",
    "ChatRoomNotFoundError",
    "ConflictError",
    "DuplicateChatRoomError",
    "AlreadyLikedError",
    "InvalidStateError",
    "NotLikedError",
    "DomainValidationError",
    "EmptyContentError",
    "SenderNotParticipantError",
    "DependencyFailureError",
]
