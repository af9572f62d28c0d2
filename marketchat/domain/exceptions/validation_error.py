"""
DomainValidationError - Raised when a business rule is violated by the input.
Maps to: HTTP 400 Bad Request
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyContentError(DomainValidationError):
    def __init__(self):
        super().__init__("Message content cannot be empty.")


class SenderNotParticipantError(DomainValidationError):
    """Only the buyer or the seller of a room may post into it."""

    def __init__(self, room_id: int, sender_id: int):
        self.room_id = room_id
        self.sender_id = sender_id
        super().__init__(
            f"User {sender_id} is not a participant of chat room {room_id}."
        )
