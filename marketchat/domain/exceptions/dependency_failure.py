"""
DependencyFailureError - A best-effort side mutation did not apply.

Never mapped to HTTP: the primary operation that triggered the side effect
still succeeds and the failure is logged where it is caught.
"""


class DependencyFailureError(Exception):
    """Exception raised when a derived-state update could not be applied."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
