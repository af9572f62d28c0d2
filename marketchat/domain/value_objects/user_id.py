"""
UserId Value Object - Internal surrogate key of a user.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    value: int  # users.id

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"UserId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"UserId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
