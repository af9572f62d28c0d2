"""
ProductId Value Object
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductId:
    value: int  # products.id

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"ProductId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"ProductId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
