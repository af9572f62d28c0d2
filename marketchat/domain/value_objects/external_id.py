"""
ExternalId Value Object - Identifier issued by the external identity provider
(OAuth subject id). Unique per user, never reassigned.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExternalId:
    value: int  # users.external_id

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"ExternalId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"ExternalId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
