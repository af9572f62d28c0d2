"""
User Entity - A marketplace member (buyer and/or seller).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from marketchat.domain.value_objects.external_id import ExternalId
from marketchat.domain.value_objects.user_id import UserId

DEFAULT_REPUTATION_SCORE = 36.5


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    external_id: ExternalId
    display_name: str
    # Optional fields (with defaults) - must come last
    reputation_score: float = DEFAULT_REPUTATION_SCORE
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.display_name:
            raise ValueError("User display name cannot be empty")
