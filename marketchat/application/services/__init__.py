"""Application services shared by several handlers."""

from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.application.services.reputation_ledger import ReputationLedger

__all__ = [
    "IdentityResolver",
    "ReputationLedger",
]
