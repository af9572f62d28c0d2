"""
DOMAIN SERVICES - Pure domain logic (no I/O).
"""

from marketchat.domain.services.reputation_policy import ReputationPolicy

__all__ = ["ReputationPolicy"]
