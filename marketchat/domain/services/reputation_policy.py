"""
Reputation Policy - bounds and step size of the seller reputation score
("temperature").

A like on a product raises its seller's score by `delta`, an unlike lowers it
by the same amount. The score never leaves [baseline, ceiling] and is kept at
one decimal place so repeated steps do not accumulate float error.
"""

from dataclasses import dataclass

from marketchat.domain.entities.user import DEFAULT_REPUTATION_SCORE


@dataclass(frozen=True)
class ReputationPolicy:
    baseline: float = DEFAULT_REPUTATION_SCORE
    ceiling: float = 99.9
    delta: float = 0.1

    def __post_init__(self):
        if self.delta <= 0:
            raise ValueError(f"Reputation delta must be positive: {self.delta}")
        if self.baseline > self.ceiling:
            raise ValueError(
                f"Reputation baseline {self.baseline} exceeds ceiling {self.ceiling}"
            )

    def clamp(self, score: float) -> float:
        return round(min(max(score, self.baseline), self.ceiling), 1)

    def raised(self, score: float) -> float:
        return self.clamp(score + self.delta)

    def lowered(self, score: float) -> float:
        return self.clamp(score - self.delta)
