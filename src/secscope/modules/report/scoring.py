"""Risk scoring for individual vulnerabilities."""

from __future__ import annotations

import math
from dataclasses import dataclass

BASE_SCORES = {
    "critical": 9.0,
    "high": 7.0,
    "medium": 5.0,
    "low": 3.0,
}
UNKNOWN_BASE_SCORE = 1.0
EXPLOIT_BONUS = 1.0
MAX_SCORE = 10.0

# (lower bound, label), checked in order
RATING_BANDS: tuple[tuple[float, str], ...] = (
    (9.0, "Critical"),
    (7.0, "High"),
    (4.0, "Medium"),
)


@dataclass(frozen=True, slots=True)
class RiskRating:
    """Numeric score in [0, 10] plus its qualitative band."""

    score: float
    rating: str

    def to_dict(self) -> dict[str, float | str]:
        return {"score": self.score, "rating": self.rating}


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` places; halves always round up (2.25 -> 2.3)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def rating_for(score: float) -> str:
    for lower, label in RATING_BANDS:
        if score >= lower:
            return label
    return "Low"


def calculate_risk_rating(
    severity: str, exploit_available: bool, confidence: float
) -> RiskRating:
    """Score a vulnerability; unknown severities fall back to the lowest base."""
    base = BASE_SCORES.get(severity, UNKNOWN_BASE_SCORE)
    if exploit_available:
        base += EXPLOIT_BONUS

    final = min(MAX_SCORE, base * (confidence / 100))
    # The band is taken from the unrounded score.
    return RiskRating(score=round_half_up(final, 1), rating=rating_for(final))
