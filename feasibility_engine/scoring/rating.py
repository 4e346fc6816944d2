"""
Rating classifier: overall 0–100 score → ``FeasibilityRating``.

    score >= 80          → high
    60 <= score < 80     → moderate
    40 <= score < 60     → conditional
    score < 40           → not_ready
"""

from __future__ import annotations

from feasibility_engine.taxonomy.domain_taxonomy import RATING_BANDS, FeasibilityRating


def classify_rating(score: float) -> FeasibilityRating:
    """Map an overall score to its ordinal rating. Total over all numbers."""
    for lower_bound, rating in RATING_BANDS:
        if score >= lower_bound:
            return rating
    return FeasibilityRating.NOT_READY
