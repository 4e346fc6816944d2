"""
Feasibility scoring engine: converts a question bank plus recorded answers
into per-domain scores, an overall rating, and prioritized guidance.

Modules
-------
response_scorer : score_response() — one question + answer → contribution.
domain          : calculate_domain_score() — per-domain aggregation.
rating          : classify_rating() — overall score → FeasibilityRating.
synthesizer     : generate_recommendations() + generate_remediation_tasks().
engine          : calculate_feasibility_score() — composes the above.

All functions are pure: no DB, no I/O, nothing raised for odd answer shapes.
"""

from feasibility_engine.scoring.domain import calculate_domain_score
from feasibility_engine.scoring.engine import calculate_feasibility_score
from feasibility_engine.scoring.rating import classify_rating
from feasibility_engine.scoring.response_scorer import score_response
from feasibility_engine.scoring.synthesizer import (
    generate_recommendations,
    generate_remediation_tasks,
)

__all__ = [
    "calculate_domain_score",
    "calculate_feasibility_score",
    "classify_rating",
    "generate_recommendations",
    "generate_remediation_tasks",
    "score_response",
]
