"""
Feasibility score composer.

Orchestrates the scoring pipeline over the fixed domain set::

    questions + responses
        → calculate_domain_score()  (once per domain, in DOMAIN_ORDER)
        → overall = round(Σ percentage_d × DOMAIN_WEIGHTS[d])
        → classify_rating(overall)
        → generate_recommendations() / generate_remediation_tasks()
        → FeasibilityScore

Pure and deterministic: no I/O, no shared mutable state. Recomputing the
same inputs yields an equal ``FeasibilityScore``, so callers may recompute
freely (e.g. on every debounced keystroke in the questionnaire UI).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from feasibility_engine.models.question import Question
from feasibility_engine.models.response import Response
from feasibility_engine.models.score import DomainScore, FeasibilityScore
from feasibility_engine.scoring.domain import build_response_map, calculate_domain_score
from feasibility_engine.scoring.rating import classify_rating
from feasibility_engine.scoring.synthesizer import (
    generate_recommendations,
    generate_remediation_tasks,
)
from feasibility_engine.taxonomy.domain_taxonomy import DOMAIN_ORDER, DOMAIN_WEIGHTS
from feasibility_engine.utils.math_utils import round_half_up

log = logging.getLogger(__name__)


def compute_overall_score(domain_scores: Iterable[DomainScore]) -> int:
    """Weight-scaled sum of domain percentages, rounded half up."""
    weighted = sum(ds.percentage * DOMAIN_WEIGHTS[ds.domain] for ds in domain_scores)
    return round_half_up(weighted)


def calculate_feasibility_score(
    responses: Iterable[Response],
    questions: Iterable[Question],
) -> FeasibilityScore:
    """Compute the full feasibility score.

    Args:
        responses: Recorded answers. Treated as a lookup by ``question_id``
            (last occurrence wins); order is otherwise irrelevant.
        questions: Question bank. Order is irrelevant.

    Returns:
        ``FeasibilityScore`` with domain scores in ``DOMAIN_ORDER``.
    """
    question_list = list(questions)
    response_map = build_response_map(responses)

    domain_scores = [
        calculate_domain_score(domain, response_map, question_list)
        for domain in DOMAIN_ORDER
    ]
    for ds in domain_scores:
        log.debug(
            "Domain %s: %.2f/%.2f (%d%%, threshold %d) %s",
            ds.domain, ds.score, ds.max_score, ds.percentage,
            ds.pass_threshold, "passed" if ds.passed else "failed",
            extra={
                "domain": ds.domain.value,
                "percentage": ds.percentage,
                "passed": ds.passed,
            },
        )

    overall = compute_overall_score(domain_scores)
    rating = classify_rating(overall)

    log.info(
        "Feasibility score: %d (%s) from %d response(s) over %d question(s).",
        overall, rating, len(response_map), len(question_list),
        extra={
            "overall_score": overall,
            "rating": rating.value,
            "response_count": len(response_map),
            "question_count": len(question_list),
        },
    )

    return FeasibilityScore(
        domain_scores=domain_scores,
        overall_score=overall,
        rating=rating,
        recommendations=generate_recommendations(domain_scores),
        remediation_tasks=generate_remediation_tasks(domain_scores),
    )
