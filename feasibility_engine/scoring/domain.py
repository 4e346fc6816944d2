"""
Domain aggregator: all questions of one domain → one ``DomainScore``.

For every question in the domain the response scorer's contribution is added
to a running score and the question's weight to a running maximum. The
percentage and pass/fail verdict follow; guidance text is selected from the
static tables by percentage bucket.

A domain with no questions yields the zero-value score (0 / 0 / 0% / failed)
instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from feasibility_engine.models.question import Question
from feasibility_engine.models.response import Response
from feasibility_engine.models.score import DomainScore
from feasibility_engine.scoring.response_scorer import score_response
from feasibility_engine.taxonomy.domain_taxonomy import PASS_THRESHOLDS, ScoreDomain
from feasibility_engine.taxonomy.guidance import (
    recommendations_for,
    remediation_tasks_for,
)
from feasibility_engine.utils.math_utils import round_half_up


def build_response_map(responses: Iterable[Response]) -> dict[str, Response]:
    """Index responses by ``question_id``; the last occurrence wins."""
    return {r.question_id: r for r in responses}


def calculate_domain_score(
    domain: ScoreDomain,
    responses: Iterable[Response] | Mapping[str, Response],
    questions: Iterable[Question],
) -> DomainScore:
    """Score one domain.

    Args:
        domain: Domain to score.
        responses: All recorded responses, or a prebuilt
            ``question_id → Response`` map.
        questions: The full question bank; questions from other domains
            are ignored.

    Returns:
        ``DomainScore`` for ``domain``.
    """
    domain_questions = [q for q in questions if q.domain == domain]
    if not domain_questions:
        return DomainScore.empty(domain)

    if isinstance(responses, Mapping):
        response_map = responses
    else:
        response_map = build_response_map(responses)

    total_score = 0.0
    max_score = 0.0
    for question in domain_questions:
        total_score += score_response(question, response_map.get(question.id))
        max_score += question.weight

    percentage = round_half_up(total_score / max_score * 100) if max_score > 0 else 0
    threshold = PASS_THRESHOLDS[domain]

    return DomainScore(
        domain=domain,
        score=round(total_score, 2),
        max_score=max_score,
        percentage=percentage,
        pass_threshold=threshold,
        passed=percentage >= threshold,
        recommendations=recommendations_for(domain, percentage),
        remediation_tasks=remediation_tasks_for(domain, percentage),
    )
