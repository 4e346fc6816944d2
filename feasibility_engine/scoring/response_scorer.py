"""
Response scorer: one question + zero-or-one answer → bounded contribution.

Contract
--------
``score_response(question, response)`` returns a value in
``[0, question.weight]`` and never raises.

Scoring rules, by answer variant
--------------------------------
    (no response)   → 0
    SingleChoice    → scoring[value] / 100 * weight; 0 if no table or the
                      option is not in the table.
    MultiChoice     → mean of scoring[v] over all selected values, with
                      unmapped values counted as 0 (they still count toward
                      the divisor); empty selection → 0; no table → 0.
    Numeric         → clamp(value, 0, 100) / 100 * weight; non-finite → 0.
    Text            → 0 (informational answers never affect the score).
"""

from __future__ import annotations

import math
from typing import Optional

from feasibility_engine.models.question import Question
from feasibility_engine.models.response import (
    MultiChoice,
    Numeric,
    Response,
    SingleChoice,
)
from feasibility_engine.utils.math_utils import clamp


def score_response(question: Question, response: Optional[Response]) -> float:
    """Return the weighted contribution of ``response`` to its domain score.

    Args:
        question: Question being scored.
        response: The recorded answer, or ``None`` if unanswered.

    Returns:
        Contribution in ``[0, question.weight]``.
    """
    if response is None:
        return 0.0

    answer = response.answer
    scoring = question.scoring
    weight = question.weight

    if isinstance(answer, SingleChoice):
        if not scoring:
            return 0.0
        raw = scoring.get(answer.value)
        if raw is None:
            return 0.0
        return raw / 100.0 * weight

    if isinstance(answer, MultiChoice):
        if not scoring or not answer.values:
            return 0.0
        total = sum(scoring.get(v, 0.0) for v in answer.values)
        return total / len(answer.values) / 100.0 * weight

    if isinstance(answer, Numeric):
        if not math.isfinite(answer.value):
            return 0.0
        return clamp(answer.value, 0.0, 100.0) / 100.0 * weight

    # Text
    return 0.0
