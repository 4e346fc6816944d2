"""
Shared pytest fixtures for the feasibility engine test suite.

Provides:
  - ``make_question``: factory for ``Question`` objects with sane defaults.
  - ``yes_no_questions``: one weight-10 yes/no question per domain.
  - ``default_questions``: the shipped 30-question bank.
  - ``best_responses`` / ``worst_responses``: answers at each question's
    highest / lowest scoring option for the shipped bank.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from feasibility_engine.models.question import Question
from feasibility_engine.models.response import Response
from feasibility_engine.questions.bank import load_question_bank
from feasibility_engine.taxonomy.domain_taxonomy import (
    DOMAIN_ORDER,
    QuestionType,
    ScoreDomain,
)

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_BANK_PATH = PROJECT_ROOT / "config" / "questions" / "assessment_questions.json"


# ── Question factories ────────────────────────────────────────────────────────

@pytest.fixture
def make_question() -> Callable[..., Question]:
    """Return a factory building a ``Question`` with overridable fields."""

    def _make(
        qid: str = "q-1",
        domain: ScoreDomain = ScoreDomain.INFRASTRUCTURE,
        weight: float = 10,
        scoring: dict[str, float] | None = None,
        qtype: QuestionType = QuestionType.SINGLE_SELECT,
        section: str = "Test Section",
        order: int = 0,
    ) -> Question:
        return Question(
            id=qid,
            section=section,
            domain=domain,
            text=f"Question {qid}?",
            type=qtype,
            options=list(scoring) if scoring else None,
            weight=weight,
            scoring=scoring,
            order=order,
        )

    return _make


@pytest.fixture
def yes_no_questions(make_question) -> list[Question]:
    """One weight-10 ``{yes: 100, no: 0}`` question per domain."""
    return [
        make_question(
            qid=f"{domain.value}-1",
            domain=domain,
            scoring={"yes": 100, "no": 0},
            order=i,
        )
        for i, domain in enumerate(DOMAIN_ORDER)
    ]


# ── Shipped question bank ─────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def default_questions() -> list[Question]:
    """The committed default question bank."""
    return load_question_bank(DEFAULT_BANK_PATH)


def _answer_at(question: Question, pick: Callable) -> Response:
    target = pick(question.scoring.values())
    option = next(opt for opt, raw in question.scoring.items() if raw == target)
    if question.type == QuestionType.MULTI_SELECT:
        return Response.from_value(question.id, [option])
    return Response.from_value(question.id, option)


@pytest.fixture
def best_responses(default_questions) -> list[Response]:
    """Every question answered at its highest-scoring option."""
    return [_answer_at(q, max) for q in default_questions]


@pytest.fixture
def worst_responses(default_questions) -> list[Response]:
    """Every question answered at its lowest-scoring option."""
    return [_answer_at(q, min) for q in default_questions]
