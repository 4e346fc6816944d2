"""
Assessment question model.

A ``Question`` is static configuration: loaded once from the question bank
and never mutated. Its ``weight`` is the question's share of its domain's
maximum score; its optional ``scoring`` table maps an answer option to a raw
score on a 0–100 scale.

Questions without a ``scoring`` table are either numeric (scored by clamping
the answer to 0–100) or informational (never affect the score).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from feasibility_engine.taxonomy.domain_taxonomy import QuestionType, ScoreDomain


class Question(BaseModel):
    """One question from the assessment question bank.

    Attributes:
        id: Stable identifier, e.g. ``"infra-001"``. Responses reference it.
        section: Display section heading, e.g. ``"Infrastructure Readiness"``.
        domain: ``ScoreDomain`` this question contributes to.
        text: The question prompt shown to respondents.
        type: Expected answer shape (``QuestionType``).
        options: Selectable options for select-type questions, else ``None``.
        weight: Positive share of the domain's maximum score.
        scoring: Option → raw score (0–100), or ``None``.
        help_text: Optional guidance shown beside the question.
        required: Whether the collection layer should insist on an answer.
            The scoring engine itself ignores this flag.
        order: Display order within the questionnaire.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    section: str = ""
    domain: ScoreDomain
    text: str = ""
    type: QuestionType = QuestionType.SINGLE_SELECT
    options: Optional[list[str]] = None
    weight: float
    scoring: Optional[dict[str, float]] = None
    help_text: Optional[str] = None
    required: bool = True
    order: int = 0

    @field_validator("weight")
    @classmethod
    def validate_weight_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"weight must be > 0, got {v}.")
        return v

    @field_validator("scoring")
    @classmethod
    def validate_scoring_range(
        cls, v: Optional[dict[str, float]]
    ) -> Optional[dict[str, float]]:
        if v is None:
            return v
        for option, raw in v.items():
            if not 0.0 <= raw <= 100.0:
                raise ValueError(
                    f"scoring value for option '{option}' must be in [0, 100], got {raw}."
                )
        return v

    @property
    def max_option_score(self) -> Optional[float]:
        """Highest raw score available in the scoring table, if any."""
        if not self.scoring:
            return None
        return max(self.scoring.values())
