"""
Assessment response models.

Stored answers arrive as untyped values: a single string, a list of strings,
or a number. Rather than inspect those shapes at scoring time, they are
converted once, at the boundary, into an explicit tagged variant:

  ``SingleChoice``  one selected option.
  ``MultiChoice``   zero or more selected options.
  ``Numeric``       a number, expected on a 0–100 scale.
  ``Text``          free text or any unrecognised shape; informational only.

``parse_answer()`` performs that conversion and never raises — a value it
does not recognise becomes ``Text`` and therefore scores zero. This keeps
the engine callable mid-questionnaire with partial or messy data.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SingleChoice(BaseModel):
    """A single selected option."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["single_choice"] = "single_choice"
    value: str


class MultiChoice(BaseModel):
    """A (possibly empty) set of selected options, in selection order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["multi_choice"] = "multi_choice"
    values: tuple[str, ...] = ()


class Numeric(BaseModel):
    """A finite numeric answer. Out-of-range values are kept as given; the scorer clamps."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["numeric"] = "numeric"
    value: float = Field(allow_inf_nan=False)


class Text(BaseModel):
    """Free-text or unrecognised answer. Never contributes to a score."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    value: str = ""


Answer = Annotated[
    Union[SingleChoice, MultiChoice, Numeric, Text],
    Field(discriminator="kind"),
]


def parse_answer(raw: Any) -> SingleChoice | MultiChoice | Numeric | Text:
    """Convert a raw stored answer value into a tagged ``Answer`` variant.

    Rules (first match wins):
      - ``str``                          → ``SingleChoice``
      - list/tuple of only ``str``       → ``MultiChoice``
      - finite ``int``/``float``         → ``Numeric``  (``bool`` excluded)
      - anything else                    → ``Text``

    Args:
        raw: Value as stored by the collection layer.

    Returns:
        One of the four answer variants. Never raises.
    """
    if isinstance(raw, str):
        return SingleChoice(value=raw)
    if isinstance(raw, (list, tuple)) and all(isinstance(v, str) for v in raw):
        return MultiChoice(values=tuple(raw))
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        try:
            number = float(raw)
        except OverflowError:
            number = math.nan
        if math.isfinite(number):
            return Numeric(value=number)
    return Text(value="" if raw is None else str(raw))


class Response(BaseModel):
    """One recorded answer to one question.

    Attributes:
        question_id: ``Question.id`` this answer belongs to.
        answer: Tagged answer variant.
        responded_by: Optional respondent identifier (not used for scoring).
    """

    model_config = ConfigDict(frozen=True)

    question_id: str
    answer: Answer
    responded_by: str | None = None

    @classmethod
    def from_value(
        cls,
        question_id: str,
        value: Any,
        responded_by: str | None = None,
    ) -> Response:
        """Build a ``Response`` from an untyped stored value."""
        return cls(
            question_id=question_id,
            answer=parse_answer(value),
            responded_by=responded_by,
        )
