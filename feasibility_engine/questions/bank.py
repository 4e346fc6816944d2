"""
Question bank loader and lookup helpers.

The default bank ships as ``config/questions/assessment_questions.json``:
30 questions, six per domain, each with a weight and a 0–100 scoring table.

Validation rules
----------------
- The file must contain a JSON array (or an object with a ``questions`` array).
- Every record must validate as a :class:`Question`.
- Duplicate question ids are rejected.

All records are validated before anything is returned; a single
``ValueError`` lists the first failures.

Usage
-----
    from feasibility_engine.questions.bank import load_question_bank

    questions = load_question_bank(Path("config/questions/assessment_questions.json"))
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from feasibility_engine.models.question import Question
from feasibility_engine.taxonomy.domain_taxonomy import ScoreDomain

log = logging.getLogger(__name__)

_MAX_REPORTED_ERRORS = 10


def parse_question_records(records: list[dict[str, Any]]) -> list[Question]:
    """Validate raw question dicts into :class:`Question` objects.

    Args:
        records: Raw records as decoded from JSON.

    Returns:
        Questions sorted by ``order`` (stable for equal orders).

    Raises:
        ValueError: If any record fails validation or an id is duplicated.
    """
    questions: list[Question] = []
    errors: list[str] = []
    seen_ids: set[str] = set()

    for i, rec in enumerate(records):
        try:
            question = Question(**rec)
        except (ValidationError, TypeError) as exc:
            qid = rec.get("id", "?") if isinstance(rec, dict) else "?"
            errors.append(f"Question #{i} ({qid}): {exc}")
            continue
        if question.id in seen_ids:
            errors.append(f"Question #{i}: duplicate id '{question.id}'.")
            continue
        seen_ids.add(question.id)
        questions.append(question)

    if errors:
        shown = "\n".join(errors[:_MAX_REPORTED_ERRORS])
        more = len(errors) - _MAX_REPORTED_ERRORS
        suffix = f"\n... and {more} more." if more > 0 else ""
        raise ValueError(
            f"{len(errors)} question(s) failed validation:\n{shown}{suffix}"
        )

    return sorted(questions, key=lambda q: q.order)


def load_question_bank(path: Path) -> list[Question]:
    """Load and validate a question bank JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Validated questions sorted by ``order``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is not valid JSON, has the wrong shape,
            or any record fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Question bank file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Question bank is not valid JSON ({path}): {exc}") from exc

    if isinstance(raw, dict):
        raw = raw.get("questions")
    if not isinstance(raw, list):
        raise ValueError(
            f"Question bank must be a JSON array or an object with a 'questions' array: {path}"
        )

    questions = parse_question_records(raw)
    log.info(
        "Loaded %d question(s) from %s", len(questions), path,
        extra={"question_count": len(questions), "source": str(path)},
    )
    return questions


# ── Lookup helpers ────────────────────────────────────────────────────────────


def questions_by_domain(
    questions: Iterable[Question], domain: ScoreDomain | str
) -> list[Question]:
    """Questions belonging to ``domain``, in input order."""
    return [q for q in questions if q.domain == domain]


def questions_by_section(questions: Iterable[Question], section: str) -> list[Question]:
    """Questions whose ``section`` equals ``section``, in input order."""
    return [q for q in questions if q.section == section]


def list_sections(questions: Iterable[Question]) -> list[str]:
    """Unique section names in first-seen order."""
    seen: set[str] = set()
    sections: list[str] = []
    for q in questions:
        if q.section not in seen:
            seen.add(q.section)
            sections.append(q.section)
    return sections


def question_by_id(questions: Iterable[Question], question_id: str) -> Optional[Question]:
    """The question with ``question_id``, or ``None``."""
    for q in questions:
        if q.id == question_id:
            return q
    return None
