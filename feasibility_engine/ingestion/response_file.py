"""
Response file readers (JSON and CSV).

JSON format — an array of objects, or ``{"responses": [...]}``::

    [
      {"question_id": "infra-001", "value": "AWS"},
      {"question_id": "gov-002",   "value": ["SOC 2", "ISO 27001"]},
      {"question_id": "eng-003",   "value": 72}
    ]

CSV format — header row with columns:
  question_id  (required)
  value        (required)
  kind         (optional) one of single_choice, multi_choice, numeric, text;
               defaults to single_choice.
  responded_by (optional)

Multi-choice CSV values are ``|``-separated: ``SOC 2|ISO 27001``.
A ``numeric`` value that does not parse as a finite number is kept as text.

Values are converted with :func:`parse_answer`, so an unexpected value
shape loads as ``Text`` (scored 0) rather than failing. Only structural
problems (bad JSON, missing ``question_id``) raise.
"""

from __future__ import annotations

import csv
import json
import logging
import math
from pathlib import Path
from typing import Any

from feasibility_engine.models.response import (
    MultiChoice,
    Numeric,
    Response,
    SingleChoice,
    Text,
)

logger = logging.getLogger(__name__)

REQUIRED_CSV_COLUMNS = frozenset({"question_id", "value"})
MULTI_VALUE_SEPARATOR = "|"


def parse_response_records(records: list[Any]) -> list[Response]:
    """Convert raw ``{"question_id", "value"}`` dicts into responses.

    Raises:
        ValueError: If an entry is not an object or lacks ``question_id``.
    """
    responses: list[Response] = []
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise ValueError(f"Response #{i} must be an object, got {type(rec).__name__}.")
        question_id = rec.get("question_id")
        if not question_id or not isinstance(question_id, str):
            raise ValueError(f"Response #{i} is missing 'question_id'.")
        responses.append(
            Response.from_value(
                question_id,
                rec.get("value"),
                responded_by=rec.get("responded_by"),
            )
        )
    return responses


def load_responses_json(path: Path) -> list[Response]:
    """Read responses from a JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On invalid JSON or an unexpected top-level shape.
    """
    if not path.exists():
        raise FileNotFoundError(f"Responses file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Responses file is not valid JSON ({path}): {exc}") from exc

    if isinstance(raw, dict):
        raw = raw.get("responses")
    if not isinstance(raw, list):
        raise ValueError(
            f"Responses file must be a JSON array or an object with a 'responses' array: {path}"
        )
    return parse_response_records(raw)


def _answer_from_csv(value: str, kind: str):
    if kind == "multi_choice":
        parts = [p.strip() for p in value.split(MULTI_VALUE_SEPARATOR)]
        return MultiChoice(values=tuple(p for p in parts if p))
    if kind == "numeric":
        try:
            number = float(value)
        except ValueError:
            return Text(value=value)
        if not math.isfinite(number):
            return Text(value=value)
        return Numeric(value=number)
    if kind == "text":
        return Text(value=value)
    return SingleChoice(value=value)


def load_responses_csv(path: Path) -> list[Response]:
    """Read responses from a CSV file with a header row.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If required columns are missing or a row lacks ``question_id``.
    """
    if not path.exists():
        raise FileNotFoundError(f"Responses file not found: {path}")

    with open(path, encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)

        if reader.fieldnames is None:
            raise ValueError(f"CSV file is empty or has no header row: {path}")

        missing = REQUIRED_CSV_COLUMNS - set(reader.fieldnames)
        if missing:
            raise ValueError(
                f"CSV missing required columns: {sorted(missing)}\n"
                f"Found columns: {sorted(reader.fieldnames)}"
            )

        responses: list[Response] = []
        # Row 1 is the header.
        for row_num, row in enumerate(reader, start=2):
            question_id = (row.get("question_id") or "").strip()
            if not question_id:
                raise ValueError(f"Row {row_num}: 'question_id' is empty.")
            kind = (row.get("kind") or "single_choice").strip().lower()
            value = (row.get("value") or "").strip()
            responses.append(
                Response(
                    question_id=question_id,
                    answer=_answer_from_csv(value, kind),
                    responded_by=(row.get("responded_by") or "").strip() or None,
                )
            )
    return responses


def load_responses(path: Path) -> list[Response]:
    """Load responses from a ``.json`` or ``.csv`` file, chosen by extension.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On malformed content or an unsupported extension.
    """
    path = Path(path)
    fmt = path.suffix.lower()
    if fmt == ".json":
        responses = load_responses_json(path)
    elif fmt == ".csv":
        responses = load_responses_csv(path)
    else:
        raise ValueError(f"Unsupported responses file format '{fmt}'. Use .json or .csv.")

    logger.info(
        "Loaded %d response(s) from %s", len(responses), path,
        extra={"response_count": len(responses), "source": str(path)},
    )
    return responses
