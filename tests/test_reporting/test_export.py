"""Tests for feasibility_engine.reporting.export."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from feasibility_engine.models.response import Response
from feasibility_engine.reporting.export import (
    DOMAIN_EXPORT_FIELDS,
    export_to_csv,
    export_to_json,
    feasibility_score_to_dict,
    flatten_domain_scores_for_export,
)
from feasibility_engine.scoring.engine import calculate_feasibility_score


def _result(questions):
    return calculate_feasibility_score(
        [Response.from_value("security-1", "yes")], questions
    )


# ── export_to_csv / export_to_json ────────────────────────────────────────────


def test_export_to_csv_basic(tmp_path: Path) -> None:
    records = [{"domain": "security", "percentage": 80}, {"domain": "business", "percentage": 10}]
    out = tmp_path / "nested" / "d.csv"
    assert export_to_csv(records, out) == out

    with out.open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[1]["domain"] == "business"


def test_export_to_csv_empty_writes_empty_file(tmp_path: Path) -> None:
    out = export_to_csv([], tmp_path / "empty.csv")
    assert out.read_text(encoding="utf-8") == ""


def test_export_to_json_creates_parents(tmp_path: Path) -> None:
    out = export_to_json({"a": 1}, tmp_path / "x" / "y.json")
    assert json.loads(out.read_text(encoding="utf-8")) == {"a": 1}


# ── Adapters ──────────────────────────────────────────────────────────────────


def test_score_to_dict_is_json_ready(yes_no_questions) -> None:
    data = feasibility_score_to_dict(_result(yes_no_questions))
    assert data["rating"] == "not_ready"
    assert data["overall_score"] == 25
    assert [d["domain"] for d in data["domain_scores"]] == [
        "infrastructure", "security", "governance", "engineering", "business",
    ]
    json.dumps(data)


def test_flatten_domain_scores(yes_no_questions) -> None:
    rows = flatten_domain_scores_for_export(_result(yes_no_questions))
    assert len(rows) == 5
    assert list(rows[0]) == DOMAIN_EXPORT_FIELDS
    security = rows[1]
    assert security["domain"] == "security"
    assert security["weight"] == 0.25
    assert security["percentage"] == 100
    assert security["passed"] is True
    assert security["remediation_task_count"] == 0
    assert all(r["overall_score"] == 25 for r in rows)


def test_flattened_rows_round_trip_through_csv(tmp_path: Path, yes_no_questions) -> None:
    out = export_to_csv(
        flatten_domain_scores_for_export(_result(yes_no_questions)),
        tmp_path / "domains.csv",
        fieldnames=DOMAIN_EXPORT_FIELDS,
    )
    with out.open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["domain"] for r in rows][0] == "infrastructure"
    assert rows[0]["passed"] == "False"
