"""
Export helpers for feasibility results.

All functions write to disk and return the written ``Path``.
They accept generic ``list[dict]`` / ``dict`` data to stay decoupled from
specific report shapes.

CSV exports are flat (no nested lists) so they load directly in a
spreadsheet or BI tool. ``flatten_domain_scores_for_export()`` is the main
adapter: one row per domain with guidance counts instead of guidance text.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from feasibility_engine.models.score import FeasibilityScore
from feasibility_engine.taxonomy.domain_taxonomy import DOMAIN_WEIGHTS

DOMAIN_EXPORT_FIELDS = [
    "domain",
    "weight",
    "score",
    "max_score",
    "percentage",
    "pass_threshold",
    "passed",
    "recommendation_count",
    "remediation_task_count",
    "overall_score",
    "rating",
]


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path


def feasibility_score_to_dict(score: FeasibilityScore) -> dict:
    """JSON-ready dict of the full result (enums rendered as their values)."""
    return score.model_dump(mode="json")


def flatten_domain_scores_for_export(score: FeasibilityScore) -> list[dict]:
    """One flat row per domain, in domain order.

    Each row repeats ``overall_score`` and ``rating`` so a single CSV carries
    the whole result.
    """
    rows: list[dict] = []
    for ds in score.domain_scores:
        rows.append(
            {
                "domain":                 ds.domain.value,
                "weight":                 DOMAIN_WEIGHTS[ds.domain],
                "score":                  ds.score,
                "max_score":              ds.max_score,
                "percentage":             ds.percentage,
                "pass_threshold":         ds.pass_threshold,
                "passed":                 ds.passed,
                "recommendation_count":   len(ds.recommendations),
                "remediation_task_count": len(ds.remediation_tasks),
                "overall_score":          score.overall_score,
                "rating":                 score.rating.value,
            }
        )
    return rows
