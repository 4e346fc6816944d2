"""
ASCII terminal formatters for the CLI ``score`` and ``list-questions`` commands.

All formatters accept engine output / question lists and return plain
multi-line strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Example report::

    === AI Adoption Feasibility ===
      Overall score: 47 / 100
      Rating:        CONDITIONAL

      Domain            Score        Pct  Threshold  Result
      -----------------------------------------------------
      infrastructure    28.40/50      57%        60%    FAIL
      ...
"""

from __future__ import annotations

from typing import Optional

from feasibility_engine.models.question import Question
from feasibility_engine.models.score import DomainScore, FeasibilityScore


def format_domain_row(ds: DomainScore) -> str:
    """One table row for a ``DomainScore``."""
    score_str = f"{ds.score:.2f}/{ds.max_score:g}"
    result = "PASS" if ds.passed else "FAIL"
    return (
        f"  {ds.domain.value:<16}  {score_str:<12}  {ds.percentage:>3}%  "
        f"{ds.pass_threshold:>8}%  {result:>6}"
    )


def _format_list(title: str, items: list[str], max_items: Optional[int]) -> list[str]:
    lines = ["", f"  {title}:"]
    if not items:
        lines.append("    (none)")
        return lines

    shown = items if not max_items else items[:max_items]
    for i, item in enumerate(shown, start=1):
        lines.append(f"    {i:>2}. {item}")
    hidden = len(items) - len(shown)
    if hidden > 0:
        lines.append(f"    ... and {hidden} more.")
    return lines


def format_feasibility_report(
    score: FeasibilityScore,
    max_items: Optional[int] = None,
) -> str:
    """Render a full feasibility report.

    Args:
        score:     Engine output.
        max_items: Truncate each guidance list to this many items
                   (``None`` or 0 = show all).

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== AI Adoption Feasibility ===")
    lines.append(f"  Overall score: {score.overall_score} / 100")
    lines.append(f"  Rating:        {score.rating.value.upper()}")
    lines.append("")

    header = (
        f"  {'Domain':<16}  {'Score':<12}  {'Pct':>4}  "
        f"{'Threshold':>9}  {'Result':>6}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for ds in score.domain_scores:
        lines.append(format_domain_row(ds))

    failed = score.failed_domains
    lines.append("")
    if failed:
        lines.append(f"  Failing domains: {', '.join(d.value for d in failed)}")
    else:
        lines.append("  All domains meet their pass threshold.")

    lines.extend(_format_list("Recommendations", score.recommendations, max_items))
    lines.extend(_format_list("Remediation tasks", score.remediation_tasks, max_items))

    return "\n".join(lines)


def format_question_list(questions: list[Question]) -> str:
    """Tabulate questions: id, domain, type, weight, prompt (truncated)."""
    if not questions:
        return "  (no questions)"

    lines: list[str] = []
    header = f"  {'ID':<10}  {'Domain':<14}  {'Type':<13}  {'Weight':>6}  Question"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2 + 40))
    for q in questions:
        text = q.text if len(q.text) <= 60 else q.text[:57] + "..."
        lines.append(
            f"  {q.id:<10}  {q.domain.value:<14}  {q.type.value:<13}  "
            f"{q.weight:>6g}  {text}"
        )
    return "\n".join(lines)
