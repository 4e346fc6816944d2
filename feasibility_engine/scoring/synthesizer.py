"""
Recommendation synthesizer: per-domain guidance → global priority lists.

Domains are stably sorted by ascending percentage, so the weakest domain's
guidance surfaces first and exact ties keep domain order. Each domain's own
list is walked in order and an item is appended only if the identical
string has not been appended already.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from feasibility_engine.models.score import DomainScore


def merge_guidance(
    domain_scores: Iterable[DomainScore],
    select: Callable[[DomainScore], Iterable[str]],
) -> list[str]:
    """Merge one guidance list across domains, weakest domain first.

    Args:
        domain_scores: Domain scores in domain order.
        select: Picks the list to merge from each ``DomainScore``.

    Returns:
        Ordered list with no duplicate strings.
    """
    ordered = sorted(domain_scores, key=lambda ds: ds.percentage)

    merged: list[str] = []
    seen: set[str] = set()
    for ds in ordered:
        for item in select(ds):
            if item not in seen:
                seen.add(item)
                merged.append(item)
    return merged


def generate_recommendations(domain_scores: Iterable[DomainScore]) -> list[str]:
    """Deduplicated recommendations, weakest domain first."""
    return merge_guidance(domain_scores, lambda ds: ds.recommendations)


def generate_remediation_tasks(domain_scores: Iterable[DomainScore]) -> list[str]:
    """Deduplicated remediation tasks, weakest domain first."""
    return merge_guidance(domain_scores, lambda ds: ds.remediation_tasks)
