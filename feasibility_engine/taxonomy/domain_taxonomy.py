"""
Assessment domain taxonomy for the AI-adoption feasibility score.

Every question in the bank belongs to exactly one ``ScoreDomain``. The five
domains are fixed and their order is significant: it is the order in which
domain scores are computed, reported, and used to break ties when guidance
is merged.

Per-domain constants (the integrity contract):
  - ``DOMAIN_WEIGHTS``  — share of the overall score; sums to exactly 1.0.
  - ``PASS_THRESHOLDS`` — minimum percentage for a domain to be "passed";
                          each lies in (0, 100].

These tables are process-wide immutable configuration. They are deliberately
not exposed through ``config/default.toml``.

Run ``tests/test_taxonomy/test_domain_taxonomy.py`` to verify the contract.

This module has NO imports from any other ``feasibility_engine`` package.
"""

from enum import StrEnum


class ScoreDomain(StrEnum):
    """Capability area a question contributes to."""

    INFRASTRUCTURE = "infrastructure"
    """Cloud footprint, network segmentation, proxies, IaC."""

    SECURITY = "security"
    """Data classification, DLP, secrets management, incident response."""

    GOVERNANCE = "governance"
    """Acceptable use policy, compliance mapping, vendor risk, change control."""

    ENGINEERING = "engineering"
    """CI/CD, code review, test coverage, developer tooling."""

    BUSINESS = "business"
    """Executive sponsorship, success metrics, budget, change readiness."""


class FeasibilityRating(StrEnum):
    """Ordinal classification of the overall 0–100 score."""

    HIGH = "high"
    MODERATE = "moderate"
    CONDITIONAL = "conditional"
    NOT_READY = "not_ready"


class QuestionType(StrEnum):
    """How a question expects to be answered."""

    SINGLE_SELECT = "single_select"
    MULTI_SELECT = "multi_select"
    TEXT = "text"
    NUMBER = "number"


# ── Domain constants ──────────────────────────────────────────────────────────

DOMAIN_ORDER: tuple[ScoreDomain, ...] = (
    ScoreDomain.INFRASTRUCTURE,
    ScoreDomain.SECURITY,
    ScoreDomain.GOVERNANCE,
    ScoreDomain.ENGINEERING,
    ScoreDomain.BUSINESS,
)

DOMAIN_WEIGHTS: dict[ScoreDomain, float] = {
    ScoreDomain.INFRASTRUCTURE: 0.25,
    ScoreDomain.SECURITY:       0.25,
    ScoreDomain.GOVERNANCE:     0.20,
    ScoreDomain.ENGINEERING:    0.15,
    ScoreDomain.BUSINESS:       0.15,
}

PASS_THRESHOLDS: dict[ScoreDomain, int] = {
    ScoreDomain.INFRASTRUCTURE: 60,
    ScoreDomain.SECURITY:       60,
    ScoreDomain.GOVERNANCE:     50,
    ScoreDomain.ENGINEERING:    50,
    ScoreDomain.BUSINESS:       50,
}

# Inclusive lower bounds, checked highest first.
RATING_BANDS: tuple[tuple[int, FeasibilityRating], ...] = (
    (80, FeasibilityRating.HIGH),
    (60, FeasibilityRating.MODERATE),
    (40, FeasibilityRating.CONDITIONAL),
)
