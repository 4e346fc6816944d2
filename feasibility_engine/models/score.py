"""
Feasibility score output models.

``DomainScore`` is the per-domain breakdown, consumable on its own by
progress indicators and pass/fail badges. ``FeasibilityScore`` is the
composed result: five ``DomainScore`` entries in fixed domain order, the
overall 0–100 score, its ordinal rating, and the globally merged guidance.

Both models are frozen; recomputing the same inputs yields equal instances.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from feasibility_engine.taxonomy.domain_taxonomy import (
    PASS_THRESHOLDS,
    FeasibilityRating,
    ScoreDomain,
)


class DomainScore(BaseModel):
    """Score, verdict and guidance for one domain.

    Attributes:
        domain: The scored domain.
        score: Accumulated weighted contribution, rounded to 2 decimals.
        max_score: Sum of question weights in the domain (0 if no questions).
        percentage: ``round(score / max_score * 100)``, or 0 when ``max_score`` is 0.
        pass_threshold: Minimum percentage to pass (from ``PASS_THRESHOLDS``).
        passed: ``percentage >= pass_threshold``.
        recommendations: Narrative guidance for the domain's score bucket.
        remediation_tasks: Checklist items for the domain's score bucket.
    """

    model_config = ConfigDict(frozen=True)

    domain: ScoreDomain
    score: float = 0.0
    max_score: float = 0.0
    percentage: int = Field(default=0, ge=0, le=100)
    pass_threshold: int
    passed: bool = False
    recommendations: list[str] = Field(default_factory=list)
    remediation_tasks: list[str] = Field(default_factory=list)

    @classmethod
    def empty(cls, domain: ScoreDomain) -> DomainScore:
        """Zero-value score for a domain with no configured questions."""
        return cls(domain=domain, pass_threshold=PASS_THRESHOLDS[domain])


class FeasibilityScore(BaseModel):
    """Composed feasibility assessment result.

    Attributes:
        domain_scores: One entry per domain, in ``DOMAIN_ORDER``.
        overall_score: Weighted sum of domain percentages, rounded (0–100).
        rating: ``FeasibilityRating`` of ``overall_score``.
        recommendations: Deduplicated recommendations, weakest domain first.
        remediation_tasks: Deduplicated remediation tasks, weakest domain first.
    """

    model_config = ConfigDict(frozen=True)

    domain_scores: list[DomainScore]
    overall_score: int = Field(ge=0, le=100)
    rating: FeasibilityRating
    recommendations: list[str] = Field(default_factory=list)
    remediation_tasks: list[str] = Field(default_factory=list)

    def domain(self, domain: ScoreDomain) -> DomainScore:
        """Return the ``DomainScore`` for ``domain``.

        Raises:
            KeyError: If ``domain`` is not present (never the case for engine output).
        """
        for ds in self.domain_scores:
            if ds.domain == domain:
                return ds
        raise KeyError(domain)

    @property
    def failed_domains(self) -> list[ScoreDomain]:
        """Domains below their pass threshold, in domain order."""
        return [ds.domain for ds in self.domain_scores if not ds.passed]
