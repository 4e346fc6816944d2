"""
Static per-domain guidance text, indexed by ``(ScoreDomain, GuidanceBucket)``.

A domain's percentage selects one bucket:

  - ``LOW``  (< 40)       — urgent, foundational items.
  - ``MID``  (40 ≤ p < 70) — refinement items.
  - ``HIGH`` (≥ 70)       — maturity-extension items (often empty).

Two parallel tables exist:

  ``DOMAIN_RECOMMENDATIONS``    narrative guidance for briefs and dashboards.
  ``DOMAIN_REMEDIATION_TASKS``  actionable checklist items.

Both are plain literal data. Every ``ScoreDomain`` must have an entry with
all three buckets; ``tests/test_taxonomy/test_guidance.py`` checks this.
"""

from enum import StrEnum

from feasibility_engine.taxonomy.domain_taxonomy import ScoreDomain


class GuidanceBucket(StrEnum):
    """Score band that selects a domain's guidance list."""

    LOW = "low"
    MID = "mid"
    HIGH = "high"


LOW_BUCKET_CEILING = 40
MID_BUCKET_CEILING = 70


def bucket_for_percentage(percentage: float) -> GuidanceBucket:
    """Return the guidance bucket for a 0–100 domain percentage."""
    if percentage < LOW_BUCKET_CEILING:
        return GuidanceBucket.LOW
    if percentage < MID_BUCKET_CEILING:
        return GuidanceBucket.MID
    return GuidanceBucket.HIGH


# ── Recommendations ───────────────────────────────────────────────────────────

DOMAIN_RECOMMENDATIONS: dict[ScoreDomain, dict[GuidanceBucket, tuple[str, ...]]] = {
    ScoreDomain.INFRASTRUCTURE: {
        GuidanceBucket.LOW: (
            "Establish dedicated cloud environment with network segmentation before AI tool deployment",
            "Implement a forward proxy to control and audit AI model API traffic",
            "Adopt Infrastructure-as-Code practices for reproducible sandbox environments",
        ),
        GuidanceBucket.MID: (
            "Strengthen network segmentation between AI sandbox and production systems",
            "Automate infrastructure provisioning to reduce configuration drift",
        ),
        GuidanceBucket.HIGH: (
            "Infrastructure is well-positioned; consider advanced observability for AI workloads",
        ),
    },
    ScoreDomain.SECURITY: {
        GuidanceBucket.LOW: (
            "Perform a data classification exercise before introducing AI coding tools",
            "Deploy DLP controls to prevent sensitive data from reaching external AI models",
            "Establish an AI-specific incident response playbook",
            "Implement secrets management solution (e.g., HashiCorp Vault) for all credentials",
        ),
        GuidanceBucket.MID: (
            "Enhance DLP rules to cover AI-specific data exfiltration vectors",
            "Integrate AI tool activity logs into existing SIEM platform",
        ),
        GuidanceBucket.HIGH: (
            "Security posture is strong; schedule periodic AI-focused penetration testing",
        ),
    },
    ScoreDomain.GOVERNANCE: {
        GuidanceBucket.LOW: (
            "Draft and ratify an Acceptable Use Policy (AUP) for AI coding assistants",
            "Map AI tool usage to existing compliance frameworks (SOC 2, HIPAA, etc.)",
            "Establish a vendor risk assessment process for AI tool providers",
            "Create a formal change management process for AI tool rollout",
        ),
        GuidanceBucket.MID: (
            "Formalize the three-gate review process for phased AI tool adoption",
            "Expand compliance mappings to cover AI-specific regulatory requirements",
        ),
        GuidanceBucket.HIGH: (
            "Governance framework is mature; consider publishing internal AI governance playbook",
        ),
    },
    ScoreDomain.ENGINEERING: {
        GuidanceBucket.LOW: (
            "Establish baseline CI/CD pipelines before introducing AI-generated code",
            "Implement mandatory code review processes for all contributions",
            "Increase automated test coverage to at least 60% before AI tool pilots",
        ),
        GuidanceBucket.MID: (
            "Add AI-specific linting rules and code quality gates to CI pipelines",
            "Train development teams on effective AI pair-programming practices",
        ),
        GuidanceBucket.HIGH: (
            "Engineering practices are solid; pilot AI tools with advanced use cases",
        ),
    },
    ScoreDomain.BUSINESS: {
        GuidanceBucket.LOW: (
            "Secure executive sponsorship with clear success metrics for AI adoption",
            "Define measurable business outcomes tied to AI tool deployment",
            "Allocate dedicated budget for AI tool licensing and infrastructure",
        ),
        GuidanceBucket.MID: (
            "Refine ROI model with pilot data to strengthen the business case",
            "Develop a communication plan for broader organizational buy-in",
        ),
        GuidanceBucket.HIGH: (
            "Business alignment is strong; proceed with confidence to production rollout",
        ),
    },
}


# ── Remediation tasks ─────────────────────────────────────────────────────────

DOMAIN_REMEDIATION_TASKS: dict[ScoreDomain, dict[GuidanceBucket, tuple[str, ...]]] = {
    ScoreDomain.INFRASTRUCTURE: {
        GuidanceBucket.LOW: (
            "Provision isolated VPC/VNet for AI sandbox environment",
            "Deploy forward proxy (e.g., Squid, Zscaler) with allowlist for AI API endpoints",
            "Set up package manager proxy (Artifactory/Nexus) for dependency control",
            "Create Terraform/Pulumi modules for repeatable sandbox deployment",
            "Configure network monitoring and traffic logging for sandbox egress",
        ),
        GuidanceBucket.MID: (
            "Harden network segmentation rules between sandbox and corporate networks",
            "Implement automated drift detection for infrastructure configurations",
        ),
        GuidanceBucket.HIGH: (),
    },
    ScoreDomain.SECURITY: {
        GuidanceBucket.LOW: (
            "Complete data classification for all repositories accessible to AI tools",
            "Deploy DLP agent on developer workstations with AI-specific rules",
            "Integrate AI tool audit logs into SIEM (Splunk/Sentinel/Datadog)",
            "Migrate all secrets to a centralized vault; rotate credentials",
            "Draft AI-specific incident response runbook and conduct tabletop exercise",
        ),
        GuidanceBucket.MID: (
            "Configure automated alerts for anomalous AI API usage patterns",
            "Add content scanning for AI-generated code in pull request checks",
        ),
        GuidanceBucket.HIGH: (),
    },
    ScoreDomain.GOVERNANCE: {
        GuidanceBucket.LOW: (
            "Draft Acceptable Use Policy for AI coding tools with legal review",
            "Create compliance control mapping spreadsheet for primary framework",
            "Establish AI vendor risk assessment questionnaire and scoring rubric",
            "Define three-gate review criteria with evidence checklists",
            "Set up policy version control and approval workflow",
        ),
        GuidanceBucket.MID: (
            "Conduct gap analysis between current policies and AI tool requirements",
            "Schedule quarterly governance review cadence",
        ),
        GuidanceBucket.HIGH: (),
    },
    ScoreDomain.ENGINEERING: {
        GuidanceBucket.LOW: (
            "Set up CI/CD pipeline with automated testing for pilot repositories",
            "Implement branch protection rules requiring code review approval",
            "Establish baseline code quality metrics (coverage, complexity, defect rate)",
            "Create developer onboarding guide for AI coding tool usage",
            "Configure pre-commit hooks for security scanning of AI-generated code",
        ),
        GuidanceBucket.MID: (
            "Add AI attribution tracking to version control workflow",
            "Develop custom linting rules for common AI code generation patterns",
        ),
        GuidanceBucket.HIGH: (),
    },
    ScoreDomain.BUSINESS: {
        GuidanceBucket.LOW: (
            "Schedule executive briefing to secure formal sponsorship and budget approval",
            "Define 3-5 measurable KPIs for AI tool pilot evaluation",
            "Create preliminary ROI model with conservative productivity assumptions",
            "Identify 2-3 pilot teams with high readiness and willingness",
            "Develop stakeholder communication plan with role-specific messaging",
        ),
        GuidanceBucket.MID: (
            "Refine ROI model with actual pilot metrics and expand business case",
            "Survey pilot participants for satisfaction and adoption feedback",
        ),
        GuidanceBucket.HIGH: (),
    },
}


def recommendations_for(domain: ScoreDomain, percentage: float) -> list[str]:
    """Narrative recommendations for ``domain`` at ``percentage``."""
    return list(DOMAIN_RECOMMENDATIONS[domain][bucket_for_percentage(percentage)])


def remediation_tasks_for(domain: ScoreDomain, percentage: float) -> list[str]:
    """Checklist remediation tasks for ``domain`` at ``percentage``."""
    return list(DOMAIN_REMEDIATION_TASKS[domain][bucket_for_percentage(percentage)])
