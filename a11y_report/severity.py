"""
Severity mapping and ordering for findings.
"""

from typing import Any, Iterable, List

from .finding import Finding, Severity
from .utils import as_text

SEVERITY_RANK = {
    Severity.CRITICAL: 0,
    Severity.SERIOUS: 1,
    Severity.MODERATE: 2,
    Severity.PASSED: 3,
}


def severity_from_impact(impact: Any) -> Severity:
    """Map a rule-engine impact ('critical', 'serious', 'moderate', 'minor') to a severity."""
    value = as_text(impact).strip().lower()
    if value == "critical":
        return Severity.CRITICAL
    if value == "serious":
        return Severity.SERIOUS
    return Severity.MODERATE


def severity_from_type(issue_type: Any) -> Severity:
    """Map a heuristic issue type ('error', 'warning', 'notice') to a severity."""
    value = as_text(issue_type).strip().lower()
    if value == "error":
        return Severity.CRITICAL
    if value == "warning":
        return Severity.SERIOUS
    return Severity.MODERATE


def severity_rank(finding: Finding) -> int:
    return SEVERITY_RANK[finding.severity]


def compare_severity(a: Finding, b: Finding) -> int:
    """Negative if a sorts before b, zero if tied, positive otherwise."""
    return severity_rank(a) - severity_rank(b)


def sort_by_severity(findings: Iterable[Finding]) -> List[Finding]:
    """Most severe first. Ties keep their input order."""
    return sorted(findings, key=severity_rank)
