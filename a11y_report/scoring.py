"""
Compliance score calculation.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable

from .finding import Finding

COMPLIANCE_THRESHOLD = 95
GOOD_SCORE = 90
FAIR_SCORE = 70


@dataclass(frozen=True)
class ScoreCard:
    """Score and verdict for a filtered set of findings."""
    total_issues: int
    total_passed: int
    score: int

    @property
    def total_tests(self) -> int:
        return self.total_issues + self.total_passed

    @property
    def compliant(self) -> bool:
        return self.score >= COMPLIANCE_THRESHOLD

    @property
    def band(self) -> str:
        """'good', 'fair' or 'poor'."""
        if self.score >= GOOD_SCORE:
            return "good"
        if self.score >= FAIR_SCORE:
            return "fair"
        return "poor"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "compliant": self.compliant,
            "scoreBand": self.band,
            "totalIssues": self.total_issues,
            "totalPassed": self.total_passed,
            "totalTests": self.total_tests,
        }


def percent_score(passed: int, total: int) -> int:
    """passed/total as a whole percentage, rounding halves up. 0 when total is 0."""
    if total <= 0:
        return 0
    ratio = Decimal(passed) * 100 / Decimal(total)
    return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def compute_score(findings: Iterable[Finding]) -> ScoreCard:
    """Score a filtered set of findings by its share of passed checks."""
    total_issues = 0
    total_passed = 0
    for finding in findings:
        if finding.passed:
            total_passed += 1
        else:
            total_issues += 1
    return ScoreCard(
        total_issues=total_issues,
        total_passed=total_passed,
        score=percent_score(total_passed, total_issues + total_passed),
    )
