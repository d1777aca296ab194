"""
Normalized report value object.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .finding import Category, Finding, Source, View, WcagLevel
from .scoring import ScoreCard


@dataclass(frozen=True)
class NormalizedReport:
    """Scored, categorized accessibility report for one view of one scan."""
    url: Optional[str]
    wcag_level: WcagLevel
    view: View
    score_card: ScoreCard
    categorized: Mapping[Category, Tuple[Finding, ...]]
    sources: Tuple[Source, ...] = ()

    @property
    def score(self) -> int:
        return self.score_card.score

    @property
    def compliant(self) -> bool:
        return self.score_card.compliant

    @property
    def score_band(self) -> str:
        return self.score_card.band

    @property
    def total_issues(self) -> int:
        return self.score_card.total_issues

    @property
    def total_passed(self) -> int:
        return self.score_card.total_passed

    @property
    def total_tests(self) -> int:
        return self.score_card.total_tests

    @property
    def has_issues(self) -> bool:
        """False when no failing finding survived filtering (the "no issues" state)."""
        return self.score_card.total_issues > 0

    @property
    def findings(self) -> List[Finding]:
        """All findings of the active view, category by category."""
        return [f for group in self.categorized.values() for f in group]

    def category_counts(self) -> Dict[Category, int]:
        """Number of findings per emitted category."""
        return {category: len(group) for category, group in self.categorized.items()}

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape of the report (camelCase keys)."""
        out: Dict[str, Any] = {
            "url": self.url,
            "wcagLevel": self.wcag_level.value,
            "view": self.view.value,
            "sources": [s.value for s in self.sources],
        }
        out.update(self.score_card.to_dict())
        out["hasIssues"] = self.has_issues
        out["categories"] = [
            {
                "key": category.value,
                "label": category.label,
                "count": len(group),
                "findings": [f.to_dict() for f in group],
            }
            for category, group in self.categorized.items()
        ]
        return out
