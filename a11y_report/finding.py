"""
Finding data models for the accessibility report normalizer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Source(Enum):
    """Tool that produced a finding."""
    RULE_ENGINE = "rule-engine"
    HEURISTIC = "heuristic"


class Severity(Enum):
    """Finding severity tiers, most urgent first."""
    CRITICAL = "critical"
    SERIOUS = "serious"
    MODERATE = "moderate"
    PASSED = "passed"


class WcagLevel(Enum):
    """WCAG conformance level."""
    A = "A"
    AA = "AA"
    AAA = "AAA"

    @classmethod
    def parse(cls, value: Any) -> "WcagLevel":
        """Accept a WcagLevel or a case-insensitive level string."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().upper()
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown WCAG level: {value!r} (expected A, AA or AAA)") from None

    @property
    def tag(self) -> str:
        """Tag fragment identifying this level, e.g. 'wcag2aa'."""
        return f"wcag2{self.value.lower()}"


DEFAULT_WCAG_LEVEL = WcagLevel.AA


class Category(Enum):
    """Topical bucket a finding is reported under."""
    SCREENREADER = "screenreader"
    VISUAL = "visual"
    NAVIGATION = "navigation"
    CONTENT = "content"
    OTHER = "other"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS: Dict[Category, str] = {
    Category.SCREENREADER: "Screen Reader and Assistive Technology Tests",
    Category.VISUAL: "Visual and Structural Accessibility Tests",
    Category.NAVIGATION: "Interaction and Navigation Tests",
    Category.CONTENT: "Content and Language Tests",
    Category.OTHER: "Other Accessibility Issues",
}


class View(Enum):
    """Which half of the filtered findings a report presents."""
    ISSUES = "issues"
    PASSED = "passed"

    @classmethod
    def parse(cls, value: Any) -> "View":
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown report view: {value!r} (expected issues or passed)") from None


@dataclass(frozen=True)
class Finding:
    """One normalized accessibility check result, pass or fail."""
    source: Source
    message: str
    selector: str
    code: str
    severity: Severity
    passed: bool
    context: str = ""
    help_text: str = ""
    help_url: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)
    screenshot: Optional[str] = None
    impact: Optional[str] = None
    failure_summary: Optional[str] = None
    issue_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape of the finding (camelCase keys)."""
        return {
            "source": self.source.value,
            "message": self.message,
            "selector": self.selector,
            "code": self.code,
            "severity": self.severity.value,
            "passed": self.passed,
            "context": self.context,
            "help": self.help_text,
            "helpUrl": self.help_url,
            "tags": list(self.tags),
            "screenshot": self.screenshot,
            "impact": self.impact,
            "failureSummary": self.failure_summary,
            "type": self.issue_type,
        }
