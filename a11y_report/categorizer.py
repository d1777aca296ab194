"""
Topic categorization of findings.
"""

import re
from typing import Dict, Iterable, List, Tuple

from .finding import Category, Finding


def _keywords(*words: str) -> re.Pattern:
    return re.compile("|".join(re.escape(w) for w in words), re.IGNORECASE)


# Evaluated in order; the first matching rule wins.
CATEGORY_RULES: Tuple[Tuple[Category, re.Pattern], ...] = (
    (Category.SCREENREADER, _keywords(
        "heading", "aria", "label", "name", "screen reader", "alt text",
        "discernible", "role", "semantic", "landmark",
    )),
    (Category.VISUAL, _keywords(
        "contrast", "color", "visual", "structure", "font", "background",
        "spacing", "layout", "responsive", "zoom", "text size",
    )),
    (Category.NAVIGATION, _keywords(
        "keyboard", "focus", "tab", "navigation", "skip", "order", "interactive",
        "click", "hover", "pointer", "target", "link", "button",
    )),
    (Category.CONTENT, _keywords(
        "language", "content", "text", "readable", "understandable",
        "translation", "localization",
    )),
)

CATEGORY_ORDER: Tuple[Category, ...] = tuple(c for c, _ in CATEGORY_RULES) + (Category.OTHER,)


def _matches(pattern: re.Pattern, finding: Finding) -> bool:
    return any(
        pattern.search(text or "")
        for text in (finding.message, finding.code, finding.help_text)
    )


def categorize(finding: Finding) -> Category:
    """Category of the first rule matching message, code or help text."""
    for category, pattern in CATEGORY_RULES:
        if _matches(pattern, finding):
            return category
    return Category.OTHER


def group_by_category(findings: Iterable[Finding]) -> Dict[Category, List[Finding]]:
    """Group findings by category, keeping input order within each group.

    Keys follow rule order with OTHER last; categories without findings are
    left out.
    """
    groups: Dict[Category, List[Finding]] = {}
    for finding in findings:
        groups.setdefault(categorize(finding), []).append(finding)
    return {c: groups[c] for c in CATEGORY_ORDER if c in groups}
