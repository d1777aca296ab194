"""
WCAG conformance level filtering.

A rule-engine finding applies to a level when one of its tags contains the
level tag (``wcag2aa`` for AA). Heuristic findings carry no tags, so their
``code`` and ``help_url`` are searched for the same fragment instead; looser
codes that only say ``WCAG2`` are accepted when the help URL names the level.

Findings that carry none of this information are dropped.
"""

import logging
from typing import Iterable, List

from .finding import Finding, Source, WcagLevel

logger = logging.getLogger(__name__)


def _rule_engine_applicable(finding: Finding, level: WcagLevel) -> bool:
    return any(level.tag in tag for tag in finding.tags)


def _heuristic_applicable(finding: Finding, level: WcagLevel) -> bool:
    code = finding.code.lower()
    help_url = finding.help_url.lower()
    return (
        level.tag in code
        or level.tag in help_url
        or ("wcag2" in code and level.value.lower() in help_url)
    )


def is_applicable(finding: Finding, level: WcagLevel) -> bool:
    """True if the finding belongs to the given conformance level."""
    if finding.source is Source.RULE_ENGINE:
        return _rule_engine_applicable(finding, level)
    if finding.source is Source.HEURISTIC:
        return _heuristic_applicable(finding, level)
    return False


def filter_by_level(findings: Iterable[Finding], level: WcagLevel) -> List[Finding]:
    """Keep the findings applicable to level, in input order."""
    findings = list(findings)
    kept = [f for f in findings if is_applicable(f, level)]
    logger.debug("WCAG %s filter kept %d of %d findings", level.value, len(kept), len(findings))
    return kept
