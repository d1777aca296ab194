"""
Main normalizer that coordinates extraction, filtering, scoring and grouping.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, List, Optional, Tuple, Union

from .categorizer import group_by_category
from .extractors import HeuristicExtractor, RuleEngineExtractor
from .finding import DEFAULT_WCAG_LEVEL, Finding, Source, View, WcagLevel
from .payload import ScanPayload, read_payload
from .reporter import NormalizedReport
from .scoring import ScoreCard, compute_score
from .severity import sort_by_severity
from .wcag_filter import filter_by_level

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedReport:
    """Filtered and scored findings of one scan, shared by both views."""
    url: Optional[str]
    wcag_level: WcagLevel
    findings: Tuple[Finding, ...]
    score_card: ScoreCard
    sources: Tuple[Source, ...]

    def view(self, view: Union[View, str] = View.ISSUES) -> NormalizedReport:
        """Group the findings of one view by category, most severe first."""
        view = View.parse(view)
        want_passed = view is View.PASSED
        selected = [f for f in self.findings if f.passed == want_passed]
        groups = group_by_category(selected)
        categorized = MappingProxyType({
            category: tuple(sort_by_severity(group))
            for category, group in groups.items()
        })
        return NormalizedReport(
            url=self.url,
            wcag_level=self.wcag_level,
            view=view,
            score_card=self.score_card,
            categorized=categorized,
            sources=self.sources,
        )


class ReportAssembler:
    """Runs every stage of report normalization."""

    def __init__(self):
        self.extractors = {
            Source.RULE_ENGINE: RuleEngineExtractor(),
            Source.HEURISTIC: HeuristicExtractor(),
        }

    def extract(self, payload: ScanPayload) -> List[Finding]:
        """Flatten both tool results into findings, rule engine first."""
        findings: List[Finding] = []
        findings.extend(self.extractors[Source.RULE_ENGINE].extract(payload.rule_engine_result))
        findings.extend(self.extractors[Source.HEURISTIC].extract(payload.heuristic_result))
        return findings

    def prepare(
        self,
        raw_payload: Any,
        wcag_level: Union[WcagLevel, str, None] = None,
        default_level: Union[WcagLevel, str] = DEFAULT_WCAG_LEVEL,
    ) -> PreparedReport:
        """Read, extract, filter and score a raw scan payload.

        When wcag_level is not given the payload's own level is used, then
        default_level.
        """
        payload = read_payload(raw_payload)
        level = WcagLevel.parse(wcag_level or payload.wcag_level or default_level)

        findings = self.extract(payload)
        applicable = filter_by_level(findings, level)
        score_card = compute_score(applicable)
        logger.debug(
            "Normalized %s: %d findings, %d applicable at WCAG %s, score %d",
            payload.url or "<no url>", len(findings), len(applicable), level.value, score_card.score,
        )
        return PreparedReport(
            url=payload.url,
            wcag_level=level,
            findings=tuple(applicable),
            score_card=score_card,
            sources=payload.sources,
        )


def normalize_report(
    raw_payload: Any,
    wcag_level: Union[WcagLevel, str, None] = None,
    view: Union[View, str] = View.ISSUES,
) -> NormalizedReport:
    """Normalize a raw scan payload into a scored, categorized report."""
    return ReportAssembler().prepare(raw_payload, wcag_level).view(view)
