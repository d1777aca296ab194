"""Normalizer service: wraps a11y_report and maps to API models."""

from deps import Any, Dict, List, Optional, logging

from a11y_report.finding import Finding, View, WcagLevel
from a11y_report.main_normalizer import ReportAssembler
from a11y_report.reporter import NormalizedReport

from ..config import get_default_wcag_level
from ..schemas import CategoryOut, FindingOut, NormalizedReportOut

logger = logging.getLogger(__name__)


def _finding_to_out(f: Finding) -> FindingOut:
    return FindingOut(
        source=f.source.value,
        message=f.message,
        selector=f.selector,
        code=f.code,
        severity=f.severity.value,
        passed=f.passed,
        context=f.context,
        help_text=f.help_text,
        help_url=f.help_url,
        tags=list(f.tags),
        screenshot=f.screenshot,
        impact=f.impact,
        failure_summary=f.failure_summary,
        issue_type=f.issue_type,
    )


def _report_to_out(report: NormalizedReport) -> NormalizedReportOut:
    categories: List[CategoryOut] = [
        CategoryOut(
            key=category.value,
            label=category.label,
            count=len(group),
            findings=[_finding_to_out(f) for f in group],
        )
        for category, group in report.categorized.items()
    ]
    return NormalizedReportOut(
        url=report.url,
        wcag_level=report.wcag_level.value,
        view=report.view.value,
        sources=[s.value for s in report.sources],
        score=report.score,
        compliant=report.compliant,
        score_band=report.score_band,
        total_issues=report.total_issues,
        total_passed=report.total_passed,
        total_tests=report.total_tests,
        has_issues=report.has_issues,
        categories=categories,
    )


class NormalizerService:
    """Wraps ReportAssembler for use by the API."""

    def normalize(
        self,
        payload: Dict[str, Any],
        wcag_level: Optional[str] = None,
        view: str = View.ISSUES.value,
    ) -> NormalizedReportOut:
        """Normalize one raw scan payload.

        The level comes from the request, then the payload's own wcagLevel,
        then the configured default.
        """
        prepared = ReportAssembler().prepare(
            payload,
            WcagLevel.parse(wcag_level) if wcag_level else None,
            default_level=get_default_wcag_level(),
        )
        report = prepared.view(view)
        logger.info(
            "Normalized report for %s: WCAG %s, %s view, score %d (%d issues, %d passed)",
            report.url or "<no url>",
            report.wcag_level.value,
            report.view.value,
            report.score,
            report.total_issues,
            report.total_passed,
        )
        return _report_to_out(report)
