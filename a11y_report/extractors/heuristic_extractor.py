"""
Heuristic linter (Pa11y / HTML_CodeSniffer style) result extraction.
"""

from typing import Any, List, Mapping

from ..extractor_base import BaseExtractor
from ..finding import Finding, Source
from ..severity import severity_from_type
from ..utils import as_optional_text, as_text


class HeuristicExtractor(BaseExtractor):
    """One finding per issue and per passed check."""

    source = Source.HEURISTIC

    def _run_extraction(self, result: Mapping[str, Any], findings: List[Finding]):
        for issue in self._entries("issues", result):
            self._add_item(findings, issue, passed=False)
        for check in self._entries("passed", result):
            self._add_item(findings, check, passed=True)

    def _add_item(self, findings: List[Finding], item: Mapping[str, Any], passed: bool):
        issue_type = as_optional_text(item.get("type"))
        self._add_finding(
            findings,
            as_text(item.get("message")),
            as_text(item.get("selector")),
            as_text(item.get("code")),
            severity_from_type(issue_type),
            passed,
            context=as_text(item.get("context")),
            help_text=as_text(item.get("help")),
            help_url=as_text(item.get("helpUrl")),
            screenshot=as_optional_text(item.get("screenshot")),
            issue_type=issue_type,
        )
