"""
Rule-engine (axe-core style) result extraction.
"""

from typing import Any, List, Mapping

from ..extractor_base import BaseExtractor
from ..finding import Finding, Severity, Source
from ..severity import severity_from_impact
from ..utils import as_optional_text, as_tags, as_text, first_target


class RuleEngineExtractor(BaseExtractor):
    """Expands violations and passes into one finding per affected node."""

    source = Source.RULE_ENGINE

    def _run_extraction(self, result: Mapping[str, Any], findings: List[Finding]):
        """Run rule-engine extraction."""
        for violation in self._entries("violations", result):
            self._expand_nodes(findings, violation, passed=False)
        for rule_pass in self._entries("passes", result):
            self._expand_nodes(findings, rule_pass, passed=True)

    def _expand_nodes(self, findings: List[Finding], rule: Mapping[str, Any], passed: bool):
        """Copy the rule's metadata onto a finding for each of its nodes."""
        impact = as_optional_text(rule.get("impact"))
        severity = Severity.PASSED if passed else severity_from_impact(impact)
        tags = as_tags(rule.get("tags"))
        for node in self._entries("nodes", rule):
            self._add_finding(
                findings,
                as_text(rule.get("description")),
                first_target(node),
                as_text(rule.get("id")),
                severity,
                passed,
                context=as_text(node.get("html")),
                help_text=as_text(rule.get("help")),
                help_url=as_text(rule.get("helpUrl")),
                tags=tags,
                screenshot=as_optional_text(node.get("screenshot")),
                impact="passed" if passed else impact,
                failure_summary=as_optional_text(node.get("failureSummary")),
            )
