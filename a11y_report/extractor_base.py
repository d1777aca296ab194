"""
Base extractor class for flattening one tool's results into findings.
"""

import logging
from typing import Any, List, Mapping, Optional

from .finding import Finding, Severity, Source
from .utils import as_list, is_mapping

logger = logging.getLogger(__name__)


class BaseExtractor:
    """Base class for all extractors.

    Extractors hold no per-call state: the result being read and the findings
    being built are passed through each call, so one instance may be shared
    between threads.
    """

    source: Source

    def extract(self, result: Optional[Mapping[str, Any]]) -> List[Finding]:
        """Flatten one tool result. A missing result yields no findings."""
        findings: List[Finding] = []
        self._run_extraction(result if is_mapping(result) else {}, findings)
        return findings

    def _run_extraction(self, result: Mapping[str, Any], findings: List[Finding]):
        """Override in subclasses to implement the tool-specific flattening."""
        pass

    def _entries(self, key: str, container: Mapping[str, Any]) -> List[Mapping[str, Any]]:
        """Mapping entries of a result list; anything else is skipped."""
        entries = []
        for entry in as_list(container.get(key)):
            if is_mapping(entry):
                entries.append(entry)
            else:
                logger.debug("Skipping non-object %s entry in %s result", key, self.source.value)
        return entries

    def _add_finding(
        self,
        findings: List[Finding],
        message: str,
        selector: str,
        code: str,
        severity: Severity,
        passed: bool,
        **details: Any,
    ):
        """Add a finding to the list."""
        findings.append(
            Finding(
                source=self.source,
                message=message,
                selector=selector,
                code=code,
                severity=Severity.PASSED if passed else severity,
                passed=passed,
                **details,
            )
        )
