"""
Accessibility report normalizer: merges rule-engine and heuristic scan
results into one scored, categorized report.
"""

from .categorizer import CATEGORY_RULES, categorize, group_by_category
from .errors import A11yReportError, InvalidPayloadError, PartialDataWarning
from .finding import Category, Finding, Severity, Source, View, WcagLevel
from .main_normalizer import PreparedReport, ReportAssembler, normalize_report
from .payload import ScanPayload, read_payload
from .reporter import NormalizedReport
from .scoring import ScoreCard, compute_score
from .severity import compare_severity, sort_by_severity
from .wcag_filter import filter_by_level, is_applicable

__all__ = [
    'A11yReportError',
    'CATEGORY_RULES',
    'Category',
    'Finding',
    'InvalidPayloadError',
    'NormalizedReport',
    'PartialDataWarning',
    'PreparedReport',
    'ReportAssembler',
    'ScanPayload',
    'ScoreCard',
    'Severity',
    'Source',
    'View',
    'WcagLevel',
    'categorize',
    'compare_severity',
    'compute_score',
    'filter_by_level',
    'group_by_category',
    'is_applicable',
    'normalize_report',
    'read_payload',
    'sort_by_severity',
]
