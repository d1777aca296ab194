"""
Extractors package: one extractor per accessibility testing tool.
"""

from .rule_engine_extractor import RuleEngineExtractor
from .heuristic_extractor import HeuristicExtractor

__all__ = [
    'RuleEngineExtractor',
    'HeuristicExtractor',
]
