"""
Utility functions for reading loosely-typed tool output.
"""

from typing import Any, List, Mapping, Optional, Tuple


def as_text(value: Any) -> str:
    """Coerce a field to a string; None becomes ''."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def as_optional_text(value: Any) -> Optional[str]:
    """Like as_text, but keeps missing or blank values as None."""
    text = as_text(value)
    return text if text.strip() else None


def as_list(value: Any) -> List[Any]:
    """Coerce a field to a list; None and non-sequences become []."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return []


def as_tags(value: Any) -> Tuple[str, ...]:
    """Normalize a tag list to a tuple of non-empty strings."""
    return tuple(as_text(t) for t in as_list(value) if as_text(t).strip())


def first_target(node: Mapping[str, Any]) -> str:
    """Selector for an affected node: the first entry of its target list."""
    targets = node.get("target")
    if isinstance(targets, str):
        return targets
    targets = as_list(targets)
    if not targets:
        return ""
    first = targets[0]
    # Shadow DOM targets are nested lists of selectors.
    if isinstance(first, list):
        return " ".join(as_text(t) for t in first)
    return as_text(first)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)
