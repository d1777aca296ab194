"""
Scan payload reading.

Accepts the canonical keys (``ruleEngineResult`` / ``heuristicResult``) as
well as the tool names stored on scan records (``axe`` / ``pa11y``), either at
the top level or nested under ``result``.
"""

import logging
import warnings
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from .errors import InvalidPayloadError, PartialDataWarning
from .finding import Source
from .utils import as_optional_text, is_mapping

logger = logging.getLogger(__name__)

RULE_ENGINE_KEYS = ("ruleEngineResult", "axe")
HEURISTIC_KEYS = ("heuristicResult", "pa11y")


@dataclass(frozen=True)
class ScanPayload:
    """The two tool results of one scan plus scan metadata."""
    rule_engine_result: Optional[Mapping[str, Any]]
    heuristic_result: Optional[Mapping[str, Any]]
    url: Optional[str] = None
    wcag_level: Optional[str] = None

    @property
    def sources(self) -> Tuple[Source, ...]:
        present = []
        if self.rule_engine_result is not None:
            present.append(Source.RULE_ENGINE)
        if self.heuristic_result is not None:
            present.append(Source.HEURISTIC)
        return tuple(present)


def _find_result(container: Mapping[str, Any], keys: Tuple[str, ...]) -> Optional[Mapping[str, Any]]:
    """First mapping stored under one of keys. Malformed values count as absent."""
    for key in keys:
        if key not in container or container[key] is None:
            continue
        value = container[key]
        if is_mapping(value):
            return value
        logger.warning("Ignoring malformed %r result: expected an object, got %s", key, type(value).__name__)
    return None


def _results_container(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    if any(k in raw for k in RULE_ENGINE_KEYS + HEURISTIC_KEYS):
        return raw
    nested = raw.get("result")
    if is_mapping(nested):
        return nested
    return raw


def read_payload(raw: Any) -> ScanPayload:
    """Read a raw scan payload.

    Raises InvalidPayloadError when neither tool result is present and
    readable. Emits PartialDataWarning when only one of them is.
    """
    if isinstance(raw, ScanPayload):
        payload = raw
    else:
        if not is_mapping(raw):
            raise InvalidPayloadError(
                f"Scan payload must be an object, got {type(raw).__name__}"
            )
        container = _results_container(raw)
        payload = ScanPayload(
            rule_engine_result=_find_result(container, RULE_ENGINE_KEYS),
            heuristic_result=_find_result(container, HEURISTIC_KEYS),
            url=as_optional_text(raw.get("url") or container.get("url")),
            wcag_level=as_optional_text(raw.get("wcagLevel") or container.get("wcagLevel")),
        )

    if not payload.sources:
        raise InvalidPayloadError(
            "Scan payload has neither a rule-engine nor a heuristic result"
        )
    if len(payload.sources) == 1:
        missing = Source.HEURISTIC if payload.sources[0] is Source.RULE_ENGINE else Source.RULE_ENGINE
        message = f"Scan payload has no {missing.value} result; normalizing {payload.sources[0].value} findings only"
        logger.info(message)
        warnings.warn(message, PartialDataWarning, stacklevel=2)
    return payload
