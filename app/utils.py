"""Utility functions for the API."""

from deps import Any, Dict, HTTPException, Optional, logging

from a11y_report.errors import InvalidPayloadError

from .schemas import NormalizedReportOut
from .services import NormalizerService

logger = logging.getLogger(__name__)

normalizer_svc = NormalizerService()


def run_normalize(
    payload: Dict[str, Any],
    wcag_level: Optional[str],
    view: str,
) -> NormalizedReportOut:
    """Run the normalizer, turning engine errors into HTTP errors."""
    try:
        return normalizer_svc.normalize(payload, wcag_level=wcag_level, view=view)
    except InvalidPayloadError as e:
        logger.info("Rejected scan payload: %s", e)
        raise HTTPException(400, str(e))
    except ValueError as e:
        raise HTTPException(422, str(e))
