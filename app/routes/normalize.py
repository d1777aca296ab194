"""Normalize route: raw scan payload in, scored and categorized report out."""

from deps import Any, APIRouter, Body, Dict, Literal, Optional, Query

from ..schemas import ErrorDetail, NormalizedReportOut
from ..utils import run_normalize

router = APIRouter()


@router.post(
    "/normalize",
    response_model=NormalizedReportOut,
    responses={400: {"model": ErrorDetail}},
)
def normalize(
    payload: Dict[str, Any] = Body(..., description="Raw scan result with ruleEngineResult and/or heuristicResult"),
    wcag_level: Optional[Literal["A", "AA", "AAA"]] = Query(
        default=None, description="Conformance level; defaults to the payload's wcagLevel, then A11Y_DEFAULT_WCAG_LEVEL"
    ),
    view: Literal["issues", "passed"] = Query(default="issues", description="Which findings to group"),
) -> NormalizedReportOut:
    """Normalize one scan payload for one view."""
    return run_normalize(payload, wcag_level, view)
