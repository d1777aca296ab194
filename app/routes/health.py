"""Health check route."""

from deps import APIRouter

from ..config import get_default_wcag_level

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check, with the WCAG level applied when requests name none."""
    return {"status": "ok", "default_wcag_level": get_default_wcag_level().value}
