"""Route handlers."""

from .health import router as health_router
from .normalize import router as normalize_router
from .root import router as root_router

__all__ = ["root_router", "health_router", "normalize_router"]
