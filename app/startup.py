"""Startup validation and logging configuration."""

from deps import logging

from .config import ENV_FILE, get_default_wcag_level, get_log_level, get_raw_default_wcag_level

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Root logging format and level from A11Y_LOG_LEVEL.

    Engine warnings (e.g. PartialDataWarning) are routed to the py.warnings
    logger instead of stderr.
    """
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.captureWarnings(True)


def validate_config() -> None:
    """Validate config at startup and warn about unusable values."""
    if not ENV_FILE.exists():
        logger.info(".env file not found; using process environment and defaults.")
    raw_level = get_raw_default_wcag_level()
    level = get_default_wcag_level()
    if raw_level.upper() != level.value:
        logger.warning(
            "A11Y_DEFAULT_WCAG_LEVEL=%r is not a WCAG level (A, AA, AAA); using %s.",
            raw_level,
            level.value,
        )
