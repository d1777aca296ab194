"""Configuration from environment."""

from deps import Path, load_dotenv, logging, os

from a11y_report.finding import DEFAULT_WCAG_LEVEL, WcagLevel

logger = logging.getLogger(__name__)

ENV_FILE = Path(".env")

load_dotenv(ENV_FILE)


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000


def get_log_level() -> str:
    """Logging level name. Default: INFO."""
    level = os.environ.get("A11Y_LOG_LEVEL", "INFO").strip().upper()
    return level if isinstance(logging.getLevelName(level), int) else "INFO"


def get_raw_default_wcag_level() -> str:
    return os.environ.get("A11Y_DEFAULT_WCAG_LEVEL", DEFAULT_WCAG_LEVEL.value).strip()


def get_default_wcag_level() -> WcagLevel:
    """WCAG level used when neither the request nor the payload names one. Default: AA."""
    try:
        return WcagLevel.parse(get_raw_default_wcag_level())
    except ValueError:
        return DEFAULT_WCAG_LEVEL
