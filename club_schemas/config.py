import os
import logging
from typing import Optional

from dotenv import load_dotenv

from .unions import Resolution

logger = logging.getLogger("club-schemas")


def _get_env(name: str, default: Optional[str] = None) -> str:
    val = os.getenv(name, default)
    if val is None or val.strip() == "":
        if default is None:
            raise RuntimeError(f"Missing required environment variable: {name}")
        return default
    return val.strip()


def feedback_resolution() -> Resolution:
    """How FeedbackQuestion payloads pick their variant: "tagged" (default) or "ordered"."""
    raw = _get_env("FEEDBACK_QUESTION_RESOLUTION", Resolution.TAGGED.value).lower()
    try:
        return Resolution(raw)
    except ValueError:
        logger.error("Invalid FEEDBACK_QUESTION_RESOLUTION: %r", raw)
        raise RuntimeError(
            f"FEEDBACK_QUESTION_RESOLUTION must be one of: {', '.join(r.value for r in Resolution)}"
        ) from None


def log_level() -> int:
    raw = _get_env("CLUB_SCHEMAS_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise RuntimeError(f"Invalid CLUB_SCHEMAS_LOG_LEVEL: {raw}")
    return level


def configure(dotenv_path: Optional[str] = None) -> Resolution:
    """Load .env, apply the log level and return the feedback resolution. Called on first validation."""
    load_dotenv(dotenv_path)
    logger.setLevel(log_level())
    return feedback_resolution()
