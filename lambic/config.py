from __future__ import annotations
import logging
import os

logger = logging.getLogger(__name__)

# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def int_from_env(var: str) -> int | None:
    raw = os.environ.get(var)
    if not raw:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", var, raw)
        return None
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", var, raw)
        return None
    return value


def get_recursion_limit() -> int | None:
    """Minimum host recursion limit requested via LAMBIC_RECURSION_LIMIT, if any."""
    return int_from_env('LAMBIC_RECURSION_LIMIT')


def get_log_level() -> str:
    level = os.environ.get('LAMBIC_LOG_LEVEL', '').strip().upper()
    if not level:
        return _DEFAULT_LOG_LEVEL
    if level not in LOG_LEVELS:
        logger.warning("Ignoring LAMBIC_LOG_LEVEL=%r: not a log level", level)
        return _DEFAULT_LOG_LEVEL
    return level
