"""
Thread-safe rate-limited logging.

Canonicalization and transfer parsing run on hot paths; the same fallback or
skipped-message notice would otherwise be logged once per call.
"""
import logging
import threading
from typing import Optional

from cachetools import TTLCache

logger = logging.getLogger(__name__)

_log_cache: TTLCache = TTLCache(maxsize=256, ttl=3600)
_log_cache_lock = threading.RLock()


def rate_limited_log(
    message: str,
    level: str = "debug",
    logger_instance: Optional[logging.Logger] = None
) -> bool:
    """
    Log a message at most once per cache TTL.

    Args:
        message: Message to log
        level: Log level name (debug, info, warning, error, critical)
        logger_instance: Logger to use (defaults to module logger)

    Returns:
        True if the message was emitted, False if it was suppressed
    """
    log_instance = logger_instance or logger
    log_method = getattr(log_instance, level.lower(), log_instance.debug)
    key = f"{log_instance.name}:{level}:{message}"

    with _log_cache_lock:
        if key in _log_cache:
            return False
        _log_cache[key] = True
    log_method(message)
    return True


def reset_rate_limited_log() -> None:
    """Forget every previously logged message (used by tests)."""
    with _log_cache_lock:
        _log_cache.clear()
