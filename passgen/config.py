import logging
import os

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int, minimum: int = 1) -> int:
    """
    Reads an integer setting from the environment. Values that are not numbers
    fall back to `default`; values below `minimum` are raised to it.
    """
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("%s=%d is below %d, using %d", name, value, minimum, minimum)
        return minimum
    return value


class Config:
    # retry cap for candidates rejected by the weak-pattern check
    MAX_ATTEMPTS = _int_env('PASSGEN_MAX_ATTEMPTS', 1000)

    # length range offered by the console prompts (the core itself only needs >= 1)
    MIN_LENGTH = 8
    MAX_LENGTH = 128
    DEFAULT_LENGTH = 16

    MAX_BATCH = 50

    LOG_LEVEL = os.environ.get('PASSGEN_LOG_LEVEL', 'WARNING').upper()
