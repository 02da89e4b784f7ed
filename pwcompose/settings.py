import logging
import os
from typing import List, Optional, Tuple

from .generators import CharacterClass

logger = logging.getLogger("pwcompose.settings")


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, not a number; using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%d, below %d; using %d", name, value, minimum, default)
        return default
    return value


def _env_list(name: str) -> Optional[List[str]]:
    raw = os.getenv(name)
    if not raw:
        return None
    return [item.strip() for item in raw.split(",") if item.strip()]


SYMBOL_LENGTH = _env_int("PWCOMPOSE_SYMBOLS", 2)
DIGIT_LENGTH = _env_int("PWCOMPOSE_DIGITS", 2)
UPPER_LENGTH = _env_int("PWCOMPOSE_UPPER", 2)
LOWER_LENGTH = _env_int("PWCOMPOSE_LOWER", 4)

MAX_LENGTH = _env_int("PWCOMPOSE_MAX_LENGTH", 256, minimum=1)
MAX_COUNT = _env_int("PWCOMPOSE_MAX_COUNT", 50, minimum=1)
MAX_CLASSES = _env_int("PWCOMPOSE_MAX_CLASSES", 16, minimum=1)

ALLOWED_ORIGINS = _env_list("ALLOWED_ORIGINS")
DEBUG = _env_bool("PWCOMPOSE_DEBUG", False)


def default_lengths() -> List[Tuple[CharacterClass, int]]:
    return [
        (CharacterClass.SYMBOL, SYMBOL_LENGTH),
        (CharacterClass.DIGIT, DIGIT_LENGTH),
        (CharacterClass.UPPER, UPPER_LENGTH),
        (CharacterClass.LOWER, LOWER_LENGTH),
    ]
