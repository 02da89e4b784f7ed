from .generators import (
    DIGITS,
    LOWER_LETTERS,
    SYMBOLS,
    UPPER_LETTERS,
    CharacterClass,
    CompositeGenerator,
    ConfigurationError,
    LeafGenerator,
    default_generator,
    digits,
    lower_letters,
    symbols,
    upper_letters,
)

__all__ = [
    "DIGITS",
    "LOWER_LETTERS",
    "SYMBOLS",
    "UPPER_LETTERS",
    "CharacterClass",
    "CompositeGenerator",
    "ConfigurationError",
    "LeafGenerator",
    "default_generator",
    "digits",
    "lower_letters",
    "symbols",
    "upper_letters",
]
