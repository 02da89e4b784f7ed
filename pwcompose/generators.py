"""Compose passwords from fixed-length runs of character classes.

A :class:`LeafGenerator` is a plain ``(alphabet, length)`` value. A
:class:`CompositeGenerator` holds leaves in registration order, samples each
run uniformly with replacement, joins the runs and shuffles the whole thing so
the class boundaries are not visible in the output.

A composite owns its random source and is not thread-safe. Use one instance
per thread.
"""
from __future__ import annotations

import logging
import secrets
from enum import Enum
from random import Random
from typing import Iterable, List, Optional, Tuple, Union

logger = logging.getLogger("pwcompose.generators")

DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()[]{}?<>"
# X and W are swapped; kept as shipped.
UPPER_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVXYWZ"
LOWER_LETTERS = UPPER_LETTERS.lower()


class ConfigurationError(ValueError):
    """Raised when a generator is set up with values it cannot sample from."""


class LeafGenerator:
    """A run of ``length`` characters drawn from ``alphabet``."""

    __slots__ = ("_alphabet", "_length")

    def __init__(self, alphabet: str, length: int):
        if not isinstance(alphabet, str):
            raise ConfigurationError(f"Alphabet must be a string, got {alphabet!r}")
        if not alphabet:
            raise ConfigurationError("Alphabet must contain at least one character")
        if isinstance(length, bool) or not isinstance(length, int):
            raise ConfigurationError(f"Length must be an integer, got {length!r}")
        if length < 0:
            raise ConfigurationError(f"Length must be non-negative, got {length}")
        self._alphabet = alphabet
        self._length = length

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def length(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LeafGenerator):
            return NotImplemented
        return (self._alphabet, self._length) == (other._alphabet, other._length)

    def __hash__(self) -> int:
        return hash((self._alphabet, self._length))

    def __repr__(self) -> str:
        return f"LeafGenerator(alphabet={self._alphabet!r}, length={self._length})"


class CharacterClass(str, Enum):
    SYMBOL = "symbol"
    DIGIT = "digit"
    UPPER = "upper"
    LOWER = "lower"

    @property
    def alphabet(self) -> str:
        return _ALPHABETS[self]

    def leaf(self, length: int) -> LeafGenerator:
        return LeafGenerator(self.alphabet, length)

    @classmethod
    def parse(cls, value: Union["CharacterClass", str]) -> "CharacterClass":
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"Unknown character class {value!r} (expected one of: {choices})"
            ) from None


_ALPHABETS = {
    CharacterClass.SYMBOL: SYMBOLS,
    CharacterClass.DIGIT: DIGITS,
    CharacterClass.UPPER: UPPER_LETTERS,
    CharacterClass.LOWER: LOWER_LETTERS,
}


def digits(length: int) -> LeafGenerator:
    return CharacterClass.DIGIT.leaf(length)


def symbols(length: int) -> LeafGenerator:
    return CharacterClass.SYMBOL.leaf(length)


def upper_letters(length: int) -> LeafGenerator:
    return CharacterClass.UPPER.leaf(length)


def lower_letters(length: int) -> LeafGenerator:
    return CharacterClass.LOWER.leaf(length)


class CompositeGenerator:
    """Concatenate registered leaves in order, then shuffle the result.

    ``rng`` may be any :class:`random.Random` compatible object. It defaults
    to a :class:`secrets.SystemRandom` owned by this instance and is never
    re-seeded, so repeated :meth:`generate` calls keep drawing from it.
    """

    def __init__(self, rng: Optional[Random] = None):
        self._rng = rng if rng is not None else secrets.SystemRandom()
        self._leaves: List[LeafGenerator] = []

    @classmethod
    def from_lengths(
        cls,
        pairs: Iterable[Tuple[Union[CharacterClass, str], int]],
        rng: Optional[Random] = None,
    ) -> "CompositeGenerator":
        composite = cls(rng)
        for name, length in pairs:
            composite.register(CharacterClass.parse(name).leaf(length))
        return composite

    @property
    def leaves(self) -> Tuple[LeafGenerator, ...]:
        return tuple(self._leaves)

    @property
    def length(self) -> int:
        return sum(leaf.length for leaf in self._leaves)

    def __len__(self) -> int:
        return len(self._leaves)

    def register(self, leaf: LeafGenerator) -> "CompositeGenerator":
        if not isinstance(leaf, LeafGenerator):
            raise TypeError(
                f"register() expects a LeafGenerator, got {type(leaf).__name__}"
            )
        self._leaves.append(leaf)
        logger.debug(
            "Registered leaf #%d (%d chars from a %d-symbol alphabet)",
            len(self._leaves),
            leaf.length,
            len(leaf.alphabet),
        )
        return self

    def generate(self) -> str:
        chars: List[str] = []
        for leaf in self._leaves:
            alphabet = leaf.alphabet
            # randrange(n) covers 0..n-1 inclusive.
            chars.extend(
                alphabet[self._rng.randrange(len(alphabet))]
                for _ in range(leaf.length)
            )
        self._rng.shuffle(chars)
        logger.debug(
            "Generated %d-character password from %d leaves",
            len(chars),
            len(self._leaves),
        )
        return "".join(chars)

    def generate_many(self, count: int) -> List[str]:
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ConfigurationError(
                f"Count must be a non-negative integer, got {count!r}"
            )
        return [self.generate() for _ in range(count)]


def default_generator(rng: Optional[Random] = None) -> CompositeGenerator:
    """Two symbols, two digits, two upper-case and four lower-case letters."""
    return (
        CompositeGenerator(rng)
        .register(symbols(2))
        .register(digits(2))
        .register(upper_letters(2))
        .register(lower_letters(4))
    )
