"""Build a composite password interactively."""
import logging

from . import settings
from .generators import CharacterClass, CompositeGenerator, ConfigurationError

PROMPTS = {
    CharacterClass.SYMBOL: "How many symbols?",
    CharacterClass.DIGIT: "How many digits?",
    CharacterClass.UPPER: "How many upper-case letters?",
    CharacterClass.LOWER: "How many lower-case letters?",
}


def ask_length(character_class, default):
    raw = input(f"{PROMPTS[character_class]} (default {default}) ")
    try:
        return int(raw or default)
    except ValueError:
        print(f"That was not a number, using {default}.")
        return default


def main():
    logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.WARNING)
    print("Composite Password Generator")
    print("-" * 32)
    pairs = [
        (character_class, ask_length(character_class, default))
        for character_class, default in settings.default_lengths()
    ]
    try:
        generator = CompositeGenerator.from_lengths(pairs)
    except ConfigurationError as exc:
        print(f"Could not build password: {exc}")
    else:
        print(f"Your password: {generator.generate()}")


if __name__ == "__main__":
    main()
