"""
Character classes and similar/ambiguous character filtering.
"""

from dataclasses import dataclass
from typing import Tuple

# Base alphabets. Digits and letters already leave out 0, 1, I, O, l and o.
DIGIT_CHARS = "23456789"
SYMBOL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
UPPER_CHARS = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWER_CHARS = "abcdefghijkmnpqrstuvwxyz"

# Characters that look alike in many fonts
SIMILAR_CHARS = frozenset("il1Lo0O")

# Characters that are awkward in shells, config files and source code
AMBIGUOUS_CHARS = frozenset("{}[]()/\\'\"`~,;:.<>")


@dataclass(frozen=True)
class CharacterClass:
    """A named, fixed alphabet a password can draw from."""

    name: str
    chars: str
    # GenerationRequest field that switches this class on; defaults to name
    flag: str = ""

    def filtered(self, exclude_similar: bool, exclude_ambiguous: bool) -> str:
        """Return this class's alphabet with the active exclusions applied."""
        return filter_chars(self.chars, exclude_similar, exclude_ambiguous)


DIGITS = CharacterClass("digits", DIGIT_CHARS, "digits")
SYMBOLS = CharacterClass("symbols", SYMBOL_CHARS, "symbols")
UPPERCASE = CharacterClass("uppercase", UPPER_CHARS, "upper")
LOWERCASE = CharacterClass("lowercase", LOWER_CHARS, "lower")

# Order matters: required characters are drawn in this order before shuffling
CHARACTER_CLASSES: Tuple[CharacterClass, ...] = (DIGITS, SYMBOLS, UPPERCASE, LOWERCASE)


def filter_chars(chars: str, exclude_similar: bool, exclude_ambiguous: bool) -> str:
    """
    Remove similar and/or ambiguous characters from an alphabet.

    Args:
        chars: The alphabet to filter
        exclude_similar: Drop characters in SIMILAR_CHARS
        exclude_ambiguous: Drop characters in AMBIGUOUS_CHARS

    Returns:
        The remaining characters, in their original order
    """
    return "".join(
        c for c in chars
        if not (exclude_similar and c in SIMILAR_CHARS)
        and not (exclude_ambiguous and c in AMBIGUOUS_CHARS)
    )
