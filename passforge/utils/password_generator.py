"""
Secure password generation utilities.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Callable, List, MutableSequence, Optional, Tuple

from ..exceptions import RandomSourceError, UnknownCharacterClassError
from .charsets import CHARACTER_CLASSES, CharacterClass
from .validation import validate_request

logger = logging.getLogger(__name__)

# Returns a uniform integer in [0, n)
RandBelow = Callable[[int], int]

MIN_LENGTH = 8
DEFAULT_LENGTH = 16

# Request fields that switch a character class on
CLASS_FLAGS = ("digits", "symbols", "upper", "lower")


@dataclass(frozen=True)
class GenerationRequest:
    """Options for a single password generation."""

    length: int = DEFAULT_LENGTH
    digits: bool = True
    symbols: bool = True
    upper: bool = True
    lower: bool = True
    exclude_similar: bool = True
    exclude_ambiguous: bool = True
    min_length: int = MIN_LENGTH

    def is_enabled(self, char_class: CharacterClass) -> bool:
        """
        Whether the flag for this character class is on.

        Raises:
            UnknownCharacterClassError: If the class maps to no request flag
        """
        flag = char_class.flag or char_class.name
        if flag not in CLASS_FLAGS:
            raise UnknownCharacterClassError(char_class.name, flag)
        return getattr(self, flag)


def _draw(randbelow: RandBelow, n: int) -> int:
    """Draw an index in [0, n) from the secure source."""
    try:
        return randbelow(n)
    except (OSError, NotImplementedError) as e:
        logger.error(f"Secure random source failed: {e}")
        raise RandomSourceError(f"secure random source unavailable: {e}") from e


def random_char(pool: str, randbelow: RandBelow = secrets.randbelow) -> str:
    """
    Pick one character from pool with uniform probability.

    Args:
        pool: Non-empty string of candidate characters
        randbelow: Secure source of uniform integers

    Returns:
        The selected character

    Raises:
        ValueError: If pool is empty
        RandomSourceError: If the random source fails
    """
    if not pool:
        raise ValueError("Cannot select a character from an empty pool")
    return pool[_draw(randbelow, len(pool))]


def shuffle(chars: MutableSequence[str], randbelow: RandBelow = secrets.randbelow) -> None:
    """Fisher-Yates shuffle in place, walking from the last index down."""
    for i in range(len(chars) - 1, 0, -1):
        j = _draw(randbelow, i + 1)
        chars[i], chars[j] = chars[j], chars[i]


class PasswordGenerator:
    """Generate secure passwords with one character from every enabled class."""

    CHARACTER_CLASSES: Tuple[CharacterClass, ...] = CHARACTER_CLASSES

    def __init__(self,
                 request: Optional[GenerationRequest] = None,
                 randbelow: Optional[RandBelow] = None):
        """
        Initialize password generator and validate the request.

        Args:
            request: Generation options (defaults to GenerationRequest())
            randbelow: Secure integer source, secrets.randbelow by default

        Raises:
            PasswordGenerationError: If the request cannot be satisfied
            UnknownCharacterClassError: If a class maps to no request flag
        """
        self.request = request or GenerationRequest()
        self.randbelow = randbelow or secrets.randbelow

        self.pools = self._build_pools()
        validate_request(self.request.length, self.request.min_length, self.pools)

        self.charset = "".join(pool for _, pool in self.pools)

    def _build_pools(self) -> List[Tuple[CharacterClass, str]]:
        """Filtered alphabet of each enabled class, in class order."""
        return [
            (char_class, char_class.filtered(self.request.exclude_similar,
                                             self.request.exclude_ambiguous))
            for char_class in self.CHARACTER_CLASSES
            if self.request.is_enabled(char_class)
        ]

    def generate(self) -> str:
        """
        Generate a secure password.

        Returns:
            Generated password string

        Raises:
            RandomSourceError: If the secure random source fails
        """
        logger.debug(
            f"Generating {self.request.length}-character password from "
            f"{', '.join(c.name for c, _ in self.pools)} "
            f"({len(self.charset)} candidate characters)"
        )

        # One guaranteed character per class, drawn from that class only
        password = [random_char(pool, self.randbelow) for _, pool in self.pools]

        while len(password) < self.request.length:
            password.append(random_char(self.charset, self.randbelow))

        shuffle(password, self.randbelow)

        return "".join(password)

    def get_charset_info(self) -> str:
        """
        Get human-readable description of character set.

        Returns:
            Description of enabled character types
        """
        info = ", ".join(char_class.name for char_class, _ in self.pools)

        excluded = []
        if self.request.exclude_similar:
            excluded.append("similar")
        if self.request.exclude_ambiguous:
            excluded.append("ambiguous")

        if excluded:
            info += f" (excluding {' and '.join(excluded)} chars)"

        return info


def generate_password(length: int = DEFAULT_LENGTH,
                      digits: bool = True,
                      symbols: bool = True,
                      upper: bool = True,
                      lower: bool = True,
                      exclude_similar: bool = True,
                      exclude_ambiguous: bool = True) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Password length (at least 8)
        digits: Include digits
        symbols: Include symbols
        upper: Include uppercase letters
        lower: Include lowercase letters
        exclude_similar: Exclude look-alike characters (i, l, 1, L, o, 0, O)
        exclude_ambiguous: Exclude brackets, quotes and similar punctuation

    Returns:
        Generated password string
    """
    request = GenerationRequest(
        length=length,
        digits=digits,
        symbols=symbols,
        upper=upper,
        lower=lower,
        exclude_similar=exclude_similar,
        exclude_ambiguous=exclude_ambiguous,
    )

    return PasswordGenerator(request).generate()
