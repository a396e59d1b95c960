"""
Request validation for Passforge.

All checks run before any random characters are drawn.
"""

import logging
from typing import List, Tuple

from ..exceptions import (
    EmptyClassPoolError,
    LengthTooShortError,
    LengthTooShortForClassesError,
    NoCharactersSelectedError,
)
from .charsets import CharacterClass

logger = logging.getLogger(__name__)


def validate_length(length: int, minimum: int) -> None:
    """
    Check the requested length against the minimum password length.

    Raises:
        LengthTooShortError: If length is below minimum
    """
    if length < minimum:
        raise LengthTooShortError(length, minimum)


def validate_pools(pools: List[Tuple[CharacterClass, str]]) -> None:
    """
    Check the filtered pools of the enabled classes.

    Args:
        pools: (class, filtered alphabet) pairs for every enabled class

    Raises:
        NoCharactersSelectedError: If no class is enabled
        EmptyClassPoolError: If an enabled class was filtered down to nothing
    """
    if not pools:
        raise NoCharactersSelectedError()

    for char_class, pool in pools:
        if not pool:
            logger.warning(f"Exclusion filters removed every {char_class.name} character")
            raise EmptyClassPoolError(char_class.name)


def validate_class_coverage(length: int, required: int) -> None:
    """
    Check that length leaves room for one required character per class.

    Raises:
        LengthTooShortForClassesError: If length is below the class count
    """
    if length < required:
        raise LengthTooShortForClassesError(length, required)


def validate_request(length: int, min_length: int,
                     pools: List[Tuple[CharacterClass, str]]) -> None:
    """Run every check in order: length, pools, class coverage."""
    validate_length(length, min_length)
    validate_pools(pools)
    validate_class_coverage(length, len(pools))
