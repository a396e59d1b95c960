"""
Custom exceptions for Passforge.
"""


class PassforgeException(Exception):
    """Base exception for Passforge."""

    pass


class PasswordGenerationError(PassforgeException, ValueError):
    """The generation request cannot be satisfied."""

    pass


class LengthTooShortError(PasswordGenerationError):
    """Requested length is below the minimum password length."""

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(f"password length must be at least {minimum} characters")


class NoCharactersSelectedError(PasswordGenerationError):
    """No character class is enabled."""

    def __init__(self) -> None:
        super().__init__("at least one character set must be selected")


class LengthTooShortForClassesError(PasswordGenerationError):
    """Length cannot hold one required character per enabled class."""

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"password length must be at least {minimum} for selected character sets"
        )


class EmptyClassPoolError(PasswordGenerationError):
    """An enabled class has no characters left after filtering."""

    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(
            f"no {class_name} characters remain after excluding similar/ambiguous characters"
        )


class RandomSourceError(PassforgeException):
    """The secure random source failed; generation cannot proceed safely."""

    pass


class UnknownCharacterClassError(PassforgeException):
    """A character class is not tied to any request flag."""

    def __init__(self, class_name: str, flag: str):
        self.class_name = class_name
        self.flag = flag
        super().__init__(
            f"character class '{class_name}' has no matching request flag '{flag}'"
        )
