"""Exceptions raised by paintcolor."""


class ColorError(ValueError):
    """Errors that can occur when constructing a Color."""


class InvalidHex(ColorError):
    """The specified hex string is invalid. See supported formats."""

    def __init__(self, message: str = "The specified hex string is invalid. See supported formats.") -> None:
        super().__init__(message)


class InvariantViolation(AssertionError):
    """A caller broke a precondition that is only checked in debug mode.

    Not a ColorError: this signals a programmer error, not bad input.
    """
