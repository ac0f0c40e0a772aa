from __future__ import annotations

from .. import config
from ..errors import InvariantViolation


def in_unit_range(value) -> bool:
    """Check if a channel value lies in the closed interval [0, 1]."""
    return 0.0 <= value <= 1.0


def debug_check(condition: bool, message: str) -> None:
    """Raise InvariantViolation if ``condition`` is false and debug checks are on.

    Used for caller contracts, never for input that may legitimately be bad
    at runtime (hex parsing reports through InvalidHex instead).
    """
    if not condition and config.debug_checks_enabled():
        raise InvariantViolation(message)
