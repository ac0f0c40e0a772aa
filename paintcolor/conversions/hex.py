"""Hexadecimal color string parsing.

Supported formats are ``rgb``, ``rgba``, ``rrggbb`` and ``rrggbbaa``, each
with an optional leading ``#``. Digits are case-insensitive.
"""
from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from ..errors import InvalidHex

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")

# number of channels and digits per channel, keyed by string length
HEX_LAYOUTS = {
    3: (3, 1),
    4: (4, 1),
    6: (3, 2),
    8: (4, 2),
}

HexBytes = Tuple[int, int, int, Optional[int]]


def expand_nibble(d: int) -> int:
    """Expand a single hex digit to a full byte, e.g. 0xf -> 0xff."""
    return d * 16 + d


def parse_hex(s: str) -> HexBytes:
    """
    Parse a hex color string into 8-bit channels.

    Args:
        s: Color string, e.g. ``"#f80"`` or ``"00ff0080"``.

    Returns:
        ``(r, g, b, a)`` bytes; ``a`` is None for the forms without alpha.

    Raises:
        InvalidHex: wrong length or a non-hex character.
    """
    digits = s[1:] if s.startswith("#") else s
    layout = HEX_LAYOUTS.get(len(digits))
    if layout is None or not _HEX_DIGITS.fullmatch(digits):
        logger.debug("Rejected hex color %r", s)
        raise InvalidHex()

    n_channels, width = layout
    values = [int(digits[i * width:(i + 1) * width], 16) for i in range(n_channels)]
    if width == 1:
        values = [expand_nibble(v) for v in values]

    if n_channels == 3:
        r, g, b = values
        return r, g, b, None
    r, g, b, a = values
    return r, g, b, a
