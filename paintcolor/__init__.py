"""
paintcolor - color values for UI rendering
==========================================

The Color value type used to describe paint colors consistently across a
rendering toolkit, with its conversions between sRGB storage, 8-bit
channels, hex strings, packed integer literals and linear light.

Quick Start
-----------
>>> from paintcolor import Color, color
>>>
>>> accent = Color.from_hex("#ff8800")
>>> accent.into_rgba8()
(255, 136, 0, 255)
>>>
>>> # Blend in linear light, then come back to sRGB
>>> r, g, b, a = accent.into_linear()
>>> darker = Color.from_linear_rgba(r * 0.5, g * 0.5, b * 0.5, a)
>>>
>>> color(0x123) == color(0x112233)
True

Modules
-------
- colors: Color, constants and the ``color`` literal constructor
- conversions: sRGB transfer curve, 8-bit quantization, hex parsing
- window: window event data carriers
- config: debug-check settings
"""
import logging

from .colors import Color, BLACK, WHITE, TRANSPARENT, color, from_channels, from_packed
from .conversions import (
    gamma_encode,
    gamma_decode,
    np_gamma_encode,
    np_gamma_decode,
    np_from_linear_rgba,
    np_into_linear,
)
from .errors import ColorError, InvalidHex, InvariantViolation
from .config import debug_checks, debug_checks_enabled, set_debug_checks

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # color type
    "Color",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
    "color",
    "from_channels",
    "from_packed",
    # conversions
    "gamma_encode",
    "gamma_decode",
    "np_gamma_encode",
    "np_gamma_decode",
    "np_from_linear_rgba",
    "np_into_linear",
    # errors
    "ColorError",
    "InvalidHex",
    "InvariantViolation",
    # settings
    "debug_checks",
    "debug_checks_enabled",
    "set_debug_checks",
    "__version__",
]
