"""
paintcolor conversions
======================

Pure functions between the canonical sRGB channel representation and its
external encodings.

Transfer curve:
    gamma_encode(u) / np_gamma_encode(arr)
        linear light -> sRGB
    gamma_decode(u) / np_gamma_decode(arr)
        sRGB -> linear light
    np_from_linear_rgba(arr) / np_into_linear(arr)
        whole RGBA arrays, alpha passed through

8-bit channels:
    to_rgba8(r, g, b, a) / np_to_rgba8(arr)

Hex strings:
    parse_hex(s)
"""

from .transfer import (
    gamma_encode,
    gamma_decode,
    np_gamma_encode,
    np_gamma_decode,
    np_from_linear_rgba,
    np_into_linear,
)
from .rgba8 import to_rgba8, np_to_rgba8
from .hex import parse_hex, expand_nibble

__all__ = [
    'gamma_encode',
    'gamma_decode',
    'np_gamma_encode',
    'np_gamma_decode',
    'np_from_linear_rgba',
    'np_into_linear',
    'to_rgba8',
    'np_to_rgba8',
    'parse_hex',
    'expand_nibble',
]
