"""Compact color literals.

``color`` mirrors the usual shorthand for writing colors in code::

    color(0, 0, 0)              # opaque black
    color(0, 0, 0, 0.0)         # transparent
    color(0xffffff)             # packed hex, opaque
    color(0xffffff, 0.5)        # packed hex with alpha
    color(0x123)                # short form, same as color(0x112233)

Packed values up to 0xfff are read as three-digit short codes. Channel
ranges and the 0xffffff ceiling are caller contracts, checked only while
debug checks are enabled.
"""
from __future__ import annotations
import operator

from .color import Color
from ..conversions.hex import expand_nibble
from ..types.color_types import F32_U8_MAX, Scalar, f32
from ..utils.invariants import debug_check, in_unit_range

SHORT_CODE_MAX = 0xFFF
PACKED_MAX = 0xFFFFFF
_U32_MASK = 0xFFFFFFFF


def from_channels(r: Scalar, g: Scalar, b: Scalar, a: Scalar = 1.0) -> Color:
    """Build a Color from 0-255 channel values and a float alpha."""
    rf = f32(r) / F32_U8_MAX
    gf = f32(g) / F32_U8_MAX
    bf = f32(b) / F32_U8_MAX

    debug_check(in_unit_range(rf), "R channel must be in [0, 255] range.")
    debug_check(in_unit_range(gf), "G channel must be in [0, 255] range.")
    debug_check(in_unit_range(bf), "B channel must be in [0, 255] range.")

    return Color(rf, gf, bf, a)


def from_packed(code: int, a: Scalar = 1.0) -> Color:
    """Build a Color from a packed hex integer such as 0xff8800 or 0xf80."""
    code = operator.index(code)
    debug_check(0 <= code <= PACKED_MAX, "color value must not exceed 0xffffff")
    code &= _U32_MASK

    if code <= SHORT_CODE_MAX:
        r = (code & 0xF00) >> 8
        g = (code & 0x0F0) >> 4
        b = code & 0x00F
        return from_channels(expand_nibble(r), expand_nibble(g), expand_nibble(b), a)

    r = (code & 0xFF0000) >> 16
    g = (code & 0x00FF00) >> 8
    b = code & 0x0000FF
    return from_channels(r, g, b, a)


def color(*args) -> Color:
    """
    Create a Color with short syntax.

    Accepts ``(hex)``, ``(hex, a)``, ``(r, g, b)`` or ``(r, g, b, a)``.
    """
    if len(args) in (1, 2):
        return from_packed(*args)
    if len(args) in (3, 4):
        return from_channels(*args)
    raise TypeError(f"color() takes 1 to 4 arguments ({len(args)} given)")
