from __future__ import annotations
from typing import ClassVar, Iterator, Sequence, Union
import numpy as np
from numpy import ndarray

from ..conversions.hex import parse_hex
from ..conversions.rgba8 import to_rgba8
from ..conversions.transfer import gamma_decode, gamma_encode
from ..types.color_types import F32_ONE, F32_U8_MAX, U8_MAX, Channel, LinearRgba, Rgba8, Scalar, f32
from ..utils.invariants import debug_check, in_unit_range


class Color:
    """
    A color in the sRGB color space.

    Channels are float32 values, nominally in [0, 1]. The constructor and
    the ``from_rgb*`` paths trust their input; ``Color.new`` checks ranges
    while debug checks are enabled.

    Instances are frozen after construction; ``invert`` is the one
    operation that changes a color in place, and it refuses to touch the
    shared constants ``BLACK``, ``WHITE`` and ``TRANSPARENT``.
    """
    __slots__ = ('r', 'g', 'b', 'a', '_is_frozen', '_is_constant')

    r: np.float32
    g: np.float32
    b: np.float32
    a: np.float32

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: Channel = 0.0, g: Channel = 0.0, b: Channel = 0.0, a: Channel = 0.0) -> None:
        self.r = f32(r)
        self.g = f32(g)
        self.b = f32(b)
        self.a = f32(a)
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def new(cls, r: Channel, g: Channel, b: Channel, a: Channel) -> Color:
        """Create a Color, checking that every channel lies in [0, 1]."""
        debug_check(in_unit_range(r), "Red component must be on [0, 1]")
        debug_check(in_unit_range(g), "Green component must be on [0, 1]")
        debug_check(in_unit_range(b), "Blue component must be on [0, 1]")
        debug_check(in_unit_range(a), "Alpha component must be on [0, 1]")
        return cls(r, g, b, a)

    @classmethod
    def from_rgb(cls, r: Channel, g: Channel, b: Channel) -> Color:
        return cls.from_rgba(r, g, b, 1.0)

    @classmethod
    def from_rgba(cls, r: Channel, g: Channel, b: Channel, a: Channel) -> Color:
        return cls(r, g, b, a)

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> Color:
        return cls.from_rgba8(r, g, b, 1.0)

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: Channel) -> Color:
        """Create a Color from 8-bit r, g, b and a float alpha."""
        debug_check(0 <= r <= U8_MAX, "R channel must be in [0, 255] range.")
        debug_check(0 <= g <= U8_MAX, "G channel must be in [0, 255] range.")
        debug_check(0 <= b <= U8_MAX, "B channel must be in [0, 255] range.")
        return cls(f32(r) / F32_U8_MAX, f32(g) / F32_U8_MAX, f32(b) / F32_U8_MAX, a)

    @classmethod
    def from_hex(cls, s: str) -> Color:
        """
        Create a Color from a hex string.

        Supported formats are #rrggbb, #rrggbbaa, #rgb and #rgba. The "#" is
        optional. Both uppercase and lowercase are supported.

        Raises:
            InvalidHex: if the string has another length or a non-hex digit.
        """
        r, g, b, a = parse_hex(s)
        alpha = F32_ONE if a is None else f32(a) / F32_U8_MAX
        return cls(f32(r) / F32_U8_MAX, f32(g) / F32_U8_MAX, f32(b) / F32_U8_MAX, alpha)

    @classmethod
    def from_linear_rgba(cls, r: Scalar, g: Scalar, b: Scalar, a: Scalar) -> Color:
        """Create a Color from linear-light components; alpha is passed through."""
        return cls(
            gamma_encode(float(r)),
            gamma_encode(float(g)),
            gamma_encode(float(b)),
            a,
        )

    @classmethod
    def from_array(cls, values: Union[Sequence[Scalar], ndarray]) -> Color:
        """Create a Color from 3 (opaque) or 4 channel values, checked like ``new``."""
        arr = np.asarray(values, dtype=np.float32)
        if arr.shape == (3,):
            return cls.new(arr[0], arr[1], arr[2], F32_ONE)
        if arr.shape == (4,):
            return cls.new(arr[0], arr[1], arr[2], arr[3])
        raise ValueError(f"Color expects 3 or 4 channels, got shape {arr.shape}")

    # ------------------ CONVERSIONS ------------------
    def into_rgba8(self) -> Rgba8:
        """Convert the color into its RGBA8 equivalent."""
        return to_rgba8(self.r, self.g, self.b, self.a)

    def into_linear(self) -> LinearRgba:
        """Convert the color into linear-light r, g, b plus the unchanged alpha."""
        return (
            float(f32(gamma_decode(float(self.r)))),
            float(f32(gamma_decode(float(self.g)))),
            float(f32(gamma_decode(float(self.b)))),
            float(self.a),
        )

    def to_array(self) -> ndarray:
        return np.array([self.r, self.g, self.b, self.a], dtype=np.float32)

    # ------------------ MANIPULATION ------------------
    def invert(self) -> None:
        """
        Invert the color in place. Alpha is unchanged.

        Raises:
            AttributeError: on the shared constants; use ``inverse()`` or
                invert a ``copy.copy`` of them instead.
        """
        if getattr(self, '_is_constant', False):
            raise AttributeError(f"{self!r} is a shared constant; cannot invert it in place")
        r, g, b = self.r, self.g, self.b
        super().__setattr__('r', F32_ONE - r)
        super().__setattr__('g', F32_ONE - g)
        super().__setattr__('b', F32_ONE - b)

    def inverse(self) -> Color:
        """Return the inverted color."""
        return Color.new(F32_ONE - self.r, F32_ONE - self.g, F32_ONE - self.b, self.a)

    def scale_alpha(self, factor: Scalar) -> Color:
        """Return a copy with alpha multiplied by ``factor``. No clamping."""
        return Color(self.r, self.g, self.b, self.a * f32(factor))

    # ------------------ VALUE PROTOCOL ------------------
    def __iter__(self) -> Iterator[np.float32]:
        return iter((self.r, self.g, self.b, self.a))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(
            self.r == other.r and self.g == other.g and self.b == other.b and self.a == other.a
        )

    # invert() mutates, so colors cannot be dict keys
    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self):
        return (self.__class__, (self.r, self.g, self.b, self.a))

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


def _constant(r: float, g: float, b: float, a: float) -> Color:
    c = Color(r, g, b, a)
    object.__setattr__(c, '_is_constant', True)
    return c


Color.BLACK = _constant(0.0, 0.0, 0.0, 1.0)
Color.WHITE = _constant(1.0, 1.0, 1.0, 1.0)
Color.TRANSPARENT = _constant(0.0, 0.0, 0.0, 0.0)

BLACK = Color.BLACK
WHITE = Color.WHITE
TRANSPARENT = Color.TRANSPARENT
