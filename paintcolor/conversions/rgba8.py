import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import F32_U8_MAX, U8_MAX, Rgba8


def np_round_half_away(x: NDArray) -> NDArray:
    """Round to nearest, ties away from zero (np.round rounds ties to even)."""
    # float32 products fit exactly in float64, so adding 0.5 there is exact
    x = np.asarray(x, dtype=np.float64)
    return np.copysign(np.floor(np.abs(x) + 0.5), x)


def np_to_rgba8(channels: NDArray) -> NDArray:
    """
    Quantize normalized channels to 8 bits.

    Each channel is scaled by 255 in float32, rounded with ties away from
    zero and saturated into [0, 255]; NaN maps to 0.
    """
    scaled = np.asarray(channels, dtype=np.float32) * F32_U8_MAX
    rounded = np_round_half_away(scaled)
    rounded = np.nan_to_num(rounded, nan=0.0, posinf=U8_MAX, neginf=0.0)
    return np.clip(rounded, 0, U8_MAX).astype(np.uint8)


def to_rgba8(r, g, b, a) -> Rgba8:
    """Scalar form of np_to_rgba8 returning plain ints."""
    r8, g8, b8, a8 = np_to_rgba8(np.array([r, g, b, a], dtype=np.float32)).tolist()
    return (r8, g8, b8, a8)
