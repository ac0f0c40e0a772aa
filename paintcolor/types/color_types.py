from __future__ import annotations
from typing import Tuple, Union
import numpy as np

Scalar = int | float
Channel = Union[float, np.float32]
Rgba8 = Tuple[int, int, int, int]
LinearRgba = Tuple[float, float, float, float]

# 8-bit channel scale
U8_MAX = 255
F32_U8_MAX = np.float32(255.0)
F32_ONE = np.float32(1.0)


def f32(value: Scalar) -> np.float32:
    """Coerce a number to a float32 channel value."""
    return np.float32(value)
