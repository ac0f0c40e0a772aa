import numpy as np
from numpy import ndarray as NDArray

# sRGB transfer curve (IEC 61966-2-1)
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_GAMMA = 2.4
LINEAR_TO_SRGB_TH = 0.0031308
SRGB_TO_LINEAR_TH = 0.04045


def gamma_encode(u: float) -> float:
    """Convert a linear-light channel to nonlinear sRGB."""
    if u < LINEAR_TO_SRGB_TH:
        return SRGB_SLOPE * u
    return SRGB_DIVISOR * (u ** (1 / SRGB_GAMMA)) - SRGB_OFFSET


def gamma_decode(u: float) -> float:
    """Convert a nonlinear sRGB channel to linear light."""
    if u < SRGB_TO_LINEAR_TH:
        return u / SRGB_SLOPE
    return ((u + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA


def np_gamma_encode(u: NDArray) -> NDArray:
    """Vectorized: Convert linear-light channels to nonlinear sRGB."""
    u = np.asarray(u, dtype=float)
    # the discarded branch of np.where is still evaluated for negative input
    with np.errstate(invalid="ignore"):
        return np.where(
            u < LINEAR_TO_SRGB_TH,
            SRGB_SLOPE * u,
            SRGB_DIVISOR * (u ** (1 / SRGB_GAMMA)) - SRGB_OFFSET,
        )


def np_gamma_decode(u: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB channels to linear light."""
    u = np.asarray(u, dtype=float)
    with np.errstate(invalid="ignore"):
        return np.where(
            u < SRGB_TO_LINEAR_TH,
            u / SRGB_SLOPE,
            ((u + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA,
        )


def _check_rgba_array(arr: NDArray) -> NDArray:
    arr = np.asarray(arr, dtype=float)
    if arr.ndim == 0 or arr.shape[-1] != 4:
        raise ValueError(f"Expected last dimension to be 4 (r, g, b, a), got shape {arr.shape}")
    return arr


def np_from_linear_rgba(arr: NDArray) -> NDArray:
    """
    Gamma-encode an array of linear RGBA colors.

    Args:
        arr: Array with last dimension 4, linear r, g, b and alpha.

    Returns:
        float32 array of the same shape; alpha is passed through.
    """
    arr = _check_rgba_array(arr)
    rgb = np_gamma_encode(arr[..., :3])
    return np.concatenate([rgb, arr[..., 3:]], axis=-1).astype(np.float32)


def np_into_linear(arr: NDArray) -> NDArray:
    """
    Gamma-decode an array of sRGB RGBA colors into linear light.

    Args:
        arr: Array with last dimension 4, sRGB r, g, b and alpha.

    Returns:
        float32 array of the same shape; alpha is passed through.
    """
    arr = _check_rgba_array(arr)
    rgb = np_gamma_decode(arr[..., :3])
    return np.concatenate([rgb, arr[..., 3:]], axis=-1).astype(np.float32)
