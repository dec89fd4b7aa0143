import math
import numpy as np
from numpy import ndarray as NDArray
from .hue import normalize_hue

# sRGB transfer function knees
DECODE_KNEE = 0.04045
ENCODE_KNEE = 0.0031308


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB to linear-light RGB."""
    if c <= DECODE_KNEE:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4

def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB to nonlinear sRGB."""
    if c <= ENCODE_KNEE:
        return 12.92 * c
    return 1.055 * (c ** (1/2.4)) - 0.055

def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    # the power branch only sees values above the knee; NaN stays NaN
    result = np.where(
        c <= DECODE_KNEE,
        c / 12.92,
        ((np.maximum(c, DECODE_KNEE) + 0.055) / 1.055) ** 2.4
    )
    return result

def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    result = np.where(
        c <= ENCODE_KNEE,
        12.92 * c,
        1.055 * (np.maximum(c, ENCODE_KNEE) ** (1/2.4)) - 0.055
    )
    return result


## HSL to sRGB

def _hue_to_channel(p: float, q: float, t: float) -> float:
    t = t % 1.0
    if t < 1/6:
        return p + (q - p) * 6 * t
    if t < 1/2:
        return q
    if t < 2/3:
        return p + (q - p) * (2/3 - t) * 6
    return p

def hsl_to_srgb(hsl: NDArray) -> NDArray:
    """
    Convert HSL to gamma-encoded sRGB.

    Args:
        hsl: (hue in turns, saturation, lightness)

    Returns:
        ndarray: (r, g, b)
    """
    h, s, l = np.asarray(hsl, dtype=np.float64)

    if not math.isfinite(h):
        return np.full(3, np.nan)

    if s == 0:
        return np.array([l, l, l])

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return np.array([
        _hue_to_channel(p, q, h + 1/3),
        _hue_to_channel(p, q, h),
        _hue_to_channel(p, q, h - 1/3),
    ])


## HSV to sRGB

def hsv_to_srgb(hsv: NDArray) -> NDArray:
    """
    Convert HSV to gamma-encoded sRGB.

    Args:
        hsv: (hue in turns, saturation, value)

    Returns:
        ndarray: (r, g, b)
    """
    h, s, v = np.asarray(hsv, dtype=np.float64)

    if not math.isfinite(h):
        return np.full(3, np.nan)

    h6 = normalize_hue(h) * 6
    sector = math.floor(h6)
    f = h6 - sector
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector %= 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return np.array([r, g, b])
