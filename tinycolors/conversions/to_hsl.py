import numpy as np
from numpy import ndarray as NDArray
from .hue import normalize_hue

# Chroma at or below this (relative to the brightest channel, at least 1.0)
# is rounding noise from float32 storage or a float64 route, not a color.
ACHROMATIC_TOLERANCE = 1e-6


def is_achromatic(chroma: float, max_c: float) -> bool:
    """True if an RGB chroma is too small to carry a hue or saturation."""
    return abs(chroma) <= ACHROMATIC_TOLERANCE * max(1.0, abs(max_c))


def _hexcone_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Hue in turns of an RGB triple with a non-zero chroma."""
    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    return normalize_hue(hue / 6)


## sRGB to HSL

def srgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Convert gamma-encoded sRGB to HSL.

    Args:
        rgb: (r, g, b), conventionally in [0, 1] but not clamped

    Returns:
        ndarray: (hue in turns [0, 1), saturation, lightness)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = rgb
    max_c = np.max(rgb)
    min_c = np.min(rgb)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2

    if is_achromatic(delta, max_c):
        return np.array([0.0, 0.0, lightness])

    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    hue = _hexcone_hue(r, g, b, max_c, delta)
    return np.array([hue, saturation, lightness])


## HSV to HSL

def hsv_to_hsl(hsv: NDArray) -> NDArray:
    """
    Convert HSV to HSL. Hue is only wrapped into [0, 1).

    Args:
        hsv: (hue in turns, saturation, value)

    Returns:
        ndarray: (hue in turns, saturation, lightness)
    """
    h, s, v = np.asarray(hsv, dtype=np.float64)
    lightness = v * (1 - s / 2)

    if is_achromatic(v * s, v):
        return np.array([0.0, 0.0, lightness])

    if lightness == 0 or lightness == 1:
        saturation = 0.0
    else:
        saturation = (v - lightness) / np.minimum(lightness, 1 - lightness)

    return np.array([normalize_hue(h), saturation, lightness])
