import numpy as np
from numpy import ndarray as NDArray
from .hue import normalize_hue
from .to_hsl import _hexcone_hue, is_achromatic


## sRGB to HSV

def srgb_to_hsv(rgb: NDArray) -> NDArray:
    """
    Convert gamma-encoded sRGB to HSV.

    Args:
        rgb: (r, g, b), conventionally in [0, 1] but not clamped

    Returns:
        ndarray: (hue in turns [0, 1), saturation, value)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = rgb
    max_c = np.max(rgb)
    min_c = np.min(rgb)
    delta = max_c - min_c

    value = max_c

    if is_achromatic(delta, max_c):
        return np.array([0.0, 0.0, value])

    saturation = 0.0 if max_c == 0 else delta / max_c
    hue = _hexcone_hue(r, g, b, max_c, delta)
    return np.array([hue, saturation, value])


## HSL to HSV

def hsl_to_hsv(hsl: NDArray) -> NDArray:
    """
    Convert HSL to HSV. Hue is only wrapped into [0, 1).

    Args:
        hsl: (hue in turns, saturation, lightness)

    Returns:
        ndarray: (hue in turns, saturation, value)
    """
    h, s, l = np.asarray(hsl, dtype=np.float64)
    value = l + s * np.minimum(l, 1 - l)

    # HSL chroma is 2 * (value - lightness)
    if is_achromatic(2 * (value - l), value):
        return np.array([0.0, 0.0, value])

    saturation = 0.0 if value == 0 else 2 * (1 - l / value)
    return np.array([normalize_hue(h), saturation, value])
