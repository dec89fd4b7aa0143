"""
Linear RGB <-> Oklab.

Both directions are a 3x3 matrix into cone (LMS) space, a per-channel
nonlinearity, and a second 3x3 matrix. Coefficients are Björn Ottosson's
published values for linear sRGB with a D65 white.
"""
import numpy as np
from numpy import ndarray as NDArray

LINEAR_RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553,  0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050,  0.4505937099],
    [0.0259040371,  0.7827717662, -0.8086757660],
])

# exact inverses of the forward matrices
OKLAB_TO_LMS = np.linalg.inv(LMS_TO_OKLAB)

LMS_TO_LINEAR_RGB = np.linalg.inv(LINEAR_RGB_TO_LMS)


def linear_rgb_to_oklab(rgb: NDArray) -> NDArray:
    """
    Convert linear-light RGB to Oklab.

    Args:
        rgb: (r, g, b) linear light

    Returns:
        ndarray: (L, a, b)
    """
    lms = LINEAR_RGB_TO_LMS @ np.asarray(rgb, dtype=np.float64)
    # signed cube root, so out-of-gamut negatives stay real
    return LMS_TO_OKLAB @ np.cbrt(lms)


def oklab_to_linear_rgb(lab: NDArray) -> NDArray:
    """
    Convert Oklab to linear-light RGB.

    Args:
        lab: (L, a, b)

    Returns:
        ndarray: (r, g, b) linear light
    """
    lms_ = OKLAB_TO_LMS @ np.asarray(lab, dtype=np.float64)
    return LMS_TO_LINEAR_RGB @ (lms_ ** 3)
