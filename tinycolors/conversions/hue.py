import numpy as np


def normalize_hue(h: float) -> float:
    """Wrap a hue expressed in turns into [0, 1).

    NaN stays NaN and infinities become NaN.
    """
    h = np.float64(h) % 1.0
    # -1e-18 % 1.0 rounds up to exactly 1.0
    if h == 1.0:
        return np.float64(0.0)
    return h


def turns_to_degrees(h: float) -> float:
    return h * 360.0


def degrees_to_turns(h: float) -> float:
    return h / 360.0
