from __future__ import annotations
from enum import Enum
from typing import Sequence, Tuple, TypeAlias, Union
import numpy as np
from numpy import ndarray


class ColorSpace(str, Enum):
    SRGB = "srgb"
    RGB = "rgb"
    OKLAB = "oklab"
    OKHSL = "okhsl"
    OKHSV = "okhsv"
    HSL = "hsl"
    HSV = "hsv"


Triple: TypeAlias = Union[Tuple[float, float, float], Sequence[float], ndarray]
TripleArray: TypeAlias = ndarray
SpaceLike: TypeAlias = Union[ColorSpace, str]

HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSV, ColorSpace.OKHSL, ColorSpace.OKHSV}

CHANNEL_DTYPE = np.float32


def resolve_space(space: SpaceLike) -> ColorSpace:
    """
    Resolve a color space name or enum member.

    Args:
        space: ColorSpace member or its string value (case-insensitive)

    Returns:
        The matching ColorSpace member
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None


def triple_to_array(value: Triple, dtype=CHANNEL_DTYPE) -> np.ndarray:
    """
    Convert a raw triple to a numpy array.

    Values are copied, never clamped.

    Args:
        value: Any 3-element sequence of numbers, or an ndarray of shape (3,)
        dtype: Target dtype, float32 by default

    Returns:
        numpy array of shape (3,)
    """
    arr = np.array(value, dtype=dtype)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3-element triple, got shape {arr.shape}")
    return arr


def is_hue_space(color_space: SpaceLike) -> bool:
    """
    Check if the given color space is a cylindrical space with a hue channel.

    Args:
        color_space: Color space enum or string
    Returns:
        True if the first channel is a hue, False otherwise
    """
    return resolve_space(color_space) in HUE_SPACES
