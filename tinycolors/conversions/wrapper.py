from typing import Tuple, Union
import numpy as np

from ..types.color_types import SpaceLike, Triple, triple_to_array, resolve_space
from .graph import convert_triple


def convert(
    color: Triple,
    from_space: SpaceLike,
    to_space: SpaceLike,
) -> Union[Tuple[float, float, float], np.ndarray]:
    """
    Convert a raw triple from one color space to another.

    Args:
        color: 3 channels in from_space's order (tuple, list or ndarray)
        from_space: Source color space name or ColorSpace
        to_space: Target color space name or ColorSpace

    Returns:
        An ndarray (float32) for ndarray input, a tuple of floats otherwise.
        Same-space conversion returns the input unchanged.
    """
    if resolve_space(from_space) == resolve_space(to_space):
        return color  # No conversion needed
    result = convert_triple(triple_to_array(color), from_space, to_space)
    if isinstance(color, np.ndarray):
        return result
    return tuple(float(c) for c in result)
