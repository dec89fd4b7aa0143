"""
Delegated perceptual spaces (Okhsl, Okhsv).

The core never derives these models itself. It only needs two pure
functions per space, linear RGB -> space and back, supplied by a
``PerceptualTransform``. The default collaborator is ColorAide.

The core assumes the collaborator never fails for finite inputs.
"""
from __future__ import annotations
import math
from typing import Dict, Protocol, runtime_checkable
import numpy as np
from numpy import ndarray as NDArray
from coloraide.everything import ColorAll as ColorAide

from .hue import normalize_hue, turns_to_degrees, degrees_to_turns
from ..types.color_types import ColorSpace, SpaceLike, resolve_space

LINEAR_SPACE = "srgb-linear"


@runtime_checkable
class PerceptualTransform(Protocol):
    """Forward/inverse pair between linear RGB and one perceptual space.

    Both directions take and return (hue in turns, ..., ...) ordered triples
    on the perceptual side.
    """

    def forward(self, rgb: NDArray) -> NDArray: ...

    def inverse(self, triple: NDArray) -> NDArray: ...


class ColorAideTransform:
    """PerceptualTransform backed by a ColorAide color space."""

    __slots__ = ("space",)

    def __init__(self, space: str) -> None:
        self.space = space

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.space!r})"

    def forward(self, rgb: NDArray) -> NDArray:
        rgb = np.asarray(rgb, dtype=np.float64)
        if not np.all(np.isfinite(rgb)):
            # ColorAide reads NaN as "undefined" (zero); keep it NaN instead
            return np.full(3, np.nan)

        h, s, x = ColorAide(LINEAR_SPACE, [float(c) for c in rgb]).convert(self.space).coords()
        # achromatic colors come back with an undefined hue
        h = 0.0 if math.isnan(h) else normalize_hue(degrees_to_turns(h))
        return np.array([h, s, x], dtype=np.float64)

    def inverse(self, triple: NDArray) -> NDArray:
        triple = np.asarray(triple, dtype=np.float64)
        if not np.all(np.isfinite(triple)):
            return np.full(3, np.nan)

        h, s, x = (float(c) for c in triple)
        coords = ColorAide(self.space, [turns_to_degrees(h), s, x]).convert(LINEAR_SPACE).coords()
        return np.array(coords, dtype=np.float64)


# process-wide; swapped only through set_perceptual_transform
_transforms: Dict[ColorSpace, PerceptualTransform] = {
    ColorSpace.OKHSL: ColorAideTransform("okhsl"),
    ColorSpace.OKHSV: ColorAideTransform("okhsv"),
}


def get_perceptual_transform(space: SpaceLike) -> PerceptualTransform:
    space = resolve_space(space)
    try:
        return _transforms[space]
    except KeyError:
        raise ValueError(f"{space.value} is not a delegated perceptual space") from None


def set_perceptual_transform(space: SpaceLike, transform: PerceptualTransform) -> PerceptualTransform:
    """
    Swap the collaborator behind a perceptual space.

    Call this from setup code (e.g. plugging in a faster implementation)
    before any colors are converted. The registry is process wide: a swap
    changes the result of every later Okhsl/Okhsv conversion, in every
    thread. It is not synchronized, so swapping while other threads
    convert is not thread-safe.

    Args:
        space: ColorSpace.OKHSL or ColorSpace.OKHSV
        transform: Object with forward() and inverse()

    Returns:
        The previously installed transform
    """
    space = resolve_space(space)
    if space not in _transforms:
        raise ValueError(f"{space.value} is not a delegated perceptual space")
    if not isinstance(transform, PerceptualTransform):
        raise TypeError(f"{transform!r} does not provide forward() and inverse()")
    previous = _transforms[space]
    _transforms[space] = transform
    return previous


def linear_rgb_to_okhsl(rgb: NDArray) -> NDArray:
    return _transforms[ColorSpace.OKHSL].forward(rgb)


def okhsl_to_linear_rgb(hsl: NDArray) -> NDArray:
    return _transforms[ColorSpace.OKHSL].inverse(hsl)


def linear_rgb_to_okhsv(rgb: NDArray) -> NDArray:
    return _transforms[ColorSpace.OKHSV].forward(rgb)


def okhsv_to_linear_rgb(hsv: NDArray) -> NDArray:
    return _transforms[ColorSpace.OKHSV].inverse(hsv)
