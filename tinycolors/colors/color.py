from __future__ import annotations
from typing import Dict, TypeVar, Union
from .color_base import ColorBase
from .rgb import rgb_space_to_class
from .hsl import hsl_space_to_class
from .hsv import hsv_space_to_class
from .oklab import oklab_space_to_class
from ..types.color_types import ColorSpace, Triple, resolve_space

space_to_class: Dict[ColorSpace, type[ColorBase]] = {
    **rgb_space_to_class,
    **oklab_space_to_class,
    **hsl_space_to_class,
    **hsv_space_to_class,
}

TargetSpace = Union[ColorSpace, str, type[ColorBase]]
C = TypeVar("C", bound=ColorBase)


def get_color_class(color_space: TargetSpace) -> type[ColorBase]:
    """
    Resolve a space name, ColorSpace member or color class to its color class.
    """
    if isinstance(color_space, type) and issubclass(color_space, ColorBase):
        return color_space
    color_class = space_to_class.get(resolve_space(color_space))
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: TargetSpace | None = None) -> ColorBase:
    """
    Convert this color to another color space.

    Args:
        to_space: Target space as a ColorSpace, its name, or a color class.
            Defaults to the current space.

    Returns:
        New ColorBase instance in the target space. Converting to the
        current space returns an equal value.
    """
    cls = get_color_class(to_space or self.mode)
    return cls(self)


def cast_color(color: ColorBase, target: type[C]) -> C:
    """
    Generic "give me this color as ``target``".

    Resolves to the same route as ``target(color)``, so the result is
    identical to calling the target class directly.
    """
    return target(color)


def convert_color(value: Union[ColorBase, Triple], color_space: TargetSpace) -> ColorBase:
    """Wrap a raw triple in, or convert a color to, the given space."""
    color_class = get_color_class(color_space)
    if isinstance(value, ColorBase):
        return value.convert(color_class)
    return color_class.from_triple(value)


def to_srgb(self: ColorBase) -> ColorBase:
    return space_to_class[ColorSpace.SRGB](self)

def to_rgb(self: ColorBase) -> ColorBase:
    return space_to_class[ColorSpace.RGB](self)

def to_oklab(self: ColorBase) -> ColorBase:
    return space_to_class[ColorSpace.OKLAB](self)

def to_okhsl(self: ColorBase) -> ColorBase:
    return space_to_class[ColorSpace.OKHSL](self)

def to_okhsv(self: ColorBase) -> ColorBase:
    return space_to_class[ColorSpace.OKHSV](self)

def to_hsl(self: ColorBase) -> ColorBase:
    return space_to_class[ColorSpace.HSL](self)

def to_hsv(self: ColorBase) -> ColorBase:
    return space_to_class[ColorSpace.HSV](self)


ColorBase.convert = color_convert
ColorBase.to_srgb = to_srgb  # type: ignore[attr-defined]
ColorBase.to_rgb = to_rgb  # type: ignore[attr-defined]
ColorBase.to_oklab = to_oklab  # type: ignore[attr-defined]
ColorBase.to_okhsl = to_okhsl  # type: ignore[attr-defined]
ColorBase.to_okhsv = to_okhsv  # type: ignore[attr-defined]
ColorBase.to_hsl = to_hsl  # type: ignore[attr-defined]
ColorBase.to_hsv = to_hsv  # type: ignore[attr-defined]
