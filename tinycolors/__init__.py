"""Tinycolors: color-space types and the conversions between them."""

from .colors.color_base import ColorBase, Color
from .colors.rgb import SRGB, LinearRGB, RGB
from .colors.hsl import HSL
from .colors.hsv import HSV
from .colors.oklab import Oklab, Okhsl, Okhsv
from .colors.color import color_convert, cast_color, convert_color, get_color_class
from .types.color_types import ColorSpace, HUE_SPACES, is_hue_space
from .conversions import (
    convert,
    convert_triple,
    find_route,
    NonFiniteColorWarning,
    PerceptualTransform,
    set_perceptual_transform,
)

__all__ = [
    # color types
    "ColorBase",
    "Color",
    "SRGB",
    "LinearRGB",
    "RGB",
    "HSL",
    "HSV",
    "Oklab",
    "Okhsl",
    "Okhsv",
    # dispatch
    "color_convert",
    "cast_color",
    "convert_color",
    "get_color_class",
    "ColorSpace",
    "HUE_SPACES",
    "is_hue_space",
    # conversions
    "convert",
    "convert_triple",
    "find_route",
    "NonFiniteColorWarning",
    "PerceptualTransform",
    "set_perceptual_transform",
]
