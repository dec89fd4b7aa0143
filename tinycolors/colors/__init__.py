"""
Tinycolors Color Classes
========================

One immutable class per color space. Every class shares the ColorBase
contract, so generic code can accept "any color" and convert it to the
space it needs.

Features
--------
- Immutable instances (frozen after initialization, read-only storage)
- Three float32 channels, never clamped
- Construction from channels, keywords, a raw triple, or another color
- Named constants (WHITE, BLACK, ...) built once at import
- Conversion to any other space through the conversion graph

Usage
-----
>>> from tinycolors.colors import SRGB, LinearRGB, HSL
>>>
>>> color0 = SRGB(1.0, 0.5, 0.25)
>>> color1 = SRGB.from_triple([1.0, 0.5, 0.25])
>>> color0 == color1
True
>>>
>>> LinearRGB(SRGB.WHITE) == LinearRGB.WHITE
True
>>> SRGB.RED.convert("hsl") == HSL.RED
True

Generic Code
------------
>>> from tinycolors.colors import ColorBase, cast_color
>>>
>>> def any_color_as_rgb(color: ColorBase) -> LinearRGB:
...     return cast_color(color, LinearRGB)
>>>
>>> any_color_as_rgb(SRGB.WHITE) == LinearRGB(SRGB.WHITE)
True

Color Classes
-------------
    - SRGB: gamma-encoded sRGB (r, g, b)
    - LinearRGB / RGB: linear-light RGB (r, g, b)
    - Oklab: perceptual Cartesian (l, a, b)
    - Okhsl: perceptual cylindrical (h, s, l)
    - Okhsv: perceptual cylindrical (h, s, v)
    - HSL: sRGB cylindrical (h, s, l)
    - HSV: sRGB cylindrical (h, s, v)

Notes
-----
- Hues are in turns: 1.0 is a full circle
- Equality is exact per channel; use isclose() for a tolerance
"""

from .color_base import ColorBase, Color
from .rgb import SRGB, LinearRGB, RGB
from .hsl import HSL
from .hsv import HSV
from .oklab import Oklab, Okhsl, Okhsv
from .color import (
    color_convert,
    cast_color,
    convert_color,
    get_color_class,
    space_to_class,
)


__all__ = [
    'ColorBase',
    'Color',
    'SRGB',
    'LinearRGB',
    'RGB',
    'HSL',
    'HSV',
    'Oklab',
    'Okhsl',
    'Okhsv',
    'color_convert',
    'cast_color',
    'convert_color',
    'get_color_class',
    'space_to_class',
]
