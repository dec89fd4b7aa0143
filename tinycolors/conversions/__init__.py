"""
Tinycolors Color Space Conversions
==================================

Pure functions between the raw triples of each color space, plus the graph
that composes them.

Direct Conversions
------------------

sRGB <-> linear RGB (gamma decode / encode):
    srgb_to_linear(c), linear_to_srgb(c)
        Scalar, one channel
    np_srgb_to_linear(rgb), np_linear_to_srgb(rgb)
        Vectorized over a triple

Linear RGB <-> Oklab (matrix, cube root, matrix):
    linear_rgb_to_oklab(rgb), oklab_to_linear_rgb(lab)

Linear RGB <-> Okhsl / Okhsv (delegated to ColorAide):
    linear_rgb_to_okhsl(rgb), okhsl_to_linear_rgb(hsl)
    linear_rgb_to_okhsv(rgb), okhsv_to_linear_rgb(hsv)

sRGB <-> HSL / HSV (hexcone remap):
    srgb_to_hsl(rgb), hsl_to_srgb(hsl)
    srgb_to_hsv(rgb), hsv_to_srgb(hsv)

HSL <-> HSV:
    hsl_to_hsv(hsl), hsv_to_hsl(hsv)

Every other pair is routed through linear RGB (or sRGB for HSL/HSV).

High-Level API
--------------
    convert(color, from_space, to_space)
        Convert a raw triple, tuple in / tuple out, array in / array out
    convert_triple(triple, from_space, to_space)
        Always returns a float32 array
    find_route(from_space, to_space)
        Spaces visited by a conversion

Hue Channels
------------
Hues are in turns, so 1.0 is a full circle. Transforms producing a hue wrap
it into [0, 1); transforms reading a hue accept any value.

Examples
--------
>>> from tinycolors.conversions import convert
>>> convert((1.0, 1.0, 1.0), "srgb", "rgb")
(1.0, 1.0, 1.0)
>>> convert((1.0, 0.0, 0.0), "srgb", "hsl")
(0.0, 1.0, 0.5)
"""

from .to_rgb import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    hsl_to_srgb,
    hsv_to_srgb,
)
from .to_hsl import srgb_to_hsl, hsv_to_hsl
from .to_hsv import srgb_to_hsv, hsl_to_hsv
from .oklab import linear_rgb_to_oklab, oklab_to_linear_rgb
from .perceptual import (
    PerceptualTransform,
    ColorAideTransform,
    get_perceptual_transform,
    set_perceptual_transform,
    linear_rgb_to_okhsl,
    okhsl_to_linear_rgb,
    linear_rgb_to_okhsv,
    okhsv_to_linear_rgb,
)
from .hue import normalize_hue
from .graph import (
    DIRECT_CONVERSIONS,
    ROUTES,
    NonFiniteColorWarning,
    convert_triple,
    find_route,
)
from .wrapper import convert

from ..types.color_types import ColorSpace

__all__ = [
    # sRGB <-> linear
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # Oklab
    'linear_rgb_to_oklab',
    'oklab_to_linear_rgb',

    # Okhsl / Okhsv
    'PerceptualTransform',
    'ColorAideTransform',
    'get_perceptual_transform',
    'set_perceptual_transform',
    'linear_rgb_to_okhsl',
    'okhsl_to_linear_rgb',
    'linear_rgb_to_okhsv',
    'okhsv_to_linear_rgb',

    # HSL / HSV
    'srgb_to_hsl',
    'hsl_to_srgb',
    'srgb_to_hsv',
    'hsv_to_srgb',
    'hsl_to_hsv',
    'hsv_to_hsl',
    'normalize_hue',

    # Graph
    'DIRECT_CONVERSIONS',
    'ROUTES',
    'NonFiniteColorWarning',
    'convert_triple',
    'find_route',

    # High-level API
    'convert',

    # Types
    'ColorSpace',
]
