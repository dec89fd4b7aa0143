from typing import ClassVar, Mapping, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, ChannelNames, build_registry


class SRGB(ColorBase):
    """Gamma-encoded sRGB. Channels conventionally in [0, 1], never clamped."""
    __slots__ = ()
    mode:      ClassVar[ColorSpace] = ColorSpace.SRGB
    channels:  ClassVar[ChannelNames] = ("r", "g", "b")
    constants: ClassVar[Mapping[str, Tuple[float, float, float]]] = {
        "WHITE":  (1.0, 1.0, 1.0),
        "BLACK":  (0.0, 0.0, 0.0),
        "RED":    (1.0, 0.0, 0.0),
        "YELLOW": (1.0, 1.0, 0.0),
        "GREEN":  (0.0, 1.0, 0.0),
        "AQUA":   (0.0, 1.0, 1.0),
        "BLUE":   (0.0, 0.0, 1.0),
        "PURPLE": (1.0, 0.0, 1.0),
    }


class LinearRGB(ColorBase):
    """Linear-light RGB with sRGB primaries. The routing hub of the conversion graph."""
    __slots__ = ()
    mode:      ClassVar[ColorSpace] = ColorSpace.RGB
    channels:  ClassVar[ChannelNames] = ("r", "g", "b")
    constants: ClassVar[Mapping[str, Tuple[float, float, float]]] = {
        "WHITE": (1.0, 1.0, 1.0),
        "BLACK": (0.0, 0.0, 0.0),
        "RED":   (1.0, 0.0, 0.0),
        "GREEN": (0.0, 1.0, 0.0),
        "BLUE":  (0.0, 0.0, 1.0),
    }


RGB = LinearRGB


rgb_space_to_class = build_registry(
    SRGB,
    LinearRGB,
)
