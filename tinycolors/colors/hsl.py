from typing import ClassVar, Mapping, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, ChannelNames, build_registry

class HSL(ColorBase):
    """Hue (turns), saturation, lightness over gamma-encoded sRGB."""
    __slots__ = ()
    mode:      ClassVar[ColorSpace] = ColorSpace.HSL
    channels:  ClassVar[ChannelNames] = ("h", "s", "l")
    constants: ClassVar[Mapping[str, Tuple[float, float, float]]] = {
        "WHITE":  (0.0, 0.0, 1.0),
        "BLACK":  (0.0, 0.0, 0.0),
        "RED":    (0.0, 1.0, 0.5),
        "YELLOW": (1/6, 1.0, 0.5),
        "GREEN":  (1/3, 1.0, 0.5),
        "AQUA":   (1/2, 1.0, 0.5),
        "BLUE":   (2/3, 1.0, 0.5),
        "PURPLE": (5/6, 1.0, 0.5),
    }

hsl_space_to_class = build_registry(
    HSL,
)
