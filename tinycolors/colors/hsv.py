from typing import ClassVar, Mapping, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, ChannelNames, build_registry

class HSV(ColorBase):
    """Hue (turns), saturation, value over gamma-encoded sRGB."""
    __slots__ = ()
    mode:      ClassVar[ColorSpace] = ColorSpace.HSV
    channels:  ClassVar[ChannelNames] = ("h", "s", "v")
    constants: ClassVar[Mapping[str, Tuple[float, float, float]]] = {
        "WHITE":  (0.0, 0.0, 1.0),
        "BLACK":  (0.0, 0.0, 0.0),
        "RED":    (0.0, 1.0, 1.0),
        "YELLOW": (1/6, 1.0, 1.0),
        "GREEN":  (1/3, 1.0, 1.0),
        "AQUA":   (1/2, 1.0, 1.0),
        "BLUE":   (2/3, 1.0, 1.0),
        "PURPLE": (5/6, 1.0, 1.0),
    }

hsv_space_to_class = build_registry(
    HSV,
)
