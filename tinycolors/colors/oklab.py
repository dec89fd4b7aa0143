from typing import ClassVar, Mapping, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, ChannelNames, build_registry


class Oklab(ColorBase):
    """Oklab: perceptual lightness L and opponent axes a (green-red), b (blue-yellow)."""
    __slots__ = ()
    mode:      ClassVar[ColorSpace] = ColorSpace.OKLAB
    channels:  ClassVar[ChannelNames] = ("l", "a", "b")
    constants: ClassVar[Mapping[str, Tuple[float, float, float]]] = {
        "WHITE": (1.0, 0.0, 0.0),
        "BLACK": (0.0, 0.0, 0.0),
    }


class Okhsl(ColorBase):
    """Okhsl: hue (turns), saturation, lightness built on Oklab."""
    __slots__ = ()
    mode:      ClassVar[ColorSpace] = ColorSpace.OKHSL
    channels:  ClassVar[ChannelNames] = ("h", "s", "l")
    constants: ClassVar[Mapping[str, Tuple[float, float, float]]] = {
        "WHITE": (0.0, 0.0, 1.0),
        "BLACK": (0.0, 0.0, 0.0),
    }


class Okhsv(ColorBase):
    """Okhsv: hue (turns), saturation, value built on Oklab."""
    __slots__ = ()
    mode:      ClassVar[ColorSpace] = ColorSpace.OKHSV
    channels:  ClassVar[ChannelNames] = ("h", "s", "v")
    constants: ClassVar[Mapping[str, Tuple[float, float, float]]] = {
        "WHITE": (0.0, 0.0, 1.0),
        "BLACK": (0.0, 0.0, 0.0),
    }


oklab_space_to_class = build_registry(
    Oklab,
    Okhsl,
    Okhsv,
)
