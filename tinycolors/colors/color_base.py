from __future__ import annotations
from typing import Any, Callable, ClassVar, Dict, Iterator, Mapping, Protocol, Tuple, runtime_checkable
import numpy as np
from numpy import ndarray

from ..conversions.graph import convert_triple
from ..types.color_types import ColorSpace, Triple, HUE_SPACES, triple_to_array

ChannelNames = Tuple[str, str, str]


@runtime_checkable
class Color(Protocol):
    """Anything that can hand out its raw triple and convert itself to another space."""

    mode: ClassVar[ColorSpace]

    def to_triple(self) -> ndarray: ...

    def convert(self, to_space: Any) -> "ColorBase": ...


def _channel_property(index: int, name: str) -> property:
    def getter(self: ColorBase) -> float:
        return float(self._value[index])
    getter.__name__ = name
    return property(getter, doc=f"Channel {index} ({name}).")


class ColorBase:
    """
    A point in one color space: three float32 channels tagged by the class.

    Subclasses only declare ``mode``, ``channels`` and ``constants``; channel
    properties and constant instances are generated when the subclass is
    created.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    mode:       ClassVar[ColorSpace]
    channels:   ClassVar[ChannelNames]
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    constants:  ClassVar[Mapping[str, Tuple[float, float, float]]] = {}
    # def color_convert(self: ColorBase, to_space: ColorSpace | str | type[ColorBase]) -> ColorBase:
    convert: Callable[..., ColorBase]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "mode" not in cls.__dict__:
            return
        if len(cls.channels) != 3:
            raise ValueError(f"{cls.__name__} must name exactly 3 channels")
        for index, name in enumerate(cls.channels):
            setattr(cls, name, _channel_property(index, name))
        # constants are built once, here, and never recomputed
        for name, triple in cls.constants.items():
            setattr(cls, name, cls(*triple))

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, *args: Any, **named: float) -> None:
        if not hasattr(self, 'mode'):
            raise TypeError("ColorBase is abstract; instantiate a concrete color space")

        # ---- Handle keyword channels ----
        if named:
            if args:
                raise ValueError(f"{self.__class__.__name__} takes positional or keyword channels, not both")
            unknown = set(named) - set(self.channels)
            if unknown:
                raise TypeError(f"{self.__class__.__name__} has no channel(s) {sorted(unknown)}; expected {self.channels}")
            missing = [c for c in self.channels if c not in named]
            if missing:
                raise TypeError(f"{self.__class__.__name__} missing channel(s) {missing}")
            value = triple_to_array(tuple(named[c] for c in self.channels))

        elif len(args) == 0:
            value = triple_to_array(self.null_value)

        elif len(args) == 1:
            source = args[0]
            # ---- Handle ColorBase input ----
            if isinstance(source, ColorBase):
                if source.mode == self.mode:
                    value = source._value.copy()
                else:
                    value = convert_triple(source._value, source.mode, self.mode)
            # ---- Handle raw triple input ----
            else:
                value = triple_to_array(source)

        elif len(args) == 3:
            value = triple_to_array(args)

        else:
            raise ValueError(f"{self.__class__.__name__} expects 3 channels, got {len(args)}")

        value.flags.writeable = False
        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ RAW TRIPLE ------------------
    @classmethod
    def from_triple(cls, triple: Triple) -> "ColorBase":
        """Build a color from a raw triple in this space's channel order."""
        return cls(triple_to_array(triple))

    def to_triple(self) -> ndarray:
        """Return a fresh float32 array of the channels in this space's order."""
        return self._value.copy()

    @classmethod
    def from_dict(cls, channels: Mapping[str, float]) -> "ColorBase":
        return cls(**channels)

    def as_dict(self) -> Dict[str, float]:
        return dict(zip(self.channels, self.value))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, float, float]:
        return tuple(float(c) for c in self._value)  # type: ignore[return-value]

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    # ------------------ PROTOCOLS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self.value)

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return self.value[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and bool(np.array_equal(self._value, other._value))

    def __hash__(self) -> int:
        return hash((self.mode, self.value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in zip(self.channels, self.value))
        return f"{self.__class__.__name__}({fields})"

    def __reduce__(self):
        return (self.__class__, self.value)

    def isclose(self, other: ColorBase, tol: float = 1e-5) -> bool:
        """
        Approximate comparison, converting ``other`` into this space first.

        Args:
            other: Color in any space
            tol: Absolute tolerance per channel

        Returns:
            True if every channel differs by at most tol
        """
        if other.mode != self.mode:
            other = self.__class__(other)
        return bool(np.allclose(self._value, other._value, rtol=0.0, atol=tol))


def build_registry(*classes: type[ColorBase]) -> Dict[ColorSpace, type[ColorBase]]:
    return {
        cls.mode: cls
        for cls in classes
    }
