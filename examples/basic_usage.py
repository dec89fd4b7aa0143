"""Basic tinycolors usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from tinycolors import (
    SRGB,
    LinearRGB,
    Okhsl,
    HSV,
    ColorBase,
    cast_color,
    convert,
    find_route,
)


def demonstrate_colors() -> None:
    # Construct typed colors and convert between spaces.
    accent = SRGB(1.0, 0.5, 0.25)
    print("sRGB:", accent)
    print("Linear RGB:", accent.to_rgb())
    print("Okhsl:", Okhsl(accent))

    hsv = accent.convert("hsv")
    print("HSV -> sRGB:", hsv.to_srgb())

    # Raw triples work too.
    print("sRGB -> Oklab (tuple):", convert((1.0, 0.5, 0.25), "srgb", "oklab"))
    print("Route hsv -> okhsl:", " -> ".join(s.value for s in find_route("hsv", "okhsl")))


def as_linear(color: ColorBase) -> LinearRGB:
    return cast_color(color, LinearRGB)


def demonstrate_generic() -> None:
    # Any color in, linear RGB out.
    for color in (SRGB.WHITE, HSV.RED, Okhsl.BLACK):
        print(f"{color!r} -> {as_linear(color)!r}")


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_generic()
