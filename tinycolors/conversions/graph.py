"""
Conversion graph between color spaces.

Only a handful of direct transforms are hand written. Linear RGB is the
routing hub (sRGB serves the same role for the sRGB-derived HSL/HSV), and
every other pair is composed from the shortest chain of direct edges.
Routes are resolved once at import time into a read-only table.

Composed routes carry float64 intermediates and round to float32 only at
the end, so a composed result can differ from converting step by step
(with float32 storage between hops) by a few float32 ulps.
"""
from __future__ import annotations
from collections import deque
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Tuple
import warnings
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ColorSpace, SpaceLike, CHANNEL_DTYPE, HUE_SPACES, resolve_space
from .to_rgb import np_srgb_to_linear, np_linear_to_srgb, hsl_to_srgb, hsv_to_srgb
from .to_hsl import srgb_to_hsl, hsv_to_hsl
from .to_hsv import srgb_to_hsv, hsl_to_hsv
from .oklab import linear_rgb_to_oklab, oklab_to_linear_rgb
from .perceptual import (
    linear_rgb_to_okhsl,
    okhsl_to_linear_rgb,
    linear_rgb_to_okhsv,
    okhsv_to_linear_rgb,
)

TripleTransform = Callable[[NDArray], NDArray]
Route = Tuple[TripleTransform, ...]


class NonFiniteColorWarning(RuntimeWarning):
    """A finite color converted into one with NaN or infinite channels."""


# Declaration order breaks ties between equally short routes.
DIRECT_CONVERSIONS: Mapping[Tuple[ColorSpace, ColorSpace], TripleTransform] = MappingProxyType({
    (ColorSpace.SRGB, ColorSpace.RGB): np_srgb_to_linear,
    (ColorSpace.RGB, ColorSpace.SRGB): np_linear_to_srgb,
    (ColorSpace.RGB, ColorSpace.OKLAB): linear_rgb_to_oklab,
    (ColorSpace.OKLAB, ColorSpace.RGB): oklab_to_linear_rgb,
    (ColorSpace.RGB, ColorSpace.OKHSL): linear_rgb_to_okhsl,
    (ColorSpace.OKHSL, ColorSpace.RGB): okhsl_to_linear_rgb,
    (ColorSpace.RGB, ColorSpace.OKHSV): linear_rgb_to_okhsv,
    (ColorSpace.OKHSV, ColorSpace.RGB): okhsv_to_linear_rgb,
    (ColorSpace.SRGB, ColorSpace.HSL): srgb_to_hsl,
    (ColorSpace.HSL, ColorSpace.SRGB): hsl_to_srgb,
    (ColorSpace.SRGB, ColorSpace.HSV): srgb_to_hsv,
    (ColorSpace.HSV, ColorSpace.SRGB): hsv_to_srgb,
    (ColorSpace.HSL, ColorSpace.HSV): hsl_to_hsv,
    (ColorSpace.HSV, ColorSpace.HSL): hsv_to_hsl,
})


def _shortest_path(
    edges: Mapping[Tuple[ColorSpace, ColorSpace], TripleTransform],
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> List[ColorSpace]:
    """Breadth-first search over the direct conversions."""
    neighbours: Dict[ColorSpace, List[ColorSpace]] = {space: [] for space in ColorSpace}
    for a, b in edges:
        neighbours[a].append(b)

    previous: Dict[ColorSpace, ColorSpace | None] = {from_space: None}
    queue = deque([from_space])
    while queue:
        space = queue.popleft()
        if space == to_space:
            break
        for nxt in neighbours[space]:
            if nxt not in previous:
                previous[nxt] = space
                queue.append(nxt)

    if to_space not in previous:
        raise ValueError(f"No conversion path from {from_space.value} to {to_space.value}")

    path = [to_space]
    while path[-1] != from_space:
        path.append(previous[path[-1]])  # type: ignore[arg-type]
    return path[::-1]


def build_routes(
    edges: Mapping[Tuple[ColorSpace, ColorSpace], TripleTransform],
) -> Mapping[Tuple[ColorSpace, ColorSpace], Tuple[Tuple[ColorSpace, ...], Route]]:
    """
    Resolve every ordered pair of spaces to its chain of direct transforms.

    Returns:
        Read-only mapping (from, to) -> (spaces visited, transforms to apply).
        Same-space pairs map to an empty route.
    """
    routes = {}
    for a in ColorSpace:
        for b in ColorSpace:
            path = _shortest_path(edges, a, b)
            steps = tuple(edges[(x, y)] for x, y in zip(path, path[1:]))
            routes[(a, b)] = (tuple(path), steps)
    return MappingProxyType(routes)


ROUTES = build_routes(DIRECT_CONVERSIONS)


def find_route(from_space: SpaceLike, to_space: SpaceLike) -> Tuple[ColorSpace, ...]:
    """Spaces visited when converting from one space to another, endpoints included."""
    return ROUTES[(resolve_space(from_space), resolve_space(to_space))][0]


def convert_triple(triple: NDArray, from_space: SpaceLike, to_space: SpaceLike) -> NDArray:
    """
    Convert a raw triple between two spaces along the precomputed route.

    Never raises on numeric input: floating-point errors are evaluated
    mechanically (NaN/inf propagate). A NonFiniteColorWarning is emitted
    when a finite input yields a non-finite result.

    Args:
        triple: 3 channels in from_space's channel order
        from_space: Source space
        to_space: Target space

    Returns:
        float32 array of shape (3,), a fresh copy even for the identity route
    """
    src, dst = resolve_space(from_space), resolve_space(to_space)
    path, steps = ROUTES[(src, dst)]

    if not steps:
        return np.array(triple, dtype=CHANNEL_DTYPE)

    value = np.asarray(triple, dtype=np.float64)
    with np.errstate(all="ignore"):
        for step in steps:
            value = step(value)
        result = value.astype(CHANNEL_DTYPE)
    # hues just below one turn can round up to 1.0 in float32
    if dst in HUE_SPACES and result[0] == 1.0:
        result[0] = 0.0

    if not np.all(np.isfinite(result)) and np.all(np.isfinite(triple)):
        warnings.warn(
            f"Converting {tuple(float(c) for c in triple)} along "
            f"{' -> '.join(s.value for s in path)} produced non-finite channels "
            f"{tuple(float(c) for c in result)}",
            NonFiniteColorWarning,
            stacklevel=3,
        )
    return result
