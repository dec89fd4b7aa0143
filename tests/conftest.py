import pytest

from tinycolors import SRGB, LinearRGB, Oklab, Okhsl, Okhsv, HSL, HSV
from .samples import in_gamut_srgb

ALL_CLASSES = [SRGB, LinearRGB, Oklab, Okhsl, Okhsv, HSL, HSV]


@pytest.fixture(params=ALL_CLASSES, ids=lambda cls: cls.__name__)
def color_class(request):
    return request.param


@pytest.fixture(params=ALL_CLASSES, ids=lambda cls: cls.__name__)
def target_class(request):
    return request.param


@pytest.fixture
def sample_colors():
    """The in-gamut sRGB samples expressed in every space."""
    colors = []
    for triple in in_gamut_srgb:
        srgb = SRGB(*triple)
        colors.extend(cls(srgb) for cls in ALL_CLASSES)
    return colors
