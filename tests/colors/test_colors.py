from tinycolors import SRGB, LinearRGB, RGB, Oklab, Okhsl, Okhsv, HSL, HSV, ColorBase, Color, ColorSpace
from ..samples import samples_srgb_hsv, samples_srgb_hsl
import copy
import pickle
import numpy as np
import pytest


def test_keyword_and_triple_construction_agree():
    direct = SRGB(r=1.0, g=0.5, b=0.25)
    assert direct == SRGB.from_triple([1.0, 0.5, 0.25])
    assert direct == SRGB(1.0, 0.5, 0.25)
    assert direct == SRGB((1.0, 0.5, 0.25))
    assert direct == SRGB(np.array([1.0, 0.5, 0.25]))
    assert direct == SRGB.from_dict({"b": 0.25, "r": 1.0, "g": 0.5})


def test_default_is_null_value(color_class):
    assert color_class().value == (0.0, 0.0, 0.0)


def test_channel_properties():
    c = SRGB(1.0, 0.5, 0.25)
    assert (c.r, c.g, c.b) == (1.0, 0.5, 0.25)
    hsv = HSV(0.5, 0.25, 0.75)
    assert (hsv.h, hsv.s, hsv.v) == (0.5, 0.25, 0.75)
    lab = Oklab(0.5, -0.1, 0.1)
    assert lab.l == 0.5
    assert abs(lab.a + 0.1) < 1e-7


def test_channels_are_float32():
    c = SRGB(0.1, 0.2, 0.3)
    assert c.r == float(np.float32(0.1))
    assert c.to_triple().dtype == np.float32


def test_to_triple_is_a_copy():
    c = SRGB(0.1, 0.2, 0.3)
    triple = c.to_triple()
    triple[0] = 0.9
    assert c.r == float(np.float32(0.1))


def test_out_of_range_is_kept():
    c = SRGB(2.0, -1.0, 0.5)
    assert c.value == (2.0, -1.0, 0.5)
    h = HSL(1.75, 0.5, 0.5)
    assert h.h == 1.75


def test_immutable():
    c = SRGB(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        c.r = 0.5
    with pytest.raises(AttributeError):
        c._value = np.zeros(3, dtype=np.float32)
    with pytest.raises(AttributeError):
        c.extra = 1
    with pytest.raises(AttributeError):
        del c._value
    with pytest.raises(ValueError):
        c._value[0] = 0.5


def test_bad_construction():
    with pytest.raises(ValueError):
        SRGB(0.1, 0.2)
    with pytest.raises(ValueError):
        SRGB((0.1, 0.2, 0.3, 1.0))
    with pytest.raises(ValueError):
        SRGB(0.1, 0.2, 0.3, 1.0)
    with pytest.raises(TypeError):
        SRGB(r=0.1, g=0.2, x=0.3)
    with pytest.raises(TypeError):
        SRGB(r=0.1, g=0.2)
    with pytest.raises(ValueError):
        SRGB(0.1, g=0.2)
    with pytest.raises(TypeError):
        ColorBase(0.1, 0.2, 0.3)


def test_constants():
    assert SRGB.WHITE == SRGB(1.0, 1.0, 1.0)
    assert SRGB.BLACK == SRGB(0.0, 0.0, 0.0)
    assert SRGB.PURPLE == SRGB(1.0, 0.0, 1.0)
    assert LinearRGB.WHITE == LinearRGB(1.0, 1.0, 1.0)
    assert HSL.BLUE == HSL(2/3, 1.0, 0.5)
    assert HSV.AQUA == HSV(0.5, 1.0, 1.0)
    assert Okhsl.WHITE.l == 1.0
    assert isinstance(Okhsv.BLACK, Okhsv)


def test_constants_agree_across_spaces():
    for name in ("WHITE", "BLACK", "RED", "YELLOW", "GREEN", "AQUA", "BLUE", "PURPLE"):
        srgb = getattr(SRGB, name)
        assert HSL(srgb) == getattr(HSL, name)
        assert HSV(srgb) == getattr(HSV, name)
    for name in ("WHITE", "BLACK", "RED", "GREEN", "BLUE"):
        assert LinearRGB(getattr(SRGB, name)) == getattr(LinearRGB, name)
    assert Oklab(SRGB.WHITE).isclose(Oklab.WHITE, 1e-6)
    assert Oklab(SRGB.BLACK) == Oklab.BLACK


def test_white_and_black_agree_between_spaces(color_class, target_class):
    for name in ("WHITE", "BLACK"):
        converted = target_class(getattr(color_class, name))
        expected = getattr(target_class, name)
        if target_class in (Okhsl, Okhsv):
            # Okhsl/Okhsv saturation is degenerate at white, so compare the color and lightness
            assert LinearRGB(converted).isclose(LinearRGB(expected), 1e-5)
            assert abs(converted[2] - expected[2]) < 1e-5
        else:
            assert converted.isclose(expected, 1e-5)


def test_perceptual_white_to_hsl_and_hsv():
    for cls in (Oklab, Okhsl, Okhsv):
        assert HSL(cls.WHITE).isclose(HSL.WHITE, 1e-5)
        assert HSV(cls.WHITE).isclose(HSV.WHITE, 1e-5)
        assert HSL(cls.WHITE).isclose(HSL(SRGB(cls.WHITE)), 1e-5)
    assert HSL(Oklab(SRGB.WHITE)).isclose(HSL.WHITE, 1e-5)


def test_white_to_linear_rgb():
    assert LinearRGB(SRGB.WHITE) == LinearRGB(r=1.0, g=1.0, b=1.0)
    assert SRGB.WHITE.to_rgb() == LinearRGB(1.0, 1.0, 1.0)


def test_class_conversion_srgb_to_hsv():
    for rgb, hsv_expected in samples_srgb_hsv.items():
        hsv = SRGB(rgb).convert("hsv")
        assert isinstance(hsv, HSV)
        assert np.allclose(hsv.value, hsv_expected, atol=1e-6)


def test_class_conversion_srgb_to_hsl():
    for rgb, hsl_expected in samples_srgb_hsl.items():
        hsl = SRGB(rgb).to_hsl()
        assert isinstance(hsl, HSL)
        assert np.allclose(hsl.value, hsl_expected, atol=1e-6)
        back = hsl.to_srgb()
        assert np.allclose(back.value, rgb, atol=1e-6)


def test_equality_is_exact():
    a = SRGB(0.5, 0.5, 0.5)
    b = SRGB.from_triple(np.nextafter(np.float32([0.5, 0.5, 0.5]), np.float32(1)))
    assert a != b
    assert a.isclose(b)
    assert not a.isclose(SRGB(0.6, 0.5, 0.5))


def test_equality_requires_same_space():
    assert SRGB(0.0, 0.0, 0.0) != LinearRGB(0.0, 0.0, 0.0)
    assert SRGB(0.2, 0.3, 0.4) != (0.2, 0.3, 0.4)
    assert SRGB.BLACK.isclose(LinearRGB.BLACK)


def test_hash():
    assert hash(SRGB(0.1, 0.2, 0.3)) == hash(SRGB(0.1, 0.2, 0.3))
    assert len({SRGB(0.1, 0.2, 0.3), SRGB(0.1, 0.2, 0.3), HSL(0.1, 0.2, 0.3)}) == 2


def test_repr():
    assert repr(SRGB(1.0, 0.5, 0.25)) == "SRGB(r=1.0, g=0.5, b=0.25)"
    assert repr(Okhsv(0.0, 0.0, 1.0)) == "Okhsv(h=0.0, s=0.0, v=1.0)"


def test_sequence_protocol():
    c = HSV(0.5, 0.25, 0.75)
    assert list(c) == [0.5, 0.25, 0.75]
    assert len(c) == 3
    assert c[2] == 0.75
    h, s, v = c
    assert h == 0.5


def test_as_dict():
    assert HSL(0.5, 0.25, 0.75).as_dict() == {"h": 0.5, "s": 0.25, "l": 0.75}
    c = Oklab(0.5, 0.25, -0.125)
    assert Oklab.from_dict(c.as_dict()) == c


def test_copy_and_pickle(color_class):
    c = color_class(0.25, 0.5, 0.75)
    assert copy.copy(c) == c
    assert copy.deepcopy(c) == c
    restored = pickle.loads(pickle.dumps(c))
    assert restored == c
    assert type(restored) is color_class


def test_has_hue():
    assert HSL.BLACK.has_hue
    assert Okhsv.BLACK.has_hue
    assert not SRGB.BLACK.has_hue
    assert not Oklab.BLACK.has_hue


def test_rgb_alias():
    assert RGB is LinearRGB
    assert RGB.mode == ColorSpace.RGB


def test_color_protocol(color_class):
    assert isinstance(color_class(), Color)
