import pickle

import numpy as np
import pytest

from stopgradient.colors.rgb import ColorRGB, RGB, parse_hex, to_rgb


def test_rgb_channels():
    color = ColorRGB((10, 20, 30))
    assert color.value == (10, 20, 30)
    assert (color.red, color.green, color.blue) == (10, 20, 30)
    r, g, b = color
    assert (r, g, b) == (10, 20, 30)
    assert color[1] == 20
    assert len(color) == 3


def test_rgb_alias():
    assert RGB is ColorRGB


def test_structural_equality():
    # Two separately built colors with equal channels are equal
    a = ColorRGB((0, 0, 0))
    b = ColorRGB([0, 0, 0])
    assert a is not b
    assert a == b
    assert not (a != b)
    assert a == (0, 0, 0)
    assert a != ColorRGB((0, 0, 1))
    assert a != "black"


def test_hash_matches_equality():
    a = ColorRGB((1, 2, 3))
    b = ColorRGB((1, 2, 3))
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert hash(a) == hash((1, 2, 3))


def test_immutable():
    color = ColorRGB((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        color.red = 4
    with pytest.raises(AttributeError):
        color.extra = 1


def test_truncates_and_clamps():
    assert ColorRGB((12.9, 0.5, 254.99)).value == (12, 0, 254)
    assert ColorRGB((300, -5, 255)).value == (255, 0, 255)


def test_accepts_numpy_row():
    row = np.array([1, 2, 3], dtype=np.uint8)
    assert ColorRGB(row).value == (1, 2, 3)
    assert all(type(c) is int for c in ColorRGB(row).value)


def test_copy_from_color():
    original = ColorRGB((5, 6, 7))
    assert ColorRGB(original) == original
    assert to_rgb(original) is original
    assert to_rgb((5, 6, 7)) == original


def test_wrong_shape():
    with pytest.raises(ValueError):
        ColorRGB((1, 2))
    with pytest.raises(ValueError):
        ColorRGB((1, 2, 3, 4))
    with pytest.raises(TypeError):
        ColorRGB(5)
    with pytest.raises(TypeError):
        ColorRGB(("a", "b", "c"))


def test_hex():
    assert ColorRGB((255, 128, 0)).hex == "#ff8000"
    assert ColorRGB.from_hex("#ff8000") == (255, 128, 0)
    assert ColorRGB("FF8000") == (255, 128, 0)
    assert ColorRGB("#f80") == (255, 136, 0)
    assert parse_hex("  #000000 ") == (0, 0, 0)


@pytest.mark.parametrize("bad", ["", "#12", "#12345", "#gg0000", "-1ff00", "#1234567"])
def test_invalid_hex(bad):
    with pytest.raises(ValueError):
        ColorRGB.from_hex(bad)


def test_pickle_round_trip():
    color = ColorRGB((9, 8, 7))
    assert pickle.loads(pickle.dumps(color)) == color


def test_repr():
    assert repr(ColorRGB((1, 2, 3))) == "ColorRGB((1, 2, 3))"
