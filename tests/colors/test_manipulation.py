import copy

import numpy as np
import pytest

from paintcolor import BLACK, WHITE, TRANSPARENT, Color, InvariantViolation, color, debug_checks
from ..samples import samples_rgba


def test_inverse():
    c = Color.from_rgba(0.0, 0.25, 0.75, 0.5)
    assert c.inverse() == Color.from_rgba(1.0, 0.75, 0.25, 0.5)
    assert Color.BLACK.inverse() == Color.WHITE


def test_inverse_does_not_change_original():
    c = Color.from_rgb(0.0, 0.25, 0.75)
    c.inverse()
    assert c == Color.from_rgb(0.0, 0.25, 0.75)


def test_invert_in_place():
    c = Color.from_rgb(0.0, 0.25, 0.75)
    assert c.invert() is None
    # each channel comes from its own original value
    assert c == Color.from_rgb(1.0, 0.75, 0.25)


def test_invert_matches_inverse():
    for rgba in samples_rgba:
        c = Color.from_rgba(*rgba)
        expected = c.inverse()
        c.invert()
        assert c == expected, rgba


def test_double_inverse():
    # dyadic channels survive 1 - (1 - x) exactly
    for k in range(0, 257, 8):
        v = k / 256
        c = Color.from_rgba(v, 1.0 - v, v / 2, 0.5)
        assert c.inverse().inverse() == c

    for rgba in samples_rgba:
        c = Color.from_rgba(*rgba)
        twice = c.inverse().inverse()
        assert np.allclose(twice.to_array(), c.to_array(), atol=1e-7)
        assert twice.a == c.a


def test_inverse_checks_range():
    c = Color.from_rgb(2.0, 0.0, 0.0)
    with pytest.raises(InvariantViolation):
        c.inverse()
    with debug_checks(False):
        assert c.inverse().r == -1.0


def test_scale_alpha():
    c = Color.from_rgba(0.2, 0.4, 0.6, 0.7)
    scaled = c.scale_alpha(0.5)
    assert scaled.a == np.float32(0.7) * np.float32(0.5)
    assert (scaled.r, scaled.g, scaled.b) == (c.r, c.g, c.b)
    assert c.a == np.float32(0.7)


def test_scale_alpha_composition():
    for rgba in samples_rgba:
        c = Color.from_rgba(*rgba)
        for x, y in [(0.5, 0.5), (0.3, 2.0), (0.9, 0.1), (1.0, 0.0)]:
            chained = c.scale_alpha(x).scale_alpha(y)
            direct = c.scale_alpha(x * y)
            assert abs(float(chained.a) - float(direct.a)) < 1e-6
            assert (chained.r, chained.g, chained.b) == (c.r, c.g, c.b)


def test_scale_alpha_does_not_clamp():
    assert Color.WHITE.scale_alpha(3.0).a == 3.0
    assert Color.WHITE.scale_alpha(-1.0).a == -1.0


def test_invert_leaves_other_references_alone():
    c = Color.from_rgb(0.0, 0.25, 0.75)
    twin = Color.from_rgb(0.0, 0.25, 0.75)
    c.invert()
    assert twin == Color.from_rgb(0.0, 0.25, 0.75)


@pytest.mark.parametrize("name, channels", [
    ("BLACK", (0, 0, 0, 1)),
    ("WHITE", (1, 1, 1, 1)),
    ("TRANSPARENT", (0, 0, 0, 0)),
])
def test_constants_cannot_be_inverted_in_place(name, channels):
    alias = getattr(Color, name)
    with pytest.raises(AttributeError, match="shared constant"):
        alias.invert()
    assert getattr(Color, name) == Color(*channels)


def test_constants_survive_invert_attempts():
    for alias in (BLACK, WHITE, TRANSPARENT):
        with pytest.raises(AttributeError):
            alias.invert()
    assert BLACK == Color(0, 0, 0, 1)
    assert color(0, 0, 0) == Color.BLACK
    assert WHITE == Color(1, 1, 1, 1)
    assert TRANSPARENT == Color()


def test_copy_of_constant_can_be_inverted():
    c = copy.copy(Color.BLACK)
    c.invert()
    assert c == Color.WHITE
    assert Color.BLACK == Color(0, 0, 0, 1)
    assert Color.BLACK.inverse() == Color.WHITE
