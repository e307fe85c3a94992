import numpy as np
import pytest

from sideaxes import AxesView, side_position
from sideaxes.geometry import default_side_size, normalize_rect


@pytest.mark.parametrize("side", ["north", "south", "west", "east"])
def test_child_shares_edge_and_touches_parent(fig, parent, side):
    view = AxesView.of(parent)
    pos, size = side_position(view, side, gap=0.5, size=1.0, units="centimeters")
    x, y, w, h = pos

    fw, fh = fig.get_size_inches() * 2.54  # figure size in cm
    gx, gy = 0.5 / fw, 0.5 / fh

    if side == "north":
        assert (x, w) == pytest.approx((0.1, 0.8))
        assert y == pytest.approx(0.9 + gy)
        assert h == pytest.approx(1.0 / fh)
    elif side == "south":
        assert (x, w) == pytest.approx((0.1, 0.8))
        assert y + h == pytest.approx(0.1 - gy)
        assert h == pytest.approx(1.0 / fh)
    elif side == "west":
        assert (y, h) == pytest.approx((0.1, 0.8))
        assert x + w == pytest.approx(0.1 - gx)
        assert w == pytest.approx(1.0 / fw)
    else:
        assert (y, h) == pytest.approx((0.1, 0.8))
        assert x == pytest.approx(0.9 + gx)
        assert w == pytest.approx(1.0 / fw)

    assert size == 1.0


@pytest.mark.parametrize("side", ["north", "south", "west", "east"])
def test_position_independent_of_units(fig, parent, side):
    view = AxesView.of(parent)
    pos_cm, _ = side_position(view, side, gap=1.27, size=2.54, units="centimeters")
    pos_in, _ = side_position(view, side, gap=0.5, size=1.0, units="inches")
    pos_pt, _ = side_position(view, side, gap=36, size=72, units="points")
    pos_px, _ = side_position(view, side, gap=50, size=100, units="pixels")

    np.testing.assert_allclose(pos_cm, pos_in)
    np.testing.assert_allclose(pos_pt, pos_in)
    np.testing.assert_allclose(pos_px, pos_in)

    # same rect given in normalized units
    fw, fh = fig.get_size_inches()
    f = 1 / fw if side in ("west", "east") else 1 / fh
    pos_n, _ = side_position(view, side, gap=0.5 * f, size=1.0 * f, units="normalized")
    np.testing.assert_allclose(pos_n, pos_in)


@pytest.mark.parametrize("side, axis", [("west", 0), ("east", 0), ("south", 1), ("north", 1)])
def test_default_size_fills_to_figure_edge(fig, parent, side, axis):
    view = AxesView.of(parent)
    pos, size = side_position(view, side, gap=0.3, units="centimeters")

    extent = fig.get_size_inches()[axis] * 2.54
    assert size + 0.3 + 0.8 * extent + 0.1 * extent == pytest.approx(extent)

    lo, length = pos[axis], pos[axis + 2]
    if side in ("west", "south"):
        assert lo == pytest.approx(0.0)
    else:
        assert lo + length == pytest.approx(1.0)


def test_default_size_formula():
    pos = np.array([1.0, 2.0, 4.0, 3.0])
    s = np.array([0.1, 0.125])  # figure 10 x 8 units
    assert default_side_size("west", pos, s) == pytest.approx(1.0)
    assert default_side_size("south", pos, s, gap=0.5) == pytest.approx(1.5)
    assert default_side_size("east", pos, s) == pytest.approx(5.0)
    assert default_side_size("north", pos, s, gap=1) == pytest.approx(2.0)
    with pytest.raises(ValueError):
        default_side_size("up", pos, s)


def test_parent_untouched(parent):
    view = AxesView.of(parent)
    view.units = "points"
    before = parent.get_position().bounds

    side_position(view, "east", gap=0.2, units="inches")

    assert view.units == "points"
    assert parent.get_position().bounds == before


def test_degenerate_sizes_allowed(parent):
    view = AxesView.of(parent)
    pos, _ = side_position(view, "north", size=0.0)
    assert pos[3] == 0.0

    pos, _ = side_position(view, "east", size=-1.0)
    assert pos[2] < 0


def test_normalize_rect():
    assert normalize_rect([0.5, 0.5, -0.2, 0.1]) == pytest.approx([0.3, 0.5, 0.2, 0.1])
    assert normalize_rect([0.1, 0.9, 0.8, -0.05]) == pytest.approx([0.1, 0.85, 0.8, 0.05])
    assert normalize_rect([0.1, 0.1, 0.0, 0.3]) == pytest.approx([0.1, 0.1, 0.0, 0.3])


def test_unknown_side(parent):
    with pytest.raises(ValueError):
        side_position(AxesView.of(parent), "up", size=1)
