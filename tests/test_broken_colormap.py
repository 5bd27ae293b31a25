import numpy as np
import pytest
import plotextra as pex


def make_broken_colormap(vmin=0.0, high_cut=50.0, vmax=100.0):
    base = pex.ScalarColorMap("Blues", vmin=vmin, vmax=high_cut)
    overflow = pex.ScalarColorMap("Oranges", vmin=high_cut, vmax=vmax)
    return pex.BrokenColorMap(base, overflow)


@pytest.mark.parametrize("value", [0.0, 12.5, 49.9, 50.0])
def test_at_below_or_at_cut_uses_base(value):
    colormap = make_broken_colormap()
    assert colormap.at(value) == colormap.base.at(value)


@pytest.mark.parametrize("value", [50.1, 75.0, 100.0])
def test_at_above_cut_uses_overflow(value):
    colormap = make_broken_colormap()
    assert colormap.at(value) == colormap.overflow.at(value)


def test_at_cut_point_resolves_to_base():
    colormap = make_broken_colormap()
    assert colormap.at(50.0) == colormap.base.at(50.0)
    assert colormap.at(50.0) != colormap.overflow.at(50.0)


@pytest.mark.parametrize(
    "value, error",
    [
        (-1.0, pex.ColorUnderflowError),
        (100.5, pex.ColorOverflowError),
        (np.nan, pex.ColorMapRangeError),
    ],
)
def test_at_propagates_sub_map_errors(value, error):
    colormap = make_broken_colormap()
    with pytest.raises(error):
        colormap.at(value)


def test_at_uses_current_sub_map_ranges_without_high_cut():
    # desynchronised maps: the gap (40, 60) belongs to neither map
    base = pex.ScalarColorMap("Blues", vmin=0.0, vmax=40.0)
    overflow = pex.ScalarColorMap("Oranges", vmin=60.0, vmax=100.0)
    colormap = pex.BrokenColorMap(base, overflow)
    with pytest.raises(pex.ColorUnderflowError):
        colormap.at(50.0)
    assert colormap.at(40.0) == base.at(40.0)


@pytest.mark.parametrize("high_cut", [10.0, 50.0, 90.0])
def test_set_high_cut(high_cut):
    colormap = make_broken_colormap()
    colormap.set_high_cut(high_cut)
    assert colormap.base.vmax == high_cut
    assert colormap.overflow.vmin == high_cut
    assert colormap.high_cut == high_cut
    assert colormap.vmin == 0.0
    assert colormap.vmax == 100.0


def test_set_high_cut_moves_lookup_boundary():
    colormap = make_broken_colormap()
    colormap.set_high_cut(20.0)
    assert colormap.at(30.0) == colormap.overflow.at(30.0)
    assert colormap.at(20.0) == colormap.base.at(20.0)


def test_min_max_follow_sub_maps():
    colormap = make_broken_colormap()
    assert colormap.vmin == colormap.base.vmin
    assert colormap.vmax == colormap.overflow.vmax
    colormap.base.vmin = -10.0
    colormap.overflow.vmax = 200.0
    assert colormap.vmin == -10.0
    assert colormap.vmax == 200.0


@pytest.mark.parametrize("value", [75.0, 100.0, 123.456])
def test_set_max_round_trip(value):
    colormap = make_broken_colormap()
    colormap.vmax = value
    assert colormap.vmax == value
    assert colormap.overflow.vmax == value
    # cut point untouched
    assert colormap.base.vmax == 50.0
    assert colormap.overflow.vmin == 50.0

    colormap.base.vmax = value
    assert colormap.base.vmax == value


@pytest.mark.parametrize("value", [-25.0, 0.0, 10.5])
def test_set_min_round_trip(value):
    colormap = make_broken_colormap()
    colormap.vmin = value
    assert colormap.vmin == value
    assert colormap.base.vmin == value
    assert colormap.base.vmax == 50.0
    assert colormap.overflow.vmin == 50.0


def test_alpha_is_mean_of_sub_maps():
    colormap = make_broken_colormap()
    colormap.base.alpha = 0.2
    colormap.overflow.alpha = 0.6
    assert colormap.alpha == pytest.approx(0.4)


@pytest.mark.parametrize("alphas", [[0.5], [0.0, 1.0], [0.3, 0.7, 0.25]])
def test_set_alpha_applies_to_both(alphas):
    colormap = make_broken_colormap()
    for alpha in alphas:
        colormap.alpha = alpha
    assert colormap.base.alpha == alphas[-1]
    assert colormap.overflow.alpha == alphas[-1]
    assert colormap.alpha == (colormap.base.alpha + colormap.overflow.alpha) / 2
    assert colormap.at(75.0)[3] == pytest.approx(alphas[-1])


@pytest.mark.parametrize("alpha", [-0.1, 1.5])
def test_set_alpha_out_of_range(alpha):
    colormap = make_broken_colormap()
    with pytest.raises(ValueError, match="Alpha must be between 0 and 1"):
        colormap.alpha = alpha


@pytest.mark.parametrize("num_colors", [0, 1, 5, 256])
def test_palette_not_implemented(num_colors):
    colormap = make_broken_colormap()
    with pytest.raises(NotImplementedError):
        colormap.palette(num_colors)


def test_high_cut_is_documented():
    assert "base" in pex.BrokenColorMap.high_cut.__doc__
