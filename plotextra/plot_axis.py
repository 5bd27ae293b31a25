"""Hooks installing broken scales, ticks and color maps on matplotlib axes."""
import logging
import matplotlib.pyplot as plt
from matplotlib.ticker import FixedFormatter, FixedLocator, NullFormatter
import numpy as np
from .broken_scale import BrokenScale, BrokenTicks
from .colormap import ColorMap

logger = logging.getLogger(__name__)


def create_broken_axis_figure(
    scale: BrokenScale,
    ticks: BrokenTicks,
    vmin: float,
    vmax: float,
    which: str = "y",
    dpi: int = 150,
) -> tuple[plt.Figure, plt.Axes]:
    """Creates figure and axes with a broken scale installed on one axis"""
    fig, ax = plt.subplots(dpi=dpi)
    set_broken_axis(ax, scale, ticks, vmin, vmax, which=which)
    return fig, ax


def set_broken_axis(
    ax: plt.Axes,
    scale: BrokenScale,
    ticks: BrokenTicks,
    vmin: float,
    vmax: float,
    which: str = "y",
) -> None:
    """
    Installs a broken scale and its ticks on one axis of ax.

    Parameters
    ----------
    ax: matplotlib.axes.Axes
        Axes to modify.
    scale: BrokenScale
        Scale used to position values along the axis.
    ticks: BrokenTicks
        Tick generator for the axis.
    vmin: float
        Lower axis limit.
    vmax: float
        Upper axis limit.
    which: str
        Axis to modify, "x" or "y".
    """
    if which not in ("x", "y"):
        raise ValueError("Axis must be x or y")
    logger.debug(
        "Installing broken %s axis on [%s, %s] cut at %s", which, vmin, vmax, scale.high_cut
    )

    def forward(values):
        return scale.normalize(vmin, vmax, values)

    def inverse(values):
        return scale.inverse(vmin, vmax, values)

    axis = ax.xaxis if which == "x" else ax.yaxis
    set_scale = ax.set_xscale if which == "x" else ax.set_yscale
    set_lim = ax.set_xlim if which == "x" else ax.set_ylim

    set_scale("function", functions=(forward, inverse))
    tick_list = ticks.ticks(vmin, vmax)
    major_ticks = [tick for tick in tick_list if not tick.is_minor()]
    minor_ticks = [tick for tick in tick_list if tick.is_minor()]
    axis.set_major_locator(FixedLocator([tick.value for tick in major_ticks]))
    axis.set_major_formatter(FixedFormatter([tick.label for tick in major_ticks]))
    axis.set_minor_locator(FixedLocator([tick.value for tick in minor_ticks]))
    axis.set_minor_formatter(NullFormatter())
    set_lim(vmin, vmax)


def scatter_with_colormap(
    ax: plt.Axes,
    x: np.ndarray,
    y: np.ndarray,
    values: np.ndarray,
    colormap: ColorMap,
    **kwargs,
):
    """Scatter plot colouring each point by colormap.at(value)"""
    colors = [colormap.at(value) for value in values]
    return ax.scatter(x, y, c=colors, **kwargs)
