"""Tick marks and the default tick generator."""
from typing import NamedTuple
from matplotlib.ticker import MaxNLocator, scale_range
import numpy as np

SUGGESTED_TICKS = 3
MAJOR_STEPS = [1, 2, 3, 4, 5, 6, 8, 10]


class Tick(NamedTuple):
    """Axis tick. An empty label marks a minor tick."""

    value: float
    label: str = ""

    def is_minor(self) -> bool:
        return self.label == ""


def _minor_divisions(major_step: float) -> int:
    """Subdivisions per major step, following AutoMinorLocator"""
    step_mantissa = 10 ** (np.log10(major_step) % 1)
    return 5 if np.any(np.isclose(step_mantissa, [1.0, 5.0, 10.0])) else 4


def default_ticks(vmin: float, vmax: float) -> list[Tick]:
    """
    Returns nice round ticks for the range [vmin, vmax].

    Around SUGGESTED_TICKS labelled major ticks come from matplotlib's
    MaxNLocator, followed by unlabelled minor ticks subdividing the
    major step the way AutoMinorLocator does.

    Parameters
    ----------
    vmin: float
        Lower end of the range.
    vmax: float
        Upper end of the range.

    Returns
    -------
    List of Tick, major ticks first.
    """
    if vmax <= vmin:
        raise ValueError("Illegal tick range, max must be greater than min")

    locator = MaxNLocator(nbins=SUGGESTED_TICKS, steps=MAJOR_STEPS)
    raw_major_values = locator.tick_values(vmin, vmax)
    major_values = raw_major_values[
        (raw_major_values >= vmin) & (raw_major_values <= vmax)
    ]
    # major step is a 1 to 20 multiple of the locator scale
    scale, _ = scale_range(vmin, vmax, SUGGESTED_TICKS)
    precision = max(0, -int(round(np.log10(scale))))
    ticks = [Tick(float(value), f"{value:.{precision}f}") for value in major_values]

    major_step = raw_major_values[1] - raw_major_values[0]
    minor_step = major_step / _minor_divisions(major_step)
    first_major = raw_major_values[0]
    minor_values = (
        np.arange(
            round((vmin - first_major) / minor_step),
            round((vmax - first_major) / minor_step) + 1,
        )
        * minor_step
        + first_major
    )
    for value in minor_values[(minor_values >= vmin) & (minor_values <= vmax)]:
        # minor and major ticks share one lattice
        if not np.any(np.isclose(value, major_values, rtol=0, atol=minor_step / 2)):
            ticks.append(Tick(float(value)))
    return ticks
