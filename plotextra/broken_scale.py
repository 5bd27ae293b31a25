"""Linear axis scale with a break at a cut point, and its ticks."""
from dataclasses import dataclass
import numpy as np
from .ticks import Tick, default_ticks


def _as_result(value: np.ndarray) -> float | np.ndarray:
    return float(value) if value.ndim == 0 else value


@dataclass
class BrokenScale:
    r"""Linear scale broken at high_cut.

    Values in [vmin, high_cut] occupy [0, high_cut_fraction] of the axis,
    values in [high_cut, vmax] the remaining [high_cut_fraction, 1].

    The mapping is deliberately unchecked: inputs outside [vmin, vmax]
    extrapolate, and degenerate ranges (vmax == high_cut or
    high_cut == vmin) give inf or nan.

    Attributes
    ----------
    high_cut: float
        Value at which the break occurs.
    high_cut_fraction: float
        Fraction of the axis allocated to values at or below high_cut.
    """

    high_cut: float
    high_cut_fraction: float

    def normalize(
        self, vmin: float, vmax: float, x: float | np.ndarray
    ) -> float | np.ndarray:
        """Returns the fractional broken distance of x between vmin and vmax."""
        x = np.asarray(x, dtype=np.float64)
        vmin = np.float64(vmin)
        vmax = np.float64(vmax)
        with np.errstate(divide="ignore", invalid="ignore"):
            above = self.high_cut_fraction + (1 - self.high_cut_fraction) * (
                x - self.high_cut
            ) / (vmax - self.high_cut)
            below = self.high_cut_fraction * (x - vmin) / (self.high_cut - vmin)
        return _as_result(np.where(x > self.high_cut, above, below))

    def inverse(
        self, vmin: float, vmax: float, y: float | np.ndarray
    ) -> float | np.ndarray:
        """Returns the value whose broken distance between vmin and vmax is y."""
        y = np.asarray(y, dtype=np.float64)
        vmin = np.float64(vmin)
        vmax = np.float64(vmax)
        with np.errstate(divide="ignore", invalid="ignore"):
            above = self.high_cut + (y - self.high_cut_fraction) * (
                vmax - self.high_cut
            ) / (1 - self.high_cut_fraction)
            below = vmin + y * (self.high_cut - vmin) / self.high_cut_fraction
        return _as_result(np.where(y > self.high_cut_fraction, above, below))


@dataclass
class BrokenTicks:
    """Default ticks up to high_cut plus a single tick at the axis maximum."""

    high_cut: float

    def ticks(self, vmin: float, vmax: float) -> list[Tick]:
        # no deduplication when vmax lands on a default tick
        ticks = default_ticks(vmin, self.high_cut)
        ticks.append(Tick(vmax, f"{vmax:.0f}"))
        return ticks
