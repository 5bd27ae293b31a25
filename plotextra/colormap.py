"""Color maps with an adjustable value range and opacity."""
from typing import Protocol
import matplotlib as mpl
from matplotlib.colors import Colormap
import numpy as np


class ColorMapRangeError(ValueError):
    """Raised when a value cannot be mapped to a color."""


class ColorUnderflowError(ColorMapRangeError):
    """Raised when a value is below the color map minimum."""


class ColorOverflowError(ColorMapRangeError):
    """Raised when a value is above the color map maximum."""


class ColorMap(Protocol):
    """Capability set shared by all color maps in plotextra."""

    @property
    def vmin(self) -> float:
        ...

    @vmin.setter
    def vmin(self, value: float) -> None:
        ...

    @property
    def vmax(self) -> float:
        ...

    @vmax.setter
    def vmax(self, value: float) -> None:
        ...

    @property
    def alpha(self) -> float:
        ...

    @alpha.setter
    def alpha(self, value: float) -> None:
        ...

    def at(self, value: float) -> tuple:
        ...

    def palette(self, num_colors: int) -> list:
        ...


class ScalarColorMap:
    r"""Color map backed by a matplotlib colormap.

    Values in [vmin, vmax] are linearly mapped onto the matplotlib
    colormap, values outside raise.

    Attributes
    ----------
    cmap: matplotlib.colors.Colormap
        Underlying matplotlib colormap.
    vmin: float
        Lowest value that maps to a color.
    vmax: float
        Highest value that maps to a color.
    alpha: float
        Opacity of the returned colors, in [0, 1].
    """

    def __init__(
        self,
        cmap: str | Colormap = "viridis",
        vmin: float = 0.0,
        vmax: float = 1.0,
        alpha: float = 1.0,
    ) -> None:
        """Class initializer."""
        self.cmap = mpl.colormaps.get_cmap(cmap)
        self._vmin = vmin
        self._vmax = vmax
        self.alpha = alpha

    @property
    def vmin(self) -> float:
        return self._vmin

    @vmin.setter
    def vmin(self, value: float) -> None:
        self._vmin = value

    @property
    def vmax(self) -> float:
        return self._vmax

    @vmax.setter
    def vmax(self, value: float) -> None:
        self._vmax = value

    @property
    def alpha(self) -> float:
        return self._alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        if not 0.0 <= value <= 1.0:
            raise ValueError("Alpha must be between 0 and 1")
        self._alpha = value

    def at(self, value: float) -> tuple:
        """
        Returns the RGBA color associated with value.

        Raises
        ------
        ColorMapRangeError
            If value is NaN.
        ColorUnderflowError
            If value is below vmin.
        ColorOverflowError
            If value is above vmax.
        ValueError
            If vmax is not greater than vmin.
        """
        if np.isnan(value):
            raise ColorMapRangeError("NaN value")
        if self._vmax <= self._vmin:
            raise ValueError("Color map max must be greater than min")
        if value < self._vmin:
            raise ColorUnderflowError(
                f"Value {value} below color map range [{self._vmin}, {self._vmax}]"
            )
        if value > self._vmax:
            raise ColorOverflowError(
                f"Value {value} above color map range [{self._vmin}, {self._vmax}]"
            )
        fraction = (value - self._vmin) / (self._vmax - self._vmin)
        return tuple(float(c) for c in self.cmap(fraction, alpha=self._alpha))

    def palette(self, num_colors: int) -> list:
        """Returns num_colors colors evenly spaced over [vmin, vmax]."""
        if num_colors < 0:
            raise ValueError("Number of colors must be non-negative")
        return [
            self.at(value)
            for value in np.linspace(self._vmin, self._vmax, num_colors)
        ]

    def __repr__(self) -> str:
        return (
            f"ScalarColorMap({self.cmap.name!r}, vmin={self._vmin}, "
            f"vmax={self._vmax}, alpha={self._alpha})"
        )


def get_lab_colormaps(
    vmin: float, high_cut: float, vmax: float, alpha: float = 1.0
) -> tuple[ScalarColorMap, ScalarColorMap]:
    """Returns Blues base and Oranges overflow maps meeting at high_cut"""
    base = ScalarColorMap("Blues", vmin=vmin, vmax=high_cut, alpha=alpha)
    overflow = ScalarColorMap("Oranges", vmin=high_cut, vmax=vmax, alpha=alpha)
    return base, overflow
