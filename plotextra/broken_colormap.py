"""Composite color map switching between two color maps at a cut point."""
import logging
from .colormap import ColorMap

logger = logging.getLogger(__name__)


class BrokenColorMap:
    r"""Color map composed of a base map and an overflow map.

    Values up to and including the cut point are looked up in the base
    map, values strictly above it in the overflow map. The cut point is
    not stored: it is the base map's vmax, which `set_high_cut` keeps
    equal to the overflow map's vmin.

    Attributes
    ----------
    base: ColorMap
        Color map for values at or below the cut point.
    overflow: ColorMap
        Color map for values above the cut point.
    """

    def __init__(self, base: ColorMap, overflow: ColorMap) -> None:
        """Class initializer."""
        self.base = base
        self.overflow = overflow

    def set_high_cut(self, value: float) -> None:
        """Sets the cut point for switching between base and overflow maps."""
        logger.debug("Setting high cut to %s", value)
        self.base.vmax = value
        self.overflow.vmin = value

    @property
    def high_cut(self) -> float:
        """Cut point, read from the base map's vmax."""
        return self.base.vmax

    def at(self, value: float) -> tuple:
        """
        Returns the color associated with value.

        Errors raised by the selected sub-map, including values outside
        its range, propagate unchanged.
        """
        if value > self.base.vmax:
            return self.overflow.at(value)
        return self.base.at(value)

    @property
    def vmax(self) -> float:
        return self.overflow.vmax

    @vmax.setter
    def vmax(self, value: float) -> None:
        self.overflow.vmax = value

    @property
    def vmin(self) -> float:
        return self.base.vmin

    @vmin.setter
    def vmin(self, value: float) -> None:
        self.base.vmin = value

    @property
    def alpha(self) -> float:
        """Mean of the sub-map opacities. Each sub-map renders with its own."""
        return (self.base.alpha + self.overflow.alpha) / 2

    @alpha.setter
    def alpha(self, value: float) -> None:
        self.base.alpha = value
        self.overflow.alpha = value

    def palette(self, num_colors: int) -> list:
        """Not supported for composite color maps."""
        raise NotImplementedError("Palette is not implemented for BrokenColorMap")
