from .colormap import (
    ColorMap,
    ScalarColorMap,
    ColorMapRangeError,
    ColorUnderflowError,
    ColorOverflowError,
    get_lab_colormaps,
)
from .broken_colormap import BrokenColorMap
from .ticks import Tick, default_ticks
from .broken_scale import BrokenScale, BrokenTicks
from .plot_axis import (
    create_broken_axis_figure,
    set_broken_axis,
    scatter_with_colormap,
)
from .version import plotextra_version
