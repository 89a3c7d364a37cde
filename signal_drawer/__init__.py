from signal_drawer.api import stack
from signal_drawer.config import PlotConfig, load_plot_config, plot_config
from signal_drawer.errors import SignalDataError, SignalDrawerError
from signal_drawer.notes import EqualTemperament, Note, Octave
from signal_drawer.raster import RasterSurface
from signal_drawer.scales import SENTINEL_COLUMN, ScaleMapper, ValueRange
from signal_drawer.stack import WidgetStack
from signal_drawer.surface import Surface
from signal_drawer.widgets import PlotWidget, SpectrumWidget, WaveWidget

__all__ = [
    "EqualTemperament",
    "Note",
    "Octave",
    "PlotConfig",
    "PlotWidget",
    "RasterSurface",
    "SENTINEL_COLUMN",
    "ScaleMapper",
    "SignalDataError",
    "SignalDrawerError",
    "SpectrumWidget",
    "Surface",
    "ValueRange",
    "WaveWidget",
    "WidgetStack",
    "load_plot_config",
    "plot_config",
    "stack",
]
