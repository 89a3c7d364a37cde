from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np

from signal_drawer.config import PlotConfig
from signal_drawer.errors import SignalDrawerError
from signal_drawer.raster import RasterSurface
from signal_drawer.surface import Surface
from signal_drawer.widgets import PlotWidget, SpectrumWidget, WaveWidget


LOGGER = logging.getLogger(__name__)


class WidgetStack:
    """Widgets stacked top to bottom on one left-aligned canvas.

    Insertion order is draw order. `draw` is the only place vertical offsets
    are computed; each widget is measured again right before it is drawn.
    """

    def __init__(self, config: PlotConfig | None = None, surface: Surface | None = None) -> None:
        self.config = config if config is not None else PlotConfig()
        self.surface = surface
        self._widgets: list[PlotWidget] = []

    @property
    def widgets(self) -> tuple[PlotWidget, ...]:
        return tuple(self._widgets)

    def add_widget(self, widget: PlotWidget) -> "WidgetStack":
        self._widgets.append(widget)
        return self

    def spectrum(self, frequencies: Any, title: str = "", **kwargs: Any) -> SpectrumWidget:
        widget = SpectrumWidget(self.config, frequencies, title, **kwargs)
        self.add_widget(widget)
        return widget

    def wave(self, times: Any, title: str = "", **kwargs: Any) -> WaveWidget:
        widget = WaveWidget(self.config, times, title, **kwargs)
        self.add_widget(widget)
        return widget

    def set_surface(self, surface: Surface) -> "WidgetStack":
        self.surface = surface
        return self

    def total_height(self) -> int:
        return sum(widget.measure()[1] for widget in self._widgets)

    def total_width(self) -> int:
        return max((widget.measure()[0] for widget in self._widgets), default=0)

    def draw(self) -> None:
        if self.surface is None:
            raise SignalDrawerError("widget stack has no surface to draw on")
        offset = 0
        for index, widget in enumerate(self._widgets):
            LOGGER.debug("drawing widget %d (%s) at offset %d", index, type(widget).__name__, offset)
            widget.draw_at(self.surface, offset)
            offset += widget.measure()[1]

    def render(self) -> RasterSurface:
        """Draw every widget onto a fresh raster surface sized to the stack."""
        if not self._widgets:
            raise SignalDrawerError("cannot render an empty widget stack")
        surface = RasterSurface(self.total_width(), self.total_height())
        previous = self.surface
        self.surface = surface
        try:
            self.draw()
        finally:
            self.surface = previous
        return surface

    def to_rgba(self) -> np.ndarray:
        return self.render().rgba

    def save_png(self, path: str | Path) -> Path:
        surface = self.render()
        out = surface.save_png(path)
        LOGGER.info("wrote %dx%d stack to %s", surface.width, surface.height, out)
        return out
