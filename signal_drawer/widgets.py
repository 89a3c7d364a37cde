from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Protocol

import numpy as np

from signal_drawer.adapters import normalize_times, normalize_values
from signal_drawer.axis import FrequencyAxis, TimeAxis, VerticalAxis
from signal_drawer.colors import BLACK, GRAY, GREEN, RGBA, WHITE, coerce_color
from signal_drawer.config import PlotConfig
from signal_drawer.errors import SignalDataError
from signal_drawer.notes import EqualTemperament, Note, Temperament
from signal_drawer.scales import ScaleCache, ScaleMapper, ValueRange
from signal_drawer.series import SERIES_MODES, DataSeries, Mark, SeriesStyle, SideLabel
from signal_drawer.surface import Surface, fill_rect, hline, vline


LOGGER = logging.getLogger(__name__)

DEFAULT_START_FREQUENCY = 20.0
DEFAULT_END_FREQUENCY = 20000.0

ColorLike = tuple[int, int, int] | tuple[int, int, int, int] | str


class PlotWidget(Protocol):
    def measure(self) -> tuple[int, int]:
        ...

    def draw_at(self, surface: Surface, top: int) -> None:
        ...


def _build_series(values: Any, *, expected: int, mode: str, color: ColorLike) -> DataSeries:
    if mode not in SERIES_MODES:
        raise SignalDataError(f"unsupported series mode: {mode}")
    arr = normalize_values(values, label="series")
    if arr.size != expected:
        raise SignalDataError(f"series length mismatch: {arr.size} != {expected}")
    return DataSeries(values=arr, style=SeriesStyle(mode=mode, color=coerce_color(color)))  # type: ignore[arg-type]


def _draw_background(surface: Surface, cache: ScaleCache, top: int, color: RGBA) -> None:
    fill_rect(surface, 0, top, cache.width - 1, top + cache.height - 1, color)


def _draw_title(surface: Surface, config: PlotConfig, title: str, top: int, color: RGBA) -> None:
    if title:
        surface.draw_text(config.label_space, top + 6 * config.space_part, title, color)


def _draw_mark(surface: Surface, config: PlotConfig, mapper: ScaleMapper, mark: Mark, top: int) -> None:
    x = mapper.to_pixel(mark.value)
    if not mapper.is_visible(x):
        return
    plot_top = top + config.label_space
    vline(surface, x, plot_top, plot_top + config.plot_height, mark.color)


def _draw_series(
    surface: Surface,
    config: PlotConfig,
    mapper: ScaleMapper,
    xs: np.ndarray,
    series: DataSeries,
    top: int,
) -> None:
    offset = -series.value_min
    span = series.value_max + offset
    # A constant series has no vertical extent; every sample sits on the baseline.
    factor = config.plot_height / span if span > 0 else 0.0
    bottom = top + config.label_space + config.plot_height
    color = series.style.color
    columns = mapper.to_pixels(xs)
    for x, value in zip(columns.tolist(), series.values.tolist(), strict=True):
        if not mapper.is_visible(x):
            continue
        y = bottom - int(round((value + offset) * factor))
        if series.style.mode == "line":
            vline(surface, x, y, bottom, color)
        else:
            surface.set_pixel(x, y, color)


def _draw_divider(surface: Surface, cache: ScaleCache, top: int, color: RGBA) -> None:
    hline(surface, 0, cache.width - 1, top, color)


@dataclass
class WidgetStyle:
    background: RGBA = BLACK
    divider: RGBA = GRAY
    axis: RGBA = WHITE
    title: RGBA = WHITE


def _range_with_start(current: ValueRange, start: float) -> ValueRange:
    updated = current.with_start(start)
    if updated is None:
        LOGGER.debug("ignoring start %s: must be finite and below end %s", start, current.end)
        return current
    return updated


def _range_with_end(current: ValueRange, end: float) -> ValueRange:
    updated = current.with_end(end)
    if updated is None:
        LOGGER.debug("ignoring end %s: must be finite and above start %s", end, current.start)
        return current
    return updated


def _as_ns(value: float) -> int | float:
    # Non-finite values pass through so the range update rejects them.
    return int(value) if math.isfinite(value) else float(value)


def _fitted_range(current: ValueRange, xs: np.ndarray) -> ValueRange:
    first = xs[0].item()
    last = xs[-1].item()
    if not first < last:
        LOGGER.debug("data spans no interval; keeping range [%s, %s]", current.start, current.end)
        return current
    return ValueRange(start=first, end=last)


class SpectrumWidget:
    """Frequency spectrum with a musical-note axis.

    Marks, logarithmic scaling and explicit range control are independent
    options; every setter returns the widget so calls can be chained.
    Range updates that would leave start >= end are ignored.
    """

    def __init__(
        self,
        config: PlotConfig,
        frequencies: Any,
        title: str = "",
        *,
        start: float = DEFAULT_START_FREQUENCY,
        end: float = DEFAULT_END_FREQUENCY,
    ) -> None:
        self.config = config
        self.title = title
        self.frequencies = normalize_values(frequencies, label="frequencies")
        self.style = WidgetStyle()
        self.temperament: Temperament = EqualTemperament(440.0)
        self.log_scale = False
        self._range = ValueRange(start=float(start), end=float(end))
        self._series: list[DataSeries] = []
        self._marks: list[Mark] = []
        self._side_labels: list[SideLabel] = []

    @property
    def value_range(self) -> ValueRange:
        return self._range

    @property
    def start(self) -> float:
        return self._range.start

    @property
    def end(self) -> float:
        return self._range.end

    @property
    def series(self) -> tuple[DataSeries, ...]:
        return tuple(self._series)

    @property
    def marks(self) -> tuple[Mark, ...]:
        return tuple(self._marks)

    def add_series(self, values: Any, *, mode: str = "line", color: ColorLike = GREEN) -> "SpectrumWidget":
        self._series.append(_build_series(values, expected=self.frequencies.size, mode=mode, color=color))
        return self

    def add_mark(self, frequency: float, color: ColorLike) -> "SpectrumWidget":
        self._marks.append(Mark(value=float(frequency), color=coerce_color(color)))
        return self

    def add_side_label(self, offset: int, value: float, text: str = "") -> "SpectrumWidget":
        self._side_labels.append(SideLabel(offset=int(offset), value=float(value), text=text))
        return self

    def set_temperament(self, temperament: Temperament) -> "SpectrumWidget":
        self.temperament = temperament
        return self

    def set_log_scale(self, enabled: bool = True) -> "SpectrumWidget":
        self.log_scale = bool(enabled)
        return self

    def set_start(self, frequency: float) -> "SpectrumWidget":
        self._range = _range_with_start(self._range, float(frequency))
        return self

    def set_end(self, frequency: float) -> "SpectrumWidget":
        self._range = _range_with_end(self._range, float(frequency))
        return self

    def set_start_note(self, note: Note) -> "SpectrumWidget":
        return self.set_start(note.lower_frequency)

    def set_end_note(self, note: Note) -> "SpectrumWidget":
        return self.set_end(note.upper_frequency)

    def fit_to_data(self) -> "SpectrumWidget":
        self._range = _fitted_range(self._range, self.frequencies)
        return self

    def set_background_color(self, color: ColorLike) -> "SpectrumWidget":
        self.style.background = coerce_color(color)
        return self

    def set_divider_color(self, color: ColorLike) -> "SpectrumWidget":
        self.style.divider = coerce_color(color)
        return self

    def set_axis_color(self, color: ColorLike) -> "SpectrumWidget":
        self.style.axis = coerce_color(color)
        return self

    def set_title_color(self, color: ColorLike) -> "SpectrumWidget":
        self.style.title = coerce_color(color)
        return self

    def mapper(self) -> ScaleMapper:
        return ScaleMapper.build(
            self.config,
            self._range,
            log_scale=self.log_scale,
            series_length=int(self.frequencies.size),
        )

    def measure(self) -> tuple[int, int]:
        cache = self.mapper().cache
        return (cache.width, cache.height)

    def draw_at(self, surface: Surface, top: int) -> None:
        mapper = self.mapper()
        _draw_background(surface, mapper.cache, top, self.style.background)
        _draw_title(surface, self.config, self.title, top, self.style.title)
        for mark in self._marks:
            _draw_mark(surface, self.config, mapper, mark, top)
        for series in self._series:
            _draw_series(surface, self.config, mapper, self.frequencies, series, top)
        FrequencyAxis(self.config, mapper, self.temperament, self.style.axis).draw(surface, top)
        VerticalAxis(self.config, self.style.axis, tuple(self._side_labels)).draw(surface, top)
        if top > 0:
            _draw_divider(surface, mapper.cache, top, self.style.divider)


class WaveWidget:
    """Time-domain waveform. Times are nanoseconds; the range defaults to the first and last sample."""

    def __init__(
        self,
        config: PlotConfig,
        times: Any,
        title: str = "",
        *,
        start: int | None = None,
        end: int | None = None,
    ) -> None:
        self.config = config
        self.title = title
        self.times = normalize_times(times, label="times")
        self.style = WidgetStyle()
        first = int(self.times[0]) if start is None else int(start)
        last = int(self.times[-1]) if end is None else int(end)
        if not first < last:
            raise SignalDataError(f"times must span a non-empty interval, got [{first}, {last}]")
        self._range = ValueRange(start=first, end=last)
        self._series: list[DataSeries] = []
        self._side_labels: list[SideLabel] = []

    @property
    def value_range(self) -> ValueRange:
        return self._range

    @property
    def start(self) -> int:
        return int(self._range.start)

    @property
    def end(self) -> int:
        return int(self._range.end)

    @property
    def series(self) -> tuple[DataSeries, ...]:
        return tuple(self._series)

    def add_series(self, values: Any, *, mode: str = "point", color: ColorLike = GREEN) -> "WaveWidget":
        self._series.append(_build_series(values, expected=self.times.size, mode=mode, color=color))
        return self

    def add_side_label(self, offset: int, value: float, text: str = "") -> "WaveWidget":
        self._side_labels.append(SideLabel(offset=int(offset), value=float(value), text=text))
        return self

    def set_start(self, start_ns: int) -> "WaveWidget":
        self._range = _range_with_start(self._range, _as_ns(start_ns))
        return self

    def set_end(self, end_ns: int) -> "WaveWidget":
        self._range = _range_with_end(self._range, _as_ns(end_ns))
        return self

    def fit_to_data(self) -> "WaveWidget":
        self._range = _fitted_range(self._range, self.times)
        return self

    def set_background_color(self, color: ColorLike) -> "WaveWidget":
        self.style.background = coerce_color(color)
        return self

    def set_divider_color(self, color: ColorLike) -> "WaveWidget":
        self.style.divider = coerce_color(color)
        return self

    def set_axis_color(self, color: ColorLike) -> "WaveWidget":
        self.style.axis = coerce_color(color)
        return self

    def set_title_color(self, color: ColorLike) -> "WaveWidget":
        self.style.title = coerce_color(color)
        return self

    def mapper(self) -> ScaleMapper:
        return ScaleMapper.build(self.config, self._range)

    def measure(self) -> tuple[int, int]:
        cache = self.mapper().cache
        return (cache.width, cache.height)

    def draw_at(self, surface: Surface, top: int) -> None:
        mapper = self.mapper()
        _draw_background(surface, mapper.cache, top, self.style.background)
        _draw_title(surface, self.config, self.title, top, self.style.title)
        for series in self._series:
            _draw_series(surface, self.config, mapper, self.times, series, top)
        TimeAxis(self.config, mapper, self.style.axis).draw(surface, top)
        VerticalAxis(self.config, self.style.axis, tuple(self._side_labels)).draw(surface, top)
        if top > 0:
            _draw_divider(surface, mapper.cache, top, self.style.divider)
