from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from signal_drawer.config import PlotConfig


SENTINEL_COLUMN = -1000
LOG_SCALE = 600.0
LOG_OFFSET = 2500.0


@dataclass(frozen=True)
class ValueRange:
    """Displayed [start, end] bounds of the independent variable; start < end."""

    start: float
    end: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.start) and math.isfinite(self.end)):
            raise ValueError(f"range bounds must be finite, got [{self.start}, {self.end}]")
        if not self.start < self.end:
            raise ValueError(f"range start must be < end, got [{self.start}, {self.end}]")

    def with_start(self, start: float) -> "ValueRange | None":
        if not math.isfinite(start) or start >= self.end:
            return None
        return ValueRange(start=start, end=self.end)

    def with_end(self, end: float) -> "ValueRange | None":
        if not math.isfinite(end) or self.start >= end:
            return None
        return ValueRange(start=self.start, end=end)


@dataclass(frozen=True)
class ScaleCache:
    pixels_per_unit: float
    width: int
    height: int


def compute_scale_cache(
    config: PlotConfig,
    value_range: ValueRange,
    *,
    log_scale: bool = False,
    series_length: int = 0,
) -> ScaleCache:
    pixels_per_unit = config.plot_width / (value_range.end - value_range.start)
    width = config.widget_width
    if log_scale:
        if series_length <= 0:
            raise ValueError("logarithmic width needs a non-empty series")
        # Short series have no room for a log plot region; keep just the margins.
        plot_part = max(0, int(math.log2(series_length) * LOG_SCALE - LOG_OFFSET))
        width = plot_part + 2 * config.label_space
    return ScaleCache(pixels_per_unit=pixels_per_unit, width=width, height=config.widget_height)


@dataclass(frozen=True)
class ScaleMapper:
    """Maps independent values to pixel columns for one draw pass.

    Values outside the range map to SENTINEL_COLUMN, so `column > 0` is the
    visibility test for callers.
    """

    config: PlotConfig
    value_range: ValueRange
    cache: ScaleCache
    log_scale: bool = False

    @classmethod
    def build(
        cls,
        config: PlotConfig,
        value_range: ValueRange,
        *,
        log_scale: bool = False,
        series_length: int = 0,
    ) -> "ScaleMapper":
        cache = compute_scale_cache(config, value_range, log_scale=log_scale, series_length=series_length)
        return cls(config=config, value_range=value_range, cache=cache, log_scale=log_scale)

    def to_pixel(self, value: float) -> int:
        if value < self.value_range.start or value > self.value_range.end:
            return SENTINEL_COLUMN
        raw = (value - self.value_range.start) * self.cache.pixels_per_unit + self.config.label_space
        if not self.log_scale:
            return int(round(raw))
        if raw <= 0:
            return SENTINEL_COLUMN
        return int(round(math.log2(raw) * LOG_SCALE - LOG_OFFSET))

    def to_pixels(self, values: np.ndarray) -> np.ndarray:
        values = np.asarray(values, dtype=np.float64)
        inside = (values >= self.value_range.start) & (values <= self.value_range.end)
        raw = (values - self.value_range.start) * self.cache.pixels_per_unit + self.config.label_space
        if self.log_scale:
            inside &= raw > 0
            with np.errstate(divide="ignore", invalid="ignore"):
                raw = np.log2(np.where(inside, raw, 1.0)) * LOG_SCALE - LOG_OFFSET
        columns = np.rint(raw).astype(np.int64)
        columns[~inside] = SENTINEL_COLUMN
        return columns

    @staticmethod
    def is_visible(column: int) -> bool:
        return column > 0
