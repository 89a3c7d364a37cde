from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np

from signal_drawer.colors import GREEN, RGBA


SeriesMode = Literal["line", "point"]
SERIES_MODES = ("line", "point")


@dataclass(frozen=True)
class SeriesStyle:
    mode: SeriesMode = "line"
    color: RGBA = GREEN


@dataclass(frozen=True)
class DataSeries:
    """Values aligned index-for-index with the owning widget's independent axis."""

    values: np.ndarray
    style: SeriesStyle

    @property
    def value_min(self) -> float:
        return float(np.min(self.values))

    @property
    def value_max(self) -> float:
        return float(np.max(self.values))


@dataclass(frozen=True)
class Mark:
    """Highlights one independent value with a full-height line."""

    value: float
    color: RGBA


@dataclass(frozen=True)
class SideLabel:
    """Text beside the vertical axis, `offset` pixels below the plot top."""

    offset: int
    value: float
    text: str
