from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import tomllib
from typing import Any, Mapping


LOGGER = logging.getLogger(__name__)

DEFAULT_PLOT_HEIGHT = 300
DEFAULT_PLOT_WIDTH = 2000
DEFAULT_LABEL_SPACE = 80
MIN_LABEL_SPACE = 8


@dataclass(frozen=True)
class PlotConfig:
    """Layout shared by the widgets of one stack.

    `label_space` is the margin reserved on every side of the plot region for
    labels; `space_part` is the tick-spacing unit derived from it.
    """

    plot_height: int = DEFAULT_PLOT_HEIGHT
    plot_width: int = DEFAULT_PLOT_WIDTH
    label_space: int = DEFAULT_LABEL_SPACE

    @property
    def space_part(self) -> int:
        return self.label_space // 8

    @property
    def widget_width(self) -> int:
        return self.plot_width + 2 * self.label_space

    @property
    def widget_height(self) -> int:
        return self.plot_height + 2 * self.label_space


def plot_config(
    *,
    plot_height: int = DEFAULT_PLOT_HEIGHT,
    plot_width: int = DEFAULT_PLOT_WIDTH,
    label_space: int = DEFAULT_LABEL_SPACE,
) -> PlotConfig:
    """Validate layout values and freeze them into a PlotConfig."""
    for name, value in (("plot_height", plot_height), ("plot_width", plot_width), ("label_space", label_space)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer")
    if plot_height <= 0:
        raise ValueError("plot_height must be > 0")
    if plot_width <= 0:
        raise ValueError("plot_width must be > 0")
    if label_space < MIN_LABEL_SPACE:
        raise ValueError(f"label_space must be >= {MIN_LABEL_SPACE}")
    return PlotConfig(plot_height=plot_height, plot_width=plot_width, label_space=label_space)


def plot_config_from_mapping(raw: Mapping[str, Any]) -> PlotConfig:
    known = {"plot_height", "plot_width", "label_space"}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"unknown layout option(s): {', '.join(unknown)}")
    return plot_config(**{key: raw[key] for key in known if key in raw})


def load_plot_config(path: str | Path) -> PlotConfig:
    """Read the `[layout]` table of a TOML file; a missing table yields defaults."""
    config_path = Path(path)
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    layout = raw.get("layout", {})
    if not isinstance(layout, dict):
        raise ValueError("`layout` must be a TOML table")
    config = plot_config_from_mapping(layout)
    LOGGER.info("loaded plot layout from %s: %s", config_path, config)
    return config
