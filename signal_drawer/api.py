from __future__ import annotations

from pathlib import Path

from signal_drawer.config import (
    DEFAULT_LABEL_SPACE,
    DEFAULT_PLOT_HEIGHT,
    DEFAULT_PLOT_WIDTH,
    load_plot_config,
    plot_config,
)
from signal_drawer.stack import WidgetStack
from signal_drawer.surface import Surface


def stack(
    *,
    plot_height: int = DEFAULT_PLOT_HEIGHT,
    plot_width: int = DEFAULT_PLOT_WIDTH,
    label_space: int = DEFAULT_LABEL_SPACE,
    config_path: str | Path | None = None,
    surface: Surface | None = None,
) -> WidgetStack:
    """Create an empty stack; a TOML `config_path` takes precedence over the keyword layout."""
    if config_path is not None:
        config = load_plot_config(config_path)
    else:
        config = plot_config(plot_height=plot_height, plot_width=plot_width, label_space=label_space)
    return WidgetStack(config=config, surface=surface)
