from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Sequence

from signal_drawer.colors import RGBA
from signal_drawer.config import PlotConfig
from signal_drawer.notes import AXIS_OCTAVES, Note, Octave, Temperament
from signal_drawer.scales import ScaleMapper
from signal_drawer.series import SideLabel
from signal_drawer.surface import Surface, hline, vline


LOGGER = logging.getLogger(__name__)

TIME_AXIS_INTERVALS = 5
NS_PER_MS = 1_000_000
START_LABEL_NUDGE_PX = 5
END_LABEL_NUDGE_PX = 100
NOTE_LABEL_NUDGE_PX = 3


def _axis_line_extent(config: PlotConfig, mapper: ScaleMapper) -> tuple[int, int]:
    return (config.label_space - config.space_part, mapper.cache.width - config.label_space)


@dataclass(frozen=True)
class FrequencyAxis:
    """Horizontal axis calibrated in octaves and notes, plus the range boundaries in Hz."""

    config: PlotConfig
    mapper: ScaleMapper
    temperament: Temperament
    color: RGBA
    octaves: Sequence[int] = AXIS_OCTAVES

    def draw(self, surface: Surface, top: int) -> None:
        line_y = top + self.config.label_space + self.config.plot_height
        x0, x1 = _axis_line_extent(self.config, self.mapper)
        hline(surface, x0, x1, line_y, self.color)
        for index in self.octaves:
            self._draw_octave(surface, self.temperament.octave(index), line_y)
        self._draw_range_markers(surface, line_y)

    def _draw_octave(self, surface: Surface, octave: Octave, line_top: int) -> None:
        sp = self.config.space_part
        x1 = self.mapper.to_pixel(octave.base_frequency)
        if not self.mapper.is_visible(x1):
            LOGGER.debug("skipping %s: %.3fHz outside displayed range", octave.name, octave.base_frequency)
            return
        x2 = self.mapper.to_pixel(octave.base_frequency * 2.0)
        bracket_bottom = line_top + 4 * sp
        vline(surface, x1, line_top, bracket_bottom, self.color)
        if self.mapper.is_visible(x2):
            vline(surface, x2, line_top, bracket_bottom, self.color)
        if not octave.notes:
            surface.draw_text(x1 + START_LABEL_NUDGE_PX, bracket_bottom + sp, octave.name, self.color)
            return
        for note in octave.notes:
            self._draw_note(surface, note, line_top)

    def _draw_note(self, surface: Surface, note: Note, line_top: int) -> None:
        sp = self.config.space_part
        x = self.mapper.to_pixel(note.exact_frequency)
        if not self.mapper.is_visible(x):
            return
        tick_bottom = line_top + sp
        vline(surface, x, line_top, tick_bottom, self.color)
        if note.is_altered:
            return
        y = tick_bottom + sp + 3
        surface.draw_text(x + NOTE_LABEL_NUDGE_PX, y, note.name, self.color)
        y += 2 * sp + 3
        surface.draw_text(x + NOTE_LABEL_NUDGE_PX, y, str(note.midi_number), self.color)

    def _draw_range_markers(self, surface: Surface, line_top: int) -> None:
        sp = self.config.space_part
        value_range = self.mapper.value_range
        line_bottom = line_top + 5 * sp
        label_y = line_top + 7 * sp
        x_start = self.mapper.to_pixel(value_range.start)
        x_end = self.mapper.to_pixel(value_range.end)
        if self.mapper.is_visible(x_start):
            vline(surface, x_start, line_top, line_bottom, self.color)
            surface.draw_text(x_start + START_LABEL_NUDGE_PX, label_y, f"{value_range.start:f}Hz", self.color)
        if self.mapper.is_visible(x_end):
            vline(surface, x_end, line_top, line_bottom, self.color)
            surface.draw_text(x_end - END_LABEL_NUDGE_PX, label_y, f"{value_range.end:f}Hz", self.color)


@dataclass(frozen=True)
class TimeAxis:
    """Horizontal zero line at mid-plot with millisecond ticks along the bottom."""

    config: PlotConfig
    mapper: ScaleMapper
    color: RGBA

    def tick_times(self) -> list[int]:
        # Each boundary is computed from the range itself so no step error accumulates.
        start = int(self.mapper.value_range.start)
        span = int(self.mapper.value_range.end) - start
        return [start + (span * i) // TIME_AXIS_INTERVALS for i in range(TIME_AXIS_INTERVALS + 1)]

    def draw(self, surface: Surface, top: int) -> None:
        plot_top = top + self.config.label_space
        x0, x1 = _axis_line_extent(self.config, self.mapper)
        hline(surface, x0, x1, plot_top + self.config.plot_height // 2, self.color)
        line_y = plot_top + self.config.plot_height
        for t in self.tick_times():
            self._draw_tick(surface, t, line_y)

    def _draw_tick(self, surface: Surface, t_ns: int, line_y: int) -> None:
        sp = self.config.space_part
        x = self.mapper.to_pixel(t_ns)
        if not self.mapper.is_visible(x):
            return
        bottom = line_y + 3 * sp
        vline(surface, x, line_y, bottom, self.color)
        surface.draw_text(x, bottom + 2 * sp, f"{t_ns // NS_PER_MS}ms", self.color)


@dataclass(frozen=True)
class VerticalAxis:
    config: PlotConfig
    color: RGBA
    side_labels: Sequence[SideLabel] = field(default_factory=tuple)

    def draw(self, surface: Surface, top: int) -> None:
        sp = self.config.space_part
        x = self.config.label_space
        plot_top = top + self.config.label_space
        vline(surface, x, plot_top, plot_top + self.config.plot_height + sp, self.color)
        for label in self.side_labels:
            y = plot_top + label.offset
            hline(surface, x - sp, x, y, self.color)
            surface.draw_text(2, y - sp, f"{label.value:g} {label.text}".strip(), self.color)
