from __future__ import annotations

from typing import Protocol

from signal_drawer.colors import RGBA


class Surface(Protocol):
    """Pixel sink a widget draws onto. Out-of-bounds coordinates are the surface's concern."""

    def set_pixel(self, x: int, y: int, color: RGBA) -> None:
        ...

    def draw_text(self, x: int, y: int, text: str, color: RGBA) -> None:
        ...


def hline(surface: Surface, x0: int, x1: int, y: int, color: RGBA) -> None:
    """Stroke the inclusive row segment [x0, x1] at y."""
    fast = getattr(surface, "draw_hline", None)
    if fast is not None:
        fast(x0, x1, y, color)
        return
    for x in range(min(x0, x1), max(x0, x1) + 1):
        surface.set_pixel(x, y, color)


def vline(surface: Surface, x: int, y0: int, y1: int, color: RGBA) -> None:
    """Stroke the inclusive column segment [y0, y1] at x."""
    fast = getattr(surface, "draw_vline", None)
    if fast is not None:
        fast(x, y0, y1, color)
        return
    for y in range(min(y0, y1), max(y0, y1) + 1):
        surface.set_pixel(x, y, color)


def fill_rect(surface: Surface, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    fast = getattr(surface, "fill_rect", None)
    if fast is not None:
        fast(x0, y0, x1, y1, color)
        return
    for y in range(min(y0, y1), max(y0, y1) + 1):
        hline(surface, x0, x1, y, color)
