from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

import numpy as np
from PIL import Image

from signal_drawer.colors import BLACK, RED, WHITE
from signal_drawer.raster import RasterSurface, label_font
from signal_drawer.surface import fill_rect, hline, vline


class _PixelOnlySurface:
    def __init__(self) -> None:
        self.pixels: dict[tuple[int, int], tuple[int, int, int, int]] = {}

    def set_pixel(self, x: int, y: int, color) -> None:
        self.pixels[(x, y)] = color

    def draw_text(self, x: int, y: int, text: str, color) -> None:
        return None


def _pixel(surface: RasterSurface, x: int, y: int) -> tuple[int, ...]:
    return tuple(int(v) for v in surface.rgba[y, x])


class SurfaceHelperTests(unittest.TestCase):
    def test_helpers_fall_back_to_set_pixel(self) -> None:
        surface = _PixelOnlySurface()
        hline(surface, 2, 0, 1, WHITE)
        vline(surface, 5, 3, 4, RED)
        self.assertEqual(set(surface.pixels), {(0, 1), (1, 1), (2, 1), (5, 3), (5, 4)})
        surface = _PixelOnlySurface()
        fill_rect(surface, 0, 0, 1, 2, BLACK)
        self.assertEqual(len(surface.pixels), 6)

    def test_helpers_draw_inclusive_segments_on_raster(self) -> None:
        surface = RasterSurface(6, 6)
        hline(surface, 4, 1, 0, WHITE)
        vline(surface, 0, 5, 2, RED)
        fill_rect(surface, 5, 5, 4, 4, WHITE)
        self.assertEqual([_pixel(surface, x, 0) for x in range(6)], [BLACK, WHITE, WHITE, WHITE, WHITE, BLACK])
        self.assertEqual([_pixel(surface, 0, y) for y in range(6)], [BLACK, BLACK, RED, RED, RED, RED])
        self.assertEqual(
            {(x, y) for x in range(6) for y in range(1, 6) if _pixel(surface, x, y) == WHITE},
            {(4, 4), (4, 5), (5, 4), (5, 5)},
        )

    def test_single_pixel_segment(self) -> None:
        surface = RasterSurface(4, 4)
        vline(surface, 2, 3, 3, RED)
        self.assertEqual(int(np.count_nonzero(surface.rgba[:, :, 0])), 1)
        self.assertEqual(_pixel(surface, 2, 3), RED)


class RasterSurfaceTests(unittest.TestCase):
    def test_background_and_shape(self) -> None:
        surface = RasterSurface(4, 3, background=RED)
        self.assertEqual(surface.rgba.shape, (3, 4, 4))
        self.assertEqual(surface.rgba.dtype, np.uint8)
        self.assertTrue(np.all(surface.rgba == np.asarray(RED, dtype=np.uint8)))
        with self.assertRaises(ValueError):
            RasterSurface(0, 3)

    def test_pixel_writes_replace_color(self) -> None:
        surface = RasterSurface(3, 3)
        surface.set_pixel(1, 1, WHITE)
        surface.set_pixel(1, 1, RED)
        self.assertEqual(_pixel(surface, 1, 1), RED)

    def test_out_of_bounds_writes_are_clipped(self) -> None:
        surface = RasterSurface(10, 10)
        surface.set_pixel(-1, -1, WHITE)
        surface.set_pixel(10, 3, WHITE)
        surface.draw_hline(-50, -5, 2, WHITE)
        surface.fill_rect(20, 20, 40, 40, WHITE)
        surface.draw_text(200, 200, "hidden", WHITE)
        self.assertTrue(np.all(surface.rgba[:, :, :3] == 0))

    def test_text_starts_at_anchor(self) -> None:
        surface = RasterSurface(80, 30)
        surface.draw_text(4, 4, "A4", WHITE)
        ys, xs = np.nonzero(surface.rgba[:, :, 0])
        self.assertGreater(xs.size, 0)
        self.assertGreaterEqual(int(xs.min()), 4)
        self.assertGreaterEqual(int(ys.min()), 4)

    def test_label_font_is_cached(self) -> None:
        self.assertIs(label_font(), label_font())

    def test_png_round_trip(self) -> None:
        surface = RasterSurface(3, 2, background=RED)
        surface.set_pixel(0, 0, WHITE)
        with tempfile.TemporaryDirectory() as tmp:
            path = surface.save_png(Path(tmp) / "out" / "frame.png")
            with Image.open(path) as image:
                self.assertEqual(image.size, (3, 2))
                self.assertEqual(image.convert("RGBA").getpixel((0, 0)), WHITE)
                self.assertEqual(image.convert("RGBA").getpixel((2, 1)), RED)


if __name__ == "__main__":
    unittest.main()
