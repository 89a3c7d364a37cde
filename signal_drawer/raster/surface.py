from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw

from signal_drawer.colors import BLACK, RGBA
from signal_drawer.raster.fonts import DEFAULT_FONT_FILE, DEFAULT_FONT_SIZE_PX, label_font


class RasterSurface:
    """Surface backed by a Pillow RGBA image.

    Plot colors are opaque, so every write replaces the pixel. Writes outside
    the image are clipped.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: RGBA = BLACK,
        *,
        font_file: str = DEFAULT_FONT_FILE,
        font_size_px: int = DEFAULT_FONT_SIZE_PX,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("surface width and height must be > 0")
        self.image = Image.new("RGBA", (int(width), int(height)), tuple(background))
        self._draw = ImageDraw.Draw(self.image)
        self.font = label_font(font_file, int(font_size_px))

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def rgba(self) -> np.ndarray:
        """Copy of the pixels as an (H, W, 4) uint8 array."""
        return np.array(self.image, dtype=np.uint8)

    def set_pixel(self, x: int, y: int, color: RGBA) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.image.putpixel((int(x), int(y)), tuple(color))

    def draw_text(self, x: int, y: int, text: str, color: RGBA) -> None:
        if not text:
            return
        # Shift by the glyph bbox so the inked text starts at (x, y).
        left, top, _, _ = self.font.getbbox(text)
        self._draw.text((int(x) - left, int(y) - top), text, fill=tuple(color), font=self.font)

    def draw_hline(self, x0: int, x1: int, y: int, color: RGBA) -> None:
        self._draw.line([(int(x0), int(y)), (int(x1), int(y))], fill=tuple(color))

    def draw_vline(self, x: int, y0: int, y1: int, color: RGBA) -> None:
        self._draw.line([(int(x), int(y0)), (int(x), int(y1))], fill=tuple(color))

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
        box = (min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))
        self._draw.rectangle(tuple(int(v) for v in box), fill=tuple(color))

    def to_image(self) -> Image.Image:
        return self.image.copy()

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(out, format="PNG")
        return out
