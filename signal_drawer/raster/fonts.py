from __future__ import annotations

from functools import lru_cache
import logging

from PIL import ImageFont


LOGGER = logging.getLogger(__name__)

LabelFont = ImageFont.FreeTypeFont | ImageFont.ImageFont

DEFAULT_FONT_FILE = "DejaVuSansMono.ttf"
DEFAULT_FONT_SIZE_PX = 11


@lru_cache(maxsize=8)
def label_font(font_file: str = DEFAULT_FONT_FILE, size_px: int = DEFAULT_FONT_SIZE_PX) -> LabelFont:
    """Load the axis label font.

    Pillow resolves bare file names against the system font directories; when
    the file is missing the built-in default font is used at the same size.
    """
    try:
        return ImageFont.truetype(font_file, size=size_px)
    except OSError:
        LOGGER.warning("font %s not found; using Pillow default font", font_file)
        return ImageFont.load_default(size=size_px)
