from .fonts import DEFAULT_FONT_FILE, DEFAULT_FONT_SIZE_PX, label_font
from .surface import RasterSurface

__all__ = [
    "DEFAULT_FONT_FILE",
    "DEFAULT_FONT_SIZE_PX",
    "RasterSurface",
    "label_font",
]
