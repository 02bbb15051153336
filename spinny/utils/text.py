"""
Spinny - Text Utilities
=======================

Font lookup and label fitting for wheel rendering.

Author: Spinny Team
"""

from functools import lru_cache
from typing import Optional, Union

from PIL import ImageFont

from spinny.core.constants import FONT_PATHS


FontType = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


@lru_cache(maxsize=1)
def find_font() -> Optional[str]:
    """Find first available system font from predefined paths."""
    for font_path in FONT_PATHS:
        try:
            ImageFont.truetype(font_path, 20)
            return font_path
        except (OSError, IOError):
            continue
    return None


@lru_cache(maxsize=64)
def get_font(font_path: Optional[str], size: int) -> FontType:
    """Load font from path or fall back to default."""
    if font_path:
        try:
            return ImageFont.truetype(font_path, size)
        except (OSError, IOError):
            pass
    return ImageFont.load_default(size=size)


def text_width(text: str, font: FontType) -> float:
    """Rendered width of a single line of text."""
    bbox = font.getbbox(text)
    return bbox[2] - bbox[0]


def fit_font(
    text: str,
    max_width: float,
    start_size: int,
    min_size: int,
    font_path: Optional[str] = None,
) -> FontType:
    """
    Shrink the font one point at a time until `text` fits `max_width`.

    Stops at `min_size` even if the text still overflows.
    """
    path = font_path if font_path is not None else find_font()
    size = start_size
    font = get_font(path, size)
    while size > min_size and text_width(text, font) > max_width:
        size -= 1
        font = get_font(path, size)
    return font
