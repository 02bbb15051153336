"""Spinny - Utils Package."""

from spinny.utils.async_utils import create_safe_task
from spinny.utils.text import find_font, fit_font, get_font, text_width

__all__ = [
    "create_safe_task",
    "find_font",
    "fit_font",
    "get_font",
    "text_width",
]
