"""
Spinny - Colors Module
======================

Color definitions for embeds and the wheel.

Author: Spinny Team
"""


# =============================================================================
# Embed Colors (Hex)
# =============================================================================

COLOR_SUCCESS = 0x43B581    # Green - successful actions
COLOR_NEUTRAL = 0x95A5A6    # Gray - neutral/cancelled
COLOR_PIG = 0xFF9EB5        # Pink - weekly winner


# =============================================================================
# Wheel Segment Colors (RGB, cycled by segment index)
# =============================================================================

WHEEL_COLORS = [
    (255, 100, 100),  # Red
    (100, 255, 100),  # Green
    (100, 100, 255),  # Blue
    (255, 255, 100),  # Yellow
    (255, 100, 255),  # Magenta
    (100, 255, 255),  # Cyan
    (255, 200, 100),  # Orange
    (200, 100, 255),  # Purple
]

WHEEL_BACKGROUND = (255, 255, 255)
WHEEL_OUTLINE = (0, 0, 0)
WHEEL_TEXT = (0, 0, 0)
POINTER_COLOR = (255, 0, 0)


# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    "COLOR_SUCCESS",
    "COLOR_NEUTRAL",
    "COLOR_PIG",
    "WHEEL_COLORS",
    "WHEEL_BACKGROUND",
    "WHEEL_OUTLINE",
    "WHEEL_TEXT",
    "POINTER_COLOR",
]
