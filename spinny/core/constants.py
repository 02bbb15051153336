"""
Spinny - Shared Constants
=========================

Centralized constants for the entire codebase.
Import from here instead of defining locally.

Author: Spinny Team
"""

import math


# =============================================================================
# Wheel Geometry
# =============================================================================

WHEEL_SIZE = 800                 # Square canvas size in pixels
WHEEL_MARGIN = 20                # Gap between wheel edge and canvas edge
POINTER_ANGLE = 0.0              # Radians, 0 points right (screen coordinates)
FIXED_ROTATIONS = 4              # Whole turns before landing
HUB_RADIUS = 30                  # Center circle radius
LABEL_RADIUS_RATIO = 0.7         # Labels sit at 70% of the wheel radius
HIGHLIGHT_BOOST = 50             # Added to each RGB channel of the winning segment

FULL_TURN = 2 * math.pi
LAYOUT_OFFSET = -math.pi / 2     # Segment 0 starts at the top


# =============================================================================
# Animation Timing
# =============================================================================

TOTAL_FRAMES = 60                # Frames per spin GIF
SLOW_DOWN_FRAMES = 20            # Tail window with growing delays
HIGHLIGHT_FRAMES = 5             # Final frames that mark the winner
BASE_FRAME_DELAY_MS = 30         # Delay before the tail window
TAIL_START_DELAY_MS = 50         # First delay inside the tail window
TAIL_STEP_MS = 15                # Added per frame inside the tail window


# =============================================================================
# Label Fitting
# =============================================================================

LABEL_FONT_SIZE = 20             # Starting font size
LABEL_MIN_FONT_SIZE = 8          # Never shrink below this
LABEL_MIN_WIDTH = 40             # Minimum arc width available to a label


# =============================================================================
# Font Paths (System fonts, checked in order)
# =============================================================================

FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Linux (Debian/Ubuntu)
    "/System/Library/Fonts/Helvetica.ttc",  # macOS
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",  # Arch Linux
    "arial.ttf",  # Windows fallback
]


# =============================================================================
# Test Mode Data
# =============================================================================

TEST_NAMES_OFF_WHEEL = [
    "Alice", "Bob", "Charlie", "Diana", "Eve", "Frank", "Grace", "Henry",
]

TEST_NAMES_ON_WHEEL = [
    "Iris", "Jack", "Kate", "Liam", "Mia", "Noah", "Olivia", "Paul", "Quinn", "Ryan",
]
