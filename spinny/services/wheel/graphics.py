"""
Spinny - Wheel Graphics
=======================

Pillow-based wheel renderer and GIF assembly for spin animations.

Author: Spinny Team
"""

import asyncio
import io
import math
import time
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from spinny.core.colors import (
    POINTER_COLOR,
    WHEEL_BACKGROUND,
    WHEEL_COLORS,
    WHEEL_OUTLINE,
    WHEEL_TEXT,
)
from spinny.core.constants import (
    FIXED_ROTATIONS,
    FULL_TURN,
    HIGHLIGHT_BOOST,
    HUB_RADIUS,
    LABEL_FONT_SIZE,
    LABEL_MIN_FONT_SIZE,
    LABEL_MIN_WIDTH,
    LABEL_RADIUS_RATIO,
    LAYOUT_OFFSET,
    POINTER_ANGLE,
    TOTAL_FRAMES,
    WHEEL_MARGIN,
    WHEEL_SIZE,
)
from spinny.core.logger import logger
from spinny.utils.text import fit_font, get_font, find_font, text_width

from .spin import angle_under_pointer, frame_schedule, normalize_angle, solve_rotation


def _segment_color(index: int, highlighted: bool) -> Tuple[int, int, int]:
    """Cycle the palette and brighten the highlighted segment."""
    color = WHEEL_COLORS[index % len(WHEEL_COLORS)]
    if highlighted:
        return tuple(min(255, c + HIGHLIGHT_BOOST) for c in color)
    return color


def _draw_label(
    img: Image.Image,
    label: str,
    center: float,
    text_radius: float,
    mid_angle: float,
    max_width: float,
) -> None:
    """Draw a label along the segment's radius, kept upright."""
    font = fit_font(label, max_width, LABEL_FONT_SIZE, LABEL_MIN_FONT_SIZE)
    width = int(text_width(label, font)) + 4
    height = LABEL_FONT_SIZE + 8

    text_img = Image.new("RGBA", (max(width, 1), height), (0, 0, 0, 0))
    ImageDraw.Draw(text_img).text(
        (width / 2, height / 2), label, fill=WHEEL_TEXT, font=font, anchor="mm",
    )

    # PIL rotates counter-clockwise while screen angles run clockwise
    degrees = -math.degrees(mid_angle)
    if math.cos(mid_angle) < 0:
        degrees += 180
    rotated = text_img.rotate(degrees, expand=True, resample=Image.Resampling.BICUBIC)

    x = center + text_radius * math.cos(mid_angle) - rotated.width / 2
    y = center + text_radius * math.sin(mid_angle) - rotated.height / 2
    img.paste(rotated, (int(round(x)), int(round(y))), rotated)


def _draw_pointer(draw: ImageDraw.ImageDraw, center: float, radius: float, angle: float) -> None:
    """Fixed triangle outside the rim, tip pointing at the wheel center."""
    tip_dist = radius - 10
    base_dist = radius + 18
    side_offset = 24

    tip = (center + tip_dist * math.cos(angle), center + tip_dist * math.sin(angle))
    base_x = center + base_dist * math.cos(angle)
    base_y = center + base_dist * math.sin(angle)
    left = (
        base_x + side_offset * math.cos(angle + math.pi / 2),
        base_y + side_offset * math.sin(angle + math.pi / 2),
    )
    right = (
        base_x + side_offset * math.cos(angle - math.pi / 2),
        base_y + side_offset * math.sin(angle - math.pi / 2),
    )
    draw.polygon([tip, left, right], fill=POINTER_COLOR, outline=WHEEL_OUTLINE, width=2)


def render_frame(
    labels: Sequence[str],
    highlight: Optional[int] = None,
    rotation: float = 0.0,
    size: int = WHEEL_SIZE,
    pointer_angle: float = POINTER_ANGLE,
) -> Image.Image:
    """
    Render one wheel frame.

    Args:
        labels: Names in presentation order, segment 0 first
        highlight: Segment index to brighten, or None
        rotation: Wheel rotation in radians (clockwise on screen)
        size: Square canvas size in pixels
        pointer_angle: Where the fixed pointer sits, in radians
    """
    img = Image.new("RGB", (size, size), WHEEL_BACKGROUND)
    draw = ImageDraw.Draw(img)

    center = size / 2
    radius = size / 2 - WHEEL_MARGIN

    if not labels:
        font = get_font(find_font(), 30)
        draw.text((center, center), "No names", fill=WHEEL_TEXT, font=font, anchor="mm")
        return img

    angle_per_segment = FULL_TURN / len(labels)
    box = [center - radius, center - radius, center + radius, center + radius]
    text_radius = radius * LABEL_RADIUS_RATIO
    max_label_width = max(LABEL_MIN_WIDTH, angle_per_segment * text_radius * 0.9)

    for i in range(len(labels)):
        start = i * angle_per_segment + LAYOUT_OFFSET + rotation

        # A single segment is a full disc; pieslice with equal ends draws nothing
        if len(labels) == 1:
            draw.ellipse(box, fill=_segment_color(i, highlight == i), outline=WHEEL_OUTLINE, width=2)
        else:
            draw.pieslice(
                box,
                math.degrees(normalize_angle(start)),
                math.degrees(normalize_angle(start) + angle_per_segment),
                fill=_segment_color(i, highlight == i),
                outline=WHEEL_OUTLINE,
                width=2,
            )

    for i, label in enumerate(labels):
        mid = (i + 0.5) * angle_per_segment + LAYOUT_OFFSET + rotation
        _draw_label(img, label, center, text_radius, mid, max_label_width)

    # Hub
    draw.ellipse(
        [center - HUB_RADIUS, center - HUB_RADIUS, center + HUB_RADIUS, center + HUB_RADIUS],
        fill=WHEEL_BACKGROUND,
        outline=WHEEL_OUTLINE,
        width=3,
    )

    _draw_pointer(draw, center, radius, pointer_angle)
    return img


def assemble_gif(frames: Sequence[Tuple[Image.Image, int]]) -> bytes:
    """
    Encode frames into a looping GIF.

    Args:
        frames: (image, delay_ms) pairs in display order
    """
    if not frames:
        raise ValueError("No frames to assemble")

    images = [img for img, _ in frames]
    durations = [delay for _, delay in frames]

    buffer = io.BytesIO()
    images[0].save(
        buffer,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=durations,
        loop=0,
    )
    return buffer.getvalue()


def build_spin_animation(
    labels: Sequence[str],
    winner_slot: int = 0,
    size: int = WHEEL_SIZE,
    frames: int = TOTAL_FRAMES,
    rotations: int = FIXED_ROTATIONS,
) -> bytes:
    """Render a full spin that lands `winner_slot` under the pointer."""
    plan = solve_rotation(len(labels), winner_slot, POINTER_ANGLE, rotations)
    schedule = frame_schedule(plan.final_rotation, frames=frames)
    drift = angle_under_pointer(len(labels), winner_slot, schedule[-1].angle, POINTER_ANGLE)
    if drift >= FULL_TURN / len(labels) / 2:
        raise ValueError(f"Spin would stop off slot {winner_slot} (drift {drift:.4f} rad)")

    rendered: List[Tuple[Image.Image, int]] = []
    for spec in schedule:
        img = render_frame(
            labels,
            highlight=winner_slot if spec.highlighted else None,
            rotation=spec.angle,
            size=size,
        )
        rendered.append((img, spec.delay_ms))

    return assemble_gif(rendered)


async def generate_spin_gif(labels: Sequence[str], winner_slot: int = 0) -> bytes:
    """Build a spin animation off the event loop."""
    start = time.monotonic()
    try:
        gif = await asyncio.to_thread(build_spin_animation, list(labels), winner_slot)
    except Exception as e:
        logger.error_tree("Wheel Animation Failed", e, [
            ("Segments", str(len(labels))),
        ])
        raise

    logger.tree("Wheel Animation Generated", [
        ("Segments", str(len(labels))),
        ("Landing On", labels[winner_slot]),
        ("Size", f"{len(gif) // 1024}KB"),
        ("Took", f"{time.monotonic() - start:.2f}s"),
    ], emoji="🎬")
    return gif
