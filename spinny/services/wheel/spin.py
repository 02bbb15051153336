"""
Spinny - Spin Math
==================

Rotation solving and the frame schedule for the spin animation.

Layout convention shared with the renderer: at zero rotation, segment 0
starts at -pi/2 (the top) and segments proceed clockwise in screen
coordinates, each spanning 2*pi / segments.

Author: Spinny Team
"""

import math
from dataclasses import dataclass
from typing import List

from spinny.core.constants import (
    BASE_FRAME_DELAY_MS,
    FIXED_ROTATIONS,
    FULL_TURN,
    HIGHLIGHT_FRAMES,
    LAYOUT_OFFSET,
    POINTER_ANGLE,
    SLOW_DOWN_FRAMES,
    TAIL_START_DELAY_MS,
    TAIL_STEP_MS,
    TOTAL_FRAMES,
)
from spinny.core.errors import InvalidInput


@dataclass(frozen=True)
class SpinPlan:
    """Where the wheel has to end up for a given winner slot."""
    total_whole_rotations: int
    pointer_angle: float
    winner_slot_angle: float
    final_rotation: float


@dataclass(frozen=True)
class FrameSpec:
    """One animation frame: wheel rotation, display time, winner marking."""
    index: int
    angle: float
    delay_ms: int
    highlighted: bool


def segment_mid_angle(segments: int, slot: int) -> float:
    """Angle of a segment's midpoint at zero rotation."""
    if segments < 1:
        raise InvalidInput(f"Wheel needs at least 1 segment, got {segments}")
    if not 0 <= slot < segments:
        raise InvalidInput(f"Slot {slot} out of range for {segments} segments")
    return (slot + 0.5) * (FULL_TURN / segments) + LAYOUT_OFFSET


def solve_rotation(
    segments: int,
    slot: int = 0,
    pointer_angle: float = POINTER_ANGLE,
    rotations: int = FIXED_ROTATIONS,
) -> SpinPlan:
    """
    Compute the rotation that parks `slot` under the pointer.

    The wheel turns `rotations` full times, then the remaining offset
    brings the slot midpoint onto `pointer_angle`. No randomness: the
    same inputs always give the same plan.
    """
    if rotations < 0:
        raise InvalidInput(f"Rotation count must be >= 0, got {rotations}")

    slot_angle = segment_mid_angle(segments, slot)
    final = rotations * FULL_TURN + (pointer_angle - slot_angle)

    return SpinPlan(
        total_whole_rotations=rotations,
        pointer_angle=pointer_angle,
        winner_slot_angle=slot_angle,
        final_rotation=final,
    )


def normalize_angle(angle: float) -> float:
    """Fold an angle into [0, 2*pi)."""
    folded = math.fmod(angle, FULL_TURN)
    if folded < 0:
        folded += FULL_TURN
    return folded


def angle_under_pointer(
    segments: int,
    slot: int,
    rotation: float,
    pointer_angle: float = POINTER_ANGLE,
) -> float:
    """
    How far `slot`'s midpoint sits from the pointer after `rotation`.

    Returns the shortest angular distance in [0, pi]; 0 means the slot is
    centered under the pointer.
    """
    landed = segment_mid_angle(segments, slot) + rotation
    gap = normalize_angle(landed - pointer_angle)
    return min(gap, FULL_TURN - gap)


def ease_out_cubic(progress: float) -> float:
    """Fast start, slow finish. Maps [0, 1] onto [0, 1]."""
    return 1 - (1 - progress) ** 3


def frame_delay(
    index: int,
    frames: int = TOTAL_FRAMES,
    slow_down_frames: int = SLOW_DOWN_FRAMES,
    base_delay_ms: int = BASE_FRAME_DELAY_MS,
    tail_start_delay_ms: int = TAIL_START_DELAY_MS,
    tail_step_ms: int = TAIL_STEP_MS,
) -> int:
    """Constant delay until the tail window, then linearly growing."""
    tail_start = frames - slow_down_frames
    if index < tail_start:
        return base_delay_ms
    return tail_start_delay_ms + (index - tail_start) * tail_step_ms


def frame_schedule(
    final_rotation: float,
    frames: int = TOTAL_FRAMES,
    slow_down_frames: int = SLOW_DOWN_FRAMES,
    highlight_frames: int = HIGHLIGHT_FRAMES,
    base_delay_ms: int = BASE_FRAME_DELAY_MS,
    tail_start_delay_ms: int = TAIL_START_DELAY_MS,
    tail_step_ms: int = TAIL_STEP_MS,
) -> List[FrameSpec]:
    """
    Build the per-frame schedule for a spin ending at `final_rotation`.

    Angles follow a cubic ease-out and the tail delays grow, so the
    wheel both moves less and lingers longer per frame near the end.
    The last `highlight_frames` frames mark the winning segment.
    """
    if frames < 2:
        raise InvalidInput(f"Animation needs at least 2 frames, got {frames}")
    if slow_down_frames < 0 or highlight_frames < 0:
        raise InvalidInput("Window sizes must be >= 0")

    last = frames - 1
    schedule = []
    for i in range(frames):
        # Pin the final frame so float error never leaves it short
        angle = final_rotation if i == last else ease_out_cubic(i / last) * final_rotation
        schedule.append(FrameSpec(
            index=i,
            angle=angle,
            delay_ms=frame_delay(
                i,
                frames=frames,
                slow_down_frames=slow_down_frames,
                base_delay_ms=base_delay_ms,
                tail_start_delay_ms=tail_start_delay_ms,
                tail_step_ms=tail_step_ms,
            ),
            highlighted=i >= frames - highlight_frames,
        ))
    return schedule
