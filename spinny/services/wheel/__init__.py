"""
Spinny - Wheel
==============

Weekly wheel: elimination tournament over role holders, animated as a
spinning wheel that always lands on the drawn member.

Author: Spinny Team
"""

from .roles import MemberCache, RoleDirectory
from .selection import (
    EliminationTournament,
    Participant,
    RoundResult,
    order_for_winner,
    random_draw,
)
from .service import SessionOutcome, WheelSession
from .spin import FrameSpec, SpinPlan, frame_schedule, solve_rotation

__all__ = [
    "EliminationTournament",
    "FrameSpec",
    "MemberCache",
    "Participant",
    "RoleDirectory",
    "RoundResult",
    "SessionOutcome",
    "SpinPlan",
    "WheelSession",
    "frame_schedule",
    "order_for_winner",
    "random_draw",
    "solve_rotation",
]
