"""
Spinny - Configuration
======================

Central configuration from environment variables.

Author: Spinny Team
"""

import os
from dataclasses import dataclass
from pathlib import Path


ROOT_DIR = Path(__file__).parent.parent.parent
LOGS_DIR = ROOT_DIR / "logs"

LOGS_DIR.mkdir(exist_ok=True)


def _get_env_int(key: str, default: int) -> int:
    """Get environment variable as int with default."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_env_float(key: str, default: float) -> float:
    """Get environment variable as float with default."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_env_floor(key: str, default: int, floor: int) -> int:
    """Get environment variable as int, never below `floor`."""
    return max(floor, _get_env_int(key, default))


def _get_token() -> str:
    """Bot token, accepting the legacy DISCORD_TOKEN name as well."""
    return os.getenv("SPINNY_BOT_TOKEN") or os.getenv("DISCORD_TOKEN", "")


@dataclass(frozen=True)
class Config:
    """Bot configuration from environment variables."""

    # Bot settings
    TOKEN: str = _get_token()

    # Role names (matched case-insensitively)
    ON_WHEEL_ROLE: str = os.getenv("SPINNY_ON_ROLE", "On the wheel")
    OFF_WHEEL_ROLE: str = os.getenv("SPINNY_OFF_ROLE", "Off the wheel")
    WEEK_ROLE: str = os.getenv("SPINNY_WEEK_ROLE", "Pig of the week")

    # Pool thresholds (a tournament needs 2, a single draw needs 1)
    MIN_ON_WHEEL: int = _get_env_floor("SPINNY_MIN_ON_WHEEL", 2, 2)
    MIN_OFF_WHEEL: int = _get_env_floor("SPINNY_MIN_OFF_WHEEL", 6, 1)

    # Timing (seconds)
    CANCEL_TIMEOUT: float = _get_env_float("SPINNY_CANCEL_TIMEOUT", 7.0)
    ROUND_DELAY: float = _get_env_float("SPINNY_ROUND_DELAY", 0.5)
    CLEANUP_DELAY: float = _get_env_float("SPINNY_CLEANUP_DELAY", 3.0)

    # Member fetch cache
    MEMBER_CACHE_TTL: int = _get_env_int("SPINNY_MEMBER_CACHE_TTL", 60)


config = Config()
