"""
Spinny - Core Package
=====================

Framework essentials: config, constants, colors, errors, and logging.

Author: Spinny Team
"""

from spinny.core.config import config
from spinny.core.errors import InvalidInput
from spinny.core.logger import logger

__all__ = ["config", "InvalidInput", "logger"]
