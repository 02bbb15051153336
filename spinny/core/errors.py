"""
Spinny - Errors
===============

Exceptions raised by the wheel core.

Author: Spinny Team
"""


class InvalidInput(ValueError):
    """A wheel operation was called with arguments that break its contract."""
