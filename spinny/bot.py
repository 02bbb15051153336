"""
Spinny - Main Bot
=================

Discord bot that spins the weekly wheel.

Author: Spinny Team
"""

import sys

import discord
from discord.ext import commands

from spinny.core.logger import logger


class SpinnyBot(commands.Bot):
    """Main bot class for Spinny."""

    def __init__(self):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.members = True

        super().__init__(
            command_prefix="!",
            intents=intents,
            help_command=None,
        )

    async def setup_hook(self) -> None:
        """Called when the bot is starting up."""
        # Load handlers
        await self.load_extension("spinny.handlers.ready")

        # Load commands
        await self.load_extension("spinny.commands.wheel")

    async def on_error(self, event_method: str, *args, **kwargs) -> None:
        """Log errors raised from event listeners."""
        exc = sys.exc_info()[1]
        if exc is None:
            logger.error("Discord Client Error", [("Event", event_method)])
            return
        logger.error_tree("Discord Client Error", exc, [
            ("Event", event_method),
        ])

    async def close(self) -> None:
        """Clean up when bot is shutting down."""
        logger.info("Bot shutting down...")
        await super().close()
