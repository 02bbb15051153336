"""
Spinny - Ready Handler
======================

Handles bot startup events.

Author: Spinny Team
"""

import discord
from discord.ext import commands

from spinny.core.logger import logger


class ReadyHandler(commands.Cog):
    """Handles bot ready event."""

    def __init__(self, bot):
        self.bot = bot

    @commands.Cog.listener()
    async def on_ready(self):
        """Called when the bot is ready."""
        logger.tree("Spinny Is Online", [
            ("User", str(self.bot.user)),
            ("ID", str(self.bot.user.id)),
            ("Guilds", str(len(self.bot.guilds))),
            ("Commands", "!spin, !test"),
        ], emoji="🎡")

        await self.bot.change_presence(
            activity=discord.Activity(
                type=discord.ActivityType.watching,
                name="the wheel"
            )
        )


async def setup(bot):
    await bot.add_cog(ReadyHandler(bot))
