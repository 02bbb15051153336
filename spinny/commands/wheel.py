"""
Spinny - Wheel Commands
=======================

`!spin` runs the weekly wheel against guild roles.
`!test` runs the same flow over fixed fake names without touching roles.

Author: Spinny Team
"""

import discord
from discord.ext import commands

from spinny.core.config import config
from spinny.core.constants import TEST_NAMES_OFF_WHEEL, TEST_NAMES_ON_WHEEL
from spinny.core.logger import logger
from spinny.services.wheel import MemberCache, RoleDirectory, WheelSession
from spinny.services.wheel.service import participants_from_names


class WheelCog(commands.Cog):
    """Cog for the wheel commands."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot
        self.directory = RoleDirectory(MemberCache(ttl=config.MEMBER_CACHE_TTL))

    @commands.command(name="spin")
    @commands.guild_only()
    @commands.bot_has_guild_permissions(manage_roles=True)
    async def spin(self, ctx: commands.Context) -> None:
        """Spin the wheel for real: roles are updated."""
        logger.tree("Spin Command", [
            ("User", f"{ctx.author.name} ({ctx.author.display_name})"),
            ("ID", str(ctx.author.id)),
            ("Guild", ctx.guild.name),
            ("Channel", str(ctx.channel)),
        ], emoji="🎡")

        session = WheelSession(
            ctx.channel,
            ctx.author.id,
            guild=ctx.guild,
            directory=self.directory,
        )
        await session.run_live()

    @commands.command(name="test")
    async def test(self, ctx: commands.Context) -> None:
        """Spin the wheel over fake names."""
        logger.tree("Test Command", [
            ("User", f"{ctx.author.name} ({ctx.author.display_name})"),
            ("ID", str(ctx.author.id)),
            ("Channel", str(ctx.channel)),
        ], emoji="🧪")

        session = WheelSession(ctx.channel, ctx.author.id)
        await session.run(
            participants_from_names(TEST_NAMES_OFF_WHEEL),
            participants_from_names(TEST_NAMES_ON_WHEEL),
        )

    async def cog_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        """Turn precondition failures into channel messages."""
        if isinstance(error, commands.NoPrivateMessage):
            await ctx.send("This command can only be used in a server!")
            return
        if isinstance(error, commands.BotMissingPermissions):
            await ctx.send("❌ I need the 'Manage Roles' permission to work!")
            return

        original = getattr(error, "original", error)
        logger.error_tree("Wheel Command Failed", original, [
            ("Command", ctx.command.qualified_name if ctx.command else "-"),
            ("User", f"{ctx.author.name} ({ctx.author.id})"),
        ])
        try:
            await ctx.send("❌ Something went wrong while spinning the wheel.")
        except discord.HTTPException:
            pass


async def setup(bot: commands.Bot) -> None:
    await bot.add_cog(WheelCog(bot))
