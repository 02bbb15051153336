"""
Spinny - Wheel Views
====================

Discord UI components for wheel runs: the issuer-only Cancel button
shown under each spin, and the result embeds.

Author: Spinny Team
"""

from enum import Enum

import discord
from discord import ui

from spinny.core.colors import COLOR_NEUTRAL, COLOR_PIG, COLOR_SUCCESS
from spinny.core.logger import logger


class CancelState(Enum):
    """Lifecycle of a cancel prompt."""
    AWAITING = "awaiting"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"


class CancelView(ui.View):
    """Cancel button that only the command issuer may press."""

    def __init__(self, initiator_id: int, timeout: float) -> None:
        super().__init__(timeout=timeout)
        self.initiator_id = initiator_id
        self.state = CancelState.AWAITING

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        """Only allow the issuer to cancel."""
        if interaction.user.id != self.initiator_id:
            await interaction.response.send_message(
                "Only the command issuer can cancel this spin.",
                ephemeral=True,
            )
            logger.tree("Cancel Unauthorized", [
                ("User", f"{interaction.user.name} ({interaction.user.display_name})"),
                ("ID", str(interaction.user.id)),
                ("Issuer ID", str(self.initiator_id)),
            ], emoji="⚠️")
            return False
        return True

    @ui.button(label="Cancel", style=discord.ButtonStyle.danger, custom_id="spin_cancel")
    async def cancel(self, interaction: discord.Interaction, button: ui.Button) -> None:
        if self.state is not CancelState.AWAITING:
            # Acknowledge repeat presses so Discord does not report a failure
            try:
                await interaction.response.defer()
            except discord.HTTPException as e:
                logger.tree("Cancel Defer Failed", [
                    ("Error", str(e)[:50]),
                ], emoji="⚠️")
            return
        self.state = CancelState.CANCELLED
        self.stop()
        try:
            await interaction.response.edit_message(content="🛑 Spin cancelled", view=None)
        except discord.HTTPException as e:
            logger.tree("Cancel Edit Failed", [
                ("Error", str(e)[:50]),
            ], emoji="⚠️")

    async def on_timeout(self) -> None:
        if self.state is CancelState.AWAITING:
            self.state = CancelState.TIMED_OUT


async def wait_for_cancel(
    message: discord.Message,
    initiator_id: int,
    timeout: float,
) -> bool:
    """
    Show a Cancel button under `message` and wait up to `timeout` seconds.

    Returns:
        True if the issuer cancelled, False on timeout
    """
    view = CancelView(initiator_id, timeout)
    try:
        await message.edit(view=view)
    except discord.HTTPException as e:
        logger.tree("Cancel Button Attach Failed", [
            ("Message ID", str(message.id)),
            ("Error", str(e)[:50]),
        ], emoji="⚠️")

    timed_out = await view.wait()
    if view.state is CancelState.CANCELLED:
        return True

    if timed_out:
        view.state = CancelState.TIMED_OUT
    try:
        await message.edit(view=None)
    except discord.HTTPException:
        # Spin message may already be gone
        pass
    return False


def create_reinstated_embed(name: str, test_mode: bool = False) -> discord.Embed:
    """Announce who came back on the wheel."""
    embed = discord.Embed(
        title="🎉 Back On The Wheel",
        description=f"**{name}** is back on the wheel!",
        color=COLOR_SUCCESS,
    )
    if test_mode:
        embed.set_footer(text="TEST MODE - no roles updated")
    return embed


def create_final_winner_embed(name: str, week_role: str, test_mode: bool = False) -> discord.Embed:
    """Announce the weekly winner."""
    embed = discord.Embed(
        title="🏆 FINAL WINNER",
        description=f"**{name}** is {week_role}!",
        color=COLOR_PIG,
    )
    if test_mode:
        embed.set_footer(text="TEST MODE - no roles updated")
    return embed


def create_cancelled_embed() -> discord.Embed:
    """Shown when the issuer stops a run."""
    return discord.Embed(
        title="🛑 Spin Cancelled",
        description="The wheel has been stopped. No further rounds will run.",
        color=COLOR_NEUTRAL,
    )
