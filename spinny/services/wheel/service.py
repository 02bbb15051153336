"""
Spinny - Wheel Service
======================

Runs one wheel session: the optional reinstatement spin over the
"Off the wheel" pool, the elimination tournament over the "On the wheel"
pool, and the weekly winner's role swap.

Author: Spinny Team
"""

import asyncio
import io
import random
import uuid
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Sequence

import discord

from spinny.core.config import Config, config
from spinny.core.logger import logger
from spinny.utils.async_utils import create_safe_task

from .graphics import generate_spin_gif
from .phrases import random_phrase
from .roles import RoleDirectory
from .selection import EliminationTournament, Participant, order_for_winner, random_draw
from .views import (
    create_cancelled_embed,
    create_final_winner_embed,
    create_reinstated_embed,
    wait_for_cancel,
)


Animator = Callable[[Sequence[str], int], Awaitable[bytes]]
CancelWaiter = Callable[[discord.Message, int, float], Awaitable[bool]]


@dataclass
class SessionOutcome:
    """What a session ended up doing."""
    cancelled: bool = False
    reinstated: Optional[Participant] = None
    eliminated: List[Participant] = field(default_factory=list)
    survivor: Optional[Participant] = None


def participants_from_members(members: Sequence[discord.Member]) -> List[Participant]:
    return [Participant(id=m.id, label=m.display_name, member=m) for m in members]


def participants_from_names(names: Sequence[str]) -> List[Participant]:
    return [Participant(id=i, label=name) for i, name in enumerate(names)]


class WheelSession:
    """
    One `!spin` or `!test` run in a channel.

    With no guild/directory the session runs in test mode: the same
    spins and announcements, but no roles are touched.
    """

    def __init__(
        self,
        channel: discord.abc.Messageable,
        initiator_id: int,
        *,
        guild: Optional[discord.Guild] = None,
        directory: Optional[RoleDirectory] = None,
        settings: Config = config,
        rng: Optional[random.Random] = None,
        animate: Animator = generate_spin_gif,
        wait_cancel: CancelWaiter = wait_for_cancel,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.session_id: str = str(uuid.uuid4())[:8]
        self.channel = channel
        self.initiator_id = initiator_id
        self.guild = guild
        self.directory = directory
        self.settings = settings
        self.rng = rng
        self._animate = animate
        self._wait_cancel = wait_cancel
        self._sleep = sleep

        self.outcome = SessionOutcome()
        self.cleanup_task: Optional[asyncio.Task] = None
        self._to_cleanup: List[discord.Message] = []
        self._reinstated_roles_applied = False
        self.tournament: Optional[EliminationTournament] = None

    @property
    def test_mode(self) -> bool:
        return self.guild is None or self.directory is None

    @property
    def min_on_wheel(self) -> int:
        # A tournament needs two participants whatever the settings say
        return max(2, self.settings.MIN_ON_WHEEL)

    @property
    def min_off_wheel(self) -> int:
        return max(1, self.settings.MIN_OFF_WHEEL)

    # =========================================================================
    # Messaging helpers
    # =========================================================================

    async def _send(self, content: Optional[str] = None, *, cleanup: bool = False, **kwargs) -> discord.Message:
        message = await self.channel.send(content, **kwargs)
        if cleanup:
            self._to_cleanup.append(message)
        return message

    async def _delete(self, message: discord.Message) -> None:
        try:
            await message.delete()
        except discord.NotFound:
            pass
        except discord.HTTPException as e:
            logger.tree("Wheel Message Delete Failed", [
                ("Session", self.session_id),
                ("Message ID", str(message.id)),
                ("Error", str(e)[:50]),
            ], emoji="⚠️")

    async def _cleanup_later(self, messages: List[discord.Message]) -> None:
        await self._sleep(self.settings.CLEANUP_DELAY)
        for message in messages:
            await self._delete(message)

        logger.tree("Wheel Messages Cleaned Up", [
            ("Session", self.session_id),
            ("Deleted", str(len(messages))),
        ], emoji="🧹")

    def _schedule_cleanup(self) -> None:
        if not self._to_cleanup:
            return
        messages, self._to_cleanup = self._to_cleanup, []
        self.cleanup_task = create_safe_task(
            self._cleanup_later(messages), "Wheel Message Cleanup",
        )

    # =========================================================================
    # Spin
    # =========================================================================

    async def _spin(self, labels: Sequence[str], winner_index: int) -> bool:
        """
        Animate a draw and give the issuer a chance to cancel.

        Returns:
            True if the issuer cancelled
        """
        await self._send("🔄 Getting ready to spin, please wait...", cleanup=True)
        ordered = order_for_winner(labels, winner_index, self.rng)

        try:
            gif = await self._animate(ordered, 0)
        except Exception as e:
            logger.error_tree("Wheel Spin Render Failed", e, [
                ("Session", self.session_id),
                ("Segments", str(len(labels))),
            ])
            return False

        spin_message = await self._send(
            file=discord.File(io.BytesIO(gif), filename="wheel_spin.gif"),
        )
        cancelled = await self._wait_cancel(
            spin_message, self.initiator_id, self.settings.CANCEL_TIMEOUT,
        )
        await self._delete(spin_message)
        return cancelled

    async def _cancel(self) -> SessionOutcome:
        self.outcome.cancelled = True
        await self._send(embed=create_cancelled_embed())
        self._schedule_cleanup()

        logger.tree("Wheel Session Cancelled", [
            ("Session", self.session_id),
            ("Issuer ID", str(self.initiator_id)),
            ("Eliminated", str(len(self.outcome.eliminated))),
        ], emoji="🛑")
        return self.outcome

    # =========================================================================
    # Steps
    # =========================================================================

    async def _reinstate(self, off_pool: Sequence[Participant]) -> bool:
        """
        Bring one "Off the wheel" participant back if the pool is big enough.

        Returns:
            False if the issuer cancelled
        """
        off_role = self.settings.OFF_WHEEL_ROLE
        if len(off_pool) < self.min_off_wheel:
            await self._send(
                f"ℹ️ Only {len(off_pool)} users '{off_role}' "
                f"(need {self.min_off_wheel}+ to spin). Skipping this step."
            )
            logger.tree("Reinstatement Skipped", [
                ("Session", self.session_id),
                ("Pool", str(len(off_pool))),
                ("Required", str(self.min_off_wheel)),
            ], emoji="⏭️")
            return True

        await self._send(
            f"🔄 Found {len(off_pool)} users '{off_role}'. Spinning to bring one back...",
            cleanup=True,
        )

        index = random_draw(len(off_pool), self.rng)
        winner = off_pool[index]
        if await self._spin([p.label for p in off_pool], index):
            return False

        self.outcome.reinstated = winner
        await self._send(embed=create_reinstated_embed(winner.label, self.test_mode))

        logger.tree("Participant Reinstated", [
            ("Session", self.session_id),
            ("Name", winner.label),
            ("ID", str(winner.id)),
            ("Pool", str(len(off_pool))),
        ], emoji="🎉")

        if not self.test_mode:
            await self._apply_reinstatement_roles(winner)
        return True

    async def _apply_reinstatement_roles(self, winner: Participant) -> None:
        on_role = self.directory.get_role(self.guild, self.settings.ON_WHEEL_ROLE)
        off_role = self.directory.get_role(self.guild, self.settings.OFF_WHEEL_ROLE)
        if not on_role or not off_role:
            await self._send("⚠️ Warning: Could not find required roles!")
            return

        if await self.directory.set_roles(winner.member, add=[on_role], remove=[off_role]):
            self._reinstated_roles_applied = True
            await self._send(f"✅ Updated roles for {winner.label}")
        else:
            await self._send(
                f"⚠️ Could not update roles for {winner.label}. Please check permissions."
            )

    async def _eliminate(self, on_pool: Sequence[Participant]) -> Optional[Participant]:
        """Run the tournament. Returns the survivor, or None if cancelled or too small."""
        on_role = self.settings.ON_WHEEL_ROLE
        if len(on_pool) < self.min_on_wheel:
            await self._send(
                f"❌ Need at least {self.min_on_wheel} users with '{on_role}' "
                f"role to spin. Currently: {len(on_pool)}"
            )
            return None

        await self._send(
            f"🎡 Spinning the wheel for {len(on_pool)} users '{on_role}'...",
            cleanup=True,
        )

        tournament = EliminationTournament(on_pool, self.rng)
        self.tournament = tournament
        while not tournament.finished:
            labels = [p.label for p in tournament.pool]
            index = tournament.draw()

            await self._send(f"🔄 Round {tournament.round_number + 1}: Spinning...", cleanup=True)
            if await self._spin(labels, index):
                await self._cancel()
                return None

            result = tournament.next_round(index)
            self.outcome.eliminated.append(result.winner)
            await self._send(f"🎯 **{result.winner.label}** has been removed from the wheel!")

            logger.tree("Wheel Round Complete", [
                ("Session", self.session_id),
                ("Round", str(result.number)),
                ("Removed", result.winner.label),
                ("Remaining", str(len(result.remaining))),
            ], emoji="🎯")

            await self._sleep(self.settings.ROUND_DELAY)

        return tournament.survivor

    async def _crown(self, survivor: Participant) -> None:
        """Announce the survivor and hand over the weekly role."""
        week_name = self.settings.WEEK_ROLE
        await self._send(embed=create_final_winner_embed(survivor.label, week_name, self.test_mode))

        logger.tree("Weekly Winner", [
            ("Session", self.session_id),
            ("Name", survivor.label),
            ("ID", str(survivor.id)),
            ("Test Mode", "Yes" if self.test_mode else "No"),
        ], emoji="🏆")

        if self.test_mode:
            return

        on_role = self.directory.get_role(self.guild, self.settings.ON_WHEEL_ROLE)
        off_role = self.directory.get_role(self.guild, self.settings.OFF_WHEEL_ROLE)
        week_role = self.directory.get_role(self.guild, week_name)

        # Only one member may hold the weekly role
        if week_role:
            holders = await self.directory.members_with_role(self.guild, week_name)
            for holder in holders:
                if holder.id != survivor.id:
                    await self.directory.set_roles(holder, remove=[week_role])

        to_add = [r for r in (week_role, off_role) if r]
        to_remove = [on_role] if on_role else []
        if not to_add and not to_remove:
            await self._send("⚠️ Warning: Could not find required roles!")
            return

        if await self.directory.set_roles(survivor.member, add=to_add, remove=to_remove):
            await self._send(random_phrase(self.rng))
        else:
            await self._send(
                f"⚠️ Could not update roles for {survivor.label}. Please check permissions."
            )

    # =========================================================================
    # Entry
    # =========================================================================

    async def _load_on_pool(self) -> List[Participant]:
        members = await self.directory.members_with_role(self.guild, self.settings.ON_WHEEL_ROLE)
        pool = participants_from_members(members)

        # The gateway may not have delivered the reinstated member's new role yet
        back = self.outcome.reinstated
        if back is not None and self._reinstated_roles_applied and back not in pool:
            pool.append(back)
        return pool

    async def run(
        self,
        off_pool: Sequence[Participant],
        on_pool: Optional[Sequence[Participant]] = None,
    ) -> SessionOutcome:
        """
        Run reinstatement then elimination.

        When `on_pool` is None it is read from the guild after the
        reinstatement step, so a reinstated member takes part.
        """
        logger.tree("Wheel Session Started", [
            ("Session", self.session_id),
            ("Issuer ID", str(self.initiator_id)),
            ("Off Pool", str(len(off_pool))),
            ("Test Mode", "Yes" if self.test_mode else "No"),
        ], emoji="🎡")

        try:
            if self.test_mode:
                await self._send("🎡 Starting the wheel spinning process with TEST DATA...")
            else:
                await self._send("🎡 Starting the wheel spinning process...")

            if not await self._reinstate(off_pool):
                return await self._cancel()

            if on_pool is None:
                if self.test_mode:
                    raise ValueError("Test sessions need an explicit on_pool")
                on_pool = await self._load_on_pool()

            survivor = await self._eliminate(on_pool)
            if self.outcome.cancelled or survivor is None:
                return self.outcome

            self.outcome.survivor = survivor
            await self._crown(survivor)
        finally:
            # Progress messages go even when a step raised
            self._schedule_cleanup()

        logger.tree("Wheel Session Complete", [
            ("Session", self.session_id),
            ("Rounds", str(len(self.outcome.eliminated))),
            ("Winner", survivor.label),
            ("Reinstated", self.outcome.reinstated.label if self.outcome.reinstated else "-"),
        ], emoji="✅")
        return self.outcome

    async def run_live(self) -> SessionOutcome:
        """Load the "Off the wheel" pool from the guild, then run."""
        members = await self.directory.members_with_role(self.guild, self.settings.OFF_WHEEL_ROLE)
        return await self.run(participants_from_members(members))
