"""
Spinny - Wheel Roles
====================

Role lookup, cached member listing, and role mutation for wheel runs.

Author: Spinny Team
"""

import time
from typing import Callable, Dict, List, Optional, Sequence

import discord

from spinny.core.config import config
from spinny.core.logger import logger


AUDIT_REASON = "Wheel spin result"


class MemberCache:
    """
    Tracks when each guild's member list was last fetched.

    The member objects themselves live in discord.py's own cache; this
    only decides when a full fetch is due again.
    """

    def __init__(
        self,
        ttl: float = config.MEMBER_CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl
        self._clock = clock
        self._fetched_at: Dict[int, float] = {}

    def is_stale(self, guild_id: int) -> bool:
        fetched = self._fetched_at.get(guild_id)
        return fetched is None or (self._clock() - fetched) > self.ttl

    def mark_fetched(self, guild_id: int) -> None:
        self._fetched_at[guild_id] = self._clock()

    async def ensure(self, guild: discord.Guild) -> None:
        """Fetch all guild members if the last fetch is older than the TTL."""
        if not self.is_stale(guild.id):
            return

        start = time.monotonic()
        # chunk() fills guild.members from the gateway in one request
        await guild.chunk()
        self.mark_fetched(guild.id)

        logger.tree("Guild Members Fetched", [
            ("Guild", guild.name),
            ("Members", str(len(guild.members))),
            ("Took", f"{time.monotonic() - start:.2f}s"),
        ], emoji="👥")


class RoleDirectory:
    """Role queries and updates against a guild."""

    def __init__(self, cache: Optional[MemberCache] = None) -> None:
        self.cache = cache or MemberCache()

    @staticmethod
    def get_role(guild: discord.Guild, name: str) -> Optional[discord.Role]:
        """Find a role by name, case-insensitive."""
        wanted = name.lower()
        for role in guild.roles:
            if role.name.lower() == wanted:
                return role
        return None

    async def members_with_role(self, guild: discord.Guild, name: str) -> List[discord.Member]:
        """All members holding the named role. Empty if the role is missing."""
        role = self.get_role(guild, name)
        if role is None:
            logger.tree("Role Not Found", [
                ("Guild", guild.name),
                ("Role", name),
            ], emoji="⚠️")
            return []

        await self.cache.ensure(guild)
        return [member for member in guild.members if role in member.roles]

    async def set_roles(
        self,
        member: discord.Member,
        add: Sequence[discord.Role] = (),
        remove: Sequence[discord.Role] = (),
    ) -> bool:
        """
        Add then remove roles on a member.

        Returns:
            True on success, False if Discord rejected either change
        """
        try:
            if add:
                await member.add_roles(*add, reason=AUDIT_REASON)
            if remove:
                await member.remove_roles(*remove, reason=AUDIT_REASON)
        except discord.HTTPException as e:
            logger.tree("Role Update Failed", [
                ("Member", f"{member.name} ({member.display_name})"),
                ("ID", str(member.id)),
                ("Add", ", ".join(r.name for r in add) or "-"),
                ("Remove", ", ".join(r.name for r in remove) or "-"),
                ("Error", str(e)[:100]),
            ], emoji="❌")
            return False

        logger.tree("Roles Updated", [
            ("Member", f"{member.name} ({member.display_name})"),
            ("ID", str(member.id)),
            ("Add", ", ".join(r.name for r in add) or "-"),
            ("Remove", ", ".join(r.name for r in remove) or "-"),
        ], emoji="🏷️")
        return True
