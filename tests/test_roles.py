"""Tests for spinny/services/wheel/roles.py."""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from spinny.services.wheel.roles import AUDIT_REASON, MemberCache, RoleDirectory
from tests.conftest import make_member, make_role


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def _make_guild(roles, members, guild_id: int = 1) -> MagicMock:
    guild = MagicMock()
    guild.id = guild_id
    guild.name = "Test Guild"
    guild.roles = list(roles)
    guild.members = list(members)
    guild.chunk = AsyncMock()
    return guild


def _forbidden() -> discord.Forbidden:
    return discord.Forbidden(MagicMock(status=403, reason="Forbidden"), "Missing Permissions")


# =============================================================================
# MemberCache
# =============================================================================

def test_cache_is_stale_until_first_fetch():
    cache = MemberCache(ttl=60, clock=FakeClock())
    assert cache.is_stale(1)
    cache.mark_fetched(1)
    assert not cache.is_stale(1)


def test_cache_expires_after_ttl():
    clock = FakeClock(100.0)
    cache = MemberCache(ttl=60, clock=clock)
    cache.mark_fetched(1)

    clock.now = 160.0
    assert not cache.is_stale(1)
    clock.now = 160.5
    assert cache.is_stale(1)


def test_cache_tracks_guilds_separately():
    cache = MemberCache(ttl=60, clock=FakeClock())
    cache.mark_fetched(1)
    assert cache.is_stale(2)


async def test_ensure_chunks_once_within_ttl():
    clock = FakeClock()
    cache = MemberCache(ttl=60, clock=clock)
    guild = _make_guild([], [])

    await cache.ensure(guild)
    await cache.ensure(guild)
    assert guild.chunk.await_count == 1

    clock.now = 61
    await cache.ensure(guild)
    assert guild.chunk.await_count == 2


# =============================================================================
# RoleDirectory
# =============================================================================

def test_get_role_is_case_insensitive():
    on = make_role("On the wheel")
    guild = _make_guild([make_role("Other"), on], [])

    assert RoleDirectory.get_role(guild, "on THE Wheel") is on
    assert RoleDirectory.get_role(guild, "Missing") is None


async def test_members_with_role_filters_members():
    on = make_role("On the wheel")
    off = make_role("Off the wheel")
    alice = make_member(1, "Alice", [on])
    bob = make_member(2, "Bob", [off])
    cara = make_member(3, "Cara", [on, off])
    guild = _make_guild([on, off], [alice, bob, cara])
    directory = RoleDirectory(MemberCache(ttl=60, clock=FakeClock()))

    assert await directory.members_with_role(guild, "on the wheel") == [alice, cara]
    assert await directory.members_with_role(guild, "Off the wheel") == [bob, cara]
    guild.chunk.assert_awaited_once()


async def test_members_with_missing_role_is_empty_and_skips_fetch():
    guild = _make_guild([make_role("Other")], [make_member(1, "Alice")])
    directory = RoleDirectory(MemberCache(ttl=60, clock=FakeClock()))

    assert await directory.members_with_role(guild, "On the wheel") == []
    guild.chunk.assert_not_awaited()


async def test_set_roles_adds_then_removes():
    on = make_role("On the wheel")
    off = make_role("Off the wheel")
    member = make_member(1, "Alice", [off])
    order = []
    member.add_roles.side_effect = lambda *a, **k: order.append("add")
    member.remove_roles.side_effect = lambda *a, **k: order.append("remove")

    ok = await RoleDirectory().set_roles(member, add=[on], remove=[off])

    assert ok is True
    assert order == ["add", "remove"]
    member.add_roles.assert_awaited_once_with(on, reason=AUDIT_REASON)
    member.remove_roles.assert_awaited_once_with(off, reason=AUDIT_REASON)


async def test_set_roles_skips_empty_sides():
    member = make_member(1, "Alice")
    week = make_role("Pig of the week")

    assert await RoleDirectory().set_roles(member, remove=[week]) is True
    member.add_roles.assert_not_awaited()
    member.remove_roles.assert_awaited_once_with(week, reason=AUDIT_REASON)


async def test_set_roles_reports_discord_rejection():
    member = make_member(1, "Alice")
    member.add_roles.side_effect = _forbidden()

    ok = await RoleDirectory().set_roles(member, add=[make_role("On the wheel")])

    assert ok is False


async def test_set_roles_does_not_swallow_other_errors():
    member = make_member(1, "Alice")
    member.add_roles.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await RoleDirectory().set_roles(member, add=[make_role("On the wheel")])
