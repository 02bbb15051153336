"""Shared pytest fixtures."""

import dataclasses
import random
from typing import List
from unittest.mock import AsyncMock, MagicMock

import pytest

from spinny.core.config import Config, config
from spinny.services.wheel.selection import Participant


class ScriptedRandom:
    """Random source whose draws come from a fixed script; shuffles are seeded."""

    def __init__(self, draws: List[int], seed: int = 0) -> None:
        self._draws = list(draws)
        self._fallback = random.Random(seed)

    def randrange(self, stop):
        if not self._draws:
            return self._fallback.randrange(stop)
        return self._draws.pop(0)

    def shuffle(self, items):
        self._fallback.shuffle(items)

    def choice(self, items):
        return self._fallback.choice(items)


class FakeChannel:
    """Records everything sent to it."""

    def __init__(self) -> None:
        self.sent: List[MagicMock] = []
        self.send = AsyncMock(side_effect=self._send)

    async def _send(self, content=None, **kwargs):
        message = MagicMock()
        message.id = len(self.sent) + 1
        message.content = content
        message.embed = kwargs.get("embed")
        message.file = kwargs.get("file")
        message.delete = AsyncMock()
        message.edit = AsyncMock()
        self.sent.append(message)
        return message

    @property
    def texts(self) -> List[str]:
        return [m.content for m in self.sent if m.content]

    @property
    def embed_titles(self) -> List[str]:
        return [m.embed.title for m in self.sent if m.embed is not None]

    @property
    def spin_messages(self) -> List[MagicMock]:
        return [m for m in self.sent if m.file is not None]


def make_member(member_id: int, name: str, roles=()) -> MagicMock:
    member = MagicMock()
    member.id = member_id
    member.name = name.lower()
    member.display_name = name
    member.roles = list(roles)
    member.add_roles = AsyncMock()
    member.remove_roles = AsyncMock()
    return member


def make_role(name: str) -> MagicMock:
    role = MagicMock()
    role.name = name
    return role


@pytest.fixture
def letters() -> List[Participant]:
    return [Participant(id=i, label=c) for i, c in enumerate("ABCDEFGH")]


@pytest.fixture
def channel() -> FakeChannel:
    return FakeChannel()


@pytest.fixture
def settings() -> Config:
    return dataclasses.replace(
        config,
        MIN_ON_WHEEL=2,
        MIN_OFF_WHEEL=6,
        CANCEL_TIMEOUT=0.01,
        ROUND_DELAY=0,
        CLEANUP_DELAY=0,
    )


@pytest.fixture
def animate() -> AsyncMock:
    return AsyncMock(return_value=b"GIF89a-fake")


@pytest.fixture
def no_cancel() -> AsyncMock:
    return AsyncMock(return_value=False)


@pytest.fixture
def instant_sleep() -> AsyncMock:
    return AsyncMock(return_value=None)
