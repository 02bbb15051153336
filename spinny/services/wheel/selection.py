"""
Spinny - Wheel Selection
========================

Random draws, the elimination tournament, and the winner-first
presentation order used by the spin animation.

Author: Spinny Team
"""

import random
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

from spinny.core.errors import InvalidInput


@dataclass(frozen=True)
class Participant:
    """Someone on the wheel. `member` carries the Discord member in live runs."""
    id: int
    label: str
    member: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one elimination round."""
    number: int
    winner_index: int
    winner: Participant
    remaining: Tuple[Participant, ...]


def random_draw(size: int, rng: Optional[random.Random] = None) -> int:
    """
    Pick an index uniformly from [0, size).

    Args:
        size: Pool size, must be at least 1
        rng: Random source (defaults to the module-level generator)
    """
    if size < 1:
        raise InvalidInput(f"Cannot draw from a pool of size {size}")
    source = rng if rng is not None else random
    return source.randrange(size)


def order_for_winner(
    labels: Sequence[str],
    winner_index: int,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Return the labels with the winner first and everyone else shuffled.

    The spin animation always lands on slot 0, so the actual pool order
    never leaks into what the viewer sees.
    """
    if not labels:
        raise InvalidInput("Cannot order an empty pool")
    if not 0 <= winner_index < len(labels):
        raise InvalidInput(
            f"Winner index {winner_index} out of range for pool of {len(labels)}"
        )

    others = list(labels[:winner_index]) + list(labels[winner_index + 1:])
    source = rng if rng is not None else random
    # random.shuffle is Fisher-Yates
    source.shuffle(others)
    return [labels[winner_index], *others]


class EliminationTournament:
    """
    Shrinks a pool one draw at a time until a single participant is left.

    The participant drawn each round is the one removed from the wheel.
    The last one standing is the tournament winner.
    """

    def __init__(
        self,
        pool: Sequence[Participant],
        rng: Optional[random.Random] = None,
    ) -> None:
        if len(pool) < 2:
            raise InvalidInput(
                f"Elimination needs at least 2 participants, got {len(pool)}"
            )
        self._pool: List[Participant] = list(pool)
        self._rng = rng
        self._round_number = 0

    @property
    def pool(self) -> Tuple[Participant, ...]:
        """Participants still on the wheel."""
        return tuple(self._pool)

    @property
    def round_number(self) -> int:
        """Number of rounds committed so far."""
        return self._round_number

    @property
    def finished(self) -> bool:
        return len(self._pool) == 1

    @property
    def survivor(self) -> Optional[Participant]:
        """The final remaining participant, once finished."""
        return self._pool[0] if self.finished else None

    def draw(self) -> int:
        """Pick the next index to remove without touching the pool."""
        if self.finished:
            raise InvalidInput("Tournament already has a survivor")
        return random_draw(len(self._pool), self._rng)

    def next_round(self, index: Optional[int] = None) -> RoundResult:
        """
        Remove one participant and record the round.

        With no `index` a fresh draw is made. Passing the result of an
        earlier `draw()` commits that pick, so callers can show it first
        and only commit once the round is confirmed.
        """
        if self.finished:
            raise InvalidInput("Tournament already has a survivor")
        if index is None:
            index = self.draw()
        elif not 0 <= index < len(self._pool):
            raise InvalidInput(
                f"Index {index} out of range for pool of {len(self._pool)}"
            )

        winner = self._pool.pop(index)
        self._round_number += 1

        return RoundResult(
            number=self._round_number,
            winner_index=index,
            winner=winner,
            remaining=tuple(self._pool),
        )

    def rounds(
        self,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> Iterator[RoundResult]:
        """
        Yield every remaining round in order.

        `should_cancel` is polled between rounds. Returning True stops the
        tournament with the pool as of the last committed round.
        """
        while not self.finished:
            if self._round_number and should_cancel is not None and should_cancel():
                return
            yield self.next_round()
