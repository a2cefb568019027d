"""Weekly draft order - who is on the clock for a given pick.

A week's draft has two phases. The ATS phase is a snake over ``ATS_ROUNDS``
rounds (forward, reverse, forward, ...). The O/U phase is a single round
that carries the snake on: if the last ATS round ran forward, O/U picks
run in reverse of round 1, otherwise in round-1 order.

Nothing here is stored. Turn order is always recomputed from a pick
counter and the week's round-1 order.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from src.draft_order.config import ATS_ROUNDS

logger = logging.getLogger(__name__)


class EmptyRosterError(ValueError):
    """Raised when a draft order is requested for zero players."""

    pass


class Phase(str, Enum):
    """Draft phase for a pick."""

    ATS = "ats"
    OU = "ou"


@dataclass(frozen=True)
class Player:
    """A pick'em player. Two players are equal when their ids match."""

    id: str
    display_name: str = field(compare=False)


@dataclass(frozen=True)
class DraftState:
    """Pick counter plus the week's (already rotated) round-1 order."""

    current_pick_number: int  # 0-based across ATS then O/U picks
    players: Tuple[Player, ...]

    def __post_init__(self):
        object.__setattr__(self, "players", tuple(self.players))
        if self.current_pick_number < 0:
            raise ValueError(
                f"current_pick_number must be non-negative "
                f"(got {self.current_pick_number})"
            )


@dataclass(frozen=True)
class OnClock:
    """Phase and player for the pick being made."""

    phase: Phase
    player: Player


def _require_players(players: Sequence[Player]) -> int:
    n = len(players)
    if n == 0:
        raise EmptyRosterError("Draft order requires at least one player")
    return n


# ------------------------------------------------------------------
# Rotation / round 1
# ------------------------------------------------------------------

def round_one_order_for_week(base: Sequence[Player], week: int) -> List[Player]:
    """Rotate *base* forward by ``(week - 1) mod n`` seats.

    Week 1 returns *base* unchanged and the order repeats every ``n`` weeks.
    Any integer week is accepted; Python's ``%`` keeps the rotation in
    ``[0, n)`` for non-positive weeks too.
    """
    n = _require_players(base)
    start = (week - 1) % n
    return [base[(start + i) % n] for i in range(n)]


def round_one_reverse(players: Sequence[Player]) -> List[Player]:
    """Round-1 order reversed."""
    return list(reversed(players))


# ------------------------------------------------------------------
# Turn calculation
# ------------------------------------------------------------------

def total_ats_picks(player_count: int, ats_rounds: int = ATS_ROUNDS) -> int:
    return player_count * ats_rounds


def total_picks(player_count: int, ats_rounds: int = ATS_ROUNDS) -> int:
    """ATS picks plus one O/U pick per player."""
    return total_ats_picks(player_count, ats_rounds) + player_count


def on_clock_ats(players_r1: Sequence[Player], ats_pick_number: int) -> Player:
    """Player on the clock for a 0-based pick within the ATS phase.

    Even rounds run in round-1 order, odd rounds in reverse. Only meaningful
    for ``0 <= ats_pick_number < n * ATS_ROUNDS``; callers gate the range.
    """
    n = _require_players(players_r1)
    round_idx = ats_pick_number // n
    idx_in_round = ats_pick_number % n
    order_idx = idx_in_round if round_idx % 2 == 0 else n - 1 - idx_in_round
    return players_r1[order_idx]


def on_clock_ou_carry_snake(
    players_r1: Sequence[Player],
    ou_pick_number: int,
    ats_rounds: int = ATS_ROUNDS,
) -> Player:
    """Player on the clock for a 0-based pick within the O/U phase.

    O/U continues the snake: reverse of round 1 when the last ATS round ran
    forward (odd ``ats_rounds``), round-1 order otherwise. Numbers past the
    single O/U round wrap around.
    """
    n = _require_players(players_r1)
    last_ats_round_is_forward = (ats_rounds - 1) % 2 == 0
    if last_ats_round_is_forward:
        order = round_one_reverse(players_r1)
    else:
        order = list(players_r1)
    return order[ou_pick_number % n]


on_clock_ou = on_clock_ou_carry_snake


def who_is_on_clock(state: DraftState, ats_rounds: int = ATS_ROUNDS) -> OnClock:
    """Phase and player for ``state.current_pick_number``.

    No completion check is made here: a pick number at or past the week's
    total wraps on the O/U order. Use ``WeekDraft.on_clock()`` when the
    draft may already be complete.
    """
    players = state.players
    ats_total = total_ats_picks(_require_players(players), ats_rounds)

    if state.current_pick_number < ats_total:
        player = on_clock_ats(players, state.current_pick_number)
        result = OnClock(Phase.ATS, player)
    else:
        ou_pick_number = state.current_pick_number - ats_total
        player = on_clock_ou_carry_snake(players, ou_pick_number, ats_rounds)
        result = OnClock(Phase.OU, player)

    logger.debug(
        "Pick %d: %s on the clock (%s)",
        state.current_pick_number, result.player.display_name, result.phase.value,
    )
    return result


# ------------------------------------------------------------------
# Debugging
# ------------------------------------------------------------------

def preview_sequence(
    players_r1: Sequence[Player], ats_rounds: int = ATS_ROUNDS
) -> Dict[str, List[str]]:
    """Display names in pick order for a full week, split by phase."""
    n = _require_players(players_r1)
    ats_total = total_ats_picks(n, ats_rounds)
    return {
        "ats": [on_clock_ats(players_r1, i).display_name for i in range(ats_total)],
        "ou": [
            on_clock_ou_carry_snake(players_r1, i, ats_rounds).display_name
            for i in range(n)
        ],
    }
