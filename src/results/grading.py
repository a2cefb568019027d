"""Grade ATS and O/U picks against game scores."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from src.draft_order.pick_records import normalize_ou_choice


class PickResult(str, Enum):
    WIN = "win"
    LOSS = "loss"
    PUSH = "push"
    PENDING = "pending"


@dataclass(frozen=True)
class Game:
    """Scores for one game. Final scores win over live ones when both exist."""

    home: str
    away: str
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    live_home_score: Optional[int] = None
    live_away_score: Optional[int] = None
    is_live: bool = False
    is_final: bool = False


def score_snapshot(game: Optional[Game]) -> Tuple[Optional[int], Optional[int]]:
    """Best available (home, away) score; 0 is a real score, None is missing."""
    if game is None:
        return None, None
    if game.home_score is not None and game.away_score is not None:
        return game.home_score, game.away_score
    if game.live_home_score is not None and game.live_away_score is not None:
        return game.live_home_score, game.live_away_score
    return None, None


def score_text(game: Optional[Game]) -> str:
    home, away = score_snapshot(game)
    if home is None or away is None:
        return "—"
    return f"{home}–{away}"


def grade_ats_pick(
    game: Optional[Game], team_short: Optional[str], spread: Optional[float]
) -> PickResult:
    """Grade a spread pick once the game is final.

    The picked team's margin plus its spread decides it: above zero covers,
    below zero loses, exactly zero pushes. A missing spread counts as a
    pick'em.
    """
    home, away = score_snapshot(game)
    if game is None or home is None or away is None or not game.is_final:
        return PickResult.PENDING

    team = (team_short or "").strip().upper()
    if team and team == game.home.strip().upper():
        margin = home - away
    elif team and team == game.away.strip().upper():
        margin = away - home
    else:
        return PickResult.PENDING

    cover = margin + (spread or 0)
    if cover > 0:
        return PickResult.WIN
    if cover < 0:
        return PickResult.LOSS
    return PickResult.PUSH


def grade_ou_pick(
    game: Optional[Game], choice: Optional[str], total: Optional[float]
) -> PickResult:
    """Grade an over/under pick once the game is final."""
    home, away = score_snapshot(game)
    if game is None or home is None or away is None or not game.is_final:
        return PickResult.PENDING
    side = normalize_ou_choice(choice)
    if side is None or total is None:
        return PickResult.PENDING

    combined = home + away
    if combined == total:
        return PickResult.PUSH
    if combined > total:
        return PickResult.WIN if side == "OVER" else PickResult.LOSS
    return PickResult.WIN if side == "UNDER" else PickResult.LOSS


def format_spread(value: Optional[float]) -> str:
    """Signed spread for display, ``PK`` for a pick'em."""
    if value is None:
        return ""
    if value == 0:
        return "PK"
    text = f"{value:g}"
    return f"+{text}" if value > 0 else text


def favourite(home: str, away: str, spread: Optional[float]) -> Optional[str]:
    """Favoured team from a home-line spread (negative means home favoured)."""
    if spread is None or spread == 0:
        return None
    return home if spread < 0 else away
