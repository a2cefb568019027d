"""Weekly summaries and season standings built from graded picks.

A player's week is summarised by ATS wins, losses and pushes plus the
result of their single O/U pick. The week winner is whoever has the most
ATS wins; a tie goes to the tied player(s) who won their O/U pick, and if
none of them did, every tied player shares the week.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Tuple

import pandas as pd

from src.draft_order.draft_order import Phase
from src.draft_order.pick_records import PickRecord
from src.results.grading import Game, PickResult, grade_ats_pick, grade_ou_pick

logger = logging.getLogger(__name__)

GRADED_COLUMNS = ["season_year", "week_number", "player", "phase", "result"]
SUMMARY_COLUMNS = [
    "player", "spread_wins", "spread_losses", "spread_pushes",
    "ou_result", "is_ou_winner",
]
STANDINGS_COLUMNS = ["player", "week_wins", "ats_w", "ats_l", "ats_p", "win_pct"]


def grade_picks(
    records: Iterable[PickRecord],
    games: Mapping[Tuple[str, str], Game],
) -> pd.DataFrame:
    """Grade every pick against its game, keyed by (home, away) short names.

    Picks whose game is unknown are graded ``pending``.
    """
    rows = []
    for record in records:
        game = games.get((record.home_short, record.away_short))
        if record.phase == Phase.ATS:
            result = grade_ats_pick(game, record.team_short, record.line_at_pick)
        else:
            result = grade_ou_pick(game, record.ou_choice, record.line_at_pick)
        rows.append({
            "season_year": record.season_year,
            "week_number": record.week_number,
            "player": record.player_display_name,
            "phase": record.phase.value,
            "result": result.value,
        })

    graded = pd.DataFrame(rows, columns=GRADED_COLUMNS)
    logger.debug("Graded %d picks", len(graded))
    return graded


def week_summary(graded: pd.DataFrame) -> pd.DataFrame:
    """One row per player for a single week of graded picks."""
    if graded.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    summary = pd.DataFrame({"player": pd.unique(graded["player"])})

    ats = graded[graded["phase"] == Phase.ATS.value]
    for column, result in (
        ("spread_wins", PickResult.WIN),
        ("spread_losses", PickResult.LOSS),
        ("spread_pushes", PickResult.PUSH),
    ):
        counts = ats.loc[ats["result"] == result.value].groupby("player").size()
        summary[column] = summary["player"].map(counts).fillna(0).astype(int)

    # One O/U pick per player; keep the last row if a correction was logged
    ou = (
        graded[graded["phase"] == Phase.OU.value]
        .drop_duplicates(subset="player", keep="last")
        .set_index("player")["result"]
    )
    summary["ou_result"] = [ou.get(player) for player in summary["player"]]
    summary["is_ou_winner"] = summary["ou_result"] == PickResult.WIN.value

    return summary[SUMMARY_COLUMNS]


def weekly_winners(summary: pd.DataFrame) -> List[str]:
    """Players who won the week (most ATS wins, O/U as tie-breaker)."""
    if summary.empty:
        return []

    top = summary["spread_wins"].max()
    candidates = summary[summary["spread_wins"] == top]
    ou_winners = candidates[candidates["is_ou_winner"].astype(bool)]
    if not ou_winners.empty:
        candidates = ou_winners
    return candidates["player"].tolist()


def summaries_by_week(
    graded: pd.DataFrame, season_year: int
) -> Dict[int, pd.DataFrame]:
    """Per-week summaries for one season of graded picks.

    Rows from other seasons are ignored so week N of different years never
    share a summary.
    """
    if graded.empty:
        return {}
    season = graded[graded["season_year"] == season_year]
    return {
        int(week): week_summary(week_df)
        for week, week_df in season.groupby("week_number", sort=True)
    }


def season_standings(summaries: Mapping[int, pd.DataFrame]) -> pd.DataFrame:
    """Season totals per player, most week wins first.

    ``win_pct`` is ATS wins over wins plus losses (pushes excluded), as a
    percentage rounded to one decimal, and 0 for a player with no decisions.
    """
    frames = []
    for week in sorted(summaries):
        summary = summaries[week]
        if summary.empty:
            continue
        winners = set(weekly_winners(summary))
        frame = summary[["player", "spread_wins", "spread_losses", "spread_pushes"]].copy()
        frame["week_win"] = frame["player"].isin(winners).astype(int)
        frames.append(frame)
        logger.debug("Week %d winner(s): %s", week, ", ".join(sorted(winners)))

    if not frames:
        return pd.DataFrame(columns=STANDINGS_COLUMNS)

    combined = pd.concat(frames, ignore_index=True)
    totals = (
        combined.groupby("player", sort=False)
        .agg(
            week_wins=("week_win", "sum"),
            ats_w=("spread_wins", "sum"),
            ats_l=("spread_losses", "sum"),
            ats_p=("spread_pushes", "sum"),
        )
        .reset_index()
    )

    decisions = totals["ats_w"] + totals["ats_l"]
    pct = totals["ats_w"] / decisions.where(decisions > 0) * 100
    totals["win_pct"] = pct.fillna(0.0).round(1)

    totals = totals.sort_values("week_wins", ascending=False, kind="stable")
    logger.info(
        "Season standings over %d week(s) for %d players", len(frames), len(totals)
    )
    return totals.reset_index(drop=True)[STANDINGS_COLUMNS]
