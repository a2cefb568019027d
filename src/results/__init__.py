from src.results.grading import (
    Game,
    PickResult,
    favourite,
    format_spread,
    grade_ats_pick,
    grade_ou_pick,
    score_snapshot,
    score_text,
)
from src.results.standings import (
    grade_picks,
    season_standings,
    summaries_by_week,
    week_summary,
    weekly_winners,
)

__all__ = [
    "Game",
    "PickResult",
    "favourite",
    "format_spread",
    "grade_ats_pick",
    "grade_ou_pick",
    "grade_picks",
    "score_snapshot",
    "score_text",
    "season_standings",
    "summaries_by_week",
    "week_summary",
    "weekly_winners",
]
