"""Tests for weekly summaries and season standings."""

import pandas as pd
import pytest

from src.draft_order.draft_order import Phase
from src.draft_order.pick_records import PickRecord
from src.results.grading import Game
from src.results.standings import (
    STANDINGS_COLUMNS,
    SUMMARY_COLUMNS,
    grade_picks,
    season_standings,
    summaries_by_week,
    week_summary,
    weekly_winners,
)


# ── Synthetic data helpers ────────────────────────────────────────────

def _graded(rows, season=2025):
    """Build a graded-picks frame from (week, player, phase, result) tuples."""
    return pd.DataFrame(
        [
            {"season_year": season, "week_number": w, "player": p, "phase": ph, "result": r}
            for w, p, ph, r in rows
        ]
    )


def _summary(rows):
    """Build a week summary from (player, wins, losses, pushes, ou_result)."""
    return pd.DataFrame(
        [
            {
                "player": p, "spread_wins": w, "spread_losses": l,
                "spread_pushes": pu, "ou_result": ou, "is_ou_winner": ou == "win",
            }
            for p, w, l, pu, ou in rows
        ],
        columns=SUMMARY_COLUMNS,
    )


# ── Grading a batch ──────────────────────────────────────────────────

class TestGradePicks:
    def test_grades_against_matching_game(self):
        games = {("KC", "BUF"): Game("KC", "BUF", home_score=27, away_score=20, is_final=True)}
        records = [
            PickRecord(2025, 2, "Pud", Phase.ATS, pick_number=0,
                       home_short="KC", away_short="BUF", team_short="KC", line_at_pick=-3.5),
            PickRecord(2025, 2, "Kinish", Phase.OU,
                       home_short="KC", away_short="BUF", ou_choice="UNDER", line_at_pick=47.5),
            PickRecord(2025, 2, "Big Dawg", Phase.ATS, pick_number=1,
                       home_short="NYJ", away_short="MIA", team_short="MIA", line_at_pick=1.0),
        ]
        graded = grade_picks(records, games)
        assert graded["result"].tolist() == ["win", "win", "pending"]
        assert graded["phase"].tolist() == ["ats", "ou", "ats"]
        assert graded["player"].tolist() == ["Pud", "Kinish", "Big Dawg"]

    def test_no_records(self):
        graded = grade_picks([], {})
        assert graded.empty
        assert list(graded.columns) == [
            "season_year", "week_number", "player", "phase", "result",
        ]


# ── Week summary ─────────────────────────────────────────────────────

class TestWeekSummary:
    def test_counts_per_player(self):
        graded = _graded([
            (1, "Pud", "ats", "win"),
            (1, "Pud", "ats", "win"),
            (1, "Pud", "ats", "push"),
            (1, "Kinish", "ats", "loss"),
            (1, "Kinish", "ats", "pending"),
            (1, "Pud", "ou", "loss"),
            (1, "Kinish", "ou", "win"),
        ])
        summary = week_summary(graded).set_index("player")
        assert summary.loc["Pud", "spread_wins"] == 2
        assert summary.loc["Pud", "spread_losses"] == 0
        assert summary.loc["Pud", "spread_pushes"] == 1
        assert summary.loc["Kinish", "spread_losses"] == 1
        assert summary.loc["Pud", "ou_result"] == "loss"
        assert bool(summary.loc["Kinish", "is_ou_winner"]) is True

    def test_player_without_ou_pick(self):
        graded = _graded([(1, "Pud", "ats", "win")])
        summary = week_summary(graded)
        assert summary.loc[0, "ou_result"] is None
        assert bool(summary.loc[0, "is_ou_winner"]) is False

    def test_player_order_preserved(self):
        graded = _graded([
            (1, "Kinish", "ats", "win"),
            (1, "Big Dawg", "ats", "win"),
            (1, "Pud", "ou", "win"),
        ])
        assert week_summary(graded)["player"].tolist() == ["Kinish", "Big Dawg", "Pud"]

    def test_empty(self):
        summary = week_summary(pd.DataFrame())
        assert summary.empty
        assert list(summary.columns) == SUMMARY_COLUMNS


# ── Weekly winners ───────────────────────────────────────────────────

class TestWeeklyWinners:
    def test_most_ats_wins(self):
        summary = _summary([
            ("Big Dawg", 1, 2, 0, "win"),
            ("Pud", 3, 0, 0, "loss"),
            ("Kinish", 2, 1, 0, "loss"),
        ])
        assert weekly_winners(summary) == ["Pud"]

    def test_tie_broken_by_ou(self):
        summary = _summary([
            ("Big Dawg", 2, 1, 0, "loss"),
            ("Pud", 2, 1, 0, "win"),
            ("Kinish", 1, 2, 0, "win"),
        ])
        assert weekly_winners(summary) == ["Pud"]

    def test_tie_shared_when_no_ou_winner(self):
        summary = _summary([
            ("Big Dawg", 2, 1, 0, "loss"),
            ("Pud", 2, 1, 0, "push"),
            ("Kinish", 1, 2, 0, "win"),
        ])
        assert weekly_winners(summary) == ["Big Dawg", "Pud"]

    def test_empty(self):
        assert weekly_winners(_summary([])) == []


# ── Season standings ─────────────────────────────────────────────────

class TestSeasonStandings:
    def test_totals_and_sorting(self):
        summaries = {
            1: _summary([
                ("Big Dawg", 1, 2, 0, "win"),
                ("Pud", 3, 0, 0, "loss"),
                ("Kinish", 2, 1, 0, "loss"),
            ]),
            2: _summary([
                ("Big Dawg", 2, 0, 1, "win"),
                ("Pud", 2, 1, 0, "loss"),
                ("Kinish", 0, 3, 0, "win"),
            ]),
            3: _summary([
                ("Big Dawg", 2, 1, 0, "win"),
                ("Pud", 1, 2, 0, "win"),
                ("Kinish", 1, 2, 0, "loss"),
            ]),
        }
        standings = season_standings(summaries)

        assert list(standings.columns) == STANDINGS_COLUMNS
        assert standings["player"].tolist() == ["Big Dawg", "Pud", "Kinish"]
        assert standings["week_wins"].tolist() == [2, 1, 0]

        big_dawg = standings.iloc[0]
        assert (big_dawg["ats_w"], big_dawg["ats_l"], big_dawg["ats_p"]) == (5, 3, 1)
        assert big_dawg["win_pct"] == pytest.approx(62.5)

    def test_win_pct_rounded(self):
        standings = season_standings({1: _summary([("Pud", 2, 1, 0, None)])})
        assert standings.loc[0, "win_pct"] == pytest.approx(66.7)

    def test_win_pct_zero_without_decisions(self):
        standings = season_standings({1: _summary([("Pud", 0, 0, 3, None)])})
        assert standings.loc[0, "win_pct"] == 0.0

    def test_shared_week_counts_for_each(self):
        standings = season_standings({
            1: _summary([("Pud", 2, 1, 0, "loss"), ("Kinish", 2, 1, 0, "loss")]),
        })
        assert standings["week_wins"].tolist() == [1, 1]

    def test_skips_empty_weeks(self):
        standings = season_standings({
            1: _summary([]),
            2: _summary([("Pud", 1, 0, 0, "win")]),
        })
        assert standings["player"].tolist() == ["Pud"]

    def test_no_weeks(self):
        standings = season_standings({})
        assert standings.empty
        assert list(standings.columns) == STANDINGS_COLUMNS


class TestSeasonPipeline:
    def test_from_graded_picks(self):
        graded = _graded([
            (1, "Pud", "ats", "win"),
            (1, "Kinish", "ats", "loss"),
            (1, "Pud", "ou", "loss"),
            (1, "Kinish", "ou", "win"),
            (2, "Pud", "ats", "loss"),
            (2, "Kinish", "ats", "win"),
            (2, "Kinish", "ats", "win"),
        ])
        summaries = summaries_by_week(graded, 2025)
        assert sorted(summaries) == [1, 2]

        standings = season_standings(summaries)
        assert standings["player"].tolist() == ["Pud", "Kinish"]
        assert standings["week_wins"].tolist() == [1, 1]
        assert standings.set_index("player").loc["Kinish", "ats_w"] == 2

    def test_weeks_split_by_season(self):
        graded = pd.concat(
            [
                _graded([(1, "Pud", "ats", "win")], season=2024),
                _graded([(1, "Pud", "ats", "win"), (1, "Kinish", "ats", "loss")]),
            ],
            ignore_index=True,
        )
        summary = summaries_by_week(graded, 2025)[1].set_index("player")
        assert summary.loc["Pud", "spread_wins"] == 1
        assert summary.loc["Kinish", "spread_losses"] == 1

        earlier = summaries_by_week(graded, 2024)[1]
        assert earlier["player"].tolist() == ["Pud"]

    def test_season_without_picks(self):
        graded = _graded([(1, "Pud", "ats", "win")])
        assert summaries_by_week(graded, 2023) == {}
        assert summaries_by_week(pd.DataFrame(), 2025) == {}
