"""Shared fixtures for the pick'em draft test suite."""

import json

import pytest

from src.draft_order.draft_order import Player


# ------------------------------------------------------------------
# Rosters – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def league_roster():
    """The league's week-1 order."""
    return [
        Player("big-dawg", "Big Dawg"),
        Player("pud", "Pud"),
        Player("kinish", "Kinish"),
    ]


@pytest.fixture
def abc_roster():
    return [Player("a", "A"), Player("b", "B"), Player("c", "C")]


# ------------------------------------------------------------------
# File-backed fixtures
# ------------------------------------------------------------------

@pytest.fixture
def seasons_dir(tmp_path):
    """Seasons directory with a 2025 setup file for a four-player league."""
    data = {
        "season": 2025,
        "players": [
            {"id": "p1", "display_name": "One"},
            {"id": "p2", "display_name": "Two"},
            {"id": "p3", "display_name": "Three"},
            {"id": "p4", "display_name": "Four"},
        ],
    }
    (tmp_path / "season_2025.json").write_text(json.dumps(data), encoding="utf-8")
    return tmp_path
