"""Season setup - loads the base round-1 roster for a season."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from src.draft_order.config import DEFAULT_ROSTER, DEFAULT_SEASON_YEAR, SEASONS_DIR
from src.draft_order.draft_order import Player
from src.draft_order.week_draft import WeekDraft

logger = logging.getLogger(__name__)


class SeasonSetup:
    """Reads season setup records and builds week drafts from them."""

    def __init__(self, seasons_dir: Optional[Path] = None):
        self.seasons_dir = seasons_dir or SEASONS_DIR

    def load_base_roster(self, season_year: int = DEFAULT_SEASON_YEAR) -> List[Player]:
        """
        Load the week-1 round-1 order for a season.

        Reads ``season_{year}.json`` from the seasons directory. When no file
        exists for the season, the configured default roster is used.

        Returns:
            Players in week-1 draft order
        """
        season_file = self.seasons_dir / f"season_{season_year}.json"

        if not season_file.exists():
            logger.info(
                "No setup file for %d season, using default roster", season_year
            )
            return self.parse_roster(DEFAULT_ROSTER)

        with open(season_file, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(
                    f"Malformed season setup file for {season_year}: {e}"
                ) from e

        try:
            roster = self.parse_roster(data["players"])
        except KeyError as e:
            raise ValueError(
                f"Malformed season setup file for {season_year}: missing key {e}"
            ) from e
        except TypeError as e:
            # Top level or a player entry is not a JSON object
            raise ValueError(
                f"Malformed season setup file for {season_year}: "
                f"expected player objects ({e})"
            ) from e

        logger.info(
            "Loaded %d players for %d season: %s",
            len(roster),
            season_year,
            ", ".join(p.display_name for p in roster),
        )
        return roster

    def week_draft(
        self,
        week: int,
        ats_picks_made: int = 0,
        ou_picks_made: int = 0,
        season_year: int = DEFAULT_SEASON_YEAR,
    ) -> WeekDraft:
        """Build a WeekDraft for *week* from the season's base roster."""
        roster = self.load_base_roster(season_year)
        return WeekDraft.from_pick_counts(week, roster, ats_picks_made, ou_picks_made)

    @staticmethod
    def parse_roster(entries: List[Dict]) -> List[Player]:
        """Validate roster entries and convert them to Players."""
        if not entries:
            raise ValueError("Roster cannot be empty")

        roster = [
            Player(id=str(entry["id"]).strip(), display_name=str(entry["display_name"]).strip())
            for entry in entries
        ]

        blank = [p for p in roster if not p.id or not p.display_name]
        if blank:
            raise ValueError(f"Roster has {len(blank)} player(s) with a blank id or name")

        ids = [p.id for p in roster]
        duplicates = sorted({pid for pid in ids if ids.count(pid) > 1})
        if duplicates:
            raise ValueError(f"Roster has duplicate player ids: {duplicates}")

        return roster

    @staticmethod
    def get_default_roster() -> List[Player]:
        """Get the configured week-1 order."""
        return SeasonSetup.parse_roster(DEFAULT_ROSTER)
