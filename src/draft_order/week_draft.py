"""Week draft view - pick counts in, draft status and on-clock player out.

The backing store only ever records pick rows. Everything here is derived
from how many ATS and O/U rows exist for the week, so a view can be rebuilt
whenever a new row is observed.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from src.draft_order.config import ATS_ROUNDS
from src.draft_order.draft_order import (
    DraftState,
    OnClock,
    Player,
    round_one_order_for_week,
    total_ats_picks,
    total_picks as week_total_picks,
    who_is_on_clock,
)
from src.draft_order.draft_rules import ValidationError
from src.draft_order.pick_records import PickRecord, count_picks

logger = logging.getLogger(__name__)


class DraftStatus(str, Enum):
    NOT_STARTED = "not_started"
    ATS_IN_PROGRESS = "ats_in_progress"
    OU_IN_PROGRESS = "ou_in_progress"
    COMPLETE = "complete"


@dataclass(frozen=True)
class WeekDraft:
    """One week's draft, reconstructed from recorded pick counts."""

    week: int
    base_roster: Tuple[Player, ...]
    ats_picks_made: int = 0
    ou_picks_made: int = 0
    ats_rounds: int = ATS_ROUNDS

    def __post_init__(self):
        object.__setattr__(self, "base_roster", tuple(self.base_roster))
        if not self.base_roster:
            raise ValidationError("Base roster cannot be empty")
        if self.ats_picks_made < 0 or self.ou_picks_made < 0:
            raise ValidationError(
                f"Pick counts cannot be negative "
                f"(ats={self.ats_picks_made}, ou={self.ou_picks_made})"
            )

        ats_total = self.ats_total
        if self.ats_picks_made > ats_total:
            raise ValidationError(
                f"Week {self.week} has {self.ats_picks_made} ATS picks "
                f"but only {ats_total} are allowed"
            )
        if self.ou_picks_made > 0 and self.ats_picks_made < ats_total:
            raise ValidationError(
                f"Week {self.week} has O/U picks before the ATS phase finished "
                f"({self.ats_picks_made}/{ats_total} ATS picks)"
            )
        if self.ou_picks_made > len(self.base_roster):
            raise ValidationError(
                f"Week {self.week} has {self.ou_picks_made} O/U picks "
                f"but only {len(self.base_roster)} are allowed"
            )

    @classmethod
    def from_pick_counts(
        cls,
        week: int,
        base_roster: Sequence[Player],
        ats_picks_made: int,
        ou_picks_made: int,
        ats_rounds: int = ATS_ROUNDS,
    ) -> "WeekDraft":
        return cls(
            week=week,
            base_roster=tuple(base_roster),
            ats_picks_made=ats_picks_made,
            ou_picks_made=ou_picks_made,
            ats_rounds=ats_rounds,
        )

    @classmethod
    def from_pick_rows(
        cls,
        season_year: int,
        week: int,
        base_roster: Sequence[Player],
        records: Iterable[PickRecord],
        ats_rounds: int = ATS_ROUNDS,
    ) -> "WeekDraft":
        """Build from parsed pick rows, counting only this season and week."""
        ats_count, ou_count = count_picks(records, season_year, week)
        logger.debug(
            "Week %d (%d): %d ATS and %d O/U picks recorded",
            week, season_year, ats_count, ou_count,
        )
        return cls.from_pick_counts(
            week, base_roster, ats_count, ou_count, ats_rounds
        )

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def round_one_order(self) -> List[Player]:
        """This week's round-1 order (base roster rotated by week)."""
        return round_one_order_for_week(self.base_roster, self.week)

    @property
    def ats_total(self) -> int:
        return total_ats_picks(len(self.base_roster), self.ats_rounds)

    @property
    def total_picks(self) -> int:
        return week_total_picks(len(self.base_roster), self.ats_rounds)

    @property
    def current_pick_number(self) -> int:
        return self.ats_picks_made + self.ou_picks_made

    @property
    def is_complete(self) -> bool:
        return self.current_pick_number >= self.total_picks

    @property
    def status(self) -> DraftStatus:
        if self.is_complete:
            return DraftStatus.COMPLETE
        if self.current_pick_number == 0:
            return DraftStatus.NOT_STARTED
        if self.current_pick_number < self.ats_total:
            return DraftStatus.ATS_IN_PROGRESS
        return DraftStatus.OU_IN_PROGRESS

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.base_roster:
            if player.id == player_id:
                return player
        return None

    # ------------------------------------------------------------------
    # On the clock
    # ------------------------------------------------------------------

    def on_clock(self) -> Optional[OnClock]:
        """Who picks next, or None once every pick for the week is in."""
        if self.is_complete:
            return None
        state = DraftState(self.current_pick_number, self.round_one_order)
        return who_is_on_clock(state, self.ats_rounds)

    def upcoming(self, count: int) -> List[OnClock]:
        """The next *count* picks in order, stopping at the end of the draft."""
        order = self.round_one_order
        remaining = self.total_picks - self.current_pick_number
        return [
            who_is_on_clock(DraftState(pick, order), self.ats_rounds)
            for pick in range(
                self.current_pick_number,
                self.current_pick_number + max(0, min(count, remaining)),
            )
        ]

    def summary(self) -> dict:
        """Plain dict for banners and logs."""
        on_clock = self.on_clock()
        return {
            "week": self.week,
            "status": self.status.value,
            "round_one_order": [p.display_name for p in self.round_one_order],
            "picks_made": self.current_pick_number,
            "total_picks": self.total_picks,
            "phase": on_clock.phase.value if on_clock else None,
            "on_clock": on_clock.player.display_name if on_clock else None,
        }
