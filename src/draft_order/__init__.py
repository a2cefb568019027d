from src.draft_order.draft_order import (
    DraftState,
    EmptyRosterError,
    OnClock,
    Phase,
    Player,
    on_clock_ats,
    on_clock_ou,
    on_clock_ou_carry_snake,
    preview_sequence,
    round_one_order_for_week,
    round_one_reverse,
    total_ats_picks,
    total_picks,
    who_is_on_clock,
)
from src.draft_order.draft_rules import DraftRules, ValidationError
from src.draft_order.pick_records import (
    PickRecord,
    count_picks,
    normalize_ou_choice,
    parse_pick_row,
)
from src.draft_order.season_setup import SeasonSetup
from src.draft_order.week_draft import DraftStatus, WeekDraft

__all__ = [
    "DraftRules",
    "DraftState",
    "DraftStatus",
    "EmptyRosterError",
    "OnClock",
    "Phase",
    "PickRecord",
    "Player",
    "SeasonSetup",
    "ValidationError",
    "WeekDraft",
    "count_picks",
    "normalize_ou_choice",
    "on_clock_ats",
    "on_clock_ou",
    "on_clock_ou_carry_snake",
    "parse_pick_row",
    "preview_sequence",
    "round_one_order_for_week",
    "round_one_reverse",
    "total_ats_picks",
    "total_picks",
    "who_is_on_clock",
]
