"""Typed pick records parsed from loosely-shaped backend rows.

Pick rows come back from the backend with inconsistent shapes: numbers as
strings, alternate column names depending on which query produced them,
``O``/``U`` in place of ``OVER``/``UNDER``. They are parsed once here and
only ``PickRecord`` values travel further.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from src.draft_order.draft_order import Phase
from src.draft_order.draft_rules import ValidationError

# Accepted spellings for the pick phase column
_PHASE_ALIASES = {
    "ats": Phase.ATS,
    "spread": Phase.ATS,
    "ou": Phase.OU,
    "o/u": Phase.OU,
    "total": Phase.OU,
}

_OU_CHOICES = {"OVER": "OVER", "O": "OVER", "UNDER": "UNDER", "U": "UNDER"}


@dataclass(frozen=True)
class PickRecord:
    """A single recorded pick."""

    season_year: int
    week_number: int
    player_display_name: str
    phase: Phase
    pick_number: Optional[int] = None  # O/U rows may not carry one
    home_short: str = ""
    away_short: str = ""
    team_short: Optional[str] = None  # ATS only
    ou_choice: Optional[str] = None  # O/U only: "OVER" or "UNDER"
    line_at_pick: Optional[float] = None  # spread for ATS, total for O/U


def _to_int(row: Dict, key: str) -> int:
    value = row.get(key)
    if value is None or isinstance(value, bool):
        raise ValidationError(f"Pick row missing integer field '{key}'")
    try:
        as_float = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Pick row field '{key}' is not a number: {value!r}"
        ) from e
    if not as_float.is_integer():
        raise ValidationError(f"Pick row field '{key}' is not an integer: {value!r}")
    return int(as_float)


def _to_num(value) -> Optional[float]:
    """Finite float or None, accepting numeric strings."""
    if value is None or isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    return num if math.isfinite(num) else None


def _to_short(value) -> str:
    return "" if value is None else str(value).strip().upper()


def _first_present(row: Dict, *keys):
    for key in keys:
        if row.get(key) is not None:
            return row[key]
    return None


def normalize_ou_choice(value) -> Optional[str]:
    """``"OVER"`` or ``"UNDER"`` for any accepted spelling, None otherwise."""
    return _OU_CHOICES.get(_to_short(value))


def parse_pick_row(row: Dict) -> PickRecord:
    """Parse one backend pick row into a PickRecord.

    Raises:
        ValidationError: If a required field is missing or malformed.
    """
    raw_phase = _first_present(row, "phase", "pick_type")
    if raw_phase is None:
        # Rows from the spread-pick table carry no type column
        raw_phase = "ou" if row.get("choice") or row.get("ou_side") else "ats"
    if isinstance(raw_phase, Phase):
        phase = raw_phase
    else:
        phase = _PHASE_ALIASES.get(str(raw_phase).strip().lower())
    if phase is None:
        raise ValidationError(f"Unknown pick phase: {raw_phase!r}")

    name = _first_present(row, "player_display_name", "player_name")
    if name is None or not str(name).strip():
        raise ValidationError("Pick row missing player name")

    team_short = None
    ou_choice = None
    if phase == Phase.ATS:
        team_short = _to_short(row.get("team_short")) or None
        line = _to_num(_first_present(row, "spread_at_pick", "pick_spread", "spread", "line"))
    else:
        raw_choice = _first_present(row, "choice", "ou_side")
        ou_choice = normalize_ou_choice(raw_choice)
        if ou_choice is None:
            raise ValidationError(f"Unknown O/U choice: {raw_choice!r}")
        line = _to_num(_first_present(row, "total_at_pick", "total", "line"))

    return PickRecord(
        season_year=_to_int(row, "season_year"),
        week_number=_to_int(row, "week_number"),
        pick_number=(
            _to_int(row, "pick_number") if row.get("pick_number") is not None else None
        ),
        player_display_name=str(name).strip(),
        phase=phase,
        home_short=_to_short(row.get("home_short")),
        away_short=_to_short(row.get("away_short")),
        team_short=team_short,
        ou_choice=ou_choice,
        line_at_pick=line,
    )


def count_picks(
    records: Iterable[PickRecord], season_year: int, week_number: int
) -> Tuple[int, int]:
    """Count (ATS, O/U) picks recorded for one season week."""
    ats_count = 0
    ou_count = 0
    for record in records:
        if record.season_year != season_year or record.week_number != week_number:
            continue
        if record.phase == Phase.ATS:
            ats_count += 1
        else:
            ou_count += 1
    return ats_count, ou_count
