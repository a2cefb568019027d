"""Print a week's draft order and who is on the clock.

Usage:
    python -m src.draft_order.preview [week] [ats_picks] [ou_picks] [season]

Examples:
    python -m src.draft_order.preview 2
    python -m src.draft_order.preview 2 4 0
"""

import logging
import sys
from typing import List, Optional, Sequence

from src.draft_order.config import DEFAULT_SEASON_YEAR
from src.draft_order.draft_order import preview_sequence
from src.draft_order.season_setup import SeasonSetup
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def render_preview(
    week: int,
    ats_picks_made: int = 0,
    ou_picks_made: int = 0,
    season_year: int = DEFAULT_SEASON_YEAR,
    setup: Optional[SeasonSetup] = None,
) -> List[str]:
    """Build the preview lines for one week."""
    setup = setup or SeasonSetup()
    draft = setup.week_draft(week, ats_picks_made, ou_picks_made, season_year)
    summary = draft.summary()
    sequence = preview_sequence(draft.round_one_order, draft.ats_rounds)

    lines = [
        f"Week {week} ({season_year}) round-1 order: "
        + ", ".join(summary["round_one_order"]),
        "ATS: " + " -> ".join(sequence["ats"]),
        "O/U: " + " -> ".join(sequence["ou"]),
        f"Picks made: {summary['picks_made']}/{summary['total_picks']}",
    ]
    if summary["on_clock"] is None:
        lines.append("Draft complete")
    else:
        lines.append(
            f"On the clock: {summary['on_clock']} ({summary['phase'].upper()})"
        )

    logger.info(
        "Week %d preview: %s, status=%s",
        week, summary["on_clock"] or "nobody", summary["status"],
    )
    return lines


def main(argv: Sequence[str], setup: Optional[SeasonSetup] = None) -> int:
    """Run the preview for ``[week] [ats_picks] [ou_picks] [season]``.

    Returns the process exit code; bad arguments and setup errors are logged
    and give 1.
    """
    try:
        week = int(argv[0]) if len(argv) > 0 else 1
        ats_picks = int(argv[1]) if len(argv) > 1 else 0
        ou_picks = int(argv[2]) if len(argv) > 2 else 0
        season = int(argv[3]) if len(argv) > 3 else DEFAULT_SEASON_YEAR

        for line in render_preview(week, ats_picks, ou_picks, season, setup):
            print(line)
    except Exception:
        logger.exception("Preview failed")
        return 1
    return 0


if __name__ == "__main__":
    setup_logging()
    sys.exit(main(sys.argv[1:]))
