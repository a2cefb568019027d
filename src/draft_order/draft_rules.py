"""Pick submission checks against the current week draft."""

import logging
from typing import TYPE_CHECKING, Optional, Tuple

from src.draft_order.draft_order import Phase

if TYPE_CHECKING:
    from src.draft_order.week_draft import WeekDraft

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when a pick or pick count violates draft rules."""

    pass


class DraftRules:
    """Enforces whose turn it is and which phase is open."""

    def __init__(self, week_draft: "WeekDraft"):
        self.week_draft = week_draft

    def validate_pick(
        self, player_id: str, phase: Phase
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate if a pick submission is legal.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        draft = self.week_draft
        phase = Phase(phase)

        # Check 1: Is the player in this week's draft?
        player = draft.get_player(player_id)
        if player is None:
            return False, f"Player {player_id} is not in the week {draft.week} draft"

        # Check 2: Is there anything left to pick?
        on_clock = draft.on_clock()
        if on_clock is None:
            return False, f"Week {draft.week} draft is already complete"

        # Check 3: Is this phase open?
        if phase != on_clock.phase:
            return (
                False,
                f"{phase.value.upper()} picks are not open "
                f"(current phase: {on_clock.phase.value.upper()})",
            )

        # Check 4: Is it this player's turn?
        if player != on_clock.player:
            return (
                False,
                f"Not {player.display_name}'s turn "
                f"(on the clock: {on_clock.player.display_name})",
            )

        return True, None

    def require_valid_pick(self, player_id: str, phase: Phase) -> None:
        """Raise ValidationError if the pick is not legal right now."""
        is_valid, error_msg = self.validate_pick(player_id, phase)
        if not is_valid:
            logger.warning("Invalid pick attempted: %s", error_msg)
            raise ValidationError(error_msg)
