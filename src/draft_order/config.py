from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
SEASONS_DIR = DATA_DIR / "seasons"
LOG_DIR = PROJECT_ROOT / "logs"

# Season settings
DEFAULT_SEASON_YEAR = 2025
WEEKS_PER_SEASON = 18

# Draft format: ATS snake rounds, then one O/U tie-breaker pick per player.
# Keep ATS_ROUNDS odd so the O/U round starts in reverse of round 1.
ATS_ROUNDS = 3

# Base round-1 order for week 1 (rotated forward one seat each week)
DEFAULT_ROSTER = [
    {"id": "big-dawg", "display_name": "Big Dawg"},
    {"id": "pud", "display_name": "Pud"},
    {"id": "kinish", "display_name": "Kinish"},
]
