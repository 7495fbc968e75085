"""
Core constants and calendar utilities.
"""

from .league import (
    PickResult,
    ROSTER,
    STAKE,
    REGULAR_SEASON_GAMES,
    TOTAL_WEEKS,
    season_start,
    get_current_season,
    week_from_date,
)

__all__ = [
    "PickResult",
    "ROSTER",
    "STAKE",
    "REGULAR_SEASON_GAMES",
    "TOTAL_WEEKS",
    "season_start",
    "get_current_season",
    "week_from_date",
]
