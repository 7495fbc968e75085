"""
League constants and NFL calendar utilities.
"""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import List, Optional, Union


class PickResult(str, Enum):
    """Outcome of a decided pick."""
    WIN = "win"
    LOSS = "loss"


# Fixed roster, in seating order. Ranking ties fall back to this order.
ROSTER: List[str] = ["Corey", "Jerry", "Larry", "Ramiz", "Bruno"]

# Paid by each opponent per win, and to each opponent per loss
STAKE = 5

# NFL regular season length in games per player
REGULAR_SEASON_GAMES = 17

# Weeks 1-18 (17 games plus one bye)
TOTAL_WEEKS = 18


def get_current_season(now: Union[date, datetime, None] = None) -> int:
    """
    Get the current NFL season year.

    Sept-Dec = current year, Jan-Feb = previous year (playoffs), and the
    off-season months roll forward to the upcoming season.

    Args:
        now: Reference time (defaults to the current local time)

    Returns:
        The season year
    """
    now = now or datetime.now()

    if now.month >= 9:
        return now.year
    elif now.month <= 2:
        return now.year - 1
    return now.year


def season_start(season: int) -> date:
    """
    Opening night of a season: the Thursday after Labor Day.

    Labor Day is the first Monday in September.
    """
    first = date(season, 9, 1)
    labor_day = first + timedelta(days=(7 - first.weekday()) % 7)
    return labor_day + timedelta(days=3)


def week_from_date(game_date: Union[date, datetime], season: Optional[int] = None) -> int:
    """
    Map a game date onto a week number of ``season``.

    Weeks are 7-day blocks counted from the season opener and clamped to
    1..TOTAL_WEEKS, so pre-season dates land in week 1. Without a season,
    the season the game date falls in is used.
    """
    if isinstance(game_date, datetime):
        game_date = game_date.date()
    if season is None:
        season = get_current_season(game_date)

    weeks_since_start = (game_date - season_start(season)).days // 7
    return max(1, min(TOTAL_WEEKS, weeks_since_start + 1))
