"""
Shared route dependencies and response builders.
"""

from typing import Optional
from fastapi import Query

from .schemas import PickResponse
from ..core.league import get_current_season
from ..standings.models import Pick


def resolve_season(season: Optional[int] = Query(None, ge=2000, le=2100)) -> int:
    """Season from the query string, defaulting to the current NFL season."""
    return season or get_current_season()


def pick_response(pick: Pick) -> PickResponse:
    return PickResponse(
        player=pick.player,
        week=pick.week,
        team=pick.team,
        opponent=pick.opponent,
        is_underdog=pick.is_underdog,
        result=pick.result.value if pick.result else None,
        timestamp=pick.timestamp,
        game_time=pick.game_time,
        final_score=pick.final_score,
        updated_at=pick.updated_at
    )
