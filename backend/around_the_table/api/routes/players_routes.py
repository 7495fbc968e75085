"""
Player API routes.
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas import PickResponse, PlayerResponse, PlayerStatsResponse, PlayerStatsUpdate
from ..deps import resolve_season, pick_response
from ...db import get_db, LeagueStateRepository
from ...picks import (
    player_history,
    player_stats,
    refresh_current_week,
    update_player_stats,
    UnknownPlayerError
)
from ...standings.models import LeagueState


router = APIRouter(prefix="/players", tags=["players"])


def _require_player(state: LeagueState, name: str) -> None:
    if state.get_player(name) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown player: {name}"
        )


@router.get("", response_model=List[PlayerResponse])
async def list_players(
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> List[PlayerResponse]:
    """
    Get the roster in seating order.
    """
    state = await LeagueStateRepository(db).load(season)
    return [PlayerResponse(**p.to_dict()) for p in state.players]


@router.get("/{name}/stats", response_model=PlayerStatsResponse)
async def get_player_stats(
    name: str,
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> PlayerStatsResponse:
    """
    Get pick totals and win rate for a player.
    """
    state = await LeagueStateRepository(db).load(season)
    _require_player(state, name)
    return PlayerStatsResponse(**player_stats(state.picks, name))


@router.get("/{name}/history", response_model=List[PickResponse])
async def get_player_history(
    name: str,
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> List[PickResponse]:
    """
    Get every pick a player has made this season.
    """
    state = await LeagueStateRepository(db).load(season)
    _require_player(state, name)
    return [pick_response(p) for p in player_history(state, name)]


@router.put("/{name}", response_model=PlayerResponse)
async def set_player_record(
    name: str,
    data: PlayerStatsUpdate,
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> PlayerResponse:
    """
    Overwrite a player's wins and losses (manual correction).
    """
    repo = LeagueStateRepository(db)
    state = await repo.load(season)

    try:
        player = update_player_stats(state, name, data.wins, data.losses)
    except UnknownPlayerError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    refresh_current_week(state)
    await repo.save(season, state)
    await db.commit()

    return PlayerResponse(**player.to_dict())
