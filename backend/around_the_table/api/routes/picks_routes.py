"""
Pick management API routes.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas import PickCreate, PickResponse, PickResultRequest, WeekStatsResponse
from ..deps import resolve_season, pick_response
from ...core.league import week_from_date
from ...db import get_db, LeagueStateRepository
from ...picks import (
    add_pick,
    record_result,
    refresh_current_week,
    current_week_picks,
    filter_picks,
    week_stats,
    UnknownPlayerError,
    PickNotFoundError,
    PickAlreadyResolvedError
)
from ...standings.models import parse_timestamp


router = APIRouter(prefix="/picks", tags=["picks"])


@router.get("", response_model=List[PickResponse])
async def list_picks(
    player: Optional[str] = None,
    week: Optional[int] = Query(None, ge=1),
    result: Optional[str] = Query(None, pattern="^(win|loss|pending)$"),
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> List[PickResponse]:
    """
    List picks, most recent week first, optionally filtered.
    """
    state = await LeagueStateRepository(db).load(season)
    return [pick_response(p) for p in filter_picks(state.picks, player, week, result)]


@router.get("/current-week", response_model=List[PickResponse])
async def get_current_week_picks(
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> List[PickResponse]:
    """
    Get the picks made for the week in progress.
    """
    state = await LeagueStateRepository(db).load(season)
    refresh_current_week(state)
    return [pick_response(p) for p in current_week_picks(state)]


@router.get("/weeks/{week}/stats", response_model=WeekStatsResponse)
async def get_week_stats(
    week: int,
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> WeekStatsResponse:
    """
    Get pick totals for one week.
    """
    state = await LeagueStateRepository(db).load(season)
    return WeekStatsResponse(**week_stats(state.picks, week))


@router.post("", response_model=PickResponse, status_code=status.HTTP_201_CREATED)
async def create_pick(
    data: PickCreate,
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> PickResponse:
    """
    Add a player's pick.

    Without an explicit week, the week is taken from the game time, or the
    week in progress when no game time is given.
    """
    repo = LeagueStateRepository(db)
    state = await repo.load(season)

    game_time = parse_timestamp(data.game_time)
    week = data.week
    if week is None:
        week = week_from_date(game_time, season) if game_time else refresh_current_week(state)

    try:
        pick = add_pick(
            state,
            player=data.player,
            week=week,
            team=data.team,
            opponent=data.opponent,
            is_underdog=data.is_underdog,
            game_time=game_time
        )
    except UnknownPlayerError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    await repo.save(season, state)
    await db.commit()

    return pick_response(pick)


@router.post("/result", response_model=PickResponse)
async def record_pick_result(
    data: PickResultRequest,
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> PickResponse:
    """
    Record the result of the pick on a team in a week and credit its owner.
    """
    repo = LeagueStateRepository(db)
    state = await repo.load(season)

    try:
        pick = record_result(state, data.week, data.team, data.won, player=data.player)
    except PickNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except PickAlreadyResolvedError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )

    refresh_current_week(state)
    await repo.save(season, state)
    await db.commit()

    return pick_response(pick)
