"""
Standings API routes.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas import (
    StandingsResponse,
    StandingsRowResponse,
    SeasonStatusResponse,
    PayoutMatrixResponse,
    PayoutRow
)
from ..deps import resolve_season
from ...db import get_db, LeagueStateRepository
from ...standings import compute_standings, compute_payouts, evaluate_season, SeasonStatus


router = APIRouter(prefix="/standings", tags=["standings"])


def _season_status(status: SeasonStatus) -> SeasonStatusResponse:
    return SeasonStatusResponse(**status.to_dict())


@router.get("", response_model=StandingsResponse)
async def get_standings(
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> StandingsResponse:
    """
    Get ranked standings, summary stats and season status.
    """
    state = await LeagueStateRepository(db).load(season)
    view = compute_standings(state.players)

    return StandingsResponse(
        season=season,
        rows=[
            StandingsRowResponse(
                rank=row.rank,
                name=row.name,
                wins=row.wins,
                losses=row.losses,
                win_percentage=row.win_percentage,
                net_balance=row.net_balance,
                is_leader=row.is_leader
            )
            for row in view.rows
        ],
        total_players=view.total_players,
        total_weeks=view.total_weeks,
        total_money=view.total_money,
        leader=view.leader,
        current_week=view.current_week,
        status=_season_status(view.season)
    )


@router.get("/payouts", response_model=PayoutMatrixResponse)
async def get_payouts(
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> PayoutMatrixResponse:
    """
    Get the pairwise "who owes whom" matrix.
    """
    state = await LeagueStateRepository(db).load(season)
    matrix = compute_payouts(state.players).to_dict()

    return PayoutMatrixResponse(
        season=season,
        players=matrix["players"],
        rows=[PayoutRow(**row) for row in matrix["rows"]]
    )


@router.get("/season", response_model=SeasonStatusResponse)
async def get_season_status(
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> SeasonStatusResponse:
    """
    Get whether the season is complete and its champion.
    """
    state = await LeagueStateRepository(db).load(season)
    return _season_status(evaluate_season(state.players))
