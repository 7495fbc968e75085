"""
Result checking API routes.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas import ResultCheckResponse, ErrorResponse
from ..deps import resolve_season
from ...db import get_db, LeagueStateRepository
from ...picks import apply_completed_games, check_records, pending_picks, refresh_current_week
from ...platforms import get_scores_provider, ScoresProvider, GatewayError, MissingCredentialsError
from ...standings.models import utcnow


logger = logging.getLogger("around_the_table.results")

router = APIRouter(prefix="/results", tags=["results"])


@router.post(
    "/check",
    response_model=ResultCheckResponse,
    responses={
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    }
)
async def check_results(
    days_from: int = 3,
    season: int = Depends(resolve_season),
    provider: ScoresProvider = Depends(get_scores_provider),
    db: AsyncSession = Depends(get_db)
) -> ResultCheckResponse:
    """
    Settle pending picks from completed games.

    Picks whose game is not final yet stay pending for the next check. When
    the provider cannot be reached nothing is saved.
    """
    repo = LeagueStateRepository(db)
    state = await repo.load(season)

    pending = pending_picks(state)
    if not pending:
        logger.info("No pending picks found for result checking")
        return ResultCheckResponse(
            updated=0,
            pending=0,
            message="No pending picks found for result checking",
            last_checked=state.last_result_check
        )

    try:
        games = await provider.fetch_completed_games(days_from=days_from)
    except MissingCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
    except GatewayError as e:
        logger.error("Error checking results: %s", e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error checking results: {e}"
        )

    updated = apply_completed_games(state, games)
    check_records(state)
    state.last_result_check = utcnow()
    refresh_current_week(state)

    await repo.save(season, state)
    await db.commit()

    message = f"Updated {updated} pick results" if updated else "No new results to update"
    logger.info(message)

    return ResultCheckResponse(
        updated=updated,
        pending=len(pending) - updated,
        message=message,
        last_checked=state.last_result_check
    )
