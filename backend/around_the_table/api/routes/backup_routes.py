"""
Backup export/import API routes.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas import ImportResponse
from ..deps import resolve_season
from ...db import get_db, LeagueStateRepository
from ...picks import export_state, import_state


router = APIRouter(prefix="/backup", tags=["backup"])


@router.get("")
async def export_backup(
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> dict:
    """
    Export the season's players, picks and current week.
    """
    state = await LeagueStateRepository(db).load(season)
    return export_state(state)


@router.post("", response_model=ImportResponse)
async def import_backup(
    request: Request,
    season: int = Depends(resolve_season),
    db: AsyncSession = Depends(get_db)
) -> ImportResponse:
    """
    Replace the season's state with a backup document.

    The request body is the JSON exported by ``GET /backup``. Unusable data
    reports ``success: false`` and leaves the stored state untouched.
    """
    repo = LeagueStateRepository(db)
    current = await repo.load(season)

    ok, state = import_state(await request.body(), fallback_players=current.players)
    if not ok:
        return ImportResponse(success=False)

    await repo.save(season, state)
    await db.commit()

    return ImportResponse(success=True)
