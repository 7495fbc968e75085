"""
Pydantic schemas for API request/response validation.
"""

from datetime import datetime
from typing import Optional, List, Dict
from pydantic import BaseModel, Field


# ============== Standings Schemas ==============

class StandingsRowResponse(BaseModel):
    """One ranked player in the standings table."""
    rank: int
    name: str
    wins: int
    losses: int
    win_percentage: float
    net_balance: int
    is_leader: bool


class SeasonStatusResponse(BaseModel):
    """Season completion and champion."""
    state: str  # in_progress, complete
    complete: bool
    games_played: Optional[int] = None
    champion: Optional[str] = None


class StandingsResponse(BaseModel):
    """Full standings view."""
    season: int
    rows: List[StandingsRowResponse]
    total_players: int
    total_weeks: int
    total_money: int
    leader: Optional[str] = None
    current_week: int
    status: SeasonStatusResponse


class PayoutRow(BaseModel):
    """What one player owes each of the others ("-" for nothing)."""
    debtor: str
    owes: Dict[str, str]


class PayoutMatrixResponse(BaseModel):
    """Pairwise settlement table in roster order."""
    season: int
    players: List[str]
    rows: List[PayoutRow]


# ============== Pick Schemas ==============

class PickCreate(BaseModel):
    """Add a pick request."""
    player: str = Field(..., min_length=1, max_length=50)
    week: Optional[int] = Field(None, ge=1, le=22)  # Defaults from game time or current week
    team: str = Field(..., min_length=1, max_length=100)
    opponent: str = Field(..., min_length=1, max_length=100)
    is_underdog: bool = True
    game_time: Optional[datetime] = None


class PickResponse(BaseModel):
    """A pick as stored."""
    player: str
    week: int
    team: str
    opponent: str
    is_underdog: bool
    result: Optional[str] = None  # win, loss, or None while pending
    timestamp: datetime
    game_time: Optional[datetime] = None
    final_score: Optional[str] = None
    updated_at: Optional[datetime] = None


class PickResultRequest(BaseModel):
    """Record the result of a pick."""
    week: int = Field(..., ge=1)
    team: str = Field(..., min_length=1, max_length=100)
    won: bool
    player: Optional[str] = None  # Disambiguates a team picked by several players


class WeekStatsResponse(BaseModel):
    """Pick totals for one week."""
    week: int
    total_picks: int
    wins: int
    losses: int
    pending: int
    players: List[str]


# ============== Player Schemas ==============

class PlayerResponse(BaseModel):
    """Player record."""
    name: str
    wins: int
    losses: int


class PlayerStatsUpdate(BaseModel):
    """Manual record override."""
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)


class PlayerStatsResponse(BaseModel):
    """Pick totals for one player."""
    player: str
    total_picks: int
    wins: int
    losses: int
    pending: int
    win_rate: float


# ============== Result Check Schemas ==============

class ResultCheckResponse(BaseModel):
    """Outcome of a result check cycle."""
    updated: int
    pending: int
    message: str
    last_checked: Optional[datetime] = None


# ============== Backup Schemas ==============

class ImportResponse(BaseModel):
    """Backup import outcome."""
    success: bool


# ============== Error Schemas ==============

class ErrorResponse(BaseModel):
    """API error response."""
    detail: str
    code: Optional[str] = None
