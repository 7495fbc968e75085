"""
Around the Table standings engine.

Balances, ranking, payouts and season status computed from the roster.
"""

from .models import (
    Player,
    Pick,
    LeagueState,
    SeasonState,
    SeasonStatus,
    PayoutMatrix,
    StandingsRow,
    StandingsView,
    TeamScore,
    CompletedGame,
    GameOutcome,
)
from .balance import net_balance, share_cents
from .ranking import rank_players, compute_payouts
from .season import evaluate_season
from .engine import compute_standings, current_week

__all__ = [
    # Models
    "Player",
    "Pick",
    "LeagueState",
    "SeasonState",
    "SeasonStatus",
    "PayoutMatrix",
    "StandingsRow",
    "StandingsView",
    "TeamScore",
    "CompletedGame",
    "GameOutcome",
    # Balances
    "net_balance",
    "share_cents",
    # Ranking & payouts
    "rank_players",
    "compute_payouts",
    # Season
    "evaluate_season",
    # Engine
    "compute_standings",
    "current_week",
]
