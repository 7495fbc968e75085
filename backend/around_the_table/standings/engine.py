"""
Standings engine: derives the full standings view from the roster.
"""

from typing import Sequence

from ..core.league import REGULAR_SEASON_GAMES, STAKE
from .balance import net_balance
from .models import Player, StandingsRow, StandingsView
from .ranking import rank_players
from .season import evaluate_season


def current_week(players: Sequence[Player]) -> int:
    """Week in progress, from the average number of decided picks per player."""
    if not players:
        return 1
    total_games = sum(p.games_played for p in players)
    return total_games // len(players) + 1


def compute_standings(
    players: Sequence[Player],
    stake: int = STAKE,
    season_games: int = REGULAR_SEASON_GAMES
) -> StandingsView:
    """
    Compute ranked rows, summary stats and season status.

    Pure: the players passed in are read, never modified.
    """
    total = len(players)
    ranked = rank_players(players, stake)

    rows = []
    for index, player in enumerate(ranked):
        balance = net_balance(player, total, stake)
        rows.append(StandingsRow(
            rank=index + 1,
            name=player.name,
            wins=player.wins,
            losses=player.losses,
            win_percentage=round(player.win_pct * 100, 1),
            net_balance=balance,
            is_leader=index == 0 and balance > 0
        ))

    leader = rows[0].name if rows and rows[0].is_leader else None

    return StandingsView(
        rows=rows,
        total_players=total,
        total_weeks=max((p.games_played for p in players), default=0),
        total_money=sum(abs(row.net_balance) for row in rows),
        leader=leader,
        current_week=current_week(players),
        season=evaluate_season(players, season_games, stake)
    )
