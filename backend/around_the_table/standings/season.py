"""
Season completion and champion detection.
"""

from typing import Sequence

from ..core.league import REGULAR_SEASON_GAMES, STAKE
from .balance import net_balance
from .models import Player, SeasonState, SeasonStatus
from .ranking import rank_players


def evaluate_season(
    players: Sequence[Player],
    season_games: int = REGULAR_SEASON_GAMES,
    stake: int = STAKE
) -> SeasonStatus:
    """
    Decide whether the season is over and who won it.

    The season is complete once every player has the same number of decided
    picks and that number has reached the regular-season length. A champion
    is only named when the top-ranked player is strictly up money; a complete
    season whose leader is at or below zero has no champion.

    Args:
        players: Roster in seating order
        season_games: Games each player must have played
        stake: Stake used for the balance calculation

    Returns:
        SeasonStatus with state, common games played and champion name
    """
    if not players:
        return SeasonStatus(state=SeasonState.IN_PROGRESS)

    game_counts = {p.games_played for p in players}
    if len(game_counts) != 1:
        return SeasonStatus(state=SeasonState.IN_PROGRESS)

    games_played = game_counts.pop()
    if games_played < season_games:
        return SeasonStatus(state=SeasonState.IN_PROGRESS, games_played=games_played)

    winner = rank_players(players, stake)[0]
    champion = None
    if net_balance(winner, len(players), stake) > 0:
        champion = winner.name

    return SeasonStatus(
        state=SeasonState.COMPLETE,
        games_played=games_played,
        champion=champion
    )
