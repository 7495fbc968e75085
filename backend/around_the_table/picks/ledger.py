"""
Pick ledger: weekly selections, result recording and pick statistics.

Functions here operate on an explicit LeagueState handed in by the caller
and mutate only that instance.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from ..core.league import ROSTER, PickResult
from ..standings.engine import current_week as _current_week
from ..standings.models import LeagueState, Pick, Player, parse_timestamp, utcnow


PENDING = "pending"


def seed_players(roster: Sequence[str] = ROSTER) -> List[Player]:
    """Fresh roster with empty records, in seating order."""
    return [Player(name=name) for name in roster]


def new_state(roster: Sequence[str] = ROSTER) -> LeagueState:
    return LeagueState(players=seed_players(roster))


def add_pick(
    state: LeagueState,
    player: str,
    week: int,
    team: str,
    opponent: str,
    is_underdog: bool = True,
    game_time: Optional[datetime] = None
) -> Pick:
    """
    Record a player's selection for a week.

    Raises:
        UnknownPlayerError: If the player is not on the roster
        ValueError: If the week is not positive
    """
    if state.get_player(player) is None:
        raise UnknownPlayerError(f"Unknown player: {player}")
    if week < 1:
        raise ValueError(f"Week must be positive, got {week}")

    pick = Pick(
        player=player,
        week=week,
        team=team,
        opponent=opponent,
        is_underdog=is_underdog,
        game_time=parse_timestamp(game_time)
    )
    state.picks.append(pick)
    return pick


def resolve(
    state: LeagueState,
    pick: Pick,
    result: PickResult,
    final_score: Optional[str] = None,
    now: Optional[datetime] = None
) -> Pick:
    """
    Settle a pending pick and credit its owner.

    A pick is decided exactly once.

    Raises:
        PickAlreadyResolvedError: If the pick already has a result
    """
    if not pick.is_pending:
        raise PickAlreadyResolvedError(
            f"{pick.player}'s week {pick.week} pick ({pick.team}) is already a {pick.result.value}"
        )

    pick.result = result
    pick.final_score = final_score
    pick.updated_at = now or utcnow()

    owner = state.get_player(pick.player)
    if owner is not None:
        if result == PickResult.WIN:
            owner.wins += 1
        else:
            owner.losses += 1

    return pick


def record_result(
    state: LeagueState,
    week: int,
    team: str,
    won: bool,
    player: Optional[str] = None
) -> Pick:
    """
    Record the result of the pick on ``team`` in ``week``.

    Several players can back the same team in a week. With ``player`` only
    that player's pick matches; without it the first pending match is
    settled.

    Raises:
        PickNotFoundError: If no pick matches
        PickAlreadyResolvedError: If every matching pick is already decided
    """
    matches = [
        pick for pick in state.picks
        if pick.week == week and pick.team == team
        and (player is None or pick.player == player)
    ]
    if not matches:
        by = f" by {player}" if player else ""
        raise PickNotFoundError(f"No pick on {team} in week {week}{by}")

    pick = next((p for p in matches if p.is_pending), matches[0])
    return resolve(state, pick, PickResult.WIN if won else PickResult.LOSS)


def update_player_stats(state: LeagueState, name: str, wins: int, losses: int) -> Player:
    """
    Overwrite a player's record (manual correction).

    Raises:
        UnknownPlayerError: If the player is not on the roster
        ValueError: If either count is negative
    """
    if wins < 0 or losses < 0:
        raise ValueError("Wins and losses must be non-negative")

    player = state.get_player(name)
    if player is None:
        raise UnknownPlayerError(f"Unknown player: {name}")

    player.wins = wins
    player.losses = losses
    return player


def refresh_current_week(state: LeagueState) -> int:
    state.current_week = _current_week(state.players)
    return state.current_week


def player_history(state: LeagueState, name: str) -> List[Pick]:
    return [pick for pick in state.picks if pick.player == name]


def current_week_picks(state: LeagueState) -> List[Pick]:
    return [pick for pick in state.picks if pick.week == state.current_week]


def filter_picks(
    picks: Iterable[Pick],
    player: Optional[str] = None,
    week: Optional[int] = None,
    result: Optional[str] = None
) -> List[Pick]:
    """
    Filter picks by player, week and result.

    ``result`` is ``"win"``, ``"loss"`` or ``"pending"``; None means any.
    Output is most recent week first, newest selection first within a week.
    """
    selected = []
    for pick in picks:
        if player is not None and pick.player != player:
            continue
        if week is not None and pick.week != week:
            continue
        if result == PENDING and not pick.is_pending:
            continue
        if result not in (None, PENDING) and (pick.result is None or pick.result.value != result):
            continue
        selected.append(pick)

    return sorted(selected, key=lambda p: (p.week, p.timestamp), reverse=True)


def _count(picks: Sequence[Pick]) -> Dict[str, int]:
    return {
        "total_picks": len(picks),
        "wins": sum(1 for p in picks if p.result == PickResult.WIN),
        "losses": sum(1 for p in picks if p.result == PickResult.LOSS),
        "pending": sum(1 for p in picks if p.is_pending),
    }


def player_stats(picks: Iterable[Pick], name: str) -> dict:
    """Totals and win rate (percent, one decimal) for one player's picks."""
    counts = _count([p for p in picks if p.player == name])
    decided = counts["wins"] + counts["losses"]
    win_rate = round(counts["wins"] / decided * 100, 1) if decided else 0.0
    return {"player": name, **counts, "win_rate": win_rate}


def week_stats(picks: Iterable[Pick], week: int) -> dict:
    """Totals for one week plus who picked."""
    week_picks = [p for p in picks if p.week == week]
    return {
        "week": week,
        **_count(week_picks),
        "players": [p.player for p in week_picks],
    }


def tally_standings(picks: Iterable[Pick], roster: Sequence[str] = ROSTER) -> List[Player]:
    """Rebuild each roster member's record from their decided picks."""
    picks = list(picks)
    players = []
    for name in roster:
        own = [p for p in picks if p.player == name]
        players.append(Player(
            name=name,
            wins=sum(1 for p in own if p.result == PickResult.WIN),
            losses=sum(1 for p in own if p.result == PickResult.LOSS)
        ))
    return players


class LedgerError(Exception):
    """Base class for pick ledger errors."""
    pass


class UnknownPlayerError(LedgerError):
    """Raised when a name is not on the roster."""
    pass


class PickNotFoundError(LedgerError):
    """Raised when no pick matches a result update."""
    pass


class PickAlreadyResolvedError(LedgerError):
    """Raised when a decided pick would be decided again."""
    pass
