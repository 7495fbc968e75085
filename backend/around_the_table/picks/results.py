"""
Matching pending picks against completed games.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ..standings.models import CompletedGame, GameOutcome, LeagueState, Pick, utcnow
from .ledger import resolve, tally_standings


logger = logging.getLogger("around_the_table.results")

_NON_ALPHA = re.compile(r"[^a-z]")


def normalize_team_name(name: str) -> str:
    """Lowercase and strip everything but letters ("St. Louis" -> "stlouis")."""
    return _NON_ALPHA.sub("", name.lower())


def _utc_date(value: datetime):
    return value.astimezone(timezone.utc).date()


def find_game_result(pick: Pick, games: Iterable[CompletedGame]) -> Optional[CompletedGame]:
    """
    Find the game a pick was made on.

    A game matches when either side is the picked team (ignoring case, spaces
    and punctuation) and it started on the same calendar day as the pick's
    game time. Picks without a game time never match.
    """
    if pick.game_time is None:
        return None

    pick_team = normalize_team_name(pick.team)
    pick_day = _utc_date(pick.game_time)

    for game in games:
        teams = (normalize_team_name(game.home_team), normalize_team_name(game.away_team))
        if pick_team in teams and _utc_date(game.commence_time) == pick_day:
            return game
    return None


def format_score(game: CompletedGame) -> str:
    return (
        f"{game.away_team} {game.score_for(game.away_team)} - "
        f"{game.home_team} {game.score_for(game.home_team)}"
    )


def resolve_pick(pick: Pick, game: CompletedGame) -> Optional[GameOutcome]:
    """
    Decide a pick from a completed game.

    The pick wins only on a strictly higher score; a tie is a loss.

    Returns:
        GameOutcome, or None when the game is missing a score
    """
    home_score = game.score_for(game.home_team)
    away_score = game.score_for(game.away_team)
    if home_score is None or away_score is None:
        return None

    pick_team = normalize_team_name(pick.team)
    if pick_team == normalize_team_name(game.home_team):
        won = home_score > away_score
    elif pick_team == normalize_team_name(game.away_team):
        won = away_score > home_score
    else:
        won = False

    return GameOutcome(won=won, final_score=format_score(game))


def pending_picks(state: LeagueState, now: Optional[datetime] = None) -> List[Pick]:
    """Undecided picks whose game has already kicked off."""
    now = now or utcnow()
    return [
        pick for pick in state.picks
        if pick.is_pending and pick.game_time is not None and pick.game_time < now
    ]


def apply_completed_games(
    state: LeagueState,
    games: Iterable[CompletedGame],
    now: Optional[datetime] = None
) -> int:
    """
    Settle every pending pick that has a completed game.

    Picks with no matching game are left pending for the next check.

    Returns:
        Number of picks settled
    """
    now = now or utcnow()
    completed = [game for game in games if game.completed]

    updated = 0
    for pick in pending_picks(state, now):
        game = find_game_result(pick, completed)
        if game is None:
            continue
        outcome = resolve_pick(pick, game)
        if outcome is None:
            continue

        resolve(state, pick, outcome.result, outcome.final_score, now)
        logger.info("%s's pick (%s) result: %s", pick.player, pick.team, outcome.result.value.upper())
        updated += 1

    return updated


def check_records(state: LeagueState) -> List[str]:
    """
    Compare each stored record with the one rebuilt from decided picks.

    Manual overrides legitimately diverge, so mismatches are logged rather
    than corrected.

    Returns:
        Names of players whose stored record differs from their picks
    """
    tallied = tally_standings(state.picks, [p.name for p in state.players])
    drifted = []
    for stored, rebuilt in zip(state.players, tallied):
        if (stored.wins, stored.losses) != (rebuilt.wins, rebuilt.losses):
            logger.warning(
                "%s's record %s differs from picks %s",
                stored.name, stored.record_str, rebuilt.record_str
            )
            drifted.append(stored.name)
    return drifted
