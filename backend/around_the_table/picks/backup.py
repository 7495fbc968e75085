"""
League state export/import.
"""

import json
import logging
from typing import Any, List, Optional, Sequence, Tuple, Union

from ..standings.models import LeagueState, Pick, Player, format_timestamp, utcnow


logger = logging.getLogger("around_the_table.backup")


def decode_players(raw: Any) -> List[Player]:
    """
    Parse a stored player list.

    Raises:
        ValueError, KeyError, TypeError: If the value is not a list of players
    """
    if not isinstance(raw, list):
        raise TypeError("players must be a list")
    if not all(isinstance(item, dict) for item in raw):
        raise TypeError("players must be objects")
    players = [Player.from_dict(item) for item in raw]
    names = [p.name for p in players]
    if len(set(names)) != len(names):
        raise ValueError("duplicate player names")
    return players


def decode_picks(raw: Any) -> List[Pick]:
    """
    Parse a stored pick list.

    Raises:
        ValueError, KeyError, TypeError: If the value is not a list of picks
    """
    if not isinstance(raw, list):
        raise TypeError("picks must be a list")
    if not all(isinstance(item, dict) for item in raw):
        raise TypeError("picks must be objects")
    return [Pick.from_dict(item) for item in raw]


def export_state(state: LeagueState) -> dict:
    """Backup document for a season's state."""
    return {
        "players": [p.to_dict() for p in state.players],
        "picks": [p.to_dict() for p in state.picks],
        "gameResults": [],
        "currentWeek": state.current_week,
        "exportDate": format_timestamp(utcnow()),
    }


def import_state(
    raw: Union[str, bytes],
    fallback_players: Optional[Sequence[Player]] = None
) -> Tuple[bool, Optional[LeagueState]]:
    """
    Parse a backup document into a new state.

    Missing sections fall back to defaults: the given players, no picks,
    week 1. Nothing is applied unless the whole document parses.

    Args:
        raw: JSON text of a backup
        fallback_players: Players to keep when the backup has none

    Returns:
        (True, state) on success, (False, None) when the data is unusable
    """
    try:
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise TypeError("backup must be a JSON object")

        if data.get("players"):
            players = decode_players(data["players"])
        else:
            players = [p.copy() for p in (fallback_players or [])]

        picks = decode_picks(data.get("picks") or [])
        current_week = int(data.get("currentWeek") or 1)
    except (ValueError, KeyError, TypeError) as e:
        logger.error("Error importing data: %s", e)
        return False, None

    return True, LeagueState(players=players, picks=picks, current_week=current_week)
