"""
Repository classes for database operations.
"""

import json
import logging
from typing import Callable, Dict, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import LeagueStateEntry
from ..core.league import ROSTER
from ..picks.backup import decode_players, decode_picks
from ..picks.ledger import seed_players
from ..standings.models import LeagueState, format_timestamp, parse_timestamp


logger = logging.getLogger("around_the_table.db")

T = TypeVar("T")

PLAYERS_KEY = "players"
PICKS_KEY = "picks"
CURRENT_WEEK_KEY = "current_week"
LAST_RESULT_CHECK_KEY = "last_result_check"


def _decode_week(raw) -> int:
    week = int(raw)
    if week < 1:
        raise ValueError(f"Invalid week {week}")
    return week


class LeagueStateRepository:
    """Whole-state reads and writes of a season's league data."""

    def __init__(self, session: AsyncSession, roster: Sequence[str] = ROSTER):
        self.session = session
        self.roster = list(roster)

    async def _entries(self, season: int) -> Dict[str, LeagueStateEntry]:
        result = await self.session.execute(
            select(LeagueStateEntry).where(LeagueStateEntry.season == season)
        )
        return {entry.key: entry for entry in result.scalars().all()}

    def _decode(
        self,
        entries: Dict[str, LeagueStateEntry],
        key: str,
        decoder: Callable[[object], T],
        default: Callable[[], T],
        season: int
    ) -> T:
        """Decode one key, substituting the default when absent or malformed."""
        entry = entries.get(key)
        if entry is None:
            return default()
        try:
            return decoder(json.loads(entry.value_json))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Discarding malformed %r for season %s: %s", key, season, e)
            return default()

    async def load(self, season: int) -> LeagueState:
        """
        Load a season's state.

        A season that was never saved starts from the seeded roster.
        """
        entries = await self._entries(season)

        return LeagueState(
            players=self._decode(
                entries, PLAYERS_KEY, decode_players,
                lambda: seed_players(self.roster), season
            ),
            picks=self._decode(entries, PICKS_KEY, decode_picks, list, season),
            current_week=self._decode(
                entries, CURRENT_WEEK_KEY, _decode_week, lambda: 1, season
            ),
            last_result_check=self._decode(
                entries, LAST_RESULT_CHECK_KEY, parse_timestamp, lambda: None, season
            ),
        )

    async def save(self, season: int, state: LeagueState) -> None:
        """Write every key of the state, replacing what was stored."""
        values = {
            PLAYERS_KEY: [p.to_dict() for p in state.players],
            PICKS_KEY: [p.to_dict() for p in state.picks],
            CURRENT_WEEK_KEY: state.current_week,
            LAST_RESULT_CHECK_KEY: format_timestamp(state.last_result_check),
        }

        entries = await self._entries(season)
        for key, value in values.items():
            value_json = json.dumps(value)
            entry = entries.get(key)
            if entry is None:
                self.session.add(LeagueStateEntry(season=season, key=key, value_json=value_json))
            else:
                entry.value_json = value_json

        await self.session.flush()

