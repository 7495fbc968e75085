"""
Data models for the standings engine and pick ledger.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from ..core.league import PickResult


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp (``Z`` suffix allowed) into an aware datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Player:
    """A league member and their running record."""

    name: str
    wins: int = 0
    losses: int = 0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    @property
    def record_str(self) -> str:
        return f"{self.wins}-{self.losses}"

    @property
    def win_pct(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.wins / self.games_played

    def copy(self) -> 'Player':
        return Player(name=self.name, wins=self.wins, losses=self.losses)

    def to_dict(self) -> dict:
        return {"name": self.name, "wins": self.wins, "losses": self.losses}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Player':
        """
        Build a player from its stored shape.

        Raises:
            KeyError, TypeError, ValueError: If the record is malformed
        """
        wins = int(data.get("wins", 0))
        losses = int(data.get("losses", 0))
        if wins < 0 or losses < 0:
            raise ValueError(f"Negative record for {data.get('name')!r}")
        return cls(name=str(data["name"]), wins=wins, losses=losses)


@dataclass
class Pick:
    """A player's weekly selection and, once the game is final, its outcome."""

    player: str
    week: int
    team: str
    opponent: str
    is_underdog: bool = True
    result: Optional[PickResult] = None
    timestamp: datetime = field(default_factory=utcnow)
    game_time: Optional[datetime] = None
    final_score: Optional[str] = None
    updated_at: Optional[datetime] = None

    @property
    def is_pending(self) -> bool:
        return self.result is None

    def to_dict(self) -> dict:
        """Convert to the persisted/exported JSON shape."""
        return {
            "player": self.player,
            "week": self.week,
            "team": self.team,
            "opponent": self.opponent,
            "isUnderdog": self.is_underdog,
            "result": self.result.value if self.result else None,
            "timestamp": format_timestamp(self.timestamp),
            "gameTime": format_timestamp(self.game_time),
            "finalScore": self.final_score,
            "updatedAt": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Pick':
        """
        Build a pick from its stored shape.

        The legacy ``"pending"`` result marker is read as unresolved.

        Raises:
            KeyError, TypeError, ValueError: If the record is malformed
        """
        raw_result = data.get("result")
        result = None if raw_result in (None, "", "pending") else PickResult(raw_result)

        week = int(data["week"])
        if week < 1:
            raise ValueError(f"Invalid week {week}")

        return cls(
            player=str(data["player"]),
            week=week,
            team=str(data["team"]),
            opponent=str(data.get("opponent") or ""),
            is_underdog=bool(data.get("isUnderdog", True)),
            result=result,
            timestamp=parse_timestamp(data.get("timestamp")) or utcnow(),
            game_time=parse_timestamp(data.get("gameTime")),
            final_score=data.get("finalScore"),
            updated_at=parse_timestamp(data.get("updatedAt")),
        )


@dataclass
class LeagueState:
    """Everything persisted for one season, owned by the caller."""

    players: List[Player]
    picks: List[Pick] = field(default_factory=list)
    current_week: int = 1
    last_result_check: Optional[datetime] = None

    def get_player(self, name: str) -> Optional[Player]:
        for player in self.players:
            if player.name == name:
                return player
        return None


class SeasonState(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


@dataclass
class SeasonStatus:
    """Whether the season is over and who, if anyone, won it."""

    state: SeasonState
    games_played: Optional[int] = None
    champion: Optional[str] = None

    @property
    def complete(self) -> bool:
        return self.state == SeasonState.COMPLETE

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "complete": self.complete,
            "games_played": self.games_played,
            "champion": self.champion,
        }


@dataclass
class PayoutMatrix:
    """
    Pairwise settlement table.

    ``cells[i][j]`` is the amount in cents that ``players[i]`` owes
    ``players[j]``, or None when no payment flows in that direction.
    """

    players: List[str]
    cells: List[List[Optional[int]]]

    def owed(self, debtor: str, creditor: str) -> int:
        """Amount in cents the debtor owes the creditor (0 when nothing)."""
        cell = self.cells[self.players.index(debtor)][self.players.index(creditor)]
        return cell or 0

    def display(self, debtor: str, creditor: str) -> str:
        cents = self.owed(debtor, creditor)
        if cents <= 0:
            return "-"
        return f"${cents // 100}.{cents % 100:02d}"

    def to_dict(self) -> dict:
        return {
            "players": list(self.players),
            "rows": [
                {
                    "debtor": debtor,
                    "owes": {
                        creditor: self.display(debtor, creditor)
                        for creditor in self.players
                    },
                }
                for debtor in self.players
            ],
        }


@dataclass
class StandingsRow:
    rank: int
    name: str
    wins: int
    losses: int
    win_percentage: float
    net_balance: int
    is_leader: bool = False


@dataclass
class StandingsView:
    """Everything the standings page shows, derived from the roster."""

    rows: List[StandingsRow]
    total_players: int
    total_weeks: int
    total_money: int
    leader: Optional[str]
    current_week: int
    season: SeasonStatus


@dataclass
class TeamScore:
    name: str
    score: int


@dataclass
class CompletedGame:
    """A game record from the provider's scores feed."""

    home_team: str
    away_team: str
    commence_time: datetime
    completed: bool = False
    scores: List[TeamScore] = field(default_factory=list)
    id: Optional[str] = None

    def score_for(self, team: str) -> Optional[int]:
        for entry in self.scores:
            if entry.name == team:
                return entry.score
        return None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'CompletedGame':
        """
        Build a game from a provider payload.

        Scores arrive as strings and are null until the game starts.
        """
        scores = [
            TeamScore(name=entry["name"], score=int(entry["score"]))
            for entry in (data.get("scores") or [])
            if entry.get("score") is not None
        ]
        return cls(
            id=data.get("id"),
            home_team=data["home_team"],
            away_team=data["away_team"],
            commence_time=parse_timestamp(data["commence_time"]),
            completed=bool(data.get("completed", False)),
            scores=scores,
        )


@dataclass
class GameOutcome:
    won: bool
    final_score: str

    @property
    def result(self) -> PickResult:
        return PickResult.WIN if self.won else PickResult.LOSS
