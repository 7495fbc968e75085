"""
SQLAlchemy database models.
"""

from datetime import datetime, timezone
from sqlalchemy import String, Integer, DateTime, Text, Index
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


class LeagueStateEntry(Base):
    """One key of a season's persisted league state, stored as JSON text."""

    __tablename__ = "league_state"

    id: Mapped[int] = mapped_column(primary_key=True)
    season: Mapped[int] = mapped_column(Integer, nullable=False)
    key: Mapped[str] = mapped_column(String(50), nullable=False)
    value_json: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )

    __table_args__ = (
        Index("ix_league_state_season_key", "season", "key", unique=True),
    )

    def __repr__(self) -> str:
        return f"<LeagueStateEntry(season={self.season}, key={self.key})>"
