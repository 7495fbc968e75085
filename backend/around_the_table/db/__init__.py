"""
Database module.
"""

from .database import (
    engine,
    async_session_maker,
    get_db,
    create_tables
)
from .models import Base, LeagueStateEntry
from .repositories import LeagueStateRepository

__all__ = [
    # Database
    "engine",
    "async_session_maker",
    "get_db",
    "create_tables",
    # Models
    "Base",
    "LeagueStateEntry",
    # Repositories
    "LeagueStateRepository",
]
