"""
API module.
"""

from .routes import (
    standings_router,
    picks_router,
    players_router,
    results_router,
    backup_router
)

__all__ = [
    "standings_router",
    "picks_router",
    "players_router",
    "results_router",
    "backup_router",
]
