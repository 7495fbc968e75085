"""
API route modules.
"""

from .standings_routes import router as standings_router
from .picks_routes import router as picks_router
from .players_routes import router as players_router
from .results_routes import router as results_router
from .backup_routes import router as backup_router

__all__ = ["standings_router", "picks_router", "players_router", "results_router", "backup_router"]
