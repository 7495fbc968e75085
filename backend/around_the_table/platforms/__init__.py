"""
Game-data providers.

Provides completed-game records for settling picks.
"""

from .base import (
    ScoresProvider,
    GatewayError,
    InvalidEndpointError,
    MissingCredentialsError
)
from .odds_api import OddsAPIClient


def get_scores_provider() -> ScoresProvider:
    """
    Get the configured scores provider.

    Used as a FastAPI dependency so tests can swap in a fake.
    """
    return OddsAPIClient()


__all__ = [
    "ScoresProvider",
    "GatewayError",
    "InvalidEndpointError",
    "MissingCredentialsError",
    "OddsAPIClient",
    "get_scores_provider",
]
