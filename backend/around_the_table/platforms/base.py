"""
Abstract base class for game-data providers.

A provider supplies completed-game records used to settle pending picks.
"""

from abc import ABC, abstractmethod
from typing import List

from ..standings.models import CompletedGame


class ScoresProvider(ABC):
    """Abstract base class for scores providers."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name (e.g., 'the-odds-api')."""
        pass

    @abstractmethod
    async def fetch_completed_games(self, days_from: int = 3) -> List[CompletedGame]:
        """
        Fetch recently completed games.

        Args:
            days_from: How many days back to include

        Returns:
            Completed games only

        Raises:
            MissingCredentialsError: If the provider has no API key
            GatewayError: If the provider request fails
        """
        pass


class GatewayError(Exception):
    """Raised when there's an error communicating with the provider."""
    pass


class InvalidEndpointError(GatewayError):
    """Raised for an endpoint the gateway does not proxy."""
    pass


class MissingCredentialsError(GatewayError):
    """Raised when no provider API key is configured."""
    pass
