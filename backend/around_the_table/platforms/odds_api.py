"""
The Odds API client.

Fetches NFL odds and scores from the-odds-api.com v4. Requests are single
shot: no retries, no backoff.
"""

import os
from typing import Any, Dict, List, Optional

import httpx

from .base import (
    ScoresProvider,
    GatewayError,
    InvalidEndpointError,
    MissingCredentialsError
)
from ..standings.models import CompletedGame


ODDS_API_KEY = os.getenv("ODDS_API_KEY") or os.getenv("VITE_ODDS_API_KEY")


class OddsAPIClient(ScoresProvider):
    """Client for The Odds API, restricted to the NFL odds and scores feeds."""

    BASE_URL = "https://api.the-odds-api.com/v4/sports/{sport}"
    SPORT = "americanfootball_nfl"
    ENDPOINTS = ("odds", "scores")

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the client.

        Args:
            api_key: Provider API key (defaults to ODDS_API_KEY from the environment)
            timeout: HTTP request timeout in seconds
            transport: Optional httpx transport (e.g. a MockTransport)
        """
        self.api_key = api_key if api_key is not None else ODDS_API_KEY
        self.timeout = timeout
        self.transport = transport

    @property
    def provider_name(self) -> str:
        return "the-odds-api"

    def _get_url(self, endpoint: str) -> str:
        return f"{self.BASE_URL.format(sport=self.SPORT)}/{endpoint}"

    async def fetch(self, endpoint: str, **params: Any) -> Any:
        """
        Fetch JSON from one of the proxied endpoints.

        Args:
            endpoint: 'odds' or 'scores'
            **params: Passed through as query parameters

        Returns:
            Provider JSON

        Raises:
            InvalidEndpointError: If the endpoint is not proxied
            MissingCredentialsError: If no API key is configured
            GatewayError: If the request fails or returns a non-2xx status
        """
        if endpoint not in self.ENDPOINTS:
            raise InvalidEndpointError(f"Invalid endpoint: {endpoint}")
        if not self.api_key:
            raise MissingCredentialsError("API key not configured")

        query: Dict[str, Any] = {"apiKey": self.api_key, **params}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(self._get_url(endpoint), params=query)
                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                raise GatewayError(f"API request failed: {e.response.status_code}")
            except httpx.RequestError as e:
                raise GatewayError(f"Network error: {e}")
            except ValueError as e:
                raise GatewayError(f"Invalid JSON from provider: {e}")

    async def fetch_completed_games(self, days_from: int = 3) -> List[CompletedGame]:
        """Fetch scores for the last ``days_from`` days and keep finished games."""
        data = await self.fetch("scores", daysFrom=days_from)
        if not isinstance(data, list):
            raise GatewayError("Unexpected scores payload")

        games = []
        for item in data:
            if not item.get("completed"):
                continue
            try:
                games.append(CompletedGame.from_api(item))
            except (KeyError, TypeError, ValueError) as e:
                raise GatewayError(f"Malformed game record: {e}")
        return games
