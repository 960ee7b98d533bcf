"""WeatherAPI.com HTTP client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from fit_forecast.domain.errors import DecodeFailure, InvalidInput, NetworkFailure


class WeatherApiClient(Protocol):
    """Interface for weather API interactions."""

    async def get_current(self, city: str) -> dict[str, object]:
        """Return the raw current-conditions payload for a city."""

    async def get_forecast(self, city: str, days: int = 1) -> dict[str, object]:
        """Return the raw forecast payload for a city."""


@dataclass
class HttpxWeatherApiClient(WeatherApiClient):
    """HTTPX-backed weather API client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxWeatherApiClient":
        """Create a weather client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def get_current(self, city: str) -> dict[str, object]:
        """Fetch current conditions for a city."""
        return await self._get("current.json", {"q": city})

    async def get_forecast(self, city: str, days: int = 1) -> dict[str, object]:
        """Fetch the hourly forecast for a city."""
        return await self._get("forecast.json", {"q": city, "days": days})

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _get(self, path: str, params: dict[str, object]) -> dict[str, object]:
        url = f"{self.base_url.rstrip('/')}/{path}"
        try:
            response = await self.http_client.get(
                url, params={"key": self.api_key, **params}
            )
        except (httpx.InvalidURL, UnicodeEncodeError) as exc:
            raise InvalidInput() from exc
        except httpx.HTTPError as exc:
            raise NetworkFailure(str(exc) or type(exc).__name__) from exc
        if response.status_code == httpx.codes.BAD_REQUEST:
            raise InvalidInput()
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NetworkFailure(f"HTTP {response.status_code}") from exc
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeFailure() from exc
        if not isinstance(payload, dict):
            raise DecodeFailure()
        return payload
