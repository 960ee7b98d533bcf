"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from fit_forecast.adapters.weather_api_client import HttpxWeatherApiClient
from fit_forecast.domain.errors import DecodeFailure, InvalidInput, NetworkFailure


def _client(handler) -> HttpxWeatherApiClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxWeatherApiClient(
        api_key="key",
        base_url="https://weather.test/v1",
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_weather_client_current_and_forecast() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/current.json"):
            return httpx.Response(200, json={"current": {"temp_f": 70}})
        return httpx.Response(200, json={"forecast": {"forecastday": []}})

    client = _client(handler)

    current = asyncio.run(client.get_current("São Paulo & Co"))
    forecast = asyncio.run(client.get_forecast("London"))

    assert current == {"current": {"temp_f": 70}}
    assert forecast == {"forecast": {"forecastday": []}}
    assert seen[0].url.params["key"] == "key"
    assert seen[0].url.params["q"] == "São Paulo & Co"
    assert b"S%C3%A3o" in seen[0].url.query
    assert seen[1].url.path == "/v1/forecast.json"
    assert seen[1].url.params["days"] == "1"


def test_weather_client_maps_bad_request_to_invalid_input() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            400, json={"error": {"code": 1006, "message": "No matching location found."}}
        )

    with pytest.raises(InvalidInput):
        asyncio.run(_client(handler).get_current("Nowhere"))


def test_weather_client_rejects_unencodable_city() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(InvalidInput):
        asyncio.run(_client(handler).get_current("Lon\ud800don"))
    assert seen == []


def test_weather_client_maps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkFailure) as info:
        asyncio.run(_client(handler).get_current("London"))

    assert info.value.cause == "connection refused"
    assert info.value.user_message == "Error: connection refused"


def test_weather_client_maps_server_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    with pytest.raises(NetworkFailure) as info:
        asyncio.run(_client(handler).get_current("London"))

    assert info.value.cause == "HTTP 503"


def test_weather_client_rejects_non_json() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(DecodeFailure):
        asyncio.run(_client(handler).get_current("London"))


def test_weather_client_rejects_non_object_json() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[1, 2, 3])

    with pytest.raises(DecodeFailure):
        asyncio.run(_client(handler).get_forecast("London"))
