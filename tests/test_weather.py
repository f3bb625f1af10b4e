from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
import requests

from boardshort.config import Settings
from boardshort.ingest.weather_api import WeatherAPIClient, WeatherAPIError
from boardshort.processing.weather import (
    WeatherResolver,
    degrees_to_cardinal,
    format_weather,
    weather_cache_key,
)


class _Response:
    def __init__(self, status_code: int, payload=None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        return self._payload


def test_format_weather_rounds_and_capitalizes(sample_point):
    assert format_weather(sample_point) == "61°F · Clear sky · Wind SW 6mph"


def test_format_weather_without_wind_speed():
    assert format_weather({"temp": 55.2, "weather": [{"description": "fog"}]}) == "55°F · Fog"


def test_format_weather_requires_temperature():
    with pytest.raises(KeyError):
        format_weather({"wind_speed": 3})


@pytest.mark.parametrize(
    "deg, expected",
    [(0, "N"), (22, "N"), (23, "NE"), (90, "E"), (225, "SW"), (315, "NW"), (337, "NW"), (338, "N"), (360, "N")],
)
def test_degrees_to_cardinal_eight_sectors(deg, expected):
    assert degrees_to_cardinal(deg) == expected


def test_degrees_to_cardinal_missing():
    assert degrees_to_cardinal(None) == ""


def test_cache_key_rounds_coordinates_to_one_decimal():
    assert weather_cache_key("2025-06-14", 32.9184, -117.2536) == "2025-06-14-329--1173"
    assert weather_cache_key("2025-06-14", 32.91, -117.26) == weather_cache_key("2025-06-14", 32.94, -117.34)


def test_resolver_caches_by_day_and_coarse_location(fake_client, sample_point):
    client = fake_client(payload={"data": [sample_point]})
    resolver = WeatherResolver(client)

    first = resolver.resolve("2025-06-14", "05:47", 32.9184, -117.2536)
    second = resolver.resolve("2025-06-14", "20:11", 32.92, -117.27)

    assert first == second == "61°F · Clear sky · Wind SW 6mph"
    assert len(client.calls) == 1


def test_resolver_requests_local_capture_timestamp(fake_client, sample_point):
    client = fake_client(payload={"data": [sample_point]})
    resolver = WeatherResolver(client, tz="America/Los_Angeles")

    resolver.resolve("2025-06-14", "05:47", 32.9, -117.2)

    expected = int(datetime(2025, 6, 14, 5, 47, tzinfo=ZoneInfo("America/Los_Angeles")).timestamp())
    assert client.calls == [{"lat": 32.9, "lon": -117.2, "dt": expected}]


@pytest.mark.parametrize(
    "payload",
    [{}, {"data": []}, {"data": [{"weather": [{"description": "clear"}]}]}],
)
def test_resolver_returns_none_for_empty_or_partial_data(fake_client, payload):
    client = fake_client(payload=payload)
    resolver = WeatherResolver(client)

    assert resolver.resolve("2025-06-14", "05:47", 32.9, -117.2) is None
    assert resolver.cache == {}


@pytest.mark.parametrize(
    "error",
    [WeatherAPIError("boom"), requests.ConnectionError("offline"), requests.Timeout("slow")],
)
def test_resolver_swallows_provider_failures(fake_client, error):
    resolver = WeatherResolver(fake_client(error=error))

    assert resolver.resolve("2025-06-14", "05:47", 32.9, -117.2) is None


def test_resolver_without_time_returns_none(fake_client, sample_point):
    client = fake_client(payload={"data": [sample_point]})
    resolver = WeatherResolver(client)

    assert resolver.resolve("2025-06-14", None, 32.9, -117.2) is None
    assert client.calls == []


def test_failed_lookup_is_not_cached(fake_client, sample_point):
    client = fake_client(payload={"data": []})
    resolver = WeatherResolver(client)
    assert resolver.resolve("2025-06-14", "05:47", 32.9, -117.2) is None

    client.payload = {"data": [sample_point]}
    assert resolver.resolve("2025-06-14", "05:47", 32.9, -117.2) == "61°F · Clear sky · Wind SW 6mph"
    assert len(client.calls) == 2


def test_api_client_requires_key(settings):
    with pytest.raises(WeatherAPIError):
        WeatherAPIClient(settings=settings)


def test_api_client_sends_key_units_and_coordinates(monkeypatch, settings):
    captured = {}

    def fake_get(url, params=None, timeout=None):
        captured.update(url=url, params=params, timeout=timeout)
        return _Response(200, {"data": []})

    monkeypatch.setattr(requests, "get", fake_get)
    client = WeatherAPIClient(api_key="secret", settings=settings)

    assert client.timemachine(lat=32.9, lon=-117.2, dt=1749905220) == {"data": []}
    assert captured["url"] == settings.weather_url
    assert captured["params"] == {
        "lat": 32.9,
        "lon": -117.2,
        "dt": 1749905220,
        "appid": "secret",
        "units": "imperial",
    }
    assert captured["timeout"] == settings.request_timeout


def test_api_client_raises_on_error_status(monkeypatch, settings):
    monkeypatch.setattr(requests, "get", lambda *a, **k: _Response(401, text="Invalid API key"))
    client = WeatherAPIClient(api_key="secret", settings=settings)

    with pytest.raises(WeatherAPIError, match="401"):
        client.timemachine(lat=1.0, lon=2.0, dt=0)


def test_settings_reads_key_from_environment(monkeypatch):
    monkeypatch.setenv("WEATHER_API_KEY", "from-env")
    assert Settings().weather_api_key == "from-env"
