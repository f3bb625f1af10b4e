"""Historical weather lookup, caching and formatting."""
from __future__ import annotations

import logging
import math
from datetime import datetime, time, timedelta
from typing import Any, Dict, Mapping, Optional, Protocol
from zoneinfo import ZoneInfo

import requests

from boardshort.ingest.weather_api import WeatherAPIError
from boardshort.processing.defaults import COMPASS_POINTS
from boardshort.processing.tagging import parse_clock

logger = logging.getLogger(__name__)


class WeatherClient(Protocol):
    """Minimal interface for historical weather providers."""

    def timemachine(self, lat: float, lon: float, dt: int) -> Dict[str, Any]:
        ...


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def degrees_to_cardinal(deg: Optional[float]) -> str:
    if deg is None:
        return ""
    return COMPASS_POINTS[round_half_up(deg / 45) % 8]


def format_weather(point: Mapping[str, Any]) -> str:
    """Format one provider data point, e.g. ``61°F · Clear · Wind SW 6mph``."""
    temp = round_half_up(point["temp"])
    conditions = point.get("weather") or [{}]
    desc = conditions[0].get("description") or ""
    parts = [f"{temp}°F", desc[:1].upper() + desc[1:]]
    if point.get("wind_speed") is not None:
        direction = degrees_to_cardinal(point.get("wind_deg"))
        wind = round_half_up(point["wind_speed"])
        parts.append(f"Wind {direction} {wind}mph" if direction else f"Wind {wind}mph")
    return " · ".join(parts)


def weather_cache_key(day: str, lat: float, lng: float) -> str:
    return f"{day}-{round_half_up(lat * 10)}-{round_half_up(lng * 10)}"


class WeatherResolver:
    """Resolves weather strings for capture moments, caching by day and coarse location."""

    def __init__(self, client: WeatherClient, tz: str = "America/Los_Angeles") -> None:
        self.client = client
        self.tz = ZoneInfo(tz)
        self.cache: Dict[str, str] = {}

    def capture_timestamp(self, day: str, time_str: str) -> int:
        hours = parse_clock(time_str)
        if hours is None:
            raise ValueError(f"Unparseable capture time {time_str!r}")
        midnight = datetime.combine(datetime.fromisoformat(day).date(), time.min, tzinfo=self.tz)
        return int((midnight + timedelta(minutes=round(hours * 60))).timestamp())

    def resolve(self, day: str, time_str: Optional[str], lat: float, lng: float) -> Optional[str]:
        """Return a formatted weather string, or ``None`` on any failure."""
        key = weather_cache_key(day, lat, lng)
        if key in self.cache:
            return self.cache[key]

        try:
            dt = self.capture_timestamp(day, time_str or "")
            payload = self.client.timemachine(lat=lat, lon=lng, dt=dt)
            points = payload.get("data") or []
            if not points:
                raise WeatherAPIError("Weather response contained no data point")
            result = format_weather(points[0])
        except (WeatherAPIError, requests.RequestException, KeyError, TypeError, ValueError, AttributeError) as exc:
            logger.debug("Weather lookup failed for %s %s: %s", day, time_str, exc)
            return None

        self.cache[key] = result
        return result
