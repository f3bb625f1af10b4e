"""Client for the OpenWeatherMap historical one-call API."""
from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from boardshort.config import Settings, get_settings


class WeatherAPIError(RuntimeError):
    """Raised when the weather API returns an error response."""


class WeatherAPIClient:
    """Thin wrapper around the timemachine endpoint that injects the API key and handles errors."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[Settings] = None,
        timeout: Optional[int] = None,
    ) -> None:
        settings = settings or get_settings()
        self.api_key = api_key or settings.weather_api_key
        if not self.api_key:
            raise WeatherAPIError("No weather API key configured; set WEATHER_API_KEY")
        self.base_url = settings.weather_url
        self.units = settings.weather_units
        self.timeout = timeout or settings.request_timeout

    def _request(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        params.setdefault("appid", self.api_key)
        params.setdefault("units", self.units)
        response = requests.get(url, params=params, timeout=self.timeout)
        if not response.ok:
            raise WeatherAPIError(f"Weather API error {response.status_code}: {response.text}")
        return response.json()

    def timemachine(self, lat: float, lon: float, dt: int) -> Dict[str, Any]:
        """Fetch historical conditions at a location for a unix timestamp."""
        return self._request(self.base_url, {"lat": lat, "lon": lon, "dt": dt})
