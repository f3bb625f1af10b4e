from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from boardshort.config import Settings


class FakeWeatherClient:
    """Records calls and replays a canned provider payload."""

    def __init__(self, payload: Dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def timemachine(self, lat: float, lon: float, dt: int) -> Dict[str, Any]:
        self.calls.append({"lat": lat, "lon": lon, "dt": dt})
        if self.error is not None:
            raise self.error
        return self.payload or {}


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        WEATHER_API_KEY=None,
        content_dir=tmp_path / "content" / "days",
        index_path=tmp_path / "content" / "index.json",
    )


@pytest.fixture
def sample_point() -> Dict[str, Any]:
    return {
        "temp": 60.6,
        "wind_speed": 5.5,
        "wind_deg": 225,
        "weather": [{"description": "clear sky"}],
    }


@pytest.fixture
def write_unit(tmp_path: Path):
    content_dir = tmp_path / "content" / "days"
    content_dir.mkdir(parents=True, exist_ok=True)

    def _write(name: str, payload: Any) -> Path:
        path = content_dir / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    _write.dir = content_dir  # type: ignore[attr-defined]
    return _write


@pytest.fixture
def fake_client():
    return FakeWeatherClient
