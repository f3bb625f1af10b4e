"""Load-time enrichment of the published index into render-ready days."""
from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from boardshort.config import Settings, get_settings
from boardshort.ingest.demo import get_demo_days
from boardshort.ingest.models import DAY_LIST_ADAPTER, DayRecord, ImageRecord
from boardshort.ingest.weather_api import WeatherAPIClient
from boardshort.processing.dates import WeekBucket, bucket_weeks, format_date_label
from boardshort.processing.defaults import ID_ALPHABET, ID_SUFFIX_LENGTH, WEATHER_PLACEHOLDER
from boardshort.processing.tagging import derive_tag
from boardshort.processing.weather import WeatherResolver

logger = logging.getLogger(__name__)


def fetch_index(source: str, timeout: int = 30) -> List[Dict[str, Any]]:
    """Read the raw day list from an HTTP(S) URL or a local path."""
    if source.startswith(("http://", "https://")):
        response = requests.get(source, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    else:
        payload = json.loads(Path(source).read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"Index at {source} is not a JSON array")
    return payload


def load_content(source: str, timeout: int = 30) -> List[DayRecord]:
    """Return the published days, or the demo archive if they cannot be loaded."""
    try:
        return DAY_LIST_ADAPTER.validate_python(fetch_index(source, timeout=timeout))
    except (requests.RequestException, OSError, ValueError, TypeError) as exc:
        logger.info("Using demo content; could not load %s: %s", source, exc)
        return DAY_LIST_ADAPTER.validate_python(get_demo_days())


def fallback_image_id(day: str, time_str: Optional[str], rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    suffix = "".join(rng.choice(ID_ALPHABET) for _ in range(ID_SUFFIX_LENGTH))
    return f"{day}-{time_str or ''}-{suffix}"


def flatten(days: List[DayRecord]) -> List[ImageRecord]:
    """Concatenate every day's images in order."""
    return [image for day in days for image in day.images]


def find_hero(days: List[DayRecord]) -> Optional[ImageRecord]:
    """Pick the banner image: a per-image flag first, then the legacy day flag."""
    for day in days:
        for image in day.images:
            if image.hero:
                return image
    for day in days:
        if not day.is_hero or not day.images:
            continue
        index = day.hero_index if day.hero_index is not None else 0
        if 0 <= index < len(day.images):
            return day.images[index]
        return day.images[0]
    return None


@dataclass
class ArchiveContext:
    """State of one processing pass: days, flat navigation sequence and viewer position."""

    days: List[DayRecord] = field(default_factory=list)
    flat: List[ImageRecord] = field(default_factory=list)
    hero: Optional[ImageRecord] = None
    current_index: int = 0

    @classmethod
    def from_days(cls, days: List[DayRecord]) -> "ArchiveContext":
        return cls(days=days, flat=flatten(days), hero=find_hero(days))

    @property
    def image_count(self) -> int:
        return len(self.flat)

    @property
    def hero_index(self) -> int:
        if self.hero is None:
            return 0
        found = self.index_of(self.hero.id)
        return found if found is not None else 0

    def weeks(self) -> List[WeekBucket]:
        return bucket_weeks(self.days)

    def index_of(self, image_id: Optional[str]) -> Optional[int]:
        for idx, image in enumerate(self.flat):
            if image.id == image_id:
                return idx
        return None

    def open(self, index: int) -> Optional[ImageRecord]:
        if not self.flat:
            return None
        self.current_index = max(0, min(index, len(self.flat) - 1))
        return self.current

    def step(self, direction: int) -> Optional[ImageRecord]:
        target = self.current_index + direction
        if 0 <= target < len(self.flat):
            self.current_index = target
        return self.current

    @property
    def current(self) -> Optional[ImageRecord]:
        if 0 <= self.current_index < len(self.flat):
            return self.flat[self.current_index]
        return None

    @property
    def has_previous(self) -> bool:
        return self.current_index > 0

    @property
    def has_next(self) -> bool:
        return self.current_index < len(self.flat) - 1

    @property
    def counter(self) -> str:
        return f"{self.current_index + 1} / {len(self.flat)}"


class ContentProcessor:
    """Tags, labels and enriches days with weather, then builds an ``ArchiveContext``."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        weather: Optional[WeatherResolver] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or get_settings()
        if weather is None and self.settings.weather_api_key:
            weather = WeatherResolver(WeatherAPIClient(settings=self.settings), tz=self.settings.timezone)
        self.weather = weather
        self.rng = rng

    def process_image(self, day: DayRecord, image: ImageRecord, lat: float, lng: float) -> ImageRecord:
        weather = image.weather
        if not weather and self.weather is not None:
            weather = self.weather.resolve(day.date, image.time, lat, lng)

        return image.model_copy(
            update={
                "id": image.id or fallback_image_id(day.date, image.time, self.rng),
                "tag": image.tag or derive_tag(image.time),
                "weather": weather or WEATHER_PLACEHOLDER,
                "location": image.location or day.location or self.settings.default_location,
            }
        )

    def process_day(self, day: DayRecord) -> DayRecord:
        lat = day.lat if day.lat is not None else self.settings.default_lat
        lng = day.lng if day.lng is not None else self.settings.default_lng
        images = [self.process_image(day, image, lat, lng) for image in day.images]
        return day.model_copy(update={"label": format_date_label(day.date), "images": images})

    def process_days(self, days: List[DayRecord]) -> List[DayRecord]:
        """Enrich every day and order them newest first."""
        processed = [self.process_day(day) for day in days]
        return sorted(processed, key=lambda d: d.date, reverse=True)

    def load(self, source: Optional[str] = None) -> ArchiveContext:
        """Run one full pass: load the index, enrich it and build fresh navigation state."""
        source = source or self.settings.resolved_index_source
        days = load_content(source, timeout=self.settings.request_timeout)
        return ArchiveContext.from_days(self.process_days(days))
