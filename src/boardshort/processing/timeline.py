"""Contact-strip and grid layout data for the timeline."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from boardshort.config import Settings, get_settings
from boardshort.ingest.models import DayRecord, ImageRecord


@dataclass
class DayStrip:
    """One day's row: sunrise cluster on the left, sunset cluster on the right."""

    day: DayRecord
    sunrise: List[ImageRecord] = field(default_factory=list)
    sunset: List[ImageRecord] = field(default_factory=list)
    open_slots: int = 0

    @property
    def header(self) -> str:
        return f"{len(self.sunrise)} sunrise · {len(self.sunset)} sunset · {self.open_slots} open"


@dataclass
class GridMetrics:
    slot_w: float
    thumb_h: int


def build_strip(day: DayRecord, total_slots: int) -> DayStrip:
    sunrise = [image for image in day.images if image.tag == "sunrise"]
    sunset = [image for image in day.images if image.tag == "sunset"]
    open_slots = max(0, total_slots - len(sunrise) - len(sunset))
    return DayStrip(day=day, sunrise=sunrise, sunset=sunset, open_slots=open_slots)


def build_strips(days: Iterable[DayRecord], settings: Optional[Settings] = None) -> List[DayStrip]:
    settings = settings or get_settings()
    return [build_strip(day, settings.total_slots) for day in days]


def footer_count(days: Iterable[DayRecord]) -> str:
    total = sum(len(day.images) for day in days)
    return f"{total} photographs archived"


def grid_metrics(row_width: float, viewport_width: float, settings: Optional[Settings] = None) -> GridMetrics:
    """Slot width and row height for a rendered timeline width."""
    settings = settings or get_settings()
    thumb_h = settings.thumb_h_sm if viewport_width < settings.mobile_breakpoint else settings.thumb_h
    return GridMetrics(slot_w=row_width / settings.total_slots, thumb_h=thumb_h)
