from __future__ import annotations

import pytest

from boardshort.config import Settings
from boardshort.ingest.models import DayRecord
from boardshort.processing.timeline import build_strip, build_strips, footer_count, grid_metrics


def _day(date, tags):
    return DayRecord.model_validate(
        {"date": date, "images": [{"src": f"{i}.jpg", "tag": tag} for i, tag in enumerate(tags)]}
    )


def test_strip_splits_clusters_and_counts_open_slots():
    strip = build_strip(_day("2025-06-14", ["sunrise", "sunrise", "sunrise", "sunset", "sunset"]), total_slots=40)

    assert [image.src for image in strip.sunrise] == ["0.jpg", "1.jpg", "2.jpg"]
    assert [image.src for image in strip.sunset] == ["3.jpg", "4.jpg"]
    assert strip.header == "3 sunrise · 2 sunset · 35 open"


def test_open_slots_never_negative():
    assert build_strip(_day("2025-06-14", ["sunset"] * 5), total_slots=4).open_slots == 0


def test_build_strips_uses_configured_slots():
    settings = Settings(WEATHER_API_KEY=None, total_slots=50)

    strips = build_strips([_day("2025-06-14", ["sunrise"])], settings)

    assert strips[0].open_slots == 49


def test_footer_count():
    days = [_day("2025-06-14", ["sunrise", "sunset"]), _day("2025-06-13", ["sunset"])]

    assert footer_count(days) == "3 photographs archived"


@pytest.mark.parametrize("viewport, expected_h", [(1280, 88), (599, 52), (600, 88)])
def test_grid_metrics(viewport, expected_h):
    metrics = grid_metrics(800, viewport, Settings(WEATHER_API_KEY=None))

    assert metrics.slot_w == pytest.approx(20.0)
    assert metrics.thumb_h == expected_h
