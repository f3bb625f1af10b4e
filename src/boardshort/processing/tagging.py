"""Sunrise/sunset tagging and solar position helpers."""
from __future__ import annotations

import math
from datetime import date as Date
from datetime import datetime, time, timedelta, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo

from boardshort.processing.defaults import FALLBACK_TAG, NOON_HOUR

EPOCH = Date(1970, 1, 1)


def parse_clock(time_str: Optional[str]) -> Optional[float]:
    """Return an ``HH:MM`` string as decimal hours, or ``None`` if unusable."""
    if not time_str:
        return None
    parts = time_str.strip().split(":")
    if len(parts) < 2:
        return None
    try:
        hour, minute = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    return hour + minute / 60


def derive_tag(time_str: Optional[str]) -> str:
    """Classify a capture time as ``sunrise`` (before local noon) or ``sunset``."""
    hours = parse_clock(time_str)
    if hours is None:
        return FALLBACK_TAG
    return "sunrise" if hours < NOON_HOUR else "sunset"


def solar_noon_utc(day: Union[str, Date], lat: float, lng: float) -> float:
    """Estimate solar noon in UTC decimal hours with a low-precision solar model.

    ``lat`` is accepted for symmetry with other solar helpers; the estimate
    only depends on longitude and the equation of time.
    """
    if isinstance(day, str):
        day = Date.fromisoformat(day)
    jd = (day - EPOCH).days + 2440587.5
    n = jd - 2451545.0
    mean_lng = math.fmod(280.46 + 0.9856474 * n, 360)
    g = math.radians(math.fmod(357.528 + 0.9856003 * n, 360))
    ecliptic_lng = math.radians(mean_lng + 1.915 * math.sin(g) + 0.020 * math.sin(2 * g))
    eps = math.radians(23.439 - 0.0000004 * n)
    ra = math.atan2(math.cos(eps) * math.sin(ecliptic_lng), math.cos(ecliptic_lng)) * 12 / math.pi
    eot = mean_lng / 15 - math.fmod(ra + 24, 24)
    return 12 - lng / 15 - eot


def derive_solar_tag(day: str, time_str: Optional[str], lat: float, lng: float, tz: str) -> str:
    """Tag against estimated solar noon instead of the fixed local-noon rule."""
    hours = parse_clock(time_str)
    if hours is None:
        return FALLBACK_TAG
    midnight = datetime.combine(Date.fromisoformat(day), time.min, tzinfo=ZoneInfo(tz))
    local = midnight + timedelta(minutes=round(hours * 60))
    utc = local.astimezone(timezone.utc)
    utc_hours = utc.hour + utc.minute / 60
    # Solar noon can exceed 24 for western longitudes; compare on the capture's local day.
    day_shift = (utc.date() - local.date()).days * 24
    return "sunrise" if utc_hours + day_shift < solar_noon_utc(day, lat, lng) else "sunset"
