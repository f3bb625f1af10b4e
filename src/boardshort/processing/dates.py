"""Date labelling and week grouping."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as Date
from datetime import timedelta
from typing import Dict, Iterable, List

from boardshort.ingest.models import DayRecord

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def format_date_label(iso: str) -> str:
    """Render ``2025-06-14`` as ``Saturday, June 14, 2025``."""
    day = Date.fromisoformat(iso)
    return f"{DAY_NAMES[day.weekday()]}, {MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


def week_start(iso: str) -> str:
    """Return the ISO date of the Sunday that begins the week containing ``iso``."""
    day = Date.fromisoformat(iso)
    offset = (day.weekday() + 1) % 7  # Sunday = 0
    return (day - timedelta(days=offset)).isoformat()


@dataclass
class WeekBucket:
    week_start: str
    days: List[DayRecord] = field(default_factory=list)


def bucket_weeks(days: Iterable[DayRecord]) -> List[WeekBucket]:
    """Group days by Sunday-start week, newest week first.

    Days keep their incoming order inside a bucket.
    """
    buckets: Dict[str, WeekBucket] = {}
    for day in days:
        key = week_start(day.date)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = WeekBucket(week_start=key)
        bucket.days.append(day)
    return sorted(buckets.values(), key=lambda b: b.week_start, reverse=True)
