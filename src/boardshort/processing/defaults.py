"""Placeholder and fallback values applied when content omits a field."""
from __future__ import annotations

# Shown wherever weather could not be resolved.
WEATHER_PLACEHOLDER = "—"

# Tag used when a capture time is missing or cannot be parsed.
FALLBACK_TAG = "sunrise"

# Hour boundary of the simple local-noon tagging rule.
NOON_HOUR = 12.0

# Length of the random suffix on generated image ids (base-36 characters).
ID_SUFFIX_LENGTH = 4
ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
