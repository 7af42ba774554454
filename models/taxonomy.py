"""Canonical vocabularies and neutral defaults for the scoring engine.

This module centralises the closed label sets (seasons, colors, categories,
provenance tags) and every "missing data" default the scoring functions fall
back on, so the neutral-default policy can be audited in one place.
"""

from typing import Dict, FrozenSet, Iterable, List, Tuple

SEASONS: List[str] = ["Spring", "Summer", "Fall", "Winter"]

_SEASON_ALIASES: Dict[str, str] = {season.lower(): season for season in SEASONS}
_SEASON_ALIASES["autumn"] = "Fall"

UNKNOWN_COLOR = "unknown"

NEUTRAL_COLORS: FrozenSet[str] = frozenset(
    {"black", "white", "grey", "gray", "navy", "cream", "khaki", "brown", "tan", "charcoal"}
)

CLASHING_COLOR_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("red", "green"),
    ("red", "burgundy"),
    ("blue", "green"),
    ("brown", "black"),
)

JACKET = "Jacket"
OVERSHIRT = "Overshirt"
CATEGORIES: Tuple[str, ...] = (JACKET, OVERSHIRT)

PROVENANCE_FORECAST = "forecast"
PROVENANCE_SEASONAL = "seasonal-fallback"
PROVENANCE_NEUTRAL = "neutral"

# Neutral defaults applied when a collaborator omits optional data.
DEFAULT_FORMALITY = 5
UNKNOWN_COLOR_SCORE = 0.7
UNTAGGED_COHESION_SCORE = 0.7
EMPTY_SELECTION_SCORE = 1.0

MIN_WEATHER_WEIGHT = 0
MAX_WEATHER_WEIGHT = 3


def normalize_color_name(raw_string: str | None) -> str:
    """Map a raw color string to a lower-case label, ``unknown`` when empty."""

    if raw_string is None:
        return UNKNOWN_COLOR
    key = str(raw_string).strip().lower()
    return key or UNKNOWN_COLOR


def normalize_seasons(values: Iterable[str]) -> Tuple[str, ...]:
    """Title-case and deduplicate season labels, dropping anything unrecognised."""

    normalised: List[str] = []
    for value in values:
        season = _SEASON_ALIASES.get(str(value).strip().lower())
        if season and season not in normalised:
            normalised.append(season)
    return tuple(normalised)


def normalize_tags(values: Iterable[str]) -> FrozenSet[str]:
    """Strip capsule tags and drop empty ones; tags stay case-sensitive."""

    return frozenset(str(value).strip() for value in values if str(value).strip())


def clamp_weather_weight(value: int) -> int:
    return max(MIN_WEATHER_WEIGHT, min(MAX_WEATHER_WEIGHT, int(value)))


__all__ = [
    "SEASONS",
    "UNKNOWN_COLOR",
    "NEUTRAL_COLORS",
    "CLASHING_COLOR_PAIRS",
    "JACKET",
    "OVERSHIRT",
    "CATEGORIES",
    "PROVENANCE_FORECAST",
    "PROVENANCE_SEASONAL",
    "PROVENANCE_NEUTRAL",
    "DEFAULT_FORMALITY",
    "UNKNOWN_COLOR_SCORE",
    "UNTAGGED_COHESION_SCORE",
    "EMPTY_SELECTION_SCORE",
    "MIN_WEATHER_WEIGHT",
    "MAX_WEATHER_WEIGHT",
    "normalize_color_name",
    "normalize_seasons",
    "normalize_tags",
    "clamp_weather_weight",
]
