"""Deterministic weather normalization into scoring-friendly bands and flags.

All thresholds are Fahrenheit. Every function here is pure and total over
finite inputs; missing collaborator data degrades to the neutral context.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from models.weather import CurrentConditions, ForecastDay, WeatherBands, WeatherContext

logger = logging.getLogger(__name__)

MILD_MIN_F = 55
WARM_MIN_F = 75
HOT_MIN_F = 90
RAIN_LIKELY_THRESHOLD = 0.35
LARGE_SWING_THRESHOLD_F = 20
ESTIMATED_RANGE_OFFSET_F = 5

_BAND_WEIGHTS = {"cold": 3, "mild": 2, "warm": 1, "hot": 0}

NEUTRAL_WEATHER_CONTEXT = WeatherContext(
    is_cold=False,
    is_mild=True,
    is_warm=False,
    is_hot=False,
    is_rain_likely=False,
    daily_swing=0.0,
    has_large_swing=False,
    target_weight=2,
    current_temp=65.0,
    high_temp=70.0,
    low_temp=60.0,
    precip_chance=0.0,
)


def classify_temperature(temp_f: float) -> WeatherBands:
    """Return bands with exactly one flag set for ``temp_f``."""

    return WeatherBands(
        is_cold=temp_f < MILD_MIN_F,
        is_mild=MILD_MIN_F <= temp_f < WARM_MIN_F,
        is_warm=WARM_MIN_F <= temp_f < HOT_MIN_F,
        is_hot=temp_f >= HOT_MIN_F,
    )


def map_temperature_to_weight(bands: WeatherBands) -> int:
    """Map a band to the preferred garment insulation, 3 heaviest to 0 lightest."""

    return _BAND_WEIGHTS[bands.label]


def is_rain_likely(precip_chance: float) -> bool:
    return precip_chance >= RAIN_LIKELY_THRESHOLD


def calculate_daily_swing(high: float, low: float) -> float:
    """Absolute high/low difference; 0 when either reading is not finite."""

    if not (math.isfinite(high) and math.isfinite(low)):
        return 0.0
    return abs(high - low)


def has_large_swing(swing: float) -> bool:
    return swing >= LARGE_SWING_THRESHOLD_F


def normalize_weather_context(
    current: Optional[CurrentConditions], forecast_days: Sequence[ForecastDay] = ()
) -> WeatherContext:
    """Combine current conditions and today's forecast into a :class:`WeatherContext`.

    Classification always uses the current temperature. The first forecast day
    supplies high, low and precipitation; without one, high and low are
    estimated as five degrees either side of the current temperature.
    """

    if current is None:
        logger.debug("no current conditions, using neutral weather context")
        return NEUTRAL_WEATHER_CONTEXT

    today = forecast_days[0] if forecast_days else None
    current_temp = float(current.temperature)
    if today is not None:
        high_temp = float(today.high)
        low_temp = float(today.low)
        precip_chance = float(today.precipitation_probability or 0.0)
    else:
        high_temp = current_temp + ESTIMATED_RANGE_OFFSET_F
        low_temp = current_temp - ESTIMATED_RANGE_OFFSET_F
        precip_chance = 0.0

    bands = classify_temperature(current_temp)
    swing = calculate_daily_swing(high_temp, low_temp)
    context = WeatherContext(
        is_cold=bands.is_cold,
        is_mild=bands.is_mild,
        is_warm=bands.is_warm,
        is_hot=bands.is_hot,
        is_rain_likely=is_rain_likely(precip_chance),
        daily_swing=swing,
        has_large_swing=has_large_swing(swing),
        target_weight=map_temperature_to_weight(bands),
        current_temp=current_temp,
        high_temp=high_temp,
        low_temp=low_temp,
        precip_chance=precip_chance,
    )
    logger.debug("normalized weather %s -> band=%s weight=%s", current_temp, bands.label, context.target_weight)
    return context


def _round_half_up(value: float) -> int:
    # halves round up: 22.5 -> 23, 12.5 -> 13
    return math.floor(value + 0.5)


def describe_weather_context(context: WeatherContext) -> str:
    """Human-readable summary, e.g. ``cold weather and rain likely (40%)``."""

    description = f"{context.bands.label} weather"
    if context.has_large_swing:
        description += f" with a large temperature swing ({_round_half_up(context.daily_swing)}°F)"
    if context.is_rain_likely:
        description += f" and rain likely ({_round_half_up(context.precip_chance * 100)}%)"
    return description


__all__ = [
    "NEUTRAL_WEATHER_CONTEXT",
    "RAIN_LIKELY_THRESHOLD",
    "LARGE_SWING_THRESHOLD_F",
    "classify_temperature",
    "map_temperature_to_weight",
    "is_rain_likely",
    "calculate_daily_swing",
    "has_large_swing",
    "normalize_weather_context",
    "describe_weather_context",
]
