"""Resolve which weather applies to a calendar date.

Resolution order: an exact forecast day for the date, then a seasonal estimate
shifted from current conditions by the month distance, then the neutral
context when no current conditions are available.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from logic.weather_normalization import NEUTRAL_WEATHER_CONTEXT, normalize_weather_context
from models.taxonomy import PROVENANCE_FORECAST, PROVENANCE_NEUTRAL, PROVENANCE_SEASONAL
from models.weather import CalendarWeatherResult, CurrentConditions, ForecastDay, WeatherContext

logger = logging.getLogger(__name__)

DEGREES_PER_MONTH_F = 4
SEASONAL_PRECIP_CHANCE = 0.22
SEASONAL_CONDITION = "seasonal estimate"
NEUTRAL_CONDITION = "Weather unavailable"
MIN_ESTIMATE_F = -10.0
MAX_ESTIMATE_F = 115.0
HOT_MIDPOINT_F = 78
COLD_MIDPOINT_F = 45


def _as_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def month_delta(today: date, selected: date) -> int:
    """Signed number of calendar months from ``today`` to ``selected``."""

    return (selected.year - today.year) * 12 + (selected.month - today.month)


def normalize_month_delta(delta: int) -> int:
    """Wrap a month delta into [-6, 6]; exactly +/-6 is left as is."""

    while delta > 6:
        delta -= 12
    while delta < -6:
        delta += 12
    return delta


def _clamp_estimate(value: float) -> float:
    return max(MIN_ESTIMATE_F, min(MAX_ESTIMATE_F, value))


def _seasonal_spread(midpoint: float) -> float:
    if midpoint >= HOT_MIDPOINT_F:
        return 10.0
    if midpoint <= COLD_MIDPOINT_F:
        return 12.0
    return 14.0


def estimate_seasonal_forecast(
    selected: date, current: CurrentConditions, today: date
) -> ForecastDay:
    """Build a synthetic forecast day for a date outside the forecast window."""

    delta = normalize_month_delta(month_delta(today, selected))
    midpoint = float(current.temperature) + delta * DEGREES_PER_MONTH_F
    half_spread = _seasonal_spread(midpoint) / 2
    return ForecastDay(
        date=selected.isoformat(),
        high=_clamp_estimate(midpoint + half_spread),
        low=_clamp_estimate(midpoint - half_spread),
        condition=SEASONAL_CONDITION,
        icon=current.icon,
        precipitation_probability=SEASONAL_PRECIP_CHANCE,
    )


def _result(source: str, context: WeatherContext, condition: str) -> CalendarWeatherResult:
    return CalendarWeatherResult(
        source=source,
        weather_context=context,
        condition=condition,
        high_temp=context.high_temp,
        low_temp=context.low_temp,
        precip_chance=context.precip_chance,
    )


def resolve_calendar_weather(
    selected_date: date | datetime | str,
    current: Optional[CurrentConditions],
    forecast: Sequence[ForecastDay] = (),
    today: Optional[date] = None,
) -> CalendarWeatherResult:
    """Return the weather context for ``selected_date`` with its provenance."""

    selected = _as_date(selected_date)
    date_key = selected.isoformat()

    match = next((day for day in forecast if day.date_key == date_key), None)
    if match is not None:
        logger.debug("forecast match for %s", date_key)
        return _result(PROVENANCE_FORECAST, normalize_weather_context(current, [match]), match.condition)

    if current is not None:
        synthetic = estimate_seasonal_forecast(selected, current, today or date.today())
        logger.debug("seasonal estimate for %s: %.1f-%.1f", date_key, synthetic.low, synthetic.high)
        return _result(PROVENANCE_SEASONAL, normalize_weather_context(current, [synthetic]), SEASONAL_CONDITION)

    logger.debug("no weather data for %s, using neutral context", date_key)
    return _result(PROVENANCE_NEUTRAL, NEUTRAL_WEATHER_CONTEXT, NEUTRAL_CONDITION)


__all__ = [
    "SEASONAL_PRECIP_CHANCE",
    "SEASONAL_CONDITION",
    "NEUTRAL_CONDITION",
    "month_delta",
    "normalize_month_delta",
    "estimate_seasonal_forecast",
    "resolve_calendar_weather",
]
