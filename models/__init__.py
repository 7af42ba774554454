"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.garment import Garment, from_raw_metadata
from models.weather import (
    CalendarWeatherResult,
    CurrentConditions,
    ForecastDay,
    WeatherBands,
    WeatherContext,
)

__all__ = [
    "Garment",
    "from_raw_metadata",
    "CalendarWeatherResult",
    "CurrentConditions",
    "ForecastDay",
    "WeatherBands",
    "WeatherContext",
]
