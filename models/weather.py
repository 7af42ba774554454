"""Weather value types shared by the normalizer, resolver and scorer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class CurrentConditions:
    """Current-conditions reading supplied by the weather collaborator."""

    temperature: float
    condition: str = ""
    icon: str = ""


@dataclass(frozen=True)
class ForecastDay:
    """One forecast day; ``date`` is an ISO date string (``YYYY-MM-DD``)."""

    date: str
    high: float
    low: float
    condition: str = ""
    icon: str = ""
    precipitation_probability: Optional[float] = None

    @property
    def date_key(self) -> str:
        return self.date[:10]


@dataclass(frozen=True)
class WeatherBands:
    """Four mutually exclusive temperature bands."""

    is_cold: bool
    is_mild: bool
    is_warm: bool
    is_hot: bool

    @property
    def label(self) -> str:
        if self.is_cold:
            return "cold"
        if self.is_mild:
            return "mild"
        if self.is_warm:
            return "warm"
        return "hot"


@dataclass(frozen=True)
class WeatherContext:
    """Normalized weather signals consumed by the compatibility scorer.

    Values are immutable; use :meth:`evolve` to derive an updated copy.
    """

    is_cold: bool
    is_mild: bool
    is_warm: bool
    is_hot: bool
    is_rain_likely: bool
    daily_swing: float
    has_large_swing: bool
    target_weight: int
    current_temp: float
    high_temp: float
    low_temp: float
    precip_chance: float

    @property
    def bands(self) -> WeatherBands:
        return WeatherBands(
            is_cold=self.is_cold,
            is_mild=self.is_mild,
            is_warm=self.is_warm,
            is_hot=self.is_hot,
        )

    def evolve(self, **changes: object) -> "WeatherContext":
        return replace(self, **changes)


@dataclass(frozen=True)
class CalendarWeatherResult:
    """Weather resolved for a calendar date, with provenance for display."""

    source: str
    weather_context: WeatherContext
    condition: str
    high_temp: float
    low_temp: float
    precip_chance: float


__all__ = [
    "CurrentConditions",
    "ForecastDay",
    "WeatherBands",
    "WeatherContext",
    "CalendarWeatherResult",
]
