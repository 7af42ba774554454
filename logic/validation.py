"""Pydantic schemas validating collaborator payloads before they reach scoring.

The scoring functions assume finite, in-domain values. These schemas are the
boundary where malformed input (non-finite temperatures, probabilities outside
[0, 1], out-of-range formality or weather weight) is rejected.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.garment import Garment
from models.taxonomy import UNKNOWN_COLOR
from models.weather import CurrentConditions, ForecastDay


class CurrentWeatherPayload(BaseModel):
    """Current-conditions payload from the weather collaborator."""

    temperature: float = Field(allow_inf_nan=False)
    condition: str = ""
    icon: str = ""

    def to_model(self) -> CurrentConditions:
        return CurrentConditions(temperature=self.temperature, condition=self.condition, icon=self.icon)


class ForecastTemperature(BaseModel):
    high: float = Field(allow_inf_nan=False)
    low: float = Field(allow_inf_nan=False)


class ForecastDayPayload(BaseModel):
    """One forecast day; keys follow the collaborator's camelCase wire names."""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    temperature: ForecastTemperature
    condition: str = ""
    icon: str = ""
    precipitation_probability: Optional[float] = Field(
        default=None, alias="precipitationProbability", ge=0.0, le=1.0, allow_inf_nan=False
    )

    @field_validator("date")
    @classmethod
    def _validate_iso_date(cls, value: str) -> str:
        date.fromisoformat(value[:10])
        return value

    def to_model(self) -> ForecastDay:
        return ForecastDay(
            date=self.date,
            high=self.temperature.high,
            low=self.temperature.low,
            condition=self.condition,
            icon=self.icon,
            precipitation_probability=self.precipitation_probability,
        )


class GarmentPayload(BaseModel):
    """Wardrobe record fields read by the engine."""

    item_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    weather_weight: int = Field(ge=0, le=3)
    category: str = ""
    formality_score: Optional[int] = Field(default=None, ge=1, le=10)
    inferred_color: Optional[str] = None
    capsule_tags: List[str] = []
    seasons: List[str] = []
    material: Optional[str] = None

    def to_model(self) -> Garment:
        return Garment(
            item_id=self.item_id,
            name=self.name,
            weather_weight=self.weather_weight,
            category=self.category,
            formality_score=self.formality_score,
            inferred_color=self.inferred_color or UNKNOWN_COLOR,
            capsule_tags=frozenset(self.capsule_tags),
            seasons=tuple(self.seasons),
            material=self.material,
        )


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def parse_current_conditions(payload: CurrentConditions | Dict[str, Any] | None) -> Optional[CurrentConditions]:
    if payload is None or isinstance(payload, CurrentConditions):
        return payload
    return CurrentWeatherPayload.model_validate(payload).to_model()


def parse_forecast(payloads: Iterable[ForecastDay | Dict[str, Any]] | None) -> List[ForecastDay]:
    days: List[ForecastDay] = []
    for payload in payloads or []:
        if isinstance(payload, ForecastDay):
            days.append(payload)
        else:
            days.append(ForecastDayPayload.model_validate(payload).to_model())
    return days


def parse_garment(payload: Garment | Dict[str, Any]) -> Garment:
    if isinstance(payload, Garment):
        return payload
    return GarmentPayload.model_validate(payload).to_model()


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = exc.errors(include_url=False, include_context=False, include_input=False)
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "CurrentWeatherPayload",
    "ForecastTemperature",
    "ForecastDayPayload",
    "GarmentPayload",
    "ValidationResult",
    "parse_current_conditions",
    "parse_forecast",
    "parse_garment",
    "validation_failure",
]
