"""Boundary validation of collaborator payloads."""

import math

import pytest
from pydantic import ValidationError

from logic.validation import (
    CurrentWeatherPayload,
    ForecastDayPayload,
    GarmentPayload,
    parse_current_conditions,
    parse_forecast,
    parse_garment,
    validation_failure,
)
from models.garment import Garment, from_raw_metadata
from models.weather import CurrentConditions


def test_current_payload_round_trips_to_model() -> None:
    current = parse_current_conditions({"temperature": 61.5, "condition": "Clear", "icon": "01d"})
    assert current == CurrentConditions(temperature=61.5, condition="Clear", icon="01d")
    assert parse_current_conditions(None) is None
    assert parse_current_conditions(current) is current


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_temperature_is_rejected(bad: float) -> None:
    with pytest.raises(ValidationError):
        CurrentWeatherPayload.model_validate({"temperature": bad})


def test_forecast_payload_uses_wire_names() -> None:
    days = parse_forecast(
        [
            {
                "date": "2026-10-20",
                "temperature": {"high": 58, "low": 44},
                "condition": "Showers",
                "icon": "10d",
                "precipitationProbability": 0.6,
            },
            {"date": "2026-10-21", "temperature": {"high": 60, "low": 45}},
        ]
    )

    assert days[0].precipitation_probability == pytest.approx(0.6)
    assert (days[0].high, days[0].low) == (58, 44)
    assert days[1].precipitation_probability is None
    assert parse_forecast(None) == []


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "not-a-date", "temperature": {"high": 50, "low": 40}},
        {"date": "2026-10-20", "temperature": {"high": math.nan, "low": 40}},
        {"date": "2026-10-20", "temperature": {"high": 50, "low": 40}, "precipitationProbability": 1.4},
        {"date": "2026-10-20", "temperature": {"high": 50, "low": 40}, "precipitationProbability": -0.1},
        {"date": "2026-10-20"},
    ],
)
def test_invalid_forecast_days_are_rejected(payload: dict) -> None:
    with pytest.raises(ValidationError):
        ForecastDayPayload.model_validate(payload)


def test_garment_payload_normalizes_fields() -> None:
    garment = parse_garment(
        {
            "item_id": "coat-1",
            "name": "Navy Pea Coat",
            "weather_weight": 3,
            "formality_score": 7,
            "inferred_color": " Navy ",
            "capsule_tags": ["Refined", "Refined", " "],
            "seasons": ["autumn", "WINTER", "monsoon"],
        }
    )

    assert isinstance(garment, Garment)
    assert garment.inferred_color == "navy"
    assert garment.capsule_tags == frozenset({"Refined"})
    assert garment.seasons == ("Fall", "Winter")


def test_garment_defaults_for_missing_optional_fields() -> None:
    garment = parse_garment({"item_id": "tee-1", "name": "Tee", "weather_weight": 0})

    assert garment.formality_score is None
    assert garment.effective_formality == 5
    assert garment.inferred_color == "unknown"
    assert garment.capsule_tags == frozenset()


@pytest.mark.parametrize(
    "overrides",
    [{"formality_score": 0}, {"formality_score": 11}, {"weather_weight": 4}, {"weather_weight": -1}, {"name": ""}],
)
def test_out_of_domain_garments_are_rejected(overrides: dict) -> None:
    payload = {"item_id": "x", "name": "Shirt", "weather_weight": 1, **overrides}
    with pytest.raises(ValidationError):
        GarmentPayload.model_validate(payload)


def test_validation_failure_payload() -> None:
    with pytest.raises(ValidationError) as exc_info:
        CurrentWeatherPayload.model_validate({"temperature": "hot"})

    payload = validation_failure("Invalid current conditions", exc_info.value)

    assert payload["status"] == "needs_review"
    assert payload["message"] == "Invalid current conditions"
    assert payload["details"][0]["loc"] == ("temperature",)


def test_from_raw_metadata_requires_identity_and_weight() -> None:
    with pytest.raises(ValueError):
        from_raw_metadata({"item_id": "x", "name": "Shirt"})

    garment = from_raw_metadata(
        {"item_id": "x", "name": "Shirt", "weather_weight": 9, "capsule_tags": "Refined", "seasons": "Summer"}
    )
    assert garment.weather_weight == 3
    assert garment.capsule_tags == frozenset({"Refined"})
    assert garment.seasons == ("Summer",)
