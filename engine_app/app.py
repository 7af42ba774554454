"""Engine facade wiring validation, logging and the pure scoring functions."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from engine_app.config import EngineConfig
from engine_app.logging_config import configure_logging, get_logger, log_event, operation_context
from engine_app.observability import instrument_operation
from logic.calendar_weather import resolve_calendar_weather
from logic.compatibility_scoring import CompatibilityScore, calculate_compatibility_score
from logic.item_classifier import DEFAULT_RULE_SET, ClassificationResult, RuleSet, get_classification_result
from logic.validation import parse_current_conditions, parse_forecast, parse_garment
from logic.weather_normalization import describe_weather_context, normalize_weather_context
from models.garment import Garment
from models.weather import CalendarWeatherResult, CurrentConditions, ForecastDay, WeatherContext


LOGGER = get_logger(__name__)

GarmentInput = Union[Garment, Dict[str, Any]]


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate garment paired with its compatibility score."""

    garment: Garment
    score: CompatibilityScore


def _parse_selection(selected_items: Mapping[str, Optional[GarmentInput]] | Iterable[Optional[GarmentInput]]):
    if isinstance(selected_items, Mapping):
        return {slot: parse_garment(item) for slot, item in selected_items.items() if item is not None}
    return [parse_garment(item) for item in selected_items if item is not None]


class OutfitScoringEngine:
    """Validates collaborator payloads and runs the pure scoring core.

    The facade holds no mutable state beyond its configuration and rule set,
    so one instance can be shared across threads.
    """

    def __init__(self, config: EngineConfig | None = None, rule_set: RuleSet | None = None) -> None:
        self.config = config or EngineConfig.from_env()
        if not logging.getLogger().handlers:
            configure_logging(self.config.log_level)
        self.rule_set = rule_set or DEFAULT_RULE_SET

    @instrument_operation("weather_context")
    def weather_context(
        self,
        current: CurrentConditions | Dict[str, Any] | None = None,
        forecast: Sequence[ForecastDay | Dict[str, Any]] | None = None,
    ) -> WeatherContext:
        """Normalize raw current/forecast payloads into a weather context."""

        context = normalize_weather_context(parse_current_conditions(current), parse_forecast(forecast))
        log_event(
            LOGGER,
            logging.INFO,
            "engine_call_completed",
            service_name=self.config.service_name,
            method="weather_context",
            has_current=current is not None,
            target_weight=context.target_weight,
            summary=describe_weather_context(context),
        )
        return context

    @instrument_operation("calendar_weather")
    def calendar_weather(
        self,
        selected_date: date | datetime | str,
        current: CurrentConditions | Dict[str, Any] | None = None,
        forecast: Sequence[ForecastDay | Dict[str, Any]] | None = None,
        today: date | None = None,
    ) -> CalendarWeatherResult:
        result = resolve_calendar_weather(
            selected_date, parse_current_conditions(current), parse_forecast(forecast), today=today
        )
        log_event(
            LOGGER,
            logging.INFO,
            "engine_call_completed",
            service_name=self.config.service_name,
            method="calendar_weather",
            source=result.source,
            high_temp=result.high_temp,
            low_temp=result.low_temp,
        )
        return result

    def score_candidate(
        self,
        item: GarmentInput,
        weather_context: WeatherContext,
        selected_items: Mapping[str, Optional[GarmentInput]] | Iterable[Optional[GarmentInput]] = (),
    ) -> CompatibilityScore:
        return calculate_compatibility_score(parse_garment(item), weather_context, _parse_selection(selected_items))

    @instrument_operation("score_candidates")
    def score_candidates(
        self,
        candidates: Sequence[GarmentInput],
        weather_context: WeatherContext,
        selected_items: Mapping[str, Optional[GarmentInput]] | Iterable[Optional[GarmentInput]] = (),
    ) -> List[ScoredCandidate]:
        """Score every candidate against the same outfit-in-progress.

        Candidates are scored concurrently; results keep the input order.
        """

        garments = [parse_garment(candidate) for candidate in candidates]
        selection = _parse_selection(selected_items)
        with operation_context("engine:score_candidates", service_name=self.config.service_name) as correlation_id:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                scores = list(
                    executor.map(
                        lambda garment: calculate_compatibility_score(garment, weather_context, selection),
                        garments,
                    )
                )
            log_event(
                LOGGER,
                logging.INFO,
                "engine_call_completed",
                service_name=self.config.service_name,
                method="score_candidates",
                correlation_id=correlation_id,
                candidate_count=len(garments),
                selected_count=len(selection),
                workers=self.config.max_workers,
            )
        return [ScoredCandidate(garment=garment, score=score) for garment, score in zip(garments, scores)]

    def classify(self, garment: GarmentInput) -> ClassificationResult:
        parsed = parse_garment(garment)
        result = get_classification_result(parsed, self.rule_set)
        log_event(
            LOGGER,
            logging.DEBUG,
            "garment_classified",
            service_name=self.config.service_name,
            item_id=parsed.item_id,
            garment_name=parsed.name,
            rule=result.rule,
            category=result.category,
        )
        return result

    def classify_many(self, garments: Iterable[GarmentInput]) -> List[ClassificationResult]:
        return [self.classify(garment) for garment in garments]


__all__ = ["OutfitScoringEngine", "ScoredCandidate"]
