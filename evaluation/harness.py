"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

from typing import Dict, List

from engine_app.app import OutfitScoringEngine, ScoredCandidate
from engine_app.config import EngineConfig
from evaluation.scenarios import SCENARIOS, EvaluationScenario


def _evaluate_expectations(
    expectations: Dict[str, object],
    source: str,
    ranked: List[ScoredCandidate],
    engine: OutfitScoringEngine,
) -> Dict[str, bool]:
    checks: Dict[str, bool] = {}
    best = ranked[0] if ranked else None
    if "best_candidate" in expectations:
        checks["best_candidate"] = best is not None and best.garment.item_id == expectations["best_candidate"]
    if "calendar_source" in expectations:
        checks["calendar_source"] = source == expectations["calendar_source"]
    for item_id, expected_category in dict(expectations.get("categories", {})).items():
        garment = next((entry.garment for entry in ranked if entry.garment.item_id == item_id), None)
        checks[f"category:{item_id}"] = (
            garment is not None and engine.classify(garment).category == expected_category
        )
    checks["scores_in_range"] = all(
        0.0 <= value <= 1.0 for entry in ranked for value in entry.score.to_dict().values()
    )
    return checks


def run_scenario(scenario: EvaluationScenario, engine: OutfitScoringEngine | None = None) -> Dict[str, object]:
    engine = engine or OutfitScoringEngine(config=EngineConfig(max_workers=2))
    resolved = engine.calendar_weather(
        scenario.target_date, scenario.current, scenario.forecast, today=scenario.today
    )
    context = resolved.weather_context
    scored = engine.score_candidates(scenario.candidates, context, scenario.selected_items)
    ranked = sorted(scored, key=lambda entry: entry.score.total, reverse=True)

    checks = _evaluate_expectations(scenario.expectations, resolved.source, ranked, engine)
    if "target_weight" in scenario.expectations:
        checks["target_weight"] = context.target_weight == scenario.expectations["target_weight"]
    if "rain_likely" in scenario.expectations:
        checks["rain_likely"] = context.is_rain_likely == scenario.expectations["rain_likely"]

    return {
        "scenario": scenario.name,
        "passed": all(checks.values()),
        "checks": checks,
        "source": resolved.source,
        "ranking": [
            {"item_id": entry.garment.item_id, "total": round(entry.score.total, 4)} for entry in ranked
        ],
    }


def run_evaluation_suite(scenarios: List[EvaluationScenario] | None = None) -> List[Dict[str, object]]:
    engine = OutfitScoringEngine(config=EngineConfig(max_workers=2))
    return [run_scenario(scenario, engine) for scenario in scenarios or SCENARIOS]


__all__ = ["run_scenario", "run_evaluation_suite"]
