"""Evaluation scenarios exercising weather bands, calendar fallback and scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional


@dataclass
class EvaluationScenario:
    name: str
    description: str
    today: date
    target_date: date
    current: Optional[Dict[str, object]]
    forecast: List[Dict[str, object]]
    selected_items: Dict[str, Dict[str, object]]
    candidates: List[Dict[str, object]]
    expectations: Dict[str, object] = field(default_factory=dict)


def _wardrobe_fixtures() -> Dict[str, Dict[str, object]]:
    return {
        "charcoal_trousers": {
            "item_id": "charcoal_trousers",
            "name": "Charcoal Wool Trousers",
            "category": "Pants",
            "formality_score": 6,
            "inferred_color": "charcoal",
            "capsule_tags": ["Refined"],
            "weather_weight": 2,
            "seasons": ["Fall", "Winter"],
        },
        "navy_overcoat": {
            "item_id": "navy_overcoat",
            "name": "Navy Wool Coat",
            "category": "Jacket/Overshirt",
            "formality_score": 7,
            "inferred_color": "navy",
            "capsule_tags": ["Refined", "Crossover"],
            "weather_weight": 3,
            "seasons": ["Winter"],
            "material": "wool",
        },
        "linen_shirt": {
            "item_id": "linen_shirt",
            "name": "White Linen Shirt",
            "category": "Shirt",
            "formality_score": 4,
            "inferred_color": "white",
            "capsule_tags": ["Weekend"],
            "weather_weight": 0,
            "seasons": ["Summer"],
            "material": "linen",
        },
        "khaki_shorts": {
            "item_id": "khaki_shorts",
            "name": "Khaki Chino Shorts",
            "category": "Shorts",
            "formality_score": 3,
            "inferred_color": "khaki",
            "capsule_tags": ["Weekend"],
            "weather_weight": 0,
            "seasons": ["Summer"],
        },
        "red_flannel": {
            "item_id": "red_flannel",
            "name": "Red Flannel Overshirt",
            "category": "Jacket/Overshirt",
            "formality_score": 4,
            "inferred_color": "red",
            "capsule_tags": ["Weekend"],
            "weather_weight": 2,
            "seasons": ["Fall"],
            "material": "cotton",
        },
    }


def _build_scenarios() -> List[EvaluationScenario]:
    wardrobe = _wardrobe_fixtures()
    return [
        EvaluationScenario(
            name="cold_rainy_commute",
            description="Cold, wet office day should favour the heavy refined coat.",
            today=date(2026, 1, 12),
            target_date=date(2026, 1, 12),
            current={"temperature": 40, "condition": "Rain", "icon": "rain"},
            forecast=[
                {
                    "date": "2026-01-12",
                    "temperature": {"high": 45, "low": 35},
                    "condition": "Rain",
                    "icon": "rain",
                    "precipitationProbability": 0.6,
                }
            ],
            selected_items={"pants": wardrobe["charcoal_trousers"]},
            candidates=[wardrobe["linen_shirt"], wardrobe["navy_overcoat"]],
            expectations={
                "best_candidate": "navy_overcoat",
                "calendar_source": "forecast",
                "target_weight": 3,
                "rain_likely": True,
                "categories": {"navy_overcoat": "Jacket"},
            },
        ),
        EvaluationScenario(
            name="hot_weekend",
            description="Hot dry weekend should favour the lightest summer layer.",
            today=date(2026, 7, 4),
            target_date=date(2026, 7, 5),
            current={"temperature": 93, "condition": "Sunny", "icon": "sun"},
            forecast=[
                {
                    "date": "2026-07-04",
                    "temperature": {"high": 95, "low": 78},
                    "condition": "Sunny",
                    "icon": "sun",
                    "precipitationProbability": 0.0,
                },
                {
                    "date": "2026-07-05",
                    "temperature": {"high": 97, "low": 80},
                    "condition": "Sunny",
                    "icon": "sun",
                    "precipitationProbability": 0.05,
                },
            ],
            selected_items={"pants": wardrobe["khaki_shorts"]},
            candidates=[wardrobe["red_flannel"], wardrobe["linen_shirt"]],
            expectations={
                "best_candidate": "linen_shirt",
                "calendar_source": "forecast",
                "target_weight": 0,
                "rain_likely": False,
                "categories": {"red_flannel": "Overshirt"},
            },
        ),
        EvaluationScenario(
            name="planning_beyond_forecast",
            description="A date six months out falls back to a seasonal estimate.",
            today=date(2026, 1, 15),
            target_date=date(2026, 7, 15),
            current={"temperature": 30, "condition": "Snow", "icon": "snow"},
            forecast=[],
            selected_items={},
            candidates=[wardrobe["linen_shirt"], wardrobe["navy_overcoat"]],
            expectations={
                "best_candidate": "navy_overcoat",
                "calendar_source": "seasonal-fallback",
                "target_weight": 3,
                "rain_likely": False,
            },
        ),
        EvaluationScenario(
            name="weather_unavailable",
            description="Without any weather data scoring uses the neutral mild context.",
            today=date(2026, 4, 1),
            target_date=date(2026, 4, 2),
            current=None,
            forecast=[],
            selected_items={"pants": wardrobe["charcoal_trousers"]},
            candidates=[wardrobe["red_flannel"], wardrobe["navy_overcoat"]],
            expectations={
                "best_candidate": "navy_overcoat",
                "calendar_source": "neutral",
                "target_weight": 2,
                "rain_likely": False,
            },
        ),
    ]


SCENARIOS: List[EvaluationScenario] = _build_scenarios()

__all__ = ["EvaluationScenario", "SCENARIOS"]
