"""Deterministic compatibility scoring for a candidate garment.

Each dimension returns a value in [0, 1]. Pairwise dimensions (formality,
color, capsule) are averaged across every garment already in the outfit.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from statistics import fmean
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Union

from models.color_theory import is_clashing_pair, is_neutral
from models.garment import Garment
from models.taxonomy import (
    EMPTY_SELECTION_SCORE,
    UNKNOWN_COLOR,
    UNKNOWN_COLOR_SCORE,
    UNTAGGED_COHESION_SCORE,
    normalize_color_name,
)
from models.weather import WeatherContext

WEIGHTS = {
    "weather_fit": 0.4,
    "formality_alignment": 0.3,
    "color_harmony": 0.2,
    "capsule_cohesion": 0.1,
}

_WEIGHT_DIFF_ADJUSTMENTS = {0: 0.4, 1: 0.2, 2: -0.1}
_FAR_WEIGHT_PENALTY = -0.3
_SEASON_BONUS = 0.1
_FORMALITY_TABLE = {0: 1.0, 1: 0.9, 2: 0.75, 3: 0.6, 4: 0.4}

SelectedItems = Union[Mapping[str, Optional[Garment]], Iterable[Optional[Garment]]]


@dataclass(frozen=True)
class CompatibilityScore:
    """Four sub-scores and their fixed-weight total."""

    weather_fit: float
    formality_alignment: float
    color_harmony: float
    capsule_cohesion: float
    total: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def current_season(context: WeatherContext) -> str:
    """Coarse temperature-derived season used for the season bonus."""

    if context.is_cold:
        return "Winter"
    if context.is_hot:
        return "Summer"
    if context.current_temp < 65:
        return "Fall"
    return "Spring"


def calculate_weather_fit(item: Garment, context: WeatherContext) -> float:
    weight_diff = abs(item.weather_weight - context.target_weight)
    score = 0.5 + _WEIGHT_DIFF_ADJUSTMENTS.get(weight_diff, _FAR_WEIGHT_PENALTY)
    if item.seasons and current_season(context) in item.seasons:
        score += _SEASON_BONUS
    return _clamp(score)


def calculate_formality_alignment(item1: Garment, item2: Garment) -> float:
    diff = abs(item1.effective_formality - item2.effective_formality)
    if diff in _FORMALITY_TABLE:
        return _FORMALITY_TABLE[diff]
    return max(0.0, 0.3 - (diff - 5) * 0.1)


def calculate_color_harmony(color1: str, color2: str) -> float:
    color1, color2 = normalize_color_name(color1), normalize_color_name(color2)
    if color1 == UNKNOWN_COLOR or color2 == UNKNOWN_COLOR:
        return UNKNOWN_COLOR_SCORE
    if color1 == color2:
        return 0.85
    if is_clashing_pair(color1, color2):
        return 0.3
    neutral1, neutral2 = is_neutral(color1), is_neutral(color2)
    if neutral1 and neutral2:
        return 1.0
    if neutral1 or neutral2:
        return 0.85
    return 0.6


def calculate_capsule_cohesion(item1: Garment, item2: Garment) -> float:
    if not item1.capsule_tags or not item2.capsule_tags:
        return UNTAGGED_COHESION_SCORE
    shared = len(item1.capsule_tags & item2.capsule_tags)
    if shared == 0:
        return 0.5
    if shared == 1:
        return 0.8
    return 0.95


def _selected_list(selected_items: SelectedItems) -> List[Garment]:
    values = selected_items.values() if isinstance(selected_items, Mapping) else selected_items
    return [item for item in values if item is not None]


def _mean_against(
    item: Garment, selected: List[Garment], pairwise: Callable[[Garment, Garment], float]
) -> float:
    if not selected:
        return EMPTY_SELECTION_SCORE
    return fmean(pairwise(item, other) for other in selected)


def calculate_compatibility_score(
    item: Garment, weather_context: WeatherContext, selected_items: SelectedItems = ()
) -> CompatibilityScore:
    """Score ``item`` against the weather and the outfit built so far."""

    selected = _selected_list(selected_items)
    weather_fit = calculate_weather_fit(item, weather_context)
    formality_alignment = _mean_against(item, selected, calculate_formality_alignment)
    color_harmony = _mean_against(
        item, selected, lambda a, b: calculate_color_harmony(a.inferred_color, b.inferred_color)
    )
    capsule_cohesion = _mean_against(item, selected, calculate_capsule_cohesion)

    total = (
        weather_fit * WEIGHTS["weather_fit"]
        + formality_alignment * WEIGHTS["formality_alignment"]
        + color_harmony * WEIGHTS["color_harmony"]
        + capsule_cohesion * WEIGHTS["capsule_cohesion"]
    )
    return CompatibilityScore(
        weather_fit=weather_fit,
        formality_alignment=formality_alignment,
        color_harmony=color_harmony,
        capsule_cohesion=capsule_cohesion,
        total=total,
    )


__all__ = [
    "WEIGHTS",
    "CompatibilityScore",
    "current_season",
    "calculate_weather_fit",
    "calculate_formality_alignment",
    "calculate_color_harmony",
    "calculate_capsule_cohesion",
    "calculate_compatibility_score",
]
