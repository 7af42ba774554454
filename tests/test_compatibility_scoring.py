"""Compatibility scoring dimensions and aggregate."""

import logging
from itertools import product
from typing import List

import pytest

from logic.compatibility_scoring import (
    WEIGHTS,
    calculate_capsule_cohesion,
    calculate_color_harmony,
    calculate_compatibility_score,
    calculate_formality_alignment,
    calculate_weather_fit,
    current_season,
)
from logic.weather_normalization import NEUTRAL_WEATHER_CONTEXT, normalize_weather_context
from models.color_theory import is_clashing_pair
from models.garment import Garment
from models.weather import CurrentConditions


def _garment(item_id: str = "g1", **overrides) -> Garment:
    fields = {"item_id": item_id, "name": "Test Garment", "weather_weight": 2}
    fields.update(overrides)
    return Garment(**fields)


def _context(temp: float):
    return normalize_weather_context(CurrentConditions(temperature=temp), [])


@pytest.mark.parametrize(
    "weight, expected",
    [(3, 0.9), (2, 0.7), (1, 0.4), (0, 0.2)],
)
def test_weather_fit_by_weight_difference(weight: int, expected: float) -> None:
    cold = _context(30)
    assert calculate_weather_fit(_garment(weather_weight=weight), cold) == pytest.approx(expected)


def test_weather_fit_season_bonus_and_clamp() -> None:
    cold = _context(30)
    coat = _garment(weather_weight=3, seasons=["Fall", "Winter"])
    assert calculate_weather_fit(coat, cold) == pytest.approx(1.0)

    off_season = _garment(weather_weight=0, seasons=["Summer"])
    assert calculate_weather_fit(off_season, cold) == pytest.approx(0.2)


@pytest.mark.parametrize("temp, season", [(30, "Winter"), (95, "Summer"), (60, "Fall"), (64.9, "Fall"), (65, "Spring"), (80, "Spring")])
def test_current_season_is_temperature_derived(temp: float, season: str) -> None:
    assert current_season(_context(temp)) == season


def test_mild_context_below_65_uses_fall_bonus() -> None:
    mild = _context(58)
    fall_layer = _garment(weather_weight=2, seasons=["Fall"])
    spring_layer = _garment(weather_weight=2, seasons=["Spring"])

    assert calculate_weather_fit(fall_layer, mild) == pytest.approx(1.0)
    assert calculate_weather_fit(spring_layer, mild) == pytest.approx(0.9)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (7, 7, 1.0),
        (7, 8, 0.9),
        (5, 7, 0.75),
        (2, 5, 0.6),
        (9, 5, 0.4),
        (1, 6, 0.3),
        (1, 7, 0.2),
        (1, 8, 0.1),
        (1, 9, 0.0),
        (1, 10, 0.0),
    ],
)
def test_formality_alignment_breakpoints(a: int, b: int, expected: float) -> None:
    score = calculate_formality_alignment(_garment(formality_score=a), _garment(formality_score=b))
    assert score == pytest.approx(expected, abs=1e-9)


def test_missing_formality_defaults_to_five() -> None:
    unknown = _garment(formality_score=None)
    assert calculate_formality_alignment(unknown, _garment(formality_score=5)) == 1.0
    assert calculate_formality_alignment(unknown, _garment(formality_score=7)) == 0.75
    assert calculate_formality_alignment(unknown, unknown) == 1.0


@pytest.mark.parametrize(
    "color1, color2, expected",
    [
        ("navy", "white", 1.0),
        ("navy", "navy", 0.85),
        ("red", "green", 0.3),
        ("green", "red", 0.3),
        ("burgundy", "red", 0.3),
        ("green", "blue", 0.3),
        ("black", "brown", 0.3),
        ("unknown", "navy", 0.7),
        ("red", "unknown", 0.7),
        ("unknown", "unknown", 0.7),
        ("red", "khaki", 0.85),
        ("charcoal", "olive", 0.85),
        ("red", "yellow", 0.6),
        ("grey", "gray", 1.0),
        ("Navy", "navy", 0.85),
        ("Unknown", "navy", 0.7),
        (" RED ", "Green", 0.3),
    ],
)
def test_color_harmony(color1: str, color2: str, expected: float) -> None:
    assert calculate_color_harmony(color1, color2) == expected


def test_capsule_cohesion() -> None:
    refined = _garment(capsule_tags=["Refined", "Crossover"])
    assert calculate_capsule_cohesion(refined, _garment(capsule_tags=[])) == 0.7
    assert calculate_capsule_cohesion(_garment(), refined) == 0.7
    assert calculate_capsule_cohesion(refined, _garment(capsule_tags=["Weekend"])) == 0.5
    assert calculate_capsule_cohesion(refined, _garment(capsule_tags=["Refined"])) == 0.8
    assert calculate_capsule_cohesion(refined, _garment(capsule_tags=["Crossover", "Refined", "Travel"])) == 0.95


def test_duplicate_tags_count_once() -> None:
    a = _garment(capsule_tags=["Refined", "Refined"])
    b = _garment(capsule_tags=["Refined"])
    assert calculate_capsule_cohesion(a, b) == 0.8


def test_empty_selection_defaults_pairwise_scores() -> None:
    score = calculate_compatibility_score(_garment(), NEUTRAL_WEATHER_CONTEXT, {})

    assert score.formality_alignment == 1.0
    assert score.color_harmony == 1.0
    assert score.capsule_cohesion == 1.0
    assert score.weather_fit == pytest.approx(0.9)
    assert score.total == pytest.approx(0.9 * 0.4 + 0.6)


def test_pairwise_scores_average_across_selection() -> None:
    item = _garment("shirt", formality_score=6, inferred_color="white", capsule_tags=["Refined"])
    selected = {
        "pants": _garment("pants", formality_score=6, inferred_color="navy", capsule_tags=["Refined"]),
        "shoes": _garment("shoes", formality_score=2, inferred_color="red", capsule_tags=["Weekend"]),
        "jacket": None,
    }

    score = calculate_compatibility_score(item, NEUTRAL_WEATHER_CONTEXT, selected)

    assert score.formality_alignment == pytest.approx((1.0 + 0.4) / 2)
    assert score.color_harmony == pytest.approx((1.0 + 0.85) / 2)
    assert score.capsule_cohesion == pytest.approx((0.8 + 0.5) / 2)


def test_selection_accepts_plain_sequences() -> None:
    item = _garment("shirt", inferred_color="white")
    selected = [_garment("pants", inferred_color="navy")]

    as_list = calculate_compatibility_score(item, NEUTRAL_WEATHER_CONTEXT, selected)
    as_mapping = calculate_compatibility_score(item, NEUTRAL_WEATHER_CONTEXT, {"pants": selected[0]})

    assert as_list == as_mapping


def test_weights_sum_to_one() -> None:
    assert sum(WEIGHTS.values()) == pytest.approx(1.0)


def _wardrobe() -> List[Garment]:
    colors = ["navy", "red", "green", "unknown", "khaki", "yellow"]
    tags = [[], ["Refined"], ["Refined", "Crossover"], ["Weekend"]]
    garments = []
    for index, (weight, formality, color, tag_set) in enumerate(
        product(range(4), [None, 1, 5, 10], colors, tags)
    ):
        garments.append(
            _garment(
                f"g{index}",
                weather_weight=weight,
                formality_score=formality,
                inferred_color=color,
                capsule_tags=tag_set,
                seasons=["Winter"] if index % 2 else ["Summer", "Spring"],
            )
        )
    return garments


@pytest.mark.parametrize("temp", [-5, 40, 60, 70, 80, 100])
def test_scores_stay_in_range_and_total_is_weighted(temp: float) -> None:
    context = _context(temp)
    wardrobe = _wardrobe()
    selection = wardrobe[::37]
    for item in wardrobe[::5]:
        score = calculate_compatibility_score(item, context, selection)
        for value in score.to_dict().values():
            assert 0.0 <= value <= 1.0
        expected_total = (
            score.weather_fit * 0.4
            + score.formality_alignment * 0.3
            + score.color_harmony * 0.2
            + score.capsule_cohesion * 0.1
        )
        assert score.total == pytest.approx(expected_total)


def test_scoring_does_not_mutate_inputs() -> None:
    item = _garment("shirt", capsule_tags=["Refined"])
    selected = {"pants": _garment("pants", capsule_tags=["Refined"])}
    before = (item, dict(selected))

    calculate_compatibility_score(item, NEUTRAL_WEATHER_CONTEXT, selected)

    assert (item, selected) == before


def test_pairwise_color_checks_do_not_log(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG):
        assert is_clashing_pair("Green", "red") is True
        assert is_clashing_pair("navy", "tan") is False

    assert caplog.records == []
