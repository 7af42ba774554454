"""Garment data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from models.taxonomy import (
    DEFAULT_FORMALITY,
    UNKNOWN_COLOR,
    clamp_weather_weight,
    normalize_color_name,
    normalize_seasons,
    normalize_tags,
)


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


@dataclass(frozen=True)
class Garment:
    """A wardrobe item as read by the scoring engine.

    Instances are immutable; the wardrobe collaborator owns the records and the
    engine never writes back to them.
    """

    item_id: str
    name: str
    weather_weight: int
    category: str = ""
    formality_score: Optional[int] = None
    inferred_color: str = UNKNOWN_COLOR
    capsule_tags: FrozenSet[str] = field(default_factory=frozenset)
    seasons: Tuple[str, ...] = ()
    material: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "weather_weight", clamp_weather_weight(self.weather_weight))
        object.__setattr__(self, "inferred_color", normalize_color_name(self.inferred_color))
        object.__setattr__(self, "capsule_tags", normalize_tags(_ensure_list(self.capsule_tags)))
        object.__setattr__(self, "seasons", normalize_seasons(_ensure_list(self.seasons)))

    @property
    def effective_formality(self) -> int:
        """Formality score with the neutral default applied."""

        return DEFAULT_FORMALITY if self.formality_score is None else self.formality_score


def from_raw_metadata(metadata: Dict[str, Any]) -> Garment:
    """Factory to build a :class:`Garment` from a loose wardrobe record."""

    required_fields = ["item_id", "name"]
    missing = [key for key in required_fields if not metadata.get(key)]
    if metadata.get("weather_weight") is None:
        missing.append("weather_weight")
    if missing:
        raise ValueError(f"Missing required fields for Garment: {missing}")

    formality = metadata.get("formality_score")
    return Garment(
        item_id=str(metadata["item_id"]),
        name=str(metadata["name"]),
        weather_weight=int(metadata["weather_weight"]),
        category=str(metadata.get("category") or ""),
        formality_score=None if formality is None else int(formality),
        inferred_color=metadata.get("inferred_color") or UNKNOWN_COLOR,
        capsule_tags=frozenset(normalize_tags(_ensure_list(metadata.get("capsule_tags")))),
        seasons=normalize_seasons(_ensure_list(metadata.get("seasons"))),
        material=metadata.get("material"),
    )


__all__ = ["Garment", "from_raw_metadata"]
