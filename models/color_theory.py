"""Color harmony lookups used by pairwise scoring."""
from __future__ import annotations

from models.taxonomy import CLASHING_COLOR_PAIRS, NEUTRAL_COLORS, normalize_color_name

_CLASHING_LOOKUP = frozenset(CLASHING_COLOR_PAIRS) | frozenset((b, a) for a, b in CLASHING_COLOR_PAIRS)


def is_neutral(color: str) -> bool:
    """Return True when the color belongs to the neutral palette."""

    return normalize_color_name(color) in NEUTRAL_COLORS


def is_clashing_pair(color1: str, color2: str) -> bool:
    """Return True when the colors form a known clashing pair, in either order."""

    c1, c2 = normalize_color_name(color1), normalize_color_name(color2)
    return (c1, c2) in _CLASHING_LOOKUP


__all__ = ["is_neutral", "is_clashing_pair"]
