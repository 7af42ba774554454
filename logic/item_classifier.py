"""Priority-ordered rule classifier for ambiguous outer layers.

A :class:`RuleSet` is an immutable, pre-sorted tuple of rules. Classification
scans rules from highest to lowest priority and the first matching rule wins;
a garment no rule matches falls back to the rule set's default category.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from statistics import fmean
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from models.garment import Garment
from models.taxonomy import CATEGORIES, JACKET, OVERSHIRT

logger = logging.getLogger(__name__)

DEFAULT_RULE_NAME = "default_fallback"
DEFAULT_CONFIDENCE = 0.1

Predicate = Callable[[Garment], bool]


@dataclass(frozen=True)
class ClassificationRule:
    """A named predicate mapping matching garments to a category."""

    name: str
    priority: int
    category: str
    matches: Predicate = field(compare=False)

    def __post_init__(self) -> None:
        if self.category not in CATEGORIES:
            raise ValueError(f"Unsupported category '{self.category}'. Allowed: {list(CATEGORIES)}")


@dataclass(frozen=True)
class ClassificationResult:
    """Which rule fired, for diagnostics."""

    category: str
    reason: str
    rule: str
    confidence: float


def _pattern(*keywords: str) -> re.Pattern:
    return re.compile(r"\b(" + "|".join(re.escape(keyword) for keyword in keywords) + r")\b", re.IGNORECASE)


def name_matches(*keywords: str) -> Predicate:
    """Predicate matching any whole keyword in the garment name."""

    compiled = _pattern(*keywords)
    return lambda garment: bool(compiled.search(garment.name or ""))


def material_matches(*keywords: str) -> Predicate:
    compiled = _pattern(*keywords)
    return lambda garment: bool(compiled.search(garment.material or ""))


def _sort_rules(rules: Iterable[ClassificationRule]) -> Tuple[ClassificationRule, ...]:
    return tuple(sorted(rules, key=lambda rule: -rule.priority))


@dataclass(frozen=True)
class RuleSet:
    """Immutable rule list kept sorted by descending priority.

    Equal priorities keep their insertion order. Rule names are unique so that
    rules can be looked up and removed by name.
    """

    rules: Tuple[ClassificationRule, ...] = ()
    default_category: str = OVERSHIRT

    def __post_init__(self) -> None:
        names = [rule.name for rule in self.rules]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate classification rule names: {duplicates}")
        if self.default_category not in CATEGORIES:
            raise ValueError(f"Unsupported default category '{self.default_category}'")
        object.__setattr__(self, "rules", _sort_rules(self.rules))

    def __iter__(self) -> Iterator[ClassificationRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def get(self, name: str) -> Optional[ClassificationRule]:
        return next((rule for rule in self.rules if rule.name == name), None)

    def with_rule(self, rule: ClassificationRule) -> "RuleSet":
        """Return a new rule set including ``rule``, re-sorted by priority."""

        return RuleSet(rules=self.rules + (rule,), default_category=self.default_category)

    def without_rule(self, name: str) -> "RuleSet":
        if self.get(name) is None:
            raise KeyError(name)
        remaining = tuple(rule for rule in self.rules if rule.name != name)
        return RuleSet(rules=remaining, default_category=self.default_category)

    def first_match(self, garment: Garment) -> Optional[ClassificationRule]:
        for rule in self.rules:
            if rule.matches(garment):
                return rule
        return None


def build_rule_set(rules: Iterable[ClassificationRule], default_category: str = OVERSHIRT) -> RuleSet:
    """Build a sorted, immutable rule set from rules given in any order."""

    return RuleSet(rules=tuple(rules), default_category=default_category)


_light_layer_name = name_matches("layer", "light", "casual")
_casual_fabric = material_matches("denim", "corduroy", "cotton")

DEFAULT_RULE_SET = build_rule_set(
    [
        ClassificationRule(
            name="structured_outerwear",
            priority=10,
            category=JACKET,
            matches=name_matches("coat", "blazer", "sportcoat", "pea coat", "trench", "mac coat"),
        ),
        ClassificationRule(
            name="heavy_outerwear",
            priority=9,
            category=JACKET,
            matches=name_matches("moto jacket", "leather jacket", "bomber", "gilet", "vest"),
        ),
        ClassificationRule(
            name="formal_outerwear",
            priority=8,
            category=JACKET,
            matches=lambda garment: garment.effective_formality >= 7 and "jacket" in (garment.name or "").lower(),
        ),
        ClassificationRule(
            name="structured_jacket_keywords",
            priority=7,
            category=JACKET,
            matches=name_matches("suit jacket", "dinner jacket", "tuxedo", "smoking jacket"),
        ),
        ClassificationRule(
            name="knit_outerwear",
            priority=5,
            category=OVERSHIRT,
            matches=name_matches("cardigan", "sweater", "knit", "pullover", "hoodie", "sweatshirt"),
        ),
        ClassificationRule(
            name="casual_layering",
            priority=4,
            category=OVERSHIRT,
            matches=name_matches("shacket", "overshirt", "shirt jacket", "flannel", "chambray"),
        ),
        ClassificationRule(
            name="light_layers",
            priority=3,
            category=OVERSHIRT,
            matches=lambda garment: garment.effective_formality <= 6
            and (_light_layer_name(garment) or _casual_fabric(garment)),
        ),
        ClassificationRule(
            name="casual_formality_score",
            priority=2,
            category=OVERSHIRT,
            matches=lambda garment: garment.effective_formality <= 5,
        ),
    ]
)


def get_classification_result(garment: Garment, rule_set: RuleSet = DEFAULT_RULE_SET) -> ClassificationResult:
    rule = rule_set.first_match(garment)
    if rule is None:
        category = rule_set.default_category
        return ClassificationResult(
            category=category,
            reason=f"Classified as {category} by default fallback",
            rule=DEFAULT_RULE_NAME,
            confidence=DEFAULT_CONFIDENCE,
        )
    logger.debug("garment %s matched rule %s", garment.item_id, rule.name)
    return ClassificationResult(
        category=rule.category,
        reason=f"Classified as {rule.category} by rule: {rule.name}",
        rule=rule.name,
        confidence=rule.priority / 10,
    )


def classify_item(garment: Garment, rule_set: RuleSet = DEFAULT_RULE_SET) -> str:
    """Return the category of the highest-priority matching rule."""

    return get_classification_result(garment, rule_set).category


def get_classification_reason(garment: Garment, rule_set: RuleSet = DEFAULT_RULE_SET) -> str:
    return get_classification_result(garment, rule_set).reason


def classify_items(
    garments: Iterable[Garment], rule_set: RuleSet = DEFAULT_RULE_SET
) -> List[Dict[str, object]]:
    """Classify several garments, keeping each garment next to its verdict."""

    classified: List[Dict[str, object]] = []
    for garment in garments:
        result = get_classification_result(garment, rule_set)
        classified.append({"item": garment, "category": result.category, "reason": result.reason})
    return classified


def rule_statistics(rule_set: RuleSet = DEFAULT_RULE_SET) -> Dict[str, float]:
    priorities = [rule.priority for rule in rule_set]
    return {
        "total_rules": len(rule_set),
        "jacket_rules": sum(1 for rule in rule_set if rule.category == JACKET),
        "overshirt_rules": sum(1 for rule in rule_set if rule.category == OVERSHIRT),
        "average_priority": fmean(priorities) if priorities else 0,
    }


__all__ = [
    "ClassificationRule",
    "ClassificationResult",
    "RuleSet",
    "DEFAULT_RULE_SET",
    "build_rule_set",
    "name_matches",
    "material_matches",
    "classify_item",
    "get_classification_reason",
    "get_classification_result",
    "classify_items",
    "rule_statistics",
]
