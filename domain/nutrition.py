"""
Nutrition value objects shared by the recipe catalog, the meal plan
repository and the aggregator.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

ZERO = Decimal("0")


def as_decimal(value: Any) -> Decimal:
    """Coerce a nullable numeric nutrition value; missing values count as zero."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition record of a single recipe. Any field may be absent."""

    calories: Optional[Decimal] = None
    protein: Optional[Decimal] = None
    carbohydrates: Optional[Decimal] = None
    fat: Optional[Decimal] = None
    fiber: Optional[Decimal] = None
    sugar: Optional[Decimal] = None
    sodium: Optional[Decimal] = None

    @classmethod
    def from_record(cls, record: Any) -> "NutritionFacts":
        return cls(
            calories=getattr(record, "calories", None),
            protein=getattr(record, "protein", None),
            carbohydrates=getattr(record, "carbohydrates", None),
            fat=getattr(record, "fat", None),
            fiber=getattr(record, "fiber", None),
            sugar=getattr(record, "sugar", None),
            sodium=getattr(record, "sodium", None),
        )


@dataclass(frozen=True)
class NutritionTotals:
    """The four aggregates cached on a meal plan header."""

    calories: Decimal = ZERO
    protein: Decimal = ZERO
    carbs: Decimal = ZERO
    fat: Decimal = ZERO

    def add(self, facts: Optional[NutritionFacts]) -> "NutritionTotals":
        if facts is None:
            return self
        return NutritionTotals(
            calories=self.calories + as_decimal(facts.calories),
            protein=self.protein + as_decimal(facts.protein),
            carbs=self.carbs + as_decimal(facts.carbohydrates),
            fat=self.fat + as_decimal(facts.fat),
        )
