"""Daily macronutrient goals, in grams or as shares of calories."""

import logging
from dataclasses import dataclass
from typing import assert_never

from track_my_macros.domain.food import (
    CARBOHYDRATES_CALORIES_PER_GRAM,
    FATS_CALORIES_PER_GRAM,
    PROTEINS_CALORIES_PER_GRAM,
)
from track_my_macros.units import Grams, Kcal, Percent

FULL_SHARE = 100

_logger = logging.getLogger(__name__)


class ZeroCalorieGoalError(ValueError):
    """Raised when a goal without any calories is converted to percentages."""


@dataclass(frozen=True)
class FixedGoal:
    """Macro targets in grams per day."""

    fat: Grams
    protein: Grams
    carbs: Grams

    def __post_init__(self) -> None:
        if min(self.fat, self.protein, self.carbs) < 0:
            raise ValueError(f"Macro grams must be non-negative: {self}")

    @property
    def total_calories(self) -> Kcal:
        """Energy represented by the three macro targets."""
        return Kcal(
            self.fat * FATS_CALORIES_PER_GRAM
            + self.protein * PROTEINS_CALORIES_PER_GRAM
            + self.carbs * CARBOHYDRATES_CALORIES_PER_GRAM
        )


@dataclass(frozen=True)
class PercentageGoal:
    """Macro targets as integer shares of daily calories."""

    fat: Percent
    protein: Percent
    carbs: Percent

    def __post_init__(self) -> None:
        if min(self.fat, self.protein, self.carbs) < 0:
            raise ValueError(f"Percentages must be non-negative: {self}")
        if self.fat + self.protein + self.carbs != FULL_SHARE:
            raise ValueError(f"Percentages must sum to 100: {self}")


CalorieIntakeRepartition = FixedGoal | PercentageGoal


def to_percentage(goal: CalorieIntakeRepartition) -> PercentageGoal:
    """Express a goal as shares of calories.

    Fat and protein shares are truncated and carbohydrates take the remainder,
    so the result always sums to 100. Percentage goals are returned unchanged.
    """
    match goal:
        case PercentageGoal():
            return goal
        case FixedGoal(fat=fat, protein=protein):
            fat_calories = fat * FATS_CALORIES_PER_GRAM
            protein_calories = protein * PROTEINS_CALORIES_PER_GRAM
            total = goal.total_calories
            if total == 0:
                raise ZeroCalorieGoalError(f"Goal has no calories: {goal}")
            _logger.debug(
                "Goal calories: fat=%s protein=%s carbs=%s total=%s",
                fat_calories,
                protein_calories,
                total - fat_calories - protein_calories,
                total,
            )
            fat_pct = int(FULL_SHARE * fat_calories / total)
            protein_pct = int(FULL_SHARE * protein_calories / total)
            return PercentageGoal(
                fat=Percent(fat_pct),
                protein=Percent(protein_pct),
                carbs=Percent(FULL_SHARE - fat_pct - protein_pct),
            )
        case _:
            assert_never(goal)
