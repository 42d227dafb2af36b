"""Plain-text rendering of meals, energy needs and goals."""

from typing import assert_never

from track_my_macros.domain.goals import (
    CalorieIntakeRepartition,
    FixedGoal,
    PercentageGoal,
)
from track_my_macros.domain.human import ActivityRate
from track_my_macros.services.meals import MealSummary
from track_my_macros.units import Kcal


def format_meal_summary(summary: MealSummary) -> str:
    total = summary.total
    lines = [
        f"Total: {total.calories:.0f} kcal, "
        f"{total.protein_g:.1f}P / "
        f"{total.fat_g:.1f}F / "
        f"{total.carbs_g:.1f}C",
    ]
    for item in summary.items:
        macros = item.macros
        lines.append(
            f"- {item.name}: {item.weight_mg}mg, {macros.calories:.2f} kcal "
            f"({macros.protein_g:.1f}P/{macros.fat_g:.1f}F/{macros.carbs_g:.1f}C)"
        )
    return "\n".join(lines)


def format_energy(
    bmr: Kcal, tdee: Kcal, by_activity: dict[ActivityRate, Kcal] | None = None
) -> str:
    """Render BMR and TDEE, optionally for every activity level."""
    lines = [f"BMR: {bmr:.0f} kcal", f"TDEE: {tdee:.0f} kcal"]
    if by_activity:
        for rate, value in by_activity.items():
            label = rate.value.replace("_", " ")
            lines.append(f"- {label}: {value:.0f} kcal")
    return "\n".join(lines)


def format_goal(goal: CalorieIntakeRepartition) -> str:
    """Render either goal variant on a single line."""
    match goal:
        case FixedGoal():
            return (
                f"Goal: {goal.protein} g protein, {goal.fat} g fat, "
                f"{goal.carbs} g carbs ({goal.total_calories:.0f} kcal)"
            )
        case PercentageGoal():
            return (
                f"Goal: {goal.protein}% protein, {goal.fat}% fat, "
                f"{goal.carbs}% carbs"
            )
        case _:
            assert_never(goal)
