"""Meal summaries with per-portion macro breakdown."""

from dataclasses import dataclass

from track_my_macros.domain.food import MacroProfile, Meal
from track_my_macros.units import Milligrams


@dataclass(frozen=True)
class PortionSnapshot:
    """Snapshot of a meal portion with macros."""

    name: str
    weight_mg: Milligrams
    macros: MacroProfile


@dataclass(frozen=True)
class MealSummary:
    """Totals and portion snapshots for a meal."""

    total: MacroProfile
    items: list[PortionSnapshot]


def summarize_meal(meal: Meal) -> MealSummary:
    """Compute totals and snapshots for every portion of a meal."""
    items = []
    total = MacroProfile(calories=0, protein_g=0, fat_g=0, carbs_g=0)
    for portion in meal.portions:
        macros = portion.macros()
        items.append(
            PortionSnapshot(
                name=portion.food.name,
                weight_mg=portion.weight,
                macros=macros,
            )
        )
        total = MacroProfile(
            calories=total.calories + macros.calories,
            protein_g=total.protein_g + macros.protein_g,
            fat_g=total.fat_g + macros.fat_g,
            carbs_g=total.carbs_g + macros.carbs_g,
        )
    return MealSummary(total=total, items=items)
