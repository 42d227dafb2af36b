"""Domain models for foods, portions and meals."""

from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from track_my_macros.units import Kcal, Milligrams, MilligramsPer100Gram

CARBOHYDRATES_CALORIES_PER_GRAM = 4.0
FATS_CALORIES_PER_GRAM = 9.0
PROTEINS_CALORIES_PER_GRAM = 4.0

# Densities are mg per 100 g, so weight * density / 100_000 yields grams.
_MILLIGRAMS_PER_100_GRAMS = 100_000


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient breakdown of a portion or a meal."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


class Food(BaseModel):
    """A food described by its macro densities in mg per 100 g."""

    model_config = ConfigDict(frozen=True)

    name: str
    carbs: MilligramsPer100Gram = Field(ge=0)
    fats: MilligramsPer100Gram = Field(ge=0)
    prots: MilligramsPer100Gram = Field(ge=0)

    def macros(self, weight: Milligrams) -> MacroProfile:
        """Return grams of each macro and the energy for a consumed weight."""
        carbs_g = weight * self.carbs / _MILLIGRAMS_PER_100_GRAMS
        fat_g = weight * self.fats / _MILLIGRAMS_PER_100_GRAMS
        protein_g = weight * self.prots / _MILLIGRAMS_PER_100_GRAMS
        return MacroProfile(
            calories=carbs_g * CARBOHYDRATES_CALORIES_PER_GRAM
            + fat_g * FATS_CALORIES_PER_GRAM
            + protein_g * PROTEINS_CALORIES_PER_GRAM,
            protein_g=protein_g,
            fat_g=fat_g,
            carbs_g=carbs_g,
        )

    def calculate_calories(self, weight: Milligrams) -> Kcal:
        """Return the energy of the given weight of this food."""
        return Kcal(self.macros(weight).calories)


class Portion(BaseModel):
    """A weight of a specific food."""

    model_config = ConfigDict(frozen=True)

    food: Food
    weight: Milligrams = Field(ge=0)

    def macros(self) -> MacroProfile:
        return self.food.macros(self.weight)

    def calculate_calories(self) -> Kcal:
        return self.food.calculate_calories(self.weight)


class Meal(BaseModel):
    """Ordered collection of portions."""

    model_config = ConfigDict(frozen=True)

    portions: tuple[Portion, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Food, Milligrams]]) -> "Meal":
        """Build a meal from (food, weight) pairs, keeping their order."""
        return cls(
            portions=tuple(Portion(food=food, weight=weight) for food, weight in pairs)
        )

    def add(self, food: Food, weight: Milligrams) -> "Meal":
        """Return a new meal with one more portion appended."""
        return Meal(portions=(*self.portions, Portion(food=food, weight=weight)))

    def calculate_calories(self) -> Kcal:
        """Return the total energy of all portions."""
        return Kcal(
            sum((portion.calculate_calories() for portion in self.portions), 0.0)
        )
