"""Energy expenditure and daily macro goal suggestions."""

import logging

from track_my_macros.domain.food import (
    CARBOHYDRATES_CALORIES_PER_GRAM,
    FATS_CALORIES_PER_GRAM,
    PROTEINS_CALORIES_PER_GRAM,
)
from track_my_macros.domain.goals import FixedGoal, PercentageGoal, to_percentage
from track_my_macros.domain.human import (
    ACTIVITY_MULTIPLIERS,
    PROTEIN_FACTORS,
    ActivityRate,
    Human,
    Sex,
)
from track_my_macros.units import Grams, Kcal

_SEX_OFFSETS = {
    Sex.MALE: 5.0,
    Sex.FEMALE: -161.0,
}

_logger = logging.getLogger(__name__)


def bmr(human: Human) -> Kcal:
    """Return the Basal Metabolic Rate, the energy needed at rest.

    Uses the Mifflin-St Jeor formula: https://pubmed.ncbi.nlm.nih.gov/2305711/.
    Race (the formula suits Caucasian adults), resting metabolic rate,
    genetics, stimulant usage, lean body mass, sleep and starvation all
    influence the real value but are not taken into account.
    """
    return Kcal(
        10.0 * human.weight
        + 6.25 * human.height
        + 5.0 * human.age
        + _SEX_OFFSETS[human.sex]
    )


def tdee(human: Human) -> Kcal:
    """Return the Total Daily Energy Expenditure."""
    return Kcal(bmr(human) * ACTIVITY_MULTIPLIERS[human.activity_rate])


def tdee_by_activity(human: Human) -> dict[ActivityRate, Kcal]:
    """Return the TDEE the person would have at each activity level."""
    return {rate: tdee(human.with_activity_rate(rate)) for rate in ActivityRate}


def suggest_daily_protein_needs(human: Human) -> Grams:
    return Grams(int(human.weight * PROTEIN_FACTORS[human.activity_rate]))


def suggest_daily_fat_needs(human: Human) -> Grams:
    return Grams(int(human.weight))


def suggest_fixed_goal(human: Human) -> FixedGoal:
    """Suggest daily macro grams; carbohydrates fill the remaining TDEE.

    See https://www.nasm.org/resources/calorie-calculator.
    """
    protein = suggest_daily_protein_needs(human)
    fat = suggest_daily_fat_needs(human)

    carbs_calories_needed = (
        tdee(human)
        - protein * PROTEINS_CALORIES_PER_GRAM
        - fat * FATS_CALORIES_PER_GRAM
    )
    if carbs_calories_needed < 0:
        _logger.warning(
            "Protein and fat exceed TDEE by %.1f kcal, no carbohydrates left",
            -carbs_calories_needed,
        )
        carbs_calories_needed = 0.0

    carbs = Grams(int(carbs_calories_needed / CARBOHYDRATES_CALORIES_PER_GRAM))
    _logger.debug("Fixed goal: fat=%s protein=%s carbs=%s", fat, protein, carbs)
    return FixedGoal(fat=fat, protein=protein, carbs=carbs)


def suggest_percentage_goal(human: Human) -> PercentageGoal:
    """Suggest daily macros as shares of calories."""
    return to_percentage(suggest_fixed_goal(human))
