"""Console entry point printing a sample report."""

import logging

from track_my_macros.app_logging import configure_logging
from track_my_macros.config import Settings
from track_my_macros.domain.food import Food, Meal
from track_my_macros.domain.human import ActivityRate, Human, Sex
from track_my_macros.report import format_energy, format_goal, format_meal_summary
from track_my_macros.services.energy import (
    bmr,
    suggest_fixed_goal,
    suggest_percentage_goal,
    tdee,
    tdee_by_activity,
)
from track_my_macros.services.meals import summarize_meal

_logger = logging.getLogger(__name__)

PEANUTS = Food(name="Peanuts, Raw", fats=49_200, carbs=16_100, prots=25_800)
SCRAMBLED_EGGS = Food(name="Eggs, Scrambled", fats=5_600, carbs=7_500, prots=13_100)


def sample_breakfast() -> Meal:
    return Meal.from_pairs([(PEANUTS, 20), (SCRAMBLED_EGGS, 120)])


def sample_human() -> Human:
    return Human(
        weight=81,
        height=176,
        age=28,
        sex=Sex.MALE,
        activity_rate=ActivityRate.LIGHTLY_ACTIVE,
    )


def main() -> None:
    settings = Settings()
    configure_logging(settings.effective_log_level)
    _logger.info("Report for %s environment", settings.environment)

    print("Track My Macros")
    print()
    print("Breakfast")
    print(format_meal_summary(summarize_meal(sample_breakfast())))
    print()

    human = sample_human()
    print("Daily needs")
    print(format_energy(bmr(human), tdee(human), tdee_by_activity(human)))
    print(format_goal(suggest_fixed_goal(human)))
    print(format_goal(suggest_percentage_goal(human)))


if __name__ == "__main__":
    main()
