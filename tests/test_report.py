"""Tests for report formatting."""

from track_my_macros.domain.food import Food, Meal
from track_my_macros.domain.goals import FixedGoal, PercentageGoal
from track_my_macros.domain.human import ActivityRate, Human
from track_my_macros.report import format_energy, format_goal, format_meal_summary
from track_my_macros.services.energy import bmr, tdee, tdee_by_activity
from track_my_macros.services.meals import summarize_meal


def test_format_meal_summary(peanuts: Food, scrambled_eggs: Food) -> None:
    summary = summarize_meal(Meal.from_pairs([(peanuts, 20), (scrambled_eggs, 120)]))

    text = format_meal_summary(summary)

    assert text.splitlines() == [
        "Total: 281 kcal, 20.9P / 16.6F / 12.2C",
        "- Peanuts, Raw: 20mg, 122.08 kcal (5.2P/9.8F/3.2C)",
        "- Eggs, Scrambled: 120mg, 159.36 kcal (15.7P/6.7F/9.0C)",
    ]


def test_format_energy(kevin: Human) -> None:
    text = format_energy(bmr(kevin), tdee(kevin), tdee_by_activity(kevin))
    lines = text.splitlines()

    assert lines[0] == "BMR: 1888 kcal"
    assert lines[1] == "TDEE: 2926 kcal"
    assert len(lines) == 2 + len(ActivityRate)
    assert lines[2] == "- sedentary: 2265 kcal"


def test_format_energy_without_breakdown(kevin: Human) -> None:
    assert len(format_energy(bmr(kevin), tdee(kevin)).splitlines()) == 2


def test_format_goal_variants() -> None:
    fixed = format_goal(FixedGoal(fat=70, protein=98, carbs=475))
    percentage = format_goal(PercentageGoal(fat=21, protein=13, carbs=66))

    assert fixed == "Goal: 98 g protein, 70 g fat, 475 g carbs (2922 kcal)"
    assert percentage == "Goal: 13% protein, 21% fat, 66% carbs"
