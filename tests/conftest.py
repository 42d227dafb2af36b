"""Shared test fixtures."""

import logging

import pytest

from track_my_macros.domain.food import Food
from track_my_macros.domain.human import ActivityRate, Human, Sex


@pytest.fixture
def peanuts() -> Food:
    return Food(name="Peanuts, Raw", fats=49_200, carbs=16_100, prots=25_800)


@pytest.fixture
def scrambled_eggs() -> Food:
    return Food(name="Eggs, Scrambled", fats=5_600, carbs=7_500, prots=13_100)


@pytest.fixture
def kevin() -> Human:
    return Human(
        weight=70,
        height=170,
        age=24,
        sex=Sex.MALE,
        activity_rate=ActivityRate.MODERATELY_ACTIVE,
    )


@pytest.fixture
def karen() -> Human:
    return Human(
        weight=70,
        height=170,
        age=24,
        sex=Sex.FEMALE,
        activity_rate=ActivityRate.SEDENTARY,
    )


@pytest.fixture
def maurice() -> Human:
    return Human(
        weight=93,
        height=185,
        age=56,
        sex=Sex.MALE,
        activity_rate=ActivityRate.LIGHTLY_ACTIVE,
    )


@pytest.fixture(autouse=True)
def reset_app_logger():
    yield
    logger = logging.getLogger("track_my_macros")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
