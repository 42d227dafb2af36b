"""Domain models for the person whose energy needs are computed."""

from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from track_my_macros.units import Centimeters, Kilograms, YearsOld


class Sex(str, Enum):
    """Biological sex, used for the BMR offset."""

    MALE = "male"
    FEMALE = "female"


class ActivityRate(str, Enum):
    """Ordinal activity level, from least to most active."""

    SEDENTARY = "sedentary"  # little to no exercise, desk job
    LIGHTLY_ACTIVE = "lightly_active"  # light exercise 1-3 days / week
    MODERATELY_ACTIVE = "moderately_active"  # moderate exercise 3-5 days / week
    VERY_ACTIVE = "very_active"  # heavy exercise 6-7 days / week
    EXTREMELY_ACTIVE = "extremely_active"  # strenuous training 2x / day


ACTIVITY_MULTIPLIERS = MappingProxyType(
    {
        ActivityRate.SEDENTARY: 1.2,
        ActivityRate.LIGHTLY_ACTIVE: 1.375,
        ActivityRate.MODERATELY_ACTIVE: 1.55,
        ActivityRate.VERY_ACTIVE: 1.725,
        ActivityRate.EXTREMELY_ACTIVE: 1.9,
    }
)

# Grams of protein per kg of body weight.
PROTEIN_FACTORS = MappingProxyType(
    {
        ActivityRate.SEDENTARY: 1.0,
        ActivityRate.LIGHTLY_ACTIVE: 1.2,
        ActivityRate.MODERATELY_ACTIVE: 1.4,
        ActivityRate.VERY_ACTIVE: 1.8,
        ActivityRate.EXTREMELY_ACTIVE: 2.2,
    }
)


class Human(BaseModel):
    """Biometric attributes of a person."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    weight: Kilograms = Field(gt=0)
    height: Centimeters = Field(gt=0)
    age: YearsOld = Field(ge=0)
    sex: Sex
    activity_rate: ActivityRate

    def with_activity_rate(self, activity_rate: ActivityRate) -> "Human":
        """Return a copy of this person with another activity level."""
        return Human.model_validate(
            {**self.model_dump(), "activity_rate": activity_rate}
        )
