"""Named numeric types for the units used across the calculator."""

from typing import NewType

Kcal = NewType("Kcal", float)
MilligramsPer100Gram = NewType("MilligramsPer100Gram", int)
Milligrams = NewType("Milligrams", int)
Grams = NewType("Grams", int)
Kilograms = NewType("Kilograms", float)
Centimeters = NewType("Centimeters", float)
YearsOld = NewType("YearsOld", int)
Percent = NewType("Percent", int)
