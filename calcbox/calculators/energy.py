"""Energy balance calculators: BMR/TDEE, exercise burn and drink calories.

Basal metabolic rate
--------------------

Three published formulas are supported.  Weight is in kilograms, height in
centimetres and age in years:

* Mifflin-St Jeor: ``10·kg + 6.25·cm − 5·age + 5`` (male) or ``− 161``
  (female).
* Harris-Benedict (revised): ``88.362 + 13.397·kg + 4.799·cm − 5.677·age``
  (male), ``447.593 + 9.247·kg + 3.098·cm − 4.330·age`` (female).
* Katch-McArdle: ``370 + 21.6·LBM`` where ``LBM = kg·(1 − body_fat/100)``.

Total daily energy expenditure multiplies BMR by an activity factor and the
daily target adds a goal adjustment, never dropping below 1200 calories.

Exercise and drinks
-------------------

Exercise burn uses metabolic equivalents:
``MET × intensity × kg × minutes / 60``.  Drink calories count 7 kcal per
gram of ethanol (density 0.789 g/ml) plus a rough per-type estimate of the
carbohydrate or mixer calories.

Example
-------

>>> round(bmr(weight_kg=79.4, height_cm=177.8, age=30), 2)
1760.25
>>> round(exercise_calories(weight_kg=70, minutes=60, activity="running"), 1)
560.0
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union

LB_TO_KG = 0.453592
IN_TO_CM = 2.54
MIN_TARGET_CALORIES = 1200.0
ETHANOL_DENSITY = 0.789  # g/ml
KCAL_PER_GRAM_ALCOHOL = 7.0


class BMRFormula(str, Enum):
    MIFFLIN_ST_JEOR = "mifflin_st_jeor"
    HARRIS_BENEDICT = "harris_benedict"
    KATCH_MCARDLE = "katch_mcardle"

    @property
    def requires_body_fat(self) -> bool:
        return self is BMRFormula.KATCH_MCARDLE


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"

    @property
    def multiplier(self) -> float:
        return _ACTIVITY_MULTIPLIERS[self]


_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}


class Goal(str, Enum):
    MAINTAIN = "maintain"
    MILD_LOSS = "mild_loss"
    MODERATE_LOSS = "moderate_loss"
    AGGRESSIVE_LOSS = "aggressive_loss"
    MILD_GAIN = "mild_gain"
    MODERATE_GAIN = "moderate_gain"

    @property
    def calorie_adjustment(self) -> float:
        return _GOALS[self][0]

    @property
    def weekly_change_lb(self) -> float:
        return _GOALS[self][1]


# goal -> (daily calorie adjustment, expected weekly change in pounds)
_GOALS = {
    Goal.MAINTAIN: (0.0, 0.0),
    Goal.MILD_LOSS: (-250.0, -0.5),
    Goal.MODERATE_LOSS: (-500.0, -1.0),
    Goal.AGGRESSIVE_LOSS: (-750.0, -1.5),
    Goal.MILD_GAIN: (250.0, 0.5),
    Goal.MODERATE_GAIN: (500.0, 1.0),
}


class Activity(str, Enum):
    RUNNING = "running"
    WALKING = "walking"
    CYCLING = "cycling"
    SWIMMING = "swimming"
    WEIGHT_LIFTING = "weight_lifting"
    YOGA = "yoga"
    DANCING = "dancing"
    HIKING = "hiking"
    BASKETBALL = "basketball"
    TENNIS = "tennis"

    @property
    def met(self) -> float:
        return _MET_VALUES[self]


_MET_VALUES = {
    Activity.RUNNING: 8.0,
    Activity.WALKING: 3.8,
    Activity.CYCLING: 6.8,
    Activity.SWIMMING: 8.3,
    Activity.WEIGHT_LIFTING: 6.0,
    Activity.YOGA: 2.5,
    Activity.DANCING: 4.8,
    Activity.HIKING: 6.0,
    Activity.BASKETBALL: 8.0,
    Activity.TENNIS: 7.3,
}


class Intensity(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    VIGOROUS = "vigorous"

    @property
    def multiplier(self) -> float:
        return {"light": 0.8, "moderate": 1.0, "vigorous": 1.3}[self.value]


class DrinkType(str, Enum):
    BEER = "beer"
    WINE = "wine"
    SPIRITS = "spirits"
    COCKTAIL = "cocktail"
    CUSTOM = "custom"

    @property
    def typical_abv(self) -> float:
        return _DRINKS[self][0]

    @property
    def typical_serving_ml(self) -> float:
        return _DRINKS[self][1]


# drink -> (typical ABV %, typical serving ml)
_DRINKS = {
    DrinkType.BEER: (5.0, 355.0),
    DrinkType.WINE: (12.0, 148.0),
    DrinkType.SPIRITS: (40.0, 44.0),
    DrinkType.COCKTAIL: (15.0, 120.0),
    DrinkType.CUSTOM: (0.0, 0.0),
}


def bmr(
    weight_kg: float,
    height_cm: float,
    age: float,
    sex: Union[Sex, str] = Sex.MALE,
    formula: Union[BMRFormula, str] = BMRFormula.MIFFLIN_ST_JEOR,
    body_fat_pct: float = 0.0,
) -> float:
    """Basal metabolic rate in kcal/day for the chosen formula."""
    formula = BMRFormula(formula)
    sex = Sex(sex)
    if formula is BMRFormula.MIFFLIN_ST_JEOR:
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        return base + 5 if sex is Sex.MALE else base - 161
    if formula is BMRFormula.HARRIS_BENEDICT:
        if sex is Sex.MALE:
            return 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age
        return 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age
    lean_body_mass = weight_kg * (1 - body_fat_pct / 100)
    return 370 + 21.6 * lean_body_mass


def daily_calories(
    weight_kg: float,
    height_cm: float,
    age: float,
    sex: Union[Sex, str] = Sex.MALE,
    formula: Union[BMRFormula, str] = BMRFormula.MIFFLIN_ST_JEOR,
    activity: Union[ActivityLevel, str] = ActivityLevel.MODERATELY_ACTIVE,
    goal: Union[Goal, str] = Goal.MAINTAIN,
    body_fat_pct: float = 0.0,
) -> Dict[str, float]:
    """Return ``{"bmr", "tdee", "target"}`` for the profile.

    The target is floored at :data:`MIN_TARGET_CALORIES` whatever the goal.
    When weight is missing the whole record is zero, so the UI shows nothing
    rather than the floor.
    """
    if weight_kg <= 0:
        return {"bmr": 0.0, "tdee": 0.0, "target": 0.0}
    base = bmr(weight_kg, height_cm, age, sex, formula, body_fat_pct)
    tdee = base * ActivityLevel(activity).multiplier
    target = max(MIN_TARGET_CALORIES, tdee + Goal(goal).calorie_adjustment)
    return {"bmr": base, "tdee": tdee, "target": target}


def weeks_to_change(goal: Union[Goal, str], pounds: float = 10.0) -> float:
    """Weeks needed to gain or lose ``pounds`` at the goal's weekly rate (0 for maintain)."""
    rate = abs(Goal(goal).weekly_change_lb)
    if rate == 0:
        return 0.0
    return pounds / rate


def exercise_calories(
    weight_kg: float,
    minutes: float,
    activity: Union[Activity, str] = Activity.WALKING,
    intensity: Union[Intensity, str] = Intensity.MODERATE,
) -> float:
    """Calories burned by an activity of the given duration."""
    if weight_kg <= 0 or minutes <= 0:
        return 0.0
    met = Activity(activity).met * Intensity(intensity).multiplier
    return met * weight_kg * (minutes / 60.0)


def drink_calories(
    drink: Union[DrinkType, str] = DrinkType.BEER,
    quantity: float = 1.0,
    abv: Optional[float] = None,
    serving_ml: Optional[float] = None,
) -> Dict[str, float]:
    """Calories for ``quantity`` drinks.

    ``abv`` and ``serving_ml`` fall back to the drink type's typical values.
    The returned mapping holds ``alcohol_grams``, ``alcohol_calories`` and
    ``per_drink`` for a single drink plus ``total`` for the whole quantity.
    """
    drink = DrinkType(drink)
    abv = drink.typical_abv if abv is None else abv
    serving = drink.typical_serving_ml if serving_ml is None else serving_ml

    alcohol_grams = serving * (abv / 100) * ETHANOL_DENSITY
    alcohol_kcal = alcohol_grams * KCAL_PER_GRAM_ALCOHOL
    if drink is DrinkType.BEER:
        other = serving * 0.1  # carbs
    elif drink is DrinkType.WINE:
        other = serving * 0.2  # residual sugar
    elif drink is DrinkType.COCKTAIL:
        other = 100.0  # mixers
    else:
        other = 0.0
    per_drink = alcohol_kcal + other
    return {
        "alcohol_grams": alcohol_grams,
        "alcohol_calories": alcohol_kcal,
        "per_drink": per_drink,
        "total": per_drink * max(0.0, quantity),
    }


def pounds_to_kg(pounds: float) -> float:
    return pounds * LB_TO_KG


def inches_to_cm(inches: float) -> float:
    return inches * IN_TO_CM


__all__ = [
    "Activity",
    "ActivityLevel",
    "BMRFormula",
    "DrinkType",
    "Goal",
    "Intensity",
    "MIN_TARGET_CALORIES",
    "Sex",
    "bmr",
    "daily_calories",
    "drink_calories",
    "exercise_calories",
    "inches_to_cm",
    "pounds_to_kg",
    "weeks_to_change",
]
