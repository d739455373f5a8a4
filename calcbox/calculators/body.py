"""Body mass index calculator.

BMI is computed from weight and height in either imperial or metric units:

* Imperial: ``BMI = weight_lb × 703 / height_in²`` where the height is
  entered as feet plus inches.
* Metric: ``BMI = weight_kg / height_m²`` with the height entered in
  centimetres.

The healthy range used for the ideal-weight helper is BMI 18.5 to 24.9.

Example
-------

>>> round(bmi(weight=150, height_feet=5, height_inches=10), 2)
21.52
>>> round(bmi(weight=70, height_cm=175, unit_system="metric"), 2)
22.86
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Union

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9
IMPERIAL_FACTOR = 703.0


class UnitSystem(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"


def _height_squared(
    unit_system: UnitSystem, height_feet: float, height_inches: float, height_cm: float
) -> float:
    if unit_system is UnitSystem.IMPERIAL:
        if height_feet <= 0 and height_inches <= 0:
            return 0.0
        total_inches = height_feet * 12 + height_inches
        return total_inches ** 2
    if height_cm <= 0:
        return 0.0
    return (height_cm / 100.0) ** 2


def bmi(
    weight: float,
    height_feet: float = 0.0,
    height_inches: float = 0.0,
    height_cm: float = 0.0,
    unit_system: Union[UnitSystem, str] = UnitSystem.IMPERIAL,
) -> float:
    """Return the body mass index, or 0 when the inputs cannot produce one.

    Parameters
    ----------
    weight : float
        Pounds for imperial, kilograms for metric.  Must be positive.
    height_feet, height_inches : float
        Imperial height.  At least one component must be positive.
    height_cm : float
        Metric height in centimetres.
    unit_system : UnitSystem or str
        ``"imperial"`` (default) or ``"metric"``.
    """
    system = UnitSystem(unit_system)
    if weight <= 0:
        return 0.0
    h2 = _height_squared(system, height_feet, height_inches, height_cm)
    if h2 <= 0:
        return 0.0
    if system is UnitSystem.IMPERIAL:
        return weight * IMPERIAL_FACTOR / h2
    return weight / h2


def healthy_weight_range(
    height_feet: float = 0.0,
    height_inches: float = 0.0,
    height_cm: float = 0.0,
    unit_system: Union[UnitSystem, str] = UnitSystem.IMPERIAL,
) -> Dict[str, float]:
    """Weight bounds (in the input unit system) for a healthy BMI at this height."""
    system = UnitSystem(unit_system)
    h2 = _height_squared(system, height_feet, height_inches, height_cm)
    if h2 <= 0:
        return {"min": 0.0, "max": 0.0}
    factor = IMPERIAL_FACTOR if system is UnitSystem.IMPERIAL else 1.0
    return {
        "min": HEALTHY_BMI_MIN * h2 / factor,
        "max": HEALTHY_BMI_MAX * h2 / factor,
    }


def weight_to_healthy(weight: float, bmi_value: float, weight_range: Dict[str, float]) -> float:
    """Distance from the healthy range: pounds/kilos to gain if under, to lose if over.

    Returns 0 inside the range or when no BMI could be computed.
    """
    if bmi_value <= 0:
        return 0.0
    if bmi_value < HEALTHY_BMI_MIN:
        return weight_range["min"] - weight
    if bmi_value > HEALTHY_BMI_MAX:
        return weight - weight_range["max"]
    return 0.0


__all__ = [
    "HEALTHY_BMI_MAX",
    "HEALTHY_BMI_MIN",
    "UnitSystem",
    "bmi",
    "healthy_weight_range",
    "weight_to_healthy",
]
