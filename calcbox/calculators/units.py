"""Unit conversion for length, weight, temperature, volume, area and speed.

Linear quantities convert through a base unit (metre, kilogram, litre,
square metre, metre/second) using a pair of factor tables: one into the
base unit and one out of it.  Temperature is affine and converts through
Kelvin instead.

Example
-------

>>> round(convert(1, "mi", "km", "length"), 3)
1.609
>>> round(convert(100, "C", "F", "temperature"), 1)
212.0
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple, Union


class UnitCategory(str, Enum):
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    VOLUME = "volume"
    AREA = "area"
    SPEED = "speed"


# unit -> (factor into base unit, factor out of base unit)
_LINEAR: Dict[UnitCategory, Dict[str, Tuple[float, float]]] = {
    UnitCategory.LENGTH: {
        "mm": (0.001, 1000.0),
        "cm": (0.01, 100.0),
        "m": (1.0, 1.0),
        "km": (1000.0, 0.001),
        "in": (0.0254, 39.3701),
        "ft": (0.3048, 3.28084),
        "yd": (0.9144, 1.09361),
        "mi": (1609.344, 0.000621371),
    },
    UnitCategory.WEIGHT: {
        "g": (0.001, 1000.0),
        "kg": (1.0, 1.0),
        "oz": (0.0283495, 35.274),
        "lb": (0.453592, 2.20462),
        "st": (6.35029, 0.157473),
        "t": (1000.0, 0.001),
        "ton": (907.185, 0.00110231),
    },
    UnitCategory.VOLUME: {
        "ml": (0.001, 1000.0),
        "l": (1.0, 1.0),
        "fl_oz": (0.0295735, 33.814),
        "cup": (0.236588, 4.22675),
        "pt": (0.473176, 2.11338),
        "qt": (0.946353, 1.05669),
        "gal": (3.78541, 0.264172),
    },
    UnitCategory.AREA: {
        "m2": (1.0, 1.0),
        "km2": (1000000.0, 0.000001),
        "ft2": (0.092903, 10.7639),
        "yd2": (0.836127, 1.19599),
        "acre": (4046.86, 0.000247105),
        "ha": (10000.0, 0.0001),
    },
    UnitCategory.SPEED: {
        "m/s": (1.0, 1.0),
        "km/h": (0.277778, 3.6),
        "mph": (0.44704, 2.23694),
        "kn": (0.514444, 1.94384),
        "ft/s": (0.3048, 3.28084),
    },
}

_TEMPERATURE_UNITS = ("C", "F", "K")


def units_for(category: Union[UnitCategory, str]) -> List[str]:
    category = UnitCategory(category)
    if category is UnitCategory.TEMPERATURE:
        return list(_TEMPERATURE_UNITS)
    return list(_LINEAR[category])


def _to_kelvin(value: float, unit: str) -> float:
    if unit == "C":
        return value + 273.15
    if unit == "F":
        return (value - 32) * 5 / 9 + 273.15
    return value


def _from_kelvin(value: float, unit: str) -> float:
    if unit == "C":
        return value - 273.15
    if unit == "F":
        return (value - 273.15) * 9 / 5 + 32
    return value


def convert(
    value: float,
    from_unit: str,
    to_unit: str,
    category: Union[UnitCategory, str] = UnitCategory.LENGTH,
) -> float:
    """Convert ``value`` between two units of the same category.

    Negative quantities are not meaningful here and convert to 0.  Unknown
    unit symbols raise ``ValueError``.
    """
    category = UnitCategory(category)
    known = units_for(category)
    for unit in (from_unit, to_unit):
        if unit not in known:
            raise ValueError(f"Unknown {category.value} unit '{unit}' (expected one of {', '.join(known)})")
    if value < 0:
        return 0.0
    if category is UnitCategory.TEMPERATURE:
        return _from_kelvin(_to_kelvin(value, from_unit), to_unit)
    table = _LINEAR[category]
    return value * table[from_unit][0] * table[to_unit][1]


__all__ = ["UnitCategory", "convert", "units_for"]
