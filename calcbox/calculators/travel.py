"""Fuel economy, commuting, EV charging and trip time.

Commute costs are built up from a single day's round trip and scaled with
the usual calendar approximations: 4.33 weeks per month and 52 weeks per
year.  Emissions use U.S. averages of 19.6 lb CO2 per gallon of gasoline and
0.85 lb CO2 per kWh drawn from the grid.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Union

from .body import UnitSystem

WEEKS_PER_MONTH = 4.33
WEEKS_PER_YEAR = 52.0
CO2_LB_PER_GALLON = 19.6
CO2_LB_PER_KWH = 0.85


class VehicleType(str, Enum):
    GAS = "gas"
    ELECTRIC = "electric"


def fuel_economy(miles: float, gallons: float, fuel_cost: float = 0.0) -> Dict[str, float]:
    """Miles per gallon for a fill-up plus the cost per mile and per gallon."""
    mpg = miles / gallons if miles > 0 and gallons > 0 else 0.0
    return {
        "mpg": mpg,
        "cost_per_mile": fuel_cost / miles if fuel_cost > 0 and miles > 0 else 0.0,
        "cost_per_gallon": fuel_cost / gallons if fuel_cost > 0 and gallons > 0 else 0.0,
    }


def commute_cost(
    daily_miles: float,
    work_days: float,
    vehicle: Union[VehicleType, str] = VehicleType.GAS,
    mpg: float = 0.0,
    gas_price: float = 0.0,
    miles_per_kwh: float = 0.0,
    charging_efficiency_pct: float = 0.0,
    electricity_rate: float = 0.0,
) -> Dict[str, float]:
    """Energy, cost and emissions of driving to work.

    Returns daily energy use (``daily_energy``, gallons or kWh), ``daily``,
    ``weekly``, ``monthly`` and ``yearly`` cost, the matching mileage figures
    and ``co2_lb_per_year``.
    """
    if VehicleType(vehicle) is VehicleType.GAS:
        energy = daily_miles / mpg if mpg > 0 else 0.0
        daily = energy * gas_price
        co2_rate = CO2_LB_PER_GALLON
    else:
        if miles_per_kwh > 0 and charging_efficiency_pct > 0:
            energy = (daily_miles / miles_per_kwh) / (charging_efficiency_pct / 100.0)
        else:
            energy = 0.0
        daily = energy * electricity_rate
        co2_rate = CO2_LB_PER_KWH

    weekly = daily * work_days
    weekly_miles = daily_miles * work_days
    return {
        "daily_energy": energy,
        "daily": daily,
        "weekly": weekly,
        "monthly": weekly * WEEKS_PER_MONTH,
        "yearly": weekly * WEEKS_PER_YEAR,
        "weekly_miles": weekly_miles,
        "monthly_miles": weekly_miles * WEEKS_PER_MONTH,
        "yearly_miles": weekly_miles * WEEKS_PER_YEAR,
        "co2_lb_per_year": energy * work_days * WEEKS_PER_YEAR * co2_rate,
    }


class ChargeLevel(str, Enum):
    HOME = "home"
    PUBLIC = "public"
    FAST_CHARGING = "fast_charging"

    @property
    def default_rate(self) -> float:
        """Typical $/kWh when no electricity rate is entered."""
        return _CHARGE_RATES[self]


_CHARGE_RATES = {
    ChargeLevel.HOME: 0.13,
    ChargeLevel.PUBLIC: 0.20,
    ChargeLevel.FAST_CHARGING: 0.35,
}

LEVEL2_KW = 7.2
DC_FAST_KW = 150.0
# 12,000 miles a year at 25 MPG and $3.50/gal
GAS_YEARLY_COST = 12000 / 25 * 3.50

# (model, battery kWh, miles per kWh)
EV_MODELS = (
    ("Tesla Model 3 Long Range", 82.0, 4.0),
    ("Tesla Model Y", 75.0, 3.8),
    ("Chevrolet Bolt EV", 65.0, 3.9),
    ("Ford Mustang Mach-E", 88.0, 3.5),
    ("Nissan Leaf Plus", 62.0, 3.8),
    ("Volkswagen ID.4", 82.0, 3.4),
    ("Hyundai Ioniq 5", 77.4, 3.7),
    ("Kia EV6", 77.4, 3.6),
    ("Rivian R1T", 135.0, 2.1),
    ("Ford F-150 Lightning", 131.0, 2.4),
)


def ev_charging_cost(
    battery_kwh: float,
    miles_per_kwh: float,
    daily_miles: float,
    electricity_rate: float,
    current_pct: float = 20.0,
    target_pct: float = 80.0,
    charging_efficiency_pct: float = 90.0,
) -> Dict[str, float]:
    """Cost of charging an electric vehicle.

    A session from ``current_pct`` to ``target_pct`` draws
    ``battery · (target − current) / 100`` kWh divided by the charging
    efficiency.  Daily driving draws ``miles / miles_per_kwh`` divided by the
    same efficiency and is scaled with 30 days a month and 365 a year.
    Charging times assume a 7.2 kW Level 2 charger and a 150 kW DC fast
    charger.  ``gas_savings`` compares the yearly cost with a 25 MPG car
    driven 12,000 miles at $3.50/gal.
    """
    efficiency = charging_efficiency_pct / 100.0
    if battery_kwh > 0 and efficiency > 0:
        session_kwh = max(0.0, battery_kwh * (target_pct - current_pct) / 100.0 / efficiency)
    else:
        session_kwh = 0.0
    if miles_per_kwh > 0 and efficiency > 0:
        daily_kwh = daily_miles / miles_per_kwh / efficiency
    else:
        daily_kwh = 0.0
    daily = daily_kwh * electricity_rate
    yearly = daily * 365
    return {
        "kwh_per_charge": session_kwh,
        "cost_per_charge": session_kwh * electricity_rate,
        "daily_kwh": daily_kwh,
        "daily": daily,
        "monthly_kwh": daily_kwh * 30,
        "monthly": daily * 30,
        "yearly_kwh": daily_kwh * 365,
        "yearly": yearly,
        "cost_per_mile": daily / daily_miles if daily_miles > 0 else 0.0,
        "full_charge_range": battery_kwh * miles_per_kwh,
        "level2_hours": session_kwh / LEVEL2_KW,
        "dc_fast_hours": session_kwh / DC_FAST_KW,
        "gas_yearly": GAS_YEARLY_COST,
        "gas_savings": GAS_YEARLY_COST - yearly,
    }


STOP_MINUTES = 15.0
# rough fuel use: 25 MPG, or 10 km per litre
TRIP_FUEL_ECONOMY = {UnitSystem.IMPERIAL: 25.0, UnitSystem.METRIC: 10.0}


def trip_time(
    distance: float,
    speed: float,
    stops: float = 0.0,
    stop_minutes: float = STOP_MINUTES,
    unit_system: Union[UnitSystem, str] = UnitSystem.IMPERIAL,
) -> Dict[str, float]:
    """Driving time for a trip plus time spent at stops, in hours.

    ``distance`` and ``speed`` are miles and mph for imperial, kilometres
    and km/h for metric; ``fuel`` is gallons or litres accordingly.
    ``hours`` and ``minutes`` split the total for display, truncated to the
    whole minute.
    """
    driving = distance / speed if distance > 0 and speed > 0 else 0.0
    stopped = stops * stop_minutes / 60.0 if stops >= 0 and stop_minutes >= 0 else 0.0
    total = driving + stopped
    total_minutes = int(round(total * 60, 6))
    return {
        "driving_hours": driving,
        "stop_hours": stopped,
        "total_hours": total,
        "hours": float(total_minutes // 60),
        "minutes": float(total_minutes % 60),
        "fuel": distance / TRIP_FUEL_ECONOMY[UnitSystem(unit_system)] if distance > 0 else 0.0,
    }


__all__ = [
    "CO2_LB_PER_GALLON",
    "CO2_LB_PER_KWH",
    "ChargeLevel",
    "EV_MODELS",
    "VehicleType",
    "WEEKS_PER_MONTH",
    "WEEKS_PER_YEAR",
    "commute_cost",
    "ev_charging_cost",
    "fuel_economy",
    "trip_time",
]
