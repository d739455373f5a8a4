"""Tests for fuel economy and commute costs."""

import math

from calcbox.calculators import travel


def test_fuel_economy():
    result = travel.fuel_economy(300, 10, 36)
    assert result["mpg"] == 30.0
    assert math.isclose(result["cost_per_mile"], 0.12)
    assert math.isclose(result["cost_per_gallon"], 3.6)


def test_fuel_economy_guards():
    assert travel.fuel_economy(300, 0)["mpg"] == 0.0
    assert travel.fuel_economy(300, 10)["cost_per_mile"] == 0.0


def test_gas_commute():
    """30 miles a day at 30 MPG and $3.50/gal, five days a week."""
    result = travel.commute_cost(30, 5, "gas", mpg=30, gas_price=3.5)
    assert math.isclose(result["daily_energy"], 1.0)
    assert math.isclose(result["daily"], 3.5)
    assert math.isclose(result["weekly"], 17.5)
    assert math.isclose(result["monthly"], 17.5 * 4.33)
    assert math.isclose(result["yearly"], 17.5 * 52)
    assert math.isclose(result["yearly_miles"], 30 * 5 * 52)
    assert math.isclose(result["co2_lb_per_year"], 1.0 * 5 * 52 * 19.6)


def test_electric_commute():
    """Charging losses increase the energy drawn from the grid."""
    result = travel.commute_cost(
        30, 5, travel.VehicleType.ELECTRIC, miles_per_kwh=3, charging_efficiency_pct=90, electricity_rate=0.15
    )
    kwh = 10 / 0.9
    assert math.isclose(result["daily_energy"], kwh)
    assert math.isclose(result["daily"], kwh * 0.15)
    assert math.isclose(result["co2_lb_per_year"], kwh * 5 * 52 * 0.85)


def test_commute_without_efficiency():
    assert travel.commute_cost(30, 5, "gas")["monthly"] == 0.0
    assert travel.commute_cost(30, 5, "electric", miles_per_kwh=3)["daily"] == 0.0


def test_ev_charging_cost():
    result = travel.ev_charging_cost(75, 3.75, 30, 0.15, charging_efficiency_pct=100)
    assert math.isclose(result["kwh_per_charge"], 45)
    assert math.isclose(result["cost_per_charge"], 6.75)
    assert math.isclose(result["daily_kwh"], 8)
    assert math.isclose(result["monthly"], 8 * 0.15 * 30)
    assert math.isclose(result["yearly"], 8 * 0.15 * 365)
    assert math.isclose(result["cost_per_mile"], 0.04)
    assert math.isclose(result["full_charge_range"], 281.25)
    assert math.isclose(result["level2_hours"], 45 / travel.LEVEL2_KW)
    assert math.isclose(result["gas_savings"], travel.GAS_YEARLY_COST - 438)


def test_charging_losses_raise_the_draw():
    lossless = travel.ev_charging_cost(75, 3.75, 30, 0.15, charging_efficiency_pct=100)
    lossy = travel.ev_charging_cost(75, 3.75, 30, 0.15, charging_efficiency_pct=90)
    assert math.isclose(lossy["daily_kwh"], lossless["daily_kwh"] / 0.9)


def test_target_below_current_charge_draws_nothing():
    result = travel.ev_charging_cost(75, 3.8, 30, 0.13, current_pct=90, target_pct=80)
    assert result["kwh_per_charge"] == 0.0
    assert result["cost_per_charge"] == 0.0


def test_charge_level_rates():
    assert travel.ChargeLevel.HOME.default_rate < travel.ChargeLevel.PUBLIC.default_rate
    assert travel.ChargeLevel("fast_charging").default_rate == 0.35


def test_trip_time_with_stops():
    result = travel.trip_time(300, 60, stops=2)
    assert result["driving_hours"] == 5.0
    assert result["stop_hours"] == 0.5
    assert result["total_hours"] == 5.5
    assert (result["hours"], result["minutes"]) == (5.0, 30.0)
    assert result["fuel"] == 12.0


def test_trip_time_metric_fuel():
    result = travel.trip_time(200, 80, unit_system="metric")
    assert (result["hours"], result["minutes"]) == (2.0, 30.0)
    assert result["fuel"] == 20.0


def test_trip_of_a_third_of_an_hour():
    result = travel.trip_time(100, 300)
    assert (result["hours"], result["minutes"]) == (0.0, 20.0)


def test_trip_without_speed():
    result = travel.trip_time(100, 0, stops=1)
    assert result["driving_hours"] == 0.0
    assert result["total_hours"] == 0.25
