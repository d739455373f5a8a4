"""Formula registry: one ``compute`` entry point over every calculator.

Each :class:`Domain` owns three things:

* a list of :class:`~calcbox.parsing.FieldSpec` describing its text fields
  (see :func:`field_specs`),
* the closed enum of formula variants it accepts (or none), and
* a handler that reads the validated inputs with absent-as-zero and
  delegates to the pure functions in :mod:`calcbox.calculators`.

:func:`compute` looks the domain up in the dispatch table, resolves the
variant, short-circuits to an empty result when a required field is absent
and otherwise returns a :class:`DerivedResult`.  Unknown domains, variant
strings and option values raise ``ValueError``; bad user input never does.

Example
-------

>>> from calcbox.parsing import ValidatedInputs
>>> result = compute("one_rep_max", "epley", ValidatedInputs.of(weight=225, reps=8))
>>> round(result.value, 2)
285.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type, Union

from .calculators import (
    body,
    debts,
    energy,
    everyday,
    grades,
    growth,
    loans,
    paycheck,
    pregnancy,
    retirement,
    sleep,
    strength,
    travel,
    units,
)
from .parsing import FieldSpec, ValidatedInputs, parse_inputs

logger = logging.getLogger(__name__)


class Domain(str, Enum):
    BMI = "bmi"
    BMR = "bmr"
    ONE_REP_MAX = "one_rep_max"
    LOAN = "loan"
    MORTGAGE = "mortgage"
    CALORIE_BURN = "calorie_burn"
    ALCOHOL = "alcohol"
    PREGNANCY = "pregnancy"
    GPA = "gpa"
    SLEEP_DEBT = "sleep_debt"
    COMPOUND_INTEREST = "compound_interest"
    INFLATION = "inflation"
    TIP = "tip"
    SALES_TAX = "sales_tax"
    PERCENTAGE = "percentage"
    FUEL_ECONOMY = "fuel_economy"
    COMMUTE = "commute"
    UNIT_CONVERSION = "unit_conversion"
    DEBT_PAYOFF = "debt_payoff"
    RETIREMENT_SAVINGS = "retirement_savings"
    INVESTMENT_RETURNS = "investment_returns"
    PAYCHECK = "paycheck"
    EV_CHARGING = "ev_charging"
    TRIP_TIME = "trip_time"


# zero or negative values are real answers here
ZERO_VALID_DOMAINS = frozenset(
    {
        Domain.SLEEP_DEBT,
        Domain.PERCENTAGE,
        Domain.PREGNANCY,
        Domain.UNIT_CONVERSION,
        Domain.INVESTMENT_RETURNS,
        Domain.PAYCHECK,
    }
)


@dataclass(frozen=True)
class DerivedResult:
    """Primary scalar of a computation plus named secondary values.

    ``value`` is 0 when the inputs could not produce a result.  Screens show
    a result only when :attr:`is_displayable`: a positive value, or any
    value for domains in :data:`ZERO_VALID_DOMAINS`.
    """

    domain: Domain
    variant: Optional[Enum]
    value: float = 0.0
    details: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.details, MappingProxyType):
            object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    @property
    def is_empty(self) -> bool:
        return not self.details and self.value == 0

    @property
    def is_displayable(self) -> bool:
        if self.is_empty:
            return False
        return self.value > 0 or self.domain in ZERO_VALID_DOMAINS

    def __getitem__(self, name: str) -> Any:
        return self.details[name]


Handler = Callable[[ValidatedInputs, Optional[Enum], Dict[str, Any]], Tuple[float, Dict[str, Any]]]


def _positive(name: str, required: bool = False, **kw: Any) -> FieldSpec:
    return FieldSpec(name, required=required, minimum=0, min_inclusive=False, **kw)


def _non_negative(name: str, required: bool = False, **kw: Any) -> FieldSpec:
    return FieldSpec(name, required=required, minimum=0, **kw)


def _percent(name: str, required: bool = False, **kw: Any) -> FieldSpec:
    return FieldSpec(name, required=required, minimum=0, maximum=100, **kw)


_FIELD_SPECS: Dict[Domain, List[FieldSpec]] = {
    Domain.BMI: [
        _positive("weight", required=True),
        _non_negative("height_feet"),
        _non_negative("height_inches"),
        _non_negative("height_cm"),
    ],
    Domain.BMR: [
        _positive("weight", required=True),
        _positive("height", required=True),
        FieldSpec("age", required=True, minimum=0, min_inclusive=False, maximum=120),
        FieldSpec("body_fat", minimum=0, maximum=100, max_inclusive=False),
    ],
    Domain.ONE_REP_MAX: [
        _positive("weight", required=True),
        FieldSpec("reps", required=True, minimum=0, min_inclusive=False, maximum=strength.MAX_REPS),
    ],
    Domain.LOAN: [
        _non_negative("amount"),
        _non_negative("price"),
        _non_negative("down_payment"),
        _percent("rate"),
        _positive("term", required=True),
    ],
    Domain.MORTGAGE: [
        _positive("home_price", required=True),
        _non_negative("down_payment"),
        _percent("rate"),
        _positive("term_years", default=30),
        _non_negative("property_tax"),
        _non_negative("insurance"),
        _non_negative("hoa"),
        _non_negative("pmi"),
    ],
    Domain.CALORIE_BURN: [
        _positive("weight", required=True),
        _positive("minutes", required=True),
    ],
    Domain.ALCOHOL: [
        _positive("quantity", default=1),
        _percent("abv"),
        _positive("serving_ml"),
    ],
    Domain.PREGNANCY: [
        FieldSpec("cycle_length", minimum=15, maximum=60, default=pregnancy.DEFAULT_CYCLE_DAYS),
    ],
    Domain.GPA: [],
    Domain.SLEEP_DEBT: [
        FieldSpec("target_hours", required=True, minimum=0, maximum=24, min_inclusive=False),
        FieldSpec("actual_hours", required=True, minimum=0, maximum=24),
        _positive("days", required=True, default=7),
        FieldSpec("weekend_extra_hours", minimum=0, maximum=24),
    ],
    Domain.COMPOUND_INTEREST: [
        _non_negative("principal"),
        _non_negative("monthly_contribution"),
        _percent("rate"),
        _positive("years", required=True),
    ],
    Domain.INFLATION: [
        _positive("amount", required=True),
        _percent("rate"),
        _positive("years", required=True),
    ],
    Domain.TIP: [
        _positive("bill", required=True),
        _percent("tip_pct", default=18),
        FieldSpec("people", kind="integer", minimum=1, default=1),
    ],
    Domain.SALES_TAX: [
        _positive("amount", required=True),
        _percent("rate", required=True),
    ],
    Domain.PERCENTAGE: [
        FieldSpec("first", required=True),
        FieldSpec("second", required=True),
    ],
    Domain.FUEL_ECONOMY: [
        _positive("miles", required=True),
        _positive("gallons", required=True),
        _non_negative("fuel_cost"),
    ],
    Domain.COMMUTE: [
        _positive("daily_miles", required=True),
        FieldSpec("work_days", minimum=0, maximum=7, default=5),
        _positive("mpg"),
        _non_negative("gas_price"),
        _positive("miles_per_kwh"),
        FieldSpec("charging_efficiency", minimum=0, maximum=100, min_inclusive=False, default=90),
        _non_negative("electricity_rate"),
    ],
    Domain.UNIT_CONVERSION: [
        _non_negative("value", required=True),
    ],
    Domain.DEBT_PAYOFF: [
        _non_negative("extra_payment"),
    ],
    Domain.RETIREMENT_SAVINGS: [
        _positive("savings", required=True),
        FieldSpec("return_rate", required=True, minimum=-100, maximum=100),
        _positive("withdrawal", required=True),
    ],
    Domain.INVESTMENT_RETURNS: [
        _non_negative("initial"),
        _non_negative("contributions"),
        _non_negative("current_value", required=True),
        _positive("time_held", required=True),
    ],
    Domain.PAYCHECK: [
        _positive("salary", required=True),
        _percent("federal_pct", default=paycheck.FEDERAL_PCT),
        _percent("state_pct", default=paycheck.STATE_PCT),
        _percent("social_security_pct", default=paycheck.SOCIAL_SECURITY_PCT),
        _percent("medicare_pct", default=paycheck.MEDICARE_PCT),
        _percent("retirement_pct"),
        _non_negative("health_insurance"),
        _non_negative("other_deductions"),
    ],
    Domain.EV_CHARGING: [
        _positive("battery_kwh", required=True),
        _positive("miles_per_kwh", required=True),
        _positive("daily_miles", required=True),
        _non_negative("electricity_rate"),
        _percent("current_charge", default=20),
        _percent("target_charge", default=80),
        FieldSpec("charging_efficiency", minimum=0, maximum=100, min_inclusive=False, default=90),
    ],
    Domain.TRIP_TIME: [
        _positive("distance", required=True),
        _positive("speed", required=True),
        _non_negative("stops"),
        _non_negative("stop_minutes", default=travel.STOP_MINUTES),
    ],
}

_VARIANTS: Dict[Domain, Optional[Type[Enum]]] = {
    Domain.BMI: body.UnitSystem,
    Domain.BMR: energy.BMRFormula,
    Domain.ONE_REP_MAX: strength.OneRepMaxFormula,
    Domain.LOAN: loans.TermUnit,
    Domain.MORTGAGE: None,
    Domain.CALORIE_BURN: energy.Activity,
    Domain.ALCOHOL: energy.DrinkType,
    Domain.PREGNANCY: None,
    Domain.GPA: grades.GPAScale,
    Domain.SLEEP_DEBT: sleep.Chronotype,
    Domain.COMPOUND_INTEREST: growth.CompoundFrequency,
    Domain.INFLATION: growth.InflationMode,
    Domain.TIP: None,
    Domain.SALES_TAX: everyday.SalesTaxMode,
    Domain.PERCENTAGE: everyday.PercentageMode,
    Domain.FUEL_ECONOMY: None,
    Domain.COMMUTE: travel.VehicleType,
    Domain.UNIT_CONVERSION: units.UnitCategory,
    Domain.DEBT_PAYOFF: debts.PayoffStrategy,
    Domain.RETIREMENT_SAVINGS: retirement.WithdrawalType,
    Domain.INVESTMENT_RETURNS: growth.HoldingPeriod,
    Domain.PAYCHECK: paycheck.PayFrequency,
    Domain.EV_CHARGING: travel.ChargeLevel,
    Domain.TRIP_TIME: body.UnitSystem,
}


def field_specs(domain: Union[Domain, str]) -> List[FieldSpec]:
    """Field descriptions for a domain's text inputs."""
    return list(_FIELD_SPECS[_domain(domain)])


def variants(domain: Union[Domain, str]) -> List[Enum]:
    """Members of the domain's variant enum (empty when it has none)."""
    enum_cls = _VARIANTS[_domain(domain)]
    return list(enum_cls) if enum_cls is not None else []


def _domain(domain: Union[Domain, str]) -> Domain:
    try:
        return Domain(domain)
    except ValueError:
        raise ValueError(
            f"Unknown domain '{domain}' (expected one of {', '.join(d.value for d in Domain)})"
        ) from None


def _variant(domain: Domain, variant: Union[Enum, str, None]) -> Optional[Enum]:
    enum_cls = _VARIANTS[domain]
    if enum_cls is None:
        if variant is not None:
            raise ValueError(f"Domain '{domain.value}' takes no variant, got '{variant}'")
        return None
    if variant is None:
        return next(iter(enum_cls))
    try:
        return enum_cls(variant)
    except ValueError:
        raise ValueError(
            f"Unknown {domain.value} variant '{variant}' "
            f"(expected one of {', '.join(v.value for v in enum_cls)})"
        ) from None


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _bmi(inputs: ValidatedInputs, variant: body.UnitSystem, options: Dict[str, Any]):
    weight = inputs.get("weight")
    heights = dict(
        height_feet=inputs.get("height_feet"),
        height_inches=inputs.get("height_inches"),
        height_cm=inputs.get("height_cm"),
        unit_system=variant,
    )
    value = body.bmi(weight, **heights)
    if value <= 0:
        return 0.0, {}
    weight_range = body.healthy_weight_range(**heights)
    return value, {
        "healthy_min": weight_range["min"],
        "healthy_max": weight_range["max"],
        "weight_to_healthy": body.weight_to_healthy(weight, value, weight_range),
    }


def _bmr(inputs: ValidatedInputs, variant: energy.BMRFormula, options: Dict[str, Any]):
    if variant.requires_body_fat and not inputs.is_present("body_fat"):
        return 0.0, {}
    weight, height = inputs.get("weight"), inputs.get("height")
    if body.UnitSystem(options.get("units", body.UnitSystem.IMPERIAL)) is body.UnitSystem.IMPERIAL:
        weight, height = energy.pounds_to_kg(weight), energy.inches_to_cm(height)
    goal = energy.Goal(options.get("goal", energy.Goal.MAINTAIN))
    calories = energy.daily_calories(
        weight,
        height,
        inputs.get("age"),
        sex=options.get("sex", energy.Sex.MALE),
        formula=variant,
        activity=options.get("activity", energy.ActivityLevel.MODERATELY_ACTIVE),
        goal=goal,
        body_fat_pct=inputs.get("body_fat"),
    )
    return calories["bmr"], {
        **calories,
        "weekly_change_lb": goal.weekly_change_lb,
        "weeks_to_change_10lb": energy.weeks_to_change(goal, 10),
    }


def _one_rep_max(inputs: ValidatedInputs, variant: strength.OneRepMaxFormula, options: Dict[str, Any]):
    weight, reps = inputs.get("weight"), inputs.get("reps")
    return strength.one_rep_max(weight, reps, variant), {
        f.value: v for f, v in strength.all_formulas(weight, reps).items()
    }


def _loan(inputs: ValidatedInputs, variant: loans.TermUnit, options: Dict[str, Any]):
    if inputs.is_present("amount"):
        principal = inputs.get("amount")
    else:
        principal = max(0.0, inputs.get("price") - inputs.get("down_payment"))
    months = loans.term_months(inputs.get("term"), variant)
    summary = loans.loan_summary(principal, inputs.get("rate"), months)
    if summary["payment"] <= 0:
        return 0.0, {}
    return summary["payment"], {"principal": principal, "rate": inputs.get("rate"), **summary}


def _mortgage(inputs: ValidatedInputs, variant: None, options: Dict[str, Any]):
    breakdown = loans.mortgage_payment(
        inputs.get("home_price"),
        inputs.get("down_payment"),
        inputs.get("rate"),
        inputs.get("term_years"),
        property_tax=inputs.get("property_tax"),
        insurance=inputs.get("insurance"),
        hoa=inputs.get("hoa"),
        pmi=inputs.get("pmi"),
    )
    return breakdown["total"], breakdown


def _calorie_burn(inputs: ValidatedInputs, variant: energy.Activity, options: Dict[str, Any]):
    weight = inputs.get("weight")
    if body.UnitSystem(options.get("units", body.UnitSystem.IMPERIAL)) is body.UnitSystem.IMPERIAL:
        weight = energy.pounds_to_kg(weight)
    minutes = inputs.get("minutes")
    intensity = energy.Intensity(options.get("intensity", energy.Intensity.MODERATE))
    calories = energy.exercise_calories(weight, minutes, variant, intensity)
    return calories, {
        "met": variant.met * intensity.multiplier,
        "per_minute": calories / minutes if minutes > 0 else 0.0,
    }


def _alcohol(inputs: ValidatedInputs, variant: energy.DrinkType, options: Dict[str, Any]):
    result = energy.drink_calories(
        variant,
        quantity=inputs.get("quantity", 1.0),
        abv=inputs["abv"] if "abv" in inputs else None,
        serving_ml=inputs["serving_ml"] if "serving_ml" in inputs else None,
    )
    return result["total"], result


def _pregnancy(inputs: ValidatedInputs, variant: None, options: Dict[str, Any]):
    last_period: Optional[date] = options.get("last_period")
    if last_period is None:
        return 0.0, {}
    timeline = pregnancy.pregnancy_timeline(
        last_period,
        inputs.get("cycle_length", pregnancy.DEFAULT_CYCLE_DAYS),
        today=options.get("today"),
    )
    return float(timeline["week"]), timeline


def _gpa(inputs: ValidatedInputs, variant: grades.GPAScale, options: Dict[str, Any]):
    courses = list(options.get("courses", ()))
    value = grades.gpa(courses, variant)
    return value, {
        "total_credits": grades.total_credits(courses),
        "course_count": len(grades.counted_courses(courses)),
        "max_value": variant.max_value,
    }


def _sleep_debt(inputs: ValidatedInputs, variant: sleep.Chronotype, options: Dict[str, Any]):
    target = inputs.get("target_hours")
    debt = sleep.sleep_debt(
        target,
        inputs.get("actual_hours"),
        inputs.get("days"),
        weekend_extra_hours=inputs.get("weekend_extra_hours"),
        weekend_catchup=bool(options.get("weekend_catchup", False)),
    )
    return debt, {"debt_hours": debt, **sleep.recovery_plan(debt, target, variant)}


def _compound_interest(inputs: ValidatedInputs, variant: growth.CompoundFrequency, options: Dict[str, Any]):
    result = growth.compound_interest(
        inputs.get("principal"),
        inputs.get("monthly_contribution"),
        inputs.get("rate"),
        inputs.get("years"),
        variant,
    )
    return result["future_value"], result


def _inflation(inputs: ValidatedInputs, variant: growth.InflationMode, options: Dict[str, Any]):
    result = growth.inflation_adjusted(inputs.get("amount"), inputs.get("rate"), inputs.get("years"), variant)
    return result["value"], result


def _tip(inputs: ValidatedInputs, variant: None, options: Dict[str, Any]):
    result = everyday.tip(inputs.get("bill"), inputs.get("tip_pct"), inputs.get("people", 1.0))
    return result["total"], result


def _sales_tax(inputs: ValidatedInputs, variant: everyday.SalesTaxMode, options: Dict[str, Any]):
    result = everyday.sales_tax(inputs.get("amount"), inputs.get("rate"), variant)
    return result["total"], result


def _percentage(inputs: ValidatedInputs, variant: everyday.PercentageMode, options: Dict[str, Any]):
    value = everyday.percentage(inputs.get("first"), inputs.get("second"), variant)
    return value, {"result": value}


def _fuel_economy(inputs: ValidatedInputs, variant: None, options: Dict[str, Any]):
    result = travel.fuel_economy(inputs.get("miles"), inputs.get("gallons"), inputs.get("fuel_cost"))
    return result["mpg"], result


def _commute(inputs: ValidatedInputs, variant: travel.VehicleType, options: Dict[str, Any]):
    result = travel.commute_cost(
        inputs.get("daily_miles"),
        inputs.get("work_days"),
        variant,
        mpg=inputs.get("mpg"),
        gas_price=inputs.get("gas_price"),
        miles_per_kwh=inputs.get("miles_per_kwh"),
        charging_efficiency_pct=inputs.get("charging_efficiency"),
        electricity_rate=inputs.get("electricity_rate"),
    )
    return result["monthly"], result


def _unit_conversion(inputs: ValidatedInputs, variant: units.UnitCategory, options: Dict[str, Any]):
    known = units.units_for(variant)
    from_unit = options.get("from_unit", known[0])
    to_unit = options.get("to_unit", known[1])
    value = units.convert(inputs.get("value"), from_unit, to_unit, variant)
    return value, {"from_unit": from_unit, "to_unit": to_unit, "converted": value}


def _debt_payoff(inputs: ValidatedInputs, variant: debts.PayoffStrategy, options: Dict[str, Any]):
    rows = list(options.get("debts", ()))
    extra = inputs.get("extra_payment")
    plans = {s: debts.payoff_plan(rows, extra, s) for s in debts.PayoffStrategy}
    plan = plans[variant]
    if not plan["order"]:
        return 0.0, {}
    snowball, avalanche = plans[debts.PayoffStrategy.SNOWBALL], plans[debts.PayoffStrategy.AVALANCHE]
    return float(plan["months"]), {
        **plan,
        "snowball_months": snowball["months"],
        "snowball_interest": snowball["total_interest"],
        "avalanche_months": avalanche["months"],
        "avalanche_interest": avalanche["total_interest"],
        "interest_saved": snowball["total_interest"] - avalanche["total_interest"],
    }


def _retirement_savings(inputs: ValidatedInputs, variant: retirement.WithdrawalType, options: Dict[str, Any]):
    summary = retirement.savings_duration(
        inputs.get("savings"), inputs.get("return_rate"), inputs.get("withdrawal"), variant
    )
    return summary["years"], summary if summary["years"] > 0 else {}


def _investment_returns(inputs: ValidatedInputs, variant: growth.HoldingPeriod, options: Dict[str, Any]):
    result = growth.investment_returns(
        inputs.get("initial"),
        inputs.get("contributions"),
        inputs.get("current_value"),
        inputs.get("time_held"),
        variant,
    )
    return result.get("annualized_pct", 0.0), result


def _paycheck(inputs: ValidatedInputs, variant: paycheck.PayFrequency, options: Dict[str, Any]):
    result = paycheck.paycheck(
        inputs.get("salary"),
        variant,
        federal_pct=inputs.get("federal_pct"),
        state_pct=inputs.get("state_pct"),
        social_security_pct=inputs.get("social_security_pct"),
        medicare_pct=inputs.get("medicare_pct"),
        retirement_pct=inputs.get("retirement_pct"),
        health_insurance=inputs.get("health_insurance"),
        other_deductions=inputs.get("other_deductions"),
    )
    return result["net"], {**result, "periods": variant.periods}


def _ev_charging(inputs: ValidatedInputs, variant: travel.ChargeLevel, options: Dict[str, Any]):
    if inputs.is_present("electricity_rate"):
        rate = inputs.get("electricity_rate")
    else:
        rate = variant.default_rate
    result = travel.ev_charging_cost(
        inputs.get("battery_kwh"),
        inputs.get("miles_per_kwh"),
        inputs.get("daily_miles"),
        rate,
        current_pct=inputs.get("current_charge"),
        target_pct=inputs.get("target_charge"),
        charging_efficiency_pct=inputs.get("charging_efficiency"),
    )
    return result["monthly"], {**result, "electricity_rate": rate}


def _trip_time(inputs: ValidatedInputs, variant: body.UnitSystem, options: Dict[str, Any]):
    result = travel.trip_time(
        inputs.get("distance"),
        inputs.get("speed"),
        inputs.get("stops"),
        inputs.get("stop_minutes"),
        variant,
    )
    departure: Optional[datetime] = options.get("departure")
    if departure is not None:
        result["arrival"] = departure + timedelta(hours=result["hours"], minutes=result["minutes"])
    return result["total_hours"], result


_HANDLERS: Dict[Domain, Handler] = {
    Domain.BMI: _bmi,
    Domain.BMR: _bmr,
    Domain.ONE_REP_MAX: _one_rep_max,
    Domain.LOAN: _loan,
    Domain.MORTGAGE: _mortgage,
    Domain.CALORIE_BURN: _calorie_burn,
    Domain.ALCOHOL: _alcohol,
    Domain.PREGNANCY: _pregnancy,
    Domain.GPA: _gpa,
    Domain.SLEEP_DEBT: _sleep_debt,
    Domain.COMPOUND_INTEREST: _compound_interest,
    Domain.INFLATION: _inflation,
    Domain.TIP: _tip,
    Domain.SALES_TAX: _sales_tax,
    Domain.PERCENTAGE: _percentage,
    Domain.FUEL_ECONOMY: _fuel_economy,
    Domain.COMMUTE: _commute,
    Domain.UNIT_CONVERSION: _unit_conversion,
    Domain.DEBT_PAYOFF: _debt_payoff,
    Domain.RETIREMENT_SAVINGS: _retirement_savings,
    Domain.INVESTMENT_RETURNS: _investment_returns,
    Domain.PAYCHECK: _paycheck,
    Domain.EV_CHARGING: _ev_charging,
    Domain.TRIP_TIME: _trip_time,
}


def compute(
    domain: Union[Domain, str],
    variant: Union[Enum, str, None] = None,
    inputs: Optional[Mapping[str, Any]] = None,
    **options: Any,
) -> DerivedResult:
    """Run one calculator.

    Parameters
    ----------
    domain : Domain or str
        Which calculator to run.
    variant : enum member or str, optional
        Formula or mode within the domain.  ``None`` selects the first member
        of the domain's variant enum.
    inputs : mapping, optional
        A :class:`ValidatedInputs` record, or a raw mapping of field name to
        text which is parsed with :func:`field_specs` first.
    **options
        Closed selections that are not numeric fields: ``sex``,
        ``activity``, ``goal``, ``intensity``, ``units``, ``chronotype``
        settings, ``last_period``/``today`` dates, ``courses``, ``debts``,
        a trip ``departure`` time and the ``from_unit``/``to_unit`` pair.

    Returns
    -------
    DerivedResult
        With ``value == 0`` and no details when a required field is absent.
    """
    domain = _domain(domain)
    resolved = _variant(domain, variant)
    specs = _FIELD_SPECS[domain]
    if inputs is None:
        inputs = {}
    if not isinstance(inputs, ValidatedInputs):
        inputs = parse_inputs({k: "" if v is None else str(v) for k, v in inputs.items()}, specs)

    missing = [s.name for s in specs if s.required and not inputs.is_present(s.name)]
    if missing:
        logger.debug("compute(%s): missing %s, returning empty result", domain.value, ", ".join(missing))
        return DerivedResult(domain, resolved)

    logger.debug("compute(%s, %s)", domain.value, getattr(resolved, "value", None))
    value, details = _HANDLERS[domain](inputs, resolved, options)
    return DerivedResult(domain, resolved, float(value), details)


__all__ = [
    "DerivedResult",
    "Domain",
    "ZERO_VALID_DOMAINS",
    "compute",
    "field_specs",
    "variants",
]
