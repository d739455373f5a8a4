"""Parameter sweeps over the calculators.

:func:`project` recomputes a base :class:`~calcbox.registry.DerivedResult`
through :func:`~calcbox.registry.compute` and then applies a fixed (or
caller-supplied) sweep to it, producing an ordered
:class:`ProjectionSeries` of ``(label, value)`` points.  Each
:class:`ProjectionTag` documents the domain it reads and its default sweep:

==========================  ==================  ======================================
tag                         base domain         default sweep
==========================  ==================  ======================================
one_rep_max_percentages     one_rep_max         95%, 90%, ... 60% of the 1RM
one_rep_max_formulas        one_rep_max         every formula
rep_ranges                  one_rep_max         the training-zone guide
amortization                loan                every year of the term
loan_terms                  loan                36, 48, 60 and 72 months
macros                      bmr                 25/45/30 % of target calories
period_scaling              commute             weekly, monthly (x4.33), yearly (x52)
bill_frequencies            (``amount`` field)  monthly equivalent per billing cycle
pregnancy_milestones        pregnancy           weeks 8 to 40
compound_growth             compound_interest   years 1..t
food_equivalents            calorie_burn        apple, banana, bread, cookie, pizza
exercise_equivalents        alcohol             walking, running, cycling, swimming
debt_snowball               debt_payoff         every payable debt, smallest balance first
debt_avalanche              debt_payoff         every payable debt, highest rate first
retirement_drawdown         retirement_savings  every year until the money runs out
==========================  ==================  ======================================

An absent or zero base yields an empty series for the open-ended sweeps
(amortization, growth, milestones, debts, drawdown) and all-zero points for
the fixed ones.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

from .calculators import debts, growth, loans, pregnancy, retirement, strength, travel
from .parsing import FieldSpec, ValidatedInputs, parse_inputs
from .registry import Domain, compute, field_specs

logger = logging.getLogger(__name__)


class ProjectionTag(str, Enum):
    ONE_REP_MAX_PERCENTAGES = "one_rep_max_percentages"
    ONE_REP_MAX_FORMULAS = "one_rep_max_formulas"
    REP_RANGES = "rep_ranges"
    AMORTIZATION = "amortization"
    LOAN_TERMS = "loan_terms"
    MACROS = "macros"
    PERIOD_SCALING = "period_scaling"
    BILL_FREQUENCIES = "bill_frequencies"
    PREGNANCY_MILESTONES = "pregnancy_milestones"
    COMPOUND_GROWTH = "compound_growth"
    FOOD_EQUIVALENTS = "food_equivalents"
    EXERCISE_EQUIVALENTS = "exercise_equivalents"
    DEBT_SNOWBALL = "debt_snowball"
    DEBT_AVALANCHE = "debt_avalanche"
    RETIREMENT_DRAWDOWN = "retirement_drawdown"


@dataclass(frozen=True)
class ProjectionPoint:
    label: str
    value: float
    detail: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.detail, MappingProxyType):
            object.__setattr__(self, "detail", MappingProxyType(dict(self.detail)))


@dataclass(frozen=True)
class ProjectionSeries:
    tag: ProjectionTag
    title: str
    points: Tuple[ProjectionPoint, ...] = ()

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(p.label for p in self.points)

    @property
    def values(self) -> Tuple[float, ...]:
        return tuple(p.value for p in self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def to_frame(self) -> pd.DataFrame:
        """One row per point: ``label``, ``value`` and any detail columns."""
        rows = [{"label": p.label, "value": p.value, **p.detail} for p in self.points]
        return pd.DataFrame(rows, columns=None if rows else ["label", "value"])


ONE_REP_MAX_PERCENTAGES: Tuple[int, ...] = (95, 90, 85, 80, 75, 70, 65, 60)
LOAN_TERMS_MONTHS: Tuple[int, ...] = (36, 48, 60, 72)
# (label, share of calories in %, kcal per gram)
MACRO_SPLIT: Tuple[Tuple[str, float, float], ...] = (
    ("Protein", 25.0, 4.0),
    ("Carbs", 45.0, 4.0),
    ("Fat", 30.0, 9.0),
)
PERIOD_FACTORS: Tuple[Tuple[str, float], ...] = (
    ("Weekly", 1.0),
    ("Monthly", travel.WEEKS_PER_MONTH),
    ("Yearly", travel.WEEKS_PER_YEAR),
)
# multiplier to a monthly amount
BILL_FREQUENCIES: Tuple[Tuple[str, float], ...] = (
    ("Weekly", 4.33),
    ("Bi-weekly", 2.17),
    ("Monthly", 1.0),
    ("Quarterly", 1.0 / 3.0),
    ("Annually", 1.0 / 12.0),
)
FOOD_CALORIES: Tuple[Tuple[str, float], ...] = (
    ("Apples", 95.0),
    ("Bananas", 105.0),
    ("Slices of bread", 80.0),
    ("Cookies", 150.0),
    ("Pizza slices", 285.0),
)
EXERCISE_KCAL_PER_MINUTE: Tuple[Tuple[str, float], ...] = (
    ("Walking", 4.0),
    ("Running", 12.0),
    ("Cycling", 8.0),
    ("Swimming", 10.0),
)

_FORMULA_NAMES = {
    strength.OneRepMaxFormula.EPLEY: "Epley",
    strength.OneRepMaxFormula.BRZYCKI: "Brzycki",
    strength.OneRepMaxFormula.LANDER: "Lander",
    strength.OneRepMaxFormula.OCONNER: "O'Conner",
}


_BILL_SPECS = [FieldSpec("amount", required=True, minimum=0)]


def _validated(specs: List[FieldSpec], inputs: Optional[Mapping[str, Any]]) -> ValidatedInputs:
    if isinstance(inputs, ValidatedInputs):
        return inputs
    raw = {k: "" if v is None else str(v) for k, v in (inputs or {}).items()}
    return parse_inputs(raw, specs)


def _series(tag: ProjectionTag, title: str, points: Sequence[ProjectionPoint]) -> ProjectionSeries:
    return ProjectionSeries(tag, title, tuple(points))


def _one_rep_max_percentages(inputs, sweep, variant, options) -> Tuple[str, List[ProjectionPoint]]:
    base = compute(Domain.ONE_REP_MAX, variant, inputs).value
    percents = sweep if sweep is not None else ONE_REP_MAX_PERCENTAGES
    return "Training percentages", [
        ProjectionPoint(f"{pct:g}%", base * pct / 100.0, {"percent": float(pct)}) for pct in percents
    ]


def _one_rep_max_formulas(inputs, sweep, variant, options):
    formulas = sweep if sweep is not None else list(strength.OneRepMaxFormula)
    points = []
    for formula in formulas:
        formula = strength.OneRepMaxFormula(formula)
        points.append(
            ProjectionPoint(_FORMULA_NAMES[formula], compute(Domain.ONE_REP_MAX, formula, inputs).value)
        )
    return "Formula comparison", points


def _rep_ranges(inputs, sweep, variant, options):
    base = compute(Domain.ONE_REP_MAX, variant, inputs).value
    guide = sweep if sweep is not None else strength.rep_range_guide()
    return "Rep range guide", [
        ProjectionPoint(
            reps,
            base * high / 100.0,
            {"low": base * low / 100.0, "low_pct": low, "high_pct": high, "purpose": purpose},
        )
        for reps, low, high, purpose in guide
    ]


def _amortization(inputs, sweep, variant, options):
    result = compute(Domain.LOAN, variant, inputs)
    if result.value <= 0:
        return "Amortization schedule", []
    ledger = loans.amortization_schedule(result["principal"], result["rate"], result["months"])
    wanted = set(int(y) for y in sweep) if sweep is not None else None
    points = []
    for year, interest, principal, balance in zip(
        ledger["year"], ledger["interest"], ledger["principal"], ledger["balance"]
    ):
        if wanted is not None and int(year) not in wanted:
            continue
        points.append(
            ProjectionPoint(f"Year {int(year)}", balance, {"interest": interest, "principal": principal})
        )
    return "Amortization schedule", points


def _loan_terms(inputs, sweep, variant, options):
    terms = sweep if sweep is not None else LOAN_TERMS_MONTHS
    points = []
    for months in terms:
        values = dict(inputs)
        values["term"] = float(months)
        result = compute(Domain.LOAN, loans.TermUnit.MONTHS, ValidatedInputs(values))
        points.append(
            ProjectionPoint(
                f"{months:g} months",
                result.value,
                {"total_interest": result.details.get("total_interest", 0.0)},
            )
        )
    return "Payment by term", points


def _macros(inputs, sweep, variant, options):
    calories = compute(Domain.BMR, variant, inputs, **options).details.get("target", 0.0)
    split = sweep if sweep is not None else MACRO_SPLIT
    points = []
    for label, pct, kcal_per_gram in split:
        kcal = calories * pct / 100.0
        points.append(ProjectionPoint(label, kcal / kcal_per_gram, {"calories": kcal, "percent": pct}))
    return "Macronutrients (g/day)", points


def _period_scaling(inputs, sweep, variant, options):
    result = compute(Domain.COMMUTE, variant, inputs)
    weekly = result.details.get("weekly", 0.0)
    weekly_miles = result.details.get("weekly_miles", 0.0)
    factors = sweep if sweep is not None else PERIOD_FACTORS
    return "Commute cost", [
        ProjectionPoint(label, weekly * factor, {"miles": weekly_miles * factor})
        for label, factor in factors
    ]


def _bill_frequencies(inputs, sweep, variant, options):
    amount = max(0.0, inputs.get("amount"))
    factors = sweep if sweep is not None else BILL_FREQUENCIES
    return "Monthly equivalent", [
        ProjectionPoint(label, amount * factor, {"annual": amount * factor * 12}) for label, factor in factors
    ]


def _pregnancy_milestones(inputs, sweep, variant, options):
    result = compute(Domain.PREGNANCY, None, inputs, **options)
    last_period: Optional[date] = options.get("last_period")
    if last_period is None or result.is_empty:
        return "Pregnancy milestones", []
    today = options.get("today") or date.today()
    wanted = set(int(w) for w in sweep) if sweep is not None else None
    points = []
    for week, when, text in pregnancy.milestone_dates(last_period):
        if wanted is not None and week not in wanted:
            continue
        points.append(
            ProjectionPoint(f"Week {week}", float(week), {"date": when, "description": text, "passed": when <= today})
        )
    return "Pregnancy milestones", points


def _compound_growth(inputs, sweep, variant, options):
    result = compute(Domain.COMPOUND_INTEREST, variant, inputs)
    if result.value <= 0:
        return "Growth by year", []
    principal = inputs.get("principal")
    contribution = inputs.get("monthly_contribution")
    years = int(inputs.get("years"))
    balances = growth.yearly_balances(principal, contribution, inputs.get("rate"), years, result.variant)
    wanted = set(int(y) for y in sweep) if sweep is not None else None
    points = []
    for year, balance in enumerate(balances, start=1):
        if wanted is not None and year not in wanted:
            continue
        points.append(
            ProjectionPoint(f"Year {year}", balance, {"contributions": principal + contribution * 12 * year})
        )
    return "Growth by year", points


def _food_equivalents(inputs, sweep, variant, options):
    calories = compute(Domain.CALORIE_BURN, variant, inputs, **options).value
    foods = sweep if sweep is not None else FOOD_CALORIES
    return "Food equivalents", [
        ProjectionPoint(label, float(int(calories / kcal)), {"calories_each": kcal}) for label, kcal in foods
    ]


def _exercise_equivalents(inputs, sweep, variant, options):
    calories = compute(Domain.ALCOHOL, variant, inputs).value
    exercises = sweep if sweep is not None else EXERCISE_KCAL_PER_MINUTE
    return "Minutes to burn it off", [
        ProjectionPoint(label, float(int(calories / rate)), {"kcal_per_minute": rate}) for label, rate in exercises
    ]


def _debt_payoff_order(strategy: debts.PayoffStrategy):
    def build(inputs, sweep, variant, options):
        title = f"Payoff order ({strategy.value})"
        result = compute(Domain.DEBT_PAYOFF, strategy, inputs, **options)
        if result.is_empty:
            return title, []
        rows = debts.payoff_order(options.get("debts", ()), strategy)
        wanted = set(sweep) if sweep is not None else None
        points = []
        for n, (debt, month, interest) in enumerate(
            zip(rows, result["payoff_month"], result["interest"]), start=1
        ):
            label = debt.name or f"Debt {n}"
            if wanted is not None and label not in wanted:
                continue
            points.append(
                ProjectionPoint(
                    label,
                    float(month),
                    {"balance": debt.balance_value, "rate": debt.rate_value, "interest": interest},
                )
            )
        return title, points

    return build


def _retirement_drawdown(inputs, sweep, variant, options):
    result = compute(Domain.RETIREMENT_SAVINGS, variant, inputs)
    if result.is_empty:
        return "Savings by year", []
    ledger = retirement.drawdown_schedule(
        inputs.get("savings"), inputs.get("return_rate"), inputs.get("withdrawal"), result.variant
    )
    wanted = set(int(y) for y in sweep) if sweep is not None else None
    points = []
    for year, starting, gains, taken, ending in zip(
        ledger["year"], ledger["starting"], ledger["gains"], ledger["withdrawal"], ledger["ending"]
    ):
        if wanted is not None and int(year) not in wanted:
            continue
        points.append(
            ProjectionPoint(
                f"Year {int(year)}", ending, {"starting": starting, "gains": gains, "withdrawal": taken}
            )
        )
    return "Savings by year", points


_PROJECTIONS: Dict[ProjectionTag, Tuple[Optional[Domain], Callable]] = {
    ProjectionTag.ONE_REP_MAX_PERCENTAGES: (Domain.ONE_REP_MAX, _one_rep_max_percentages),
    ProjectionTag.ONE_REP_MAX_FORMULAS: (Domain.ONE_REP_MAX, _one_rep_max_formulas),
    ProjectionTag.REP_RANGES: (Domain.ONE_REP_MAX, _rep_ranges),
    ProjectionTag.AMORTIZATION: (Domain.LOAN, _amortization),
    ProjectionTag.LOAN_TERMS: (Domain.LOAN, _loan_terms),
    ProjectionTag.MACROS: (Domain.BMR, _macros),
    ProjectionTag.PERIOD_SCALING: (Domain.COMMUTE, _period_scaling),
    ProjectionTag.BILL_FREQUENCIES: (None, _bill_frequencies),
    ProjectionTag.PREGNANCY_MILESTONES: (Domain.PREGNANCY, _pregnancy_milestones),
    ProjectionTag.COMPOUND_GROWTH: (Domain.COMPOUND_INTEREST, _compound_growth),
    ProjectionTag.FOOD_EQUIVALENTS: (Domain.CALORIE_BURN, _food_equivalents),
    ProjectionTag.EXERCISE_EQUIVALENTS: (Domain.ALCOHOL, _exercise_equivalents),
    ProjectionTag.DEBT_SNOWBALL: (Domain.DEBT_PAYOFF, _debt_payoff_order(debts.PayoffStrategy.SNOWBALL)),
    ProjectionTag.DEBT_AVALANCHE: (Domain.DEBT_PAYOFF, _debt_payoff_order(debts.PayoffStrategy.AVALANCHE)),
    ProjectionTag.RETIREMENT_DRAWDOWN: (Domain.RETIREMENT_SAVINGS, _retirement_drawdown),
}


def project(
    tag: Union[ProjectionTag, str],
    inputs: Optional[Mapping[str, Any]] = None,
    sweep: Optional[Sequence[Any]] = None,
    variant: Union[Enum, str, None] = None,
    **options: Any,
) -> ProjectionSeries:
    """Sweep a calculator across a parameter list.

    Parameters
    ----------
    tag : ProjectionTag or str
        Which projection to build.
    inputs : mapping, optional
        Validated inputs (or raw text) for the tag's base domain.
    sweep : sequence, optional
        Replaces the default parameter list.  Its element shape depends on
        the tag: percentages, formulas, months, years, debt names or
        ``(label, factor)`` pairs.
    variant : enum member or str, optional
        Variant passed through to the base computation.
    **options
        Extra selections forwarded to :func:`~calcbox.registry.compute`.
    """
    try:
        tag = ProjectionTag(tag)
    except ValueError:
        raise ValueError(
            f"Unknown projection '{tag}' (expected one of {', '.join(t.value for t in ProjectionTag)})"
        ) from None
    domain, build = _PROJECTIONS[tag]
    values = _validated(field_specs(domain) if domain is not None else _BILL_SPECS, inputs)
    logger.debug("project(%s)", tag.value)
    title, points = build(values, sweep, variant, options)
    return _series(tag, title, points)


__all__ = [
    "BILL_FREQUENCIES",
    "EXERCISE_KCAL_PER_MINUTE",
    "FOOD_CALORIES",
    "MACRO_SPLIT",
    "ONE_REP_MAX_PERCENTAGES",
    "ProjectionPoint",
    "ProjectionSeries",
    "ProjectionTag",
    "project",
]
