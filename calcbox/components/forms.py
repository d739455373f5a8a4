# components/forms.py
# Streamlit input widgets for each calculator.
# Text fields are returned as raw strings; the engine parses and validates them.

from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Tuple

import pandas as pd
import streamlit as st

from ..calculators import debts, energy, grades, travel, units
from ..calculators.body import UnitSystem
from ..registry import Domain, field_specs, variants

# (label, help) per field; fields without an entry use a title-cased name
FIELD_LABELS: Dict[Domain, Dict[str, Tuple[str, str]]] = {
    Domain.BMI: {
        "weight": ("Weight", "Pounds for imperial, kilograms for metric."),
        "height_feet": ("Height (ft)", ""),
        "height_inches": ("Height (in)", ""),
        "height_cm": ("Height (cm)", ""),
    },
    Domain.BMR: {
        "weight": ("Weight", "Pounds for imperial, kilograms for metric."),
        "height": ("Height", "Inches for imperial, centimetres for metric."),
        "age": ("Age (years)", ""),
        "body_fat": ("Body fat (%)", "Needed for Katch-McArdle."),
    },
    Domain.ONE_REP_MAX: {
        "weight": ("Weight lifted", ""),
        "reps": ("Repetitions", "Up to 20 reps; estimates are most accurate under 10."),
    },
    Domain.LOAN: {
        "amount": ("Loan amount", "Leave empty to borrow price minus down payment."),
        "price": ("Purchase price", ""),
        "down_payment": ("Down payment", ""),
        "rate": ("Interest rate (APR %)", ""),
        "term": ("Loan term", ""),
    },
    Domain.MORTGAGE: {
        "home_price": ("Home price", ""),
        "down_payment": ("Down payment", ""),
        "rate": ("Interest rate (APR %)", ""),
        "term_years": ("Term (years)", "Defaults to 30."),
        "property_tax": ("Property tax (per year)", ""),
        "insurance": ("Home insurance (per year)", ""),
        "hoa": ("HOA (per month)", ""),
        "pmi": ("PMI (per month)", "Only charged with less than 20% down."),
    },
    Domain.CALORIE_BURN: {
        "weight": ("Body weight", ""),
        "minutes": ("Duration (minutes)", ""),
    },
    Domain.ALCOHOL: {
        "quantity": ("Number of drinks", "Defaults to 1."),
        "abv": ("Alcohol by volume (%)", "Leave empty for the drink's typical strength."),
        "serving_ml": ("Serving size (ml)", "Leave empty for a typical serving."),
    },
    Domain.PREGNANCY: {
        "cycle_length": ("Cycle length (days)", "15 to 60 days; defaults to 28."),
    },
    Domain.SLEEP_DEBT: {
        "target_hours": ("Sleep needed (hours/night)", ""),
        "actual_hours": ("Sleep you get (hours/night)", ""),
        "days": ("Days tracked", ""),
        "weekend_extra_hours": ("Extra weekend sleep (hours)", ""),
    },
    Domain.COMPOUND_INTEREST: {
        "principal": ("Initial deposit", ""),
        "monthly_contribution": ("Monthly contribution", ""),
        "rate": ("Annual rate (%)", ""),
        "years": ("Years", ""),
    },
    Domain.INFLATION: {
        "amount": ("Amount", ""),
        "rate": ("Inflation rate (%)", ""),
        "years": ("Years", ""),
    },
    Domain.TIP: {
        "bill": ("Bill amount", ""),
        "tip_pct": ("Tip (%)", "Defaults to 18%."),
        "people": ("Split between", ""),
    },
    Domain.SALES_TAX: {
        "amount": ("Amount", "Pre-tax price, or the receipt total when removing tax."),
        "rate": ("Tax rate (%)", ""),
    },
    Domain.PERCENTAGE: {
        "first": ("First value", ""),
        "second": ("Second value", ""),
    },
    Domain.FUEL_ECONOMY: {
        "miles": ("Miles driven", ""),
        "gallons": ("Gallons used", ""),
        "fuel_cost": ("Total fuel cost", ""),
    },
    Domain.COMMUTE: {
        "daily_miles": ("Round trip (miles/day)", ""),
        "work_days": ("Work days per week", ""),
        "mpg": ("Fuel economy (MPG)", ""),
        "gas_price": ("Gas price ($/gal)", ""),
        "miles_per_kwh": ("Efficiency (mi/kWh)", ""),
        "charging_efficiency": ("Charging efficiency (%)", ""),
        "electricity_rate": ("Electricity ($/kWh)", ""),
    },
    Domain.UNIT_CONVERSION: {
        "value": ("Value", ""),
    },
    Domain.DEBT_PAYOFF: {
        "extra_payment": ("Extra payment (per month)", "Goes to the first debt in payoff order."),
    },
    Domain.RETIREMENT_SAVINGS: {
        "savings": ("Retirement savings", ""),
        "return_rate": ("Annual return (%)", "Can be negative."),
        "withdrawal": ("Withdrawal", "Percent of the balance, or dollars per year for fixed withdrawals."),
    },
    Domain.INVESTMENT_RETURNS: {
        "initial": ("Initial investment", ""),
        "contributions": ("Additional contributions", ""),
        "current_value": ("Current value", ""),
        "time_held": ("Time held", ""),
    },
    Domain.PAYCHECK: {
        "salary": ("Annual salary", ""),
        "federal_pct": ("Federal tax (%)", "Defaults to 22%."),
        "state_pct": ("State tax (%)", "Defaults to 5%."),
        "social_security_pct": ("Social Security (%)", "Defaults to 6.2%."),
        "medicare_pct": ("Medicare (%)", "Defaults to 1.45%."),
        "retirement_pct": ("401(k) contribution (%)", ""),
        "health_insurance": ("Health insurance (per paycheck)", ""),
        "other_deductions": ("Other deductions (per paycheck)", ""),
    },
    Domain.EV_CHARGING: {
        "battery_kwh": ("Battery capacity (kWh)", ""),
        "miles_per_kwh": ("Efficiency (mi/kWh)", ""),
        "daily_miles": ("Miles driven per day", ""),
        "electricity_rate": ("Electricity ($/kWh)", "Leave empty for the charging level's typical rate."),
        "current_charge": ("Current charge (%)", "Defaults to 20%."),
        "target_charge": ("Target charge (%)", "Defaults to 80%."),
        "charging_efficiency": ("Charging efficiency (%)", "Defaults to 90%."),
    },
    Domain.TRIP_TIME: {
        "distance": ("Distance", "Miles for imperial, kilometres for metric."),
        "speed": ("Average speed", "mph for imperial, km/h for metric."),
        "stops": ("Number of stops", ""),
        "stop_minutes": ("Minutes per stop", "Defaults to 15."),
    },
}

# Filled into the text fields by the "Example" button
EXAMPLES: Dict[Domain, Dict[str, str]] = {
    Domain.BMI: {"weight": "150", "height_feet": "5", "height_inches": "10"},
    Domain.BMR: {"weight": "175", "height": "70", "age": "30"},
    Domain.ONE_REP_MAX: {"weight": "225", "reps": "8"},
    Domain.LOAN: {"price": "30000", "down_payment": "5000", "rate": "6.5", "term": "60"},
    Domain.MORTGAGE: {"home_price": "400000", "down_payment": "80000", "rate": "6.5", "term_years": "30",
                      "property_tax": "4800", "insurance": "1200"},
    Domain.CALORIE_BURN: {"weight": "160", "minutes": "45"},
    Domain.ALCOHOL: {"quantity": "3"},
    Domain.SLEEP_DEBT: {"target_hours": "8", "actual_hours": "6.5", "days": "7"},
    Domain.COMPOUND_INTEREST: {"principal": "10000", "monthly_contribution": "200", "rate": "7", "years": "20"},
    Domain.INFLATION: {"amount": "1000", "rate": "3", "years": "10"},
    Domain.TIP: {"bill": "84.50", "tip_pct": "18", "people": "3"},
    Domain.SALES_TAX: {"amount": "100", "rate": "8.25"},
    Domain.PERCENTAGE: {"first": "15", "second": "200"},
    Domain.FUEL_ECONOMY: {"miles": "320", "gallons": "11.2", "fuel_cost": "39.20"},
    Domain.COMMUTE: {"daily_miles": "30", "work_days": "5", "mpg": "28", "gas_price": "3.50"},
    Domain.UNIT_CONVERSION: {"value": "10"},
    Domain.DEBT_PAYOFF: {"extra_payment": "200"},
    Domain.RETIREMENT_SAVINGS: {"savings": "1000000", "return_rate": "7", "withdrawal": "4"},
    Domain.INVESTMENT_RETURNS: {"initial": "10000", "contributions": "2000", "current_value": "15000",
                                "time_held": "3"},
    Domain.PAYCHECK: {"salary": "65000"},
    Domain.EV_CHARGING: {"battery_kwh": "75", "miles_per_kwh": "3.8", "daily_miles": "30"},
    Domain.TRIP_TIME: {"distance": "300", "speed": "60", "stops": "2"},
}

# Stable widget keys so the example/clear buttons can set values
WIDGET_KEYS: Dict[Domain, Dict[str, str]] = {
    domain: {spec.name: f"in_{domain.value}_{spec.name}" for spec in field_specs(domain)}
    for domain in Domain
}


def _label(domain: Domain, name: str) -> Tuple[str, str]:
    return FIELD_LABELS.get(domain, {}).get(name, (name.replace("_", " ").capitalize(), ""))


def _pretty(value: str) -> str:
    return value.replace("_", " ").title()


def fill_example(domain: Domain) -> None:
    """Put the domain's example values into its text fields."""
    example = EXAMPLES.get(domain, {})
    for name, key in WIDGET_KEYS[domain].items():
        st.session_state[key] = example.get(name, "")


def clear_fields(domain: Domain) -> None:
    for key in WIDGET_KEYS[domain].values():
        st.session_state[key] = ""


def text_fields(domain: Domain, names: List[str] = None) -> Dict[str, str]:
    """Render one text input per field (or the given subset) and return the raw strings."""
    raw = {}
    for spec in field_specs(domain):
        if names is not None and spec.name not in names:
            continue
        label, help_text = _label(domain, spec.name)
        raw[spec.name] = st.text_input(
            label,
            key=WIDGET_KEYS[domain][spec.name],
            help=help_text or None,
            placeholder="required" if spec.required else "",
        )
    return raw


def variant_picker(domain: Domain):
    """Radio of the domain's variants, or None when it has none."""
    choices = variants(domain)
    if not choices:
        return None
    return st.radio(
        "Mode", choices, format_func=lambda v: _pretty(v.value), horizontal=True,
        key=f"in_{domain.value}_variant",
    )


def _units_picker(domain: Domain) -> UnitSystem:
    return st.radio(
        "Units", list(UnitSystem), format_func=lambda v: _pretty(v.value), horizontal=True,
        key=f"in_{domain.value}_units",
    )


def _cell(value, fallback=""):
    return fallback if value is None or pd.isna(value) else value


def _course_editor() -> List[grades.Course]:
    st.session_state.setdefault(
        "gpa_courses",
        pd.DataFrame([{"name": "", "grade": "A", "credit_hours": "", "honors": False} for _ in range(4)]),
    )
    edited = st.data_editor(
        st.session_state["gpa_courses"],
        num_rows="dynamic",
        column_config={
            "name": st.column_config.TextColumn("Course"),
            "grade": st.column_config.SelectboxColumn("Grade", options=list(grades.GRADE_POINTS)),
            "credit_hours": st.column_config.TextColumn("Credits"),
            "honors": st.column_config.CheckboxColumn("Honors/AP"),
        },
        key="in_gpa_courses",
    )
    return [
        grades.Course(
            str(_cell(r.get("name"))),
            str(_cell(r.get("grade")) or "F"),
            str(_cell(r.get("credit_hours"))),
            bool(_cell(r.get("honors"), False)),
        )
        for r in edited.to_dict("records")
    ]


def _debt_editor() -> List[debts.Debt]:
    st.session_state.setdefault(
        "debt_rows",
        pd.DataFrame([{"name": "", "balance": "", "rate": "", "minimum_payment": ""} for _ in range(3)]),
    )
    edited = st.data_editor(
        st.session_state["debt_rows"],
        num_rows="dynamic",
        column_config={
            "name": st.column_config.TextColumn("Debt"),
            "balance": st.column_config.TextColumn("Balance"),
            "rate": st.column_config.TextColumn("APR (%)"),
            "minimum_payment": st.column_config.TextColumn("Minimum payment"),
        },
        key="in_debt_rows",
    )
    return [
        debts.Debt(
            str(_cell(r.get("name"))),
            str(_cell(r.get("balance"))),
            str(_cell(r.get("rate"))),
            str(_cell(r.get("minimum_payment"))),
        )
        for r in edited.to_dict("records")
    ]


def _use_ev_model() -> None:
    choice = st.session_state.get("in_ev_model")
    for name, battery, efficiency in travel.EV_MODELS:
        if name == choice:
            keys = WIDGET_KEYS[Domain.EV_CHARGING]
            st.session_state[keys["battery_kwh"]] = f"{battery:g}"
            st.session_state[keys["miles_per_kwh"]] = f"{efficiency:g}"


def option_pickers(domain: Domain, variant=None) -> Dict[str, Any]:
    """Closed selections passed to ``compute`` as keyword options."""
    options: Dict[str, Any] = {}
    if domain is Domain.BMR:
        options["units"] = _units_picker(domain)
        c1, c2 = st.columns(2)
        options["sex"] = c1.selectbox("Sex", list(energy.Sex), format_func=lambda v: _pretty(v.value))
        options["activity"] = c2.selectbox(
            "Activity level", list(energy.ActivityLevel), index=2, format_func=lambda v: _pretty(v.value)
        )
        options["goal"] = st.selectbox("Goal", list(energy.Goal), format_func=lambda v: _pretty(v.value))
    elif domain is Domain.CALORIE_BURN:
        options["units"] = _units_picker(domain)
        options["intensity"] = st.radio(
            "Intensity", list(energy.Intensity), index=1, horizontal=True,
            format_func=lambda v: _pretty(v.value),
        )
    elif domain is Domain.PREGNANCY:
        options["last_period"] = st.date_input(
            "First day of last period",
            value=date.today() - timedelta(weeks=8),
            max_value=date.today(),
        )
    elif domain is Domain.SLEEP_DEBT:
        options["weekend_catchup"] = st.checkbox("I catch up on sleep at weekends")
    elif domain is Domain.GPA:
        options["courses"] = _course_editor()
    elif domain is Domain.DEBT_PAYOFF:
        options["debts"] = _debt_editor()
    elif domain is Domain.EV_CHARGING:
        st.selectbox(
            "Popular models", [""] + [name for name, _, _ in travel.EV_MODELS],
            key="in_ev_model", on_change=_use_ev_model,
        )
    elif domain is Domain.TRIP_TIME:
        departs = st.time_input("Departure time", value=None, key="in_trip_departure")
        if departs is not None:
            options["departure"] = datetime.combine(date.today(), departs)
    elif domain is Domain.UNIT_CONVERSION and variant is not None:
        choices = units.units_for(variant)
        c1, c2 = st.columns(2)
        options["from_unit"] = c1.selectbox("From", choices, index=0, key=f"in_units_from_{variant.value}")
        options["to_unit"] = c2.selectbox("To", choices, index=1, key=f"in_units_to_{variant.value}")
    return options


def calculator_form(domain: Domain):
    """Render the whole input panel for one calculator.

    Returns ``(raw, variant, options)`` ready for ``compute``.
    """
    b1, b2, _ = st.columns([1, 1, 6])
    b1.button("Example", key=f"ex_{domain.value}", on_click=fill_example, args=(domain,))
    b2.button("Clear", key=f"clr_{domain.value}", on_click=clear_fields, args=(domain,))

    variant = variant_picker(domain)
    options = option_pickers(domain, variant)

    names = None
    if domain is Domain.BMI:
        names = ["weight", "height_feet", "height_inches"] if variant is UnitSystem.IMPERIAL else ["weight", "height_cm"]
    elif domain is Domain.COMMUTE:
        gas = variant is None or variant.value == "gas"
        names = ["daily_miles", "work_days"] + (
            ["mpg", "gas_price"] if gas else ["miles_per_kwh", "charging_efficiency", "electricity_rate"]
        )
    raw = text_fields(domain, names)
    return raw, variant, options
