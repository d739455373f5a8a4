# app.py
import logging
import os

import streamlit as st

from calcbox import Domain, ProjectionTag, classify, compute, load_classification_tables, project
from calcbox.calculators import units
from calcbox.classification import Classification
from calcbox.components.charts import (
    TIER_COLORS,
    amortization_chart,
    breakdown_pie,
    classification_gauge,
    comparison_chart,
    growth_chart,
    projection_bar_chart,
)
from calcbox.components.forms import calculator_form
from calcbox.observability import setup_logging

setup_logging(os.environ.get("CALCBOX_LOG_LEVEL", "INFO"), os.environ.get("CALCBOX_LOG_FORMAT", "text"))
logger = logging.getLogger("calcbox.app")

# ---------- Page config ----------
st.set_page_config(
    page_title="CalcBox",
    page_icon="🧮",
    layout="wide",
    initial_sidebar_state="auto",
)

st.markdown(
    """
<style>
.block-container { padding: 1.5rem 2rem; max-width: 1200px; margin: auto; }
div[data-testid="stMetric"] {
    background: #FFFFFF;
    border-radius: 12px;
    padding: 1rem;
    border: 1px solid #E6ECE9;
    box-shadow: 0 2px 8px rgba(0,0,0,0.05);
}
div.stPlotlyChart {
    background: #FFFFFF;
    border-radius: 12px;
    padding: 0.75rem;
    border: 1px solid #E6ECE9;
}
</style>
""",
    unsafe_allow_html=True,
)

BILLS = "monthly_bills"

CATEGORIES = {
    "Health & Fitness": [
        Domain.BMI, Domain.BMR, Domain.ONE_REP_MAX, Domain.CALORIE_BURN,
        Domain.ALCOHOL, Domain.PREGNANCY, Domain.SLEEP_DEBT,
    ],
    "Financial": [
        Domain.LOAN, Domain.MORTGAGE, Domain.COMPOUND_INTEREST, Domain.INFLATION, Domain.DEBT_PAYOFF,
        Domain.RETIREMENT_SAVINGS, Domain.INVESTMENT_RETURNS, Domain.PAYCHECK,
    ],
    "Everyday": [Domain.TIP, Domain.SALES_TAX, Domain.PERCENTAGE, Domain.UNIT_CONVERSION, BILLS],
    "Travel": [Domain.FUEL_ECONOMY, Domain.COMMUTE, Domain.EV_CHARGING, Domain.TRIP_TIME],
    "Education": [Domain.GPA],
}

TITLES = {
    Domain.BMI: "BMI Calculator",
    Domain.BMR: "Daily Calories (BMR / TDEE)",
    Domain.ONE_REP_MAX: "One Rep Max",
    Domain.CALORIE_BURN: "Calorie Burn",
    Domain.ALCOHOL: "Drinking Calories",
    Domain.PREGNANCY: "Pregnancy Due Date",
    Domain.SLEEP_DEBT: "Sleep Debt",
    Domain.LOAN: "Loan Payment",
    Domain.MORTGAGE: "Mortgage Payment",
    Domain.COMPOUND_INTEREST: "Compound Interest",
    Domain.INFLATION: "Inflation",
    Domain.TIP: "Tip Splitter",
    Domain.SALES_TAX: "Sales Tax",
    Domain.PERCENTAGE: "Percentage",
    Domain.UNIT_CONVERSION: "Unit Converter",
    BILLS: "Monthly Bills",
    Domain.FUEL_ECONOMY: "MPG Calculator",
    Domain.COMMUTE: "Drive to Work",
    Domain.GPA: "GPA Calculator",
    Domain.DEBT_PAYOFF: "Debt Payoff",
    Domain.RETIREMENT_SAVINGS: "Retirement Savings",
    Domain.INVESTMENT_RETURNS: "Investment Returns",
    Domain.PAYCHECK: "Paycheck",
    Domain.EV_CHARGING: "EV Charging Cost",
    Domain.TRIP_TIME: "Trip Time",
}


def money(x: float) -> str:
    return f"${x:,.2f}"


def show_classification(c: Classification) -> None:
    color = TIER_COLORS[c.tier]
    st.markdown(
        f"<h4 style='color:{color};margin-bottom:0'>{c.label}</h4><p>{c.description}</p>",
        unsafe_allow_html=True,
    )
    if c.advice:
        with st.expander("Tips", expanded=False):
            for tip in c.advice:
                st.markdown(f"- {tip}")


def show_series(series, value_format=",.1f", yaxis_title=""):
    st.plotly_chart(projection_bar_chart(series, value_format=value_format, yaxis_title=yaxis_title),
                    use_container_width=True)
    st.dataframe(series.to_frame(), use_container_width=True, hide_index=True)


# ---------- Sidebar: calculator picker ----------
st.sidebar.title("CalcBox")
category = st.sidebar.radio("Category", list(CATEGORIES))
choice = st.sidebar.selectbox(
    "Calculator", CATEGORIES[category], format_func=lambda d: TITLES[d]
)
st.title(TITLES[choice])

if choice == BILLS:
    amount = st.text_input("Bill amount", key="in_bills_amount")
    series = project(ProjectionTag.BILL_FREQUENCIES, {"amount": amount})
    if any(v > 0 for v in series.values):
        st.caption("Monthly equivalent if the amount is billed...")
        show_series(series, value_format=",.2f", yaxis_title="Per month")
    st.stop()

raw, variant, options = calculator_form(choice)
result = compute(choice, variant, raw, **options)
logger.debug("Rendered %s with value %.4f", choice.value, result.value)

if not result.is_displayable:
    st.info("Fill in the fields above to see results.")
    st.stop()

st.divider()
tables = load_classification_tables()
d = result.details

if choice is Domain.BMI:
    c1, c2 = st.columns(2)
    with c1:
        st.plotly_chart(classification_gauge(result.value, tables["bmi"], upper=45), use_container_width=True)
    with c2:
        show_classification(classify("bmi", result.value))
        st.metric("Healthy weight range", f"{d['healthy_min']:.1f} - {d['healthy_max']:.1f}")
        if d["weight_to_healthy"]:
            st.metric("To reach healthy range", f"{d['weight_to_healthy']:.1f}")

elif choice is Domain.BMR:
    c1, c2, c3 = st.columns(3)
    c1.metric("BMR", f"{d['bmr']:,.0f} kcal")
    c2.metric("Maintenance (TDEE)", f"{d['tdee']:,.0f} kcal")
    c3.metric("Daily target", f"{d['target']:,.0f} kcal")
    if d["weeks_to_change_10lb"]:
        st.caption(f"About {d['weeks_to_change_10lb']:.0f} weeks to change 10 lb at this goal.")
    st.subheader("Macronutrients")
    show_series(project(ProjectionTag.MACROS, raw, variant=variant, **options), yaxis_title="Grams per day")

elif choice is Domain.ONE_REP_MAX:
    st.metric("Estimated 1RM", f"{result.value:,.1f}")
    c1, c2 = st.columns(2)
    with c1:
        st.subheader("Training percentages")
        show_series(project(ProjectionTag.ONE_REP_MAX_PERCENTAGES, raw, variant=variant))
    with c2:
        st.subheader("Formula comparison")
        formulas = project(ProjectionTag.ONE_REP_MAX_FORMULAS, raw)
        st.plotly_chart(comparison_chart(formulas.labels, formulas.values, title="All formulas"),
                        use_container_width=True)
        st.subheader("Rep ranges")
        st.dataframe(project(ProjectionTag.REP_RANGES, raw, variant=variant).to_frame(),
                     use_container_width=True, hide_index=True)

elif choice is Domain.CALORIE_BURN:
    c1, c2 = st.columns(2)
    c1.metric("Calories burned", f"{result.value:,.0f} kcal")
    c2.metric("Per minute", f"{d['per_minute']:.1f} kcal")
    st.subheader("That's about...")
    show_series(project(ProjectionTag.FOOD_EQUIVALENTS, raw, variant=variant, **options), value_format=",.0f")

elif choice is Domain.ALCOHOL:
    c1, c2 = st.columns(2)
    c1.metric("Total calories", f"{result.value:,.0f} kcal")
    c2.metric("Per drink", f"{d['per_drink']:,.0f} kcal")
    st.caption(f"{d['alcohol_grams']:.1f} g of alcohol per drink ({d['alcohol_calories']:.0f} kcal).")
    st.subheader("Minutes to burn it off")
    show_series(project(ProjectionTag.EXERCISE_EQUIVALENTS, raw, variant=variant), value_format=",.0f")

elif choice is Domain.PREGNANCY:
    c1, c2, c3 = st.columns(3)
    c1.metric("Due date", d["due_date"].strftime("%b %d, %Y"))
    c2.metric("Current week", f"{d['week']}")
    c3.metric("Days to go", f"{max(0, d['days_remaining'])}")
    show_classification(classify("pregnancy", d["week"]))
    st.caption(f"Estimated conception: {d['conception_date']:%b %d, %Y}")
    st.subheader("Milestones")
    st.dataframe(project(ProjectionTag.PREGNANCY_MILESTONES, raw, **options).to_frame(),
                 use_container_width=True, hide_index=True)

elif choice is Domain.SLEEP_DEBT:
    c1, c2 = st.columns(2)
    with c1:
        st.metric("Sleep debt", f"{result.value:.1f} h")
        show_classification(classify("sleep_debt", result.value))
    with c2:
        st.metric("Recovery nights", f"{d['recovery_nights']:.1f}")
        if d["recovery_nights"]:
            st.caption(f"Aim for {d['extra_per_night']:.1f} h a night while recovering.")
        st.metric("Performance impact", f"{d['performance_impact'] * 100:.0f}%")
        show_classification(classify("sleep_impact", d["performance_impact"]))

elif choice is Domain.LOAN:
    c1, c2, c3 = st.columns(3)
    c1.metric("Monthly payment", money(result.value))
    c2.metric("Total interest", money(d["total_interest"]))
    c3.metric("Total paid", money(d["total_paid"]))
    st.plotly_chart(amortization_chart(project(ProjectionTag.AMORTIZATION, raw, variant=variant)),
                    use_container_width=True)
    st.subheader("Compare terms")
    st.dataframe(project(ProjectionTag.LOAN_TERMS, raw).to_frame(), use_container_width=True, hide_index=True)

elif choice is Domain.MORTGAGE:
    c1, c2 = st.columns(2)
    c1.metric("Monthly payment", money(result.value))
    c1.metric("Loan amount", money(d["loan_amount"]))
    c1.metric("Total interest", money(d["total_interest"]))
    with c2:
        parts = {k: d[k] for k in ("principal_interest", "property_tax", "insurance", "hoa", "pmi")}
        st.plotly_chart(breakdown_pie(parts), use_container_width=True)

elif choice is Domain.COMPOUND_INTEREST:
    c1, c2, c3 = st.columns(3)
    c1.metric("Future value", money(result.value))
    c2.metric("Contributed", money(d["total_contributions"]))
    c3.metric("Interest earned", money(d["interest_earned"]))
    st.plotly_chart(growth_chart(project(ProjectionTag.COMPOUND_GROWTH, raw, variant=variant)),
                    use_container_width=True)

elif choice is Domain.INFLATION:
    c1, c2 = st.columns(2)
    c1.metric("Adjusted value", money(result.value))
    c2.metric("Cumulative inflation", f"{d['cumulative_pct']:.1f}%")

elif choice is Domain.TIP:
    c1, c2, c3 = st.columns(3)
    c1.metric("Tip", money(d["tip"]))
    c2.metric("Total", money(d["total"]))
    c3.metric("Per person", money(d["per_person"]))

elif choice is Domain.SALES_TAX:
    c1, c2, c3 = st.columns(3)
    c1.metric("Before tax", money(d["pre_tax"]))
    c2.metric("Tax", money(d["tax"]))
    c3.metric("Total", money(d["total"]))

elif choice is Domain.PERCENTAGE:
    st.metric("Result", f"{result.value:,.2f}")

elif choice is Domain.UNIT_CONVERSION:
    st.metric("Result", f"{result.value:,.4f} {d['to_unit']}")
    table = [
        {"unit": u, "value": compute(choice, variant, raw, from_unit=d["from_unit"], to_unit=u).value}
        for u in units.units_for(variant)
    ]
    st.dataframe(table, use_container_width=True, hide_index=True)

elif choice is Domain.FUEL_ECONOMY:
    c1, c2 = st.columns(2)
    with c1:
        st.metric("Fuel economy", f"{result.value:.1f} MPG")
        if d["cost_per_mile"]:
            st.metric("Cost per mile", money(d["cost_per_mile"]))
        show_classification(classify("fuel_economy", result.value))
    with c2:
        st.plotly_chart(classification_gauge(result.value, tables["fuel_economy"], upper=60, suffix=" mpg"),
                        use_container_width=True)

elif choice is Domain.COMMUTE:
    c1, c2 = st.columns(2)
    c1.metric("Monthly cost", money(result.value))
    c2.metric("CO2 per year", f"{d['co2_lb_per_year']:,.0f} lb")
    show_series(project(ProjectionTag.PERIOD_SCALING, raw, variant=variant), value_format=",.2f",
                yaxis_title="Dollars")

elif choice is Domain.GPA:
    c1, c2 = st.columns(2)
    c1.metric("GPA", f"{result.value:.2f} / {d['max_value']:.1f}")
    c2.metric("Credits", f"{d['total_credits']:g}")
    show_classification(classify("gpa", result.value))

elif choice is Domain.DEBT_PAYOFF:
    c1, c2, c3 = st.columns(3)
    c1.metric("Debt-free in", f"{result.value:.0f} months")
    c2.metric("Total interest", money(d["total_interest"]))
    c3.metric("Total paid", money(d["total_paid"]))
    if not d["paid_off"]:
        st.warning("Some minimum payments don't cover the interest; those debts never get paid off.")
    s1, s2 = st.columns(2)
    s1.metric("Snowball", f"{d['snowball_months']} months", money(d["snowball_interest"]), delta_color="off")
    s2.metric("Avalanche", f"{d['avalanche_months']} months", money(d["avalanche_interest"]), delta_color="off")
    if d["interest_saved"] > 0:
        st.caption(f"Avalanche saves {money(d['interest_saved'])} in interest.")
    tag = ProjectionTag.DEBT_SNOWBALL if variant.value == "snowball" else ProjectionTag.DEBT_AVALANCHE
    st.subheader("Payoff order")
    show_series(project(tag, raw, **options), value_format=",.0f", yaxis_title="Paid off in month")

elif choice is Domain.RETIREMENT_SAVINGS:
    c1, c2, c3 = st.columns(3)
    c1.metric("Savings last", "Indefinitely" if d["indefinite"] else f"{result.value:.0f} years")
    c2.metric("First-year withdrawal", money(d["first_withdrawal"]))
    c3.metric("First-year gains", money(d["first_gains"]))
    show_series(project(ProjectionTag.RETIREMENT_DRAWDOWN, raw, variant=variant), value_format=",.0f",
                yaxis_title="Balance at year end")

elif choice is Domain.INVESTMENT_RETURNS:
    c1, c2, c3 = st.columns(3)
    c1.metric("Total return", money(d["total_return"]), f"{d['return_pct']:.1f}%")
    c2.metric("Annualized", f"{result.value:.2f}%")
    c3.metric("Invested", money(d["total_invested"]))
    show_classification(classify("investment_returns", result.value))
    st.subheader("Compared with")
    gaps = {"S&P 500": d["vs_sp500_pct"], "Bonds": d["vs_bonds_pct"], "Inflation": d["vs_inflation_pct"]}
    st.plotly_chart(comparison_chart(list(gaps), list(gaps.values()), title="Annualized difference (%)"),
                    use_container_width=True)
    st.caption(f"At this rate: {money(d['projected_5y'])} in 5 years, {money(d['projected_10y'])} in 10.")

elif choice is Domain.PAYCHECK:
    c1, c2 = st.columns(2)
    c1.metric("Take-home per paycheck", money(result.value))
    c1.metric("Gross per paycheck", money(d["gross"]))
    c1.metric("Take-home per year", money(d["annual_net"]))
    c1.caption(f"{d['periods']} paychecks a year, {d['effective_tax_pct']:.1f}% of gross to taxes.")
    with c2:
        parts = {k: d[k] for k in ("federal_tax", "state_tax", "social_security", "medicare",
                                   "health_insurance", "retirement", "other_deductions")}
        parts["net"] = max(0.0, result.value)
        st.plotly_chart(breakdown_pie(parts, title="Paycheck"), use_container_width=True)

elif choice is Domain.EV_CHARGING:
    c1, c2, c3 = st.columns(3)
    c1.metric("Monthly cost", money(result.value))
    c2.metric("Yearly cost", money(d["yearly"]))
    c3.metric("Per mile", money(d["cost_per_mile"]))
    c1.metric("Per charge", money(d["cost_per_charge"]))
    c2.metric("Level 2 charge time", f"{d['level2_hours']:.1f} h")
    c3.metric("DC fast charge time", f"{d['dc_fast_hours'] * 60:.0f} min")
    st.caption(
        f"{d['kwh_per_charge']:.1f} kWh per charge at {money(d['electricity_rate'])}/kWh; "
        f"{d['full_charge_range']:.0f} miles on a full battery. "
        f"Saves about {money(d['gas_savings'])} a year over a 25 MPG car."
    )

elif choice is Domain.TRIP_TIME:
    c1, c2, c3 = st.columns(3)
    c1.metric("Travel time", f"{d['hours']:.0f} h {d['minutes']:.0f} min")
    c2.metric("Fuel needed", f"{d['fuel']:.1f} {'gal' if variant.value == 'imperial' else 'L'}")
    if "arrival" in d:
        c3.metric("Arrival", f"{d['arrival']:%H:%M}")
