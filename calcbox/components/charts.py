# components/charts.py
# Plotly chart helpers used across the app.
# All functions return a Plotly Figure that Streamlit can display with st.plotly_chart(...).

from typing import Dict, Mapping, Optional, Sequence

import plotly.graph_objects as go

from ..classification import RangeTable, Tier
from ..projection import ProjectionSeries

TIER_COLORS: Dict[Tier, str] = {
    Tier.EXCELLENT: "#2E7D32",
    Tier.GOOD: "#66BB6A",
    Tier.FAIR: "#1E88E5",
    Tier.INFO: "#90A4AE",
    Tier.CAUTION: "#FDD835",
    Tier.WARNING: "#FB8C00",
    Tier.DANGER: "#E53935",
}


def _layout(fig: go.Figure, title: str, height: int = 380, **kw) -> go.Figure:
    fig.update_layout(
        title=title,
        template="plotly_white",
        height=height,
        margin=dict(l=10, r=10, t=40, b=10),
        **kw,
    )
    return fig


# ---------- Any projection as bars ----------
def projection_bar_chart(series: ProjectionSeries,
                         title: Optional[str] = None,
                         yaxis_title: str = "",
                         value_format: str = ",.1f") -> go.Figure:
    """One bar per point, in sweep order."""
    fig = go.Figure(go.Bar(
        x=list(series.labels), y=list(series.values), name=series.title,
        hovertemplate=f"%{{x}}<br>%{{y:{value_format}}}<extra></extra>"
    ))
    return _layout(fig, title or series.title, xaxis_title="", yaxis_title=yaxis_title)


# ---------- Amortization (stacked bars + balance line) ----------
def amortization_chart(series: ProjectionSeries,
                       title: str = "Loan Payoff by Year") -> go.Figure:
    """Interest and principal paid each year, with the remaining balance on a second axis."""
    labels = list(series.labels)
    fig = go.Figure()
    fig.add_bar(x=labels, y=[p.detail.get("principal", 0.0) for p in series], name="Principal")
    fig.add_bar(x=labels, y=[p.detail.get("interest", 0.0) for p in series], name="Interest")
    fig.add_trace(go.Scatter(
        x=labels, y=list(series.values), mode="lines+markers", name="Balance", yaxis="y2",
        hovertemplate="%{x}<br>$%{y:,.0f}<extra></extra>"
    ))
    return _layout(
        fig, title,
        barmode="stack",
        yaxis=dict(title="Paid during year"),
        yaxis2=dict(title="Remaining balance", overlaying="y", side="right", showgrid=False),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )


# ---------- Compound growth (balance vs. contributions) ----------
def growth_chart(series: ProjectionSeries,
                 title: str = "Growth by Year") -> go.Figure:
    """Balance line over the shaded amount actually contributed."""
    labels = list(series.labels)
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=labels, y=[p.detail.get("contributions", 0.0) for p in series],
        mode="lines", fill="tozeroy", name="Contributions",
        hovertemplate="%{x}<br>$%{y:,.0f}<extra></extra>"
    ))
    fig.add_trace(go.Scatter(
        x=labels, y=list(series.values), mode="lines", name="Balance",
        hovertemplate="%{x}<br>$%{y:,.0f}<extra></extra>"
    ))
    return _layout(fig, title, yaxis_title="Dollars",
                   legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1))


# ---------- Gauge coloured by a classification table ----------
def classification_gauge(value: float,
                         table: RangeTable,
                         upper: Optional[float] = None,
                         suffix: str = "") -> go.Figure:
    """Radial gauge whose coloured steps are the table's buckets."""
    bounds = table.bounds
    top = upper if upper is not None else (bounds[-1] * 1.25 if bounds[-1] > 0 else 1.0)
    top = max(top, float(value))
    edges = bounds[1:] + [top]
    steps = [
        {"range": [lo, hi], "color": TIER_COLORS[b.classification.tier]}
        for b, lo, hi in zip(table, bounds, edges)
        if hi > lo
    ]
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=round(float(value), 1),
        number={"suffix": suffix},
        title={"text": table.title},
        gauge={
            "axis": {"range": [bounds[0], top]},
            "bar": {"thickness": 0.25, "color": "#263238"},
            "steps": steps,
        }
    ))
    fig.update_layout(template="plotly_white", height=240, margin=dict(l=10, r=10, t=40, b=10))
    return fig


# ---------- Payment breakdown (donut) ----------
def breakdown_pie(parts: Mapping[str, float],
                  title: str = "Monthly Payment") -> go.Figure:
    """Donut of the non-zero components of a total."""
    shown = {k: v for k, v in parts.items() if v > 0}
    fig = go.Figure(go.Pie(
        labels=[k.replace("_", " ").title() for k in shown],
        values=list(shown.values()),
        hole=0.5,
        hovertemplate="%{label}<br>$%{value:,.2f}<extra></extra>"
    ))
    return _layout(fig, title, height=320)


def comparison_chart(labels: Sequence[str],
                     values: Sequence[float],
                     title: str = "Comparison",
                     yaxis_title: str = "") -> go.Figure:
    """Plain bars for a handful of named values (formula comparisons and similar)."""
    fig = go.Figure(go.Bar(x=list(labels), y=list(values)))
    return _layout(fig, title, height=300, yaxis_title=yaxis_title)
