"""Expose component submodules for convenience."""

from .forms import calculator_form
from .charts import (
    amortization_chart,
    breakdown_pie,
    classification_gauge,
    comparison_chart,
    growth_chart,
    projection_bar_chart,
)

__all__ = [
    "calculator_form",
    "amortization_chart",
    "breakdown_pie",
    "classification_gauge",
    "comparison_chart",
    "growth_chart",
    "projection_bar_chart",
]
