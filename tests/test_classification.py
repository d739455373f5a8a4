"""Tests for range-table classification."""

import json
import math

import pytest

from calcbox.classification import (
    Bucket,
    Classification,
    RangeTable,
    Tier,
    classify,
    load_classification_tables,
    table_names,
)
from calcbox.registry import Domain


@pytest.mark.parametrize(
    "value,label",
    [
        (10.0, "Severe Thinness"),
        (15.99, "Severe Thinness"),
        (16.0, "Moderate Thinness"),
        (17.0, "Mild Thinness"),
        (18.49, "Mild Thinness"),
        (18.5, "Normal"),
        (24.9, "Normal"),
        (25.0, "Overweight"),
        (30.0, "Obese Class I"),
        (35.0, "Obese Class II"),
        (40.0, "Obese Class III"),
        (80.0, "Obese Class III"),
    ],
)
def test_bmi_buckets(value, label):
    assert classify("bmi", value).label == label


def test_bmi_tiers_and_advice():
    normal = classify(Domain.BMI, 22)
    assert normal.tier is Tier.GOOD
    assert normal.advice[0].startswith("Maintain")
    assert classify(Domain.BMI, 42).tier is Tier.DANGER


@pytest.mark.parametrize(
    "value,label",
    [
        (0.0, "Academic Probation"),
        (1.99, "Academic Probation"),
        (2.0, "Academic Warning"),
        (3.0, "Good Standing"),
        (3.2, "Cum Laude"),
        (3.5, "Magna Cum Laude"),
        (3.8, "Summa Cum Laude"),
        (4.6, "Summa Cum Laude"),
    ],
)
def test_gpa_buckets(value, label):
    assert classify("gpa", value).label == label


@pytest.mark.parametrize(
    "value,label",
    [(0, "Excellent"), (0.5, "Good"), (2, "Moderate"), (4.99, "Moderate"), (5, "High"), (10, "Critical"), (14, "Critical")],
)
def test_sleep_debt_buckets(value, label):
    """Exactly zero debt is its own bucket; anything above it is not."""
    assert classify("sleep_debt", value).label == label


@pytest.mark.parametrize(
    "value,label",
    [(5, "Poor"), (15, "Below Average"), (30, "Good"), (35, "Excellent"), (50, "Outstanding")],
)
def test_fuel_economy_buckets(value, label):
    assert classify("fuel_economy", value).label == label


@pytest.mark.parametrize("week,label", [(8, "First Trimester"), (12, "First Trimester"), (13, "Second Trimester"), (28, "Third Trimester")])
def test_trimester_buckets(week, label):
    assert classify("pregnancy", week).label == label


@pytest.mark.parametrize(
    "value,label",
    [
        (-250.0, "Loss"),
        (-0.1, "Loss"),
        (0.0, "Poor"),
        (2.99, "Poor"),
        (3.0, "Below Average"),
        (7.0, "Good"),
        (10.0, "Excellent"),
        (14.99, "Excellent"),
        (15.0, "Outstanding"),
    ],
)
def test_investment_return_buckets(value, label):
    assert classify("investment_returns", value).label == label


def test_sleep_impact_buckets():
    assert classify("sleep_impact", 0.05).label == "Minimal"
    assert classify("sleep_impact", 0.5).label == "Severe"


def test_values_below_first_bound_and_nan_use_first_bucket():
    assert classify("bmi", -3).label == "Severe Thinness"
    assert classify("bmi", math.nan).label == "Severe Thinness"


def test_index_is_monotone():
    table = load_classification_tables()["bmi"]
    positions = [table.index(v / 10) for v in range(0, 600)]
    assert positions == sorted(positions)
    assert positions[-1] == len(table) - 1


def test_shipped_tables():
    assert table_names() == [
        "bmi", "fuel_economy", "gpa", "investment_returns", "pregnancy", "sleep_debt", "sleep_impact",
    ]
    assert load_classification_tables() is load_classification_tables()


def test_unknown_table_raises():
    with pytest.raises(ValueError):
        classify("loan", 1.0)


def _c(label):
    return Classification(label, Tier.INFO)


def test_build_rejects_descending_bounds():
    with pytest.raises(ValueError):
        RangeTable.build([(0, _c("a")), (10, _c("b")), (5, _c("c"))])


def test_build_rejects_duplicate_inclusive_bounds():
    with pytest.raises(ValueError):
        RangeTable.build([(0, _c("a")), (0, _c("b"))])


def test_build_rejects_empty_and_nan():
    with pytest.raises(ValueError):
        RangeTable.build([])
    with pytest.raises(ValueError):
        RangeTable.build([(math.nan, _c("a"))])


def test_point_bucket():
    table = RangeTable.build([Bucket(0, _c("zero")), Bucket(0, _c("positive"), lower_inclusive=False)])
    assert table.classify(0).label == "zero"
    assert table.classify(1e-9).label == "positive"
    assert table.bounds == [0, 0]


def test_caller_supplied_tables():
    """A caller can replace the shipped thresholds."""
    custom = {"bmi": RangeTable.build([(0, _c("low")), (20, _c("high"))], title="Custom")}
    assert classify("bmi", 22, tables=custom).label == "high"
    raw = {"bmi": {"buckets": [{"lower": 0, "label": "low", "tier": "info"}, {"lower": 30, "label": "high", "tier": "info"}]}}
    assert classify("bmi", 22, tables=raw).label == "low"


def test_malformed_config():
    with pytest.raises(ValueError):
        RangeTable.from_config({"buckets": [{"lower": 0, "label": "x", "tier": "purple"}]})
    with pytest.raises(ValueError):
        RangeTable.from_config({"buckets": [{"label": "x", "tier": "info"}]})


def test_load_tables_from_file(tmp_path):
    path = tmp_path / "tables.json"
    path.write_text(
        json.dumps({"score": {"title": "Score", "buckets": [{"lower": 0, "label": "Low", "tier": "caution"}, {"lower": 50, "label": "High", "tier": "good"}]}}),
        encoding="utf-8",
    )
    tables = load_classification_tables(path)
    assert list(tables) == ["score"]
    assert tables["score"].title == "Score"
    assert classify("score", 75, tables=tables).tier is Tier.GOOD
    with pytest.raises(TypeError):
        tables["other"] = tables["score"]
