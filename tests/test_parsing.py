"""Tests for free-text parsing and field validation.

Bad input never raises: it resolves to ``None`` (absent), optionally
replaced by the field's default, and the formulas read absent as zero.
"""

import math

import pytest

from calcbox.parsing import FieldSpec, ValidatedInputs, parse_field, parse_inputs, parse_number


@pytest.mark.parametrize(
    "text,expected",
    [
        ("12.5", 12.5),
        ("  7 ", 7.0),
        ("-3", -3.0),
        ("1e3", 1000.0),
        ("", None),
        ("   ", None),
        (None, None),
        ("abc", None),
        ("12abc", None),
        ("nan", None),
        ("inf", None),
        ("-Infinity", None),
    ],
)
def test_parse_number_decimal(text, expected):
    """Decimal parsing strips whitespace and rejects non-finite or non-numeric text."""
    assert parse_number(text) == expected


@pytest.mark.parametrize("text,expected", [("30", 30.0), ("30.5", None), ("30.0", None), (" 8 ", 8.0)])
def test_parse_number_integer(text, expected):
    """Integer fields only accept integer literals."""
    assert parse_number(text, "integer") == expected


@pytest.mark.parametrize("kind", ["decimal", "integer"])
@pytest.mark.parametrize("text", ["1_000", "1_0.5", "١٢", "１２", "12٣"])
def test_parse_number_rejects_separators_and_non_ascii_digits(text, kind):
    """Only plain ASCII numerals count as numbers."""
    assert parse_number(text, kind) is None


def test_domain_violation_is_absent():
    """Out-of-domain values become absent instead of raising."""
    specs = [
        FieldSpec("weight", required=True, minimum=0, min_inclusive=False),
        FieldSpec("reps", kind="integer", required=True, minimum=1, maximum=20),
        FieldSpec("pct", minimum=0, maximum=100),
    ]
    inputs = parse_inputs({"weight": "0", "reps": "21", "pct": "100"}, specs)
    assert inputs["weight"] is None
    assert inputs["reps"] is None
    assert inputs["pct"] == 100.0
    assert inputs.missing == ("weight", "reps")
    assert not inputs.is_complete


def test_exclusive_maximum():
    spec = FieldSpec("body_fat", minimum=0, maximum=100, max_inclusive=False)
    assert spec.admits(99.9)
    assert not spec.admits(100)
    assert spec.admits(0)


def test_default_applies_to_absent_field():
    """A field with a default takes it when the text is empty, non-numeric or out of domain."""
    spec = FieldSpec("cycle_length", minimum=15, maximum=60, default=28)
    assert parse_field({}, spec) == 28.0
    assert parse_field({"cycle_length": "abc"}, spec) == 28.0
    assert parse_field({"cycle_length": "100"}, spec) == 28.0
    assert parse_field({"cycle_length": "35"}, spec) == 35.0


def test_unspecified_fields_ignored_and_missing_fields_present():
    """Every described field gets an entry; unknown raw keys are dropped."""
    inputs = parse_inputs({"other": "5"}, [FieldSpec("weight")])
    assert list(inputs) == ["weight"]
    assert inputs["weight"] is None
    assert inputs.get("weight") == 0.0
    assert inputs.get("weight", 1.0) == 1.0
    assert not inputs.is_present("weight")


def test_absent_and_zero_text_read_the_same():
    """Empty text and '0' both end up as zero for a non-required field."""
    spec = [FieldSpec("hoa", minimum=0)]
    assert parse_inputs({"hoa": ""}, spec).get("hoa") == parse_inputs({"hoa": "0"}, spec).get("hoa")


def test_validated_inputs_of():
    inputs = ValidatedInputs.of(weight=225, reps=None)
    assert inputs["weight"] == 225.0
    assert inputs["reps"] is None
    assert len(inputs) == 2
    assert inputs.is_complete


def test_field_spec_rejects_bad_kind_and_bounds():
    """Malformed specs are programmer errors."""
    with pytest.raises(ValueError):
        FieldSpec("x", kind="text")
    with pytest.raises(ValueError):
        FieldSpec("x", minimum=10, maximum=1)


def test_parse_is_pure():
    """Parsing the same raw mapping twice gives equal records."""
    specs = [FieldSpec("a", minimum=0), FieldSpec("b")]
    raw = {"a": "1.5", "b": "x"}
    first, second = parse_inputs(raw, specs), parse_inputs(raw, specs)
    assert dict(first) == dict(second)
    assert math.isclose(first.get("a"), 1.5)
