"""CalcBox: parsing, formulas, classification and projections for everyday calculators.

The four entry points are re-exported here::

    from calcbox import parse_inputs, compute, classify, project

    inputs = parse_inputs({"weight": "225", "reps": "8"}, field_specs("one_rep_max"))
    result = compute("one_rep_max", "epley", inputs)
    table = project("one_rep_max_percentages", inputs)
"""

from .classification import Classification, RangeTable, Tier, classify, load_classification_tables
from .parsing import FieldSpec, ValidatedInputs, parse_inputs
from .projection import ProjectionPoint, ProjectionSeries, ProjectionTag, project
from .registry import DerivedResult, Domain, compute, field_specs, variants

__version__ = "0.1.0"

__all__ = [
    "Classification",
    "DerivedResult",
    "Domain",
    "FieldSpec",
    "ProjectionPoint",
    "ProjectionSeries",
    "ProjectionTag",
    "RangeTable",
    "Tier",
    "ValidatedInputs",
    "classify",
    "compute",
    "field_specs",
    "load_classification_tables",
    "parse_inputs",
    "project",
    "variants",
]
