# calculators/strength.py
from enum import Enum
from typing import Dict, List, Tuple, Union

MAX_REPS = 20


class OneRepMaxFormula(str, Enum):
    EPLEY = "epley"
    BRZYCKI = "brzycki"
    LANDER = "lander"
    OCONNER = "oconner"


def one_rep_max(
    weight: float,
    reps: float,
    formula: Union[OneRepMaxFormula, str] = OneRepMaxFormula.EPLEY,
) -> float:
    """Estimate the one-repetition maximum from a set of ``reps`` at ``weight``.

    Only sets of 1 to 20 reps are estimated; anything else returns 0.

    * Epley: ``w × (1 + r/30)``
    * Brzycki: ``w × 36 / (37 − r)``
    * Lander: ``w × 100 / (101.3 − 2.67123 r)``
    * O'Conner: ``w × (1 + r/40)``
    """
    formula = OneRepMaxFormula(formula)
    if weight <= 0 or reps <= 0 or reps > MAX_REPS:
        return 0.0
    if formula is OneRepMaxFormula.EPLEY:
        return weight * (1 + reps / 30)
    if formula is OneRepMaxFormula.BRZYCKI:
        return weight * 36 / (37 - reps)
    if formula is OneRepMaxFormula.LANDER:
        return weight * 100 / (101.3 - 2.67123 * reps)
    return weight * (1 + reps / 40)


def all_formulas(weight: float, reps: float) -> Dict[OneRepMaxFormula, float]:
    """Estimate from every formula so the UI can compare them side by side."""
    return {f: one_rep_max(weight, reps, f) for f in OneRepMaxFormula}


def rep_range_guide() -> List[Tuple[str, float, float, str]]:
    """Training zones as ``(reps, low %, high %, purpose)`` rows."""
    return [
        ("1-3 reps", 90.0, 100.0, "Maximum Strength"),
        ("4-6 reps", 85.0, 90.0, "Strength & Power"),
        ("6-8 reps", 80.0, 85.0, "Strength & Size"),
        ("8-12 reps", 70.0, 80.0, "Muscle Growth"),
        ("12-15 reps", 65.0, 70.0, "Muscular Endurance"),
        ("15+ reps", 0.0, 65.0, "Endurance & Conditioning"),
    ]
