"""Parsing and validation of free-text calculator input.

Every calculator screen collects plain strings from text fields and hands
them to :func:`parse_inputs` together with a list of :class:`FieldSpec`
describing each field.  The result is a :class:`ValidatedInputs` record in
which every field is either a finite ``float`` that satisfies its domain or
``None`` (absent).

Nothing in this module raises on bad user input.  Empty text, text that is
not a number and numbers outside the field's domain all resolve to absent,
and the formulas downstream treat absent as zero.  This mirrors a
live-as-you-type calculator where half-typed input is the normal state.

Example
-------

>>> specs = [FieldSpec("weight", minimum=0, min_inclusive=False, required=True),
...          FieldSpec("people", kind="integer", minimum=1)]
>>> inputs = parse_inputs({"weight": "225", "people": "2.5"}, specs)
>>> inputs["weight"], inputs["people"]
(225.0, None)
>>> inputs.get("people")
0.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

_KINDS = ("decimal", "integer")


@dataclass(frozen=True)
class FieldSpec:
    """Description of one input field.

    Parameters
    ----------
    name : str
        Key used in the raw mapping and in the validated record.
    kind : str
        ``"decimal"`` or ``"integer"``.  Integer fields only accept integer
        literals.
    required : bool
        Whether the computation needs this field to produce a result.
    minimum, maximum : float, optional
        Domain bounds.  ``None`` leaves that side unbounded.
    min_inclusive, max_inclusive : bool
        Whether the bound itself is allowed (``weight > 0`` uses an
        exclusive minimum).
    default : float, optional
        Value substituted when the field is absent.
    """

    name: str
    kind: str = "decimal"
    required: bool = False
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    min_inclusive: bool = True
    max_inclusive: bool = True
    default: Optional[float] = None

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"Unknown field kind '{self.kind}' (expected decimal/integer)")
        if (
            self.minimum is not None
            and self.maximum is not None
            and self.minimum > self.maximum
        ):
            raise ValueError(f"Field '{self.name}' has minimum above maximum")

    def admits(self, value: float) -> bool:
        """Return True if ``value`` lies inside the field's domain."""
        if self.minimum is not None:
            if value < self.minimum or (value == self.minimum and not self.min_inclusive):
                return False
        if self.maximum is not None:
            if value > self.maximum or (value == self.maximum and not self.max_inclusive):
                return False
        return True


class ValidatedInputs(Mapping[str, Optional[float]]):
    """Read-only mapping of field name to a valid number or ``None``."""

    def __init__(
        self,
        values: Mapping[str, Optional[float]],
        required: Iterable[str] = (),
    ):
        self._values: Dict[str, Optional[float]] = dict(values)
        self._required: Tuple[str, ...] = tuple(required)

    @classmethod
    def of(cls, **values: Optional[float]) -> "ValidatedInputs":
        """Build a record straight from numbers, skipping text parsing."""
        return cls({k: (None if v is None else float(v)) for k, v in values.items()})

    def __getitem__(self, name: str) -> Optional[float]:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ValidatedInputs({self._values!r})"

    def get(self, name: str, default: float = 0.0) -> float:  # type: ignore[override]
        value = self._values.get(name)
        return default if value is None else value

    def is_present(self, name: str) -> bool:
        return self._values.get(name) is not None

    @property
    def missing(self) -> Tuple[str, ...]:
        """Required fields that ended up absent."""
        return tuple(n for n in self._required if not self.is_present(n))

    @property
    def is_complete(self) -> bool:
        return not self.missing


def parse_number(text: Optional[str], kind: str = "decimal") -> Optional[float]:
    """Parse ``text`` as a finite number, returning ``None`` if it is not one."""
    if text is None:
        return None
    cleaned = str(text).strip()
    if not cleaned:
        return None
    # float()/int() also take digit separators and non-ASCII digits
    if "_" in cleaned or not cleaned.isascii():
        return None
    try:
        value = float(int(cleaned)) if kind == "integer" else float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_field(raw: Mapping[str, str], spec: FieldSpec) -> Optional[float]:
    """Parse and domain-check a single field from the raw mapping."""
    text = raw.get(spec.name, "")
    value = parse_number(text, spec.kind)
    if value is not None and not spec.admits(value):
        logger.debug("Field %s=%r outside its domain; treating as absent", spec.name, text)
        value = None
    elif value is None and text and str(text).strip():
        logger.debug("Field %s=%r is not numeric; treating as absent", spec.name, text)
    if value is None and spec.default is not None:
        value = float(spec.default)
    return value


def parse_inputs(raw: Mapping[str, str], specs: Iterable[FieldSpec]) -> ValidatedInputs:
    """Convert raw text input into a :class:`ValidatedInputs` record.

    Fields present in ``raw`` but not described by ``specs`` are ignored.
    Required fields that are absent are reported through
    :attr:`ValidatedInputs.missing` rather than raised.
    """
    specs = list(specs)
    values = {spec.name: parse_field(raw, spec) for spec in specs}
    inputs = ValidatedInputs(values, required=[s.name for s in specs if s.required])
    if inputs.missing:
        logger.debug("Missing required fields: %s", ", ".join(inputs.missing))
    return inputs


__all__ = [
    "FieldSpec",
    "ValidatedInputs",
    "parse_field",
    "parse_inputs",
    "parse_number",
]
