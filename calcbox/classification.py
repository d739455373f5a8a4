"""Threshold classification of computed scalars.

A :class:`RangeTable` is an ordered list of buckets keyed by their lower
bound.  Each bucket covers ``[lower, next.lower)`` (or ``(lower, ...)`` when
its bound is exclusive); values below the first bound fall in the first
bucket and the last bucket is open-ended, so every number lands in exactly
one bucket.  :meth:`RangeTable.build` rejects descending bounds, which
rules out overlapping ranges.  An equal pair of bounds is only accepted as
a point bucket: the first inclusive, the second exclusive, e.g. sleep debt
of exactly 0 hours versus anything above it.

The shipped tables live in ``data/classification_tables.json`` and are read
once by :func:`load_classification_tables`.  Every lookup also accepts an
explicit ``tables`` mapping so callers can substitute their own thresholds.

Example
-------

>>> classify("bmi", 22.0).label
'Normal'
>>> classify("sleep_debt", 0).label
'Excellent'
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

_DEFAULT_TABLE_PATH = Path(__file__).resolve().parent / "data" / "classification_tables.json"


class Tier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    INFO = "info"
    CAUTION = "caution"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class Classification:
    label: str
    tier: Tier
    description: str = ""
    advice: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Bucket:
    lower: float
    classification: Classification
    lower_inclusive: bool = True


Row = Union[Bucket, Tuple[float, Classification], Tuple[float, Classification, bool]]


class RangeTable:
    """Ordered, non-overlapping buckets evaluated with one top-down scan."""

    def __init__(self, buckets: Sequence[Bucket], title: str = ""):
        self._buckets: Tuple[Bucket, ...] = tuple(buckets)
        self.title = title
        self._check()

    @classmethod
    def build(cls, rows: Iterable[Row], title: str = "") -> "RangeTable":
        """Build a table from ``Bucket`` objects or ``(lower, classification[, inclusive])`` tuples."""
        buckets = [row if isinstance(row, Bucket) else Bucket(*row) for row in rows]
        return cls(buckets, title)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "RangeTable":
        """Build a table from its JSON form (``title`` plus a ``buckets`` list)."""
        rows = []
        for entry in config["buckets"]:
            try:
                classification = Classification(
                    label=entry["label"],
                    tier=Tier(entry["tier"]),
                    description=entry.get("description", ""),
                    advice=tuple(entry.get("advice", ())),
                )
                rows.append(
                    Bucket(float(entry["lower"]), classification, bool(entry.get("lower_inclusive", True)))
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise ValueError(f"Malformed classification bucket {entry!r}: {exc}") from exc
        return cls(rows, config.get("title", ""))

    def _check(self) -> None:
        if not self._buckets:
            raise ValueError("A range table needs at least one bucket")
        for bucket in self._buckets:
            if math.isnan(bucket.lower):
                raise ValueError(f"Bucket '{bucket.classification.label}' has a NaN bound")
        for prev, nxt in zip(self._buckets, self._buckets[1:]):
            if nxt.lower < prev.lower:
                raise ValueError(
                    f"Bucket '{nxt.classification.label}' (from {nxt.lower}) overlaps "
                    f"'{prev.classification.label}' (from {prev.lower}); bounds must ascend"
                )
            if nxt.lower == prev.lower and not (prev.lower_inclusive and not nxt.lower_inclusive):
                raise ValueError(
                    f"Buckets '{prev.classification.label}' and '{nxt.classification.label}' share "
                    f"the bound {nxt.lower}; only an inclusive point followed by an exclusive bound is allowed"
                )

    def index(self, value: float) -> int:
        """Position of the bucket ``value`` falls in."""
        if math.isnan(value):
            return 0
        for i, nxt in enumerate(self._buckets[1:]):
            if value < nxt.lower or (value == nxt.lower and not nxt.lower_inclusive):
                return i
        return len(self._buckets) - 1

    def classify(self, value: float) -> Classification:
        return self._buckets[self.index(value)].classification

    @property
    def bounds(self) -> List[float]:
        return [b.lower for b in self._buckets]

    @property
    def labels(self) -> List[str]:
        return [b.classification.label for b in self._buckets]

    def __iter__(self) -> Iterator[Bucket]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"RangeTable({self.title!r}, {self.labels!r})"


@lru_cache(maxsize=None)
def load_classification_tables(path: Optional[Path] = None) -> Mapping[str, RangeTable]:
    """Load and validate classification tables from JSON.

    Parameters
    ----------
    path : Path, optional
        Path to a JSON file mapping table names to ``{"title", "buckets"}``.
        Defaults to the file shipped with the package.

    Returns
    -------
    Mapping[str, RangeTable]
        Read-only mapping of table name to table.
    """
    p = path or _DEFAULT_TABLE_PATH
    with open(p, "r", encoding="utf-8") as f:
        raw = json.load(f)
    logger.debug("Loaded %d classification tables from %s", len(raw), p)
    return MappingProxyType({name: RangeTable.from_config(cfg) for name, cfg in raw.items()})


def _table_for(name: str, tables: Optional[Mapping[str, Any]]) -> RangeTable:
    source = tables if tables is not None else load_classification_tables()
    try:
        table = source[name]
    except KeyError:
        raise ValueError(
            f"No classification table for '{name}' (available: {', '.join(sorted(source))})"
        ) from None
    return table if isinstance(table, RangeTable) else RangeTable.from_config(table)


def classify(
    domain: Union[str, Enum],
    value: float,
    tables: Optional[Mapping[str, Any]] = None,
) -> Classification:
    """Classify ``value`` with the table named after ``domain``.

    ``tables`` may hold :class:`RangeTable` objects or their JSON form.
    Unknown table names raise ``ValueError``.
    """
    name = domain.value if isinstance(domain, Enum) else str(domain)
    return _table_for(name, tables).classify(float(value))


def table_names(tables: Optional[Mapping[str, Any]] = None) -> List[str]:
    source = tables if tables is not None else load_classification_tables()
    return sorted(source)


__all__ = [
    "Bucket",
    "Classification",
    "RangeTable",
    "Tier",
    "classify",
    "load_classification_tables",
    "table_names",
]
