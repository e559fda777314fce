"""
tooltips.py
-----------
Recovers the true value behind a rendered chart point and formats it for
the hover tooltip.

Chart axes may show rescaled values; tooltips must always show the
original, formatted with the precision of its metric.
"""

import logging
from typing import Any, List, Mapping, Tuple, Union

from constants import (
    MAGNITUDE_METRICS,
    ORIGINAL_SERIES_KEYS,
    QUALITY_METRICS,
    RATE_METRICS,
    ROW_RESERVED_KEYS,
    SERIES_KEYS,
)
from services.comparison import ComparisonRecord, SharedAxisRecord, series_key
from utils import format_float, format_number, format_percentage, format_score

logger = logging.getLogger(__name__)

Series = Union[int, str]
Record = Union[ComparisonRecord, SharedAxisRecord, Mapping[str, Any]]


def format_value(metric_name: str, value) -> str:
    """Format a resolved value with the precision its metric calls for."""
    if metric_name in MAGNITUDE_METRICS:
        return format_number(value)
    if metric_name in RATE_METRICS:
        return format_percentage(value)
    if metric_name in QUALITY_METRICS:
        return f"{format_float(value, 2):.2f}"
    return format_score(value)


def _row_labels(row: Mapping[str, Any]) -> List[str]:
    """Series labels of a flat chart row, in slot order."""
    return [k for k in row if k not in ROW_RESERVED_KEYS]


def _first_present(*candidates):
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return 0.0


class TooltipValueResolver:
    """
    Resolves tooltip values for both record objects and their chart rows.

    Series may be a slot index (0/1), a display label, or "A"/"B" for
    shared-axis rows.
    """

    def resolve(self, record: Record, series: Series) -> float:
        """Sidecar (original) value if present, else the plotted value."""
        if isinstance(record, SharedAxisRecord):
            return self._resolve_shared(record, series)
        if isinstance(record, ComparisonRecord):
            return self._resolve_flat(record, series)
        if isinstance(record, Mapping):
            return self._resolve_row(record, series)
        logger.warning(f"Cannot resolve tooltip for {type(record)}")
        return 0.0

    def format(self, record: Record, series: Series) -> str:
        return format_value(self.metric_name(record), self.resolve(record, series))

    def tooltip_lines(self, record: Record) -> List[Tuple[str, str]]:
        """(series label, formatted true value) for every series of a record."""
        if isinstance(record, ComparisonRecord):
            return [(sv.label, self.format(record, sv.slot)) for sv in record.values]
        if isinstance(record, SharedAxisRecord) or (
            isinstance(record, Mapping) and "subject" in record
        ):
            return [(key, self.format(record, key)) for key in SERIES_KEYS]
        if isinstance(record, Mapping):
            return [
                (label, self.format(record, label)) for label in _row_labels(record)
            ]
        return []

    @staticmethod
    def metric_name(record: Record) -> str:
        if isinstance(record, Mapping):
            return record.get("name") or record.get("subject") or ""
        return record.name

    def _resolve_flat(self, record: ComparisonRecord, series: Series) -> float:
        for sv in record.values:
            if series == sv.slot or series == sv.label:
                return _first_present(sv.actual, sv.value)
        return 0.0

    def _resolve_shared(self, record: SharedAxisRecord, series: Series) -> float:
        key = series_key(series) if series in (0, 1) else series
        if key == "A":
            return _first_present(record.original_a, record.a)
        if key == "B":
            return _first_present(record.original_b, record.b)
        return 0.0

    def _resolve_row(self, row: Mapping[str, Any], series: Series) -> float:
        if series in (0, 1) and "subject" in row:
            series = series_key(series)
        if "subject" not in row and series in (0, 1):
            labels = _row_labels(row)
            series = labels[series] if series < len(labels) else None
        if "subject" in row and series in ORIGINAL_SERIES_KEYS:
            return _first_present(
                row.get(ORIGINAL_SERIES_KEYS[series]), row.get(series)
            )
        sidecar = row.get("actualValues") or row.get("originalValues") or {}
        return _first_present(sidecar.get(series), row.get(series))
