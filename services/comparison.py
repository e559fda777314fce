"""
comparison.py
-------------
Builds the per-metric records behind the influencer comparison charts.

Records are keyed by slot index (0/1); the display label (handle, or
"Influencer N" for an empty slot) is attached to each slot value rather
than used as the key, so the same influencer in both slots never collapses.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from constants import (
    CHART_AUDIENCE,
    CHART_ENGAGEMENT,
    CHART_SCORE_BREAKDOWN,
    CHART_SCORES,
    CHARTS,
    HANDLE_FIELD,
    METRIC_AVG_LIKES,
    METRIC_CREDIBILITY,
    METRIC_ENGAGEMENT_QUALITY,
    METRIC_ENGAGEMENT_RATE,
    METRIC_FOLLOWERS,
    METRIC_INFLUENCE,
    METRIC_INFLUENCEIQ,
    METRIC_LONGEVITY,
    METRIC_TOTAL_POSTS,
    ROW_RESERVED_KEYS,
    SERIES_KEYS,
    SHARED_AXIS_MAX,
)
from services.config import ComparisonConfig
from services.influencer_errors import UnknownChartError
from services.selection import Selection
from utils import (
    engagement_rate_for,
    parse_number,
    safe_get_value,
    scale_score_field,
)

logger = logging.getLogger(__name__)

# (value, actual) for one occupied slot
Extractor = Callable[[Any], Tuple[float, float]]


@dataclass(frozen=True)
class SlotValue:
    slot: int
    label: str
    value: float
    actual: float


@dataclass(frozen=True)
class ComparisonRecord:
    """One metric of a flat (bar chart) comparison."""

    name: str
    values: Tuple[SlotValue, SlotValue]

    @property
    def labels(self) -> List[str]:
        return [sv.label for sv in self.values]

    def slot(self, index: int) -> SlotValue:
        return self.values[index]

    def to_chart_row(self) -> Dict[str, Any]:
        """Label-keyed row: {"name", <label>: value, "actualValues": {...}}."""
        row: Dict[str, Any] = {"name": self.name}
        row.update({sv.label: sv.value for sv in self.values})
        row["actualValues"] = {sv.label: sv.actual for sv in self.values}
        return row


@dataclass(frozen=True)
class SharedAxisRecord:
    """One axis of the radar comparison, rescaled onto 0-100."""

    subject: str
    a: float
    b: float
    original_a: float
    original_b: float
    full_mark: float = SHARED_AXIS_MAX

    @property
    def name(self) -> str:
        return self.subject

    def to_chart_row(self) -> Dict[str, Any]:
        return {
            "subject": self.subject,
            "A": self.a,
            "B": self.b,
            "fullMark": self.full_mark,
            "originalA": self.original_a,
            "originalB": self.original_b,
        }


@dataclass(frozen=True)
class MetricDefinition:
    name: str
    extract: Extractor


def _plain(field: str) -> Extractor:
    def extract(influencer) -> Tuple[float, float]:
        value = parse_number(safe_get_value(influencer, field))
        return value, value

    return extract


def _scaled_score(field: str) -> Extractor:
    def extract(influencer) -> Tuple[float, float]:
        return scale_score_field(influencer, field)

    return extract


def _engagement_rate(influencer) -> Tuple[float, float]:
    rate = engagement_rate_for(influencer)
    return rate, rate


FLAT_CHART_METRICS: Dict[str, Tuple[MetricDefinition, ...]] = {
    CHART_AUDIENCE: (
        MetricDefinition(METRIC_FOLLOWERS, _plain("followers")),
        MetricDefinition(METRIC_AVG_LIKES, _plain("avg_likes")),
        MetricDefinition(METRIC_TOTAL_POSTS, _plain("posts")),
    ),
    CHART_ENGAGEMENT: (
        MetricDefinition(METRIC_ENGAGEMENT_RATE, _engagement_rate),
        MetricDefinition(
            METRIC_ENGAGEMENT_QUALITY, _plain("engagement_quality_score")
        ),
    ),
    CHART_SCORE_BREAKDOWN: (
        MetricDefinition(METRIC_CREDIBILITY, _scaled_score("credibility_score")),
        MetricDefinition(
            METRIC_ENGAGEMENT_QUALITY, _scaled_score("engagement_quality_score")
        ),
        MetricDefinition(METRIC_LONGEVITY, _scaled_score("longevity_score")),
    ),
}

SHARED_AXIS_METRICS: Tuple[Tuple[str, str], ...] = (
    (METRIC_INFLUENCE, "influence_score"),
    (METRIC_CREDIBILITY, "credibility_score"),
    (METRIC_ENGAGEMENT_QUALITY, "engagement_quality_score"),
    (METRIC_LONGEVITY, "longevity_score"),
    (METRIC_INFLUENCEIQ, "influenceiq_score"),
)


class ComparisonRecordBuilder:
    """
    Builds comparison records for a two-slot selection.

    Usage:
        builder = ComparisonRecordBuilder()
        rows = builder.build(Selection(a, b), "audience")
        radar = builder.build(Selection(a, b), "scores")
    """

    def __init__(self, config: Optional[ComparisonConfig] = None):
        self.config = config or ComparisonConfig()

    def slot_labels(self, selection: Selection) -> Tuple[str, str]:
        """Handle for occupied slots, "Influencer N" for empty ones."""
        labels = []
        for index, influencer in enumerate(selection.slots):
            handle = safe_get_value(influencer, HANDLE_FIELD, "")
            label = str(handle) if handle else self.config.fallback_label(index)
            if label in ROW_RESERVED_KEYS:
                # Would overwrite the row's own fields in to_chart_row()
                logger.warning(f"Handle '{label}' clashes with a chart row key")
                label = f"{label} ({index + 1})"
            labels.append(label)

        if labels[0].lower() == labels[1].lower():
            logger.warning(
                f"Same influencer '{labels[0]}' selected in both slots; "
                "labelling slot 2 separately"
            )
            labels[1] = f"{labels[1]} (2)"
        return labels[0], labels[1]

    def build(self, selection: Optional[Selection], chart: str) -> list:
        """Return the records for one chart, in the shape that chart expects."""
        selection = selection or Selection()
        if chart == CHART_SCORES:
            return self.shared_axis_records(selection)
        if chart not in FLAT_CHART_METRICS:
            raise UnknownChartError(
                f"Unknown chart {chart!r}; expected one of {CHARTS}"
            )
        return self._flat_records(selection, FLAT_CHART_METRICS[chart])

    def build_all(self, selection: Optional[Selection]) -> Dict[str, list]:
        return {chart: self.build(selection, chart) for chart in CHARTS}

    def audience_records(self, selection: Selection) -> List[ComparisonRecord]:
        return self.build(selection, CHART_AUDIENCE)

    def engagement_records(self, selection: Selection) -> List[ComparisonRecord]:
        return self.build(selection, CHART_ENGAGEMENT)

    def score_breakdown_records(self, selection: Selection) -> List[ComparisonRecord]:
        return self.build(selection, CHART_SCORE_BREAKDOWN)

    def shared_axis_records(self, selection: Selection) -> List[SharedAxisRecord]:
        """Radar records; empty unless both slots are occupied."""
        if not selection.is_complete:
            return []

        first, second = selection.slots
        records = []
        for subject, field in SHARED_AXIS_METRICS:
            a, original_a = scale_score_field(first, field)
            b, original_b = scale_score_field(second, field)
            records.append(
                SharedAxisRecord(
                    subject=subject,
                    a=a,
                    b=b,
                    original_a=original_a,
                    original_b=original_b,
                )
            )
        return records

    def _flat_records(
        self, selection: Selection, metrics: Tuple[MetricDefinition, ...]
    ) -> List[ComparisonRecord]:
        labels = self.slot_labels(selection)
        records = []
        for metric in metrics:
            values = []
            for index, influencer in enumerate(selection.slots):
                value, actual = (
                    metric.extract(influencer) if influencer is not None else (0.0, 0.0)
                )
                values.append(SlotValue(index, labels[index], value, actual))
            records.append(ComparisonRecord(metric.name, tuple(values)))
        return records


def series_key(slot: int) -> str:
    """Radar series key ("A"/"B") for a slot index."""
    return SERIES_KEYS[slot]
