"""
Tests for tooltip value resolution and per-metric formatting.
"""

import pytest

from services.comparison import ComparisonRecordBuilder
from services.config import ComparisonConfig
from services.selection import Selection
from services.tooltips import TooltipValueResolver, format_value


@pytest.fixture
def resolver():
    return TooltipValueResolver()


@pytest.fixture
def builder():
    return ComparisonRecordBuilder(ComparisonConfig(fallback_label_prefix="Influencer"))


def _record(records, name):
    return next(r for r in records if r.name == name)


class TestFormatValue:
    @pytest.mark.parametrize(
        "metric, value, expected",
        [
            ("Followers", 34_700_000, "34.7M"),
            ("Average Likes", 367_800, "367.8K"),
            ("Total Posts", 42, "42"),
            ("Engagement Rate (%)", 5, "5.00%"),
            ("Engagement Quality", 7.456, "7.46"),
            ("Longevity", 9.2, "9.20"),
            ("Credibility", 88.5, "88.5"),
            ("InfluenceIQ", 90, "90.0"),
            ("Influence Score", 60, "60.0"),
        ],
    )
    def test_dispatch_table(self, metric, value, expected):
        assert format_value(metric, value) == expected


class TestFlatRecords:
    def test_magnitude_record_returns_true_value(self, resolver, builder, pair):
        followers = _record(builder.audience_records(Selection(*pair)), "Followers")

        assert resolver.resolve(followers, 0) == pytest.approx(1_000_000)
        assert resolver.resolve(followers, "beta") == pytest.approx(500_000)
        assert resolver.format(followers, 0) == "1.0M"

    def test_sidecar_wins_over_plotted_value(self, resolver, builder, pair):
        row = builder.audience_records(Selection(*pair))[0].to_chart_row()
        row["alpha"] = 999  # e.g. a truncated axis value

        assert resolver.resolve(row, "alpha") == pytest.approx(1_000_000)

    def test_zero_sidecar_is_still_used(self, resolver):
        row = {"name": "Followers", "x": 5, "actualValues": {"x": 0}}
        assert resolver.resolve(row, "x") == 0

    def test_falls_back_to_primary_value(self, resolver):
        row = {"name": "Engagement Quality", "x": 7.456}
        assert resolver.resolve(row, "x") == 7.456
        assert resolver.format(row, "x") == "7.46"

    def test_original_values_sidecar(self, resolver):
        row = {"name": "Longevity", "x": 80, "originalValues": {"x": 8}}
        assert resolver.format(row, "x") == "8.00"

    def test_score_breakdown_tooltip_shows_original(self, resolver, builder, pair):
        records = builder.score_breakdown_records(Selection(*pair))
        longevity = _record(records, "Longevity")

        assert longevity.slot(1).value == pytest.approx(100)
        assert resolver.format(longevity, 1) == "10.00"

    def test_tooltip_lines(self, resolver, builder, pair):
        rate = builder.engagement_records(Selection(*pair))[0]
        assert resolver.tooltip_lines(rate) == [("alpha", "5.00%"), ("beta", "5.00%")]

        row_lines = resolver.tooltip_lines(rate.to_chart_row())
        assert row_lines == [("alpha", "5.00%"), ("beta", "5.00%")]

    def test_chart_row_accepts_slot_index(self, resolver, builder, pair):
        followers = builder.audience_records(Selection(*pair))[0]
        row = followers.to_chart_row()

        assert resolver.resolve(row, 0) == resolver.resolve(followers, 0)
        assert resolver.resolve(row, 1) == pytest.approx(500_000)
        assert resolver.format(row, 1) == "500.0K"

    def test_chart_row_slot_index_without_sidecar(self, resolver):
        row = {"name": "Engagement Quality", "alpha": 7.5, "beta": 5}
        assert resolver.resolve(row, 1) == 5

    def test_unknown_series(self, resolver, builder, pair):
        followers = builder.audience_records(Selection(*pair))[0]
        assert resolver.resolve(followers, "nobody") == 0


class TestSharedAxisRecords:
    def test_resolves_original_score(self, resolver, builder, pair):
        records = builder.shared_axis_records(Selection(*pair))
        quality = _record(records, "Engagement Quality")

        assert quality.a == pytest.approx(75)
        assert resolver.resolve(quality, "A") == 7.5
        assert resolver.resolve(quality, 0) == 7.5
        assert resolver.resolve(quality, "B") == 5
        assert resolver.format(quality, "A") == "7.50"

    def test_resolves_chart_row(self, resolver, builder, pair):
        row = builder.shared_axis_records(Selection(*pair))[3].to_chart_row()

        assert row["subject"] == "Longevity"
        assert resolver.resolve(row, "B") == 10
        assert resolver.resolve(row, 1) == 10
        assert resolver.tooltip_lines(row) == [("A", "4.00"), ("B", "10.00")]

    def test_row_without_originals_uses_plotted_value(self, resolver):
        row = {"subject": "InfluenceIQ", "A": 65, "B": 48, "fullMark": 100}
        assert resolver.resolve(row, "A") == 65
        assert resolver.format(row, "B") == "48.0"


def test_unsupported_record_resolves_to_zero(resolver):
    assert resolver.resolve(object(), 0) == 0.0
    assert resolver.tooltip_lines(object()) == []
