"""
Application constants for InfluenceIQ.
Centralized metric names, score domains and chart definitions.
"""

# =============================================================================
# SLOT LABELS
# =============================================================================
FALLBACK_LABEL_PREFIX = "Influencer"
SLOT_COUNT = 2

# Series keys used by shared-axis (radar) rows
SERIES_KEYS = ("A", "B")
ORIGINAL_SERIES_KEYS = {"A": "originalA", "B": "originalB"}

# Non-series keys of a flat chart row
ROW_RESERVED_KEYS = frozenset({"name", "actualValues", "originalValues"})

# =============================================================================
# MAGNITUDE SUFFIXES
# =============================================================================
MAGNITUDE_SUFFIXES = {
    "k": 1_000,
    "m": 1_000_000,
    "b": 1_000_000_000,
}

# Display buckets, evaluated top-down (first match wins)
DISPLAY_BUCKETS = (
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)

# =============================================================================
# INFLUENCER FIELDS
# =============================================================================
HANDLE_FIELD = "channel_info"

# Native upper bound of every score field
SCORE_DOMAINS = {
    "influence_score": 100,
    "credibility_score": 100,
    "influenceiq_score": 100,
    "engagement_quality_score": 10,
    "longevity_score": 10,
}

SHARED_AXIS_MAX = 100

# =============================================================================
# METRIC NAMES
# =============================================================================
METRIC_FOLLOWERS = "Followers"
METRIC_AVG_LIKES = "Average Likes"
METRIC_TOTAL_POSTS = "Total Posts"
METRIC_ENGAGEMENT_RATE = "Engagement Rate (%)"
METRIC_ENGAGEMENT_QUALITY = "Engagement Quality"
METRIC_LONGEVITY = "Longevity"
METRIC_CREDIBILITY = "Credibility"
METRIC_INFLUENCE = "Influence Score"
METRIC_INFLUENCEIQ = "InfluenceIQ"

MAGNITUDE_METRICS = frozenset({METRIC_FOLLOWERS, METRIC_AVG_LIKES, METRIC_TOTAL_POSTS})
RATE_METRICS = frozenset({METRIC_ENGAGEMENT_RATE})
QUALITY_METRICS = frozenset({METRIC_ENGAGEMENT_QUALITY, METRIC_LONGEVITY})

# =============================================================================
# CHARTS
# =============================================================================
CHART_AUDIENCE = "audience"
CHART_ENGAGEMENT = "engagement"
CHART_SCORE_BREAKDOWN = "score_breakdown"
CHART_SCORES = "scores"

CHARTS = (CHART_AUDIENCE, CHART_ENGAGEMENT, CHART_SCORE_BREAKDOWN, CHART_SCORES)
