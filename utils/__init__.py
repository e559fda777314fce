"""
Utility functions for InfluenceIQ.

This package contains pure utility functions organized by domain:
- formatting: Magnitude parsing and number, percentage and score display
- influencer_metrics: Engagement rate and shared-axis score rescaling
- core: Safe field access on dicts and records
"""

from .core import safe_get_value
from .formatting import (
    format_float,
    format_number,
    format_percentage,
    format_score,
    parse_number,
)
from .influencer_metrics import (
    calculate_engagement_rate,
    engagement_rate_for,
    scale_score,
    scale_score_field,
)

__all__ = [
    # From core
    "safe_get_value",
    # From formatting
    "format_float",
    "format_number",
    "format_percentage",
    "format_score",
    "parse_number",
    # From influencer_metrics
    "calculate_engagement_rate",
    "engagement_rate_for",
    "scale_score",
    "scale_score_field",
]
