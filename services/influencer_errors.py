"""
influencer_errors.py
--------------------
Custom exception hierarchy for the influencer comparison services.

Metric normalization never raises; these cover caller mistakes and
unreadable influencer data files.
"""


class InfluencerServiceError(Exception):
    """Base exception for influencer service errors."""


class InvalidSlotError(InfluencerServiceError, IndexError):
    """Raised when a selection slot index is not 0 or 1."""


class UnknownChartError(InfluencerServiceError, ValueError):
    """Raised when records are requested for a chart that is not defined."""


class InfluencerDataError(InfluencerServiceError):
    """Raised when an influencer data file cannot be read or decoded."""
