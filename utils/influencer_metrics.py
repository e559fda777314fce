"""
Influencer metrics calculation helpers.

Derived metrics and score rescaling, kept out of the comparison builder so
charts and tables share one definition.
"""

from typing import Tuple

from constants import SCORE_DOMAINS, SHARED_AXIS_MAX

from .core import safe_get_value
from .formatting import parse_number


def calculate_engagement_rate(avg_likes, followers) -> float:
    """
    Calculate engagement rate as a percentage of followers.

    Args:
        avg_likes: Average likes per post (number or magnitude string)
        followers: Follower count (number or magnitude string)

    Returns:
        Engagement rate in percent units, 0.0 when there are no followers
    """
    followers = parse_number(followers)
    if followers == 0:
        return 0.0
    return parse_number(avg_likes) / followers * 100


def engagement_rate_for(influencer) -> float:
    """Engagement rate of an influencer record, 0.0 for an empty slot."""
    if influencer is None:
        return 0.0
    return calculate_engagement_rate(
        safe_get_value(influencer, "avg_likes"),
        safe_get_value(influencer, "followers"),
    )


def scale_score(value, domain_max: float) -> Tuple[float, float]:
    """
    Rescale a score from its native [0, domain_max] range onto the shared axis.

    Returns:
        Tuple of (scaled_value, original_value)
    """
    original = parse_number(value)
    if domain_max == SHARED_AXIS_MAX:
        return original, original
    return original * (SHARED_AXIS_MAX / domain_max), original


def scale_score_field(influencer, field: str) -> Tuple[float, float]:
    """Rescale a named score field of an influencer record (missing -> 0)."""
    return scale_score(
        safe_get_value(influencer, field),
        SCORE_DOMAINS.get(field, SHARED_AXIS_MAX),
    )
