"""
influencer_table.py
-------------------
Polars-based profile table for the influencer list.
Parsed numeric columns, derived engagement rate and UI-ready formatted
columns in one frame.
"""

import logging
import math
from typing import Any, Dict, Iterable, Optional

import polars as pl

from constants import SCORE_DOMAINS
from utils import (
    calculate_engagement_rate,
    format_number,
    format_percentage,
    parse_number,
    safe_get_value,
)

logger = logging.getLogger(__name__)

# source field -> canonical column
MAGNITUDE_COLUMNS = {
    "followers": "Followers",
    "posts": "Posts",
    "avg_likes": "Avg Likes",
    "total_likes": "Total Likes",
}

SCORE_COLUMNS = {
    "influence_score": "Influence Score",
    "credibility_score": "Credibility",
    "influenceiq_score": "InfluenceIQ",
    "engagement_quality_score": "Engagement Quality",
    "longevity_score": "Longevity",
}

SCHEMA = {
    "Handle": pl.Utf8,
    "Rank": pl.Int64,
    "Country": pl.Utf8,
    **{col: pl.Float64 for col in MAGNITUDE_COLUMNS.values()},
    "Engagement Rate": pl.Float64,
    **{col: pl.Float64 for col in SCORE_COLUMNS.values()},
}


def _empty_stats() -> Dict[str, Any]:
    return {
        "influencer_count": 0,
        "total_followers": 0,
        "total_likes": 0,
        "avg_engagement_rate": 0.0,
        "avg_influenceiq": 0.0,
        "top_influencer": None,
    }


def _rank(value) -> Optional[int]:
    """Integer rank, or None when missing or not a finite number."""
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value) if math.isfinite(value) else None


def _to_row(influencer) -> Dict[str, Any]:
    row = {
        "Handle": str(safe_get_value(influencer, "channel_info", "")),
        "Rank": _rank(safe_get_value(influencer, "rank", None)),
        "Country": safe_get_value(influencer, "country", None),
    }
    for field, col in MAGNITUDE_COLUMNS.items():
        row[col] = parse_number(safe_get_value(influencer, field))
    row["Engagement Rate"] = calculate_engagement_rate(
        row["Avg Likes"], row["Followers"]
    )
    for field, col in SCORE_COLUMNS.items():
        row[col] = parse_number(safe_get_value(influencer, field))
    return row


def build_influencer_frame(influencers: Iterable) -> pl.DataFrame:
    """Parsed, derived and formatted profile stats, ordered by rank."""
    rows = [_to_row(inf) for inf in influencers or [] if inf is not None]
    df = pl.DataFrame(rows, schema=SCHEMA)
    if df.is_empty():
        logger.info("Empty influencer list received in build_influencer_frame")
        return df

    # === Formatted columns (for direct UI use) ===
    df = df.with_columns(
        [
            pl.col(col)
            .map_elements(format_number, return_dtype=pl.Utf8)
            .alias(f"{col} Formatted")
            for col in MAGNITUDE_COLUMNS.values()
        ]
        + [
            pl.col("Engagement Rate")
            .map_elements(format_percentage, return_dtype=pl.Utf8)
            .alias("Engagement Rate (%)"),
        ]
    )

    # Scores on the shared 0-100 axis, for sorting and bar widths
    df = df.with_columns(
        [
            (pl.col(col) * (100 / SCORE_DOMAINS[field])).alias(f"{col} (0-100)")
            for field, col in SCORE_COLUMNS.items()
            if SCORE_DOMAINS[field] != 100
        ]
    )

    return df.sort("Rank", nulls_last=True, maintain_order=True)


def summarize_influencers(df: pl.DataFrame) -> Dict[str, Any]:
    """Aggregate stats for a profile frame. Never raises on empty input."""
    if not isinstance(df, pl.DataFrame):
        logger.warning(f"Invalid DataFrame in summarize_influencers: {type(df)}")
        return _empty_stats()
    if df.is_empty():
        return _empty_stats()

    top = df.sort("InfluenceIQ", descending=True).row(0, named=True)
    return {
        "influencer_count": df.height,
        "total_followers": int(df["Followers"].sum()),
        "total_likes": int(df["Total Likes"].sum()),
        "avg_engagement_rate": float(df["Engagement Rate"].mean()),
        "avg_influenceiq": float(df["InfluenceIQ"].mean()),
        "top_influencer": top["Handle"],
    }
