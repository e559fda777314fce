"""
influencer_source.py
--------------------
Influencer record model and helpers for the users payload served by the
InfluenceIQ backend ({"users": [...]}).

Fetching the payload is left to the caller; this module only decodes it.
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from constants import HANDLE_FIELD
from services.influencer_errors import InfluencerDataError

logger = logging.getLogger(__name__)

Magnitude = Union[int, float, str, None]


@dataclass(frozen=True)
class Influencer:
    """One influencer profile as served by the users endpoint."""

    channel_info: str
    followers: Magnitude = None
    posts: Magnitude = None
    avg_likes: Magnitude = None
    total_likes: Magnitude = None
    influence_score: Optional[float] = None
    credibility_score: Optional[float] = None
    influenceiq_score: Optional[float] = None
    engagement_quality_score: Optional[float] = None
    longevity_score: Optional[float] = None
    rank: Optional[int] = None
    country: Optional[str] = None

    @property
    def handle(self) -> str:
        return self.channel_info

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Influencer":
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        # Handles may arrive as numbers (e.g. numeric usernames)
        if values.get(HANDLE_FIELD) is not None:
            values[HANDLE_FIELD] = str(values[HANDLE_FIELD])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_influencers(payload) -> List[Influencer]:
    """
    Decode a users payload into Influencer records.

    Accepts the endpoint shape {"users": [...]} or a bare list of records.
    Records without a handle are skipped.
    """
    if isinstance(payload, dict):
        payload = payload.get("users") or []
    if not isinstance(payload, list):
        logger.warning(f"Unexpected users payload type: {type(payload)}")
        return []

    influencers = []
    for i, row in enumerate(payload):
        if isinstance(row, Influencer):
            influencers.append(row)
            continue
        if not isinstance(row, dict) or not row.get(HANDLE_FIELD):
            logger.warning(f"Skipping users[{i}]: missing {HANDLE_FIELD}")
            continue
        influencers.append(Influencer.from_dict(row))

    logger.info(f"Loaded {len(influencers)} influencers")
    return influencers


def load_influencers_file(path: Union[str, Path]) -> List[Influencer]:
    """Read a users payload from a JSON file."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise InfluencerDataError(f"Cannot read influencer data {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InfluencerDataError(f"Invalid JSON in {path}: {e}") from e
    return load_influencers(payload)


def find_influencer(
    influencers: Iterable[Influencer], handle: Optional[str]
) -> Optional[Influencer]:
    """Find an influencer by handle, ignoring case and a leading '@'."""
    if not handle:
        return None
    wanted = str(handle).strip().lstrip("@").lower()
    for influencer in influencers:
        if str(influencer.channel_info).lower() == wanted:
            return influencer
    return None


def _suggested_usernames(suggestions: Iterable[Dict[str, Any]]) -> set:
    usernames = set()
    for sugg in suggestions or []:
        raw = sugg.get("username") if isinstance(sugg, dict) else None
        if not raw:
            continue
        # One suggestion may carry several newline-separated usernames
        for uname in str(raw).split("\n"):
            uname = uname.strip().lower()
            if uname:
                usernames.add(uname)
    return usernames


def filter_suggested(
    influencers: Iterable[Influencer], suggestions: Iterable[Dict[str, Any]]
) -> List[Influencer]:
    """Keep influencers named in the suggestion list, in source order."""
    usernames = _suggested_usernames(suggestions)
    return [
        inf for inf in influencers if str(inf.channel_info).lower() in usernames
    ]
