"""
Two-slot influencer selection used by the comparison view.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from constants import HANDLE_FIELD, SLOT_COUNT
from services.influencer_errors import InvalidSlotError
from utils import safe_get_value


def _handle(influencer) -> str:
    return str(safe_get_value(influencer, HANDLE_FIELD, ""))


@dataclass(frozen=True)
class Selection:
    """Ordered pair of nullable influencer references (slot 0, slot 1)."""

    first: Optional[object] = None
    second: Optional[object] = None

    @classmethod
    def from_list(cls, items: Optional[Iterable]) -> "Selection":
        items = list(items or [])[:SLOT_COUNT]
        items += [None] * (SLOT_COUNT - len(items))
        return cls(*items)

    @property
    def slots(self) -> Tuple[Optional[object], Optional[object]]:
        return (self.first, self.second)

    @property
    def is_empty(self) -> bool:
        return self.first is None and self.second is None

    @property
    def is_complete(self) -> bool:
        return self.first is not None and self.second is not None

    def occupied(self) -> list:
        return [inf for inf in self.slots if inf is not None]

    def contains(self, handle: str) -> bool:
        wanted = (handle or "").lower()
        return any(_handle(inf).lower() == wanted for inf in self.occupied())

    def with_slot(self, index: int, influencer) -> "Selection":
        """Put an influencer (or None) into a specific slot."""
        if index not in range(SLOT_COUNT):
            raise InvalidSlotError(f"Slot must be 0 or 1, got {index!r}")
        slots = list(self.slots)
        slots[index] = influencer
        return Selection(*slots)

    def toggle(self, influencer) -> "Selection":
        """
        Add or remove an influencer from the comparison.

        A full selection replaces its second entry; an influencer already
        selected is removed; otherwise it is appended.
        """
        current = self.occupied()
        if len(current) >= SLOT_COUNT:
            return Selection(current[0], influencer)
        if self.contains(_handle(influencer)):
            wanted = _handle(influencer).lower()
            return Selection.from_list(
                inf for inf in current if _handle(inf).lower() != wanted
            )
        return Selection.from_list(current + [influencer])
