"""
Progress and LedgerStats - derived views over the contact collection.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from .contact_record import ContactRecord


@dataclass(frozen=True)
class Progress:
    """Snapshot of how close the collection is to its target."""

    count: int
    target: int

    @property
    def remaining(self) -> int:
        return max(0, self.target - self.count)

    @property
    def percent(self) -> int:
        # Half-up rounding, as the collector page has always shown it
        return min(100, int(100 * self.count / self.target + 0.5))

    @property
    def target_reached(self) -> bool:
        return self.count >= self.target

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "target": self.target,
            "remaining": self.remaining,
            "progress": self.percent,
        }


@dataclass(frozen=True)
class LedgerStats:
    submitted_today: int
    with_photo: int
    distinct_origins: int

    @classmethod
    def from_records(cls, records: Iterable[ContactRecord], now: datetime) -> "LedgerStats":
        """
        `now` must be timezone-aware; "today" is its calendar date in the
        local timezone of the process.
        """
        today = now.astimezone().date()
        records = list(records)
        return cls(
            submitted_today=sum(1 for r in records if r.created_at.astimezone().date() == today),
            with_photo=sum(1 for r in records if r.has_photo),
            distinct_origins=len({r.source_address for r in records}),
        )

    def to_dict(self) -> dict:
        return {
            "today": self.submitted_today,
            "withPhotos": self.with_photo,
            "uniqueIPs": self.distinct_origins,
        }
