"""
IContactStore - Port: defines the snapshot persistence contract.
The ledger doesn't know whether the snapshot is a file, a bucket or a table.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..entities.contact_record import ContactRecord


class SnapshotUnreadableError(Exception):
    """The persisted snapshot exists but cannot be parsed into records."""


class IContactStore(ABC):
    """Port for reading and rewriting the full contact snapshot."""

    @abstractmethod
    def load(self) -> List[ContactRecord]:
        """
        Return the persisted records in insertion order.
        Returns [] when no snapshot exists yet; raises
        SnapshotUnreadableError when one exists but is corrupt.
        """
        pass

    @abstractmethod
    def save(self, records: Sequence[ContactRecord]) -> None:
        """Rewrite the whole snapshot. Raises OSError on I/O failure."""
        pass
