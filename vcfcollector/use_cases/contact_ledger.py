"""
ContactLedger - the single authoritative collection of contact records.

Owns the in-memory list and the snapshot store. Every accepted record is
appended and the full list is rewritten to the store before the append
call returns. A failed write is logged and swallowed: the in-memory
append stands and the next successful write catches the snapshot up.
"""

import asyncio
import logging
from typing import List, Optional

from ..domain.entities.contact_record import ContactRecord, digits_only
from ..domain.interfaces.i_contact_store import IContactStore, SnapshotUnreadableError

logger = logging.getLogger(__name__)


class ContactLedger:
    def __init__(self, store: IContactStore):
        self.store = store
        self._records: List[ContactRecord] = []
        # Guards check-then-append-then-persist
        self.lock = asyncio.Lock()

    def initialize(self) -> None:
        """Restore from the snapshot, or start fresh when it is missing or corrupt."""
        try:
            self._records = self.store.load()
        except SnapshotUnreadableError as e:
            logger.warning(f"[Ledger] Snapshot unreadable, starting fresh: {e}")
            self._records = []
            return
        logger.info(f"[Ledger] Loaded {len(self._records)} contacts from snapshot")

    @property
    def records(self) -> List[ContactRecord]:
        """A copy of the collection in arrival order."""
        return list(self._records)

    @property
    def count(self) -> int:
        return len(self._records)

    @property
    def last_id(self) -> int:
        return max((r.id for r in self._records), default=0)

    def find_by_phone(self, phone: str) -> Optional[ContactRecord]:
        wanted = digits_only(phone)
        for record in self._records:
            if record.phone_digits == wanted:
                return record
        return None

    def append(self, record: ContactRecord) -> int:
        """Append and persist. Callers must hold `lock`. Returns the new count."""
        self._records.append(record)
        self.persist()
        return len(self._records)

    def persist(self) -> bool:
        try:
            self.store.save(self._records)
        except Exception as e:
            logger.error(
                f"[Ledger] Failed to persist {len(self._records)} contacts: {e!r}",
                exc_info=True,
            )
            return False
        return True
