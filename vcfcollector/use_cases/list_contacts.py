"""
ListContactsUseCase - admin listing with derived statistics.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List

from ..domain.entities.contact_record import ContactRecord
from ..domain.entities.progress import LedgerStats
from .contact_ledger import ContactLedger


@dataclass
class ListContactsResponse:
    contacts: List[ContactRecord]
    total: int
    stats: LedgerStats


class ListContactsUseCase:
    def __init__(
        self,
        ledger: ContactLedger,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.ledger = ledger
        self.clock = clock

    def execute(self) -> ListContactsResponse:
        records = self.ledger.records
        return ListContactsResponse(
            contacts=records,
            total=len(records),
            stats=LedgerStats.from_records(records, now=self.clock()),
        )
