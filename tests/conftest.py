"""
Root conftest.py — shared fixtures and helpers for the entire test suite.

Provides:
- ContactRecord factory helper
- In-memory IContactStore fake (records every save)
- Ledger / notifier fixtures for use-case tests
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence
from unittest.mock import AsyncMock

import pytest

from vcfcollector.domain.entities.contact_record import ContactRecord
from vcfcollector.domain.interfaces.i_contact_store import IContactStore
from vcfcollector.domain.interfaces.i_notification_gateway import NotificationResult
from vcfcollector.use_cases.contact_ledger import ContactLedger


# ─────────────────────────────────────────────────────────────────────────────
# Domain object factories
# ─────────────────────────────────────────────────────────────────────────────


def make_record(
    record_id: int = 1,
    name: str = "Asha Mwita",
    phone: str = "+255 712 345 678",
    photo: str = "",
    created_at: Optional[datetime] = None,
    source_address: str = "10.0.0.1",
) -> ContactRecord:
    """Create a ContactRecord with sensible test defaults."""
    return ContactRecord(
        id=record_id,
        name=name,
        phone=phone,
        photo=photo,
        created_at=created_at or datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        source_address=source_address,
    )


def make_records(count: int) -> List[ContactRecord]:
    """`count` records with distinct ids and phones."""
    return [
        make_record(record_id=i + 1, name=f"Contact {i + 1}", phone=f"0700{i:06d}")
        for i in range(count)
    ]


def make_notification_result(
    success: bool = True,
    destination: str = "owner@example.com",
    error: Optional[str] = None,
) -> NotificationResult:
    return NotificationResult(success=success, destination=destination, error=error)


# ─────────────────────────────────────────────────────────────────────────────
# Store fakes
# ─────────────────────────────────────────────────────────────────────────────


class InMemoryStore(IContactStore):
    """Keeps the snapshot in memory and counts writes."""

    def __init__(self, records: Optional[Sequence[ContactRecord]] = None, fail_saves: bool = False):
        self.snapshot: List[ContactRecord] = list(records or [])
        self.save_calls = 0
        self.fail_saves = fail_saves

    def load(self) -> List[ContactRecord]:
        return list(self.snapshot)

    def save(self, records: Sequence[ContactRecord]) -> None:
        self.save_calls += 1
        if self.fail_saves:
            raise OSError("disk full")
        self.snapshot = list(records)


def make_ledger(records: Optional[Sequence[ContactRecord]] = None, fail_saves: bool = False) -> ContactLedger:
    """A ledger already initialised from an in-memory snapshot."""
    ledger = ContactLedger(InMemoryStore(records, fail_saves=fail_saves))
    ledger.initialize()
    return ledger


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def ledger(store):
    ledger = ContactLedger(store)
    ledger.initialize()
    return ledger


@pytest.fixture
def mock_notifier():
    """AsyncMock for INotificationGateway. Defaults to successful delivery."""
    mock = AsyncMock()
    mock.send_export.return_value = make_notification_result()
    return mock


@pytest.fixture
def sample_record():
    return make_record()
