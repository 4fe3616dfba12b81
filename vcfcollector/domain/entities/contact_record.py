"""
ContactRecord Entity - one submitted contact.
No framework dependencies. Immutable once created.
"""

import json
import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional

UNKNOWN_ADDRESS = "Unknown"

_NON_DIGITS = re.compile(r"\D")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def digits_only(phone: str) -> str:
    """Strip every non-digit character. Used solely for duplicate comparison."""
    return _NON_DIGITS.sub("", phone or "")


def has_control_chars(value: str) -> bool:
    return bool(_CONTROL_CHARS.search(value or ""))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a 'Z' suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp. Naive values are taken as UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass(frozen=True)
class ContactRecord:
    """
    A contact accepted into the ledger.
    `phone` is stored trimmed but otherwise verbatim; uniqueness is
    checked on its digits-only form.
    """

    id: int
    name: str
    phone: str
    photo: str = ""
    created_at: datetime = field(default_factory=_utcnow)
    source_address: str = UNKNOWN_ADDRESS

    @classmethod
    def create(
        cls,
        name: str,
        phone: str,
        photo: Optional[str] = None,
        source_address: Optional[str] = None,
        previous_id: int = 0,
    ) -> "ContactRecord":
        """
        Factory for a freshly accepted submission.
        The id is epoch milliseconds, bumped past `previous_id` so that
        two submissions within the same millisecond never share one.
        """
        now = _utcnow()
        new_id = max(int(time.time() * 1000), previous_id + 1)
        return cls(
            id=new_id,
            name=name.strip(),
            phone=phone.strip(),
            photo=photo or "",
            created_at=now,
            source_address=source_address or UNKNOWN_ADDRESS,
        )

    @property
    def phone_digits(self) -> str:
        return digits_only(self.phone)

    @property
    def has_photo(self) -> bool:
        return bool(self.photo)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "photo": self.photo,
            "timestamp": format_timestamp(self.created_at),
            "ip": self.source_address,
        }

    @classmethod
    def from_dict(cls, row: dict) -> "ContactRecord":
        """
        Rebuild a record from its snapshot form.
        Raises KeyError/ValueError/TypeError on malformed rows.
        """
        timestamp = row.get("timestamp", row.get("createdAt"))
        if not isinstance(timestamp, str):
            raise ValueError(f"record {row.get('id')!r} has no timestamp")
        name = row["name"]
        phone = row["phone"]
        if not isinstance(name, str) or not isinstance(phone, str):
            raise TypeError(f"record {row.get('id')!r} has non-text name or phone")
        photo = row.get("photo") or ""
        address = row.get("ip", row.get("sourceAddress")) or UNKNOWN_ADDRESS
        if not isinstance(photo, str) or not isinstance(address, str):
            raise TypeError(f"record {row.get('id')!r} has non-text photo or ip")
        return cls(
            id=int(row["id"]),
            name=name,
            phone=phone,
            photo=photo,
            created_at=parse_timestamp(timestamp),
            source_address=address,
        )


def records_to_json(records: Iterable[ContactRecord]) -> str:
    """Indented JSON array of records, shared by the snapshot and the JSON export."""
    return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)
