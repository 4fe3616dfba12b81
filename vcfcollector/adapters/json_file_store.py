"""
JsonFileContactStore - Implements IContactStore.
Keeps the whole collection as one indented JSON array on disk and
rewrites it wholesale on every save.
"""

import json
import logging
from pathlib import Path
from typing import List, Sequence, Union

from ..domain.entities.contact_record import ContactRecord, records_to_json
from ..domain.interfaces.i_contact_store import IContactStore, SnapshotUnreadableError

logger = logging.getLogger(__name__)


def records_from_json(text: str) -> List[ContactRecord]:
    try:
        rows = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotUnreadableError(f"invalid JSON: {e}") from e

    if not isinstance(rows, list):
        raise SnapshotUnreadableError(
            f"expected a JSON array of contacts, got {type(rows).__name__}"
        )

    records = []
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise SnapshotUnreadableError(f"entry {index} is not an object")
        try:
            records.append(ContactRecord.from_dict(row))
        except (KeyError, ValueError, TypeError) as e:
            raise SnapshotUnreadableError(f"entry {index} is malformed: {e!r}") from e
    return records


class JsonFileContactStore(IContactStore):
    """File-backed snapshot. Not safe for multiple writer processes."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> List[ContactRecord]:
        if not self.path.exists():
            return []
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SnapshotUnreadableError(f"cannot read {self.path}: {e}") from e
        return records_from_json(text)

    def save(self, records: Sequence[ContactRecord]) -> None:
        self.path.write_text(records_to_json(records), encoding="utf-8")
        logger.debug(f"[Store] Wrote {len(records)} contacts to {self.path}")
