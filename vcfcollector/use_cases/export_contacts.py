"""
Export use cases - render the collection as vCard 3.0 or JSON.

VCF export can be gated on the collection having reached its target;
the gate is a policy flag, on by default.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..domain.entities.contact_record import ContactRecord, records_to_json
from ..domain.entities.outcome import ResultKind
from .contact_ledger import ContactLedger

logger = logging.getLogger(__name__)

VCARD_MEDIA_TYPE = "text/vcard"
JSON_MEDIA_TYPE = "application/json"
DEFAULT_VCF_FILENAME = "NEW YEAR VCF 🎉.vcf"
DEFAULT_JSON_FILENAME = "contacts-export.json"
DEFAULT_NOTE = "Collected via SILA TECH VCF Collector"

CRLF = "\r\n"


def escape_text(value: str) -> str:
    """Escape a vCard 3.0 TEXT value."""
    return (
        value.replace("\\", "\\\\")
        .replace(",", "\\,")
        .replace(";", "\\;")
        .replace("\r\n", "\\n")
        .replace("\r", "\\n")
        .replace("\n", "\\n")
    )


def photo_payload(photo: str) -> str:
    """Drop a data-URL prefix (keep what follows the first 'base64,') and any line breaks."""
    marker = "base64,"
    if marker in photo:
        photo = photo.split(marker, 1)[1]
    # Line breaks would end the PHOTO property early
    return photo.replace("\r", "").replace("\n", "")


def render_vcard(record: ContactRecord, name_prefix: str = "", note: str = DEFAULT_NOTE) -> str:
    lines = [
        "BEGIN:VCARD",
        "VERSION:3.0",
        f"FN:{escape_text(name_prefix + record.name)}",
        f"TEL:{record.phone}",
    ]
    if record.photo:
        lines.append(f"PHOTO;ENCODING=b;TYPE=JPEG:{photo_payload(record.photo)}")
    lines.append(f"NOTE:{escape_text(note)}")
    lines.append("END:VCARD")
    return CRLF.join(lines) + CRLF


def render_vcf(
    records: Iterable[ContactRecord], name_prefix: str = "", note: str = DEFAULT_NOTE
) -> str:
    return "".join(render_vcard(r, name_prefix=name_prefix, note=note) for r in records)


@dataclass
class ExportResponse:
    kind: ResultKind
    count: int
    content: str = ""
    filename: str = ""
    media_type: str = ""
    message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.kind == ResultKind.OK


class ExportVcfUseCase:
    def __init__(
        self,
        ledger: ContactLedger,
        target: int = 200,
        requires_target: bool = True,
        name_prefix: str = "",
        note: str = DEFAULT_NOTE,
        filename: str = DEFAULT_VCF_FILENAME,
    ):
        self.ledger = ledger
        self.target = target
        self.requires_target = requires_target
        self.name_prefix = name_prefix
        self.note = note
        self.filename = filename

    def execute(self, force: bool = False) -> ExportResponse:
        records: List[ContactRecord] = self.ledger.records
        count = len(records)

        if self.requires_target and not force and count < self.target:
            return ExportResponse(
                kind=ResultKind.TARGET_NOT_REACHED,
                count=count,
                message=f"Need {self.target} contacts to download. Currently have: {count}",
            )

        logger.info(f"[Export] Rendering VCF for {count} contacts")
        return ExportResponse(
            kind=ResultKind.OK,
            count=count,
            content=render_vcf(records, name_prefix=self.name_prefix, note=self.note),
            filename=self.filename,
            media_type=VCARD_MEDIA_TYPE,
        )


class ExportJsonUseCase:
    def __init__(self, ledger: ContactLedger, filename: str = DEFAULT_JSON_FILENAME):
        self.ledger = ledger
        self.filename = filename

    def execute(self) -> ExportResponse:
        records = self.ledger.records
        logger.info(f"[Export] Rendering JSON for {len(records)} contacts")
        return ExportResponse(
            kind=ResultKind.OK,
            count=len(records),
            content=records_to_json(records),
            filename=self.filename,
            media_type=JSON_MEDIA_TYPE,
        )
