"""
SubmitContactUseCase - validates and records one contact submission.

Flow: validate -> duplicate check (digits-only phone) -> append -> persist.
Validation failures and duplicates are returned as outcomes, never raised.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.entities.contact_record import ContactRecord, digits_only, has_control_chars
from ..domain.entities.outcome import ResultKind
from .contact_ledger import ContactLedger

logger = logging.getLogger(__name__)

MSG_REQUIRED = "Name and phone are required"
MSG_DUPLICATE = "This phone number is already registered"
MSG_ADDED = "Contact added successfully!"


@dataclass
class SubmitContactRequest:
    name: Optional[str] = None
    phone: Optional[str] = None
    photo: Optional[str] = None
    source_address: Optional[str] = None


@dataclass
class SubmitContactResponse:
    kind: ResultKind
    message: str
    count: int
    target_reached: bool = False
    record: Optional[ContactRecord] = None
    # True only for the submission whose append made count == target
    target_just_reached: bool = False

    @property
    def success(self) -> bool:
        return self.kind == ResultKind.OK


class SubmitContactUseCase:
    def __init__(self, ledger: ContactLedger, target: int = 200):
        self.ledger = ledger
        self.target = target

    async def execute(self, request: SubmitContactRequest) -> SubmitContactResponse:
        name = (request.name or "").strip()
        phone = (request.phone or "").strip()

        if not name or not phone or not digits_only(phone) or has_control_chars(phone):
            return SubmitContactResponse(
                kind=ResultKind.INVALID_INPUT,
                message=MSG_REQUIRED,
                count=self.ledger.count,
            )

        async with self.ledger.lock:
            existing = self.ledger.find_by_phone(phone)
            if existing:
                logger.info(
                    f"[Submit] Duplicate phone rejected | matches id={existing.id}"
                )
                return SubmitContactResponse(
                    kind=ResultKind.DUPLICATE_PHONE,
                    message=MSG_DUPLICATE,
                    count=self.ledger.count,
                )

            record = ContactRecord.create(
                name=name,
                phone=phone,
                photo=request.photo,
                source_address=request.source_address,
                previous_id=self.ledger.last_id,
            )
            count = self.ledger.append(record)

        logger.info(f"[Submit] Accepted id={record.id} | count={count}/{self.target}")
        return SubmitContactResponse(
            kind=ResultKind.OK,
            message=MSG_ADDED,
            count=count,
            target_reached=count >= self.target,
            record=record,
            target_just_reached=count == self.target,
        )
