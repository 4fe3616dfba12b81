from .contact_record import ContactRecord, digits_only
from .progress import LedgerStats, Progress
from .outcome import ResultKind

__all__ = [
    "ContactRecord",
    "digits_only",
    "LedgerStats",
    "Progress",
    "ResultKind",
]
