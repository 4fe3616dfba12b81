"""
GetProgressUseCase - how far the collection is from its target.
"""

from ..domain.entities.progress import Progress
from .contact_ledger import ContactLedger


class GetProgressUseCase:
    def __init__(self, ledger: ContactLedger, target: int = 200):
        self.ledger = ledger
        self.target = target

    def execute(self) -> Progress:
        return Progress(count=self.ledger.count, target=self.target)
