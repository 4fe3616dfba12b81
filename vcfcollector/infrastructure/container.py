"""
Dependency Injection Container.
Wires all adapters to their interfaces and composes use cases.
This is the ONLY place that knows about concrete implementations.
The domain and use case layers remain framework-agnostic.
"""

from .config import Config
from ..adapters.json_file_store import JsonFileContactStore
from ..adapters.resend_notifier_adapter import ResendNotifierAdapter
from ..use_cases.contact_ledger import ContactLedger
from ..use_cases.get_progress import GetProgressUseCase
from ..use_cases.submit_contact import SubmitContactUseCase
from ..use_cases.list_contacts import ListContactsUseCase
from ..use_cases.export_contacts import ExportJsonUseCase, ExportVcfUseCase
from ..use_cases.authenticate_admin import AuthenticateAdminUseCase
from ..use_cases.notify_target_reached import NotifyTargetReachedUseCase


class Container:
    """
    Composes the full application object graph.
    Swap any adapter by changing a single line here.
    The ledger is empty until `ledger.initialize()` is called.
    """

    def __init__(self, config: Config):
        self.config = config

        # ── Adapters (Ports & Adapters layer) ─────────────────────────────
        self.store = JsonFileContactStore(config.contacts_file)
        self.notifier = (
            ResendNotifierAdapter(
                to_email=config.notify_email_to,
                api_key=config.resend_api_key or None,
                from_email=config.notify_email_from,
            )
            if config.notifications_enabled
            else None
        )

        # ── Ledger ─────────────────────────────────────────────────────────
        self.ledger = ContactLedger(self.store)

        # ── Use Cases (Application layer) ──────────────────────────────────
        self.progress_use_case = GetProgressUseCase(self.ledger, target=config.target)
        self.submit_use_case = SubmitContactUseCase(self.ledger, target=config.target)
        self.list_use_case = ListContactsUseCase(self.ledger)
        self.export_vcf_use_case = ExportVcfUseCase(
            self.ledger,
            target=config.target,
            requires_target=config.export_requires_target,
            name_prefix=config.vcf_name_prefix,
            note=config.vcf_note,
            filename=config.vcf_filename,
        )
        self.export_json_use_case = ExportJsonUseCase(self.ledger)
        self.admin_use_case = AuthenticateAdminUseCase(config.admin_password)
        self.notify_use_case = NotifyTargetReachedUseCase(
            notifier=self.notifier,
            export_vcf=self.export_vcf_use_case,
        )
