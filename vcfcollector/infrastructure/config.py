"""
Configuration — reads all settings from environment variables.
Never hardcodes credentials. Uses python-dotenv for local dev.
"""

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


def cors_origins_from_env() -> Tuple[str, ...]:
    """Comma-separated CORS_ORIGINS; defaults to allowing every origin."""
    origins = tuple(
        o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    )
    return origins or ("*",)


def _env_positive_int(key: str, default: int) -> int:
    raw = os.getenv(key) or str(default)
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Config:
    # Admin gate
    admin_password: str

    # Server
    port: int = 3000
    cors_origins: Tuple[str, ...] = ("*",)

    # Ledger
    contacts_file: str = "contacts.json"
    target: int = 200

    # Export
    export_requires_target: bool = True
    vcf_name_prefix: str = ""
    vcf_note: str = "Collected via SILA TECH VCF Collector"
    vcf_filename: str = "NEW YEAR VCF 🎉.vcf"

    # Notification (optional)
    resend_api_key: str = ""
    notify_email_to: str = ""
    notify_email_from: str = "collector@localhost"

    log_level: str = "INFO"

    @property
    def notifications_enabled(self) -> bool:
        return bool(self.notify_email_to)

    @classmethod
    def from_env(cls) -> "Config":
        missing = []
        required = [
            "ADMIN_PASSWORD",
        ]
        for key in required:
            if not os.getenv(key):
                missing.append(key)

        if missing:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing)}\n"
                f"Copy .env.example to .env and fill in the values."
            )

        return cls(
            admin_password=os.environ["ADMIN_PASSWORD"],
            port=_env_positive_int("PORT", 3000),
            cors_origins=cors_origins_from_env(),
            contacts_file=os.getenv("CONTACTS_FILE", "contacts.json"),
            target=_env_positive_int("CONTACT_TARGET", 200),
            export_requires_target=_env_bool("EXPORT_REQUIRES_TARGET", True),
            vcf_name_prefix=os.getenv("VCF_NAME_PREFIX", ""),
            vcf_note=os.getenv("VCF_NOTE", "Collected via SILA TECH VCF Collector"),
            vcf_filename=os.getenv("VCF_FILENAME", "NEW YEAR VCF 🎉.vcf"),
            resend_api_key=os.getenv("RESEND_API_KEY", ""),
            notify_email_to=os.getenv("NOTIFY_EMAIL_TO", ""),
            notify_email_from=os.getenv("NOTIFY_EMAIL_FROM", "collector@localhost"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
