"""
ResendNotifierAdapter - Emails the finished VCF export via Resend.
Fired once, when the collection first reaches its target.
"""

import logging
import os
from typing import Optional

import resend

from ..domain.interfaces.i_notification_gateway import (
    INotificationGateway,
    NotificationResult,
)

logger = logging.getLogger(__name__)


class ResendNotifierAdapter(INotificationGateway):
    """
    Adapter that sends the export as an email attachment using the Resend API.
    """

    def __init__(
        self,
        to_email: str,
        api_key: Optional[str] = None,
        from_email: str = "collector@localhost",
    ):
        self.api_key = api_key or os.getenv("RESEND_API_KEY")
        self.to_email = to_email
        self.from_email = from_email

        if self.api_key:
            resend.api_key = self.api_key

    async def send_export(
        self, filename: str, content: str, count: int
    ) -> NotificationResult:
        if not self.to_email:
            return NotificationResult(
                success=False,
                destination="",
                error="No notification recipient configured",
            )

        if not self.api_key:
            logger.warning(
                f"[Notify] RESEND_API_KEY not set. "
                f"Stubbing export of {count} contacts to {self.to_email}"
            )
            return NotificationResult(success=True, destination=self.to_email)

        try:
            logger.info(f"[Notify] Sending {filename!r} via Resend to {self.to_email}")

            response = resend.Emails.send({
                "from": self.from_email,
                "to": [self.to_email],
                "subject": f"Target reached: {count} contacts collected",
                "html": self._build_html(count),
                "attachments": [
                    {
                        "filename": filename,
                        "content": list(content.encode("utf-8")),
                    }
                ],
            })

            logger.info(
                f"[Notify] Sent export to {self.to_email}. "
                f"Resend ID: {response.get('id')}"
            )
            return NotificationResult(success=True, destination=self.to_email)

        except Exception as e:
            logger.error(f"[Notify] Failed to send export to {self.to_email}: {e}")
            return NotificationResult(
                success=False,
                destination=self.to_email,
                error=str(e),
            )

    @staticmethod
    def _build_html(count: int) -> str:
        return f"""
        <div style="font-family:Arial,sans-serif;max-width:600px;margin:auto;">
            <p>The contact collection has reached its target.</p>
            <p><strong>{count}</strong> contacts are attached as a vCard file,
               ready to import into your phone.</p>
        </div>
        """
