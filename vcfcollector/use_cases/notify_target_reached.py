"""
NotifyTargetReachedUseCase - ships the VCF export once the target is hit.

Runs detached from the submission that triggered it. Never raises and
never retries: a failed dispatch is logged and reported in the result.
"""

import logging
from typing import Optional

from ..domain.interfaces.i_notification_gateway import (
    INotificationGateway,
    NotificationResult,
)
from .export_contacts import ExportVcfUseCase

logger = logging.getLogger(__name__)


class NotifyTargetReachedUseCase:
    def __init__(
        self,
        notifier: Optional[INotificationGateway],
        export_vcf: ExportVcfUseCase,
    ):
        self.notifier = notifier
        self.export_vcf = export_vcf

    @property
    def enabled(self) -> bool:
        return self.notifier is not None

    async def execute(self) -> NotificationResult:
        if self.notifier is None:
            return NotificationResult(
                success=False, destination="", error="Notifications disabled"
            )

        try:
            export = self.export_vcf.execute(force=True)
            result = await self.notifier.send_export(
                filename=export.filename,
                content=export.content,
                count=export.count,
            )
        except Exception as e:
            logger.error(f"[Notify] Dispatch failed: {e!r}", exc_info=True)
            return NotificationResult(success=False, destination="", error=str(e))

        if result.success:
            logger.info(f"[Notify] Export delivered to {result.destination}")
        else:
            logger.warning(f"[Notify] Export not delivered: {result.error}")
        return result
