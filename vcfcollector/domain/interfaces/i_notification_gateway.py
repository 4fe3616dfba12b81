"""
INotificationGateway - Port: deliver the finished export somewhere.
Used once, when the collection first reaches its target.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class NotificationResult:
    success: bool
    destination: str
    error: Optional[str] = None


class INotificationGateway(ABC):
    """Port for dispatching an export file to a pre-configured destination."""

    @abstractmethod
    async def send_export(
        self, filename: str, content: str, count: int
    ) -> NotificationResult:
        pass
