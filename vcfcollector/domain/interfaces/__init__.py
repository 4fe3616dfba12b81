from .i_contact_store import IContactStore, SnapshotUnreadableError
from .i_notification_gateway import INotificationGateway, NotificationResult

__all__ = [
    "IContactStore",
    "SnapshotUnreadableError",
    "INotificationGateway",
    "NotificationResult",
]
