"""
User-visible notification channel
"""

from typing import List, Optional
from taskboard.models.response import Notification
from taskboard.utils.error_handler import handle_error
from taskboard.utils.logger import logger


class Notifier:
    """Collects one-shot dismissible notifications for the presentation layer"""
    
    def __init__(self):
        self._notifications: List[Notification] = []
        self.logger = logger
    
    def push(self, notification: Notification) -> Notification:
        """Queue a notification"""
        self._notifications.append(notification)
        return notification
    
    def success(self, title: str, description: Optional[str] = None) -> Notification:
        """Queue a success notification"""
        self.logger.info(f"[Notifier] {title}")
        return self.push(Notification(title=title, description=description))
    
    def error(self, title: str, error: Exception) -> Notification:
        """Queue a destructive notification for a failed operation"""
        return self.push(handle_error(title, error))
    
    def dismiss(self, notification_id: str) -> bool:
        """
        Dismiss notification by id
        
        Returns:
            True if a notification was removed
        """
        before = len(self._notifications)
        self._notifications = [n for n in self._notifications if n.id != notification_id]
        return len(self._notifications) < before
    
    def pending(self) -> List[Notification]:
        """Notifications not yet shown"""
        return list(self._notifications)
    
    def drain(self) -> List[Notification]:
        """Return and clear pending notifications"""
        drained, self._notifications = self._notifications, []
        return drained
