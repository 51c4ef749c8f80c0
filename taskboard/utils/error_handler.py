"""
Error handling utilities
"""

from typing import Optional
from taskboard.models.response import Notification
from taskboard.utils.logger import logger


class DashboardError(Exception):
    """Base exception for dashboard errors"""
    pass


class RemoteError(DashboardError):
    """Any failure of a remote backend call"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(DashboardError):
    """Validation error exception"""
    pass


def handle_error(title: str, error: Exception) -> Notification:
    """
    Convert error into a user-visible notification
    
    Args:
        title: Notification title (e.g. "Error loading tasks")
        error: Exception to handle
        
    Returns:
        Destructive notification carrying the error message
    """
    logger.error(f"{title}: {error}")
    
    if isinstance(error, DashboardError):
        description = str(error)
    else:
        description = "Something went wrong. Please try again."
    
    return Notification(title=title, description=description, variant="destructive")
