"""
Display formatting utilities
"""

from datetime import date, datetime
from typing import Optional, Union
from taskboard.config.constants import DISPLAY_DATE_FORMAT
from taskboard.models.response import TaskStats


def format_date(value: Optional[Union[date, datetime]]) -> str:
    """Format date as "MMM dd, yyyy" (empty string for missing dates)"""
    if value is None:
        return ""
    return value.strftime(DISPLAY_DATE_FORMAT)


def format_status(status: str) -> str:
    """Human readable status: "in_progress" -> "in progress" """
    return status.replace("_", " ", 1)


def priority_variant(priority: str) -> str:
    """Badge variant for task priority"""
    if priority == "high":
        return "destructive"
    if priority == "medium":
        return "warning"
    return "secondary"


def status_icon(status: str) -> str:
    """Icon name for task status"""
    if status == "completed":
        return "check-circle"
    if status == "in_progress":
        return "clock"
    return "alert-circle"


def format_stats(stats: TaskStats) -> str:
    """
    Format task statistics summary line
    
    Args:
        stats: Task counters
        
    Returns:
        One-line summary
    """
    return (
        f"Total: {stats.total} | Completed: {stats.completed} | "
        f"In Progress: {stats.in_progress} | Pending: {stats.pending}"
    )
