"""
Tests for display formatters and notifications
"""

from datetime import date, datetime
from taskboard.models.response import TaskStats
from taskboard.services.notifier import Notifier
from taskboard.utils.error_handler import RemoteError
from taskboard.utils.formatters import (
    format_date,
    format_status,
    format_stats,
    priority_variant,
    status_icon,
)


def test_format_date():
    assert format_date(date(2025, 3, 5)) == "Mar 05, 2025"
    assert format_date(datetime(2024, 12, 31, 23, 59)) == "Dec 31, 2024"
    assert format_date(None) == ""


def test_status_and_priority_display():
    assert format_status("in_progress") == "in progress"
    assert status_icon("completed") == "check-circle"
    assert status_icon("in_progress") == "clock"
    assert status_icon("pending") == "alert-circle"
    assert priority_variant("high") == "destructive"
    assert priority_variant("medium") == "warning"
    assert priority_variant("low") == "secondary"


def test_format_stats():
    line = format_stats(TaskStats(total=3, completed=1, pending=1, in_progress=1))
    assert line == "Total: 3 | Completed: 1 | In Progress: 1 | Pending: 1"


def test_notifier_error_and_drain():
    notifier = Notifier()
    
    note = notifier.error("Error creating task", RemoteError("duplicate key"))
    
    assert note.variant == "destructive"
    assert note.description == "duplicate key"
    assert notifier.drain() == [note]
    assert notifier.drain() == []


def test_notifier_dismiss():
    notifier = Notifier()
    first = notifier.success("Task created")
    second = notifier.success("Task deleted")
    
    assert notifier.dismiss(first.id) is True
    assert notifier.dismiss(first.id) is False
    assert notifier.pending() == [second]
