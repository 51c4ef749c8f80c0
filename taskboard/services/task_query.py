"""
Pure queries over the local task sequence
"""

from typing import Iterable, List, Optional
from taskboard.config.constants import FILTER_ALL
from taskboard.models.task import Task
from taskboard.models.response import TaskStats


def matches_search(task: Task, search_term: Optional[str]) -> bool:
    """
    Case-insensitive substring match on title or description
    
    An empty search term matches every task.
    """
    if not search_term:
        return True
    needle = search_term.lower()
    return needle in task.title.lower() or needle in (task.description or "").lower()


def filter_tasks(
    tasks: Iterable[Task],
    search_term: Optional[str] = "",
    status_filter: Optional[str] = FILTER_ALL,
    priority_filter: Optional[str] = FILTER_ALL,
) -> List[Task]:
    """
    Filter tasks by search term, status and priority
    
    Args:
        tasks: Tasks in display order
        search_term: Substring to look for in title or description
        status_filter: Status value or "all"
        priority_filter: Priority value or "all"
        
    Returns:
        Matching tasks in their original relative order
    """
    status_filter = status_filter or FILTER_ALL
    priority_filter = priority_filter or FILTER_ALL
    
    return [
        task for task in tasks
        if (status_filter == FILTER_ALL or task.status == status_filter)
        and (priority_filter == FILTER_ALL or task.priority == priority_filter)
        and matches_search(task, search_term)
    ]


def compute_stats(tasks: Iterable[Task]) -> TaskStats:
    """Count tasks by status in a single pass"""
    stats = TaskStats()
    for task in tasks:
        stats.total += 1
        if task.status == "completed":
            stats.completed += 1
        elif task.status == "pending":
            stats.pending += 1
        elif task.status == "in_progress":
            stats.in_progress += 1
    return stats
