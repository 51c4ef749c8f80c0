"""
Tests for task filtering and statistics
"""

import itertools
from conftest import make_task
from taskboard.services.task_query import filter_tasks, compute_stats, matches_search


STATUSES = ["pending", "in_progress", "completed"]
PRIORITIES = ["low", "medium", "high"]


def _sample_tasks():
    tasks = []
    for i, (status, priority) in enumerate(itertools.product(STATUSES, PRIORITIES)):
        tasks.append(make_task(
            str(i),
            title=f"Task {i} {'Deploy' if i % 2 else 'write docs'}",
            description="Release NOTES" if i % 3 == 0 else "",
            status=status,
            priority=priority,
        ))
    return tasks


def test_filter_single_task_scenario():
    tasks = [make_task("1", "Write spec", status="pending", priority="high")]
    
    assert filter_tasks(tasks, "", "pending", "all") == tasks
    assert filter_tasks(tasks, "", "completed", "all") == []


def test_filter_matches_predicates_exactly():
    """Every result satisfies all predicates and nothing matching is dropped"""
    tasks = _sample_tasks()
    
    for search in ["", "deploy", "NOTES", "missing"]:
        for status in ["all"] + STATUSES:
            for priority in ["all"] + PRIORITIES:
                result = filter_tasks(tasks, search, status, priority)
                expected = [
                    t for t in tasks
                    if status in ("all", t.status)
                    and priority in ("all", t.priority)
                    and (search.lower() in t.title.lower() or search.lower() in t.description.lower())
                ]
                assert result == expected


def test_filter_preserves_order():
    tasks = [make_task("b", "Deploy api"), make_task("a", "Deploy web"), make_task("c", "Docs")]
    
    assert [t.id for t in filter_tasks(tasks, "deploy")] == ["b", "a"]


def test_search_is_case_insensitive_on_description():
    task = make_task("1", "Title", description="Call the Vendor")
    
    assert matches_search(task, "vendor")
    assert matches_search(task, "")
    assert not matches_search(task, "customer")


def test_missing_filters_default_to_all():
    tasks = _sample_tasks()
    
    assert filter_tasks(tasks, None, None, None) == tasks


def test_stats_counts():
    tasks = _sample_tasks()
    
    stats = compute_stats(tasks)
    
    assert stats.total == 9
    assert stats.completed == stats.pending == stats.in_progress == 3
    assert stats.total == stats.completed + stats.pending + stats.in_progress


def test_stats_empty():
    stats = compute_stats([])
    assert stats.model_dump() == {"total": 0, "completed": 0, "pending": 0, "in_progress": 0}
