"""
Tests for dashboard controller
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from conftest import make_task
from taskboard.services.change_feed import ChangeFeed, PollingChangeFeed
from taskboard.services.dashboard import Dashboard
from taskboard.utils.error_handler import RemoteError


@pytest.fixture
def dashboard(mock_backend_client, session):
    feed = PollingChangeFeed(mock_backend_client, interval=3600)
    return Dashboard(mock_backend_client, feed, session)


@pytest.mark.asyncio
async def test_start_loads_tasks_and_profile(dashboard):
    await dashboard.start()
    
    assert not dashboard.loading
    assert [t.id for t in dashboard.task_list.tasks] == ["1"]
    assert dashboard.profiles.display_name == "Ada Lovelace"
    assert dashboard.profile_form.email == "ada@example.com"
    assert dashboard.task_list._subscription is not None
    
    await dashboard.stop()
    assert dashboard.task_list._subscription is None


@pytest.mark.asyncio
async def test_loading_cleared_after_failures(dashboard, mock_backend_client):
    mock_backend_client.list_tasks = AsyncMock(side_effect=RemoteError("down"))
    mock_backend_client.get_profile = AsyncMock(side_effect=RemoteError("down"))
    
    await dashboard.load_data()
    
    assert not dashboard.loading
    notes = dashboard.notifier.drain()
    assert [n.title for n in notes] == ["Error loading tasks"]


@pytest.mark.asyncio
async def test_filters_and_empty_messages(dashboard):
    assert dashboard.empty_message() == "No tasks yet. Create your first task!"
    
    await dashboard.load_data()
    assert dashboard.empty_message() is None
    
    dashboard.set_filters(status_filter="completed")
    assert dashboard.visible_tasks() == []
    assert dashboard.empty_message() == "No tasks match your filters."
    
    dashboard.set_filters(search_term="SPEC", status_filter="")
    assert dashboard.status_filter == "all"
    assert [t.id for t in dashboard.visible_tasks()] == ["1"]


@pytest.mark.asyncio
async def test_save_task_through_form(dashboard, mock_backend_client):
    await dashboard.load_data()
    dashboard.task_form.open_for_create()
    dashboard.task_form.set(title="Ship")
    
    assert await dashboard.save_task() is True
    
    assert "Ship" in [t.title for t in dashboard.task_list.tasks]


@pytest.mark.asyncio
async def test_delete_task(dashboard):
    await dashboard.load_data()
    
    assert await dashboard.delete_task("1") is True
    assert dashboard.find_task("1") is None


@pytest.mark.asyncio
async def test_sign_out_detaches_feed(mock_backend_client, session):
    feed = MagicMock(spec=ChangeFeed)
    feed.unsubscribe = AsyncMock()
    dashboard = Dashboard(mock_backend_client, feed, session)
    await dashboard.start()
    
    assert await dashboard.sign_out() is True
    
    feed.unsubscribe.assert_awaited_once()
    assert dashboard.signed_out


@pytest.mark.asyncio
async def test_sign_out_failure(dashboard, mock_backend_client):
    mock_backend_client.sign_out = AsyncMock(side_effect=RemoteError("network down"))
    
    assert await dashboard.sign_out() is False
    
    assert not dashboard.signed_out
    assert dashboard.notifier.drain()[0].title == "Error signing out"
