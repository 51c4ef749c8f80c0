"""
Tests for profile manager
"""

import pytest
from unittest.mock import AsyncMock
from taskboard.models.profile import Profile, ProfilePatch
from taskboard.services.profile_manager import ProfileManager
from taskboard.utils.error_handler import RemoteError


@pytest.mark.asyncio
async def test_load_profile(mock_backend_client, notifier, session):
    manager = ProfileManager(mock_backend_client, notifier)
    
    profile = await manager.load(session)
    
    assert profile.first_name == "Ada"
    assert manager.display_name == "Ada Lovelace"


@pytest.mark.asyncio
async def test_load_failure_is_only_logged(mock_backend_client, notifier, session):
    """Test profile load errors never reach the notification channel"""
    mock_backend_client.get_profile = AsyncMock(side_effect=RemoteError("no rows"))
    manager = ProfileManager(mock_backend_client, notifier)
    
    assert await manager.load(session) is None
    
    assert notifier.pending() == []
    assert manager.display_name == "Profile"


def test_display_name_placeholder_without_first_name(mock_backend_client, notifier):
    manager = ProfileManager(mock_backend_client, notifier)
    manager.profile = Profile(id="u", first_name=None, last_name="Smith")
    
    assert manager.display_name == "Profile"


@pytest.mark.asyncio
async def test_update_failure_notifies(mock_backend_client, notifier, session):
    mock_backend_client.update_profile = AsyncMock(side_effect=RemoteError("email taken"))
    manager = ProfileManager(mock_backend_client, notifier)
    
    assert await manager.update(session, ProfilePatch(email="x@example.com")) is False
    
    notes = notifier.drain()
    assert len(notes) == 1
    assert notes[0].title == "Error updating profile"
    assert notes[0].description == "email taken"
    mock_backend_client.get_profile.assert_not_called()


@pytest.mark.asyncio
async def test_update_success_reloads(mock_backend_client, notifier, session):
    manager = ProfileManager(mock_backend_client, notifier)
    
    assert await manager.update(session, ProfilePatch(first_name="Grace")) is True
    
    mock_backend_client.get_profile.assert_called_once()
    assert manager.profile.first_name == "Grace"
    assert [n.title for n in notifier.drain()] == ["Profile updated"]
