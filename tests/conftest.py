"""
Pytest configuration and fixtures
"""

import os
import tempfile

os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "taskboard-test-logs"))

import itertools
from datetime import datetime, timezone
import pytest
from unittest.mock import AsyncMock, MagicMock
from taskboard.api.backend_client import BackendClient
from taskboard.models.profile import Profile
from taskboard.models.session import SessionContext
from taskboard.models.task import Task
from taskboard.services.notifier import Notifier
from taskboard.services.task_list import TaskListManager
from taskboard.utils.error_handler import RemoteError


USER_ID = "user-1"


def make_task(task_id: str, title: str = "Task", **fields) -> Task:
    """Build a task owned by the test user"""
    data = {
        "id": task_id,
        "title": title,
        "description": "",
        "status": "pending",
        "priority": "medium",
        "user_id": USER_ID,
        "created_at": "2025-01-10T09:00:00+00:00",
        "updated_at": "2025-01-10T09:00:00+00:00",
    }
    data.update(fields)
    return Task.model_validate(data)


class FakeTaskStore:
    """In-memory stand-in for the backend tables"""

    def __init__(self):
        self.tasks = {}
        self.profile = Profile(id=USER_ID, first_name="Ada", last_name="Lovelace", email="ada@example.com")
        self._ids = itertools.count(100)

    async def list_tasks(self, session):
        return [t for t in self.tasks.values() if t.user_id == session.user_id]

    async def list_task_versions(self, session):
        return [(t.id, t.updated_at.isoformat() if t.updated_at else None)
                for t in await self.list_tasks(session)]

    async def create_task(self, session, draft):
        now = datetime.now(timezone.utc)
        task = Task(id=f"srv-{next(self._ids)}", created_at=now, updated_at=now, **draft.model_dump())
        self.tasks[task.id] = task
        return task

    async def update_task(self, session, task_id, patch):
        if task_id not in self.tasks:
            raise RemoteError(f"Task {task_id} not found")
        fields = patch.model_dump(exclude_unset=True)
        fields["updated_at"] = datetime.now(timezone.utc)
        self.tasks[task_id] = self.tasks[task_id].model_copy(update=fields)
        return self.tasks[task_id]

    async def delete_task(self, session, task_id):
        self.tasks.pop(task_id, None)
        return True

    async def get_profile(self, session):
        return self.profile

    async def update_profile(self, session, patch):
        self.profile = self.profile.model_copy(update=patch.model_dump(exclude_none=True))
        return True

    async def sign_out(self, session):
        return True


@pytest.fixture
def session():
    """Session of the test user"""
    return SessionContext(user_id=USER_ID, access_token="test_token")


@pytest.fixture
def task_store():
    store = FakeTaskStore()
    task = make_task("1", "Write spec", priority="high")
    store.tasks[task.id] = task
    return store


@pytest.fixture
def mock_backend_client(task_store):
    """Mock backend client backed by the in-memory store"""
    client = MagicMock(spec=BackendClient)
    client.list_tasks = AsyncMock(side_effect=task_store.list_tasks)
    client.list_task_versions = AsyncMock(side_effect=task_store.list_task_versions)
    client.create_task = AsyncMock(side_effect=task_store.create_task)
    client.update_task = AsyncMock(side_effect=task_store.update_task)
    client.delete_task = AsyncMock(side_effect=task_store.delete_task)
    client.get_profile = AsyncMock(side_effect=task_store.get_profile)
    client.update_profile = AsyncMock(side_effect=task_store.update_profile)
    client.sign_out = AsyncMock(side_effect=task_store.sign_out)
    client.close = AsyncMock()
    return client


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def task_list_manager(mock_backend_client, notifier):
    """Task list manager with mocked dependencies"""
    return TaskListManager(mock_backend_client, notifier)
