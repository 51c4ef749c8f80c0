"""
Hosted backend client (tasks and profiles tables, auth session)
"""

from typing import Optional, Dict, Any, List, Tuple
from taskboard.api.base_client import BaseAPIClient
from taskboard.config.settings import settings
from taskboard.config.constants import (
    REST_PATH,
    AUTH_PATH,
    TASKS_TABLE,
    PROFILES_TABLE,
    TASKS_ORDER,
)
from taskboard.models.session import SessionContext
from taskboard.models.task import Task, TaskDraft, TaskPatch
from taskboard.models.profile import Profile, ProfilePatch
from taskboard.utils.error_handler import RemoteError


def _eq(value: str) -> str:
    """Build equality filter for the REST query dialect"""
    return f"eq.{value}"


class BackendClient(BaseAPIClient):
    """Client for the hosted backend REST API

    Every call is scoped by the explicit session: the bearer token identifies
    the user to the backend, and user-owned queries also filter by user id.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize backend client

        Args:
            base_url: Backend base URL (defaults to settings)
            api_key: Project API key (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
        """
        super().__init__(
            base_url or settings.BACKEND_URL,
            timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT,
        )
        self.api_key = api_key or settings.BACKEND_API_KEY

    def _get_headers(self, session: SessionContext, prefer: Optional[str] = None) -> Dict[str, str]:
        """Get request headers with authentication"""
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {session.access_token}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    @staticmethod
    def _single_row(data: Any, what: str) -> Dict[str, Any]:
        """Take the single row from a representation response"""
        if isinstance(data, list):
            if not data:
                raise RemoteError(f"{what} not found")
            return data[0]
        if isinstance(data, dict) and data:
            return data
        raise RemoteError(f"{what} not found")

    async def list_tasks(self, session: SessionContext) -> List[Task]:
        """
        Get all tasks owned by the session user, newest first

        Args:
            session: Session context

        Returns:
            List of tasks
        """
        rows = await self.get(
            endpoint=f"{REST_PATH}/{TASKS_TABLE}",
            headers=self._get_headers(session),
            params={
                "select": "*",
                "user_id": _eq(session.user_id),
                "order": TASKS_ORDER,
            },
        )
        tasks = [Task.model_validate(row) for row in rows or []]
        self.logger.debug(f"Fetched {len(tasks)} tasks for user {session.user_id}")
        return tasks

    async def list_task_versions(self, session: SessionContext) -> List[Tuple[str, Optional[str]]]:
        """
        Get (id, updated_at) pairs of the session user's tasks

        Args:
            session: Session context

        Returns:
            List of (task id, updated_at) tuples
        """
        rows = await self.get(
            endpoint=f"{REST_PATH}/{TASKS_TABLE}",
            headers=self._get_headers(session),
            params={
                "select": "id,updated_at",
                "user_id": _eq(session.user_id),
            },
        )
        return [(str(row.get("id")), row.get("updated_at")) for row in rows or []]

    async def create_task(self, session: SessionContext, draft: TaskDraft) -> Task:
        """
        Create a new task

        Args:
            session: Session context
            draft: Task fields (including owner user id)

        Returns:
            Created task with server-assigned id and timestamps
        """
        data = await self.post(
            endpoint=f"{REST_PATH}/{TASKS_TABLE}",
            headers=self._get_headers(session, prefer="return=representation"),
            json_data=draft.model_dump(mode="json"),
        )
        return Task.model_validate(self._single_row(data, "Created task"))

    async def update_task(self, session: SessionContext, task_id: str, patch: TaskPatch) -> Task:
        """
        Update existing task (partial update)

        Args:
            session: Session context
            task_id: Task ID
            patch: Fields to change

        Returns:
            Updated task
        """
        fields = patch.model_dump(mode="json", exclude_unset=True)
        if not fields:
            raise ValueError("No fields to update")

        data = await self.patch(
            endpoint=f"{REST_PATH}/{TASKS_TABLE}",
            headers=self._get_headers(session, prefer="return=representation"),
            params={"id": _eq(task_id)},
            json_data=fields,
        )
        return Task.model_validate(self._single_row(data, f"Task {task_id}"))

    async def delete_task(self, session: SessionContext, task_id: str) -> bool:
        """
        Delete task

        Args:
            session: Session context
            task_id: Task ID

        Returns:
            True if successful
        """
        await self.delete(
            endpoint=f"{REST_PATH}/{TASKS_TABLE}",
            headers=self._get_headers(session, prefer="return=minimal"),
            params={"id": _eq(task_id)},
        )
        return True

    async def get_profile(self, session: SessionContext) -> Profile:
        """
        Get profile of the session user

        Args:
            session: Session context

        Returns:
            Profile
        """
        headers = self._get_headers(session)
        # Ask for a single object; the backend errors when no row matches
        headers["Accept"] = "application/vnd.pgrst.object+json"
        data = await self.get(
            endpoint=f"{REST_PATH}/{PROFILES_TABLE}",
            headers=headers,
            params={"select": "*", "id": _eq(session.user_id)},
        )
        return Profile.model_validate(self._single_row(data, "Profile"))

    async def update_profile(self, session: SessionContext, patch: ProfilePatch) -> bool:
        """
        Update profile of the session user

        Args:
            session: Session context
            patch: Fields to change

        Returns:
            True if successful
        """
        await self.patch(
            endpoint=f"{REST_PATH}/{PROFILES_TABLE}",
            headers=self._get_headers(session, prefer="return=minimal"),
            params={"id": _eq(session.user_id)},
            json_data=patch.model_dump(exclude_none=True),
        )
        return True

    async def sign_out(self, session: SessionContext) -> bool:
        """
        Revoke the session on the backend

        Args:
            session: Session context

        Returns:
            True if successful
        """
        await self.post(
            endpoint=f"{AUTH_PATH}/logout",
            headers=self._get_headers(session),
        )
        self.logger.info(f"Signed out user {session.user_id}")
        return True
