"""
Task list state management service
"""

from typing import List, Optional, Tuple
from taskboard.api.backend_client import BackendClient
from taskboard.config.constants import FILTER_ALL
from taskboard.models.session import SessionContext
from taskboard.models.task import Task, TaskDraft, TaskPatch
from taskboard.models.response import TaskStats
from taskboard.services.change_feed import ChangeFeed, Subscription
from taskboard.services.notifier import Notifier
from taskboard.services.task_query import filter_tasks, compute_stats
from taskboard.utils.logger import logger


class TaskListManager:
    """Local mirror of the session user's tasks

    The local sequence is only ever replaced wholesale with what the backend
    returns. Mutations are never applied locally; a successful write is
    followed by a full refresh. Remote failures are reported through the
    notifier and leave the local sequence untouched.
    """

    def __init__(self, client: BackendClient, notifier: Notifier):
        """
        Initialize task list manager

        Args:
            client: Backend client
            notifier: User-visible notification channel
        """
        self.client = client
        self.notifier = notifier
        self.logger = logger
        self._tasks: Tuple[Task, ...] = ()
        self._feed: Optional[ChangeFeed] = None
        self._subscription: Optional[Subscription] = None

    @property
    def tasks(self) -> Tuple[Task, ...]:
        """Current local task sequence"""
        return self._tasks

    @property
    def has_tasks(self) -> bool:
        return bool(self._tasks)

    async def refresh(self, session: SessionContext) -> bool:
        """
        Replace the local sequence with the backend's current tasks

        Args:
            session: Session context

        Returns:
            True on success, False if the error was reported
        """
        try:
            tasks = await self.client.list_tasks(session)
        except Exception as e:
            self.notifier.error("Error loading tasks", e)
            return False

        self._tasks = tuple(tasks)
        self.logger.debug(f"[TaskList] Refreshed: {len(self._tasks)} tasks")
        return True

    async def create(self, session: SessionContext, draft: TaskDraft) -> bool:
        """
        Create task owned by the session user, then refresh

        Args:
            session: Session context
            draft: New task fields

        Returns:
            True on success
        """
        if draft.user_id != session.user_id:
            draft = draft.model_copy(update={"user_id": session.user_id})

        try:
            created = await self.client.create_task(session, draft)
        except Exception as e:
            self.notifier.error("Error creating task", e)
            return False

        self.logger.info(f"[TaskList] Created task '{created.title}' ({created.id})")
        self.notifier.success("Task created", "Your task has been created successfully.")
        await self.refresh(session)
        return True

    async def update(self, session: SessionContext, task_id: str, patch: TaskPatch) -> bool:
        """
        Partially update task, then refresh (last writer wins remotely)

        Args:
            session: Session context
            task_id: Task ID
            patch: Fields to change

        Returns:
            True on success
        """
        try:
            await self.client.update_task(session, task_id, patch)
        except Exception as e:
            self.notifier.error("Error updating task", e)
            return False

        self.logger.info(f"[TaskList] Updated task {task_id}")
        self.notifier.success("Task updated", "Your task has been updated successfully.")
        await self.refresh(session)
        return True

    async def remove(self, session: SessionContext, task_id: str) -> bool:
        """
        Delete task, then refresh

        Args:
            session: Session context
            task_id: Task ID

        Returns:
            True on success
        """
        try:
            await self.client.delete_task(session, task_id)
        except Exception as e:
            self.notifier.error("Error deleting task", e)
            return False

        self.logger.info(f"[TaskList] Deleted task {task_id}")
        self.notifier.success("Task deleted", "Your task has been deleted successfully.")
        await self.refresh(session)
        return True

    async def on_remote_change(self, session: SessionContext) -> None:
        """Change feed signal: re-fetch everything"""
        self.logger.debug("[TaskList] Remote change signalled, refreshing")
        await self.refresh(session)

    def attach(self, feed: ChangeFeed, session: SessionContext) -> Subscription:
        """
        Subscribe to remote changes for the session user

        Args:
            feed: Change feed
            session: Session context

        Returns:
            Subscription handle
        """
        if self._subscription is not None:
            return self._subscription

        async def invalidate() -> None:
            await self.on_remote_change(session)

        self._feed = feed
        self._subscription = feed.subscribe(session, invalidate)
        return self._subscription

    async def detach(self) -> None:
        """Unsubscribe from remote changes"""
        if self._feed is not None and self._subscription is not None:
            await self._feed.unsubscribe(self._subscription)
        self._feed = None
        self._subscription = None

    def filter(
        self,
        search_term: str = "",
        status_filter: str = FILTER_ALL,
        priority_filter: str = FILTER_ALL,
    ) -> List[Task]:
        """Filtered view of the local sequence (no remote calls)"""
        return filter_tasks(self._tasks, search_term, status_filter, priority_filter)

    def stats(self) -> TaskStats:
        """Status counters over the local sequence"""
        return compute_stats(self._tasks)
