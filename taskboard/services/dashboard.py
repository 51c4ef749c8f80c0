"""
Dashboard controller: composes the task list, profile and form state
"""

import asyncio
from typing import List, Optional
from taskboard.api.backend_client import BackendClient
from taskboard.config.constants import FILTER_ALL, EMPTY_NO_TASKS, EMPTY_NO_MATCHES
from taskboard.models.session import SessionContext
from taskboard.models.task import Task
from taskboard.services.change_feed import ChangeFeed
from taskboard.services.forms import TaskForm, ProfileForm
from taskboard.services.notifier import Notifier
from taskboard.services.profile_manager import ProfileManager
from taskboard.services.task_list import TaskListManager
from taskboard.utils.formatters import format_stats
from taskboard.utils.logger import logger


class Dashboard:
    """State behind the single-page task dashboard"""

    def __init__(self, client: BackendClient, feed: ChangeFeed, session: SessionContext):
        """
        Initialize dashboard

        Args:
            client: Backend client
            feed: Change feed for remote task changes
            session: Session of the signed-in user
        """
        self.client = client
        self.feed = feed
        self.session = session
        self.logger = logger

        self.notifier = Notifier()
        self.task_list = TaskListManager(client, self.notifier)
        self.profiles = ProfileManager(client, self.notifier)
        self.task_form = TaskForm()
        self.profile_form = ProfileForm()

        self.loading = False
        self.signed_out = False
        self.search_term = ""
        self.status_filter = FILTER_ALL
        self.priority_filter = FILTER_ALL

    async def load_data(self):
        """Load tasks and profile concurrently"""
        self.loading = True
        try:
            await asyncio.gather(
                self.task_list.refresh(self.session),
                self.load_profile(),
            )
            self.logger.info(f"[Dashboard] {format_stats(self.task_list.stats())}")
        finally:
            self.loading = False

    async def load_profile(self):
        profile = await self.profiles.load(self.session)
        self.profile_form.seed(profile)

    async def start(self):
        """Initial load, then follow remote changes"""
        self.logger.info(f"[Dashboard] Starting for user {self.session.user_id}")
        await self.load_data()
        self.task_list.attach(self.feed, self.session)

    async def stop(self):
        await self.task_list.detach()

    def set_filters(
        self,
        search_term: Optional[str] = None,
        status_filter: Optional[str] = None,
        priority_filter: Optional[str] = None,
    ):
        """Update filter state (None leaves a filter unchanged)"""
        if search_term is not None:
            self.search_term = search_term
        if status_filter is not None:
            self.status_filter = status_filter or FILTER_ALL
        if priority_filter is not None:
            self.priority_filter = priority_filter or FILTER_ALL

    def visible_tasks(self) -> List[Task]:
        return self.task_list.filter(self.search_term, self.status_filter, self.priority_filter)

    def filtered_tasks(
        self,
        search_term: Optional[str] = None,
        status_filter: Optional[str] = None,
        priority_filter: Optional[str] = None,
    ) -> List[Task]:
        """Filtered view for explicit filters; does not touch the stored filter state"""
        return self.task_list.filter(
            search_term or "",
            status_filter or FILTER_ALL,
            priority_filter or FILTER_ALL,
        )

    def empty_message(self, tasks: Optional[List[Task]] = None) -> Optional[str]:
        """Message for an empty task list, or None when tasks are visible"""
        if tasks is None:
            tasks = self.visible_tasks()
        if tasks:
            return None
        return EMPTY_NO_MATCHES if self.task_list.has_tasks else EMPTY_NO_TASKS

    def find_task(self, task_id: str) -> Optional[Task]:
        for task in self.task_list.tasks:
            if task.id == task_id:
                return task
        return None

    async def save_task(self) -> bool:
        """Submit the task dialog"""
        return await self.task_form.submit(self.session, self.task_list)

    async def delete_task(self, task_id: str) -> bool:
        return await self.task_list.remove(self.session, task_id)

    async def save_profile(self) -> bool:
        """Submit the profile dialog"""
        return await self.profile_form.submit(self.session, self.profiles)

    async def sign_out(self) -> bool:
        """
        Sign out of the backend

        Returns:
            True on success
        """
        try:
            await self.client.sign_out(self.session)
        except Exception as e:
            self.notifier.error("Error signing out", e)
            return False

        await self.stop()
        self.signed_out = True
        return True
