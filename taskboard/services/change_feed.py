"""
Change feed: signals that the user's tasks changed remotely
"""

import asyncio
import inspect
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Dict, FrozenSet, Optional, Tuple, Union
from taskboard.api.backend_client import BackendClient
from taskboard.config.settings import settings
from taskboard.models.session import SessionContext
from taskboard.utils.logger import logger


# Zero-argument "invalidate" callback; the signal carries no payload
InvalidateSignal = Callable[[], Union[Awaitable[None], None]]


class Subscription:
    """Handle returned by ChangeFeed.subscribe"""

    def __init__(self, session: SessionContext, callback: InvalidateSignal):
        self.session = session
        self.callback = callback
        self.active = True
        self.fingerprint: Optional[FrozenSet[Tuple[str, Optional[str]]]] = None
        self.task: Optional[asyncio.Task] = None


class ChangeFeed(ABC):
    """Base class for change notification channels"""

    @abstractmethod
    def subscribe(self, session: SessionContext, callback: InvalidateSignal) -> Subscription:
        """Invoke callback whenever a task in the session user's scope changes"""

    @abstractmethod
    async def unsubscribe(self, subscription: Subscription) -> None:
        """Release subscription"""

    async def close(self) -> None:
        """Release all subscriptions"""

    @staticmethod
    async def _notify(subscription: Subscription) -> None:
        """Invoke subscriber callback (sync or async)"""
        result = subscription.callback()
        if inspect.isawaitable(result):
            await result


class PollingChangeFeed(ChangeFeed):
    """Change feed polling a lightweight (id, updated_at) projection

    The first poll of a subscription records a baseline. Every later poll whose
    fingerprint differs from the previous one fires the callback once.
    """

    def __init__(self, client: BackendClient, interval: Optional[float] = None):
        """
        Initialize polling change feed

        Args:
            client: Backend client
            interval: Seconds between polls (defaults to settings)
        """
        self.client = client
        self.interval = interval if interval is not None else settings.CHANGE_POLL_INTERVAL
        self.logger = logger
        self._subscriptions: Dict[int, Subscription] = {}

    def subscribe(self, session: SessionContext, callback: InvalidateSignal) -> Subscription:
        """
        Start polling for changes

        Must be called from a running event loop.

        Args:
            session: Session context defining the scope
            callback: Zero-argument invalidate signal

        Returns:
            Subscription handle
        """
        subscription = Subscription(session, callback)
        subscription.task = asyncio.get_running_loop().create_task(self._poll_loop(subscription))
        self._subscriptions[id(subscription)] = subscription
        self.logger.info(f"[ChangeFeed] Subscribed to task changes for user {session.user_id}")
        return subscription

    async def unsubscribe(self, subscription: Subscription) -> None:
        """Stop polling for subscription (idempotent)"""
        subscription.active = False
        self._subscriptions.pop(id(subscription), None)

        task = subscription.task
        subscription.task = None
        if task is None or task.done():
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        self.logger.info(f"[ChangeFeed] Unsubscribed user {subscription.session.user_id}")

    async def close(self) -> None:
        """Release all subscriptions"""
        for subscription in list(self._subscriptions.values()):
            await self.unsubscribe(subscription)

    async def check(self, subscription: Subscription) -> bool:
        """
        Run a single poll

        Args:
            subscription: Subscription to check

        Returns:
            True if a change was detected and the callback fired
        """
        if not subscription.active:
            return False

        versions = await self.client.list_task_versions(subscription.session)
        fingerprint = frozenset(versions)

        previous = subscription.fingerprint
        subscription.fingerprint = fingerprint

        if previous is None or previous == fingerprint:
            return False

        self.logger.debug(f"[ChangeFeed] Change detected for user {subscription.session.user_id}")
        await self._notify(subscription)
        return True

    async def _poll_loop(self, subscription: Subscription) -> None:
        """Poll until unsubscribed"""
        while subscription.active:
            try:
                await self.check(subscription)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                self.logger.warning(f"[ChangeFeed] Poll failed: {e}")
            await asyncio.sleep(self.interval)
