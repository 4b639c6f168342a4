"""Reply notification contract and background dispatch."""

from abc import ABC, abstractmethod
import asyncio
import sys

import logfire

from commentstreams.domain.model import Actor, Comment, WikiPage

from .base import Service


class Notifier(ABC):
    """Delivers notifications about new replies.

    Delivery is best-effort. Callers treat any exception as a failed
    notification, never as a failed reply.
    """

    @abstractmethod
    async def send_reply_notifications(
        self,
        reply: Comment,
        associated_page: WikiPage,
        actor: Actor,
        parent_comment: Comment,
    ) -> None:
        """Notify discussion participants about a new reply.

        Args:
            reply: The reply just posted
            associated_page: Page the discussion is attached to
            actor: Actor who posted the reply
            parent_comment: Comment that was replied to
        """
        pass


class NotificationDispatcher(Service):
    """Runs reply notifications as background tasks.

    The request that posted the reply never waits for delivery. Failures
    are logged and dropped.
    """

    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of deliveries still running."""
        return len(self._tasks)

    def dispatch(
        self,
        reply: Comment,
        associated_page: WikiPage,
        actor: Actor,
        parent_comment: Comment,
    ) -> None:
        """Schedule notifications for a reply and return immediately."""
        task = asyncio.create_task(
            self._deliver(reply, associated_page, actor, parent_comment)
        )
        # Keep a reference until done, the loop only holds weak ones
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logfire.debug("Reply notification scheduled", comment_id=reply.id)

    async def drain(self) -> None:
        """Wait for all scheduled deliveries to finish."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def _deliver(
        self,
        reply: Comment,
        associated_page: WikiPage,
        actor: Actor,
        parent_comment: Comment,
    ) -> None:
        with logfire.span("notification_dispatcher.deliver", comment_id=reply.id):
            try:
                await self.notifier.send_reply_notifications(
                    reply, associated_page, actor, parent_comment
                )
            except Exception as e:
                logfire.error(
                    "Failed to send reply notifications",
                    comment_id=reply.id,
                    error=str(e),
                    _exc_info=sys.exc_info(),
                )
