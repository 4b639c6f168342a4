"""Reply notifier implementations."""

import httpx
import logfire

from commentstreams.adapter.error import NotificationDeliveryError
from commentstreams.domain.model import Actor, Comment, WikiPage
from commentstreams.domain.service.notification_service import Notifier
from commentstreams.domain.value import LogAction


class NullNotifier(Notifier):
    """Notifier used when no notification endpoint is configured."""

    async def send_reply_notifications(
        self,
        reply: Comment,
        associated_page: WikiPage,
        actor: Actor,
        parent_comment: Comment,
    ) -> None:
        logfire.debug("Reply notifications disabled", comment_id=reply.id)


class WebhookNotifier(Notifier):
    """Posts reply notifications to an HTTP endpoint as JSON.

    The receiving service fans the notification out to watchers and
    discussion participants. The parent comment's author is always listed as
    a recipient unless they wrote the reply themselves.
    """

    def __init__(
        self,
        webhook_url: str,
        timeout_seconds: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize webhook notifier.

        Args:
            webhook_url: Endpoint receiving notifications
            timeout_seconds: Delivery timeout
            client: Optional preconfigured HTTP client (used in tests)
        """
        self.webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds
        self._client = client

    async def send_reply_notifications(
        self,
        reply: Comment,
        associated_page: WikiPage,
        actor: Actor,
        parent_comment: Comment,
    ) -> None:
        payload = self.build_payload(reply, associated_page, actor, parent_comment)

        with logfire.span(
            "webhook_notifier.send_reply_notifications",
            comment_id=reply.id,
            page_id=associated_page.id,
        ):
            try:
                if self._client is not None:
                    response = await self._client.post(self.webhook_url, json=payload)
                else:
                    async with httpx.AsyncClient(
                        timeout=self.timeout_seconds
                    ) as client:
                        response = await client.post(self.webhook_url, json=payload)
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise NotificationDeliveryError(
                    f"Failed to deliver reply notification: {e}"
                ) from e

            logfire.info(
                "Reply notification delivered",
                comment_id=reply.id,
                recipients=payload["recipients"],
            )

    @staticmethod
    def build_payload(
        reply: Comment,
        associated_page: WikiPage,
        actor: Actor,
        parent_comment: Comment,
    ) -> dict:
        """Build the JSON body sent for a reply."""
        recipients = sorted({parent_comment.author_id} - {actor.id})
        return {
            "event": LogAction.REPLY_CREATE.value,
            "reply": {
                "id": reply.id,
                "wikitext": reply.wikitext,
                "created_at": reply.created_at.isoformat(),
            },
            "page": {
                "id": associated_page.id,
                "namespace": associated_page.namespace,
                "title": associated_page.label,
            },
            "actor": {"id": actor.id, "name": actor.display_name},
            "parent": {
                "id": parent_comment.id,
                "title": parent_comment.title,
                "author_id": parent_comment.author_id,
            },
            "recipients": recipients,
        }


class MockNotifier(Notifier):
    """Mock notifier for testing. Records every call it receives."""

    def __init__(self, fail: bool = False) -> None:
        self.calls: list[tuple[Comment, WikiPage, Actor, Comment]] = []
        self.fail = fail

    async def send_reply_notifications(
        self,
        reply: Comment,
        associated_page: WikiPage,
        actor: Actor,
        parent_comment: Comment,
    ) -> None:
        self.calls.append((reply, associated_page, actor, parent_comment))
        if self.fail:
            raise NotificationDeliveryError("Mock notifier configured to fail")
