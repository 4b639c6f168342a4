"""Reply notification infrastructure providers."""

from dishka import Scope, provide
import logfire

from commentstreams.adapter.notification import NullNotifier, WebhookNotifier
from commentstreams.config import Settings
from commentstreams.domain.service import Notifier
from commentstreams.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notifier: webhook when configured, otherwise disabled."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self, settings: Settings) -> Notifier:
        """Provide reply notifier."""
        config = settings.notifications
        if config.webhook_url is None:
            logfire.info("Reply notifications disabled (no webhook configured)")
            return NullNotifier()
        return WebhookNotifier(
            webhook_url=config.webhook_url,
            timeout_seconds=config.timeout_seconds,
        )
