"""Reply notification adapters."""

from .notifier import MockNotifier, NullNotifier, WebhookNotifier

__all__ = ["MockNotifier", "NullNotifier", "WebhookNotifier"]
