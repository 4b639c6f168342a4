"""Audit log domain service."""

import logfire

from commentstreams.config import CommentStreamsSettings
from commentstreams.domain.model import Actor, LogEntry, WikiPage
from commentstreams.domain.repository import AuditLogRepository
from commentstreams.domain.value import LogAction

from .base import Service


class AuditLogService(Service):
    """Records comment actions in the wiki's audit log."""

    def __init__(
        self,
        audit_log_repository: AuditLogRepository,
        settings: CommentStreamsSettings,
    ) -> None:
        """Initialize audit log service.

        Args:
            audit_log_repository: Audit log repository
            settings: Comment streams settings (recent changes suppression)
        """
        self.audit_log_repository = audit_log_repository
        self.suppress_from_recent_changes = settings.suppress_logs_from_rcs

    async def record(
        self, action: LogAction, performer: Actor, target: WikiPage
    ) -> LogEntry:
        """Record an action against a page.

        The entry is always stored. It is published to the recent changes
        feed unless suppression is configured.

        Args:
            action: Action performed
            performer: Actor who performed it
            target: Page the action is logged against

        Returns:
            The stored log entry
        """
        with logfire.span(
            "audit_log_service.record",
            action=action.value,
            performer_id=performer.id,
            target_page_id=target.id,
        ):
            entry = await self.audit_log_repository.insert(
                LogEntry(
                    action=action.value,
                    performer_id=performer.id,
                    target_page_id=target.id,
                )
            )

            if self.suppress_from_recent_changes or entry.id is None:
                logfire.info("Log entry recorded", log_id=entry.id, published=False)
                return entry

            await self.audit_log_repository.publish(entry.id)
            logfire.info("Log entry recorded", log_id=entry.id, published=True)
            return entry.model_copy(update={"published": True})
