"""Audit log repository interface."""

from abc import ABC, abstractmethod
from typing import List

from commentstreams.domain.model import LogEntry
from commentstreams.domain.value import LogId, PageId


class AuditLogRepository(ABC):
    """Repository for LogEntry entity."""

    @abstractmethod
    async def insert(self, entry: LogEntry) -> LogEntry:
        """Insert a log entry.

        Args:
            entry: Entry without an ID

        Returns:
            The stored entry with its ID assigned
        """
        pass

    @abstractmethod
    async def publish(self, log_id: LogId) -> None:
        """Make a stored entry visible in the recent changes feed."""
        pass

    @abstractmethod
    async def find_by_target(self, page_id: PageId) -> List[LogEntry]:
        """Find log entries recorded against a page, oldest first."""
        pass
