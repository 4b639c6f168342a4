"""In-memory audit log repository for testing."""

from itertools import count

from commentstreams.domain.model import LogEntry
from commentstreams.domain.repository.audit_log import AuditLogRepository
from commentstreams.domain.value import LogId, PageId


class InMemoryAuditLogRepository(AuditLogRepository):
    """In-memory implementation of AuditLogRepository for testing."""

    def __init__(self) -> None:
        self._entries: dict[LogId, LogEntry] = {}
        self._ids = count(1)

    async def insert(self, entry: LogEntry) -> LogEntry:
        """Store an entry under the next ID."""
        stored = entry.model_copy(update={"id": LogId(next(self._ids))})
        self._entries[stored.id] = stored
        return stored

    async def publish(self, log_id: LogId) -> None:
        """Mark an entry as published."""
        entry = self._entries.get(log_id)
        if entry:
            self._entries[log_id] = entry.model_copy(update={"published": True})

    async def find_by_target(self, page_id: PageId) -> list[LogEntry]:
        """Find entries recorded against a page, in insertion order."""
        return [e for e in self._entries.values() if e.target_page_id == page_id]
