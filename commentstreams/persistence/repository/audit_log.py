"""PostgreSQL implementation of AuditLog repository."""

from typing import List

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from commentstreams.domain.model import LogEntry
from commentstreams.domain.repository import AuditLogRepository
from commentstreams.domain.value import LogId, PageId
from commentstreams.persistence.mappers import log_entry_to_dict, row_to_log_entry
from commentstreams.persistence.tables import log_table


class PostgresAuditLogRepository(AuditLogRepository):
    """PostgreSQL implementation of AuditLogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, entry: LogEntry) -> LogEntry:
        """Insert a log entry inside a savepoint and return it with its ID."""
        async with self.session.begin_nested():
            result = await self.session.execute(
                log_table.insert()
                .values(**log_entry_to_dict(entry))
                .returning(log_table.c.id)
            )
            log_id = result.scalar_one()
        return entry.model_copy(update={"id": LogId(log_id)})

    async def publish(self, log_id: LogId) -> None:
        """Mark a log entry as visible in recent changes, inside a savepoint."""
        async with self.session.begin_nested():
            await self.session.execute(
                update(log_table)
                .where(log_table.c.id == log_id)
                .values(published=True)
            )

    async def find_by_target(self, page_id: PageId) -> List[LogEntry]:
        """Find log entries recorded against a page, oldest first."""
        stmt = (
            select(log_table)
            .where(log_table.c.page_id == page_id)
            .order_by(log_table.c.created_at, log_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_log_entry(row._asdict()) for row in result.fetchall()]
