"""PostgreSQL implementation of Page repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commentstreams.domain.model import WikiPage
from commentstreams.domain.repository import PageRepository
from commentstreams.domain.value import ActorId, PageId
from commentstreams.persistence.mappers import page_to_dict, row_to_page
from commentstreams.persistence.tables import pages_table, revisions_table


class PostgresPageRepository(PageRepository):
    """PostgreSQL implementation of PageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, page_id: PageId) -> Optional[WikiPage]:
        """Find a page by ID."""
        stmt = select(pages_table).where(pages_table.c.id == page_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_page(row._asdict()) if row else None

    async def find_original_author(self, page_id: PageId) -> Optional[ActorId]:
        """Find the author of the oldest revision of a page."""
        stmt = (
            select(revisions_table.c.actor_id)
            .where(revisions_table.c.page_id == page_id)
            .order_by(revisions_table.c.created_at, revisions_table.c.id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        actor_id = result.scalar_one_or_none()
        return ActorId(actor_id) if actor_id is not None else None

    async def save(self, page: WikiPage) -> WikiPage:
        """Save a page (create or update)."""
        existing = await self.find_by_id(page.id)
        page_dict = page_to_dict(page)

        if existing:
            stmt = (
                pages_table.update()
                .where(pages_table.c.id == page.id)
                .values(**page_dict)
            )
        else:
            stmt = pages_table.insert().values(**page_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return page

    async def add_revision(
        self, page_id: PageId, actor_id: ActorId, created_at: datetime
    ) -> None:
        """Record a revision of a page."""
        await self.session.execute(
            revisions_table.insert().values(
                page_id=page_id, actor_id=actor_id, created_at=created_at
            )
        )
        await self.session.flush()
