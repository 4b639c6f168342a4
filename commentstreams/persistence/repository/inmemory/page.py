"""In-memory page repository for testing."""

from datetime import datetime
from typing import Optional

from commentstreams.domain.model import WikiPage
from commentstreams.domain.repository.page import PageRepository
from commentstreams.domain.value import ActorId, PageId


class InMemoryPageRepository(PageRepository):
    """In-memory implementation of PageRepository for testing."""

    def __init__(self) -> None:
        self._pages: dict[PageId, WikiPage] = {}
        self._revisions: dict[PageId, list[tuple[datetime, ActorId]]] = {}

    async def find_by_id(self, page_id: PageId) -> Optional[WikiPage]:
        """Find a page by ID."""
        return self._pages.get(page_id)

    async def find_original_author(self, page_id: PageId) -> Optional[ActorId]:
        """Find the author of the oldest revision (first recorded wins ties)."""
        revisions = self._revisions.get(page_id)
        if not revisions:
            return None
        return min(revisions, key=lambda rev: rev[0])[1]

    async def save(self, page: WikiPage) -> WikiPage:
        """Save or update a page."""
        self._pages[page.id] = page
        return page

    async def add_revision(
        self, page_id: PageId, actor_id: ActorId, created_at: datetime
    ) -> None:
        """Record a revision."""
        self._revisions.setdefault(page_id, []).append((created_at, actor_id))
