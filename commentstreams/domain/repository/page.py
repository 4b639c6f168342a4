"""Wiki page repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from commentstreams.domain.model import WikiPage
from commentstreams.domain.value import ActorId, PageId


class PageRepository(ABC):
    """Read access to the host wiki's pages and their revision history."""

    @abstractmethod
    async def find_by_id(self, page_id: PageId) -> Optional[WikiPage]:
        """Find a page by ID, including deleted pages.

        Args:
            page_id: The page ID

        Returns:
            The page if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_original_author(self, page_id: PageId) -> Optional[ActorId]:
        """Find the author of a page's oldest revision.

        Args:
            page_id: The page ID

        Returns:
            Actor who created the page, or None if the page has no revisions
        """
        pass

    @abstractmethod
    async def save(self, page: WikiPage) -> WikiPage:
        """Save a page (create or update)."""
        pass

    @abstractmethod
    async def add_revision(
        self, page_id: PageId, actor_id: ActorId, created_at: datetime
    ) -> None:
        """Record a revision of a page made by an actor."""
        pass
