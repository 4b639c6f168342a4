"""Wiki page domain service."""

import logfire

from commentstreams.domain.model import WikiPage
from commentstreams.domain.repository import PageRepository
from commentstreams.domain.value import ActorId, PageId

from .base import Service


class PageService(Service):
    """Domain service for reading host wiki pages."""

    def __init__(self, page_repository: PageRepository) -> None:
        """Initialize page service.

        Args:
            page_repository: Page repository
        """
        self.page_repository = page_repository

    async def get_page_by_id(self, page_id: PageId) -> WikiPage | None:
        """Get a page by ID, deleted pages included."""
        with logfire.span("page_service.get_page_by_id", page_id=page_id):
            page = await self.page_repository.find_by_id(page_id)
            if page is None:
                logfire.warn("Page not found", page_id=page_id)
            return page

    async def get_existing_page(self, page_id: PageId) -> WikiPage | None:
        """Get a page by ID only if it exists and has not been deleted."""
        page = await self.get_page_by_id(page_id)
        if page is None or page.is_deleted:
            return None
        return page

    async def get_original_author(self, page_id: PageId) -> ActorId | None:
        """Get the author of a page's oldest revision.

        Authorship is never taken from current page metadata: later edits by
        other actors must not change who owns the page.
        """
        with logfire.span("page_service.get_original_author", page_id=page_id):
            author_id = await self.page_repository.find_original_author(page_id)
            logfire.info(
                "Original author resolved", page_id=page_id, author_id=author_id
            )
            return author_id
