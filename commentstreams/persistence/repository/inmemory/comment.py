"""In-memory comment repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional
from uuid import uuid4

from commentstreams.domain.model import Actor, Comment, WikiPage
from commentstreams.domain.repository.comment import CommentRepository
from commentstreams.domain.repository.page import PageRepository
from commentstreams.domain.value import CommentId, PageId
from commentstreams.persistence.repository.inmemory.page import InMemoryPageRepository


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Replies get a comment page and a first revision in the page repository,
    like the PostgreSQL implementation. Reply IDs are allocated from a
    counter starting above any ID a test is likely to seed by hand.
    """

    def __init__(
        self,
        page_repository: Optional[PageRepository] = None,
        comment_namespace: int = 844,
        first_id: int = 10_000,
    ) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._pages = page_repository or InMemoryPageRepository()
        self._comment_namespace = comment_namespace
        self._ids = count(first_id)
        self.fail_inserts = False

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_associated_page(self, page_id: PageId) -> list[Comment]:
        """Find all comments attached to a page, in insertion order."""
        return [
            c for c in self._comments.values() if c.associated_page_id == page_id
        ]

    async def insert_reply(
        self, actor: Actor, wikitext: str, parent: Comment
    ) -> Optional[Comment]:
        """Store a reply with its comment page and first revision."""
        if self.fail_inserts:
            return None

        page_id = await self._next_free_id()
        now = datetime.now()
        await self._pages.save(
            WikiPage(
                id=page_id,
                namespace=self._comment_namespace,
                title=uuid4().hex,
                text=wikitext,
                created_at=now,
            )
        )
        await self._pages.add_revision(page_id, actor.id, now)

        reply = Comment(
            id=CommentId(page_id),
            associated_page_id=parent.associated_page_id,
            parent_id=parent.id,
            author_id=actor.id,
            author_name=actor.display_name,
            wikitext=wikitext,
            created_at=now,
        )
        self._comments[reply.id] = reply
        return reply

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def _next_free_id(self) -> PageId:
        # Comment IDs are page IDs, so skip both
        while True:
            candidate = next(self._ids)
            if CommentId(candidate) in self._comments:
                continue
            if await self._pages.find_by_id(PageId(candidate)) is not None:
                continue
            return PageId(candidate)
