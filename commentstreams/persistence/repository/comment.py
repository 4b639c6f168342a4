"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

import logfire
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from commentstreams.domain.model import Actor, Comment
from commentstreams.domain.repository import CommentRepository
from commentstreams.domain.value import CommentId, PageId
from commentstreams.persistence.mappers import comment_to_dict, row_to_comment
from commentstreams.persistence.tables import (
    comments_table,
    pages_table,
    revisions_table,
)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession, comment_namespace: int) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            comment_namespace: Namespace new comment pages are created in
        """
        self.session = session
        self.comment_namespace = comment_namespace

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.page_id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_associated_page(self, page_id: PageId) -> List[Comment]:
        """Find all comments attached to a page."""
        stmt = select(comments_table).where(comments_table.c.assoc_page_id == page_id)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def insert_reply(
        self, actor: Actor, wikitext: str, parent: Comment
    ) -> Optional[Comment]:
        """Persist a reply as a new comment page.

        Creates the comment page, its first revision (which fixes the reply's
        author for permission checks) and the comment row inside a savepoint,
        so a failure leaves the request's transaction usable.
        """
        now = datetime.now()
        try:
            async with self.session.begin_nested():
                page_result = await self.session.execute(
                    pages_table.insert()
                    .values(
                        namespace=self.comment_namespace,
                        title=uuid4().hex,
                        text=wikitext,
                        created_at=now,
                    )
                    .returning(pages_table.c.id)
                )
                page_id = page_result.scalar_one()

                await self.session.execute(
                    revisions_table.insert().values(
                        page_id=page_id, actor_id=actor.id, created_at=now
                    )
                )

                reply = Comment(
                    id=CommentId(page_id),
                    associated_page_id=parent.associated_page_id,
                    parent_id=parent.id,
                    author_id=actor.id,
                    author_name=actor.display_name,
                    wikitext=wikitext,
                    created_at=now,
                )
                await self.session.execute(
                    comments_table.insert().values(**comment_to_dict(reply))
                )
        except SQLAlchemyError as e:
            logfire.error(
                "Failed to insert reply", parent_id=parent.id, error=str(e)
            )
            return None

        return reply

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.page_id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
