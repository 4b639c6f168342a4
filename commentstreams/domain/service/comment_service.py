"""Comment domain service."""

import logfire

from commentstreams.domain.model import Actor, Comment
from commentstreams.domain.repository import CommentRepository
from commentstreams.domain.value import CommentId, PageId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=comment_id
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=comment_id)
            else:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def get_comments_for_page(self, page_id: PageId) -> list[Comment]:
        """Get every comment attached to a page.

        Args:
            page_id: Associated page ID

        Returns:
            Unordered list of discussion roots and replies
        """
        with logfire.span("comment_service.get_comments_for_page", page_id=page_id):
            comments = await self.comment_repository.find_by_associated_page(page_id)
            logfire.info(
                "Comments retrieved for page", page_id=page_id, count=len(comments)
            )
            return comments

    async def insert_reply(
        self, actor: Actor, wikitext: str, parent: Comment
    ) -> Comment | None:
        """Persist a reply to a comment.

        Args:
            actor: Actor posting the reply
            wikitext: Reply body
            parent: Comment being replied to

        Returns:
            Persisted reply, or None if the store failed to persist it
        """
        with logfire.span(
            "comment_service.insert_reply",
            actor_id=actor.id,
            parent_id=parent.id,
            page_id=parent.associated_page_id,
        ):
            reply = await self.comment_repository.insert_reply(actor, wikitext, parent)
            if reply:
                logfire.info(
                    "Reply created",
                    comment_id=reply.id,
                    parent_id=parent.id,
                    page_id=reply.associated_page_id,
                )
            else:
                logfire.error(
                    "Reply could not be persisted",
                    parent_id=parent.id,
                    actor_id=actor.id,
                )
            return reply
