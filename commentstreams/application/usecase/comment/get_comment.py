"""Get comment use case.

Backs the view of a comment page: the comment itself plus a link target
pointing back to the page the discussion is attached to.
"""

from datetime import datetime

from pydantic import BaseModel

from commentstreams.domain.error import NotACommentError
from commentstreams.domain.service import CommentService, PageService
from commentstreams.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: int


class GetCommentResponse(BaseModel):
    """Get comment response."""

    comment_id: int
    title: str | None
    body: str
    wikitext: str
    author: str
    author_id: int
    parent_id: int | None
    created_at: datetime
    modified_at: datetime | None
    associated_page_id: int | None
    associated_page_title: str | None  # Display title when one is set


class GetCommentUseCase:
    """Use case for viewing a single comment page."""

    def __init__(
        self, comment_service: CommentService, page_service: PageService
    ) -> None:
        self.comment_service = comment_service
        self.page_service = page_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        The associated page fields are None when that page no longer exists.

        Raises:
            NotACommentError: If the ID does not belong to a comment
        """
        comment = await self.comment_service.get_comment_by_id(
            CommentId(request.comment_id)
        )
        if comment is None:
            raise NotACommentError(str(request.comment_id))

        associated_page = None
        if comment.associated_page_id is not None:
            associated_page = await self.page_service.get_existing_page(
                comment.associated_page_id
            )

        return GetCommentResponse(
            comment_id=comment.id,
            title=comment.title,
            body=comment.body,
            wikitext=comment.wikitext,
            author=comment.author_name,
            author_id=comment.author_id,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
            modified_at=comment.modified_at,
            associated_page_id=associated_page.id if associated_page else None,
            associated_page_title=associated_page.label if associated_page else None,
        )
