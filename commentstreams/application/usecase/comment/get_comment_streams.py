"""Get comment streams use case.

Builds everything the client renderer needs for one page view: whether the
comment UI renders at all, the discussion tree, and the display options.
"""

from datetime import datetime

import logfire
from pydantic import BaseModel

from commentstreams.config import CommentStreamsSettings
from commentstreams.domain.error import NotFoundError
from commentstreams.domain.model import WikiPage
from commentstreams.domain.service import (
    ActorService,
    CommentService,
    CommentTreeService,
    DiscussionNode,
    PageService,
    VisibilityService,
)
from commentstreams.domain.value import ActorId, PageAction, PageContext, PageId


class CommentNodeResponse(BaseModel):
    """Comment in the rendered discussion tree.

    Recursive structure mirroring the domain DiscussionNode.
    """

    id: int
    title: str | None
    body: str
    author: str
    author_id: int
    timestamp: datetime
    children: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: DiscussionNode) -> "CommentNodeResponse":
        """Convert a domain DiscussionNode to a response model.

        Args:
            node: Domain discussion node

        Returns:
            Response model with children recursively converted
        """
        comment = node.comment
        return cls(
            id=comment.id,
            title=comment.title,
            body=comment.body,
            author=comment.author_name,
            author_id=comment.author_id,
            timestamp=comment.created_at,
            children=[cls.from_domain(child) for child in node.children],
        )


class GetCommentStreamsRequest(BaseModel):
    """Get comment streams request."""

    page_id: int
    action: str = PageAction.VIEW.value
    actor_id: int | None = None  # Viewing actor, if known


class GetCommentStreamsResponse(BaseModel):
    """Get comment streams response.

    ``display`` is False when the page does not show comments; the other
    fields are then left at their defaults.
    """

    page_id: int
    display: bool
    newest_streams_on_top: bool = False
    initially_collapsed: bool = False
    user_display_name: str | None = None
    comments: list[CommentNodeResponse] = []


class GetCommentStreamsUseCase:
    """Use case for rendering the comment streams of a page."""

    def __init__(
        self,
        comment_service: CommentService,
        page_service: PageService,
        actor_service: ActorService,
        visibility_service: VisibilityService,
        tree_service: CommentTreeService,
        settings: CommentStreamsSettings,
    ) -> None:
        """Initialize get comment streams use case.

        Args:
            comment_service: Comment domain service
            page_service: Page domain service
            actor_service: Actor domain service
            visibility_service: Display gate
            tree_service: Discussion tree assembler
            settings: Comment streams settings
        """
        self.comment_service = comment_service
        self.page_service = page_service
        self.actor_service = actor_service
        self.visibility_service = visibility_service
        self.tree_service = tree_service
        self.newest_first = settings.newest_streams_on_top

    async def execute(
        self, request: GetCommentStreamsRequest
    ) -> GetCommentStreamsResponse:
        """Execute get comment streams flow.

        Steps:
        1. Build the page context and run the display gate
        2. Fetch all comments attached to the page
        3. Assemble the discussion tree and convert it for rendering

        Args:
            request: Page and action being rendered

        Returns:
            Render payload; ``display`` is False when the gate declines
        """
        page_id = PageId(request.page_id)
        page = await self.page_service.get_page_by_id(page_id)
        if page is None:
            logfire.info("Comment streams requested for missing page", page_id=page_id)
            return GetCommentStreamsResponse(page_id=page_id, display=False)

        context = self._build_context(page, request.action)
        if not self.visibility_service.should_display(context):
            return GetCommentStreamsResponse(page_id=page_id, display=False)

        comments = await self.comment_service.get_comments_for_page(page_id)
        discussions = self.tree_service.assemble(comments, self.newest_first)
        logfire.info(
            "Comment streams assembled",
            page_id=page_id,
            discussions=len(discussions),
            comments=len(comments),
        )

        return GetCommentStreamsResponse(
            page_id=page_id,
            display=True,
            newest_streams_on_top=self.newest_first,
            initially_collapsed=self.visibility_service.is_initially_collapsed(
                page.namespace
            ),
            user_display_name=await self._viewer_name(request.actor_id),
            comments=[CommentNodeResponse.from_domain(node) for node in discussions],
        )

    def _build_context(self, page: WikiPage, action: str) -> PageContext:
        return PageContext(
            namespace=page.namespace,
            action=action,
            page_exists=True,
            page_deleted=page.is_deleted,
            comments_disabled=self.visibility_service.has_disable_directive(
                page.text
            ),
        )

    async def _viewer_name(self, actor_id: int | None) -> str | None:
        if actor_id is None:
            return None
        try:
            actor = await self.actor_service.get_by_id(ActorId(actor_id))
        except NotFoundError:
            return None
        return actor.display_name
