"""Post reply use case."""

from functools import partial
import sys

import logfire
from pydantic import BaseModel, Field

from commentstreams.domain.error import (
    NotFoundError,
    ParentNotFoundError,
    PermissionDeniedError,
    PersistFailureError,
)
from commentstreams.domain.model import Actor, WikiPage
from commentstreams.domain.repository import AfterCommit
from commentstreams.domain.service import (
    ActorService,
    AuditLogService,
    CommentService,
    NotificationDispatcher,
    PageService,
)
from commentstreams.domain.value import ActorId, ActorRight, CommentId, LogAction


class PostReplyRequest(BaseModel):
    """Post reply request."""

    actor_id: int  # Actor forwarded by the host wiki
    wikitext: str = Field(min_length=1)
    parent_id: int  # Comment being replied to


class PostReplyResponse(BaseModel):
    """Post reply response."""

    comment_id: int


class PostReplyUseCase:
    """Use case for replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        page_service: PageService,
        actor_service: ActorService,
        audit_log_service: AuditLogService,
        dispatcher: NotificationDispatcher,
        after_commit: AfterCommit,
    ) -> None:
        """Initialize post reply use case.

        Args:
            comment_service: Comment domain service
            page_service: Page domain service
            actor_service: Actor domain service
            audit_log_service: Audit log domain service
            dispatcher: Background reply notification dispatcher
            after_commit: Hooks run once the request transaction commits
        """
        self.comment_service = comment_service
        self.page_service = page_service
        self.actor_service = actor_service
        self.audit_log_service = audit_log_service
        self.dispatcher = dispatcher
        self.after_commit = after_commit

    async def execute(self, request: PostReplyRequest) -> PostReplyResponse:
        """Execute post reply flow.

        Steps:
        1. Check the actor holds the comment right
        2. Resolve the parent comment
        3. Resolve the parent's associated page
        4. Persist the reply
        5. Record a reply-create log entry (best-effort)
        6. Schedule participant notifications for after the commit

        Args:
            request: Post reply request

        Returns:
            ID of the new reply

        Raises:
            PermissionDeniedError: If the actor may not comment
            ParentNotFoundError: If the parent comment or its page is missing
            PersistFailureError: If the reply could not be stored
        """
        with logfire.span(
            "post_reply.execute",
            actor_id=request.actor_id,
            parent_id=request.parent_id,
        ):
            actor = await self._resolve_actor(ActorId(request.actor_id))

            parent = await self.comment_service.get_comment_by_id(
                CommentId(request.parent_id)
            )
            if parent is None:
                raise ParentNotFoundError(str(request.parent_id))

            associated_page = None
            if parent.associated_page_id is not None:
                associated_page = await self.page_service.get_existing_page(
                    parent.associated_page_id
                )
            if associated_page is None:
                logfire.warn(
                    "Parent comment has no associated page",
                    parent_id=parent.id,
                    page_id=parent.associated_page_id,
                )
                raise ParentNotFoundError(str(request.parent_id))

            reply = await self.comment_service.insert_reply(
                actor, request.wikitext, parent
            )
            if reply is None:
                raise PersistFailureError(str(request.parent_id))

            if reply.associated_page_id is not None:
                await self._log_reply(actor, associated_page)

            self.after_commit.register(
                partial(
                    self.dispatcher.dispatch, reply, associated_page, actor, parent
                )
            )

            return PostReplyResponse(comment_id=reply.id)

    async def _resolve_actor(self, actor_id: ActorId) -> Actor:
        try:
            actor = await self.actor_service.get_by_id(actor_id)
        except NotFoundError:
            raise PermissionDeniedError(str(actor_id), ActorRight.COMMENT.value)

        if not actor.has_right(ActorRight.COMMENT):
            logfire.warn("Actor may not comment", actor_id=actor_id)
            raise PermissionDeniedError(str(actor_id), ActorRight.COMMENT.value)
        return actor

    async def _log_reply(self, actor: Actor, page: WikiPage) -> None:
        try:
            await self.audit_log_service.record(LogAction.REPLY_CREATE, actor, page)
        except Exception as e:
            logfire.error(
                "Failed to record reply log entry",
                page_id=page.id,
                actor_id=actor.id,
                error=str(e),
                _exc_info=sys.exc_info(),
            )
