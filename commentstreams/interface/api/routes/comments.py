"""Comment routes."""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Header, status
from pydantic import BaseModel, Field

from commentstreams.application.usecase.comment import (
    CheckCommentPermissionsRequest,
    CheckCommentPermissionsResponse,
    CheckCommentPermissionsUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    PostReplyRequest,
    PostReplyResponse,
    PostReplyUseCase,
)
from commentstreams.domain.service import CsrfTokenService
from commentstreams.domain.value import ActorId
from commentstreams.interface.api.actor import required_actor_id
from commentstreams.interface.error import InvalidTokenError

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


class PostReplyAPIRequest(BaseModel):
    """API request for replying to a comment."""

    wikitext: str = Field(min_length=1)
    parentid: int


@router.post(
    "/reply",
    response_model=PostReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_reply(
    request: PostReplyAPIRequest,
    post_reply_use_case: FromDishka[PostReplyUseCase],
    csrf_token_service: FromDishka[CsrfTokenService],
    actor_id: Annotated[ActorId, Depends(required_actor_id)],
    x_csrf_token: str | None = Header(default=None, alias="X-CSRF-Token"),
) -> PostReplyResponse:
    """Reply to a comment.

    Replies to replies are accepted and shown under the discussion their
    parent belongs to. Requires an actor and a CSRF token issued for that actor.

    Args:
        request: Reply wikitext and parent comment ID
        post_reply_use_case: Post reply use case from DI
        csrf_token_service: CSRF token service from DI
        actor_id: Replying actor
        x_csrf_token: CSRF token header

    Returns:
        ID of the created reply

    Raises:
        InvalidTokenError: If the CSRF token is missing or wrong
    """
    if not csrf_token_service.verify(actor_id, x_csrf_token):
        raise InvalidTokenError(f"Bad CSRF token for actor {actor_id}")

    logfire.info("Reply requested", actor_id=actor_id, parent_id=request.parentid)
    return await post_reply_use_case.execute(
        PostReplyRequest(
            actor_id=actor_id,
            wikitext=request.wikitext,
            parent_id=request.parentid,
        )
    )


@router.get("/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: int,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get a single comment with a link back to its page."""
    return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))


@router.get(
    "/{comment_id}/permissions", response_model=CheckCommentPermissionsResponse
)
async def get_comment_permissions(
    comment_id: int,
    check_permissions_use_case: FromDishka[CheckCommentPermissionsUseCase],
    actor_id: Annotated[ActorId, Depends(required_actor_id)],
) -> CheckCommentPermissionsResponse:
    """Report whether the requesting actor may edit or delete a comment."""
    return await check_permissions_use_case.execute(
        CheckCommentPermissionsRequest(actor_id=actor_id, comment_id=comment_id)
    )
