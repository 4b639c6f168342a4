"""Page routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query

from commentstreams.application.usecase.comment import (
    GetCommentStreamsRequest,
    GetCommentStreamsResponse,
    GetCommentStreamsUseCase,
)
from commentstreams.domain.value import ActorId, PageAction
from commentstreams.interface.api.actor import optional_actor_id

router = APIRouter(prefix="/api/pages", tags=["pages"], route_class=DishkaRoute)


@router.get("/{page_id}/comment-streams", response_model=GetCommentStreamsResponse)
async def get_comment_streams(
    page_id: int,
    get_comment_streams_use_case: FromDishka[GetCommentStreamsUseCase],
    actor_id: Annotated[ActorId | None, Depends(optional_actor_id)],
    action: str = Query(default=PageAction.VIEW.value),
) -> GetCommentStreamsResponse:
    """Get the discussions to render below a page.

    The payload has ``display`` set to False when the page does not show
    comments for this action.

    Args:
        page_id: Page being rendered
        get_comment_streams_use_case: Use case from DI
        actor_id: Viewing actor, if any
        action: Page action being performed (view, edit, history, ...)

    Returns:
        Render payload with the assembled discussions
    """
    return await get_comment_streams_use_case.execute(
        GetCommentStreamsRequest(page_id=page_id, action=action, actor_id=actor_id)
    )
