"""Permission routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from commentstreams.application.usecase.comment import (
    CheckActionRequest,
    CheckActionResponse,
    CheckActionUseCase,
    CheckMoveRequest,
    CheckMoveResponse,
    CheckMoveUseCase,
)
from commentstreams.domain.value import ActorId
from commentstreams.interface.api.actor import required_actor_id

router = APIRouter(
    prefix="/api/permissions", tags=["permissions"], route_class=DishkaRoute
)


@router.get("/move", response_model=CheckMoveResponse)
async def check_move(
    from_namespace: int,
    to_namespace: int,
    check_move_use_case: FromDishka[CheckMoveUseCase],
) -> CheckMoveResponse:
    """Report whether a page may be moved between two namespaces."""
    return await check_move_use_case.execute(
        CheckMoveRequest(from_namespace=from_namespace, to_namespace=to_namespace)
    )


@router.get("/action", response_model=CheckActionResponse)
async def check_action(
    action: str,
    namespace: int,
    check_action_use_case: FromDishka[CheckActionUseCase],
    actor_id: Annotated[ActorId, Depends(required_actor_id)],
    page_id: int | None = None,
) -> CheckActionResponse:
    """Report whether the requesting actor may perform an action on a page.

    The host wiki asks this before edits and deletions. Only actions on
    comment pages are restricted.
    """
    return await check_action_use_case.execute(
        CheckActionRequest(
            actor_id=actor_id, action=action, namespace=namespace, page_id=page_id
        )
    )
