"""Token routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from commentstreams.domain.service import CsrfTokenService
from commentstreams.domain.value import ActorId
from commentstreams.interface.api.actor import required_actor_id

router = APIRouter(prefix="/api/tokens", tags=["tokens"], route_class=DishkaRoute)


class CsrfTokenResponse(BaseModel):
    """CSRF token response."""

    csrftoken: str


@router.get("/csrf", response_model=CsrfTokenResponse)
async def get_csrf_token(
    csrf_token_service: FromDishka[CsrfTokenService],
    actor_id: Annotated[ActorId, Depends(required_actor_id)],
) -> CsrfTokenResponse:
    """Issue the CSRF token the actor must send with replies."""
    return CsrfTokenResponse(csrftoken=csrf_token_service.issue(actor_id))
