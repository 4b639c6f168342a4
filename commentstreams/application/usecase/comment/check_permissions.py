"""Comment permission use cases."""

from pydantic import BaseModel

from commentstreams.domain.error import NotFoundError
from commentstreams.domain.model import Actor
from commentstreams.domain.service import ActorService, AuthorizationService
from commentstreams.domain.value import ActorId, CommentId, PageId, PageTarget


class CheckCommentPermissionsRequest(BaseModel):
    """Check comment permissions request."""

    actor_id: int
    comment_id: int


class CheckCommentPermissionsResponse(BaseModel):
    """Check comment permissions response."""

    comment_id: int
    can_edit: bool
    can_delete: bool


class CheckCommentPermissionsUseCase:
    """Use case for reporting what an actor may do with a comment."""

    def __init__(
        self,
        authorization_service: AuthorizationService,
        actor_service: ActorService,
    ) -> None:
        self.authorization_service = authorization_service
        self.actor_service = actor_service

    async def execute(
        self, request: CheckCommentPermissionsRequest
    ) -> CheckCommentPermissionsResponse:
        """Execute check comment permissions flow.

        Unknown actors are refused everything rather than reported as errors.
        """
        comment_id = CommentId(request.comment_id)
        try:
            actor: Actor = await self.actor_service.get_by_id(
                ActorId(request.actor_id)
            )
        except NotFoundError:
            return CheckCommentPermissionsResponse(
                comment_id=comment_id, can_edit=False, can_delete=False
            )

        return CheckCommentPermissionsResponse(
            comment_id=comment_id,
            can_edit=await self.authorization_service.can_edit(actor, comment_id),
            can_delete=await self.authorization_service.can_delete(actor, comment_id),
        )


class CheckMoveRequest(BaseModel):
    """Check move request."""

    from_namespace: int
    to_namespace: int


class CheckMoveResponse(BaseModel):
    """Check move response."""

    can_move: bool


class CheckMoveUseCase:
    """Use case for validating a page move against comment namespace rules."""

    def __init__(self, authorization_service: AuthorizationService) -> None:
        self.authorization_service = authorization_service

    async def execute(self, request: CheckMoveRequest) -> CheckMoveResponse:
        return CheckMoveResponse(
            can_move=self.authorization_service.can_move(
                request.from_namespace, request.to_namespace
            )
        )


class CheckActionRequest(BaseModel):
    """Check action request."""

    actor_id: int
    action: str  # e.g. "edit", "delete", "view"
    namespace: int
    page_id: int | None = None  # None for a page not created yet


class CheckActionResponse(BaseModel):
    """Check action response."""

    allowed: bool


class CheckActionUseCase:
    """Use case answering the host wiki's per-action permission queries."""

    def __init__(
        self,
        authorization_service: AuthorizationService,
        actor_service: ActorService,
    ) -> None:
        self.authorization_service = authorization_service
        self.actor_service = actor_service

    async def execute(self, request: CheckActionRequest) -> CheckActionResponse:
        """Execute check action flow. Unknown actors are refused."""
        try:
            actor = await self.actor_service.get_by_id(ActorId(request.actor_id))
        except NotFoundError:
            return CheckActionResponse(allowed=False)

        target = PageTarget(
            namespace=request.namespace,
            page_id=PageId(request.page_id) if request.page_id is not None else None,
        )
        return CheckActionResponse(
            allowed=await self.authorization_service.user_can(
                actor, request.action, target
            )
        )
