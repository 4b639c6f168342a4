"""Application layer DI providers."""

from dishka import Scope, provide

from commentstreams.application.usecase.comment import (
    CheckActionUseCase,
    CheckCommentPermissionsUseCase,
    CheckMoveUseCase,
    GetCommentStreamsUseCase,
    GetCommentUseCase,
    PostReplyUseCase,
)
from commentstreams.config import CommentStreamsSettings
from commentstreams.domain.repository import AfterCommit
from commentstreams.domain.service import (
    ActorService,
    AuditLogService,
    AuthorizationService,
    CommentService,
    CommentTreeService,
    NotificationDispatcher,
    PageService,
    VisibilityService,
)
from commentstreams.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_post_reply_use_case(
        self,
        comment_service: CommentService,
        page_service: PageService,
        actor_service: ActorService,
        audit_log_service: AuditLogService,
        dispatcher: NotificationDispatcher,
        after_commit: AfterCommit,
    ) -> PostReplyUseCase:
        """Provide post reply use case."""
        return PostReplyUseCase(
            comment_service=comment_service,
            page_service=page_service,
            actor_service=actor_service,
            audit_log_service=audit_log_service,
            dispatcher=dispatcher,
            after_commit=after_commit,
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_streams_use_case(
        self,
        comment_service: CommentService,
        page_service: PageService,
        actor_service: ActorService,
        visibility_service: VisibilityService,
        tree_service: CommentTreeService,
        settings: CommentStreamsSettings,
    ) -> GetCommentStreamsUseCase:
        """Provide get comment streams use case."""
        return GetCommentStreamsUseCase(
            comment_service=comment_service,
            page_service=page_service,
            actor_service=actor_service,
            visibility_service=visibility_service,
            tree_service=tree_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService, page_service: PageService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service, page_service=page_service
        )

    @provide(scope=Scope.REQUEST)
    def get_check_comment_permissions_use_case(
        self,
        authorization_service: AuthorizationService,
        actor_service: ActorService,
    ) -> CheckCommentPermissionsUseCase:
        """Provide check comment permissions use case."""
        return CheckCommentPermissionsUseCase(
            authorization_service=authorization_service, actor_service=actor_service
        )

    @provide(scope=Scope.REQUEST)
    def get_check_move_use_case(
        self, authorization_service: AuthorizationService
    ) -> CheckMoveUseCase:
        """Provide check move use case."""
        return CheckMoveUseCase(authorization_service=authorization_service)

    @provide(scope=Scope.REQUEST)
    def get_check_action_use_case(
        self,
        authorization_service: AuthorizationService,
        actor_service: ActorService,
    ) -> CheckActionUseCase:
        """Provide check action use case."""
        return CheckActionUseCase(
            authorization_service=authorization_service, actor_service=actor_service
        )
