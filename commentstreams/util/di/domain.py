"""Domain layer DI providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from commentstreams.config import AuthSettings, CommentStreamsSettings
from commentstreams.domain.repository import (
    ActorRepository,
    AuditLogRepository,
    CommentRepository,
    PageRepository,
)
from commentstreams.domain.service import (
    ActorService,
    AuditLogService,
    AuthorizationService,
    CommentService,
    CommentTreeService,
    CsrfTokenService,
    NotificationDispatcher,
    Notifier,
    PageService,
    VisibilityService,
)
from commentstreams.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_page_service(self, page_repository: PageRepository) -> PageService:
        """Provide page domain service."""
        return PageService(page_repository=page_repository)

    @provide
    def get_actor_service(self, actor_repository: ActorRepository) -> ActorService:
        """Provide actor domain service."""
        return ActorService(actor_repository=actor_repository)

    @provide
    def get_audit_log_service(
        self,
        audit_log_repository: AuditLogRepository,
        settings: CommentStreamsSettings,
    ) -> AuditLogService:
        """Provide audit log domain service."""
        return AuditLogService(
            audit_log_repository=audit_log_repository, settings=settings
        )

    @provide
    def get_authorization_service(
        self, page_service: PageService, settings: CommentStreamsSettings
    ) -> AuthorizationService:
        """Provide authorization domain service."""
        return AuthorizationService(page_service=page_service, settings=settings)

    @provide(scope=Scope.APP)
    def get_visibility_service(
        self, settings: CommentStreamsSettings
    ) -> VisibilityService:
        """Provide display gate (stateless, shared)."""
        return VisibilityService(settings=settings)

    @provide(scope=Scope.APP)
    def get_tree_service(self) -> CommentTreeService:
        """Provide discussion tree assembler (stateless, shared)."""
        return CommentTreeService()

    @provide(scope=Scope.APP)
    def get_csrf_token_service(self, auth_settings: AuthSettings) -> CsrfTokenService:
        """Provide CSRF token service."""
        return CsrfTokenService(auth_settings)

    @provide(scope=Scope.APP)
    async def get_notification_dispatcher(
        self, notifier: Notifier
    ) -> AsyncIterator[NotificationDispatcher]:
        """Provide background notification dispatcher.

        Deliveries still running when the container closes are awaited.
        """
        dispatcher = NotificationDispatcher(notifier=notifier)
        yield dispatcher
        await dispatcher.drain()
