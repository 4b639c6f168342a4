"""Mock persistence providers for testing."""

from dishka import Scope, provide

from commentstreams.config import CommentStreamsSettings
from commentstreams.domain.repository import (
    ActorRepository,
    AfterCommit,
    AuditLogRepository,
    CommentRepository,
    PageRepository,
)
from commentstreams.persistence.repository.inmemory import (
    InMemoryActorRepository,
    InMemoryAuditLogRepository,
    InMemoryCommentRepository,
    InMemoryPageRepository,
)
from commentstreams.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope so each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_after_commit(self) -> AfterCommit:
        """Provide after-commit hooks. Tests fire them to simulate a commit."""
        return AfterCommit()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(
        self, page_repository: PageRepository, settings: CommentStreamsSettings
    ) -> CommentRepository:
        """Provide in-memory comment repository sharing the page store."""
        return InMemoryCommentRepository(
            page_repository=page_repository,
            comment_namespace=settings.namespace_index,
        )

    @provide(scope=Scope.REQUEST)
    def get_page_repository(self) -> PageRepository:
        """Provide in-memory page repository."""
        return InMemoryPageRepository()

    @provide(scope=Scope.REQUEST)
    def get_actor_repository(self) -> ActorRepository:
        """Provide in-memory actor repository."""
        return InMemoryActorRepository()

    @provide(scope=Scope.REQUEST)
    def get_audit_log_repository(self) -> AuditLogRepository:
        """Provide in-memory audit log repository."""
        return InMemoryAuditLogRepository()
