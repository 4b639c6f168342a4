"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from commentstreams.config import CommentStreamsSettings, Settings
from commentstreams.domain.repository import (
    ActorRepository,
    AfterCommit,
    AuditLogRepository,
    CommentRepository,
    PageRepository,
)
from commentstreams.persistence.database import create_engine, create_session_factory
from commentstreams.persistence.repository import (
    PostgresActorRepository,
    PostgresAuditLogRepository,
    PostgresCommentRepository,
    PostgresPageRepository,
)
from commentstreams.util.di.base import ProviderBase
from commentstreams.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_after_commit(self) -> AfterCommit:
        """Provide the request's after-commit hooks."""
        return AfterCommit()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        after_commit: AfterCommit,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised. After-commit
        hooks run only once the commit succeeded.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                after_commit.discard()
                await session.rollback()
                raise
        after_commit.fire()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(
        self, session: AsyncSession, settings: CommentStreamsSettings
    ) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session, settings.namespace_index)

    @provide(scope=Scope.REQUEST)
    def get_page_repository(self, session: AsyncSession) -> PageRepository:
        """Provide Page repository."""
        return PostgresPageRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_actor_repository(self, session: AsyncSession) -> ActorRepository:
        """Provide Actor repository."""
        return PostgresActorRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_audit_log_repository(self, session: AsyncSession) -> AuditLogRepository:
        """Provide audit log repository."""
        return PostgresAuditLogRepository(session)
