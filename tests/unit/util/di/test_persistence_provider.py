"""Unit tests for the production session lifecycle."""

from unittest.mock import AsyncMock, MagicMock

from dishka import Provider, Scope, make_async_container, provide
import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from commentstreams.domain.repository import AfterCommit
from commentstreams.util.di.core import ProdConfigProvider
from commentstreams.util.di.infrastructure.persistence import ProdPersistenceProvider


def make_session_factory(session: MagicMock) -> MagicMock:
    factory = MagicMock()
    factory.return_value.__aenter__ = AsyncMock(return_value=session)
    factory.return_value.__aexit__ = AsyncMock(return_value=False)
    return factory


def build_container(session: MagicMock):
    factory = make_session_factory(session)

    class FakeSessionFactoryProvider(Provider):
        @provide(scope=Scope.APP)
        def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
            return factory

    return make_async_container(
        ProdConfigProvider(), ProdPersistenceProvider(), FakeSessionFactoryProvider()
    )


class TestSessionAfterCommit:
    """Tests for after-commit hooks around the request session."""

    @pytest.mark.asyncio
    async def test_hooks_run_after_commit(self):
        """Hooks run once the session has committed."""
        # Arrange
        session = MagicMock()
        events: list[str] = []
        session.commit = AsyncMock(side_effect=lambda: events.append("commit"))
        session.rollback = AsyncMock()
        container = build_container(session)

        # Act
        async with container() as request_container:
            after_commit = await request_container.get(AfterCommit)
            await request_container.get(AsyncSession)
            after_commit.register(lambda: events.append("notify"))
            assert events == []
        await container.close()

        # Assert
        assert events == ["commit", "notify"]
        session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_hooks_are_dropped_when_commit_fails(self):
        """A failed commit rolls back and never runs the hooks."""
        # Arrange
        session = MagicMock()
        events: list[str] = []
        session.commit = AsyncMock(
            side_effect=OperationalError("COMMIT", {}, Exception("db gone"))
        )
        session.rollback = AsyncMock()
        container = build_container(session)

        # Act
        with pytest.raises(Exception):
            async with container() as request_container:
                after_commit = await request_container.get(AfterCommit)
                await request_container.get(AsyncSession)
                after_commit.register(lambda: events.append("notify"))
        await container.close()

        # Assert
        assert events == []
        session.rollback.assert_awaited_once()
        assert after_commit.pending == 0
