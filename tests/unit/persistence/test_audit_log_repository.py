"""Unit tests for PostgresAuditLogRepository statement handling."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from commentstreams.domain.value import LogId
from commentstreams.persistence.repository import PostgresAuditLogRepository


def make_session(events: list[str]) -> MagicMock:
    """Build a session mock that records savepoint and statement order."""
    savepoint = MagicMock()

    async def enter():
        events.append("savepoint")
        return savepoint

    async def leave(*exc_info):
        events.append("release")
        return False

    savepoint.__aenter__ = AsyncMock(side_effect=enter)
    savepoint.__aexit__ = AsyncMock(side_effect=leave)

    async def execute(statement):
        events.append("execute")
        return MagicMock()

    session = MagicMock()
    session.begin_nested = MagicMock(return_value=savepoint)
    session.execute = AsyncMock(side_effect=execute)
    return session


class TestPublish:
    """Tests for publishing a log entry."""

    @pytest.mark.asyncio
    async def test_publish_runs_inside_savepoint(self):
        """The update is issued between opening and releasing a savepoint."""
        # Arrange
        events: list[str] = []
        session = make_session(events)
        repo = PostgresAuditLogRepository(session)

        # Act
        await repo.publish(LogId(3))

        # Assert
        session.begin_nested.assert_called_once_with()
        assert events == ["savepoint", "execute", "release"]

    @pytest.mark.asyncio
    async def test_publish_sets_published_flag(self):
        """The statement targets the given entry and marks it published."""
        events: list[str] = []
        session = make_session(events)
        repo = PostgresAuditLogRepository(session)

        await repo.publish(LogId(3))

        statement = session.execute.call_args.args[0]
        compiled = statement.compile()
        assert "UPDATE cs_log" in str(compiled)
        assert compiled.params["published"] is True
        assert 3 in compiled.params.values()
