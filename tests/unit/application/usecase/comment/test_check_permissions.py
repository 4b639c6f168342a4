"""Unit tests for the comment permission use cases."""

import pytest

from commentstreams.application.usecase.comment import (
    CheckActionRequest,
    CheckActionUseCase,
    CheckCommentPermissionsRequest,
    CheckCommentPermissionsUseCase,
    CheckMoveRequest,
    CheckMoveUseCase,
    PostReplyRequest,
    PostReplyUseCase,
)
from commentstreams.domain.repository import (
    ActorRepository,
    CommentRepository,
    PageRepository,
)
from commentstreams.domain.value import ActorId, PageId
from tests.conftest import at, make_actor, make_comment, make_page
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCheckCommentPermissions:
    """Tests for CheckCommentPermissionsUseCase."""

    @pytest.mark.asyncio
    async def test_author_and_stranger(self, unit_env):
        """Only the original author may edit and delete."""
        # Arrange
        actor_repo = await unit_env.get(ActorRepository)
        page_repo = await unit_env.get(PageRepository)
        await actor_repo.save(make_actor(7, name="Author"))
        await actor_repo.save(make_actor(8, name="Stranger"))
        await page_repo.save(make_page(500, namespace=844))
        await page_repo.add_revision(PageId(500), ActorId(7), at(0))

        use_case = await unit_env.get(CheckCommentPermissionsUseCase)

        # Act
        author = await use_case.execute(
            CheckCommentPermissionsRequest(actor_id=7, comment_id=500)
        )
        stranger = await use_case.execute(
            CheckCommentPermissionsRequest(actor_id=8, comment_id=500)
        )

        # Assert
        assert (author.can_edit, author.can_delete) == (True, True)
        assert (stranger.can_edit, stranger.can_delete) == (False, False)

    @pytest.mark.asyncio
    async def test_unknown_actor_gets_nothing(self, unit_env):
        """Unknown actors are refused rather than reported as errors."""
        use_case = await unit_env.get(CheckCommentPermissionsUseCase)

        response = await use_case.execute(
            CheckCommentPermissionsRequest(actor_id=99, comment_id=500)
        )

        assert response.can_edit is False
        assert response.can_delete is False


class TestCheckMove:
    """Tests for CheckMoveUseCase."""

    @pytest.mark.asyncio
    async def test_move_rules(self, unit_env):
        """Moves touching the comment namespace are refused."""
        use_case = await unit_env.get(CheckMoveUseCase)

        refused = await use_case.execute(CheckMoveRequest(from_namespace=844, to_namespace=0))
        allowed = await use_case.execute(CheckMoveRequest(from_namespace=0, to_namespace=2))

        assert refused.can_move is False
        assert allowed.can_move is True


class TestPermissionsOnPostedReplies:
    """Tests for replies created through the reply workflow."""

    @pytest.mark.asyncio
    async def test_only_reply_author_may_edit(self, unit_env):
        """A freshly posted reply belongs to its author, not to strangers."""
        # Arrange
        actor_repo = await unit_env.get(ActorRepository)
        await actor_repo.save(make_actor(7, name="Author"))
        await actor_repo.save(make_actor(8, name="Stranger"))
        await (await unit_env.get(PageRepository)).save(make_page(100))
        await (await unit_env.get(CommentRepository)).save(
            make_comment(1, page_id=100, author_id=9, title="Topic")
        )
        reply = await (await unit_env.get(PostReplyUseCase)).execute(
            PostReplyRequest(actor_id=7, wikitext="Mine", parent_id=1)
        )
        use_case = await unit_env.get(CheckCommentPermissionsUseCase)

        # Act
        author = await use_case.execute(
            CheckCommentPermissionsRequest(actor_id=7, comment_id=reply.comment_id)
        )
        stranger = await use_case.execute(
            CheckCommentPermissionsRequest(actor_id=8, comment_id=reply.comment_id)
        )

        # Assert
        assert (author.can_edit, author.can_delete) == (True, True)
        assert (stranger.can_edit, stranger.can_delete) == (False, False)

    @pytest.mark.asyncio
    async def test_reply_gets_comment_page(self, unit_env):
        """The reply's page lives in the comment namespace, authored by the poster."""
        # Arrange
        await (await unit_env.get(ActorRepository)).save(make_actor(7))
        page_repo = await unit_env.get(PageRepository)
        await page_repo.save(make_page(100))
        await (await unit_env.get(CommentRepository)).save(
            make_comment(1, page_id=100, title="Topic")
        )

        # Act
        reply = await (await unit_env.get(PostReplyUseCase)).execute(
            PostReplyRequest(actor_id=7, wikitext="Mine", parent_id=1)
        )

        # Assert
        page = await page_repo.find_by_id(PageId(reply.comment_id))
        assert page is not None
        assert page.namespace == 844
        assert page.text == "Mine"
        assert await page_repo.find_original_author(page.id) == ActorId(7)


class TestCheckAction:
    """Tests for CheckActionUseCase."""

    @pytest.mark.asyncio
    async def test_edit_and_delete_follow_authorship(self, unit_env):
        """Comment page edits and deletions are limited to the author."""
        # Arrange
        actor_repo = await unit_env.get(ActorRepository)
        page_repo = await unit_env.get(PageRepository)
        await actor_repo.save(make_actor(7))
        await actor_repo.save(make_actor(8))
        await page_repo.save(make_page(500, namespace=844))
        await page_repo.add_revision(PageId(500), ActorId(7), at(0))
        use_case = await unit_env.get(CheckActionUseCase)

        # Act
        author_edit = await use_case.execute(
            CheckActionRequest(actor_id=7, action="edit", namespace=844, page_id=500)
        )
        stranger_edit = await use_case.execute(
            CheckActionRequest(actor_id=8, action="edit", namespace=844, page_id=500)
        )
        stranger_delete = await use_case.execute(
            CheckActionRequest(actor_id=8, action="delete", namespace=844, page_id=500)
        )

        # Assert
        assert author_edit.allowed is True
        assert stranger_edit.allowed is False
        assert stranger_delete.allowed is False

    @pytest.mark.asyncio
    async def test_other_actions_and_namespaces_are_allowed(self, unit_env):
        """Only edit and delete on comment pages are restricted."""
        actor_repo = await unit_env.get(ActorRepository)
        page_repo = await unit_env.get(PageRepository)
        await actor_repo.save(make_actor(8))
        await page_repo.save(make_page(500, namespace=844))
        await page_repo.add_revision(PageId(500), ActorId(7), at(0))
        use_case = await unit_env.get(CheckActionUseCase)

        history = await use_case.execute(
            CheckActionRequest(actor_id=8, action="history", namespace=844, page_id=500)
        )
        main = await use_case.execute(
            CheckActionRequest(actor_id=8, action="edit", namespace=0, page_id=100)
        )
        new_comment = await use_case.execute(
            CheckActionRequest(actor_id=8, action="edit", namespace=844)
        )

        assert history.allowed is True
        assert main.allowed is True
        assert new_comment.allowed is True

    @pytest.mark.asyncio
    async def test_unknown_actor_is_refused(self, unit_env):
        """Actors the wiki does not know are refused."""
        use_case = await unit_env.get(CheckActionUseCase)

        response = await use_case.execute(
            CheckActionRequest(actor_id=99, action="view", namespace=0)
        )

        assert response.allowed is False
