"""Unit tests for comment and token routes."""

import pytest

from commentstreams.application.usecase.comment import PostReplyUseCase
from commentstreams.domain.repository import (
    ActorRepository,
    CommentRepository,
    PageRepository,
)
from commentstreams.domain.service import CsrfTokenService
from commentstreams.domain.value import ActorId, CommentId
from commentstreams.interface.api.routes.comments import (
    PostReplyAPIRequest,
    post_reply,
)
from commentstreams.interface.api.routes.tokens import get_csrf_token
from commentstreams.interface.error import InvalidTokenError
from tests.conftest import make_actor, make_comment, make_page
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPostReplyRoute:
    """Tests for the reply endpoint handler."""

    @pytest.mark.asyncio
    async def test_reply_with_valid_token(self, unit_env):
        """A reply carrying the actor's token is created."""
        # Arrange
        await (await unit_env.get(ActorRepository)).save(make_actor(5))
        await (await unit_env.get(PageRepository)).save(make_page(100))
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1, title="Topic"))
        csrf = await unit_env.get(CsrfTokenService)
        token = (await get_csrf_token(csrf, ActorId(5))).csrftoken

        # Act
        response = await post_reply(
            request=PostReplyAPIRequest(wikitext="Agreed", parentid=1),
            post_reply_use_case=await unit_env.get(PostReplyUseCase),
            csrf_token_service=csrf,
            actor_id=ActorId(5),
            x_csrf_token=token,
        )

        # Assert
        reply = await comment_repo.find_by_id(CommentId(response.comment_id))
        assert reply is not None
        assert reply.parent_id == 1

    @pytest.mark.asyncio
    async def test_reply_with_bad_token_is_rejected(self, unit_env):
        """Replies without a valid token never reach the use case."""
        with pytest.raises(InvalidTokenError):
            await post_reply(
                request=PostReplyAPIRequest(wikitext="Agreed", parentid=1),
                post_reply_use_case=await unit_env.get(PostReplyUseCase),
                csrf_token_service=await unit_env.get(CsrfTokenService),
                actor_id=ActorId(5),
                x_csrf_token="forged",
            )

    @pytest.mark.asyncio
    async def test_reply_to_reply_is_accepted(self, unit_env):
        """Replies may answer other replies, not only top-level comments."""
        # Arrange
        await (await unit_env.get(ActorRepository)).save(make_actor(5))
        await (await unit_env.get(PageRepository)).save(make_page(100))
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1, title="Topic"))
        await comment_repo.save(make_comment(2, parent_id=1, minute=1))
        csrf = await unit_env.get(CsrfTokenService)

        # Act
        response = await post_reply(
            request=PostReplyAPIRequest(wikitext="Me too", parentid=2),
            post_reply_use_case=await unit_env.get(PostReplyUseCase),
            csrf_token_service=csrf,
            actor_id=ActorId(5),
            x_csrf_token=csrf.issue(ActorId(5)),
        )

        # Assert
        reply = await comment_repo.find_by_id(CommentId(response.comment_id))
        assert reply.parent_id == 2
        assert reply.associated_page_id == 100
