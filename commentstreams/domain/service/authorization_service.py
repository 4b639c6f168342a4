"""Comment permission rules.

Comments belong to whoever created them. Only that actor may edit or delete
a comment, and comment pages can never be moved.
"""

import logfire

from commentstreams.config import CommentStreamsSettings
from commentstreams.domain.model import Actor
from commentstreams.domain.value import CommentId, PageAction, PageId, PageTarget

from .base import Service
from .page_service import PageService


class AuthorizationService(Service):
    """Decides who may act on comment pages.

    Every check returns a plain boolean; callers decide how to report a
    refusal.
    """

    def __init__(
        self, page_service: PageService, settings: CommentStreamsSettings
    ) -> None:
        """Initialize authorization service.

        Args:
            page_service: Page service, used to look up original authors
            settings: Comment streams settings (comment namespace)
        """
        self.page_service = page_service
        self.comment_namespace = settings.namespace_index

    def is_comment_namespace(self, namespace: int) -> bool:
        return namespace == self.comment_namespace

    async def can_edit(self, actor: Actor, comment_id: CommentId | None) -> bool:
        """Check whether an actor may edit a comment.

        A comment page that does not exist yet may be created by anyone.
        An existing one may only be edited by the author of its oldest
        revision.

        Args:
            actor: Actor attempting the edit
            comment_id: Comment page ID, or None for a page not yet created

        Returns:
            True if the edit is allowed
        """
        if comment_id is None:
            return True

        with logfire.span(
            "authorization_service.can_edit", actor_id=actor.id, comment_id=comment_id
        ):
            page = await self.page_service.get_page_by_id(PageId(comment_id))
            if page is None or page.is_deleted:
                return True

            original_author = await self.page_service.get_original_author(page.id)
            allowed = original_author is not None and original_author == actor.id
            if not allowed:
                logfire.info(
                    "Comment edit refused",
                    actor_id=actor.id,
                    comment_id=comment_id,
                    original_author=original_author,
                )
            return allowed

    async def can_delete(self, actor: Actor, comment_id: CommentId | None) -> bool:
        """Check whether an actor may delete a comment. Same rule as editing."""
        return await self.can_edit(actor, comment_id)

    def can_move(self, old_namespace: int, new_namespace: int) -> bool:
        """Check whether a page may be moved between two namespaces.

        Moves into or out of the comment namespace are always refused.
        """
        return not (
            self.is_comment_namespace(old_namespace)
            or self.is_comment_namespace(new_namespace)
        )

    async def user_can(
        self, actor: Actor, action: PageAction | str, target: PageTarget
    ) -> bool:
        """Generic permission hook for actions on any page.

        Only edits and deletions of comment pages are restricted; every other
        action or namespace is left to the host wiki and allowed here.
        """
        action_name = action.value if isinstance(action, PageAction) else action
        if not self.is_comment_namespace(target.namespace):
            return True

        comment_id = CommentId(target.page_id) if target.page_id is not None else None
        if action_name == PageAction.EDIT.value:
            return await self.can_edit(actor, comment_id)
        if action_name == PageAction.DELETE.value:
            return await self.can_delete(actor, comment_id)
        return True
