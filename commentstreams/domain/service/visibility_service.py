"""Decides whether the comment UI renders on a page."""

import re

import logfire

from commentstreams.config import CommentStreamsSettings
from commentstreams.domain.value import PageAction, PageContext, subject_namespace

from .base import Service

# <no-comment-streams/>, <no-comment-streams> or <no-comment-streams></no-comment-streams>
NO_COMMENT_STREAMS_DIRECTIVE = re.compile(
    r"<no-comment-streams\s*/?>", re.IGNORECASE
)


class VisibilityService(Service):
    """Domain service for the comment display gate."""

    def __init__(self, settings: CommentStreamsSettings) -> None:
        """Initialize visibility service.

        Args:
            settings: Comment streams settings
        """
        self.allowed_namespaces = settings.allowed_namespace_set
        self.enable_talk = settings.enable_talk
        self.comment_namespace = settings.namespace_index
        self.collapsed_namespaces = frozenset(settings.initially_collapsed_namespaces)

    def should_display(self, context: PageContext) -> bool:
        """Check whether comments should be displayed for a page render.

        Gates, checked in order:
        1. Comments not disabled for this render
        2. Action is "view"
        3. Namespace allowed (talk pages: talk enabled or subject allowed)
        4. Namespace is not the comment namespace
        5. Page exists and is not deleted

        Args:
            context: Per-request description of the rendered page

        Returns:
            True if the comment UI should render
        """
        if context.comments_disabled:
            return self._decline("disabled on page", context)

        if context.action != PageAction.VIEW.value:
            return self._decline("not a view action", context)

        if context.is_talk_page:
            if (
                not self.enable_talk
                and context.subject_namespace not in self.allowed_namespaces
            ):
                return self._decline("talk namespace not allowed", context)
        elif context.namespace not in self.allowed_namespaces:
            return self._decline("namespace not allowed", context)

        if context.namespace == self.comment_namespace:
            return self._decline("comment namespace", context)

        if not context.page_exists or context.page_deleted:
            return self._decline("page missing or deleted", context)

        return True

    def is_initially_collapsed(self, namespace: int) -> bool:
        """Check whether discussions start collapsed in a namespace.

        Talk pages follow their subject namespace.
        """
        return subject_namespace(namespace) in self.collapsed_namespaces

    @staticmethod
    def has_disable_directive(wikitext: str) -> bool:
        """Check whether page text opts out of comments."""
        return NO_COMMENT_STREAMS_DIRECTIVE.search(wikitext) is not None

    @staticmethod
    def _decline(reason: str, context: PageContext) -> bool:
        logfire.debug(
            "Comments not displayed",
            reason=reason,
            namespace=context.namespace,
            action=context.action,
        )
        return False
