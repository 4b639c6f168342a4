"""Domain value objects for comment streams.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from commentstreams.domain.value.common import ValueObject
from commentstreams.domain.value.identifiers import PageId


def is_talk_namespace(namespace: int) -> bool:
    """Return whether a namespace is a talk namespace.

    Talk namespaces have odd, non-negative indexes. Negative (virtual)
    namespaces have no talk counterpart.
    """
    return namespace >= 0 and namespace % 2 == 1


def subject_namespace(namespace: int) -> int:
    """Return the subject namespace of a namespace (itself if not talk)."""
    if is_talk_namespace(namespace):
        return namespace - 1
    return namespace


class PageAction(str, Enum):
    """Page actions that comment streams has an opinion about."""

    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"


class ActorRight(str, Enum):
    """Capabilities granted to actors by the host wiki."""

    COMMENT = "cs-comment"


class LogAction(str, Enum):
    """Actions recorded in the comment streams log."""

    REPLY_CREATE = "reply-create"


LOG_TYPE = "commentstreams"


class PageTarget(ValueObject):
    """A page location an action is being performed on.

    ``page_id`` is None when the page does not exist yet.
    """

    namespace: int
    page_id: PageId | None = None


class PageContext(ValueObject):
    """Everything the visibility gate needs to know about one page render."""

    namespace: int
    action: str = PageAction.VIEW.value
    page_exists: bool = True
    page_deleted: bool = False
    comments_disabled: bool = False

    @property
    def is_talk_page(self) -> bool:
        """Whether the rendered page lives in a talk namespace."""
        return is_talk_namespace(self.namespace)

    @property
    def subject_namespace(self) -> int:
        """Subject namespace of the rendered page."""
        return subject_namespace(self.namespace)
