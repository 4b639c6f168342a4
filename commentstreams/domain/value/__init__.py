"""Domain value objects for comment streams."""

from commentstreams.domain.value.identifiers import (
    ActorId,
    CommentId,
    LogId,
    PageId,
)
from commentstreams.domain.value.types import (
    LOG_TYPE,
    ActorRight,
    LogAction,
    PageAction,
    PageContext,
    PageTarget,
    is_talk_namespace,
    subject_namespace,
)

__all__ = [
    # Identifiers
    "ActorId",
    "CommentId",
    "LogId",
    "PageId",
    # Namespaces
    "is_talk_namespace",
    "subject_namespace",
    # Types
    "LOG_TYPE",
    "ActorRight",
    "LogAction",
    "PageAction",
    "PageContext",
    "PageTarget",
]
