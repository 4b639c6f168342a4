"""Domain model entities for comment streams."""

from commentstreams.domain.model.actor import Actor
from commentstreams.domain.model.comment import Comment
from commentstreams.domain.model.log_entry import LogEntry
from commentstreams.domain.model.page import WikiPage

__all__ = [
    "Actor",
    "Comment",
    "LogEntry",
    "WikiPage",
]
