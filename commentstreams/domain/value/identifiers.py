"""Strongly typed identifiers for comment streams entities.

Comments are wiki pages, so a comment id is the page id of the comment page.
All identifiers are the integer ids handed out by the host wiki.
"""

from typing import NewType

PageId = NewType("PageId", int)
CommentId = NewType("CommentId", int)
ActorId = NewType("ActorId", int)
LogId = NewType("LogId", int)
