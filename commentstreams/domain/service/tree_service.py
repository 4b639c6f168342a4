"""Comment tree assembly.

Turns the flat list of comments attached to a page into the discussion tree
sent to the client renderer.
"""

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field

from commentstreams.domain.model import Comment
from commentstreams.domain.value import CommentId

from .base import Service


@dataclass
class DiscussionNode:
    """Node in the discussion tree.

    Discussion roots carry their replies as children. Replies are leaves:
    reply chains are flattened under the root they descend from.
    """

    comment: Comment
    children: list["DiscussionNode"] = field(default_factory=list)


class CommentTreeService(Service):
    """Builds discussion trees. Pure: no I/O and no state between calls."""

    def assemble(
        self, comments: Sequence[Comment], newest_first: bool
    ) -> list[DiscussionNode]:
        """Assemble discussions from a flat list of comments.

        Algorithm:
        1. Drop repeated comment IDs (first occurrence wins)
        2. Resolve each reply to the discussion root its parent chain reaches;
           replies whose chain leaves the input set are dropped
        3. Sort roots by creation time (newest first if requested)
        4. Sort each root's replies by creation time, always oldest first

        Sorting is stable, so comments created at the same instant keep their
        input order.

        Args:
            comments: All comments attached to one page, in any order
            newest_first: Whether discussions are ordered newest first

        Returns:
            Discussion roots, each with its flat list of replies
        """
        unique: dict[CommentId, Comment] = {}
        for comment in comments:
            unique.setdefault(comment.id, comment)

        roots = [c for c in unique.values() if c.parent_id is None]

        replies_by_root: dict[CommentId, list[Comment]] = defaultdict(list)
        for comment in unique.values():
            if comment.parent_id is None:
                continue
            root_id = self._resolve_root_id(comment, unique)
            if root_id is not None:
                replies_by_root[root_id].append(comment)

        roots = sorted(roots, key=lambda c: c.created_at, reverse=newest_first)

        return [
            DiscussionNode(
                comment=root,
                children=[
                    DiscussionNode(comment=reply)
                    for reply in sorted(
                        replies_by_root.get(root.id, []), key=lambda c: c.created_at
                    )
                ],
            )
            for root in roots
        ]

    @staticmethod
    def _resolve_root_id(
        reply: Comment, comments: dict[CommentId, Comment]
    ) -> CommentId | None:
        """Follow parent links from a reply up to its discussion root."""
        visited: set[CommentId] = {reply.id}
        current = reply
        while current.parent_id is not None:
            if current.parent_id in visited:
                return None  # cycle
            parent = comments.get(current.parent_id)
            if parent is None:
                return None
            visited.add(parent.id)
            current = parent
        return current.id
