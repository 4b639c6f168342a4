"""Unit tests for CommentTreeService."""

from commentstreams.domain.service import CommentTreeService
from tests.conftest import make_comment


def ids(nodes):
    return [node.comment.id for node in nodes]


class TestAssembleStructure:
    """Tests for grouping replies under discussions."""

    def test_empty_input_yields_no_discussions(self):
        """No comments, no discussions."""
        assert CommentTreeService().assemble([], newest_first=True) == []

    def test_replies_attach_to_their_discussion(self):
        """Each reply appears exactly once, under its parent discussion."""
        # Arrange
        comments = [
            make_comment(2, parent_id=1, minute=5),
            make_comment(1, minute=0),
            make_comment(3, minute=1),
            make_comment(4, parent_id=3, minute=6),
            make_comment(5, parent_id=1, minute=7),
        ]

        # Act
        discussions = CommentTreeService().assemble(comments, newest_first=False)

        # Assert
        assert ids(discussions) == [1, 3]
        assert ids(discussions[0].children) == [2, 5]
        assert ids(discussions[1].children) == [4]
        assert all(child.children == [] for d in discussions for child in d.children)

    def test_orphaned_reply_is_dropped(self):
        """A reply whose parent is not in the input does not appear."""
        comments = [make_comment(1), make_comment(2, parent_id=99, minute=1)]

        discussions = CommentTreeService().assemble(comments, newest_first=False)

        assert ids(discussions) == [1]
        assert discussions[0].children == []

    def test_reply_to_reply_is_flattened_under_root(self):
        """Reply chains render flat beneath the discussion they descend from."""
        comments = [
            make_comment(1, minute=0),
            make_comment(2, parent_id=1, minute=1),
            make_comment(3, parent_id=2, minute=2),
        ]

        discussions = CommentTreeService().assemble(comments, newest_first=False)

        assert ids(discussions) == [1]
        assert ids(discussions[0].children) == [2, 3]

    def test_parent_cycle_is_dropped(self):
        """Replies whose parent chain loops never reach a root."""
        comments = [
            make_comment(1),
            make_comment(2, parent_id=3, minute=1),
            make_comment(3, parent_id=2, minute=2),
        ]

        discussions = CommentTreeService().assemble(comments, newest_first=True)

        assert ids(discussions) == [1]
        assert discussions[0].children == []

    def test_duplicate_ids_appear_once(self):
        """Repeated comment IDs are collapsed, first occurrence wins."""
        first = make_comment(1, wikitext="first")
        comments = [
            first,
            make_comment(1, wikitext="second"),
            make_comment(2, parent_id=1, minute=1),
            make_comment(2, parent_id=1, minute=1),
        ]

        discussions = CommentTreeService().assemble(comments, newest_first=True)

        assert len(discussions) == 1
        assert discussions[0].comment.wikitext == "first"
        assert ids(discussions[0].children) == [2]


class TestAssembleOrdering:
    """Tests for discussion and reply ordering."""

    def test_newest_first_orders_discussions_descending(self):
        """Newest discussions lead when newest_first is set."""
        comments = [make_comment(1, minute=0), make_comment(2, minute=10)]

        discussions = CommentTreeService().assemble(comments, newest_first=True)

        assert ids(discussions) == [2, 1]

    def test_oldest_first_orders_discussions_ascending(self):
        """Oldest discussions lead when newest_first is not set."""
        comments = [make_comment(2, minute=10), make_comment(1, minute=0)]

        discussions = CommentTreeService().assemble(comments, newest_first=False)

        assert ids(discussions) == [1, 2]

    def test_replies_are_always_oldest_first(self):
        """Reply order ignores newest_first."""
        comments = [
            make_comment(1, minute=0),
            make_comment(3, parent_id=1, minute=9),
            make_comment(2, parent_id=1, minute=3),
        ]

        for newest_first in (True, False):
            discussions = CommentTreeService().assemble(comments, newest_first)
            assert ids(discussions[0].children) == [2, 3]

    def test_equal_timestamps_keep_input_order(self):
        """Sorting is stable in both directions."""
        comments = [make_comment(5, minute=1), make_comment(4, minute=1)]

        service = CommentTreeService()

        assert ids(service.assemble(comments, newest_first=False)) == [5, 4]
        assert ids(service.assemble(comments, newest_first=True)) == [5, 4]

    def test_assemble_is_idempotent(self):
        """Assembling the same input twice gives the same tree."""
        comments = [
            make_comment(1, minute=0),
            make_comment(2, parent_id=1, minute=1),
            make_comment(3, minute=2),
        ]
        service = CommentTreeService()

        assert service.assemble(comments, True) == service.assemble(comments, True)
