"""Unit tests for row mappers."""

from commentstreams.persistence.mappers import (
    actor_to_dict,
    log_entry_to_dict,
    row_to_actor,
    row_to_comment,
)
from commentstreams.domain.model import LogEntry
from commentstreams.domain.value import ActorId, PageId
from tests.conftest import at, make_actor


class TestCommentMapping:
    """Tests for comment rows."""

    def test_reply_row_maps_parent_and_page(self):
        """Column names map onto the comment fields."""
        row = {
            "page_id": 12,
            "assoc_page_id": 100,
            "parent_page_id": 11,
            "comment_title": None,
            "author_id": 5,
            "author_name": "Bob",
            "wikitext": "Agreed",
            "html": None,
            "created_at": at(0),
            "modified_at": None,
        }

        comment = row_to_comment(row)

        assert comment.id == 12
        assert comment.associated_page_id == 100
        assert comment.parent_id == 11
        assert comment.is_discussion is False
        assert comment.body == "Agreed"

    def test_detached_row_has_no_page(self):
        """Rows whose page was deleted keep loading with no page."""
        row = {
            "page_id": 12,
            "assoc_page_id": None,
            "parent_page_id": None,
            "comment_title": "Topic",
            "author_id": 5,
            "wikitext": "Hello",
            "created_at": at(0),
        }

        comment = row_to_comment(row)

        assert comment.associated_page_id is None
        assert comment.author_name == ""
        assert comment.is_discussion is True


class TestActorMapping:
    """Tests for actor rows."""

    def test_rights_survive_a_round_trip(self):
        """Rights are stored sorted and read back as a set."""
        actor = make_actor(3, name="Carol")

        row = actor_to_dict(actor)

        assert row["rights"] == ["cs-comment"]
        assert row_to_actor(row) == actor


class TestLogEntryMapping:
    """Tests for log rows."""

    def test_id_is_left_to_database(self):
        """Inserts never carry an ID."""
        entry = LogEntry(
            action="reply-create",
            performer_id=ActorId(3),
            target_page_id=PageId(100),
        )

        row = log_entry_to_dict(entry)

        assert "id" not in row
        assert row["actor_id"] == 3
        assert row["page_id"] == 100
