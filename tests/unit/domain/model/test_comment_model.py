"""Unit tests for the Comment entity."""

import pytest
from pydantic import ValidationError

from tests.conftest import make_comment


class TestComment:
    """Tests for comment invariants."""

    def test_reply_cannot_have_title(self):
        """Only discussion roots carry titles."""
        with pytest.raises(ValidationError):
            make_comment(2, parent_id=1, title="Not allowed")

    def test_body_prefers_rendered_html(self):
        """The rendered body wins over wikitext when present."""
        assert make_comment(1, html="<p>x</p>").body == "<p>x</p>"
        assert make_comment(1).body == "Comment 1"
