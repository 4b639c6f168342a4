"""Comment entity.

Every comment is stored as a wiki page of its own in the comment namespace.
A comment without a parent starts a discussion; every other comment is a
reply rendered flat beneath the discussion it belongs to.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from commentstreams.domain.model.common import DomainModel
from commentstreams.domain.value import ActorId, CommentId, PageId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - associated_page_id: Wiki page the whole discussion is attached to
      (None only before the comment has been persisted)
    - parent_id: Discussion root or reply this comment answers (None for a
      discussion root)
    """

    id: CommentId
    associated_page_id: Optional[PageId] = None
    parent_id: Optional[CommentId] = None
    author_id: ActorId
    author_name: str = ""
    title: Optional[str] = Field(default=None, max_length=255)
    wikitext: str
    html: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    modified_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_reply_has_no_title(self) -> "Comment":
        """Only discussion roots carry a title."""
        if self.parent_id is not None and self.title:
            raise ValueError("Replies cannot have a title")
        return self

    @property
    def is_discussion(self) -> bool:
        """Whether this comment starts a discussion."""
        return self.parent_id is None

    @property
    def body(self) -> str:
        """Rendered body, falling back to raw wikitext."""
        return self.html if self.html is not None else self.wikitext
