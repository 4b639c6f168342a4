"""Wiki page entity.

Pages belong to the host wiki. Comment streams only reads them to decide
where comments render and to resolve the page a discussion is attached to.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentstreams.domain.model.common import DomainModel
from commentstreams.domain.value import PageId, is_talk_namespace, subject_namespace


class WikiPage(DomainModel):
    """Wiki page entity."""

    id: PageId
    namespace: int
    title: str = Field(min_length=1, max_length=255)
    display_title: Optional[str] = None
    text: str = ""  # Current wikitext of the latest revision
    created_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_talk_page(self) -> bool:
        return is_talk_namespace(self.namespace)

    @property
    def subject_namespace(self) -> int:
        return subject_namespace(self.namespace)

    @property
    def label(self) -> str:
        """Title shown in links to this page."""
        return self.display_title or self.title
