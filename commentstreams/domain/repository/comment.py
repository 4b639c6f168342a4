"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from commentstreams.domain.model import Actor, Comment
from commentstreams.domain.value import CommentId, PageId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's page ID

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_associated_page(self, page_id: PageId) -> List[Comment]:
        """Find all comments attached to a wiki page.

        No particular order is guaranteed; ordering is applied when the
        discussion tree is assembled.

        Args:
            page_id: The associated page ID

        Returns:
            List of discussion roots and replies for the page
        """
        pass

    @abstractmethod
    async def insert_reply(
        self, actor: Actor, wikitext: str, parent: Comment
    ) -> Optional[Comment]:
        """Persist a reply to a comment.

        The reply is authored by ``actor``, answers ``parent`` and is attached
        to the parent's associated page. Its id is allocated by the store.

        Args:
            actor: Actor posting the reply
            wikitext: Reply body
            parent: Comment being replied to

        Returns:
            The persisted reply, or None if it could not be stored
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment with a known ID (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
