"""Test configuration and shared builders."""

from datetime import datetime, timedelta

from commentstreams.domain.model import Actor, Comment, WikiPage
from commentstreams.domain.value import ActorId, ActorRight, CommentId, PageId

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """Timestamp a number of minutes after a fixed base time."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_actor(
    actor_id: int = 1, name: str = "Alice", can_comment: bool = True, **kwargs
) -> Actor:
    """Build an actor, holding the comment right by default."""
    rights = {ActorRight.COMMENT.value} if can_comment else set()
    return Actor(id=ActorId(actor_id), name=name, rights=frozenset(rights), **kwargs)


def make_page(page_id: int = 100, namespace: int = 0, **kwargs) -> WikiPage:
    """Build a wiki page."""
    kwargs.setdefault("title", f"Page_{page_id}")
    return WikiPage(id=PageId(page_id), namespace=namespace, **kwargs)


def make_comment(
    comment_id: int,
    page_id: int | None = 100,
    parent_id: int | None = None,
    minute: int = 0,
    author_id: int = 1,
    **kwargs,
) -> Comment:
    """Build a comment created ``minute`` minutes after the base time."""
    kwargs.setdefault("wikitext", f"Comment {comment_id}")
    return Comment(
        id=CommentId(comment_id),
        associated_page_id=PageId(page_id) if page_id is not None else None,
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        author_id=ActorId(author_id),
        created_at=at(minute),
        **kwargs,
    )
