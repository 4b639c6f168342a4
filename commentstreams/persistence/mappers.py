"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from commentstreams.domain.model import Actor, Comment, LogEntry, WikiPage
from commentstreams.domain.value import ActorId, CommentId, LogId, PageId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["page_id"]),
        associated_page_id=(
            PageId(row["assoc_page_id"]) if row.get("assoc_page_id") is not None else None
        ),
        parent_id=(
            CommentId(row["parent_page_id"])
            if row.get("parent_page_id") is not None
            else None
        ),
        author_id=ActorId(row["author_id"]),
        author_name=row.get("author_name") or "",
        title=row.get("comment_title"),
        wikitext=row["wikitext"],
        html=row.get("html"),
        created_at=row["created_at"],
        modified_at=row.get("modified_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "page_id": comment.id,
        "assoc_page_id": comment.associated_page_id,
        "parent_page_id": comment.parent_id,
        "comment_title": comment.title,
        "author_id": comment.author_id,
        "author_name": comment.author_name,
        "wikitext": comment.wikitext,
        "html": comment.html,
        "created_at": comment.created_at,
        "modified_at": comment.modified_at,
    }


def row_to_page(row: Dict[str, Any]) -> WikiPage:
    """Convert database row to WikiPage domain model."""
    return WikiPage(
        id=PageId(row["id"]),
        namespace=row["namespace"],
        title=row["title"],
        display_title=row.get("display_title"),
        text=row.get("text") or "",
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def page_to_dict(page: WikiPage) -> Dict[str, Any]:
    """Convert WikiPage domain model to database dict."""
    return page.model_dump()


def row_to_actor(row: Dict[str, Any]) -> Actor:
    """Convert database row to Actor domain model."""
    return Actor(
        id=ActorId(row["id"]),
        name=row["name"],
        real_name=row.get("real_name"),
        rights=frozenset(row.get("rights") or []),
    )


def actor_to_dict(actor: Actor) -> Dict[str, Any]:
    """Convert Actor domain model to database dict."""
    return {
        "id": actor.id,
        "name": actor.name,
        "real_name": actor.real_name,
        "rights": sorted(actor.rights),
    }


def row_to_log_entry(row: Dict[str, Any]) -> LogEntry:
    """Convert database row to LogEntry domain model."""
    return LogEntry(
        id=LogId(row["id"]),
        log_type=row["log_type"],
        action=row["action"],
        performer_id=ActorId(row["actor_id"]),
        target_page_id=PageId(row["page_id"]),
        created_at=row["created_at"],
        published=row["published"],
    )


def log_entry_to_dict(entry: LogEntry) -> Dict[str, Any]:
    """Convert LogEntry domain model to database dict (ID left to the database)."""
    return {
        "log_type": entry.log_type,
        "action": entry.action,
        "actor_id": entry.performer_id,
        "page_id": entry.target_page_id,
        "created_at": entry.created_at,
        "published": entry.published,
    }
