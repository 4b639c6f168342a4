"""In-memory repository implementations for testing."""

from .actor import InMemoryActorRepository
from .audit_log import InMemoryAuditLogRepository
from .comment import InMemoryCommentRepository
from .page import InMemoryPageRepository

__all__ = [
    "InMemoryActorRepository",
    "InMemoryAuditLogRepository",
    "InMemoryCommentRepository",
    "InMemoryPageRepository",
]
