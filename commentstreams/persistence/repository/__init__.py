"""PostgreSQL repository implementations."""

from commentstreams.persistence.repository.actor import PostgresActorRepository
from commentstreams.persistence.repository.audit_log import PostgresAuditLogRepository
from commentstreams.persistence.repository.comment import PostgresCommentRepository
from commentstreams.persistence.repository.page import PostgresPageRepository

__all__ = [
    "PostgresActorRepository",
    "PostgresAuditLogRepository",
    "PostgresCommentRepository",
    "PostgresPageRepository",
]
