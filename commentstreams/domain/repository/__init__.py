"""Repository interfaces for comment streams.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from commentstreams.domain.repository.actor import ActorRepository
from commentstreams.domain.repository.audit_log import AuditLogRepository
from commentstreams.domain.repository.comment import CommentRepository
from commentstreams.domain.repository.page import PageRepository
from commentstreams.domain.repository.transaction import AfterCommit

__all__ = [
    "ActorRepository",
    "AfterCommit",
    "AuditLogRepository",
    "CommentRepository",
    "PageRepository",
]
