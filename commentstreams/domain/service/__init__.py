"""Domain services."""

from .actor_service import ActorService
from .audit_log_service import AuditLogService
from .authorization_service import AuthorizationService
from .base import Service
from .csrf_service import CsrfTokenService
from .comment_service import CommentService
from .notification_service import NotificationDispatcher, Notifier
from .page_service import PageService
from .tree_service import CommentTreeService, DiscussionNode
from .visibility_service import VisibilityService

__all__ = [
    "ActorService",
    "AuditLogService",
    "AuthorizationService",
    "CommentService",
    "CommentTreeService",
    "CsrfTokenService",
    "DiscussionNode",
    "NotificationDispatcher",
    "Notifier",
    "PageService",
    "Service",
    "VisibilityService",
]
