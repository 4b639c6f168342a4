"""Comment use cases."""

from .check_permissions import (
    CheckActionRequest,
    CheckActionResponse,
    CheckActionUseCase,
    CheckCommentPermissionsRequest,
    CheckCommentPermissionsResponse,
    CheckCommentPermissionsUseCase,
    CheckMoveRequest,
    CheckMoveResponse,
    CheckMoveUseCase,
)
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .get_comment_streams import (
    CommentNodeResponse,
    GetCommentStreamsRequest,
    GetCommentStreamsResponse,
    GetCommentStreamsUseCase,
)
from .post_reply import PostReplyRequest, PostReplyResponse, PostReplyUseCase

__all__ = [
    "CheckActionRequest",
    "CheckActionResponse",
    "CheckActionUseCase",
    "CheckCommentPermissionsRequest",
    "CheckCommentPermissionsResponse",
    "CheckCommentPermissionsUseCase",
    "CheckMoveRequest",
    "CheckMoveResponse",
    "CheckMoveUseCase",
    "CommentNodeResponse",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentStreamsRequest",
    "GetCommentStreamsResponse",
    "GetCommentStreamsUseCase",
    "GetCommentUseCase",
    "PostReplyRequest",
    "PostReplyResponse",
    "PostReplyUseCase",
]
