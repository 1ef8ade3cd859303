"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comments import (
    CommentInfo,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)

__all__ = [
    "CommentInfo",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
]
