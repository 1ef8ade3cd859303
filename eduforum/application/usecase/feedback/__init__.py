"""Feedback use cases."""

from .create_feedback import (
    CreateFeedbackRequest,
    CreateFeedbackResponse,
    CreateFeedbackUseCase,
)
from .delete_feedback import (
    DeleteFeedbackRequest,
    DeleteFeedbackResponse,
    DeleteFeedbackUseCase,
)
from .get_feedback import (
    FeedbackInfo,
    GetFeedbackRequest,
    GetFeedbackResponse,
    GetFeedbackUseCase,
)
from .list_feedback import ListFeedbackRequest, ListFeedbackResponse, ListFeedbackUseCase
from .star_feedback import StarFeedbackRequest, StarFeedbackResponse, StarFeedbackUseCase
from .vote import VoteRequest, VoteResponse, VoteUseCase

__all__ = [
    "CreateFeedbackRequest",
    "CreateFeedbackResponse",
    "CreateFeedbackUseCase",
    "DeleteFeedbackRequest",
    "DeleteFeedbackResponse",
    "DeleteFeedbackUseCase",
    "FeedbackInfo",
    "GetFeedbackRequest",
    "GetFeedbackResponse",
    "GetFeedbackUseCase",
    "ListFeedbackRequest",
    "ListFeedbackResponse",
    "ListFeedbackUseCase",
    "StarFeedbackRequest",
    "StarFeedbackResponse",
    "StarFeedbackUseCase",
    "VoteRequest",
    "VoteResponse",
    "VoteUseCase",
]
