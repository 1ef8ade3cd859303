"""Domain services."""

from .account_service import AccountService
from .assistant_service import AssistantClient, AssistantService
from .base import Service
from .comment_service import CommentService
from .community_service import CommunityService
from .feedback_service import FeedbackService
from .session_service import SessionService
from .vote_service import VoteService

__all__ = [
    "AccountService",
    "AssistantClient",
    "AssistantService",
    "CommentService",
    "CommunityService",
    "FeedbackService",
    "Service",
    "SessionService",
    "VoteService",
]
