"""Community use cases."""

from .create_community import (
    CreateCommunityRequest,
    CreateCommunityResponse,
    CreateCommunityUseCase,
)
from .delete_community import (
    DeleteCommunityRequest,
    DeleteCommunityResponse,
    DeleteCommunityUseCase,
)
from .get_community import (
    CommunityInfo,
    GetCommunityRequest,
    GetCommunityResponse,
    GetCommunityUseCase,
)
from .list_communities import ListCommunitiesResponse, ListCommunitiesUseCase

__all__ = [
    "CommunityInfo",
    "CreateCommunityRequest",
    "CreateCommunityResponse",
    "CreateCommunityUseCase",
    "DeleteCommunityRequest",
    "DeleteCommunityResponse",
    "DeleteCommunityUseCase",
    "GetCommunityRequest",
    "GetCommunityResponse",
    "GetCommunityUseCase",
    "ListCommunitiesResponse",
    "ListCommunitiesUseCase",
]
