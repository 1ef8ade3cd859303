"""Community routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from eduforum.application.usecase.community import (
    CreateCommunityRequest,
    CreateCommunityUseCase,
    DeleteCommunityRequest,
    DeleteCommunityUseCase,
    GetCommunityRequest,
    GetCommunityResponse,
    GetCommunityUseCase,
    ListCommunitiesResponse,
    ListCommunitiesUseCase,
)
from eduforum.config import SessionSettings
from eduforum.domain.error import DomainError
from eduforum.interface.api.cookies import read_session_token
from eduforum.interface.api.schemas import CreatedResponse, SuccessResponse
from eduforum.interface.error import (
    invalid_input,
    to_http_exception,
    unexpected_error,
)

router = APIRouter(prefix="/api/communities", tags=["communities"], route_class=DishkaRoute)


class CreateCommunityAPIRequest(BaseModel):
    """API request for creating a community."""

    name: str
    description: str


@router.post("", response_model=CreatedResponse)
async def create_community(
    body: CreateCommunityAPIRequest,
    request: Request,
    create_community_use_case: FromDishka[CreateCommunityUseCase],
    session_settings: FromDishka[SessionSettings],
) -> CreatedResponse:
    """Create a community.

    Requires an Admin session.

    Raises:
        HTTPException: 403 without an Admin session, 400 on blank fields
    """
    try:
        result = await create_community_use_case.execute(
            CreateCommunityRequest(
                name=body.name,
                description=body.description,
                token=read_session_token(request, session_settings),
            )
        )
        return CreatedResponse(success=result.success, id=result.id)
    except DomainError as e:
        raise to_http_exception(e, "Community creation")
    except ValueError as e:
        raise invalid_input("Community creation", e)
    except Exception as e:
        raise unexpected_error("community creation", e)


@router.get("", response_model=ListCommunitiesResponse)
async def list_communities(
    list_communities_use_case: FromDishka[ListCommunitiesUseCase],
) -> ListCommunitiesResponse:
    """List all communities, newest first."""
    try:
        return await list_communities_use_case.execute()
    except Exception as e:
        raise unexpected_error("community listing", e)


@router.get("/{community_id}", response_model=GetCommunityResponse)
async def get_community(
    community_id: str,
    get_community_use_case: FromDishka[GetCommunityUseCase],
) -> GetCommunityResponse:
    """Get a community by id.

    Raises:
        HTTPException: 400 for a malformed id, 404 if absent
    """
    try:
        return await get_community_use_case.execute(
            GetCommunityRequest(community_id=community_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "Community lookup")
    except Exception as e:
        raise unexpected_error("community lookup", e)


@router.delete("/{community_id}", response_model=SuccessResponse)
async def delete_community(
    community_id: str,
    request: Request,
    delete_community_use_case: FromDishka[DeleteCommunityUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Delete a community. Its posts stay retrievable by id.

    Requires an Admin session.
    """
    try:
        result = await delete_community_use_case.execute(
            DeleteCommunityRequest(
                community_id=community_id,
                token=read_session_token(request, session_settings),
            )
        )
        return SuccessResponse(success=result.success)
    except DomainError as e:
        raise to_http_exception(e, "Community deletion")
    except Exception as e:
        raise unexpected_error("community deletion", e)
