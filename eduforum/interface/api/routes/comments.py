"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from eduforum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from eduforum.config import SessionSettings
from eduforum.domain.error import DomainError
from eduforum.interface.api.cookies import read_session_token
from eduforum.interface.api.schemas import SuccessResponse
from eduforum.interface.error import (
    invalid_input,
    to_http_exception,
    unexpected_error,
)

router = APIRouter(prefix="/api/feedbacks", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on a post."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    comment_text: str


@router.get("/{feedback_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    feedback_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """List a post's comments, oldest first."""
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(feedback_id=feedback_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "Comment listing")
    except Exception as e:
        raise unexpected_error("comment listing", e)


@router.post("/{feedback_id}/comments", response_model=SuccessResponse)
async def create_comment(
    feedback_id: str,
    body: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Comment on a post.

    Requires any session. The text is moderated first.

    Raises:
        HTTPException: 403 without a session, 400 on malformed id, blank or
            flagged text, 404 if the post is gone, 500 if moderation fails
    """
    try:
        result = await create_comment_use_case.execute(
            CreateCommentRequest(
                feedback_id=feedback_id,
                comment_text=body.comment_text,
                token=read_session_token(request, session_settings),
            )
        )
        return SuccessResponse(success=result.success)
    except DomainError as e:
        raise to_http_exception(
            e, "Comment creation", server_error="Content moderation failed"
        )
    except ValueError as e:
        raise invalid_input("Comment creation", e)
    except Exception as e:
        raise unexpected_error("comment creation", e)
