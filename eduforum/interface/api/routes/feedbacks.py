"""Feedback post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from eduforum.application.usecase.feedback import (
    CreateFeedbackRequest,
    CreateFeedbackUseCase,
    DeleteFeedbackRequest,
    DeleteFeedbackUseCase,
    GetFeedbackRequest,
    GetFeedbackResponse,
    GetFeedbackUseCase,
    ListFeedbackRequest,
    ListFeedbackResponse,
    ListFeedbackUseCase,
    StarFeedbackRequest,
    StarFeedbackUseCase,
    VoteRequest,
    VoteUseCase,
)
from eduforum.config import SessionSettings
from eduforum.domain.error import DomainError
from eduforum.domain.value import VoteType
from eduforum.interface.api.cookies import read_session_token
from eduforum.interface.api.schemas import CreatedResponse, SuccessResponse
from eduforum.interface.error import (
    invalid_input,
    to_http_exception,
    unexpected_error,
)

router = APIRouter(prefix="/api", tags=["feedbacks"], route_class=DishkaRoute)


class CreateFeedbackAPIRequest(BaseModel):
    """API request for posting feedback.

    studentName is accepted for compatibility with existing clients; the
    author name is always taken from the session.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    student_name: str | None = None
    standing: str
    major: str
    title: str
    description: str


@router.post("/communities/{community_id}/feedbacks", response_model=CreatedResponse)
async def create_feedback(
    community_id: str,
    body: CreateFeedbackAPIRequest,
    request: Request,
    create_feedback_use_case: FromDishka[CreateFeedbackUseCase],
    session_settings: FromDishka[SessionSettings],
) -> CreatedResponse:
    """Post feedback in a community.

    Requires a Student session. The description is moderated first and the
    post is not created if moderation flags it or fails.

    Raises:
        HTTPException: 403 without a Student session, 400 on malformed id,
            blank field or flagged text, 500 if moderation fails
    """
    try:
        result = await create_feedback_use_case.execute(
            CreateFeedbackRequest(
                community_id=community_id,
                standing=body.standing,
                major=body.major,
                title=body.title,
                description=body.description,
                token=read_session_token(request, session_settings),
            )
        )
        return CreatedResponse(success=result.success, id=result.id)
    except DomainError as e:
        raise to_http_exception(
            e, "Feedback creation", server_error="Content moderation failed"
        )
    except ValueError as e:
        raise invalid_input("Feedback creation", e)
    except Exception as e:
        raise unexpected_error("feedback creation", e)


@router.get("/communities/{community_id}/feedbacks", response_model=ListFeedbackResponse)
async def list_feedback(
    community_id: str,
    list_feedback_use_case: FromDishka[ListFeedbackUseCase],
) -> ListFeedbackResponse:
    """List a community's posts, newest first."""
    try:
        return await list_feedback_use_case.execute(
            ListFeedbackRequest(community_id=community_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "Feedback listing")
    except Exception as e:
        raise unexpected_error("feedback listing", e)


@router.get("/feedbacks/{feedback_id}", response_model=GetFeedbackResponse)
async def get_feedback(
    feedback_id: str,
    get_feedback_use_case: FromDishka[GetFeedbackUseCase],
) -> GetFeedbackResponse:
    """Get a post by id."""
    try:
        return await get_feedback_use_case.execute(
            GetFeedbackRequest(feedback_id=feedback_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "Feedback lookup")
    except Exception as e:
        raise unexpected_error("feedback lookup", e)


@router.delete("/feedbacks/{feedback_id}", response_model=SuccessResponse)
async def delete_feedback(
    feedback_id: str,
    request: Request,
    delete_feedback_use_case: FromDishka[DeleteFeedbackUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Delete a post. Its comments are kept.

    Requires an Admin session.
    """
    try:
        result = await delete_feedback_use_case.execute(
            DeleteFeedbackRequest(
                feedback_id=feedback_id,
                token=read_session_token(request, session_settings),
            )
        )
        return SuccessResponse(success=result.success)
    except DomainError as e:
        raise to_http_exception(e, "Feedback deletion")
    except Exception as e:
        raise unexpected_error("feedback deletion", e)


async def _vote(
    feedback_id: str,
    vote_type: VoteType,
    request: Request,
    vote_use_case: VoteUseCase,
    session_settings: SessionSettings,
) -> SuccessResponse:
    try:
        result = await vote_use_case.execute(
            VoteRequest(
                feedback_id=feedback_id,
                vote_type=vote_type,
                token=read_session_token(request, session_settings),
            )
        )
        return SuccessResponse(success=result.success)
    except DomainError as e:
        raise to_http_exception(e, f"Feedback {vote_type.value}")
    except Exception as e:
        raise unexpected_error(f"feedback {vote_type.value}", e)


@router.post("/feedbacks/{feedback_id}/upvote", response_model=SuccessResponse)
async def upvote_feedback(
    feedback_id: str,
    request: Request,
    vote_use_case: FromDishka[VoteUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Upvote a post. Requires a Student session; one vote per name per post."""
    return await _vote(feedback_id, VoteType.UP, request, vote_use_case, session_settings)


@router.post("/feedbacks/{feedback_id}/downvote", response_model=SuccessResponse)
async def downvote_feedback(
    feedback_id: str,
    request: Request,
    vote_use_case: FromDishka[VoteUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Downvote a post. Requires a Student session; one vote per name per post."""
    return await _vote(
        feedback_id, VoteType.DOWN, request, vote_use_case, session_settings
    )


async def _set_starred(
    feedback_id: str,
    starred: bool,
    request: Request,
    star_feedback_use_case: StarFeedbackUseCase,
    session_settings: SessionSettings,
) -> SuccessResponse:
    operation = "Feedback star" if starred else "Feedback unstar"
    try:
        result = await star_feedback_use_case.execute(
            StarFeedbackRequest(
                feedback_id=feedback_id,
                starred=starred,
                token=read_session_token(request, session_settings),
            )
        )
        return SuccessResponse(success=result.success)
    except DomainError as e:
        raise to_http_exception(e, operation)
    except Exception as e:
        raise unexpected_error(operation.lower(), e)


@router.post("/feedbacks/{feedback_id}/star", response_model=SuccessResponse)
async def star_feedback(
    feedback_id: str,
    request: Request,
    star_feedback_use_case: FromDishka[StarFeedbackUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Star a post. Requires an Admin session; idempotent."""
    return await _set_starred(
        feedback_id, True, request, star_feedback_use_case, session_settings
    )


@router.post("/feedbacks/{feedback_id}/unstar", response_model=SuccessResponse)
async def unstar_feedback(
    feedback_id: str,
    request: Request,
    star_feedback_use_case: FromDishka[StarFeedbackUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Unstar a post. Requires an Admin session; idempotent."""
    return await _set_starred(
        feedback_id, False, request, star_feedback_use_case, session_settings
    )
