"""Language-model assistance routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from eduforum.application.usecase.assist import (
    ClassifySentimentRequest,
    ClassifySentimentResponse,
    ClassifySentimentUseCase,
    ModerateTextRequest,
    ModerateTextResponse,
    ModerateTextUseCase,
    SummarizeFeedbackRequest,
    SummarizeFeedbackResponse,
    SummarizeFeedbackUseCase,
)
from eduforum.domain.error import DomainError
from eduforum.interface.error import to_http_exception, unexpected_error

router = APIRouter(prefix="/api", tags=["assist"], route_class=DishkaRoute)


@router.get("/feedbacks/{feedback_id}/summary", response_model=SummarizeFeedbackResponse)
async def summarize_feedback(
    feedback_id: str,
    summarize_feedback_use_case: FromDishka[SummarizeFeedbackUseCase],
) -> SummarizeFeedbackResponse:
    """Summarize a post and its comments in one sentence."""
    try:
        return await summarize_feedback_use_case.execute(
            SummarizeFeedbackRequest(feedback_id=feedback_id)
        )
    except DomainError as e:
        raise to_http_exception(
            e, "Summary", server_error="Server error when generating summary"
        )
    except Exception as e:
        raise unexpected_error("summary", e)


@router.post("/sentiment", response_model=ClassifySentimentResponse)
async def classify_sentiment(
    body: ClassifySentimentRequest,
    classify_sentiment_use_case: FromDishka[ClassifySentimentUseCase],
) -> ClassifySentimentResponse:
    """Label text Positive, Negative or Constructive.

    Provider failures yield Constructive instead of an error.
    """
    try:
        return await classify_sentiment_use_case.execute(body)
    except DomainError as e:
        raise to_http_exception(e, "Sentiment classification")
    except Exception as e:
        raise unexpected_error("sentiment classification", e)


@router.post("/moderation", response_model=ModerateTextResponse)
async def moderate_text(
    body: ModerateTextRequest,
    moderate_text_use_case: FromDishka[ModerateTextUseCase],
) -> ModerateTextResponse:
    """Check text against the moderation policy."""
    try:
        return await moderate_text_use_case.execute(body)
    except DomainError as e:
        raise to_http_exception(
            e, "Moderation", server_error="Content moderation failed"
        )
    except Exception as e:
        raise unexpected_error("moderation", e)
