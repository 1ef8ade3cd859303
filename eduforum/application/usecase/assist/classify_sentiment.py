"""Classify sentiment use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import BaseUseCase
from eduforum.domain.error import ValidationError
from eduforum.domain.service import AssistantService
from eduforum.domain.value import Sentiment


class ClassifySentimentRequest(BaseModel):
    """Classify sentiment request."""

    text: str


class ClassifySentimentResponse(BaseModel):
    """Classify sentiment response."""

    sentiment: Sentiment


class ClassifySentimentUseCase(BaseUseCase):
    """Use case for labelling a piece of feedback.

    Never fails on provider errors; the label defaults to Constructive.
    """

    def __init__(self, assistant_service: AssistantService) -> None:
        self.assistant_service = assistant_service

    async def execute(
        self, request: ClassifySentimentRequest
    ) -> ClassifySentimentResponse:
        if not request.text.strip():
            raise ValidationError("Text required")
        sentiment = await self.assistant_service.classify_sentiment(request.text)
        return ClassifySentimentResponse(sentiment=sentiment)
