"""Language-model assistance use cases."""

from .classify_sentiment import (
    ClassifySentimentRequest,
    ClassifySentimentResponse,
    ClassifySentimentUseCase,
)
from .moderate_text import ModerateTextRequest, ModerateTextResponse, ModerateTextUseCase
from .summarize_feedback import (
    SummarizeFeedbackRequest,
    SummarizeFeedbackResponse,
    SummarizeFeedbackUseCase,
)

__all__ = [
    "ClassifySentimentRequest",
    "ClassifySentimentResponse",
    "ClassifySentimentUseCase",
    "ModerateTextRequest",
    "ModerateTextResponse",
    "ModerateTextUseCase",
    "SummarizeFeedbackRequest",
    "SummarizeFeedbackResponse",
    "SummarizeFeedbackUseCase",
]
