"""Moderate text use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import BaseUseCase
from eduforum.domain.error import ValidationError
from eduforum.domain.service import AssistantService


class ModerateTextRequest(BaseModel):
    """Moderate text request."""

    input: str


class ModerateTextResponse(BaseModel):
    """Moderate text response."""

    flagged: bool


class ModerateTextUseCase(BaseUseCase):
    """Use case for checking arbitrary text against moderation."""

    def __init__(self, assistant_service: AssistantService) -> None:
        self.assistant_service = assistant_service

    async def execute(self, request: ModerateTextRequest) -> ModerateTextResponse:
        """Execute moderation.

        Raises:
            ValidationError: If the text is blank
            AssistantError: If the provider call fails
        """
        if not request.input.strip():
            raise ValidationError("Input required")
        flagged = await self.assistant_service.moderate(request.input)
        return ModerateTextResponse(flagged=flagged)
