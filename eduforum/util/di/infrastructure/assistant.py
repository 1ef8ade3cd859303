"""Language-model assistant infrastructure providers."""

from dishka import Scope, provide

from eduforum.adapter.openai import OpenAIAssistantClient
from eduforum.config import Settings
from eduforum.domain.service import AssistantClient
from eduforum.util.di.base import ProviderBase
from eduforum.util.error import ConfigurationError


class AssistantProvider(ProviderBase):
    """Assistant component base."""

    __mock_component__ = "assistant"


class ProdAssistantProvider(AssistantProvider):
    """Production assistant provider backed by the OpenAI API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_assistant_client(self, settings: Settings) -> AssistantClient:
        """Provide OpenAI assistant client.

        Raises:
            ConfigurationError: If no API key is configured outside development
        """
        assistant = settings.assistant
        if settings.environment in ("staging", "production") and (
            assistant.api_key == "CHANGE_ME_IN_PRODUCTION"
        ):
            raise ConfigurationError("ASSISTANT__API_KEY must be configured")

        return OpenAIAssistantClient(
            api_key=assistant.api_key,
            base_url=assistant.base_url,
            chat_model=assistant.chat_model,
            moderation_model=assistant.moderation_model,
            timeout=assistant.timeout_seconds,
        )
