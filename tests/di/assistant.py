"""Mock assistant providers for testing."""

from dishka import Scope, provide

from eduforum.adapter.openai import MockAssistantClient
from eduforum.domain.service import AssistantClient
from eduforum.util.di.infrastructure.assistant import AssistantProvider


class MockAssistantProvider(AssistantProvider):
    """Mock assistant provider using the deterministic mock client."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_assistant_client(self) -> AssistantClient:
        """Provide mock assistant client."""
        return MockAssistantClient()
