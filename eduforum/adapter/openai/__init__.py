"""OpenAI adapter."""

from .client import MockAssistantClient, OpenAIAssistantClient, OpenAIError

__all__ = ["MockAssistantClient", "OpenAIAssistantClient", "OpenAIError"]
