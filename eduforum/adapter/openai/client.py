"""OpenAI REST client implementation.

Implements the assistant capabilities on top of the OpenAI moderation and
chat-completion endpoints.
"""

import re

import httpx
import logfire

from eduforum.domain.error import AssistantError
from eduforum.domain.service.assistant_service import AssistantClient

SUMMARY_SYSTEM_PROMPT = (
    "You are a helpful assistant that summarizes forum threads in a sentence max."
)
SENTIMENT_SYSTEM_PROMPT = (
    "You are a helpful assistant that classifies user feedback into exactly one of "
    "three categories: Positive, Constructive, or Negative."
)


class OpenAIError(AssistantError):
    """OpenAI request error."""

    pass


class OpenAIAssistantClient(AssistantClient):
    """Assistant client backed by the OpenAI HTTP API."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        chat_model: str,
        moderation_model: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key
            base_url: API root, e.g. https://api.openai.com/v1
            chat_model: Model used for summaries and sentiment
            moderation_model: Model used for moderation
            timeout: Per-request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.chat_model = chat_model
        self.moderation_model = moderation_model
        self.timeout = timeout

    async def moderate(self, text: str) -> bool:
        """Check text with the moderation endpoint.

        Raises:
            OpenAIError: If the request fails
        """
        result = await self._post(
            "/moderations", {"model": self.moderation_model, "input": text}
        )
        try:
            return bool(result["results"][0]["flagged"])
        except (KeyError, IndexError, TypeError) as e:
            raise OpenAIError(f"Unexpected moderation response: {e}")

    async def summarize(self, thread_text: str) -> str:
        """Ask for a one-sentence thread summary.

        Raises:
            OpenAIError: If the request fails
        """
        return await self._complete(
            system=SUMMARY_SYSTEM_PROMPT,
            user=(
                "Please provide a one sentence summary of the following forum "
                f"thread:\n\n{thread_text}"
            ),
            temperature=0.7,
            max_tokens=150,
        )

    async def classify_sentiment(self, text: str) -> str:
        """Ask for a single-word sentiment label.

        Raises:
            OpenAIError: If the request fails
        """
        return await self._complete(
            system=SENTIMENT_SYSTEM_PROMPT,
            user=(
                "Classify the sentiment of this single piece of feedback. Respond "
                "with only one word: Positive, Constructive, or Negative."
                f'\n\n"{text}"'
            ),
            temperature=0,
            max_tokens=1,
        )

    async def _complete(
        self, system: str, user: str, temperature: float, max_tokens: int
    ) -> str:
        """Run a chat completion and return the first choice's text."""
        result = await self._post(
            "/chat/completions",
            {
                "model": self.chat_model,
                "messages": [
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                "temperature": temperature,
                "max_tokens": max_tokens,
            },
        )
        try:
            return result["choices"][0]["message"].get("content") or ""
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise OpenAIError(f"Unexpected completion response: {e}")

    async def _post(self, path: str, payload: dict) -> dict:
        """POST a JSON payload and decode the JSON reply.

        Raises:
            OpenAIError: On transport errors or non-200 responses
        """
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "OpenAI request failed",
                        path=path,
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise OpenAIError(
                        f"OpenAI request to {path} failed: {response.status_code}"
                    )

                return response.json()

        except httpx.HTTPError as e:
            logfire.error("OpenAI HTTP error", path=path, error=str(e))
            raise OpenAIError(f"HTTP error calling {path}: {e}")
        except ValueError as e:
            logfire.error("OpenAI returned invalid JSON", path=path, error=str(e))
            raise OpenAIError(f"Invalid JSON from {path}: {e}")


class MockAssistantClient(AssistantClient):
    """Mock assistant client for testing.

    Returns deterministic results without making real API calls:
    - moderation flags any text containing a blocked word
    - summaries echo the post title
    - sentiment is picked by keyword
    """

    BLOCKED_WORDS = frozenset({"idiot", "stupid", "hate"})

    def __init__(self) -> None:
        """Initialize mock client without provider configuration."""
        self.fail = False

    def _check_available(self) -> None:
        if self.fail:
            raise AssistantError("Mock assistant unavailable")

    async def moderate(self, text: str) -> bool:
        """Flag text containing a blocked word."""
        self._check_available()
        words = set(re.findall(r"[a-z]+", text.lower()))
        return bool(words & self.BLOCKED_WORDS)

    async def summarize(self, thread_text: str) -> str:
        """Return a sentence built from the thread's title line."""
        self._check_available()
        first_line = thread_text.splitlines()[0] if thread_text else ""
        title = first_line.removeprefix("Post Title: ").strip()
        return f"  Students discuss {title}.  "

    async def classify_sentiment(self, text: str) -> str:
        """Return a label chosen by keyword, in provider-style casing."""
        self._check_available()
        lowered = text.lower()
        if "great" in lowered or "love" in lowered:
            return "positive."
        if "bad" in lowered or "worst" in lowered:
            return "NEGATIVE"
        if "should" in lowered or "could" in lowered:
            return "Construct"
        return "Unsure"
