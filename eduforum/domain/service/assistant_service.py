"""Language-model assistance domain service."""

import logfire

from eduforum.domain.error import AssistantError
from eduforum.domain.model.comment import Comment
from eduforum.domain.model.feedback import Feedback
from eduforum.domain.value import Sentiment

from .base import Service

NO_COMMENTS_PLACEHOLDER = "(No comments yet)"

# Lowercase reply prefixes and the label each one maps to
_SENTIMENT_PREFIXES: tuple[tuple[str, Sentiment], ...] = (
    ("positive", Sentiment.POSITIVE),
    ("negative", Sentiment.NEGATIVE),
    ("construct", Sentiment.CONSTRUCTIVE),
)


class AssistantClient:
    """Language-model provider interface.

    Implementations own the wire protocol; every method raises
    AssistantError when the provider cannot answer.
    """

    async def moderate(self, text: str) -> bool:
        """Check text against the provider's content policy.

        Args:
            text: Text to check

        Returns:
            True if the text is flagged
        """
        raise NotImplementedError

    async def summarize(self, thread_text: str) -> str:
        """Summarize a rendered thread in one sentence.

        Args:
            thread_text: Thread rendered by AssistantService.render_thread

        Returns:
            Raw provider reply
        """
        raise NotImplementedError

    async def classify_sentiment(self, text: str) -> str:
        """Classify a piece of feedback as Positive, Constructive or Negative.

        Args:
            text: Feedback text

        Returns:
            Raw provider reply (not normalised)
        """
        raise NotImplementedError


class AssistantService(Service):
    """Domain service wrapping the language-model provider.

    Builds prompts and normalises replies; the provider itself is opaque.
    """

    def __init__(self, assistant_client: AssistantClient) -> None:
        """Initialize assistant service.

        Args:
            assistant_client: Provider client
        """
        self.assistant_client = assistant_client

    async def moderate(self, text: str) -> bool:
        """Run text through moderation.

        Provider failures propagate: callers decide the policy.

        Raises:
            AssistantError: If the provider call fails
        """
        with logfire.span("assistant_service.moderate", text_length=len(text)):
            flagged = await self.assistant_client.moderate(text)
            logfire.info("Moderation completed", flagged=flagged)
            return flagged

    async def summarize(self, feedback: Feedback, comments: list[Comment]) -> str:
        """Summarize a feedback thread in one sentence.

        Args:
            feedback: The post
            comments: Its comments, oldest first

        Returns:
            Trimmed provider reply

        Raises:
            AssistantError: If the provider call fails
        """
        with logfire.span(
            "assistant_service.summarize",
            feedback_id=str(feedback.id),
            comment_count=len(comments),
        ):
            reply = await self.assistant_client.summarize(
                self.render_thread(feedback, comments)
            )
            return reply.strip()

    async def classify_sentiment(self, text: str) -> Sentiment:
        """Classify feedback text.

        Never fails: provider errors and unrecognised replies both yield
        Constructive.
        """
        with logfire.span("assistant_service.classify_sentiment", text_length=len(text)):
            try:
                reply = await self.assistant_client.classify_sentiment(text)
            except AssistantError as e:
                logfire.warn("Sentiment classification failed", error=str(e))
                return Sentiment.CONSTRUCTIVE

            sentiment = self.normalize_sentiment(reply)
            logfire.info("Sentiment classified", reply=reply, sentiment=sentiment.value)
            return sentiment

    @staticmethod
    def normalize_sentiment(reply: str) -> Sentiment:
        """Map a raw provider reply onto a canonical label."""
        lowered = reply.strip().lower()
        for prefix, sentiment in _SENTIMENT_PREFIXES:
            if lowered.startswith(prefix):
                return sentiment
        return Sentiment.CONSTRUCTIVE

    @staticmethod
    def render_thread(feedback: Feedback, comments: list[Comment]) -> str:
        """Render a post and its comments as the text given to the summarizer."""
        thread_text = (
            f"Post Title: {feedback.title}\n"
            f"Posted by: {feedback.student_name} ({feedback.standing}, {feedback.major})"
            f" on {feedback.created_at.isoformat()}\n\n"
            f"Description:\n{feedback.description}\n\n"
            "Comments:\n"
        )

        if not comments:
            return thread_text + f"{NO_COMMENTS_PLACEHOLDER}\n"

        lines = [
            f"{index}. {comment.commenter_name} ({comment.created_at.isoformat()}): "
            f"{comment.comment_text}\n"
            for index, comment in enumerate(comments, start=1)
        ]
        return thread_text + "".join(lines)
