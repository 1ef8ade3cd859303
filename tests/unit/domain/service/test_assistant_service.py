"""Unit tests for AssistantService."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from eduforum.domain.error import AssistantError
from eduforum.domain.model import Comment, Feedback
from eduforum.domain.service import AssistantClient, AssistantService
from eduforum.domain.value import (
    CommentId,
    CommunityId,
    DisplayName,
    FeedbackId,
    Sentiment,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

POSTED_AT = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


def _feedback() -> Feedback:
    return Feedback(
        id=FeedbackId(uuid4()),
        community_id=CommunityId(uuid4()),
        student_name=DisplayName("alice"),
        standing="Junior",
        major="Biology",
        title="Office hours",
        description="Please add evening office hours",
        created_at=POSTED_AT,
    )


def _comment(feedback: Feedback, name: str, text: str) -> Comment:
    return Comment(
        id=CommentId(uuid4()),
        feedback_id=feedback.id,
        commenter_name=DisplayName(name),
        comment_text=text,
        created_at=POSTED_AT,
    )


class TestNormalizeSentiment:
    """Tests for normalize_sentiment."""

    @pytest.mark.parametrize(
        "reply,expected",
        [
            ("Positive", Sentiment.POSITIVE),
            ("positive.", Sentiment.POSITIVE),
            ("  NEGATIVE\n", Sentiment.NEGATIVE),
            ("Construct", Sentiment.CONSTRUCTIVE),
            ("Constructive", Sentiment.CONSTRUCTIVE),
            ("Neutral", Sentiment.CONSTRUCTIVE),
            ("", Sentiment.CONSTRUCTIVE),
        ],
    )
    def test_maps_reply_to_label(self, reply, expected):
        assert AssistantService.normalize_sentiment(reply) == expected


class TestRenderThread:
    """Tests for render_thread."""

    def test_without_comments(self):
        """An empty thread renders the placeholder line."""
        feedback = _feedback()

        text = AssistantService.render_thread(feedback, [])

        assert text == (
            "Post Title: Office hours\n"
            "Posted by: alice (Junior, Biology) on 2024-03-01T09:30:00+00:00\n\n"
            "Description:\nPlease add evening office hours\n\n"
            "Comments:\n"
            "(No comments yet)\n"
        )

    def test_comments_are_numbered_in_order(self):
        """Comments render as a numbered list in the given order."""
        feedback = _feedback()
        comments = [
            _comment(feedback, "bob", "Agreed"),
            _comment(feedback, "carol", "Mornings too"),
        ]

        text = AssistantService.render_thread(feedback, comments)

        assert text.endswith(
            "Comments:\n"
            "1. bob (2024-03-01T09:30:00+00:00): Agreed\n"
            "2. carol (2024-03-01T09:30:00+00:00): Mornings too\n"
        )
        assert "(No comments yet)" not in text


class TestAssistantCalls:
    """Tests for the provider-backed operations, against the mock client."""

    @pytest.mark.asyncio
    async def test_summary_is_trimmed(self, unit_env):
        """Summaries come back without surrounding whitespace."""
        assistant_service = await unit_env.get(AssistantService)

        summary = await assistant_service.summarize(_feedback(), [])

        assert summary == "Students discuss Office hours."

    @pytest.mark.asyncio
    async def test_moderation_flags_blocked_words(self, unit_env):
        assistant_service = await unit_env.get(AssistantService)

        assert await assistant_service.moderate("you idiot") is True
        assert await assistant_service.moderate("more office hours") is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("I love this class", Sentiment.POSITIVE),
            ("Worst lab ever", Sentiment.NEGATIVE),
            ("Lectures should be recorded", Sentiment.CONSTRUCTIVE),
            ("Tuesday", Sentiment.CONSTRUCTIVE),
        ],
    )
    async def test_classify_sentiment(self, unit_env, text, expected):
        assistant_service = await unit_env.get(AssistantService)

        assert await assistant_service.classify_sentiment(text) == expected

    @pytest.mark.asyncio
    async def test_sentiment_falls_back_when_provider_fails(self, unit_env):
        """Provider failure yields Constructive instead of an error."""
        # Arrange
        client = await unit_env.get(AssistantClient)
        client.fail = True
        assistant_service = await unit_env.get(AssistantService)

        # Act
        sentiment = await assistant_service.classify_sentiment("I love it")

        # Assert
        assert sentiment == Sentiment.CONSTRUCTIVE

    @pytest.mark.asyncio
    async def test_moderation_failure_propagates(self, unit_env):
        """Moderation failures are left to the caller."""
        client = await unit_env.get(AssistantClient)
        client.fail = True
        assistant_service = await unit_env.get(AssistantService)

        with pytest.raises(AssistantError):
            await assistant_service.moderate("anything")
