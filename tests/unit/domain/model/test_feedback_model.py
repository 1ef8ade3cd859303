"""Unit tests for the Feedback model."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from eduforum.domain.model import Feedback
from eduforum.domain.value import CommunityId, DisplayName, FeedbackId


def _feedback(**overrides) -> Feedback:
    fields = {
        "id": FeedbackId(uuid4()),
        "community_id": CommunityId(uuid4()),
        "student_name": DisplayName("alice"),
        "standing": "Junior",
        "major": "Biology",
        "title": "Office hours",
        "description": "Please add evening office hours",
    }
    fields.update(overrides)
    return Feedback(**fields)


class TestFeedbackModel:
    """Tests for Feedback invariants."""

    def test_defaults(self):
        feedback = _feedback()

        assert feedback.upvotes == 0
        assert feedback.downvotes == 0
        assert feedback.starred is False
        assert feedback.created_at.tzinfo is not None

    def test_voter_cannot_be_in_both_sets(self):
        """A name in both voter sets is rejected."""
        with pytest.raises(ValidationError):
            _feedback(
                upvotes=1,
                downvotes=1,
                upvoters=frozenset({"bob"}),
                downvoters=frozenset({"bob"}),
            )

    def test_has_voted(self):
        feedback = _feedback(
            upvotes=1,
            downvotes=1,
            upvoters=frozenset({"bob"}),
            downvoters=frozenset({"carol"}),
        )

        assert feedback.has_voted("bob")
        assert feedback.has_voted("carol")
        assert not feedback.has_voted("dave")

    def test_negative_counter_rejected(self):
        with pytest.raises(ValidationError):
            _feedback(upvotes=-1)

    def test_is_immutable(self):
        feedback = _feedback()

        with pytest.raises(ValidationError):
            feedback.starred = True
