"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from eduforum.domain.error import BusinessRuleViolationError, NotFoundError
from eduforum.domain.repository import FeedbackRepository
from eduforum.domain.service import FeedbackService, VoteService
from eduforum.domain.value import CommunityId, FeedbackId, VoteType
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _create_post(feedback_service: FeedbackService):
    return await feedback_service.create_feedback(
        community_id=CommunityId(uuid4()),
        student_name="alice",
        standing="Junior",
        major="Computer Science",
        title="Office hours",
        description="Office hours should start earlier",
    )


class TestVote:
    """Tests for vote method."""

    @pytest.mark.asyncio
    async def test_upvote_increments_counter_and_records_voter(self, unit_env):
        """Upvoting should bump upvotes and add the name to upvoters."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        feedback_service = await unit_env.get(FeedbackService)
        post = await _create_post(feedback_service)

        # Act
        await vote_service.vote(post.id, "bob", VoteType.UP)

        # Assert
        updated = await feedback_service.get_feedback(post.id)
        assert updated.upvotes == 1
        assert updated.downvotes == 0
        assert updated.upvoters == frozenset({"bob"})
        assert updated.downvoters == frozenset()

    @pytest.mark.asyncio
    async def test_distinct_voters_accumulate(self, unit_env):
        """Two distinct names upvoting should give two upvotes."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        feedback_service = await unit_env.get(FeedbackService)
        post = await _create_post(feedback_service)

        # Act
        await vote_service.vote(post.id, "bob", VoteType.UP)
        await vote_service.vote(post.id, "carol", VoteType.UP)
        await vote_service.vote(post.id, "dave", VoteType.DOWN)

        # Assert
        updated = await feedback_service.get_feedback(post.id)
        assert (updated.upvotes, updated.downvotes) == (2, 1)
        assert updated.upvoters == frozenset({"bob", "carol"})
        assert updated.downvoters == frozenset({"dave"})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "first,second",
        [
            (VoteType.UP, VoteType.UP),
            (VoteType.UP, VoteType.DOWN),
            (VoteType.DOWN, VoteType.UP),
            (VoteType.DOWN, VoteType.DOWN),
        ],
    )
    async def test_second_vote_by_same_name_fails(self, unit_env, first, second):
        """At most one vote per name per post, in either direction."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        feedback_service = await unit_env.get(FeedbackService)
        post = await _create_post(feedback_service)
        await vote_service.vote(post.id, "bob", first)
        before = await feedback_service.get_feedback(post.id)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="Already voted"):
            await vote_service.vote(post.id, "bob", second)

        after = await feedback_service.get_feedback(post.id)
        assert (after.upvotes, after.downvotes) == (before.upvotes, before.downvotes)
        assert after.upvoters == before.upvoters
        assert after.downvoters == before.downvoters

    @pytest.mark.asyncio
    async def test_vote_on_missing_post_fails(self, unit_env):
        """Voting on an unknown post should raise NotFoundError."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.vote(FeedbackId(uuid4()), "bob", VoteType.UP)

    @pytest.mark.asyncio
    async def test_conditional_write_refuses_repeat_voter(self, unit_env):
        """The repository's vote write should refuse a name already recorded."""
        # Arrange
        feedback_service = await unit_env.get(FeedbackService)
        feedback_repo = await unit_env.get(FeedbackRepository)
        post = await _create_post(feedback_service)

        # Act
        first = await feedback_repo.record_vote(post.id, "bob", VoteType.UP)
        second = await feedback_repo.record_vote(post.id, "bob", VoteType.DOWN)

        # Assert
        assert first is True
        assert second is False
        updated = await feedback_service.get_feedback(post.id)
        assert (updated.upvotes, updated.downvotes) == (1, 0)
