"""Unit tests for FeedbackService."""

from uuid import uuid4

import pytest

from eduforum.domain.error import NotFoundError, ValidationError
from eduforum.domain.service import FeedbackService
from eduforum.domain.value import CommunityId, FeedbackId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _post_fields(**overrides) -> dict:
    fields = {
        "student_name": "alice",
        "standing": "Junior",
        "major": "Biology",
        "title": "Lab safety",
        "description": "The lab needs more goggles",
    }
    fields.update(overrides)
    return fields


class TestCreateFeedback:
    """Tests for create_feedback method."""

    @pytest.mark.asyncio
    async def test_new_post_starts_with_no_votes_and_no_star(self, unit_env):
        """A new post should have zero counters, empty sets and no star."""
        # Arrange
        feedback_service = await unit_env.get(FeedbackService)
        community_id = CommunityId(uuid4())

        # Act
        post = await feedback_service.create_feedback(
            community_id=community_id, **_post_fields()
        )

        # Assert
        assert post.community_id == community_id
        assert post.student_name.root == "alice"
        assert post.upvotes == 0
        assert post.downvotes == 0
        assert post.upvoters == frozenset()
        assert post.downvoters == frozenset()
        assert post.starred is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field", ["student_name", "standing", "major", "title", "description"]
    )
    async def test_blank_field_is_rejected(self, unit_env, field):
        """Any blank field should raise ValidationError."""
        feedback_service = await unit_env.get(FeedbackService)

        with pytest.raises(ValidationError, match="All fields required"):
            await feedback_service.create_feedback(
                community_id=CommunityId(uuid4()), **_post_fields(**{field: "  "})
            )


class TestListFeedback:
    """Tests for list_feedback method."""

    @pytest.mark.asyncio
    async def test_lists_only_the_community_newest_first(self, unit_env):
        """Listing should filter by community and order newest first."""
        # Arrange
        feedback_service = await unit_env.get(FeedbackService)
        community_id = CommunityId(uuid4())
        first = await feedback_service.create_feedback(
            community_id=community_id, **_post_fields(title="First")
        )
        second = await feedback_service.create_feedback(
            community_id=community_id, **_post_fields(title="Second")
        )
        await feedback_service.create_feedback(
            community_id=CommunityId(uuid4()), **_post_fields(title="Elsewhere")
        )

        # Act
        posts = await feedback_service.list_feedback(community_id)

        # Assert
        assert [p.id for p in posts] == [second.id, first.id]


class TestStarAndDelete:
    """Tests for set_starred and delete_feedback."""

    @pytest.mark.asyncio
    async def test_star_is_idempotent(self, unit_env):
        """Starring twice leaves the post starred; unstarring twice leaves it not."""
        # Arrange
        feedback_service = await unit_env.get(FeedbackService)
        post = await feedback_service.create_feedback(
            community_id=CommunityId(uuid4()), **_post_fields()
        )

        # Act & Assert
        await feedback_service.set_starred(post.id, True)
        await feedback_service.set_starred(post.id, True)
        assert (await feedback_service.get_feedback(post.id)).starred is True

        await feedback_service.set_starred(post.id, False)
        await feedback_service.set_starred(post.id, False)
        assert (await feedback_service.get_feedback(post.id)).starred is False

    @pytest.mark.asyncio
    async def test_star_missing_post_fails(self, unit_env):
        """Starring an unknown post should raise NotFoundError."""
        feedback_service = await unit_env.get(FeedbackService)

        with pytest.raises(NotFoundError):
            await feedback_service.set_starred(FeedbackId(uuid4()), True)

    @pytest.mark.asyncio
    async def test_delete_removes_post(self, unit_env):
        """Deleted posts should no longer be found."""
        # Arrange
        feedback_service = await unit_env.get(FeedbackService)
        post = await feedback_service.create_feedback(
            community_id=CommunityId(uuid4()), **_post_fields()
        )

        # Act
        await feedback_service.delete_feedback(post.id)

        # Assert
        with pytest.raises(NotFoundError):
            await feedback_service.get_feedback(post.id)
        with pytest.raises(NotFoundError):
            await feedback_service.delete_feedback(post.id)
