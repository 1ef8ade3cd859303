"""Unit tests for CreateFeedbackUseCase."""

from uuid import uuid4

import pytest

from eduforum.application.usecase.feedback import (
    CreateFeedbackRequest,
    CreateFeedbackUseCase,
)
from eduforum.domain.error import (
    AssistantError,
    ContentRejectedError,
    NotAuthenticatedError,
    NotAuthorizedError,
    ValidationError,
)
from eduforum.domain.service import AssistantClient, FeedbackService, SessionService
from eduforum.domain.value import CommunityId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _request(token: str | None, community_id: str, **overrides) -> CreateFeedbackRequest:
    fields = {
        "community_id": community_id,
        "standing": "Junior",
        "major": "Computer Science",
        "title": "Office hours",
        "description": "Office hours should start earlier",
        "token": token,
    }
    fields.update(overrides)
    return CreateFeedbackRequest(**fields)


class TestCreateFeedback:
    """Tests for the create feedback flow."""

    @pytest.mark.asyncio
    async def test_author_name_comes_from_session(self, unit_env, student_account):
        """The post is filed under the session's name."""
        # Arrange
        session_service = await unit_env.get(SessionService)
        feedback_service = await unit_env.get(FeedbackService)
        use_case = await unit_env.get(CreateFeedbackUseCase)
        session = await session_service.open(student_account)
        community_id = uuid4()

        # Act
        response = await use_case.execute(_request(session.token, str(community_id)))

        # Assert
        assert response.success is True
        [post] = await feedback_service.list_feedback(CommunityId(community_id))
        assert str(post.id) == response.id
        assert post.student_name.root == "alice"

    @pytest.mark.asyncio
    async def test_flagged_description_creates_nothing(self, unit_env, student_account):
        """Offensive text is rejected and no post is stored."""
        # Arrange
        session_service = await unit_env.get(SessionService)
        feedback_service = await unit_env.get(FeedbackService)
        use_case = await unit_env.get(CreateFeedbackUseCase)
        session = await session_service.open(student_account)
        community_id = uuid4()

        # Act & Assert
        with pytest.raises(ContentRejectedError, match="Offensive Post Warning!"):
            await use_case.execute(
                _request(
                    session.token,
                    str(community_id),
                    description="The professor is an idiot",
                )
            )
        assert await feedback_service.list_feedback(CommunityId(community_id)) == []

    @pytest.mark.asyncio
    async def test_moderation_failure_creates_nothing(self, unit_env, student_account):
        """If moderation cannot run, the post is not published."""
        # Arrange
        client = await unit_env.get(AssistantClient)
        client.fail = True
        session_service = await unit_env.get(SessionService)
        feedback_service = await unit_env.get(FeedbackService)
        use_case = await unit_env.get(CreateFeedbackUseCase)
        session = await session_service.open(student_account)
        community_id = uuid4()

        # Act & Assert
        with pytest.raises(AssistantError):
            await use_case.execute(_request(session.token, str(community_id)))
        assert await feedback_service.list_feedback(CommunityId(community_id)) == []

    @pytest.mark.asyncio
    async def test_requires_session(self, unit_env):
        use_case = await unit_env.get(CreateFeedbackUseCase)

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(_request(None, str(uuid4())))

    @pytest.mark.asyncio
    async def test_admin_cannot_post(self, unit_env, admin_account):
        session_service = await unit_env.get(SessionService)
        use_case = await unit_env.get(CreateFeedbackUseCase)
        session = await session_service.open(admin_account)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(_request(session.token, str(uuid4())))

    @pytest.mark.asyncio
    async def test_blank_field_rejected(self, unit_env, student_account):
        session_service = await unit_env.get(SessionService)
        use_case = await unit_env.get(CreateFeedbackUseCase)
        session = await session_service.open(student_account)

        with pytest.raises(ValidationError, match="All fields required"):
            await use_case.execute(_request(session.token, str(uuid4()), major=" "))

    @pytest.mark.asyncio
    async def test_malformed_community_id_rejected(self, unit_env, student_account):
        session_service = await unit_env.get(SessionService)
        use_case = await unit_env.get(CreateFeedbackUseCase)
        session = await session_service.open(student_account)

        with pytest.raises(ValidationError, match="Invalid community ID"):
            await use_case.execute(_request(session.token, "not-an-id"))
