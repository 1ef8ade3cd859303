"""Unit tests for the in-memory repositories."""

from uuid import uuid4

import pytest

from eduforum.domain.error import BusinessRuleViolationError
from eduforum.domain.model import Account, Feedback
from eduforum.domain.value import (
    AccountId,
    CommunityId,
    DisplayName,
    FeedbackId,
    Role,
    VoteType,
)
from eduforum.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryFeedbackRepository,
)


def _account(name: str, role: Role) -> Account:
    return Account(
        id=AccountId(uuid4()),
        name=DisplayName(name),
        password_hash="pbkdf2_sha256$1$00$00",
        role=role,
    )


def _feedback() -> Feedback:
    return Feedback(
        id=FeedbackId(uuid4()),
        community_id=CommunityId(uuid4()),
        student_name=DisplayName("alice"),
        standing="Junior",
        major="Biology",
        title="Office hours",
        description="Please add evening office hours",
    )


class TestInMemoryAccountRepository:
    """Tests for InMemoryAccountRepository."""

    @pytest.mark.asyncio
    async def test_same_name_allowed_across_roles(self):
        repo = InMemoryAccountRepository()

        await repo.save(_account("sam", Role.STUDENT))
        await repo.save(_account("sam", Role.ADMIN))

        assert (await repo.find_by_name_and_role("sam", Role.STUDENT)).role == Role.STUDENT
        assert (await repo.find_by_name_and_role("sam", Role.ADMIN)).role == Role.ADMIN

    @pytest.mark.asyncio
    async def test_duplicate_name_in_role_rejected(self):
        repo = InMemoryAccountRepository()
        await repo.save(_account("sam", Role.STUDENT))

        with pytest.raises(BusinessRuleViolationError, match="Student already exists"):
            await repo.save(_account("sam", Role.STUDENT))


class TestInMemoryFeedbackRepository:
    """Tests for InMemoryFeedbackRepository."""

    @pytest.mark.asyncio
    async def test_record_vote_on_missing_post(self):
        repo = InMemoryFeedbackRepository()

        assert await repo.record_vote(FeedbackId(uuid4()), "bob", VoteType.UP) is False

    @pytest.mark.asyncio
    async def test_record_downvote(self):
        repo = InMemoryFeedbackRepository()
        post = await repo.save(_feedback())

        assert await repo.record_vote(post.id, "bob", VoteType.DOWN) is True

        updated = await repo.find_by_id(post.id)
        assert updated.downvotes == 1
        assert updated.downvoters == frozenset({"bob"})
        assert updated.upvotes == 0

    @pytest.mark.asyncio
    async def test_set_starred_and_delete(self):
        repo = InMemoryFeedbackRepository()
        post = await repo.save(_feedback())

        assert await repo.set_starred(post.id, True) is True
        assert (await repo.find_by_id(post.id)).starred is True
        assert await repo.delete(post.id) is True
        assert await repo.set_starred(post.id, False) is False
        assert await repo.delete(post.id) is False
