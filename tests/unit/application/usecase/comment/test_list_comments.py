"""Unit tests for ListCommentsUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.comment import (
    ListCommentsRequest,
    ListCommentsUseCase,
)
from agora.domain.error import NotFoundError, ValidationError
from agora.domain.repository import CommentRepository, PolicyRepository
from tests.factories import at, make_comment, make_policy
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_deleted_root_hides_content_and_author(self, unit_env):
        """A deleted root with live replies keeps its slot but not its text."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        policy_repo = await unit_env.get(PolicyRepository)
        comment_repo = await unit_env.get(CommentRepository)

        policy = make_policy()
        await policy_repo.save(policy)
        root = make_comment(policy.id, created_at=at(1), deleted=True)
        reply = make_comment(policy.id, created_at=at(2), parent_id=root.id)
        await comment_repo.save(root)
        await comment_repo.save(reply)

        # Act
        response = await use_case.execute(
            ListCommentsRequest(policy_id=str(policy.id))
        )

        # Assert
        [thread] = response.comments
        assert thread.comment_id == str(root.id)
        assert thread.is_deleted is True
        assert thread.content is None
        assert thread.author_id is None
        assert thread.author_name is None
        assert [r.comment_id for r in thread.replies] == [str(reply.id)]
        assert thread.replies[0].content == "I support this."
        assert response.total_count == 1

    @pytest.mark.asyncio
    async def test_invalid_sort_is_rejected(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(ValidationError, match="Invalid sort"):
            await use_case.execute(
                ListCommentsRequest(policy_id=str(uuid4()), sort="oldest")
            )

    @pytest.mark.asyncio
    async def test_malformed_cursor_is_rejected(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(ValidationError, match="Invalid cursor"):
            await use_case.execute(
                ListCommentsRequest(policy_id=str(uuid4()), cursor="not-a-uuid")
            )

    @pytest.mark.asyncio
    async def test_cursor_ignored_for_popular(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        policy_repo = await unit_env.get(PolicyRepository)
        comment_repo = await unit_env.get(CommentRepository)
        policy = make_policy()
        await policy_repo.save(policy)
        await comment_repo.save(make_comment(policy.id, upvotes=3))

        response = await use_case.execute(
            ListCommentsRequest(
                policy_id=str(policy.id), sort="popular", cursor="not-a-uuid"
            )
        )

        assert len(response.comments) == 1
        assert response.next_cursor is None

    @pytest.mark.asyncio
    async def test_deleted_policy_is_not_found(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        policy_repo = await unit_env.get(PolicyRepository)
        policy = make_policy(deleted_at=at(10))
        await policy_repo.save(policy)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListCommentsRequest(policy_id=str(policy.id)))
