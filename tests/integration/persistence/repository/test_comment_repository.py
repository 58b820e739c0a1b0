"""Integration tests for CommentRepository.

These tests run the thread queries against PostgreSQL: keyset paging over
top-level comments, deleted roots kept for their replies, reply ordering and
the atomic vote counters.
"""

import pytest

from agora.domain.repository import CommentRepository, PolicyRepository, UserRepository
from agora.domain.value import VoteDirection
from tests.factories import at, make_comment, make_policy, make_user
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})


class CommentWriter:
    """Saves comments on one fresh policy, all by one author."""

    def __init__(self, repo: CommentRepository, policy_id, author_id):
        self.repo = repo
        self.policy_id = policy_id
        self.author_id = author_id

    async def add(self, minutes: float, **kwargs):
        comment = make_comment(
            self.policy_id, at(minutes), author_id=self.author_id, **kwargs
        )
        return await self.repo.save(comment)


async def make_writer(integration_env) -> CommentWriter:
    user_repo = await integration_env.get(UserRepository)
    policy_repo = await integration_env.get(PolicyRepository)
    comment_repo = await integration_env.get(CommentRepository)
    author = make_user()
    await user_repo.save(author)
    policy = await policy_repo.save(make_policy(author_id=author.id))
    return CommentWriter(comment_repo, policy.id, author.id)


class TestTopLevelKeyset:
    """Keyset paging over top-level comments."""

    @pytest.mark.asyncio
    async def test_newest_first_without_replies(self, integration_env):
        # Arrange
        writer = await make_writer(integration_env)
        first = await writer.add(1)
        second = await writer.add(2)
        await writer.add(3, parent_id=first.id)

        # Act
        found = await writer.repo.find_top_level(writer.policy_id, limit=10)

        # Assert
        assert [c.id for c in found] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_cursor_returns_strictly_older_comments(self, integration_env):
        # Arrange
        writer = await make_writer(integration_env)
        oldest = await writer.add(1)
        middle = await writer.add(2)
        newest = await writer.add(3)

        # Act
        after_newest = await writer.repo.find_top_level(
            writer.policy_id, limit=10, before=newest
        )
        after_middle = await writer.repo.find_top_level(
            writer.policy_id, limit=10, before=middle
        )

        # Assert
        assert [c.id for c in after_newest] == [middle.id, oldest.id]
        assert [c.id for c in after_middle] == [oldest.id]

    @pytest.mark.asyncio
    async def test_equal_timestamps_are_ordered_by_id(self, integration_env):
        """Comments created in the same instant page without gaps or repeats."""
        # Arrange
        writer = await make_writer(integration_env)
        older = await writer.add(1)
        tied = [await writer.add(5) for _ in range(3)]
        tied.sort(key=lambda c: c.id, reverse=True)

        # Act
        first_page = await writer.repo.find_top_level(writer.policy_id, limit=2)
        second_page = await writer.repo.find_top_level(
            writer.policy_id, limit=2, before=first_page[-1]
        )

        # Assert
        assert [c.id for c in first_page] == [tied[0].id, tied[1].id]
        assert [c.id for c in second_page] == [tied[2].id, older.id]

    @pytest.mark.asyncio
    async def test_limit_is_applied(self, integration_env):
        # Arrange
        writer = await make_writer(integration_env)
        for minute in range(5):
            await writer.add(minute)

        # Act
        found = await writer.repo.find_top_level(writer.policy_id, limit=3)

        # Assert
        assert len(found) == 3


class TestDeletedRoots:
    """Soft-deleted top-level comments."""

    @pytest.mark.asyncio
    async def test_only_deleted_roots_with_live_replies_are_kept(
        self, integration_env
    ):
        # Arrange
        writer = await make_writer(integration_env)
        kept = await writer.add(1, deleted=True)
        await writer.add(2, parent_id=kept.id)
        orphaned = await writer.add(3, deleted=True)
        await writer.add(4, parent_id=orphaned.id, deleted=True)
        await writer.add(5, deleted=True)
        live = await writer.add(6)

        # Act
        deleted = await writer.repo.find_deleted_top_level_with_replies(
            writer.policy_id, limit=10
        )
        top_level = await writer.repo.find_top_level(writer.policy_id, limit=10)

        # Assert
        assert [c.id for c in deleted] == [kept.id]
        assert [c.id for c in top_level] == [live.id]

    @pytest.mark.asyncio
    async def test_deleted_roots_follow_the_cursor(self, integration_env):
        # Arrange
        writer = await make_writer(integration_env)
        older = await writer.add(1, deleted=True)
        await writer.add(2, parent_id=older.id)
        newer = await writer.add(3, deleted=True)
        await writer.add(4, parent_id=newer.id)
        cursor = await writer.add(2.5)

        # Act
        found = await writer.repo.find_deleted_top_level_with_replies(
            writer.policy_id, limit=10, before=cursor
        )

        # Assert
        assert [c.id for c in found] == [older.id]


class TestReplies:
    """Reply lookup for a set of threads."""

    @pytest.mark.asyncio
    async def test_live_replies_oldest_first(self, integration_env):
        # Arrange
        writer = await make_writer(integration_env)
        first = await writer.add(1)
        second = await writer.add(2)
        late = await writer.add(9, parent_id=first.id)
        early = await writer.add(3, parent_id=second.id)
        await writer.add(4, parent_id=first.id, deleted=True)
        middle = await writer.add(5, parent_id=first.id)

        # Act
        replies = await writer.repo.find_replies([first.id, second.id])

        # Assert
        assert [c.id for c in replies] == [early.id, middle.id, late.id]
        assert all(reply.author_id == writer.author_id for reply in replies)

    @pytest.mark.asyncio
    async def test_no_parents_means_no_replies(self, integration_env):
        writer = await make_writer(integration_env)

        assert await writer.repo.find_replies([]) == []

    @pytest.mark.asyncio
    async def test_count_includes_live_replies_only(self, integration_env):
        # Arrange
        writer = await make_writer(integration_env)
        root = await writer.add(1)
        await writer.add(2, parent_id=root.id)
        await writer.add(3, parent_id=root.id, deleted=True)
        await writer.add(4, deleted=True)

        # Act
        count = await writer.repo.count_by_policy(writer.policy_id)

        # Assert
        assert count == 2


class TestVoteCounters:
    """Atomic vote increments."""

    @pytest.mark.asyncio
    async def test_increment_returns_updated_counts(self, integration_env):
        # Arrange
        writer = await make_writer(integration_env)
        comment = await writer.add(1, upvotes=4, downvotes=1)

        # Act
        await writer.repo.increment_votes(comment.id, VoteDirection.UP)
        updated = await writer.repo.increment_votes(comment.id, VoteDirection.DOWN)

        # Assert
        assert updated is not None
        assert (updated.upvotes, updated.downvotes) == (5, 2)
        stored = await writer.repo.find_by_id(comment.id)
        assert (stored.upvotes, stored.downvotes) == (5, 2)
        assert stored.updated_at > comment.updated_at

    @pytest.mark.asyncio
    async def test_deleted_comment_is_not_counted(self, integration_env):
        # Arrange
        writer = await make_writer(integration_env)
        comment = await writer.add(1, deleted=True)

        # Act
        result = await writer.repo.increment_votes(comment.id, VoteDirection.UP)

        # Assert
        assert result is None
        assert (await writer.repo.find_by_id(comment.id)).upvotes == 0
