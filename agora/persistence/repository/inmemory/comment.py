"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from agora.domain.model.comment import Comment
from agora.domain.model.common import utc_now
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentId, PolicyId, VoteDirection


def _keyset(comment: Comment) -> tuple:
    return (comment.created_at, comment.id)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _top_level(
        self, policy_id: PolicyId, before: Optional[Comment]
    ) -> list[Comment]:
        comments = [
            c
            for c in self._comments.values()
            if c.policy_id == policy_id and c.parent_id is None
        ]

        # Keyset cursor
        if before is not None:
            comments = [c for c in comments if _keyset(c) < _keyset(before)]

        comments.sort(key=_keyset, reverse=True)
        return comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self,
        policy_id: PolicyId,
        limit: int,
        before: Optional[Comment] = None,
    ) -> list[Comment]:
        """Find live top-level comments for a policy, newest first."""
        comments = [
            c for c in self._top_level(policy_id, before) if c.deleted_at is None
        ]
        return comments[:limit]

    async def find_deleted_top_level_with_replies(
        self,
        policy_id: PolicyId,
        limit: int,
        before: Optional[Comment] = None,
    ) -> list[Comment]:
        """Find soft-deleted top-level comments that still have live replies."""
        parents_with_replies = {
            c.parent_id
            for c in self._comments.values()
            if c.parent_id is not None and c.deleted_at is None
        }
        comments = [
            c
            for c in self._top_level(policy_id, before)
            if c.deleted_at is not None and c.id in parents_with_replies
        ]
        return comments[:limit]

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find live replies to any of the given comments, oldest first."""
        wanted = set(parent_ids)
        replies = [
            c
            for c in self._comments.values()
            if c.parent_id in wanted and c.deleted_at is None
        ]
        replies.sort(key=_keyset)
        return replies

    async def count_by_policy(self, policy_id: PolicyId) -> int:
        """Count comments for a policy (excluding deleted)."""
        return sum(
            1
            for c in self._comments.values()
            if c.policy_id == policy_id and c.deleted_at is None
        )

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def increment_votes(
        self, comment_id: CommentId, direction: VoteDirection
    ) -> Optional[Comment]:
        """Add one vote to a live comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            return None

        field = "upvotes" if direction == VoteDirection.UP else "downvotes"
        updated = comment.model_copy(
            update={field: getattr(comment, field) + 1, "updated_at": utc_now()}
        )
        self._comments[comment_id] = updated
        return updated
