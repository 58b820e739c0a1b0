"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from agora.domain.model.comment import Comment
from agora.domain.value import CommentId, PolicyId, VoteDirection


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted ones.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        policy_id: PolicyId,
        limit: int,
        before: Optional[Comment] = None,
    ) -> list[Comment]:
        """Find live top-level comments for a policy, newest first.

        Ordering is ``(created_at, id)`` descending. When ``before`` is given
        only comments strictly after it in that ordering are returned
        (keyset pagination).

        Args:
            policy_id: The policy ID
            limit: Maximum number of comments to return
            before: Last comment already seen by the caller

        Returns:
            List of non-deleted top-level comments
        """
        pass

    @abstractmethod
    async def find_deleted_top_level_with_replies(
        self,
        policy_id: PolicyId,
        limit: int,
        before: Optional[Comment] = None,
    ) -> list[Comment]:
        """Find soft-deleted top-level comments that still have live replies.

        Same ordering and keyset semantics as ``find_top_level``.

        Args:
            policy_id: The policy ID
            limit: Maximum number of comments to return
            before: Last comment already seen by the caller

        Returns:
            List of soft-deleted top-level comments with at least one
            non-deleted reply
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find live replies to any of the given comments, oldest first.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Non-deleted replies ordered by creation time ascending
        """
        pass

    @abstractmethod
    async def count_by_policy(self, policy_id: PolicyId) -> int:
        """Count non-deleted comments (top-level and replies) on a policy.

        Args:
            policy_id: The policy ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def increment_votes(
        self, comment_id: CommentId, direction: VoteDirection
    ) -> Optional[Comment]:
        """Atomically add one vote to a live comment.

        Args:
            comment_id: The comment ID
            direction: Which counter to increment

        Returns:
            The updated comment, or None if it doesn't exist or is deleted
        """
        pass
