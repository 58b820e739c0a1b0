"""Comment domain service."""

from collections import defaultdict
from uuid import uuid4

import logfire

from agora.config import CommentSettings
from agora.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from agora.domain.model import Comment, CommentPage, CommentThread, Policy, User
from agora.domain.model.common import utc_now
from agora.domain.repository import CommentRepository
from agora.domain.value import CommentId, CommentSort, PolicyId, VoteDirection

from .base import Service
from .comment_ranking import drop_empty_deleted, merge_candidates, rank_threads


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            settings: Paging and ranking configuration
        """
        self.comment_repository = comment_repository
        self.settings = settings

    async def create_comment(
        self,
        policy: Policy,
        author: User,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a policy or reply to a top-level comment.

        Args:
            policy: Policy being discussed (must already be checked visible)
            author: Comment author
            content: Comment text, trimmed before storing
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or too long, or the parent
                is itself a reply
            NotFoundError: If the parent is missing, deleted, or on another
                policy
        """
        with logfire.span(
            "comment_service.create_comment",
            policy_id=str(policy.id),
            author_id=str(author.id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Comment content is required.")
            if len(content) > self.settings.max_length:
                raise ValidationError(
                    f"Comment must be {self.settings.max_length} characters or less."
                )

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.is_deleted or parent.policy_id != policy.id:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        policy_id=str(policy.id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.is_reply:
                    raise ValidationError("Cannot reply to a reply.")

            now = utc_now()
            comment = Comment(
                id=CommentId(uuid4()),
                policy_id=policy.id,
                author_id=author.id,
                author_name=author.name,
                content=content,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                policy_id=str(policy.id),
                is_reply=saved.is_reply,
            )
            return saved

    async def get_live_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment that hasn't been deleted.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment is missing or soft-deleted
        """
        with logfire.span(
            "comment_service.get_live_comment", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or comment.is_deleted:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def delete_comment(self, comment_id: CommentId, user: User) -> Comment:
        """Soft-delete a comment. Only its author may do this.

        Args:
            comment_id: Comment ID
            user: User requesting the deletion

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment is missing or already deleted
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user.id),
        ):
            comment = await self.get_live_comment(comment_id)
            if comment.author_id != user.id:
                logfire.warn(
                    "Unauthorized comment deletion attempt",
                    comment_id=str(comment_id),
                    user_id=str(user.id),
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(comment_id), str(user.id)
                )

            now = utc_now()
            deleted = await self.comment_repository.save(
                comment.model_copy(update={"deleted_at": now, "updated_at": now})
            )
            logfire.info("Comment deleted", comment_id=str(comment_id))
            return deleted

    async def vote(self, comment_id: CommentId, direction: VoteDirection) -> Comment:
        """Add one vote to a comment.

        Repeat votes by the same user are not deduplicated.

        Args:
            comment_id: Comment ID
            direction: Up or down

        Returns:
            The comment with updated counters

        Raises:
            NotFoundError: If the comment is missing or deleted
        """
        with logfire.span(
            "comment_service.vote",
            comment_id=str(comment_id),
            direction=direction.value,
        ):
            updated = await self.comment_repository.increment_votes(
                comment_id, direction
            )
            if not updated:
                logfire.warn("Vote on missing comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment voted",
                comment_id=str(comment_id),
                upvotes=updated.upvotes,
                downvotes=updated.downvotes,
            )
            return updated

    async def list_threads(
        self,
        policy_id: PolicyId,
        sort: CommentSort = CommentSort.NEWEST,
        cursor: CommentId | None = None,
        offset: int = 0,
    ) -> CommentPage:
        """Get one page of comment threads for a policy.

        ``newest`` pages with a keyset cursor (the last comment ID the caller
        saw). ``popular`` and ``controversial`` rank the most recent
        ``ranking_window`` candidates in memory and page by offset into that
        window; comments older than the window never appear there.

        Args:
            policy_id: Policy ID
            sort: Sort mode
            cursor: Last seen top-level comment ID (``newest`` only)
            offset: Number of ranked threads to skip (score orders only)

        Returns:
            Page of threads with the policy's total live comment count

        Raises:
            ValidationError: If the cursor doesn't name a top-level comment on
                this policy or the offset is negative
        """
        with logfire.span(
            "comment_service.list_threads",
            policy_id=str(policy_id),
            sort=sort.value,
            cursor=str(cursor) if cursor else None,
            offset=offset,
        ):
            page_size = self.settings.page_size

            before = None
            if sort == CommentSort.NEWEST:
                if cursor:
                    before = await self.comment_repository.find_by_id(cursor)
                    if (
                        not before
                        or before.policy_id != policy_id
                        or before.is_reply
                    ):
                        raise ValidationError("Invalid cursor.")
                # One extra row tells us whether another page exists
                limit = page_size + 1
                offset = 0
            else:
                if offset < 0:
                    raise ValidationError("Offset must not be negative.")
                limit = self.settings.ranking_window

            live = await self.comment_repository.find_top_level(
                policy_id, limit=limit, before=before
            )
            orphaned = await self.comment_repository.find_deleted_top_level_with_replies(
                policy_id, limit=limit, before=before
            )
            roots = merge_candidates(live, orphaned)
            threads = await self._attach_replies(roots)

            ranked = drop_empty_deleted(rank_threads(threads, sort))
            page = ranked[offset : offset + page_size]
            has_more = len(ranked) > offset + page_size

            next_cursor = None
            if sort == CommentSort.NEWEST and has_more and page:
                next_cursor = page[-1].root.id

            total_count = await self.comment_repository.count_by_policy(policy_id)

            logfire.info(
                "Comment threads listed",
                policy_id=str(policy_id),
                candidates=len(roots),
                returned=len(page),
                has_more=has_more,
                total_count=total_count,
            )
            return CommentPage(
                threads=page,
                total_count=total_count,
                has_more=has_more,
                next_cursor=next_cursor,
            )

    async def _attach_replies(self, roots: list[Comment]) -> list[CommentThread]:
        """Fetch live replies for all roots in one query and group them."""
        if not roots:
            return []

        replies = await self.comment_repository.find_replies([r.id for r in roots])
        by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
        for reply in replies:
            by_parent[reply.parent_id].append(reply)

        return [
            CommentThread(root=root, replies=by_parent.get(root.id, []))
            for root in roots
        ]
