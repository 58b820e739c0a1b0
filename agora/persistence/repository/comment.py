"""PostgreSQL implementation of Comment repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select, tuple_, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment
from agora.domain.model.common import utc_now
from agora.domain.repository import CommentRepository
from agora.domain.value import CommentId, PolicyId, VoteDirection
from agora.persistence.mappers import comment_to_dict, row_to_comment
from agora.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _top_level(self, policy_id: PolicyId, before: Optional[Comment]):
        """Top-level comments of a policy in keyset order after ``before``."""
        stmt = select(comments_table).where(
            comments_table.c.policy_id == policy_id,
            comments_table.c.parent_id.is_(None),
        )
        if before is not None:
            stmt = stmt.where(
                tuple_(comments_table.c.created_at, comments_table.c.id)
                < tuple_(before.created_at, before.id)
            )
        return stmt.order_by(
            comments_table.c.created_at.desc(), comments_table.c.id.desc()
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self,
        policy_id: PolicyId,
        limit: int,
        before: Optional[Comment] = None,
    ) -> list[Comment]:
        """Find live top-level comments for a policy, newest first."""
        stmt = (
            self._top_level(policy_id, before)
            .where(comments_table.c.deleted_at.is_(None))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_deleted_top_level_with_replies(
        self,
        policy_id: PolicyId,
        limit: int,
        before: Optional[Comment] = None,
    ) -> list[Comment]:
        """Find soft-deleted top-level comments that still have live replies."""
        replies = comments_table.alias("replies")
        has_live_reply = (
            select(replies.c.id)
            .where(
                replies.c.parent_id == comments_table.c.id,
                replies.c.deleted_at.is_(None),
            )
            .exists()
        )
        stmt = (
            self._top_level(policy_id, before)
            .where(comments_table.c.deleted_at.is_not(None), has_live_reply)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find live replies to any of the given comments, oldest first."""
        if not parent_ids:
            return []
        stmt = (
            select(comments_table)
            .where(
                comments_table.c.parent_id.in_(list(parent_ids)),
                comments_table.c.deleted_at.is_(None),
            )
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_policy(self, policy_id: PolicyId) -> int:
        """Count non-deleted comments on a policy."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.policy_id == policy_id)
            .where(comments_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def increment_votes(
        self, comment_id: CommentId, direction: VoteDirection
    ) -> Optional[Comment]:
        """Atomically add one vote to a live comment."""
        column = (
            comments_table.c.upvotes
            if direction == VoteDirection.UP
            else comments_table.c.downvotes
        )
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values({column.name: column + 1, "updated_at": utc_now()})
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())
