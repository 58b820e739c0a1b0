"""List comments use case."""

from datetime import datetime
from typing import Sequence
from uuid import UUID

from pydantic import BaseModel

from agora.domain.error import ValidationError
from agora.domain.model import Comment
from agora.domain.service import CommentService, PolicyService
from agora.domain.value import CommentId, CommentSort, PolicyId


class CommentItem(BaseModel):
    """Comment item in response.

    Deleted top-level comments keep their place in a thread but expose
    neither content nor author.
    """

    comment_id: str
    policy_id: str
    parent_id: str | None
    author_id: str | None
    author_name: str | None
    content: str | None
    upvotes: int
    downvotes: int
    score: int
    is_deleted: bool
    created_at: datetime
    replies: list["CommentItem"] = []


def to_comment_item(
    comment: Comment, replies: Sequence[Comment] = ()
) -> CommentItem:
    """Render a comment (and its replies) for the API."""
    hidden = comment.is_deleted
    return CommentItem(
        comment_id=str(comment.id),
        policy_id=str(comment.policy_id),
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        author_id=None if hidden else str(comment.author_id),
        author_name=None if hidden else comment.author_name,
        content=None if hidden else comment.content,
        upvotes=comment.upvotes,
        downvotes=comment.downvotes,
        score=comment.score,
        is_deleted=hidden,
        created_at=comment.created_at,
        replies=[to_comment_item(reply) for reply in replies],
    )


class ListCommentsRequest(BaseModel):
    """List comments request."""

    policy_id: str  # UUID string
    sort: str = CommentSort.NEWEST.value
    cursor: str | None = None  # Last seen comment ID (newest only)
    offset: int = 0  # Threads to skip (popular/controversial only)


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentItem]
    total_count: int
    has_more: bool
    next_cursor: str | None


class ListCommentsUseCase:
    """Use case for listing a policy's comment threads in one ranking."""

    def __init__(
        self,
        comment_service: CommentService,
        policy_service: PolicyService,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            policy_service: Policy domain service
        """
        self.comment_service = comment_service
        self.policy_service = policy_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Args:
            request: Policy ID, sort mode and continuation

        Returns:
            One page of threads, the policy's live comment count, and the
            continuation for the next page

        Raises:
            NotFoundError: If the policy is missing or deleted
            ValidationError: If the sort mode or cursor is invalid
        """
        try:
            sort = CommentSort(request.sort)
        except ValueError:
            allowed = ", ".join(s.value for s in CommentSort)
            raise ValidationError(f"Invalid sort. Expected one of: {allowed}.")

        cursor = None
        # Cursors only apply to the newest-first keyset ordering
        if request.cursor and sort == CommentSort.NEWEST:
            try:
                cursor = CommentId(UUID(request.cursor))
            except ValueError:
                raise ValidationError("Invalid cursor.")

        policy = await self.policy_service.get_policy(
            PolicyId(UUID(request.policy_id))
        )

        page = await self.comment_service.list_threads(
            policy_id=policy.id,
            sort=sort,
            cursor=cursor,
            offset=request.offset,
        )

        return ListCommentsResponse(
            comments=[
                to_comment_item(thread.root, thread.replies) for thread in page.threads
            ],
            total_count=page.total_count,
            has_more=page.has_more,
            next_cursor=str(page.next_cursor) if page.next_cursor else None,
        )
