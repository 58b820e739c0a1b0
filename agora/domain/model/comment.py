"""Comment entity.

Comments are threaded one level deep: a top-level comment on a policy may
have replies, but replies cannot be replied to. Deleting a comment only
stamps ``deleted_at`` so replies keep a parent to hang from.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel, utc_now
from agora.domain.value import CommentId, PolicyId, UserId


class Comment(DomainModel):
    """Comment entity.

    ``author_name`` is denormalized from the author's user row at creation
    time so threads can be rendered without a join.
    """

    id: CommentId
    policy_id: PolicyId
    author_id: UserId
    author_name: Optional[str] = None
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @property
    def score(self) -> int:
        """Net votes."""
        return self.upvotes - self.downvotes


class CommentThread(DomainModel):
    """A top-level comment together with its live replies, oldest first."""

    root: Comment
    replies: list[Comment] = Field(default_factory=list)


class CommentPage(DomainModel):
    """One page of ranked comment threads for a policy."""

    threads: list[CommentThread]
    total_count: int
    has_more: bool
    next_cursor: Optional[CommentId] = None
