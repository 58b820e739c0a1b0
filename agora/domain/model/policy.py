"""Policy aggregate root.

A policy is a proposal published for public discussion. It may belong to
an organization, in which case it is visible to that organization's
members and the members of its child organizations.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel, utc_now
from agora.domain.value import OrganizationId, PolicyId, UserId

TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 50000


class Policy(DomainModel):
    """Policy aggregate root.

    The analysis fields (summary, category, readability score, conflicts,
    affected groups) are produced by an external text-analysis service and
    stored as given.
    """

    id: PolicyId
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    summary: Optional[str] = None
    jurisdiction: Optional[str] = None
    category: Optional[str] = None
    target_law_name: Optional[str] = None
    target_law_text: Optional[str] = None
    readability_score: Optional[float] = None
    potential_conflicts: Optional[str] = None
    affected_groups: Optional[str] = None
    published: bool = False
    published_at: Optional[datetime] = None
    view_count: int = Field(default=0, ge=0)
    author_id: UserId
    organization_id: Optional[OrganizationId] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_visible(self) -> bool:
        """Published and not soft-deleted."""
        return self.published and not self.is_deleted
