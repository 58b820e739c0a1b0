"""Domain value objects for Agora.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from agora.domain.value.common import ValueObject


class CommentSort(str, Enum):
    """Ordering of top-level comment threads."""

    NEWEST = "newest"
    POPULAR = "popular"
    CONTROVERSIAL = "controversial"


class VoteDirection(str, Enum):
    """Direction of a comment vote."""

    UP = "up"
    DOWN = "down"


class MemberRole(str, Enum):
    """Role of a user within an organization."""

    ADMIN = "admin"
    MEMBER = "member"


class AccessRequestStatus(str, Enum):
    """Lifecycle of a request to join an organization."""

    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


class ReviewAction(str, Enum):
    """Decision an admin takes on an access request."""

    APPROVE = "approve"
    DENY = "deny"


class EndorsementType(str, Enum):
    """Who stands behind an endorsement."""

    INDIVIDUAL = "individual"
    ORGANIZATION = "organization"


class Identity(ValueObject):
    """Verified identity of the caller, taken from a session token.

    ``external_id`` is the identity provider's permanent user id; the local
    user row is looked up (or created) by it.
    """

    external_id: str
    email: str
    name: str | None = None

    @field_validator("external_id")
    @classmethod
    def validate_external_id(cls, v: str) -> str:
        """Validate external id is not empty."""
        if not v.strip():
            raise ValueError("External id must not be empty")
        return v


class PolicyAnalysis(ValueObject):
    """Results of the external text-analysis service for a policy draft."""

    summary: str | None = None
    category: str | None = None
    readability_score: float | None = None
    potential_conflicts: list[str] = []
    affected_groups: list[str] = []
