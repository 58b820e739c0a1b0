"""Domain value objects for Agora."""

from agora.domain.value.identifiers import (
    AccessRequestId,
    CommentId,
    EndorsementId,
    MembershipId,
    OrganizationId,
    PolicyId,
    SignatureId,
    UserId,
)
from agora.domain.value.types import (
    AccessRequestStatus,
    CommentSort,
    EndorsementType,
    Identity,
    MemberRole,
    PolicyAnalysis,
    ReviewAction,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "PolicyId",
    "CommentId",
    "OrganizationId",
    "MembershipId",
    "AccessRequestId",
    "EndorsementId",
    "SignatureId",
    # Types
    "AccessRequestStatus",
    "CommentSort",
    "EndorsementType",
    "Identity",
    "MemberRole",
    "PolicyAnalysis",
    "ReviewAction",
    "VoteDirection",
]
