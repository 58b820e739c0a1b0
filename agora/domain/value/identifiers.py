"""Strongly typed identifiers for Agora domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PolicyId = NewType("PolicyId", UUID)
CommentId = NewType("CommentId", UUID)
OrganizationId = NewType("OrganizationId", UUID)
MembershipId = NewType("MembershipId", UUID)
AccessRequestId = NewType("AccessRequestId", UUID)
EndorsementId = NewType("EndorsementId", UUID)
SignatureId = NewType("SignatureId", UUID)
