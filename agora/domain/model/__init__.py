"""Domain model entities for Agora."""

from agora.domain.model.access_request import AccessRequest
from agora.domain.model.comment import Comment, CommentPage, CommentThread
from agora.domain.model.endorsement import Endorsement
from agora.domain.model.organization import Organization, OrganizationMember
from agora.domain.model.petition_signature import PetitionSignature
from agora.domain.model.policy import Policy
from agora.domain.model.user import User

__all__ = [
    "User",
    "Policy",
    "Comment",
    "CommentThread",
    "CommentPage",
    "Organization",
    "OrganizationMember",
    "AccessRequest",
    "Endorsement",
    "PetitionSignature",
]
