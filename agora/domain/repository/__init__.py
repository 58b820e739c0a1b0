"""Repository interfaces for Agora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from agora.domain.repository.access_request import AccessRequestRepository
from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.endorsement import EndorsementRepository
from agora.domain.repository.organization import OrganizationRepository
from agora.domain.repository.petition_signature import PetitionSignatureRepository
from agora.domain.repository.policy import PolicyRepository
from agora.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PolicyRepository",
    "CommentRepository",
    "OrganizationRepository",
    "AccessRequestRepository",
    "EndorsementRepository",
    "PetitionSignatureRepository",
]
