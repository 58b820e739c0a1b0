"""In-memory repository implementations for testing."""

from .access_request import InMemoryAccessRequestRepository
from .comment import InMemoryCommentRepository
from .endorsement import InMemoryEndorsementRepository
from .organization import InMemoryOrganizationRepository
from .petition_signature import InMemoryPetitionSignatureRepository
from .policy import InMemoryPolicyRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAccessRequestRepository",
    "InMemoryCommentRepository",
    "InMemoryEndorsementRepository",
    "InMemoryOrganizationRepository",
    "InMemoryPetitionSignatureRepository",
    "InMemoryPolicyRepository",
    "InMemoryUserRepository",
]
