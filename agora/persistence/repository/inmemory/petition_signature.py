"""In-memory petition signature repository for testing."""

from typing import Optional, Sequence

from agora.domain.model.petition_signature import PetitionSignature
from agora.domain.repository.petition_signature import PetitionSignatureRepository
from agora.domain.value import PolicyId, SignatureId, UserId


class InMemoryPetitionSignatureRepository(PetitionSignatureRepository):
    """In-memory implementation of PetitionSignatureRepository for testing."""

    def __init__(self) -> None:
        self._signatures: dict[SignatureId, PetitionSignature] = {}

    async def find_by_policy_and_user(
        self, policy_id: PolicyId, user_id: UserId
    ) -> Optional[PetitionSignature]:
        """Find a user's signature on a policy."""
        for s in self._signatures.values():
            if s.policy_id == policy_id and s.user_id == user_id:
                return s
        return None

    async def find_by_token(self, token: str) -> Optional[PetitionSignature]:
        """Find a signature by verification token."""
        for s in self._signatures.values():
            if s.verification_token == token:
                return s
        return None

    async def find_by_policy(
        self,
        policy_id: PolicyId,
        verified_only: bool = False,
        limit: Optional[int] = None,
    ) -> list[PetitionSignature]:
        """List a policy's signatures, newest first."""
        signatures = [s for s in self._signatures.values() if s.policy_id == policy_id]
        if verified_only:
            signatures = [s for s in signatures if s.email_verified]
        signatures.sort(key=lambda s: s.created_at, reverse=True)
        return signatures[:limit] if limit is not None else signatures

    async def count_by_policy(
        self, policy_id: PolicyId, verified_only: bool = False
    ) -> int:
        """Count a policy's signatures."""
        return len(await self.find_by_policy(policy_id, verified_only=verified_only))

    async def count_by_policies(
        self, policy_ids: Sequence[PolicyId]
    ) -> dict[PolicyId, int]:
        """Count signatures of each policy."""
        counts: dict[PolicyId, int] = {}
        wanted = set(policy_ids)
        for s in self._signatures.values():
            if s.policy_id in wanted:
                counts[s.policy_id] = counts.get(s.policy_id, 0) + 1
        return counts

    async def save(self, signature: PetitionSignature) -> PetitionSignature:
        """Save a signature."""
        self._signatures[signature.id] = signature
        return signature
