"""Petition signature repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from agora.domain.model.petition_signature import PetitionSignature
from agora.domain.value import PolicyId, UserId


class PetitionSignatureRepository(ABC):
    """Repository for PetitionSignature entity."""

    @abstractmethod
    async def find_by_policy_and_user(
        self, policy_id: PolicyId, user_id: UserId
    ) -> Optional[PetitionSignature]:
        """Find a user's signature on a policy."""
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[PetitionSignature]:
        """Find a signature by its pending verification token."""
        pass

    @abstractmethod
    async def find_by_policy(
        self,
        policy_id: PolicyId,
        verified_only: bool = False,
        limit: Optional[int] = None,
    ) -> list[PetitionSignature]:
        """List a policy's signatures, newest first.

        Args:
            policy_id: The policy ID
            verified_only: Only return email-verified signatures
            limit: Maximum number to return, None for all

        Returns:
            Signatures
        """
        pass

    @abstractmethod
    async def count_by_policy(
        self, policy_id: PolicyId, verified_only: bool = False
    ) -> int:
        """Count a policy's signatures."""
        pass

    @abstractmethod
    async def count_by_policies(
        self, policy_ids: Sequence[PolicyId]
    ) -> dict[PolicyId, int]:
        """Count signatures of each policy. Policies with none are omitted."""
        pass

    @abstractmethod
    async def save(self, signature: PetitionSignature) -> PetitionSignature:
        """Save a signature (create or update)."""
        pass
