"""Petition domain service."""

from typing import Sequence
from uuid import uuid4

import logfire

from agora.config import APISettings
from agora.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from agora.domain.model import PetitionSignature, Policy, User
from agora.domain.model.common import utc_now
from agora.domain.repository import PetitionSignatureRepository
from agora.domain.value import PolicyId, SignatureId

from .base import Service


class PetitionService(Service):
    """Domain service for petition signatures."""

    def __init__(
        self,
        signature_repository: PetitionSignatureRepository,
        api_settings: APISettings,
    ) -> None:
        """Initialize petition service.

        Args:
            signature_repository: Petition signature repository
            api_settings: API settings, used to build verification links
        """
        self.signature_repository = signature_repository
        self.api_settings = api_settings

    async def sign(
        self,
        policy: Policy,
        user: User,
        full_name: str,
        location: str | None = None,
    ) -> PetitionSignature:
        """Sign a policy's petition.

        The signature starts unverified with a fresh verification token.
        Email delivery is handled elsewhere; the link is logged.

        Raises:
            ValidationError: If the full name is empty
            BusinessRuleViolationError: If the user already signed
        """
        with logfire.span(
            "petition_service.sign", policy_id=str(policy.id), user_id=str(user.id)
        ):
            full_name = full_name.strip()
            if not full_name:
                raise ValidationError("Full name is required.")

            if await self.signature_repository.find_by_policy_and_user(
                policy.id, user.id
            ):
                raise BusinessRuleViolationError(
                    "You have already signed this petition."
                )

            signature = await self.signature_repository.save(
                PetitionSignature(
                    id=SignatureId(uuid4()),
                    policy_id=policy.id,
                    user_id=user.id,
                    full_name=full_name,
                    location=(location or "").strip() or None,
                    email_verified=False,
                    verification_token=str(uuid4()),
                    created_at=utc_now(),
                )
            )
            logfire.info(
                "Petition signed",
                signature_id=str(signature.id),
                policy_id=str(policy.id),
                verify_url=self.verification_url(signature),
            )
            return signature

    def verification_url(self, signature: PetitionSignature) -> str:
        """Link the signer follows to verify their signature."""
        return (
            f"{self.api_settings.base_url}/petitions/verify"
            f"?token={signature.verification_token}"
        )

    async def verify(self, token: str) -> tuple[PetitionSignature, bool]:
        """Verify a signature by its token.

        Args:
            token: Verification token from the emailed link

        Returns:
            The signature and whether this call verified it (False if it
            already was)

        Raises:
            NotFoundError: If no signature has this token
        """
        with logfire.span("petition_service.verify"):
            signature = await self.signature_repository.find_by_token(token)
            if not signature:
                logfire.warn("Unknown verification token")
                raise NotFoundError("Verification token", token)

            if signature.email_verified:
                return signature, False

            verified = await self.signature_repository.save(
                signature.model_copy(
                    update={"email_verified": True, "verification_token": None}
                )
            )
            logfire.info("Signature verified", signature_id=str(verified.id))
            return verified, True

    async def list_verified(
        self, policy_id: PolicyId, limit: int = 50
    ) -> list[PetitionSignature]:
        """List verified signatures, newest first."""
        return await self.signature_repository.find_by_policy(
            policy_id, verified_only=True, limit=limit
        )

    async def count(self, policy_id: PolicyId, verified_only: bool = False) -> int:
        """Count a policy's signatures."""
        return await self.signature_repository.count_by_policy(
            policy_id, verified_only=verified_only
        )

    async def count_by_policies(
        self, policy_ids: Sequence[PolicyId]
    ) -> dict[PolicyId, int]:
        """Count signatures of each policy. Policies with none are omitted."""
        if not policy_ids:
            return {}
        return await self.signature_repository.count_by_policies(policy_ids)
