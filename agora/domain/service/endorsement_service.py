"""Endorsement domain service."""

from typing import Sequence
from uuid import uuid4

import logfire

from agora.domain.error import BusinessRuleViolationError, NotFoundError
from agora.domain.model import Endorsement, Organization, Policy, User
from agora.domain.model.common import utc_now
from agora.domain.repository import EndorsementRepository
from agora.domain.value import (
    EndorsementId,
    EndorsementType,
    OrganizationId,
    PolicyId,
)

from .base import Service


class EndorsementService(Service):
    """Domain service for endorsing policies.

    Callers are responsible for checking that the policy is published and,
    for organization endorsements, that the acting user is an admin.
    """

    def __init__(self, endorsement_repository: EndorsementRepository) -> None:
        """Initialize endorsement service.

        Args:
            endorsement_repository: Endorsement repository
        """
        self.endorsement_repository = endorsement_repository

    async def endorse_as_user(
        self, policy: Policy, user: User, statement: str | None = None
    ) -> Endorsement:
        """Record a user's personal endorsement.

        Raises:
            BusinessRuleViolationError: If the user already endorsed the policy
        """
        with logfire.span(
            "endorsement_service.endorse_as_user",
            policy_id=str(policy.id),
            user_id=str(user.id),
        ):
            if await self.endorsement_repository.find_individual(policy.id, user.id):
                raise BusinessRuleViolationError(
                    "You have already endorsed this policy."
                )

            endorsement = await self.endorsement_repository.save(
                Endorsement(
                    id=EndorsementId(uuid4()),
                    policy_id=policy.id,
                    type=EndorsementType.INDIVIDUAL,
                    user_id=user.id,
                    statement=(statement or "").strip() or None,
                    created_at=utc_now(),
                )
            )
            logfire.info(
                "Policy endorsed",
                policy_id=str(policy.id),
                endorsement_id=str(endorsement.id),
                type=EndorsementType.INDIVIDUAL.value,
            )
            return endorsement

    async def endorse_as_organization(
        self,
        policy: Policy,
        organization: Organization,
        statement: str | None = None,
    ) -> Endorsement:
        """Record an organization's endorsement.

        Raises:
            BusinessRuleViolationError: If the organization already endorsed
                the policy
        """
        with logfire.span(
            "endorsement_service.endorse_as_organization",
            policy_id=str(policy.id),
            organization_id=str(organization.id),
        ):
            if await self.endorsement_repository.find_by_organization_and_policy(
                organization.id, policy.id
            ):
                raise BusinessRuleViolationError(
                    "This organization has already endorsed this policy."
                )

            endorsement = await self.endorsement_repository.save(
                Endorsement(
                    id=EndorsementId(uuid4()),
                    policy_id=policy.id,
                    type=EndorsementType.ORGANIZATION,
                    organization_id=organization.id,
                    statement=(statement or "").strip() or None,
                    created_at=utc_now(),
                )
            )
            logfire.info(
                "Policy endorsed",
                policy_id=str(policy.id),
                endorsement_id=str(endorsement.id),
                type=EndorsementType.ORGANIZATION.value,
            )
            return endorsement

    async def withdraw_user_endorsement(self, policy: Policy, user: User) -> None:
        """Remove a user's personal endorsement.

        Raises:
            NotFoundError: If the user hasn't endorsed the policy
        """
        with logfire.span(
            "endorsement_service.withdraw_user_endorsement",
            policy_id=str(policy.id),
            user_id=str(user.id),
        ):
            endorsement = await self.endorsement_repository.find_individual(
                policy.id, user.id
            )
            if not endorsement:
                raise NotFoundError("Endorsement", str(policy.id))
            await self.endorsement_repository.delete(endorsement)
            logfire.info("Endorsement withdrawn", endorsement_id=str(endorsement.id))

    async def withdraw_organization_endorsement(
        self, policy: Policy, organization: Organization
    ) -> None:
        """Remove an organization's endorsement.

        Raises:
            NotFoundError: If the organization hasn't endorsed the policy
        """
        with logfire.span(
            "endorsement_service.withdraw_organization_endorsement",
            policy_id=str(policy.id),
            organization_id=str(organization.id),
        ):
            endorsement = (
                await self.endorsement_repository.find_by_organization_and_policy(
                    organization.id, policy.id
                )
            )
            if not endorsement:
                raise NotFoundError("Endorsement", str(policy.id))
            await self.endorsement_repository.delete(endorsement)
            logfire.info("Endorsement withdrawn", endorsement_id=str(endorsement.id))

    async def list_for_policy(self, policy_id: PolicyId) -> list[Endorsement]:
        """List a policy's endorsements, newest first."""
        return await self.endorsement_repository.find_by_policy(policy_id)

    async def list_for_organization(
        self, organization_id: OrganizationId, limit: int = 20
    ) -> list[Endorsement]:
        """List an organization's endorsements, newest first."""
        return await self.endorsement_repository.find_by_organization(
            organization_id, limit=limit
        )

    async def count_for_policy(self, policy_id: PolicyId) -> int:
        """Count a policy's endorsements."""
        return await self.endorsement_repository.count_by_policy(policy_id)

    async def count_by_policies(
        self, policy_ids: Sequence[PolicyId]
    ) -> dict[PolicyId, int]:
        """Count endorsements of each policy. Policies with none are omitted."""
        if not policy_ids:
            return {}
        return await self.endorsement_repository.count_by_policies(policy_ids)

    async def count_by_organizations(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count endorsements made by each organization."""
        if not organization_ids:
            return {}
        return await self.endorsement_repository.count_by_organizations(
            organization_ids
        )
