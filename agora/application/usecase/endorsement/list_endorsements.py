"""List endorsements use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import (
    EndorsementService,
    OrganizationService,
    PolicyService,
    UserService,
)
from agora.domain.value import EndorsementType, PolicyId


class EndorsementItem(BaseModel):
    """Endorsement in response.

    Individual endorsements carry the user's name and location;
    organization endorsements carry the organization's name and badge.
    """

    endorsement_id: str
    type: EndorsementType
    statement: str | None
    created_at: datetime
    user_name: str | None = None
    user_location: str | None = None
    organization_id: str | None = None
    organization_name: str | None = None
    organization_verified: bool | None = None


class ListEndorsementsRequest(BaseModel):
    """List endorsements request."""

    policy_id: str  # UUID string


class ListEndorsementsResponse(BaseModel):
    """List endorsements response."""

    endorsements: list[EndorsementItem]


class ListEndorsementsUseCase:
    """Use case for listing a policy's endorsements, newest first."""

    def __init__(
        self,
        endorsement_service: EndorsementService,
        policy_service: PolicyService,
        user_service: UserService,
        organization_service: OrganizationService,
    ) -> None:
        self.endorsement_service = endorsement_service
        self.policy_service = policy_service
        self.user_service = user_service
        self.organization_service = organization_service

    async def execute(
        self, request: ListEndorsementsRequest
    ) -> ListEndorsementsResponse:
        """Execute list endorsements flow.

        Raises:
            NotFoundError: If the policy is missing or deleted
        """
        policy = await self.policy_service.get_policy(PolicyId(UUID(request.policy_id)))
        endorsements = await self.endorsement_service.list_for_policy(policy.id)

        users = await self.user_service.get_many(
            [e.user_id for e in endorsements if e.user_id]
        )
        organizations = await self.organization_service.get_many(
            [e.organization_id for e in endorsements if e.organization_id]
        )

        items = []
        for endorsement in endorsements:
            item = EndorsementItem(
                endorsement_id=str(endorsement.id),
                type=endorsement.type,
                statement=endorsement.statement,
                created_at=endorsement.created_at,
            )
            if endorsement.type == EndorsementType.ORGANIZATION:
                organization = organizations.get(endorsement.organization_id)
                item.organization_id = str(endorsement.organization_id)
                if organization:
                    item.organization_name = organization.name
                    item.organization_verified = organization.verified
            else:
                user = users.get(endorsement.user_id)
                if user:
                    item.user_name = user.name
                    item.user_location = user.location
            items.append(item)

        return ListEndorsementsResponse(endorsements=items)
