"""List signatures use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import PetitionService, PolicyService
from agora.domain.value import PolicyId


class SignatureItem(BaseModel):
    """Verified signature in response."""

    signature_id: str
    full_name: str
    location: str | None
    created_at: datetime


class ListSignaturesRequest(BaseModel):
    """List signatures request."""

    policy_id: str  # UUID string


class ListSignaturesResponse(BaseModel):
    """Latest verified signatures and the verified total."""

    signatures: list[SignatureItem]
    count: int


class ListSignaturesUseCase:
    """Use case for showing who verified their signature on a petition."""

    LIMIT = 50

    def __init__(
        self, petition_service: PetitionService, policy_service: PolicyService
    ) -> None:
        self.petition_service = petition_service
        self.policy_service = policy_service

    async def execute(self, request: ListSignaturesRequest) -> ListSignaturesResponse:
        """Execute list signatures flow.

        Raises:
            NotFoundError: If the policy is missing or deleted
        """
        policy = await self.policy_service.get_policy(PolicyId(UUID(request.policy_id)))
        signatures = await self.petition_service.list_verified(
            policy.id, limit=self.LIMIT
        )
        count = await self.petition_service.count(policy.id, verified_only=True)

        return ListSignaturesResponse(
            signatures=[
                SignatureItem(
                    signature_id=str(s.id),
                    full_name=s.full_name,
                    location=s.location,
                    created_at=s.created_at,
                )
                for s in signatures
            ],
            count=count,
        )
