"""Sign petition use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import PetitionService, PolicyService, UserService
from agora.domain.value import Identity, PolicyId


class SignPetitionRequest(BaseModel):
    """Sign petition request."""

    policy_id: str  # UUID string
    identity: Identity
    full_name: str
    location: str | None = None


class SignPetitionResponse(BaseModel):
    """Sign petition response."""

    signed: bool = True
    signature_id: str
    email_verified: bool
    count: int
    message: str = "Petition signed! Please check your email to verify your signature."


class SignPetitionUseCase:
    """Use case for signing a policy's petition."""

    def __init__(
        self,
        petition_service: PetitionService,
        policy_service: PolicyService,
        user_service: UserService,
    ) -> None:
        """Initialize sign petition use case.

        Args:
            petition_service: Petition domain service
            policy_service: Policy domain service
            user_service: User domain service
        """
        self.petition_service = petition_service
        self.policy_service = policy_service
        self.user_service = user_service

    async def execute(self, request: SignPetitionRequest) -> SignPetitionResponse:
        """Execute sign petition flow.

        Raises:
            NotFoundError: If the policy isn't published or was deleted
            ValidationError: If the full name is empty
            BusinessRuleViolationError: If the caller already signed
        """
        policy = await self.policy_service.get_published_policy(
            PolicyId(UUID(request.policy_id))
        )
        user = await self.user_service.ensure_user(request.identity)

        signature = await self.petition_service.sign(
            policy, user, full_name=request.full_name, location=request.location
        )

        return SignPetitionResponse(
            signature_id=str(signature.id),
            email_verified=signature.email_verified,
            count=await self.petition_service.count(policy.id),
        )
