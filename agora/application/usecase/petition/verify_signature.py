"""Verify signature use case."""

from pydantic import BaseModel

from agora.domain.error import ValidationError
from agora.domain.service import PetitionService


class VerifySignatureRequest(BaseModel):
    """Verify signature request."""

    token: str  # Token from the verification link


class VerifySignatureResponse(BaseModel):
    """Verify signature response."""

    verified: bool
    policy_id: str
    message: str


class VerifySignatureUseCase:
    """Use case for confirming a petition signature from its emailed link."""

    def __init__(self, petition_service: PetitionService) -> None:
        self.petition_service = petition_service

    async def execute(self, request: VerifySignatureRequest) -> VerifySignatureResponse:
        """Execute verify flow.

        Raises:
            ValidationError: If the token is blank
            NotFoundError: If no signature is waiting on this token
        """
        token = request.token.strip()
        if not token:
            raise ValidationError("Missing verification token.")

        signature, newly_verified = await self.petition_service.verify(token)
        message = (
            "Your signature has been verified! Thank you for signing."
            if newly_verified
            else "Your signature has already been verified!"
        )
        return VerifySignatureResponse(
            verified=True, policy_id=str(signature.policy_id), message=message
        )
