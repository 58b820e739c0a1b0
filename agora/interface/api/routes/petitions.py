"""Petition routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from agora.application.usecase.petition import (
    ListSignaturesRequest,
    ListSignaturesResponse,
    ListSignaturesUseCase,
    SignPetitionRequest,
    SignPetitionResponse,
    SignPetitionUseCase,
    VerifySignatureRequest,
    VerifySignatureResponse,
    VerifySignatureUseCase,
)
from agora.domain.service import JWTService
from agora.interface.error import require_identity, translate_errors

router = APIRouter(tags=["petitions"], route_class=DishkaRoute)


class SignPetitionAPIRequest(BaseModel):
    """API request for signing a policy's petition."""

    full_name: str
    location: str | None = None


@router.post(
    "/policies/{policy_id}/sign",
    response_model=SignPetitionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def sign_petition(
    policy_id: str,
    request: SignPetitionAPIRequest,
    sign_petition_use_case: FromDishka[SignPetitionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SignPetitionResponse:
    """Sign a policy's petition.

    The signature only counts once the emailed verification link is
    followed.
    """
    identity = require_identity(
        jwt_service, auth_token, "You must be signed in to sign."
    )

    with translate_errors("sign petition"):
        return await sign_petition_use_case.execute(
            SignPetitionRequest(
                policy_id=policy_id,
                identity=identity,
                full_name=request.full_name,
                location=request.location,
            )
        )


@router.get("/policies/{policy_id}/sign", response_model=ListSignaturesResponse)
async def list_signatures(
    policy_id: str,
    list_signatures_use_case: FromDishka[ListSignaturesUseCase],
) -> ListSignaturesResponse:
    """List verified signatures, newest first."""
    with translate_errors("load signatures"):
        return await list_signatures_use_case.execute(
            ListSignaturesRequest(policy_id=policy_id)
        )


@router.get("/petitions/verify", response_model=VerifySignatureResponse)
async def verify_signature(
    verify_signature_use_case: FromDishka[VerifySignatureUseCase],
    token: str = Query(default=""),
) -> VerifySignatureResponse:
    """Verify a signature from its emailed link."""
    with translate_errors("verify signature"):
        return await verify_signature_use_case.execute(
            VerifySignatureRequest(token=token)
        )
