"""Endorsement routes.

Individual endorsements live under the policy; organization endorsements
are made by an organization admin under the organization.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from agora.application.usecase.endorsement import (
    EndorsePolicyRequest,
    EndorsePolicyResponse,
    EndorsePolicyUseCase,
    ListEndorsementsRequest,
    ListEndorsementsResponse,
    ListEndorsementsUseCase,
    RemoveEndorsementRequest,
    RemoveEndorsementUseCase,
)
from agora.domain.service import JWTService
from agora.interface.error import require_identity, translate_errors

router = APIRouter(tags=["endorsements"], route_class=DishkaRoute)


class OrganizationEndorseAPIRequest(BaseModel):
    """API request for endorsing a policy on behalf of an organization."""

    policy_id: str
    statement: str | None = None


@router.get(
    "/policies/{policy_id}/endorsements", response_model=ListEndorsementsResponse
)
async def list_endorsements(
    policy_id: str,
    list_endorsements_use_case: FromDishka[ListEndorsementsUseCase],
) -> ListEndorsementsResponse:
    """List a policy's endorsements, newest first."""
    with translate_errors("load endorsements"):
        return await list_endorsements_use_case.execute(
            ListEndorsementsRequest(policy_id=policy_id)
        )


@router.post(
    "/policies/{policy_id}/endorse",
    response_model=EndorsePolicyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def endorse_policy(
    policy_id: str,
    endorse_policy_use_case: FromDishka[EndorsePolicyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EndorsePolicyResponse:
    """Endorse a policy as yourself."""
    identity = require_identity(
        jwt_service, auth_token, "You must be signed in to endorse."
    )

    with translate_errors("endorse policy"):
        return await endorse_policy_use_case.execute(
            EndorsePolicyRequest(policy_id=policy_id, identity=identity)
        )


@router.delete("/policies/{policy_id}/endorse", response_model=EndorsePolicyResponse)
async def remove_endorsement(
    policy_id: str,
    remove_endorsement_use_case: FromDishka[RemoveEndorsementUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EndorsePolicyResponse:
    """Withdraw your own endorsement."""
    identity = require_identity(jwt_service, auth_token, "Unauthorized.")

    with translate_errors("remove endorsement"):
        return await remove_endorsement_use_case.execute(
            RemoveEndorsementRequest(policy_id=policy_id, identity=identity)
        )


@router.post(
    "/organizations/{organization_id}/endorse",
    response_model=EndorsePolicyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def endorse_policy_as_organization(
    organization_id: str,
    request: OrganizationEndorseAPIRequest,
    endorse_policy_use_case: FromDishka[EndorsePolicyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EndorsePolicyResponse:
    """Endorse a policy on behalf of an organization you administer."""
    identity = require_identity(
        jwt_service, auth_token, "You must be signed in to endorse."
    )

    with translate_errors("endorse policy"):
        return await endorse_policy_use_case.execute(
            EndorsePolicyRequest(
                policy_id=request.policy_id,
                identity=identity,
                organization_id=organization_id,
                statement=request.statement,
            )
        )


@router.delete(
    "/organizations/{organization_id}/endorse", response_model=EndorsePolicyResponse
)
async def remove_organization_endorsement(
    organization_id: str,
    remove_endorsement_use_case: FromDishka[RemoveEndorsementUseCase],
    jwt_service: FromDishka[JWTService],
    policy_id: str = Query(),
    auth_token: str | None = Cookie(default=None),
) -> EndorsePolicyResponse:
    """Withdraw an organization's endorsement. Admins only."""
    identity = require_identity(jwt_service, auth_token, "Unauthorized.")

    with translate_errors("remove endorsement"):
        return await remove_endorsement_use_case.execute(
            RemoveEndorsementRequest(
                policy_id=policy_id,
                identity=identity,
                organization_id=organization_id,
            )
        )
