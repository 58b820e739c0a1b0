"""Policy routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from agora.application.usecase.policy import (
    CreatePolicyRequest,
    CreatePolicyResponse,
    CreatePolicyUseCase,
    DeletePolicyRequest,
    DeletePolicyResponse,
    DeletePolicyUseCase,
    GetPolicyDashboardRequest,
    GetPolicyDashboardResponse,
    GetPolicyDashboardUseCase,
    GetPolicyRequest,
    GetPolicyResponse,
    GetPolicyUseCase,
    ListAccessiblePoliciesRequest,
    ListAccessiblePoliciesResponse,
    ListAccessiblePoliciesUseCase,
    ListPoliciesRequest,
    ListPoliciesResponse,
    ListPoliciesUseCase,
)
from agora.domain.service import JWTService
from agora.domain.value import PolicyAnalysis
from agora.interface.error import require_identity, translate_errors

router = APIRouter(prefix="/policies", tags=["policies"], route_class=DishkaRoute)


class CreatePolicyAPIRequest(BaseModel):
    """API request for publishing a policy."""

    title: str
    content: str
    organization_id: str | None = None
    target_law_name: str | None = None
    target_law_text: str | None = None
    analysis: PolicyAnalysis | None = Field(
        default=None, description="Precomputed text analysis of the draft"
    )


@router.get("", response_model=ListPoliciesResponse)
async def list_policies(
    list_policies_use_case: FromDishka[ListPoliciesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListPoliciesResponse:
    """List published policies visible to the caller.

    Anonymous callers get an empty list.
    """
    identity = jwt_service.get_identity_from_token(auth_token)

    with translate_errors("load policies"):
        return await list_policies_use_case.execute(
            ListPoliciesRequest(identity=identity)
        )


@router.post("", response_model=CreatePolicyResponse, status_code=status.HTTP_201_CREATED)
async def create_policy(
    request: CreatePolicyAPIRequest,
    create_policy_use_case: FromDishka[CreatePolicyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatePolicyResponse:
    """Publish a new policy.

    Requires authentication. Publishing for an organization requires
    membership of it.

    Args:
        request: Policy draft
        create_policy_use_case: Create policy use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        ID and title of the published policy
    """
    identity = require_identity(
        jwt_service, auth_token, "You must be signed in to create a policy."
    )

    with translate_errors("create policy"):
        return await create_policy_use_case.execute(
            CreatePolicyRequest(
                identity=identity,
                title=request.title,
                content=request.content,
                organization_id=request.organization_id,
                target_law_name=request.target_law_name,
                target_law_text=request.target_law_text,
                analysis=request.analysis,
            )
        )


@router.get("/accessible", response_model=ListAccessiblePoliciesResponse)
async def list_accessible_policies(
    list_accessible_policies_use_case: FromDishka[ListAccessiblePoliciesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListAccessiblePoliciesResponse:
    """List policies published by the caller's organizations and their parents."""
    identity = require_identity(jwt_service, auth_token, "Unauthorized.")

    with translate_errors("load accessible policies"):
        return await list_accessible_policies_use_case.execute(
            ListAccessiblePoliciesRequest(identity=identity)
        )


@router.get("/{policy_id}", response_model=GetPolicyResponse)
async def get_policy(
    policy_id: str,
    get_policy_use_case: FromDishka[GetPolicyUseCase],
) -> GetPolicyResponse:
    """Get a policy and record a view."""
    with translate_errors("load policy"):
        return await get_policy_use_case.execute(GetPolicyRequest(policy_id=policy_id))


@router.delete("/{policy_id}", response_model=DeletePolicyResponse)
async def delete_policy(
    policy_id: str,
    delete_policy_use_case: FromDishka[DeletePolicyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeletePolicyResponse:
    """Soft-delete a policy. Only its author may do this."""
    identity = require_identity(jwt_service, auth_token, "Unauthorized.")

    with translate_errors("delete policy"):
        return await delete_policy_use_case.execute(
            DeletePolicyRequest(policy_id=policy_id, identity=identity)
        )


@router.get("/{policy_id}/dashboard", response_model=GetPolicyDashboardResponse)
async def get_policy_dashboard(
    policy_id: str,
    get_policy_dashboard_use_case: FromDishka[GetPolicyDashboardUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetPolicyDashboardResponse:
    """Engagement statistics and timelines for the policy's author."""
    identity = require_identity(jwt_service, auth_token, "Unauthorized.")

    with translate_errors("load dashboard"):
        return await get_policy_dashboard_use_case.execute(
            GetPolicyDashboardRequest(policy_id=policy_id, identity=identity)
        )
