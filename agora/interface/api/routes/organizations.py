"""Organization routes: profiles, membership and access requests."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from agora.application.usecase.organization import (
    CreateOrganizationRequest,
    CreateOrganizationResponse,
    CreateOrganizationUseCase,
    GetOrganizationRequest,
    GetOrganizationResponse,
    GetOrganizationUseCase,
    JoinOrganizationRequest,
    JoinOrganizationResponse,
    JoinOrganizationUseCase,
    ListAccessRequestsRequest,
    ListAccessRequestsResponse,
    ListAccessRequestsUseCase,
    ListMembersRequest,
    ListMembersResponse,
    ListMembersUseCase,
    ListOrganizationsRequest,
    ListOrganizationsResponse,
    ListOrganizationsUseCase,
    RemoveMemberRequest,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    RequestAccessRequest,
    RequestAccessResponse,
    RequestAccessUseCase,
    ReviewAccessRequestRequest,
    ReviewAccessRequestResponse,
    ReviewAccessRequestUseCase,
    UpdateOrganizationRequest,
    UpdateOrganizationResponse,
    UpdateOrganizationUseCase,
)
from agora.domain.service import JWTService
from agora.interface.error import require_identity, translate_errors

router = APIRouter(
    prefix="/organizations", tags=["organizations"], route_class=DishkaRoute
)


class CreateOrganizationAPIRequest(BaseModel):
    """API request for creating an organization."""

    name: str
    description: str | None = None
    website: str | None = None


class UpdateOrganizationAPIRequest(BaseModel):
    """API request for updating an organization.

    Only fields present in the body are changed.
    """

    name: str | None = None
    description: str | None = None
    website: str | None = None


class RequestAccessAPIRequest(BaseModel):
    """API request for asking to join an organization."""

    message: str | None = None


class ReviewAccessRequestAPIRequest(BaseModel):
    """API request for approving or denying an access request."""

    request_id: str
    action: str  # "approve" or "deny"


@router.get("", response_model=ListOrganizationsResponse)
async def list_organizations(
    list_organizations_use_case: FromDishka[ListOrganizationsUseCase],
    jwt_service: FromDishka[JWTService],
    search: str | None = Query(default=None),
    membership: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListOrganizationsResponse:
    """Search organizations, or list the caller's own with ``membership``.

    Args:
        list_organizations_use_case: List organizations use case from DI
        jwt_service: JWT service for token verification (injected)
        search: Case-insensitive name filter
        membership: "admin" or "member" to list the caller's organizations
        auth_token: JWT token from cookie

    Returns:
        Matching organizations with counts
    """
    if membership:
        identity = require_identity(jwt_service, auth_token, "Unauthorized.")
    else:
        identity = jwt_service.get_identity_from_token(auth_token)

    with translate_errors("load organizations"):
        return await list_organizations_use_case.execute(
            ListOrganizationsRequest(
                search=search, membership=membership, identity=identity
            )
        )


@router.post(
    "", response_model=CreateOrganizationResponse, status_code=status.HTTP_201_CREATED
)
async def create_organization(
    request: CreateOrganizationAPIRequest,
    create_organization_use_case: FromDishka[CreateOrganizationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateOrganizationResponse:
    """Create an organization. The creator becomes its first admin."""
    identity = require_identity(
        jwt_service, auth_token, "You must be signed in to create an organization."
    )

    with translate_errors("create organization"):
        return await create_organization_use_case.execute(
            CreateOrganizationRequest(
                identity=identity,
                name=request.name,
                description=request.description,
                website=request.website,
            )
        )


@router.get("/{organization_id}", response_model=GetOrganizationResponse)
async def get_organization(
    organization_id: str,
    get_organization_use_case: FromDishka[GetOrganizationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetOrganizationResponse:
    """Organization profile with recent policies and endorsements."""
    identity = jwt_service.get_identity_from_token(auth_token)

    with translate_errors("load organization"):
        return await get_organization_use_case.execute(
            GetOrganizationRequest(organization_id=organization_id, identity=identity)
        )


@router.patch("/{organization_id}", response_model=UpdateOrganizationResponse)
async def update_organization(
    organization_id: str,
    request: UpdateOrganizationAPIRequest,
    update_organization_use_case: FromDishka[UpdateOrganizationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateOrganizationResponse:
    """Update an organization's profile. Admins only."""
    identity = require_identity(jwt_service, auth_token, "Unauthorized.")

    # Forward only the fields the client sent so omitted ones stay untouched
    changes = request.model_dump(exclude_unset=True)

    with translate_errors("update organization"):
        return await update_organization_use_case.execute(
            UpdateOrganizationRequest(
                organization_id=organization_id, identity=identity, **changes
            )
        )


@router.get("/{organization_id}/members", response_model=ListMembersResponse)
async def list_members(
    organization_id: str,
    list_members_use_case: FromDishka[ListMembersUseCase],
) -> ListMembersResponse:
    """List members, oldest first."""
    with translate_errors("load members"):
        return await list_members_use_case.execute(
            ListMembersRequest(organization_id=organization_id)
        )


@router.post(
    "/{organization_id}/members",
    response_model=JoinOrganizationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def join_organization(
    organization_id: str,
    join_organization_use_case: FromDishka[JoinOrganizationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> JoinOrganizationResponse:
    """Join an organization as a member."""
    identity = require_identity(
        jwt_service, auth_token, "You must be signed in to join."
    )

    with translate_errors("join organization"):
        return await join_organization_use_case.execute(
            JoinOrganizationRequest(organization_id=organization_id, identity=identity)
        )


@router.delete("/{organization_id}/members", response_model=RemoveMemberResponse)
async def remove_member(
    organization_id: str,
    remove_member_use_case: FromDishka[RemoveMemberUseCase],
    jwt_service: FromDishka[JWTService],
    user_id: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> RemoveMemberResponse:
    """Leave an organization, or remove another member as an admin.

    Args:
        organization_id: Organization UUID
        remove_member_use_case: Remove member use case from DI
        jwt_service: JWT service for token verification (injected)
        user_id: Member to remove; omit to leave yourself
        auth_token: JWT token from cookie
    """
    identity = require_identity(jwt_service, auth_token, "Unauthorized.")

    with translate_errors("remove member"):
        return await remove_member_use_case.execute(
            RemoveMemberRequest(
                organization_id=organization_id, identity=identity, user_id=user_id
            )
        )


@router.get(
    "/{organization_id}/access-requests", response_model=ListAccessRequestsResponse
)
async def list_access_requests(
    organization_id: str,
    list_access_requests_use_case: FromDishka[ListAccessRequestsUseCase],
    jwt_service: FromDishka[JWTService],
    status_filter: str = Query(default="pending", alias="status"),
    auth_token: str | None = Cookie(default=None),
) -> ListAccessRequestsResponse:
    """List access requests in a given status. Admins only."""
    identity = require_identity(jwt_service, auth_token, "Unauthorized.")

    with translate_errors("load access requests"):
        return await list_access_requests_use_case.execute(
            ListAccessRequestsRequest(
                organization_id=organization_id,
                identity=identity,
                status=status_filter,
            )
        )


@router.post(
    "/{organization_id}/access-requests",
    response_model=RequestAccessResponse,
    status_code=status.HTTP_201_CREATED,
)
async def request_access(
    organization_id: str,
    request: RequestAccessAPIRequest,
    request_access_use_case: FromDishka[RequestAccessUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RequestAccessResponse:
    """Ask an organization's admins to let you in."""
    identity = require_identity(
        jwt_service, auth_token, "You must be signed in to request access."
    )

    with translate_errors("request access"):
        return await request_access_use_case.execute(
            RequestAccessRequest(
                organization_id=organization_id,
                identity=identity,
                message=request.message,
            )
        )


@router.patch(
    "/{organization_id}/access-requests", response_model=ReviewAccessRequestResponse
)
async def review_access_request(
    organization_id: str,
    request: ReviewAccessRequestAPIRequest,
    review_access_request_use_case: FromDishka[ReviewAccessRequestUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReviewAccessRequestResponse:
    """Approve or deny a pending access request. Admins only."""
    identity = require_identity(jwt_service, auth_token, "Unauthorized.")

    with translate_errors("review access request"):
        return await review_access_request_use_case.execute(
            ReviewAccessRequestRequest(
                organization_id=organization_id,
                identity=identity,
                request_id=request.request_id,
                action=request.action,
            )
        )
