"""Organization use cases."""

from .create_organization import (
    CreateOrganizationRequest,
    CreateOrganizationResponse,
    CreateOrganizationUseCase,
)
from .get_organization import (
    GetOrganizationRequest,
    GetOrganizationResponse,
    GetOrganizationUseCase,
)
from .join_organization import (
    JoinOrganizationRequest,
    JoinOrganizationResponse,
    JoinOrganizationUseCase,
)
from .list_access_requests import (
    ListAccessRequestsRequest,
    ListAccessRequestsResponse,
    ListAccessRequestsUseCase,
)
from .list_members import ListMembersRequest, ListMembersResponse, ListMembersUseCase
from .list_organizations import (
    ListOrganizationsRequest,
    ListOrganizationsResponse,
    ListOrganizationsUseCase,
    OrganizationItem,
)
from .remove_member import RemoveMemberRequest, RemoveMemberResponse, RemoveMemberUseCase
from .request_access import (
    RequestAccessRequest,
    RequestAccessResponse,
    RequestAccessUseCase,
)
from .review_access_request import (
    ReviewAccessRequestRequest,
    ReviewAccessRequestResponse,
    ReviewAccessRequestUseCase,
)
from .update_organization import (
    UpdateOrganizationRequest,
    UpdateOrganizationResponse,
    UpdateOrganizationUseCase,
)

__all__ = [
    "CreateOrganizationRequest",
    "CreateOrganizationResponse",
    "CreateOrganizationUseCase",
    "GetOrganizationRequest",
    "GetOrganizationResponse",
    "GetOrganizationUseCase",
    "JoinOrganizationRequest",
    "JoinOrganizationResponse",
    "JoinOrganizationUseCase",
    "ListAccessRequestsRequest",
    "ListAccessRequestsResponse",
    "ListAccessRequestsUseCase",
    "ListMembersRequest",
    "ListMembersResponse",
    "ListMembersUseCase",
    "ListOrganizationsRequest",
    "ListOrganizationsResponse",
    "ListOrganizationsUseCase",
    "OrganizationItem",
    "RemoveMemberRequest",
    "RemoveMemberResponse",
    "RemoveMemberUseCase",
    "RequestAccessRequest",
    "RequestAccessResponse",
    "RequestAccessUseCase",
    "ReviewAccessRequestRequest",
    "ReviewAccessRequestResponse",
    "ReviewAccessRequestUseCase",
    "UpdateOrganizationRequest",
    "UpdateOrganizationResponse",
    "UpdateOrganizationUseCase",
]
