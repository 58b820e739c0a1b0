"""Policy use cases."""

from .create_policy import (
    CreatePolicyRequest,
    CreatePolicyResponse,
    CreatePolicyUseCase,
)
from .delete_policy import (
    DeletePolicyRequest,
    DeletePolicyResponse,
    DeletePolicyUseCase,
)
from .get_policy import GetPolicyRequest, GetPolicyResponse, GetPolicyUseCase
from .get_policy_dashboard import (
    GetPolicyDashboardRequest,
    GetPolicyDashboardResponse,
    GetPolicyDashboardUseCase,
)
from .list_accessible_policies import (
    ListAccessiblePoliciesRequest,
    ListAccessiblePoliciesResponse,
    ListAccessiblePoliciesUseCase,
)
from .list_policies import (
    ListPoliciesRequest,
    ListPoliciesResponse,
    ListPoliciesUseCase,
    PolicySummary,
)

__all__ = [
    "CreatePolicyRequest",
    "CreatePolicyResponse",
    "CreatePolicyUseCase",
    "DeletePolicyRequest",
    "DeletePolicyResponse",
    "DeletePolicyUseCase",
    "GetPolicyRequest",
    "GetPolicyResponse",
    "GetPolicyUseCase",
    "GetPolicyDashboardRequest",
    "GetPolicyDashboardResponse",
    "GetPolicyDashboardUseCase",
    "ListAccessiblePoliciesRequest",
    "ListAccessiblePoliciesResponse",
    "ListAccessiblePoliciesUseCase",
    "ListPoliciesRequest",
    "ListPoliciesResponse",
    "ListPoliciesUseCase",
    "PolicySummary",
]
