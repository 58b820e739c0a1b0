"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from agora.domain.model import (
    AccessRequest,
    Comment,
    Endorsement,
    Organization,
    OrganizationMember,
    PetitionSignature,
    Policy,
    User,
)
from agora.domain.value import (
    AccessRequestId,
    AccessRequestStatus,
    CommentId,
    EndorsementId,
    EndorsementType,
    MembershipId,
    MemberRole,
    OrganizationId,
    PolicyId,
    SignatureId,
    UserId,
)


def _as_uuid(value: Any) -> Optional[UUID]:
    """asyncpg returns UUID objects; raw SQL or fixtures may hand us strings."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_as_uuid(row["id"])),
        external_id=row["external_id"],
        email=row["email"],
        name=row.get("name"),
        location=row.get("location"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_policy(row: Dict[str, Any]) -> Policy:
    """Convert database row to Policy domain model."""
    organization_id = _as_uuid(row.get("organization_id"))
    return Policy(
        id=PolicyId(_as_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        summary=row.get("summary"),
        jurisdiction=row.get("jurisdiction"),
        category=row.get("category"),
        target_law_name=row.get("target_law_name"),
        target_law_text=row.get("target_law_text"),
        readability_score=row.get("readability_score"),
        potential_conflicts=row.get("potential_conflicts"),
        affected_groups=row.get("affected_groups"),
        published=row["published"],
        published_at=row.get("published_at"),
        view_count=row["view_count"],
        author_id=UserId(_as_uuid(row["author_id"])),
        organization_id=OrganizationId(organization_id) if organization_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def policy_to_dict(policy: Policy) -> Dict[str, Any]:
    """Convert Policy domain model to database dict."""
    return policy.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = _as_uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        policy_id=PolicyId(_as_uuid(row["policy_id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        author_name=row.get("author_name"),
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id else None,
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_organization(row: Dict[str, Any]) -> Organization:
    """Convert database row to Organization domain model."""
    parent_id = _as_uuid(row.get("parent_id"))
    return Organization(
        id=OrganizationId(_as_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        website=row.get("website"),
        logo_url=row.get("logo_url"),
        verified=row["verified"],
        parent_id=OrganizationId(parent_id) if parent_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def organization_to_dict(organization: Organization) -> Dict[str, Any]:
    """Convert Organization domain model to database dict."""
    return organization.model_dump()


def row_to_member(row: Dict[str, Any]) -> OrganizationMember:
    """Convert database row to OrganizationMember domain model."""
    return OrganizationMember(
        id=MembershipId(_as_uuid(row["id"])),
        organization_id=OrganizationId(_as_uuid(row["organization_id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        role=MemberRole(row["role"]),
        created_at=row["created_at"],
    )


def member_to_dict(member: OrganizationMember) -> Dict[str, Any]:
    """Convert OrganizationMember domain model to database dict."""
    data = member.model_dump()
    data["role"] = member.role.value
    return data


def row_to_access_request(row: Dict[str, Any]) -> AccessRequest:
    """Convert database row to AccessRequest domain model."""
    reviewed_by_id = _as_uuid(row.get("reviewed_by_id"))
    return AccessRequest(
        id=AccessRequestId(_as_uuid(row["id"])),
        organization_id=OrganizationId(_as_uuid(row["organization_id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        status=AccessRequestStatus(row["status"]),
        message=row.get("message"),
        reviewed_by_id=UserId(reviewed_by_id) if reviewed_by_id else None,
        reviewed_at=row.get("reviewed_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def access_request_to_dict(access_request: AccessRequest) -> Dict[str, Any]:
    """Convert AccessRequest domain model to database dict."""
    data = access_request.model_dump()
    data["status"] = access_request.status.value
    return data


def row_to_endorsement(row: Dict[str, Any]) -> Endorsement:
    """Convert database row to Endorsement domain model."""
    user_id = _as_uuid(row.get("user_id"))
    organization_id = _as_uuid(row.get("organization_id"))
    return Endorsement(
        id=EndorsementId(_as_uuid(row["id"])),
        policy_id=PolicyId(_as_uuid(row["policy_id"])),
        type=EndorsementType(row["type"]),
        user_id=UserId(user_id) if user_id else None,
        organization_id=OrganizationId(organization_id) if organization_id else None,
        statement=row.get("statement"),
        created_at=row["created_at"],
    )


def endorsement_to_dict(endorsement: Endorsement) -> Dict[str, Any]:
    """Convert Endorsement domain model to database dict."""
    data = endorsement.model_dump()
    data["type"] = endorsement.type.value
    return data


def row_to_signature(row: Dict[str, Any]) -> PetitionSignature:
    """Convert database row to PetitionSignature domain model."""
    return PetitionSignature(
        id=SignatureId(_as_uuid(row["id"])),
        policy_id=PolicyId(_as_uuid(row["policy_id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        full_name=row["full_name"],
        location=row.get("location"),
        email_verified=row["email_verified"],
        verification_token=row.get("verification_token"),
        created_at=row["created_at"],
    )


def signature_to_dict(signature: PetitionSignature) -> Dict[str, Any]:
    """Convert PetitionSignature domain model to database dict."""
    return signature.model_dump()
