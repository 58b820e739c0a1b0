"""Factories for domain objects and session tokens used across tests."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from agora.config import Settings
from agora.domain.model import Comment, Organization, Policy, User
from agora.domain.value import (
    CommentId,
    Identity,
    OrganizationId,
    PolicyId,
    UserId,
)
from agora.util.jwt import create_token

# Fixed reference time so creation order is explicit in tests
BASE_TIME = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: float) -> datetime:
    """Timestamp ``minutes`` after the reference time."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_identity(external_id: str | None = None, name: str | None = "Test User"):
    """Verified identity as the identity provider would report it."""
    external_id = external_id or f"user_{uuid4().hex[:12]}"
    return Identity(
        external_id=external_id, email=f"{external_id}@example.org", name=name
    )


def make_token(identity: Identity) -> str:
    """Session token for an identity, signed with the configured secret."""
    return create_token(
        identity.external_id, identity.email, identity.name, Settings().auth
    )


def make_user(name: str | None = "Test User", **overrides) -> User:
    user_id = UserId(uuid4())
    values = dict(
        id=user_id,
        external_id=f"user_{user_id.hex[:12]}",
        email=f"{user_id.hex[:8]}@example.org",
        name=name,
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )
    values.update(overrides)
    return User(**values)


def make_policy(author_id: UserId | None = None, **overrides) -> Policy:
    values = dict(
        id=PolicyId(uuid4()),
        title="Safer Streets Act",
        content="Lower the urban speed limit to 30 km/h.",
        published=True,
        published_at=BASE_TIME,
        author_id=author_id or UserId(uuid4()),
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )
    values.update(overrides)
    return Policy(**values)


def make_comment(
    policy_id: PolicyId,
    created_at: datetime = BASE_TIME,
    parent_id: CommentId | None = None,
    upvotes: int = 0,
    downvotes: int = 0,
    deleted: bool = False,
    **overrides,
) -> Comment:
    values = dict(
        id=CommentId(uuid4()),
        policy_id=policy_id,
        author_id=UserId(uuid4()),
        author_name="Commenter",
        content="I support this.",
        parent_id=parent_id,
        upvotes=upvotes,
        downvotes=downvotes,
        created_at=created_at,
        updated_at=created_at,
        deleted_at=created_at + timedelta(seconds=1) if deleted else None,
    )
    values.update(overrides)
    return Comment(**values)


def make_organization(name: str = "Cyclists Union", **overrides) -> Organization:
    values = dict(
        id=OrganizationId(uuid4()),
        name=name,
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )
    values.update(overrides)
    return Organization(**values)


def auth_headers(name: str = "Test User") -> dict[str, str]:
    """Session cookie header for a fresh signed-in user."""
    token = make_token(make_identity(name=name))
    return {"Cookie": f"auth_token={token}"}
