"""Organization domain service."""

from typing import Sequence
from uuid import uuid4

import logfire

from agora.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from agora.domain.model import Organization, OrganizationMember, User
from agora.domain.model.common import utc_now
from agora.domain.model.organization import NAME_MAX_LENGTH
from agora.domain.repository import OrganizationRepository
from agora.domain.value import MembershipId, MemberRole, OrganizationId, UserId

from .base import Service

# Sentinel for "field not supplied" in partial updates
_UNSET = object()


class OrganizationService(Service):
    """Domain service for organizations and their memberships."""

    def __init__(self, organization_repository: OrganizationRepository) -> None:
        """Initialize organization service.

        Args:
            organization_repository: Organization repository
        """
        self.organization_repository = organization_repository

    async def create_organization(
        self,
        creator: User,
        name: str,
        description: str | None = None,
        website: str | None = None,
    ) -> Organization:
        """Create an organization with its creator as the first admin.

        Args:
            creator: User creating the organization
            name: Organization name, trimmed before storing
            description: Optional description
            website: Optional website URL

        Returns:
            Created organization

        Raises:
            ValidationError: If name is empty or too long
        """
        with logfire.span(
            "organization_service.create_organization", creator_id=str(creator.id)
        ):
            name = self._clean_name(name)
            now = utc_now()
            organization = await self.organization_repository.save(
                Organization(
                    id=OrganizationId(uuid4()),
                    name=name,
                    description=_clean_optional(description),
                    website=_clean_optional(website),
                    created_at=now,
                    updated_at=now,
                )
            )
            await self.add_member(organization.id, creator.id, MemberRole.ADMIN)
            logfire.info(
                "Organization created",
                organization_id=str(organization.id),
                creator_id=str(creator.id),
            )
            return organization

    async def get_organization(self, organization_id: OrganizationId) -> Organization:
        """Get an organization by ID.

        Raises:
            NotFoundError: If the organization doesn't exist
        """
        with logfire.span(
            "organization_service.get_organization",
            organization_id=str(organization_id),
        ):
            organization = await self.organization_repository.find_by_id(
                organization_id
            )
            if not organization:
                logfire.warn(
                    "Organization not found", organization_id=str(organization_id)
                )
                raise NotFoundError("Organization", str(organization_id))
            return organization

    async def get_many(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, Organization]:
        """Batch lookup of organizations keyed by ID."""
        unique_ids = list(dict.fromkeys(organization_ids))
        if not unique_ids:
            return {}
        organizations = await self.organization_repository.find_by_ids(unique_ids)
        return {organization.id: organization for organization in organizations}

    async def search(self, query: str | None = None) -> list[Organization]:
        """List organizations, optionally filtered by name."""
        with logfire.span("organization_service.search", query=query):
            query = (query or "").strip() or None
            organizations = await self.organization_repository.search(query)
            logfire.info("Organizations listed", count=len(organizations))
            return organizations

    async def update_organization(
        self,
        organization_id: OrganizationId,
        user: User,
        name: str | None | object = _UNSET,
        description: str | None | object = _UNSET,
        website: str | None | object = _UNSET,
    ) -> Organization:
        """Update an organization's profile. Admins only.

        Fields left unset are unchanged. Empty description or website
        clears them; an empty name is rejected.

        Raises:
            NotFoundError: If the organization doesn't exist
            NotAuthorizedError: If the user is not an admin
            ValidationError: If the new name is empty or too long
        """
        with logfire.span(
            "organization_service.update_organization",
            organization_id=str(organization_id),
            user_id=str(user.id),
        ):
            organization = await self.get_organization(organization_id)
            await self.require_admin(organization_id, user, "update")

            changes: dict = {}
            if name is not _UNSET:
                changes["name"] = self._clean_name(name or "")
            if description is not _UNSET:
                changes["description"] = _clean_optional(description)
            if website is not _UNSET:
                changes["website"] = _clean_optional(website)

            if not changes:
                return organization

            changes["updated_at"] = utc_now()
            updated = await self.organization_repository.save(
                organization.model_copy(update=changes)
            )
            logfire.info(
                "Organization updated",
                organization_id=str(organization_id),
                fields=sorted(changes),
            )
            return updated

    async def get_membership(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> OrganizationMember | None:
        """Get a user's membership in an organization, if any."""
        return await self.organization_repository.find_member(organization_id, user_id)

    async def require_member(
        self, organization_id: OrganizationId, user: User, action: str
    ) -> OrganizationMember:
        """Ensure the user belongs to the organization.

        Raises:
            NotAuthorizedError: If the user is not a member
        """
        membership = await self.get_membership(organization_id, user.id)
        if not membership:
            logfire.warn(
                "Membership check failed",
                organization_id=str(organization_id),
                user_id=str(user.id),
                action=action,
            )
            raise NotAuthorizedError(
                action, "organization", str(organization_id), str(user.id)
            )
        return membership

    async def require_admin(
        self, organization_id: OrganizationId, user: User, action: str
    ) -> OrganizationMember:
        """Ensure the user is an admin of the organization.

        Raises:
            NotAuthorizedError: If the user is not an admin
        """
        membership = await self.get_membership(organization_id, user.id)
        if not membership or not membership.is_admin:
            logfire.warn(
                "Admin check failed",
                organization_id=str(organization_id),
                user_id=str(user.id),
                action=action,
            )
            raise NotAuthorizedError(
                action, "organization", str(organization_id), str(user.id)
            )
        return membership

    async def list_members(
        self, organization_id: OrganizationId
    ) -> list[OrganizationMember]:
        """List an organization's members, oldest first.

        Raises:
            NotFoundError: If the organization doesn't exist
        """
        await self.get_organization(organization_id)
        return await self.organization_repository.find_members(organization_id)

    async def memberships_for_user(
        self, user_id: UserId, role: MemberRole | None = None
    ) -> list[OrganizationMember]:
        """List a user's memberships, optionally restricted to one role."""
        return await self.organization_repository.find_memberships_by_user(
            user_id, role=role
        )

    async def accessible_organization_ids(
        self, user_id: UserId
    ) -> list[OrganizationId]:
        """Organizations whose policies a user can see.

        That is every organization the user belongs to, plus the direct
        parent of each.
        """
        with logfire.span(
            "organization_service.accessible_organization_ids", user_id=str(user_id)
        ):
            memberships = await self.memberships_for_user(user_id)
            member_of = [m.organization_id for m in memberships]
            organizations = await self.get_many(member_of)

            accessible = list(member_of)
            for organization in organizations.values():
                if organization.parent_id and organization.parent_id not in accessible:
                    accessible.append(organization.parent_id)
            return accessible

    async def add_member(
        self,
        organization_id: OrganizationId,
        user_id: UserId,
        role: MemberRole = MemberRole.MEMBER,
    ) -> OrganizationMember:
        """Add a user to an organization.

        Raises:
            BusinessRuleViolationError: If the user is already a member
        """
        if await self.get_membership(organization_id, user_id):
            raise BusinessRuleViolationError(
                "You are already a member of this organization."
            )

        member = await self.organization_repository.save_member(
            OrganizationMember(
                id=MembershipId(uuid4()),
                organization_id=organization_id,
                user_id=user_id,
                role=role,
                created_at=utc_now(),
            )
        )
        logfire.info(
            "Member added",
            organization_id=str(organization_id),
            user_id=str(user_id),
            role=role.value,
        )
        return member

    async def join(
        self, organization_id: OrganizationId, user: User
    ) -> OrganizationMember:
        """Join an organization as a regular member.

        Raises:
            NotFoundError: If the organization doesn't exist
            BusinessRuleViolationError: If the user is already a member
        """
        with logfire.span(
            "organization_service.join",
            organization_id=str(organization_id),
            user_id=str(user.id),
        ):
            await self.get_organization(organization_id)
            return await self.add_member(organization_id, user.id)

    async def remove_member(
        self,
        organization_id: OrganizationId,
        actor: User,
        target_user_id: UserId | None = None,
    ) -> None:
        """Remove a member. Users may leave; admins may remove anyone.

        The last admin can never be removed, including by themselves.

        Args:
            organization_id: Organization ID
            actor: User performing the removal
            target_user_id: Member to remove (defaults to the actor)

        Raises:
            NotFoundError: If the target is not a member
            NotAuthorizedError: If a non-admin tries to remove someone else
            BusinessRuleViolationError: If the target is the last admin
        """
        target_user_id = target_user_id or actor.id
        with logfire.span(
            "organization_service.remove_member",
            organization_id=str(organization_id),
            actor_id=str(actor.id),
            target_user_id=str(target_user_id),
        ):
            if target_user_id != actor.id:
                await self.require_admin(organization_id, actor, "remove members of")

            target = await self.get_membership(organization_id, target_user_id)
            if not target:
                raise NotFoundError("Membership", str(target_user_id))

            if target.is_admin:
                admins = [
                    m
                    for m in await self.organization_repository.find_members(
                        organization_id
                    )
                    if m.is_admin
                ]
                if len(admins) <= 1:
                    raise BusinessRuleViolationError(
                        "Cannot remove the last admin. Promote another member first."
                    )

            await self.organization_repository.delete_member(target)
            logfire.info(
                "Member removed",
                organization_id=str(organization_id),
                user_id=str(target_user_id),
            )

    async def count_members(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count members per organization."""
        if not organization_ids:
            return {}
        return await self.organization_repository.count_members(organization_ids)

    @staticmethod
    def _clean_name(name: str) -> str:
        name = name.strip()
        if not name:
            raise ValidationError("Organization name is required.")
        if len(name) > NAME_MAX_LENGTH:
            raise ValidationError(
                f"Organization name must be {NAME_MAX_LENGTH} characters or less."
            )
        return name


def _clean_optional(value) -> str | None:
    """Trim an optional text field, mapping blank to None."""
    if value is None:
        return None
    return value.strip() or None
