"""Unit tests for OrganizationService."""

from uuid import uuid4

import pytest

from agora.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from agora.domain.repository import OrganizationRepository
from agora.domain.service import OrganizationService
from agora.domain.value import MemberRole, OrganizationId
from tests.factories import at, make_organization, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateOrganization:
    """Tests for create_organization method."""

    @pytest.mark.asyncio
    async def test_creator_becomes_admin(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        creator = make_user()

        organization = await org_service.create_organization(
            creator, "  Cyclists Union  ", description="  ", website="https://cu.org"
        )

        assert organization.name == "Cyclists Union"
        assert organization.description is None
        assert organization.website == "https://cu.org"
        membership = await org_service.get_membership(organization.id, creator.id)
        assert membership.role == MemberRole.ADMIN

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", "x" * 101])
    async def test_invalid_name_is_rejected(self, unit_env, name):
        org_service = await unit_env.get(OrganizationService)

        with pytest.raises(ValidationError):
            await org_service.create_organization(make_user(), name)


class TestUpdateOrganization:
    """Tests for update_organization method."""

    @pytest.mark.asyncio
    async def test_admin_updates_only_given_fields(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        admin = make_user()
        organization = await org_service.create_organization(
            admin, "Cyclists Union", description="Two wheels good"
        )

        updated = await org_service.update_organization(
            organization.id, admin, website="https://cu.org"
        )

        assert updated.name == "Cyclists Union"
        assert updated.description == "Two wheels good"
        assert updated.website == "https://cu.org"

    @pytest.mark.asyncio
    async def test_empty_description_clears_it(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        admin = make_user()
        organization = await org_service.create_organization(
            admin, "Cyclists Union", description="Two wheels good"
        )

        updated = await org_service.update_organization(
            organization.id, admin, description=""
        )

        assert updated.description is None

    @pytest.mark.asyncio
    async def test_explicit_empty_name_is_rejected(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        admin = make_user()
        organization = await org_service.create_organization(admin, "Cyclists Union")

        with pytest.raises(ValidationError):
            await org_service.update_organization(organization.id, admin, name="")

    @pytest.mark.asyncio
    async def test_member_cannot_update(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        organization = await org_service.create_organization(make_user(), "CU")
        member = make_user()
        await org_service.join(organization.id, member)

        with pytest.raises(NotAuthorizedError):
            await org_service.update_organization(organization.id, member, name="X")


class TestMembership:
    """Tests for join and remove_member."""

    @pytest.mark.asyncio
    async def test_join_adds_member_role(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        organization = await org_service.create_organization(make_user(), "CU")
        user = make_user()

        membership = await org_service.join(organization.id, user)

        assert membership.role == MemberRole.MEMBER

    @pytest.mark.asyncio
    async def test_join_twice_is_rejected(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        organization = await org_service.create_organization(make_user(), "CU")
        user = make_user()
        await org_service.join(organization.id, user)

        with pytest.raises(BusinessRuleViolationError, match="already a member"):
            await org_service.join(organization.id, user)

    @pytest.mark.asyncio
    async def test_join_missing_organization(self, unit_env):
        org_service = await unit_env.get(OrganizationService)

        with pytest.raises(NotFoundError):
            await org_service.join(OrganizationId(uuid4()), make_user())

    @pytest.mark.asyncio
    async def test_member_can_leave(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        organization = await org_service.create_organization(make_user(), "CU")
        user = make_user()
        await org_service.join(organization.id, user)

        await org_service.remove_member(organization.id, user)

        assert await org_service.get_membership(organization.id, user.id) is None

    @pytest.mark.asyncio
    async def test_admin_can_remove_member(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        admin = make_user()
        organization = await org_service.create_organization(admin, "CU")
        user = make_user()
        await org_service.join(organization.id, user)

        await org_service.remove_member(organization.id, admin, user.id)

        assert await org_service.get_membership(organization.id, user.id) is None

    @pytest.mark.asyncio
    async def test_member_cannot_remove_someone_else(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        admin = make_user()
        organization = await org_service.create_organization(admin, "CU")
        user = make_user()
        await org_service.join(organization.id, user)

        with pytest.raises(NotAuthorizedError):
            await org_service.remove_member(organization.id, user, admin.id)

    @pytest.mark.asyncio
    async def test_last_admin_cannot_leave(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        admin = make_user()
        organization = await org_service.create_organization(admin, "CU")

        with pytest.raises(BusinessRuleViolationError, match="last admin"):
            await org_service.remove_member(organization.id, admin)

    @pytest.mark.asyncio
    async def test_admin_can_leave_when_another_admin_remains(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        admin = make_user()
        organization = await org_service.create_organization(admin, "CU")
        other_admin = make_user()
        await org_service.add_member(organization.id, other_admin.id, MemberRole.ADMIN)

        await org_service.remove_member(organization.id, admin)

        assert await org_service.get_membership(organization.id, admin.id) is None

    @pytest.mark.asyncio
    async def test_removing_non_member_is_not_found(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        organization = await org_service.create_organization(make_user(), "CU")

        with pytest.raises(NotFoundError):
            await org_service.remove_member(organization.id, make_user())


class TestAccessibleOrganizations:
    """Tests for accessible_organization_ids."""

    @pytest.mark.asyncio
    async def test_includes_direct_parent(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        org_repo = await unit_env.get(OrganizationRepository)
        parent = make_organization("National Federation")
        child = make_organization("Local Chapter", parent_id=parent.id)
        await org_repo.save(parent)
        await org_repo.save(child)
        user = make_user()
        await org_service.add_member(child.id, user.id)

        accessible = await org_service.accessible_organization_ids(user.id)

        assert set(accessible) == {child.id, parent.id}

    @pytest.mark.asyncio
    async def test_no_memberships(self, unit_env):
        org_service = await unit_env.get(OrganizationService)

        assert await org_service.accessible_organization_ids(make_user().id) == []


class TestSearch:
    """Tests for search method."""

    @pytest.mark.asyncio
    async def test_case_insensitive_name_match_newest_first(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        org_repo = await unit_env.get(OrganizationRepository)

        older = make_organization("Green Party", created_at=at(1))
        newer = make_organization("Greenpeace Local", created_at=at(2))
        other = make_organization("Cyclists Union", created_at=at(3))
        for organization in (older, newer, other):
            await org_repo.save(organization)

        result = await org_service.search("GREEN")

        assert [o.id for o in result] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_blank_query_lists_all(self, unit_env):
        org_service = await unit_env.get(OrganizationService)
        org_repo = await unit_env.get(OrganizationRepository)
        await org_repo.save(make_organization("A"))
        await org_repo.save(make_organization("B"))

        assert len(await org_service.search("  ")) == 2
