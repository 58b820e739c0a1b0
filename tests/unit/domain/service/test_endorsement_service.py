"""Unit tests for EndorsementService."""

import pytest

from agora.domain.error import BusinessRuleViolationError, NotFoundError
from agora.domain.service import EndorsementService
from agora.domain.value import EndorsementType
from tests.factories import make_organization, make_policy, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestIndividualEndorsements:
    """Tests for personal endorsements."""

    @pytest.mark.asyncio
    async def test_endorse_and_count(self, unit_env):
        service = await unit_env.get(EndorsementService)
        policy = make_policy()

        endorsement = await service.endorse_as_user(policy, make_user())
        await service.endorse_as_user(policy, make_user())

        assert endorsement.type == EndorsementType.INDIVIDUAL
        assert await service.count_for_policy(policy.id) == 2

    @pytest.mark.asyncio
    async def test_count_by_policies(self, unit_env):
        service = await unit_env.get(EndorsementService)
        endorsed = make_policy()
        unendorsed = make_policy()
        await service.endorse_as_user(endorsed, make_user())
        await service.endorse_as_organization(endorsed, make_organization())

        counts = await service.count_by_policies([endorsed.id, unendorsed.id])

        assert counts == {endorsed.id: 2}
        assert await service.count_by_policies([]) == {}

    @pytest.mark.asyncio
    async def test_one_endorsement_per_user(self, unit_env):
        service = await unit_env.get(EndorsementService)
        policy = make_policy()
        user = make_user()
        await service.endorse_as_user(policy, user)

        with pytest.raises(BusinessRuleViolationError):
            await service.endorse_as_user(policy, user)

    @pytest.mark.asyncio
    async def test_withdraw(self, unit_env):
        service = await unit_env.get(EndorsementService)
        policy = make_policy()
        user = make_user()
        await service.endorse_as_user(policy, user)

        await service.withdraw_user_endorsement(policy, user)

        assert await service.count_for_policy(policy.id) == 0

    @pytest.mark.asyncio
    async def test_withdraw_without_endorsement(self, unit_env):
        service = await unit_env.get(EndorsementService)

        with pytest.raises(NotFoundError):
            await service.withdraw_user_endorsement(make_policy(), make_user())


class TestOrganizationEndorsements:
    """Tests for endorsements made on behalf of organizations."""

    @pytest.mark.asyncio
    async def test_one_endorsement_per_organization(self, unit_env):
        service = await unit_env.get(EndorsementService)
        policy = make_policy()
        organization = make_organization()

        endorsement = await service.endorse_as_organization(
            policy, organization, statement="We back this."
        )

        assert endorsement.type == EndorsementType.ORGANIZATION
        assert endorsement.statement == "We back this."
        with pytest.raises(BusinessRuleViolationError):
            await service.endorse_as_organization(policy, organization)

    @pytest.mark.asyncio
    async def test_user_and_organization_endorsements_are_independent(self, unit_env):
        service = await unit_env.get(EndorsementService)
        policy = make_policy()
        organization = make_organization()
        await service.endorse_as_organization(policy, organization)

        await service.endorse_as_user(policy, make_user())

        counts = await service.count_by_organizations([organization.id])
        assert counts == {organization.id: 1}
        assert await service.count_for_policy(policy.id) == 2

    @pytest.mark.asyncio
    async def test_withdraw_organization_endorsement(self, unit_env):
        service = await unit_env.get(EndorsementService)
        policy = make_policy()
        organization = make_organization()
        await service.endorse_as_organization(policy, organization)

        await service.withdraw_organization_endorsement(policy, organization)

        assert await service.list_for_organization(organization.id) == []
