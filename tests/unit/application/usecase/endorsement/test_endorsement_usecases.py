"""Unit tests for endorsement use cases."""

import pytest

from agora.application.usecase.endorsement import (
    EndorsePolicyRequest,
    EndorsePolicyUseCase,
    ListEndorsementsRequest,
    ListEndorsementsUseCase,
    RemoveEndorsementRequest,
    RemoveEndorsementUseCase,
)
from agora.domain.error import BusinessRuleViolationError, NotAuthorizedError
from agora.domain.repository import PolicyRepository
from agora.domain.service import OrganizationService, UserService
from agora.domain.value import EndorsementType
from tests.factories import make_identity, make_policy
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_individual_and_organization_endorsements(unit_env):
    """A user and an organization they administer both endorse a policy."""
    # Arrange
    policy_repo = await unit_env.get(PolicyRepository)
    user_service = await unit_env.get(UserService)
    organization_service = await unit_env.get(OrganizationService)
    endorse = await unit_env.get(EndorsePolicyUseCase)
    list_endorsements = await unit_env.get(ListEndorsementsUseCase)
    policy = make_policy()
    await policy_repo.save(policy)
    identity = make_identity(name="Ada")
    admin = await user_service.ensure_user(identity)
    organization = await organization_service.create_organization(
        admin, "Cyclists Union"
    )

    # Act
    await endorse.execute(
        EndorsePolicyRequest(policy_id=str(policy.id), identity=identity)
    )
    response = await endorse.execute(
        EndorsePolicyRequest(
            policy_id=str(policy.id),
            identity=identity,
            organization_id=str(organization.id),
            statement="We back this.",
        )
    )
    listed = await list_endorsements.execute(
        ListEndorsementsRequest(policy_id=str(policy.id))
    )

    # Assert
    assert response.endorsed is True
    assert response.count == 2
    by_type = {e.type: e for e in listed.endorsements}
    assert by_type[EndorsementType.INDIVIDUAL].user_name == "Ada"
    assert by_type[EndorsementType.ORGANIZATION].organization_name == "Cyclists Union"
    assert by_type[EndorsementType.ORGANIZATION].statement == "We back this."


@pytest.mark.asyncio
async def test_double_endorsement_is_rejected(unit_env):
    policy_repo = await unit_env.get(PolicyRepository)
    endorse = await unit_env.get(EndorsePolicyUseCase)
    policy = make_policy()
    await policy_repo.save(policy)
    request = EndorsePolicyRequest(policy_id=str(policy.id), identity=make_identity())
    await endorse.execute(request)

    with pytest.raises(BusinessRuleViolationError):
        await endorse.execute(request)


@pytest.mark.asyncio
async def test_members_cannot_endorse_for_organization(unit_env):
    policy_repo = await unit_env.get(PolicyRepository)
    user_service = await unit_env.get(UserService)
    organization_service = await unit_env.get(OrganizationService)
    endorse = await unit_env.get(EndorsePolicyUseCase)
    policy = make_policy()
    await policy_repo.save(policy)
    founder = await user_service.ensure_user(make_identity())
    organization = await organization_service.create_organization(founder, "Union")
    member_identity = make_identity()
    member = await user_service.ensure_user(member_identity)
    await organization_service.join(organization.id, member)

    with pytest.raises(NotAuthorizedError):
        await endorse.execute(
            EndorsePolicyRequest(
                policy_id=str(policy.id),
                identity=member_identity,
                organization_id=str(organization.id),
            )
        )


@pytest.mark.asyncio
async def test_withdrawing_updates_count(unit_env):
    policy_repo = await unit_env.get(PolicyRepository)
    endorse = await unit_env.get(EndorsePolicyUseCase)
    remove = await unit_env.get(RemoveEndorsementUseCase)
    policy = make_policy()
    await policy_repo.save(policy)
    identity = make_identity()
    await endorse.execute(
        EndorsePolicyRequest(policy_id=str(policy.id), identity=identity)
    )

    response = await remove.execute(
        RemoveEndorsementRequest(policy_id=str(policy.id), identity=identity)
    )

    assert response.endorsed is False
    assert response.count == 0
