"""Unit tests for PolicyService."""

from uuid import uuid4

import pytest

from agora.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from agora.domain.repository import PolicyRepository
from agora.domain.service import PolicyService
from agora.domain.value import PolicyAnalysis, PolicyId
from tests.factories import at, make_organization, make_policy, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreatePolicy:
    """Tests for create_policy method."""

    @pytest.mark.asyncio
    async def test_policy_is_published_on_creation(self, unit_env):
        service = await unit_env.get(PolicyService)
        author = make_user()

        policy = await service.create_policy(author, "  Title ", "  Body text ")

        assert policy.title == "Title"
        assert policy.content == "Body text"
        assert policy.published is True
        assert policy.published_at is not None
        assert policy.author_id == author.id
        assert policy.view_count == 0

    @pytest.mark.asyncio
    async def test_organization_name_becomes_jurisdiction(self, unit_env):
        service = await unit_env.get(PolicyService)
        organization = make_organization("City of Springfield")

        policy = await service.create_policy(
            make_user(), "Title", "Body", organization=organization
        )

        assert policy.jurisdiction == "City of Springfield"
        assert policy.organization_id == organization.id

    @pytest.mark.asyncio
    async def test_analysis_lists_are_joined(self, unit_env):
        service = await unit_env.get(PolicyService)
        analysis = PolicyAnalysis(
            summary="Short version",
            category="Transport",
            readability_score=62.5,
            potential_conflicts=["Road Traffic Act s.4", "Municipal Code 12"],
            affected_groups=["Cyclists", "Drivers"],
        )

        policy = await service.create_policy(
            make_user(), "Title", "Body", analysis=analysis
        )

        assert policy.summary == "Short version"
        assert policy.category == "Transport"
        assert policy.readability_score == 62.5
        assert policy.potential_conflicts == "Road Traffic Act s.4\nMunicipal Code 12"
        assert policy.affected_groups == "Cyclists, Drivers"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,content",
        [("", "Body"), ("Title", "  "), ("x" * 201, "Body"), ("Title", "x" * 50001)],
    )
    async def test_invalid_drafts_are_rejected(self, unit_env, title, content):
        service = await unit_env.get(PolicyService)

        with pytest.raises(ValidationError):
            await service.create_policy(make_user(), title, content)


class TestReadAndDelete:
    """Tests for get_policy, record_view and delete_policy."""

    @pytest.mark.asyncio
    async def test_deleted_policy_is_not_found(self, unit_env):
        service = await unit_env.get(PolicyService)
        repo = await unit_env.get(PolicyRepository)
        policy = make_policy(deleted_at=at(5))
        await repo.save(policy)

        with pytest.raises(NotFoundError):
            await service.get_policy(policy.id)

    @pytest.mark.asyncio
    async def test_unpublished_policy_is_not_published(self, unit_env):
        service = await unit_env.get(PolicyService)
        repo = await unit_env.get(PolicyRepository)
        draft = make_policy(published=False, published_at=None)
        await repo.save(draft)

        assert (await service.get_policy(draft.id)).id == draft.id
        with pytest.raises(NotFoundError):
            await service.get_published_policy(draft.id)

    @pytest.mark.asyncio
    async def test_record_view_increments(self, unit_env):
        service = await unit_env.get(PolicyService)
        repo = await unit_env.get(PolicyRepository)
        policy = make_policy()
        await repo.save(policy)

        await service.record_view(policy.id)
        await service.record_view(policy.id)

        assert (await repo.find_by_id(policy.id)).view_count == 2

    @pytest.mark.asyncio
    async def test_record_view_failure_is_swallowed(self, unit_env, monkeypatch):
        service = await unit_env.get(PolicyService)

        async def broken(policy_id):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(service.policy_repository, "increment_view_count", broken)

        # Act & Assert - must not raise
        await service.record_view(PolicyId(uuid4()))

    @pytest.mark.asyncio
    async def test_only_author_can_delete(self, unit_env):
        service = await unit_env.get(PolicyService)
        author = make_user()
        policy = await service.create_policy(author, "Title", "Body")

        with pytest.raises(NotAuthorizedError):
            await service.delete_policy(policy.id, make_user())

        deleted = await service.delete_policy(policy.id, author)
        assert deleted.is_deleted


class TestListPublished:
    """Tests for list_published method."""

    @pytest.mark.asyncio
    async def test_most_recently_published_first(self, unit_env):
        service = await unit_env.get(PolicyService)
        repo = await unit_env.get(PolicyRepository)
        old = make_policy(published_at=at(1))
        new = make_policy(published_at=at(2))
        deleted = make_policy(published_at=at(3), deleted_at=at(4))
        draft = make_policy(published=False, published_at=None)
        for policy in (old, new, deleted, draft):
            await repo.save(policy)

        listed = await service.list_published()

        assert [p.id for p in listed] == [new.id, old.id]

    @pytest.mark.asyncio
    async def test_restricted_to_organizations(self, unit_env):
        service = await unit_env.get(PolicyService)
        repo = await unit_env.get(PolicyRepository)
        organization = make_organization()
        mine = make_policy(organization_id=organization.id)
        theirs = make_policy(organization_id=make_organization().id)
        unowned = make_policy()
        for policy in (mine, theirs, unowned):
            await repo.save(policy)

        listed = await service.list_published(organization_ids=[organization.id])
        nothing = await service.list_published(organization_ids=[])

        assert [p.id for p in listed] == [mine.id]
        assert nothing == []
