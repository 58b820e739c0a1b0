"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from agora.domain.service import UserService
from agora.domain.value import Identity, UserId
from agora.persistence.repository.inmemory import InMemoryUserRepository


class TestEnsureUser:
    """Tests for UserService.ensure_user()."""

    @pytest.mark.asyncio
    async def test_first_request_creates_user(self):
        """Should create a local user for an unseen identity."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)
        identity = Identity(external_id="idp_123", email="ada@example.org", name="Ada")

        # Act
        user = await service.ensure_user(identity)

        # Assert
        assert user.external_id == "idp_123"
        assert user.email == "ada@example.org"
        assert user.name == "Ada"
        assert await user_repo.find_by_external_id("idp_123") == user

    @pytest.mark.asyncio
    async def test_repeat_requests_reuse_user(self):
        service = UserService(InMemoryUserRepository())
        identity = Identity(external_id="idp_123", email="ada@example.org", name="Ada")

        first = await service.ensure_user(identity)
        second = await service.ensure_user(identity)

        assert first.id == second.id

    @pytest.mark.asyncio
    async def test_changed_profile_is_refreshed(self):
        service = UserService(InMemoryUserRepository())
        await service.ensure_user(
            Identity(external_id="idp_123", email="old@example.org", name="Ada")
        )

        user = await service.ensure_user(
            Identity(external_id="idp_123", email="new@example.org", name="Ada L.")
        )

        assert user.email == "new@example.org"
        assert user.name == "Ada L."

    @pytest.mark.asyncio
    async def test_missing_name_keeps_stored_name(self):
        service = UserService(InMemoryUserRepository())
        await service.ensure_user(
            Identity(external_id="idp_123", email="ada@example.org", name="Ada")
        )

        user = await service.ensure_user(
            Identity(external_id="idp_123", email="ada@example.org", name=None)
        )

        assert user.name == "Ada"


class TestLookups:
    """Tests for get_many."""

    @pytest.mark.asyncio
    async def test_get_many_skips_unknown_and_duplicates(self):
        service = UserService(InMemoryUserRepository())
        user = await service.ensure_user(
            Identity(external_id="idp_1", email="one@example.org")
        )

        found = await service.get_many([user.id, user.id, UserId(uuid4())])

        assert found == {user.id: user}
