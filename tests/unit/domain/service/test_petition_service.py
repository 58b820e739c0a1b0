"""Unit tests for PetitionService."""

import pytest

from agora.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from agora.domain.service import PetitionService
from tests.factories import make_policy, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSign:
    """Tests for sign method."""

    @pytest.mark.asyncio
    async def test_signature_starts_unverified_with_token(self, unit_env):
        service = await unit_env.get(PetitionService)

        signature = await service.sign(
            make_policy(), make_user(), "  Ada Lovelace ", location=" London "
        )

        assert signature.full_name == "Ada Lovelace"
        assert signature.location == "London"
        assert signature.email_verified is False
        assert signature.verification_token
        assert signature.verification_token in service.verification_url(signature)

    @pytest.mark.asyncio
    async def test_full_name_required(self, unit_env):
        service = await unit_env.get(PetitionService)

        with pytest.raises(ValidationError):
            await service.sign(make_policy(), make_user(), "   ")

    @pytest.mark.asyncio
    async def test_one_signature_per_user(self, unit_env):
        service = await unit_env.get(PetitionService)
        policy = make_policy()
        user = make_user()
        await service.sign(policy, user, "Ada")

        with pytest.raises(BusinessRuleViolationError, match="already signed"):
            await service.sign(policy, user, "Ada")


class TestVerify:
    """Tests for verify method."""

    @pytest.mark.asyncio
    async def test_verify_marks_verified_and_clears_token(self, unit_env):
        service = await unit_env.get(PetitionService)
        policy = make_policy()
        signature = await service.sign(policy, make_user(), "Ada")

        verified, changed = await service.verify(signature.verification_token)

        assert changed is True
        assert verified.email_verified is True
        assert verified.verification_token is None
        assert await service.count(policy.id, verified_only=True) == 1

    @pytest.mark.asyncio
    async def test_token_cannot_be_reused(self, unit_env):
        service = await unit_env.get(PetitionService)
        signature = await service.sign(make_policy(), make_user(), "Ada")
        await service.verify(signature.verification_token)

        with pytest.raises(NotFoundError):
            await service.verify(signature.verification_token)

    @pytest.mark.asyncio
    async def test_unknown_token(self, unit_env):
        service = await unit_env.get(PetitionService)

        with pytest.raises(NotFoundError):
            await service.verify("not-a-token")


class TestListing:
    """Tests for list_verified and count."""

    @pytest.mark.asyncio
    async def test_only_verified_signatures_are_listed(self, unit_env):
        service = await unit_env.get(PetitionService)
        policy = make_policy()
        verified = await service.sign(policy, make_user(), "Ada")
        await service.sign(policy, make_user(), "Grace")
        await service.verify(verified.verification_token)

        listed = await service.list_verified(policy.id)

        assert [s.id for s in listed] == [verified.id]
        assert await service.count(policy.id) == 2
        assert await service.count(policy.id, verified_only=True) == 1

    @pytest.mark.asyncio
    async def test_count_by_policies(self, unit_env):
        service = await unit_env.get(PetitionService)
        popular = make_policy()
        quiet = make_policy()
        unsigned = make_policy()
        verified = await service.sign(popular, make_user(), "Ada")
        await service.verify(verified.verification_token)
        await service.sign(popular, make_user(), "Grace")
        await service.sign(quiet, make_user(), "Alan")

        counts = await service.count_by_policies([popular.id, quiet.id, unsigned.id])

        assert counts == {popular.id: 2, quiet.id: 1}
        assert await service.count_by_policies([]) == {}
