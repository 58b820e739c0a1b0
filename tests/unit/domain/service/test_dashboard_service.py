"""Unit tests for dashboard aggregation."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from agora.domain.model import Endorsement, PetitionSignature
from agora.domain.repository import (
    CommentRepository,
    EndorsementRepository,
    PetitionSignatureRepository,
)
from agora.domain.service import DashboardService
from agora.domain.service.dashboard_service import (
    endorsement_timeline,
    signature_timeline,
    top_locations,
)
from agora.domain.value import (
    EndorsementId,
    EndorsementType,
    OrganizationId,
    PolicyId,
    SignatureId,
    UserId,
)
from tests.factories import make_comment, make_policy
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _day(day: int, hour: int = 12) -> datetime:
    return datetime(2026, 3, day, hour, tzinfo=timezone.utc)


def _signature(policy_id, created_at, location=None, verified=True):
    return PetitionSignature(
        id=SignatureId(uuid4()),
        policy_id=policy_id,
        user_id=UserId(uuid4()),
        full_name="Signer",
        location=location,
        email_verified=verified,
        verification_token=None if verified else str(uuid4()),
        created_at=created_at,
    )


def _endorsement(policy_id, created_at, organization=False):
    return Endorsement(
        id=EndorsementId(uuid4()),
        policy_id=policy_id,
        type=EndorsementType.ORGANIZATION if organization else EndorsementType.INDIVIDUAL,
        user_id=None if organization else UserId(uuid4()),
        organization_id=OrganizationId(uuid4()) if organization else None,
        created_at=created_at,
    )


class TestTimelines:
    """Tests for the timeline helpers."""

    def test_signature_timeline_is_cumulative_per_day(self):
        policy_id = PolicyId(uuid4())
        signatures = [
            _signature(policy_id, _day(3, 9)),
            _signature(policy_id, _day(1, 8)),
            _signature(policy_id, _day(1, 23)),
            _signature(policy_id, _day(3, 10)),
        ]

        timeline = signature_timeline(signatures)

        assert [(p.date, p.total) for p in timeline] == [
            ("2026-03-01", 2),
            ("2026-03-03", 4),
        ]

    def test_endorsement_timeline_splits_by_type(self):
        policy_id = PolicyId(uuid4())
        endorsements = [
            _endorsement(policy_id, _day(1)),
            _endorsement(policy_id, _day(2), organization=True),
            _endorsement(policy_id, _day(2)),
            _endorsement(policy_id, _day(4), organization=True),
        ]

        timeline = endorsement_timeline(endorsements)

        assert [(p.date, p.individual, p.organization) for p in timeline] == [
            ("2026-03-01", 1, 0),
            ("2026-03-02", 2, 1),
            ("2026-03-04", 2, 2),
        ]

    def test_empty_timelines(self):
        assert signature_timeline([]) == []
        assert endorsement_timeline([]) == []

    def test_top_locations_counts_and_limits(self):
        policy_id = PolicyId(uuid4())
        signatures = (
            [_signature(policy_id, _day(1), "Leeds")] * 3
            + [_signature(policy_id, _day(1), "York")] * 2
            + [_signature(policy_id, _day(1), None)]
            + [_signature(policy_id, _day(1), f"Town {i}") for i in range(12)]
        )

        locations = top_locations(signatures)

        assert len(locations) == 10
        assert (locations[0].location, locations[0].count) == ("Leeds", 3)
        assert (locations[1].location, locations[1].count) == ("York", 2)
        assert all(loc.location for loc in locations)


class TestBuild:
    """Tests for DashboardService.build()."""

    @pytest.mark.asyncio
    async def test_aggregates_counts(self, unit_env):
        service = await unit_env.get(DashboardService)
        signature_repo = await unit_env.get(PetitionSignatureRepository)
        endorsement_repo = await unit_env.get(EndorsementRepository)
        comment_repo = await unit_env.get(CommentRepository)
        policy = make_policy()

        await signature_repo.save(_signature(policy.id, _day(1)))
        await signature_repo.save(_signature(policy.id, _day(2), verified=False))
        await endorsement_repo.save(_endorsement(policy.id, _day(1)))
        await endorsement_repo.save(_endorsement(policy.id, _day(1), organization=True))
        await endorsement_repo.save(_endorsement(policy.id, _day(2), organization=True))
        await comment_repo.save(make_comment(policy.id))
        await comment_repo.save(make_comment(policy.id, deleted=True))

        dashboard = await service.build(policy)

        assert dashboard.total_signatures == 2
        assert dashboard.verified_signatures == 1
        assert dashboard.total_endorsements == 3
        assert dashboard.individual_endorsements == 1
        assert dashboard.organization_endorsements == 2
        assert dashboard.active_comments == 1
        assert dashboard.signature_timeline[-1].total == 2
