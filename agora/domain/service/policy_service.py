"""Policy domain service."""

from typing import Sequence
from uuid import uuid4

import logfire

from agora.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from agora.domain.model import Organization, Policy, User
from agora.domain.model.common import utc_now
from agora.domain.model.policy import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH
from agora.domain.repository import PolicyRepository
from agora.domain.value import OrganizationId, PolicyAnalysis, PolicyId

from .base import Service


class PolicyService(Service):
    """Domain service for policy operations."""

    def __init__(self, policy_repository: PolicyRepository) -> None:
        """Initialize policy service.

        Args:
            policy_repository: Policy repository
        """
        self.policy_repository = policy_repository

    async def create_policy(
        self,
        author: User,
        title: str,
        content: str,
        organization: Organization | None = None,
        target_law_name: str | None = None,
        target_law_text: str | None = None,
        analysis: PolicyAnalysis | None = None,
    ) -> Policy:
        """Publish a new policy.

        Membership in ``organization`` must be checked by the caller. The
        organization's name becomes the policy's jurisdiction.

        Args:
            author: Policy author
            title: Title, trimmed before storing
            content: Full text, trimmed before storing
            organization: Owning organization, if any
            target_law_name: Name of the law the policy amends
            target_law_text: Current text of that law
            analysis: Precomputed analysis results

        Returns:
            Created policy

        Raises:
            ValidationError: If title or content is empty or too long
        """
        with logfire.span(
            "policy_service.create_policy",
            author_id=str(author.id),
            organization_id=str(organization.id) if organization else None,
        ):
            title = title.strip()
            content = content.strip()
            if not title:
                raise ValidationError("Title is required.")
            if not content:
                raise ValidationError("Content is required.")
            if len(title) > TITLE_MAX_LENGTH:
                raise ValidationError(
                    f"Title must be {TITLE_MAX_LENGTH} characters or less."
                )
            if len(content) > CONTENT_MAX_LENGTH:
                raise ValidationError(
                    f"Content must be {CONTENT_MAX_LENGTH:,} characters or less."
                )

            analysis = analysis or PolicyAnalysis()
            now = utc_now()
            policy = Policy(
                id=PolicyId(uuid4()),
                title=title,
                content=content,
                summary=analysis.summary,
                jurisdiction=organization.name if organization else None,
                category=analysis.category,
                target_law_name=(target_law_name or "").strip() or None,
                target_law_text=(target_law_text or "").strip() or None,
                readability_score=analysis.readability_score,
                potential_conflicts="\n".join(analysis.potential_conflicts) or None,
                affected_groups=", ".join(analysis.affected_groups) or None,
                published=True,
                published_at=now,
                author_id=author.id,
                organization_id=organization.id if organization else None,
                created_at=now,
                updated_at=now,
            )

            saved = await self.policy_repository.save(policy)
            logfire.info(
                "Policy created", policy_id=str(saved.id), author_id=str(author.id)
            )
            return saved

    async def get_policy(self, policy_id: PolicyId) -> Policy:
        """Get a policy that hasn't been deleted.

        Args:
            policy_id: Policy ID

        Returns:
            The policy

        Raises:
            NotFoundError: If the policy is missing or soft-deleted
        """
        with logfire.span("policy_service.get_policy", policy_id=str(policy_id)):
            policy = await self.policy_repository.find_by_id(policy_id)
            if not policy or policy.is_deleted:
                logfire.warn("Policy not found", policy_id=str(policy_id))
                raise NotFoundError("Policy", str(policy_id))
            return policy

    async def get_published_policy(self, policy_id: PolicyId) -> Policy:
        """Get a policy that is published and not deleted.

        Raises:
            NotFoundError: If the policy is missing, deleted, or unpublished
        """
        policy = await self.get_policy(policy_id)
        if not policy.published:
            logfire.warn("Policy not published", policy_id=str(policy_id))
            raise NotFoundError("Policy", str(policy_id))
        return policy

    async def get_many(self, policy_ids: Sequence[PolicyId]) -> dict[PolicyId, Policy]:
        """Batch lookup of policies keyed by ID, deleted ones included."""
        unique_ids = list(dict.fromkeys(policy_ids))
        if not unique_ids:
            return {}
        policies = await self.policy_repository.find_by_ids(unique_ids)
        return {policy.id: policy for policy in policies}

    async def record_view(self, policy_id: PolicyId) -> None:
        """Count a view of a policy.

        Failing to count a view must not fail the read that triggered it, so
        errors are logged and dropped.
        """
        try:
            await self.policy_repository.increment_view_count(policy_id)
        except Exception as e:
            logfire.warn(
                "Failed to record policy view", policy_id=str(policy_id), error=str(e)
            )

    async def list_published(
        self,
        organization_ids: Sequence[OrganizationId] | None = None,
        limit: int = 50,
    ) -> list[Policy]:
        """List published policies, most recently published first.

        Args:
            organization_ids: Restrict to these organizations (None for all)
            limit: Maximum number of policies

        Returns:
            Policies
        """
        with logfire.span(
            "policy_service.list_published",
            organization_count=(
                len(organization_ids) if organization_ids is not None else None
            ),
            limit=limit,
        ):
            policies = await self.policy_repository.find_published(
                organization_ids=organization_ids, limit=limit
            )
            logfire.info("Policies listed", count=len(policies))
            return policies

    def require_author(self, policy: Policy, user: User, action: str) -> None:
        """Ensure the user wrote the policy.

        Raises:
            NotAuthorizedError: If the user is not the author
        """
        if policy.author_id != user.id:
            logfire.warn(
                "Policy author check failed",
                policy_id=str(policy.id),
                user_id=str(user.id),
                action=action,
            )
            raise NotAuthorizedError(action, "policy", str(policy.id), str(user.id))

    async def delete_policy(self, policy_id: PolicyId, user: User) -> Policy:
        """Soft-delete a policy. Only its author may do this.

        Raises:
            NotFoundError: If the policy is missing or already deleted
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "policy_service.delete_policy",
            policy_id=str(policy_id),
            user_id=str(user.id),
        ):
            policy = await self.get_policy(policy_id)
            self.require_author(policy, user, "delete")

            now = utc_now()
            deleted = await self.policy_repository.save(
                policy.model_copy(update={"deleted_at": now, "updated_at": now})
            )
            logfire.info("Policy deleted", policy_id=str(policy_id))
            return deleted

    async def count_by_organizations(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count non-deleted policies per organization."""
        if not organization_ids:
            return {}
        return await self.policy_repository.count_by_organizations(organization_ids)
