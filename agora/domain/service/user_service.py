"""User domain service."""

from typing import Sequence
from uuid import uuid4

import logfire

from agora.domain.model import User
from agora.domain.model.common import utc_now
from agora.domain.repository import UserRepository
from agora.domain.value import Identity, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def ensure_user(self, identity: Identity) -> User:
        """Find the local user for a verified identity, creating it if needed.

        The first authenticated request from a new identity provider account
        creates its user row. Later requests refresh the email and name when
        the provider reports different values.

        Args:
            identity: Verified caller identity

        Returns:
            The local user
        """
        with logfire.span(
            "user_service.ensure_user", external_id=identity.external_id
        ):
            user = await self.user_repository.find_by_external_id(
                identity.external_id
            )
            if user is None:
                now = utc_now()
                user = await self.user_repository.save(
                    User(
                        id=UserId(uuid4()),
                        external_id=identity.external_id,
                        email=identity.email,
                        name=identity.name,
                        created_at=now,
                        updated_at=now,
                    )
                )
                logfire.info(
                    "User created from identity",
                    user_id=str(user.id),
                    external_id=identity.external_id,
                )
                return user

            stale_name = identity.name is not None and identity.name != user.name
            if identity.email != user.email or stale_name:
                user = await self.user_repository.save(
                    user.model_copy(
                        update={
                            "email": identity.email,
                            "name": identity.name if stale_name else user.name,
                            "updated_at": utc_now(),
                        }
                    )
                )
                logfire.info("User profile refreshed", user_id=str(user.id))
            return user

    async def get_many(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Batch lookup of users keyed by ID.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of the users that exist
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}
