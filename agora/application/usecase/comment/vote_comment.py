"""Vote on comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.error import ValidationError
from agora.domain.service import CommentService, UserService
from agora.domain.value import CommentId, Identity, VoteDirection


class VoteCommentRequest(BaseModel):
    """Vote request."""

    comment_id: str  # UUID string
    identity: Identity
    direction: str  # "up" or "down"


class VoteCommentResponse(BaseModel):
    """Vote response with the comment's new counters."""

    upvotes: int
    downvotes: int


class VoteCommentUseCase:
    """Use case for up- or down-voting a comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize vote use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: VoteCommentRequest) -> VoteCommentResponse:
        """Execute vote flow.

        Args:
            request: Comment ID, voter and direction

        Returns:
            Updated vote counters

        Raises:
            ValidationError: If the direction is not "up" or "down"
            NotFoundError: If the comment is missing or deleted
        """
        try:
            direction = VoteDirection(request.direction)
        except ValueError:
            raise ValidationError('Direction must be "up" or "down".')

        await self.user_service.ensure_user(request.identity)
        comment = await self.comment_service.vote(
            CommentId(UUID(request.comment_id)), direction
        )
        return VoteCommentResponse(upvotes=comment.upvotes, downvotes=comment.downvotes)
