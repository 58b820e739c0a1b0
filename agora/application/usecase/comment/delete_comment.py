"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import CommentService, UserService
from agora.domain.value import CommentId, Identity


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    identity: Identity


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    deleted: bool = True


class DeleteCommentUseCase:
    """Use case for soft-deleting one's own comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment is missing or already deleted
            NotAuthorizedError: If the caller didn't write the comment
        """
        user = await self.user_service.ensure_user(request.identity)
        await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), user
        )
        return DeleteCommentResponse()
