"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import CommentService, PolicyService, UserService
from agora.domain.value import CommentId, Identity, PolicyId

from .list_comments import CommentItem, to_comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    policy_id: str  # UUID string
    identity: Identity  # Verified caller identity
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a policy or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        policy_service: PolicyService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            policy_service: Policy domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.policy_service = policy_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the policy is published and not deleted
        2. Resolve the author's local user
        3. Create the comment (service validates content and parent)

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If the policy or parent comment is not found
            ValidationError: If content is invalid or the parent is a reply
        """
        policy = await self.policy_service.get_published_policy(
            PolicyId(UUID(request.policy_id))
        )
        author = await self.user_service.ensure_user(request.identity)

        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None
        comment = await self.comment_service.create_comment(
            policy=policy,
            author=author,
            content=request.content,
            parent_id=parent_id,
        )

        return CreateCommentResponse(comment=to_comment_item(comment))
