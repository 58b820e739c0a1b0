"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    VoteCommentRequest,
    VoteCommentResponse,
    VoteCommentUseCase,
)
from agora.domain.service import JWTService
from agora.interface.error import require_identity, translate_errors

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class VoteAPIRequest(BaseModel):
    """API request for voting on a comment."""

    direction: str = Field(description='"up" or "down"')


@router.get("/policies/{policy_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    policy_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    sort: str = Query(default="newest"),
    cursor: str | None = Query(default=None),
    offset: int = Query(default=0, ge=0),
) -> ListCommentsResponse:
    """List a policy's comment threads.

    Pages with ``cursor`` for ``newest`` and ``offset`` for ``popular``
    and ``controversial``.

    Args:
        policy_id: Policy UUID
        list_comments_use_case: List comments use case from DI
        sort: newest, popular or controversial
        cursor: ID of the last top-level comment already seen
        offset: Threads to skip

    Returns:
        One page of threads with paging metadata
    """
    with translate_errors("load comments"):
        return await list_comments_use_case.execute(
            ListCommentsRequest(
                policy_id=policy_id, sort=sort, cursor=cursor, offset=offset
            )
        )


@router.post(
    "/policies/{policy_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    policy_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a policy or reply to a top-level comment.

    Requires authentication.

    Args:
        policy_id: Policy UUID
        request: Comment content and optional parent
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment
    """
    identity = require_identity(
        jwt_service, auth_token, "You must be signed in to comment."
    )

    with translate_errors("post comment"):
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                policy_id=policy_id,
                identity=identity,
                content=request.content,
                parent_id=request.parent_id,
            )
        )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Soft-delete one of your own comments."""
    identity = require_identity(jwt_service, auth_token, "Unauthorized.")

    with translate_errors("delete comment"):
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, identity=identity)
        )


@router.post("/comments/{comment_id}/vote", response_model=VoteCommentResponse)
async def vote_comment(
    comment_id: str,
    request: VoteAPIRequest,
    vote_comment_use_case: FromDishka[VoteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteCommentResponse:
    """Up- or down-vote a comment.

    Repeat votes are counted again.
    """
    identity = require_identity(
        jwt_service, auth_token, "You must be signed in to vote."
    )

    with translate_errors("vote"):
        return await vote_comment_use_case.execute(
            VoteCommentRequest(
                comment_id=comment_id, identity=identity, direction=request.direction
            )
        )
