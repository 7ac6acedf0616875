"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from circle.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    SharePostUseCase,
)
from circle.application.usecase.post.create_post import CreatePostRequest
from circle.application.usecase.post.get_post import GetPostRequest, PostResponse
from circle.application.usecase.post.like_post import (
    LikePostRequest,
    LikePostResponse,
)
from circle.application.usecase.post.share_post import (
    SharePostRequest,
    SharePostResponse,
)
from circle.domain.error import DomainError
from circle.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str = Field(min_length=1, max_length=10000)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Create a post as the authenticated user."""
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(content=request.content, authorization=authorization)
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Get a single post."""
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except DomainError as e:
        raise to_http_exception(e) from e


@router.post(
    "/{post_id}/like",
    response_model=LikePostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def like_post(
    post_id: UUID,
    like_post_use_case: FromDishka[LikePostUseCase],
    authorization: str | None = Header(default=None),
) -> LikePostResponse:
    """Like a post. A second like by the same user returns 409."""
    try:
        return await like_post_use_case.execute(
            LikePostRequest(post_id=post_id, authorization=authorization)
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.post(
    "/{post_id}/share",
    response_model=SharePostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def share_post(
    post_id: UUID,
    share_post_use_case: FromDishka[SharePostUseCase],
    authorization: str | None = Header(default=None),
) -> SharePostResponse:
    """Share a post. Each call records a new share."""
    try:
        return await share_post_use_case.execute(
            SharePostRequest(post_id=post_id, authorization=authorization)
        )
    except DomainError as e:
        raise to_http_exception(e) from e
