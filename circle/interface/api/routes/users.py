"""User directory and profile routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Path, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from circle.application.usecase.auth import AuthenticateUseCase
from circle.application.usecase.auth.authenticate import (
    AuthenticateRequest,
    AuthenticateResponse,
)
from circle.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserActivityUseCase,
    GetUserUseCase,
    UpdateUserProfileUseCase,
)
from circle.application.usecase.user.create_user import (
    CreateUserRequest,
    CreateUserResponse,
)
from circle.application.usecase.user.delete_user import DeleteUserRequest
from circle.application.usecase.user.get_user import GetUserRequest, UserDTO
from circle.application.usecase.user.get_user_activity import (
    ActivityEntryResponse,
    GetUserActivityRequest,
)
from circle.application.usecase.user.update_user_profile import (
    UpdateUserProfileRequest,
)
from circle.domain.error import DomainError, PersistenceError, UserNotFoundError
from circle.domain.value import Username
from circle.interface.error import to_http_exception, to_plain_text_response

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)

UsernamePath = Annotated[str, Path(min_length=1, max_length=255)]


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating a profile. Omitted fields are unchanged."""

    nickname: str | None = Field(None, max_length=255)
    email: str | None = None
    password: str | None = Field(None, min_length=1)


@router.post(
    "",
    response_model=CreateUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    request: CreateUserRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> CreateUserResponse:
    """Sign up.

    Example:
        POST /users

        Request:
        {"username": "alice", "email": "alice@example.com", "password": "pw"}

        Response (201):
        {"message": "User successfully created", "authToken": "eyJ..."}
    """
    try:
        return await create_user_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e) from e


@router.post("/authenticate", response_model=AuthenticateResponse)
async def authenticate(
    request: AuthenticateRequest,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
) -> AuthenticateResponse:
    """Sign in with email and password.

    Unknown email and wrong password both return
    401 {"error": "Incorrect email or password"}.
    """
    try:
        return await authenticate_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get("/{username}", response_model=UserDTO)
async def get_user(
    username: UsernamePath,
    get_user_use_case: FromDishka[GetUserUseCase],
    authorization: str | None = Header(default=None),
) -> UserDTO:
    """Get a user's profile.

    Requires a bearer token. Followers and following are returned as
    counts.
    """
    try:
        return await get_user_use_case.execute(
            GetUserRequest(username=Username(username), authorization=authorization)
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get("/{username}/activity", response_model=list[ActivityEntryResponse])
async def get_user_activity(
    username: UsernamePath,
    get_user_activity_use_case: FromDishka[GetUserActivityUseCase],
    authorization: str | None = Header(default=None),
) -> list[ActivityEntryResponse]:
    """Get a user's posts, likes and shares, most recent first.

    Example:
        GET /users/alice/activity
        Authorization: Bearer eyJ...

        Response:
        [
            {"kind": "SHARED", "post_id": "...", "timestamp": "..."},
            {"kind": "POSTED", "post_id": "...", "timestamp": "..."}
        ]
    """
    try:
        return await get_user_activity_use_case.execute(
            GetUserActivityRequest(
                username=Username(username), authorization=authorization
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.patch("/{username}", response_class=PlainTextResponse)
async def update_user_profile(
    username: UsernamePath,
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    authorization: str | None = Header(default=None),
) -> PlainTextResponse:
    """Update nickname, email or password of a profile.

    Only the profile owner may update it unless ownership enforcement is
    disabled. An unknown username and a store failure reply in plain text.
    """
    try:
        message = await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(
                username=Username(username),
                authorization=authorization,
                nickname=request.nickname,
                email=request.email,
                password=request.password,
            )
        )
    except (UserNotFoundError, PersistenceError) as e:
        return to_plain_text_response(e)
    except DomainError as e:
        raise to_http_exception(e) from e
    return PlainTextResponse(message)


@router.delete("/{username}", response_class=PlainTextResponse)
async def delete_user(
    username: UsernamePath,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    authorization: str | None = Header(default=None),
) -> PlainTextResponse:
    """Hard-delete a user with their posts, likes and shares.

    An unknown username and a store failure reply in plain text.
    """
    try:
        message = await delete_user_use_case.execute(
            DeleteUserRequest(username=Username(username), authorization=authorization)
        )
    except (UserNotFoundError, PersistenceError) as e:
        return to_plain_text_response(e)
    except DomainError as e:
        raise to_http_exception(e) from e
    return PlainTextResponse(message)
