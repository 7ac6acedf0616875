"""Unit tests for user use cases."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from circle.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserActivityUseCase,
    GetUserUseCase,
    UpdateUserProfileUseCase,
)
from circle.application.usecase.user.create_user import CreateUserRequest
from circle.application.usecase.user.delete_user import DeleteUserRequest
from circle.application.usecase.user.get_user import GetUserRequest
from circle.application.usecase.user.get_user_activity import GetUserActivityRequest
from circle.application.usecase.user.update_user_profile import (
    UpdateUserProfileRequest,
)
from circle.domain.error import NotAuthorizedError, UserNotFoundError
from circle.domain.model import Post
from circle.domain.repository import PostRepository, UserRepository
from circle.domain.service import JWTService
from circle.domain.value import ActivityKind, PostId, UserId, Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _sign_up(unit_env, username: str) -> str:
    use_case = await unit_env.get(CreateUserUseCase)
    response = await use_case.execute(
        CreateUserRequest(
            username=username, email=f"{username}@example.com", password="pw"
        )
    )
    return f"Bearer {response.auth_token}"


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_token_identifies_new_user(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        response = await use_case.execute(
            CreateUserRequest(
                username="alice", email="alice@example.com", password="pw"
            )
        )

        # Assert
        user = await user_repo.find_by_username(Username("alice"))
        assert response.message == "User successfully created"
        assert jwt_service.verify_token(response.auth_token).user_id == str(user.id)

    def test_response_serializes_camel_case_token(self):
        from circle.application.usecase.user.create_user import CreateUserResponse

        response = CreateUserResponse(message="ok", auth_token="t")

        assert response.model_dump(by_alias=True) == {"message": "ok", "authToken": "t"}


class TestGetUser:
    @pytest.mark.asyncio
    async def test_dto_exposes_counts_not_digest(self, unit_env):
        token = await _sign_up(unit_env, "alice")
        use_case = await unit_env.get(GetUserUseCase)

        dto = await use_case.execute(
            GetUserRequest(username=Username("alice"), authorization=token)
        )

        dumped = dto.model_dump()
        assert dumped["username"] == "alice"
        assert dumped["followers"] == 0
        assert dumped["following"] == 0
        assert "password" not in dumped
        assert "password_hash" not in dumped


class TestGetUserActivity:
    @pytest.mark.asyncio
    async def test_unknown_user_fails_before_activity(self, unit_env):
        token = await _sign_up(unit_env, "alice")
        use_case = await unit_env.get(GetUserActivityUseCase)

        with pytest.raises(UserNotFoundError):
            await use_case.execute(
                GetUserActivityRequest(username=Username("ghost"), authorization=token)
            )

    @pytest.mark.asyncio
    async def test_activity_lists_posts_newest_first(self, unit_env):
        # Arrange
        token = await _sign_up(unit_env, "alice")
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        alice = await user_repo.find_by_username(Username("alice"))
        base = datetime(2024, 1, 1)
        older = await post_repo.save(
            Post(
                id=PostId(uuid4()),
                author_id=UserId(alice.id),
                content="one",
                created_at=base,
                updated_at=base,
            )
        )
        newer = await post_repo.save(
            Post(
                id=PostId(uuid4()),
                author_id=UserId(alice.id),
                content="two",
                created_at=base + timedelta(hours=1),
                updated_at=base + timedelta(hours=1),
            )
        )
        use_case = await unit_env.get(GetUserActivityUseCase)

        # Act
        entries = await use_case.execute(
            GetUserActivityRequest(username=Username("alice"), authorization=token)
        )

        # Assert
        assert [(e.kind, e.post_id) for e in entries] == [
            (ActivityKind.POSTED, str(newer.id)),
            (ActivityKind.POSTED, str(older.id)),
        ]


class TestUpdateAndDelete:
    @pytest.mark.asyncio
    async def test_owner_updates_profile(self, unit_env):
        token = await _sign_up(unit_env, "alice")
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)

        message = await use_case.execute(
            UpdateUserProfileRequest(
                username=Username("alice"), authorization=token, nickname="Al"
            )
        )

        assert message == "The profile has been updated."
        user = await user_repo.find_by_username(Username("alice"))
        assert user.nickname == "Al"

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        await _sign_up(unit_env, "alice")
        bob_token = await _sign_up(unit_env, "bob")
        use_case = await unit_env.get(DeleteUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteUserRequest(username=Username("alice"), authorization=bob_token)
            )

        assert await user_repo.find_by_username(Username("alice")) is not None

    @pytest.mark.asyncio
    async def test_owner_deletes_self(self, unit_env):
        token = await _sign_up(unit_env, "alice")
        use_case = await unit_env.get(DeleteUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        message = await use_case.execute(
            DeleteUserRequest(username=Username("alice"), authorization=token)
        )

        assert message == "The user has been deleted."
        assert await user_repo.find_by_username(Username("alice")) is None
