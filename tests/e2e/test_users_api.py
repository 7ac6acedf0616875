"""End-to-end tests for the user endpoints."""

import jwt
import pytest
from fastapi.testclient import TestClient

from circle.config import Settings
from circle.interface.api.app import create_app
from circle.persistence.repository.inmemory import InMemoryUserRepository
from tests.di import build_test_container


class TestSignUp:
    """POST /users"""

    def test_sign_up_returns_token(self, client):
        # Act
        response = client.post(
            "/users",
            json={"username": "alice", "email": "alice@example.com", "password": "pw"},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User successfully created"
        assert body["authToken"]

    def test_duplicate_username_conflicts(self, client, sign_up):
        sign_up("alice")

        response = client.post(
            "/users",
            json={"username": "alice", "email": "other@example.com", "password": "pw"},
        )

        assert response.status_code == 409
        assert response.json() == {"error": "Username already taken"}

    def test_duplicate_email_conflicts(self, client, sign_up):
        sign_up("alice")

        response = client.post(
            "/users",
            json={"username": "bob", "email": "alice@example.com", "password": "pw"},
        )

        assert response.status_code == 409
        assert response.json() == {"error": "Email has already been taken"}

    def test_invalid_email_rejected_and_not_stored(self, client, sign_up):
        # Act
        response = client.post(
            "/users",
            json={"username": "alice", "email": "not-an-email", "password": "pw"},
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {"error": "The email address you entered is invalid"}

        # The username is still free
        sign_up("alice")

    def test_display_name_email_rejected(self, client):
        response = client.post(
            "/users",
            json={
                "username": "bob",
                "email": "Bob <bob@example.com>",
                "password": "pw",
            },
        )

        assert response.status_code == 400
        assert response.json() == {"error": "The email address you entered is invalid"}

    def test_display_name_cannot_reuse_taken_address(self, client, sign_up):
        sign_up("alice")

        response = client.post(
            "/users",
            json={
                "username": "eve",
                "email": "Eve <alice@example.com>",
                "password": "pw",
            },
        )

        assert response.status_code == 400
        assert client.post(
            "/users",
            json={"username": "eve", "email": "alice@EXAMPLE.com", "password": "pw"},
        ).json() == {"error": "Email has already been taken"}

    def test_missing_fields_are_unprocessable(self, client):
        response = client.post("/users", json={"username": "alice"})

        assert response.status_code == 422


class TestAuthenticate:
    """POST /users/authenticate"""

    def test_correct_credentials_return_token_for_user(self, client, sign_up):
        # Arrange
        headers = sign_up("alice", password="s3cret")
        profile = client.get("/users/alice", headers=headers).json()

        # Act
        response = client.post(
            "/users/authenticate",
            json={"email": "alice@example.com", "password": "s3cret"},
        )

        # Assert
        assert response.status_code == 200
        token = response.json()["authToken"]
        settings = Settings()
        payload = jwt.decode(
            token, settings.auth.jwt_secret, algorithms=[settings.auth.jwt_algorithm]
        )
        assert payload["user_id"] == profile["id"]

    @pytest.mark.parametrize(
        "email, password",
        [
            ("alice@example.com", "wrong"),
            ("nobody@example.com", "s3cret"),
        ],
    )
    def test_bad_credentials_rejected(self, client, sign_up, email, password):
        sign_up("alice", password="s3cret")

        response = client.post(
            "/users/authenticate", json={"email": email, "password": password}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Incorrect email or password"}

    def test_long_password_checked_past_72_bytes(self, client, sign_up):
        prefix = "p" * 72
        sign_up("alice", password=prefix + "right")

        wrong = client.post(
            "/users/authenticate",
            json={"email": "alice@example.com", "password": prefix + "wrong"},
        )
        right = client.post(
            "/users/authenticate",
            json={"email": "alice@example.com", "password": prefix + "right"},
        )

        assert wrong.status_code == 401
        assert right.status_code == 200


class TestGetUser:
    """GET /users/{username}"""

    def test_profile_dto(self, client, sign_up):
        headers = sign_up("alice")

        response = client.get("/users/alice", headers=headers)

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "alice"
        assert body["email"] == "alice@example.com"
        assert body["followers"] == 0
        assert body["following"] == 0
        assert "password" not in body
        assert "password_hash" not in body

    def test_requires_token(self, client, sign_up):
        sign_up("alice")

        response = client.get("/users/alice")

        assert response.status_code == 400
        assert response.json() == {"error": "Auth token not provided"}

    def test_invalid_token(self, client, sign_up):
        sign_up("alice")

        response = client.get(
            "/users/alice", headers={"Authorization": "Bearer invalid-token"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Auth token invalid"}

    def test_unknown_user(self, client, sign_up):
        headers = sign_up("alice")

        response = client.get("/users/ghost", headers=headers)

        assert response.status_code == 404


class TestActivity:
    """GET /users/{username}/activity"""

    def test_post_like_share_newest_first(self, client, sign_up):
        # Arrange
        alice = sign_up("alice")
        bob = sign_up("bob")
        bobs_post = client.post("/posts", json={"content": "bob"}, headers=bob).json()
        other_post = client.post("/posts", json={"content": "b2"}, headers=bob).json()

        own = client.post("/posts", json={"content": "mine"}, headers=alice).json()
        client.post(f"/posts/{bobs_post['post_id']}/like", headers=alice)
        share = client.post(
            f"/posts/{other_post['post_id']}/share", headers=alice
        ).json()

        # Act
        response = client.get("/users/alice/activity", headers=alice)

        # Assert
        assert response.status_code == 200
        entries = response.json()
        assert [(e["kind"], e["post_id"]) for e in entries] == [
            ("SHARED", other_post["post_id"]),
            ("LIKED", bobs_post["post_id"]),
            ("POSTED", own["post_id"]),
        ]
        assert share["share_id"] not in {e["post_id"] for e in entries}

    def test_unknown_user_activity(self, client, sign_up):
        headers = sign_up("alice")

        response = client.get("/users/ghost/activity", headers=headers)

        assert response.status_code == 404

    def test_activity_requires_token(self, client, sign_up):
        sign_up("alice")

        response = client.get("/users/alice/activity")

        assert response.status_code == 400


class TestUpdateProfile:
    """PATCH /users/{username}"""

    def test_owner_updates_profile(self, client, sign_up):
        headers = sign_up("alice")

        response = client.patch(
            "/users/alice",
            json={"nickname": "Al", "email": "al@example.com"},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.text == "The profile has been updated."
        profile = client.get("/users/alice", headers=headers).json()
        assert profile["nickname"] == "Al"
        assert profile["email"] == "al@example.com"

    def test_new_password_used_for_sign_in(self, client, sign_up):
        headers = sign_up("alice", password="old")

        client.patch("/users/alice", json={"password": "new"}, headers=headers)

        old = client.post(
            "/users/authenticate",
            json={"email": "alice@example.com", "password": "old"},
        )
        new = client.post(
            "/users/authenticate",
            json={"email": "alice@example.com", "password": "new"},
        )
        assert old.status_code == 401
        assert new.status_code == 200

    def test_update_without_token(self, client, sign_up):
        sign_up("alice")

        response = client.patch("/users/alice", json={"nickname": "x"})

        assert response.status_code == 400

    def test_update_other_users_profile_forbidden(self, client, sign_up):
        sign_up("alice")
        bob = sign_up("bob")

        response = client.patch("/users/alice", json={"nickname": "x"}, headers=bob)

        assert response.status_code == 403

    def test_update_unknown_user(self, client, sign_up):
        headers = sign_up("alice")

        response = client.patch("/users/ghost", json={"nickname": "x"}, headers=headers)

        assert response.status_code == 404
        assert response.text == "Invalid username."

    def test_update_to_display_name_email(self, client, sign_up):
        sign_up("bob")
        headers = sign_up("alice")

        response = client.patch(
            "/users/alice", json={"email": "Eve <bob@example.com>"}, headers=headers
        )

        assert response.status_code == 400
        profile = client.get("/users/alice", headers=headers).json()
        assert profile["email"] == "alice@example.com"

    def test_update_store_failure(self, client, sign_up, monkeypatch):
        """A write that affects no rows is a plain-text 500."""
        headers = sign_up("alice")

        async def no_rows(self, user):
            return 0

        monkeypatch.setattr(InMemoryUserRepository, "update", no_rows)

        response = client.patch("/users/alice", json={"nickname": "x"}, headers=headers)

        assert response.status_code == 500
        assert response.text == "Failed to update the profile."

    def test_update_to_invalid_email(self, client, sign_up):
        headers = sign_up("alice")

        response = client.patch("/users/alice", json={"email": "nope"}, headers=headers)

        assert response.status_code == 400

    def test_update_to_taken_email(self, client, sign_up):
        sign_up("bob")
        headers = sign_up("alice")

        response = client.patch(
            "/users/alice", json={"email": "bob@example.com"}, headers=headers
        )

        assert response.status_code == 409


class TestDeleteUser:
    """DELETE /users/{username}"""

    def test_owner_deletes_self(self, client, sign_up):
        headers = sign_up("alice")
        bob = sign_up("bob")

        response = client.delete("/users/alice", headers=headers)

        assert response.status_code == 200
        assert response.text == "The user has been deleted."
        assert client.get("/users/alice", headers=bob).status_code == 404

    def test_delete_without_token(self, client, sign_up):
        sign_up("alice")

        response = client.delete("/users/alice")

        assert response.status_code == 400

    def test_delete_other_user_forbidden(self, client, sign_up):
        alice = sign_up("alice")
        bob = sign_up("bob")

        response = client.delete("/users/alice", headers=bob)

        assert response.status_code == 403
        assert client.get("/users/alice", headers=alice).status_code == 200

    def test_delete_unknown_user_removes_nothing(self, client, sign_up):
        alice = sign_up("alice")

        response = client.delete("/users/ghost", headers=alice)

        assert response.status_code == 404
        assert response.text == "Invalid username."
        assert client.get("/users/alice", headers=alice).status_code == 200

    def test_delete_store_failure(self, client, sign_up, monkeypatch):
        headers = sign_up("alice")

        async def no_rows(self, username):
            return 0

        monkeypatch.setattr(InMemoryUserRepository, "delete_by_username", no_rows)

        response = client.delete("/users/alice", headers=headers)

        assert response.status_code == 500
        assert response.text == "Failed to destroy the user."


class TestPermissiveOwnership:
    """With ownership enforcement off any authenticated user may mutate."""

    @pytest.fixture
    def permissive_client(self, monkeypatch):
        monkeypatch.setenv("AUTH__ENFORCE_PROFILE_OWNERSHIP", "false")
        return TestClient(create_app(container=build_test_container()))

    def _sign_up(self, client, username):
        response = client.post(
            "/users",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": "pw",
            },
        )
        return {"Authorization": f"Bearer {response.json()['authToken']}"}

    def test_other_user_can_update(self, permissive_client):
        self._sign_up(permissive_client, "alice")
        bob = self._sign_up(permissive_client, "bob")

        response = permissive_client.patch(
            "/users/alice", json={"nickname": "x"}, headers=bob
        )

        assert response.status_code == 200

    def test_other_user_can_delete(self, permissive_client):
        self._sign_up(permissive_client, "alice")
        bob = self._sign_up(permissive_client, "bob")

        response = permissive_client.delete("/users/alice", headers=bob)

        assert response.status_code == 200

    def test_token_still_required(self, permissive_client):
        self._sign_up(permissive_client, "alice")

        response = permissive_client.delete("/users/alice")

        assert response.status_code == 400
