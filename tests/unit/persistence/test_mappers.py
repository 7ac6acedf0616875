"""Unit tests for row mappers."""

from datetime import datetime
from uuid import uuid4

from circle.domain.value import Email, Username
from circle.persistence.mappers import row_to_user, user_to_dict
from tests.conftest import make_user


class TestUserMapper:
    """User rows store the digest in the password column."""

    def test_user_to_dict_renames_digest(self):
        user = make_user("alice", password_hash="digest")

        row = user_to_dict(user)

        assert row["password"] == "digest"
        assert "password_hash" not in row
        assert row["username"] == "alice"
        assert row["email"] == "alice@example.com"

    def test_row_to_user_accepts_string_ids(self):
        now = datetime.now()
        user_id, follower = uuid4(), uuid4()

        user = row_to_user(
            {
                "id": str(user_id),
                "username": "alice",
                "email": "alice@example.com",
                "password": "digest",
                "nickname": None,
                "profile_pic": None,
                "profile_banner": None,
                "bio": "hi",
                "followers": [str(follower)],
                "following": None,
                "created_at": now,
                "updated_at": now,
            }
        )

        assert user.id == user_id
        assert user.username == Username("alice")
        assert user.email == Email("alice@example.com")
        assert user.password_hash == "digest"
        assert user.followers == [follower]
        assert user.following == []

    def test_repr_hides_digest(self):
        user = make_user("alice", password_hash="digest")

        assert "digest" not in repr(user)
