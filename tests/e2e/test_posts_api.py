"""End-to-end tests for the post endpoints."""

from uuid import uuid4


class TestPosts:
    def test_create_and_get_post(self, client, sign_up):
        headers = sign_up("alice")

        created = client.post("/posts", json={"content": "Hello"}, headers=headers)
        fetched = client.get(f"/posts/{created.json()['post_id']}")

        assert created.status_code == 201
        assert fetched.status_code == 200
        assert fetched.json()["content"] == "Hello"

    def test_create_requires_token(self, client):
        response = client.post("/posts", json={"content": "Hello"})

        assert response.status_code == 400

    def test_empty_content_unprocessable(self, client, sign_up):
        headers = sign_up("alice")

        response = client.post("/posts", json={"content": ""}, headers=headers)

        assert response.status_code == 422

    def test_get_unknown_post(self, client):
        response = client.get(f"/posts/{uuid4()}")

        assert response.status_code == 404
        assert "error" in response.json()


class TestLikesAndShares:
    def test_second_like_conflicts(self, client, sign_up):
        headers = sign_up("alice")
        post_id = client.post("/posts", json={"content": "x"}, headers=headers).json()[
            "post_id"
        ]

        first = client.post(f"/posts/{post_id}/like", headers=headers)
        second = client.post(f"/posts/{post_id}/like", headers=headers)

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json() == {"error": "Already liked this post"}

    def test_like_unknown_post(self, client, sign_up):
        headers = sign_up("alice")

        response = client.post(f"/posts/{uuid4()}/like", headers=headers)

        assert response.status_code == 404

    def test_share_is_repeatable(self, client, sign_up):
        headers = sign_up("alice")
        post_id = client.post("/posts", json={"content": "x"}, headers=headers).json()[
            "post_id"
        ]

        first = client.post(f"/posts/{post_id}/share", headers=headers)
        second = client.post(f"/posts/{post_id}/share", headers=headers)

        assert first.status_code == 201
        assert second.status_code == 201
        assert first.json()["share_id"] != second.json()["share_id"]

    def test_like_requires_token(self, client, sign_up):
        headers = sign_up("alice")
        post_id = client.post("/posts", json={"content": "x"}, headers=headers).json()[
            "post_id"
        ]

        response = client.post(f"/posts/{post_id}/like")

        assert response.status_code == 400


class TestDeletedAuthor:
    """Tokens outlive a profile delete but can no longer write."""

    def test_deleted_users_token_cannot_post_like_or_share(self, client, sign_up):
        # Arrange
        alice = sign_up("alice")
        bob = sign_up("bob")
        post_id = client.post("/posts", json={"content": "x"}, headers=bob).json()[
            "post_id"
        ]
        assert client.delete("/users/alice", headers=alice).status_code == 200

        # Act
        created = client.post("/posts", json={"content": "ghost"}, headers=alice)
        liked = client.post(f"/posts/{post_id}/like", headers=alice)
        shared = client.post(f"/posts/{post_id}/share", headers=alice)

        # Assert
        for response in (created, liked, shared):
            assert response.status_code == 401
            assert response.json() == {"error": "Auth token invalid"}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
