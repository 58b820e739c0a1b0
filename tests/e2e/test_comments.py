"""End-to-end tests for comment endpoints."""

from uuid import uuid4

from tests.factories import auth_headers


class TestCommentEndpoints:
    """Comment threads over HTTP."""

    def test_comment_requires_auth(self, client, published_policy):
        response = client.post(
            f"/policies/{published_policy}/comments", json={"content": "Hi"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "You must be signed in to comment."

    def test_invalid_token_is_unauthenticated(self, client, published_policy):
        response = client.post(
            f"/policies/{published_policy}/comments",
            json={"content": "Hi"},
            headers={"Cookie": "auth_token=invalid-token"},
        )

        assert response.status_code == 401

    def test_thread_flow(self, client, published_policy):
        """Comment, reply, vote, then read the thread back."""
        # Arrange
        alice = auth_headers("Alice")
        bob = auth_headers("Bob")

        # Act
        root = client.post(
            f"/policies/{published_policy}/comments",
            json={"content": "Great idea"},
            headers=alice,
        ).json()["comment"]
        reply = client.post(
            f"/policies/{published_policy}/comments",
            json={"content": "Agreed", "parent_id": root["comment_id"]},
            headers=bob,
        )
        vote = client.post(
            f"/comments/{root['comment_id']}/vote",
            json={"direction": "up"},
            headers=bob,
        )
        listing = client.get(f"/policies/{published_policy}/comments")

        # Assert
        assert reply.status_code == 201
        assert vote.status_code == 200
        assert vote.json() == {"upvotes": 1, "downvotes": 0}
        body = listing.json()
        assert body["total_count"] == 2
        assert body["has_more"] is False
        assert body["next_cursor"] is None
        [thread] = body["comments"]
        assert thread["author_name"] == "Alice"
        assert thread["score"] == 1
        assert [r["content"] for r in thread["replies"]] == ["Agreed"]

    def test_reply_to_reply_is_rejected(self, client, published_policy):
        alice = auth_headers("Alice")
        root = client.post(
            f"/policies/{published_policy}/comments",
            json={"content": "Root"},
            headers=alice,
        ).json()["comment"]
        reply = client.post(
            f"/policies/{published_policy}/comments",
            json={"content": "Reply", "parent_id": root["comment_id"]},
            headers=alice,
        ).json()["comment"]

        response = client.post(
            f"/policies/{published_policy}/comments",
            json={"content": "Too deep", "parent_id": reply["comment_id"]},
            headers=alice,
        )

        assert response.status_code == 400

    def test_deleting_someone_elses_comment_is_forbidden(
        self, client, published_policy
    ):
        comment = client.post(
            f"/policies/{published_policy}/comments",
            json={"content": "Mine"},
            headers=auth_headers("Alice"),
        ).json()["comment"]

        response = client.delete(
            f"/comments/{comment['comment_id']}", headers=auth_headers("Mallory")
        )

        assert response.status_code == 403

    def test_invalid_sort_is_bad_request(self, client, published_policy):
        response = client.get(
            f"/policies/{published_policy}/comments", params={"sort": "oldest"}
        )

        assert response.status_code == 400

    def test_unknown_policy_is_not_found(self, client):
        response = client.get(f"/policies/{uuid4()}/comments")

        assert response.status_code == 404

    def test_malformed_policy_id_is_bad_request(self, client):
        response = client.get("/policies/not-a-uuid/comments")

        assert response.status_code == 400
