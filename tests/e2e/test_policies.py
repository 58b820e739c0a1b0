"""End-to-end tests for policy, endorsement and petition endpoints."""

from uuid import uuid4

from tests.factories import auth_headers


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["environment"] == "test"


class TestPolicyEndpoints:
    """Publishing, reading and deleting policies."""

    def test_create_requires_auth(self, client):
        response = client.post("/policies", json={"title": "T", "content": "C"})

        assert response.status_code == 401

    def test_empty_title_is_bad_request(self, client, author):
        response = client.post(
            "/policies", json={"title": "  ", "content": "Body"}, headers=author
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Title is required."

    def test_feed_is_empty_when_signed_out(self, client, published_policy):
        response = client.get("/policies")

        assert response.status_code == 200
        assert response.json() == {"policies": []}

    def test_feed_lists_published_policies(self, client, published_policy):
        response = client.get("/policies", headers=auth_headers())

        [policy] = response.json()["policies"]
        assert policy["policy_id"] == published_policy
        assert policy["author_name"] == "Policy Author"

    def test_reading_counts_views(self, client, published_policy):
        client.get(f"/policies/{published_policy}")
        response = client.get(f"/policies/{published_policy}")

        assert response.status_code == 200
        assert response.json()["view_count"] == 1
        assert response.json()["title"] == "Safer Streets Act"

    def test_unknown_policy_is_not_found(self, client):
        assert client.get(f"/policies/{uuid4()}").status_code == 404

    def test_only_author_deletes(self, client, author, published_policy):
        forbidden = client.delete(
            f"/policies/{published_policy}", headers=auth_headers()
        )
        deleted = client.delete(f"/policies/{published_policy}", headers=author)
        after = client.get(f"/policies/{published_policy}")

        assert forbidden.status_code == 403
        assert deleted.json() == {"deleted": True}
        assert after.status_code == 404

    def test_dashboard_for_author_only(self, client, author, published_policy):
        client.post(
            f"/policies/{published_policy}/sign",
            json={"full_name": "Ada Lovelace", "location": "London"},
            headers=auth_headers(),
        )

        forbidden = client.get(
            f"/policies/{published_policy}/dashboard", headers=auth_headers()
        )
        response = client.get(f"/policies/{published_policy}/dashboard", headers=author)

        assert forbidden.status_code == 403
        body = response.json()
        assert body["stats"]["total_signatures"] == 1
        assert body["stats"]["verified_signatures"] == 0
        assert body["top_locations"] == [{"location": "London", "count": 1}]
        assert len(body["signature_timeline"]) == 1


class TestEndorsementEndpoints:
    def test_endorse_and_withdraw(self, client, published_policy):
        endorser = auth_headers("Ada")

        endorsed = client.post(f"/policies/{published_policy}/endorse", headers=endorser)
        again = client.post(f"/policies/{published_policy}/endorse", headers=endorser)
        listed = client.get(f"/policies/{published_policy}/endorsements")
        withdrawn = client.delete(
            f"/policies/{published_policy}/endorse", headers=endorser
        )

        assert endorsed.status_code == 201
        assert endorsed.json() == {"endorsed": True, "count": 1}
        assert again.status_code == 400
        assert [e["user_name"] for e in listed.json()["endorsements"]] == ["Ada"]
        assert withdrawn.json() == {"endorsed": False, "count": 0}

    def test_withdrawing_missing_endorsement_is_not_found(
        self, client, published_policy
    ):
        response = client.delete(
            f"/policies/{published_policy}/endorse", headers=auth_headers()
        )

        assert response.status_code == 404


class TestPetitionEndpoints:
    def test_sign_once(self, client, published_policy):
        signer = auth_headers()

        first = client.post(
            f"/policies/{published_policy}/sign",
            json={"full_name": "Ada Lovelace"},
            headers=signer,
        )
        second = client.post(
            f"/policies/{published_policy}/sign",
            json={"full_name": "Ada Lovelace"},
            headers=signer,
        )
        listed = client.get(f"/policies/{published_policy}/sign")

        assert first.status_code == 201
        assert first.json()["email_verified"] is False
        assert first.json()["count"] == 1
        assert second.status_code == 400
        # Unverified signatures are not listed
        assert listed.json() == {"signatures": [], "count": 0}

    def test_sign_requires_auth(self, client, published_policy):
        response = client.post(
            f"/policies/{published_policy}/sign", json={"full_name": "Ada"}
        )

        assert response.status_code == 401

    def test_verify_unknown_token(self, client):
        response = client.get("/petitions/verify", params={"token": str(uuid4())})

        assert response.status_code == 404

    def test_verify_without_token(self, client):
        assert client.get("/petitions/verify").status_code == 400
