"""HTTP surface: status codes, error bodies and the end-to-end ordering flow."""

import uuid

import pytest


async def create_user(client, username="alice", **fields):
    body = {"username": username, "email": f"{username}@mail.com", **fields}
    response = await client.post("/users", json=body)
    assert response.status_code == 201, response.text
    return response.json()


async def create_link(client, user, title, **fields):
    body = {
        "user_id": user["id"],
        "title": title,
        "url": f"https://{title.lower()}.example.com",
        **fields,
    }
    response = await client.post("/links", json=body)
    assert response.status_code == 201, response.text
    return response.json()


async def link_titles(client, user):
    response = await client.get(f"/users/{user['id']}/links")
    assert response.status_code == 200
    return [(link["title"], link["position"]) for link in response.json()]


class TestUsers:
    async def test_create_user(self, client):
        user = await create_user(client, display_name="Alice")

        assert user["username"] == "alice"
        assert user["display_name"] == "Alice"
        assert user["theme"] == "minimal"
        assert user["is_active"] is True

    async def test_duplicate_username(self, client):
        await create_user(client)

        response = await client.post(
            "/users", json={"username": "alice", "email": "second@mail.com"}
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

    async def test_invalid_body(self, client):
        response = await client.post("/users", json={"username": "al", "email": "bad"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["details"]["errors"]

    async def test_patch_user(self, client):
        user = await create_user(client, bio="Hello")

        response = await client.patch(
            f"/users/{user['id']}", json={"theme": "dark", "bio": None}
        )

        assert response.status_code == 200
        assert response.json()["theme"] == "dark"
        assert response.json()["bio"] is None

    async def test_patch_unknown_user(self, client):
        response = await client.patch(f"/users/{uuid.uuid4()}", json={"bio": "x"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_get_by_username(self, client):
        user = await create_user(client)

        response = await client.get("/users/by-username/alice")
        missing = await client.get("/users/by-username/nobody")

        assert response.status_code == 200
        assert response.json()["id"] == user["id"]
        assert missing.status_code == 404


class TestLinks:
    async def test_create_for_unknown_user(self, client):
        response = await client.post(
            "/links",
            json={"user_id": str(uuid.uuid4()), "title": "A", "url": "https://a.com"},
        )

        assert response.status_code == 404

    async def test_create_rejects_bad_url(self, client):
        user = await create_user(client)

        response = await client.post(
            "/links", json={"user_id": user["id"], "title": "A", "url": "javascript:alert(1)"}
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_patch_link(self, client):
        user = await create_user(client)
        link = await create_link(client, user, "A", description="old")

        response = await client.patch(f"/links/{link['id']}", json={"description": None})

        assert response.status_code == 200
        assert response.json()["description"] is None
        assert response.json()["title"] == "A"

    async def test_patch_link_null_title(self, client):
        user = await create_user(client)
        link = await create_link(client, user, "A")

        response = await client.patch(f"/links/{link['id']}", json={"title": None})

        assert response.status_code == 400

    async def test_delete_link(self, client):
        user = await create_user(client)
        link = await create_link(client, user, "A")

        response = await client.delete(f"/links/{link['id']}")
        again = await client.delete(f"/links/{link['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert again.status_code == 404

    async def test_track_click(self, client):
        user = await create_user(client)
        link = await create_link(client, user, "A")

        response = await client.post(f"/links/{link['id']}/click")
        unknown = await client.post(f"/links/{uuid.uuid4()}/click")

        assert response.json() == {"success": True}
        assert unknown.status_code == 200
        assert unknown.json() == {"success": False}
        links = (await client.get(f"/users/{user['id']}/links")).json()
        assert links[0]["click_count"] == 1

    async def test_reorder_rejects_foreign_link(self, client):
        alice = await create_user(client, "alice")
        bob = await create_user(client, "bob")
        mine = await create_link(client, alice, "Mine")
        theirs = await create_link(client, bob, "Theirs")

        response = await client.post(
            f"/users/{alice['id']}/links/reorder",
            json={
                "link_orders": [
                    {"id": mine["id"], "position": 1},
                    {"id": theirs["id"], "position": 0},
                ]
            },
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ARGUMENT"
        assert await link_titles(client, alice) == [("Mine", 0)]

    async def test_alice_walkthrough(self, client):
        alice = await create_user(client)
        a = await create_link(client, alice, "A")
        b = await create_link(client, alice, "B")
        c = await create_link(client, alice, "C")
        assert [a["position"], b["position"], c["position"]] == [0, 1, 2]

        await client.delete(f"/links/{b['id']}")
        assert await link_titles(client, alice) == [("A", 0), ("C", 1)]

        response = await client.post(
            f"/users/{alice['id']}/links/reorder",
            json={"link_orders": [{"id": c["id"], "position": 0}, {"id": a["id"], "position": 1}]},
        )
        assert response.json() == {"success": True}
        assert await link_titles(client, alice) == [("C", 0), ("A", 1)]


class TestProfiles:
    async def test_public_profile(self, client):
        alice = await create_user(client)
        shown = await create_link(client, alice, "Shown")
        hidden = await create_link(client, alice, "Hidden")
        await client.patch(f"/links/{hidden['id']}", json={"is_active": False})

        response = await client.get("/profiles/alice")

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["username"] == "alice"
        assert [link["id"] for link in body["links"]] == [shown["id"]]

    async def test_inactive_profile_is_not_found(self, client):
        alice = await create_user(client)
        await client.patch(f"/users/{alice['id']}", json={"is_active": False})

        response = await client.get("/profiles/alice")

        assert response.status_code == 404
        assert response.json()["error"]["details"] == {"username": "alice"}

    async def test_follow_link_redirects_and_counts(self, client):
        alice = await create_user(client)
        link = await create_link(client, alice, "Blog")

        response = await client.get(f"/profiles/alice/go/{link['id']}")

        assert response.status_code == 307
        assert response.headers["location"] == "https://blog.example.com"
        links = (await client.get(f"/users/{alice['id']}/links")).json()
        assert links[0]["click_count"] == 1

    async def test_follow_hidden_link_is_not_found(self, client):
        alice = await create_user(client)
        link = await create_link(client, alice, "Blog")
        await client.patch(f"/links/{link['id']}", json={"is_active": False})

        response = await client.get(f"/profiles/alice/go/{link['id']}")

        assert response.status_code == 404


class TestHealth:
    async def test_health_and_live(self, client):
        health = await client.get("/health")
        live = await client.get("/live")

        assert health.status_code == 200
        assert health.json()["status"] == "healthy"
        assert live.json() == {"status": "alive"}

    @pytest.mark.parametrize("reachable, status_code", [(True, 200), (False, 503)])
    async def test_ready(self, client, monkeypatch, reachable, status_code):
        async def fake_ping():
            return reachable

        monkeypatch.setattr("src.api.handlers.health_handler.ping_db", fake_ping)

        response = await client.get("/ready")

        assert response.status_code == status_code

    async def test_request_id_is_echoed(self, client):
        response = await client.get("/live", headers={"X-Request-ID": "req-123"})

        assert response.headers["x-request-id"] == "req-123"
