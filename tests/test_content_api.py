"""Tests for saving, listing and deleting content."""

import uuid

from brainvault.shared.repositories.content_repository import ContentRepository

from .conftest import API


async def _list(client, token):
    response = await client.get(f"{API}/content", headers={"Authorization": token})
    assert response.status_code == 200
    return response.json()["content"]


async def test_create_returns_id_and_embeds_after_response(client, register, embedding_client):
    token = await register("alice")

    response = await client.post(
        f"{API}/content",
        json={"link": "http://x", "type": "youtube", "title": "python"},
        headers={"Authorization": token},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Content added"
    assert uuid.UUID(body["content_id"])
    assert embedding_client.calls == ["python youtube video content tutorial"]


async def test_list_shows_item_shape(client, register, add_content):
    token = await register("alice")
    content_id = await add_content(token, "python")

    [item] = await _list(client, token)

    assert item["id"] == content_id
    assert item["link"] == "http://x"
    assert item["type"] == "article"
    assert item["title"] == "python"
    assert item["tags"] == []
    assert item["embedding"] == [1.0, 0.0, 0.0, 0.01]
    assert item["user"]["username"] == "alice"
    assert item["created_at"]


async def test_list_is_newest_first(client, register, add_content):
    token = await register("alice")
    for title in ("first", "second", "third"):
        await add_content(token, title)

    titles = [item["title"] for item in await _list(client, token)]

    assert titles == ["third", "second", "first"]


async def test_embedding_failure_does_not_fail_create(client, register, embedding_client):
    token = await register("alice")
    embedding_client.fail = True

    response = await client.post(
        f"{API}/content",
        json={"link": "http://x", "type": "article", "title": "t"},
        headers={"Authorization": token},
    )

    assert response.status_code == 200
    [item] = await _list(client, token)
    assert item["embedding"] is None


async def test_create_rejects_unknown_type(client, register):
    token = await register("alice")

    response = await client.post(
        f"{API}/content",
        json={"link": "http://x", "type": "podcast", "title": "t"},
        headers={"Authorization": token},
    )

    assert response.status_code == 400
    assert await _list(client, token) == []


async def test_create_requires_auth(client):
    response = await client.post(
        f"{API}/content", json={"link": "http://x", "type": "article", "title": "t"}
    )

    assert response.status_code == 404


async def test_users_only_see_their_own_items(client, register, add_content):
    alice = await register("alice")
    bob = await register("bob")
    await add_content(alice, "python")

    assert len(await _list(client, alice)) == 1
    assert await _list(client, bob) == []


async def test_delete_own_item_removes_row_and_vector(client, register, add_content, vector_db):
    token = await register("alice")
    content_id = await add_content(token, "python")
    [item] = await _list(client, token)
    owner_id = item["user"]["id"]
    assert await vector_db.search([1.0, 0.0, 0.0, 0.01], user_id=owner_id)

    response = await client.request(
        "DELETE", f"{API}/content", json={"content_id": content_id}, headers={"Authorization": token}
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Content deleted"}
    assert await _list(client, token) == []
    assert await vector_db.search([1.0, 0.0, 0.0, 0.01], user_id=owner_id) == []


async def test_delete_foreign_item_is_noop(client, register, add_content):
    alice = await register("alice")
    bob = await register("bob")
    content_id = await add_content(alice, "python")

    response = await client.request(
        "DELETE", f"{API}/content", json={"content_id": content_id}, headers={"Authorization": bob}
    )

    assert response.status_code == 200
    assert len(await _list(client, alice)) == 1


async def test_delete_unknown_or_malformed_id_is_noop(client, register, add_content):
    token = await register("alice")
    await add_content(token, "python")

    for content_id in (str(uuid.uuid4()), "not-an-id"):
        response = await client.request(
            "DELETE", f"{API}/content", json={"content_id": content_id}, headers={"Authorization": token}
        )
        assert response.status_code == 200

    assert len(await _list(client, token)) == 1


async def test_end_to_end_signup_signin_save_list(client):
    response = await client.post(f"{API}/signup", json={"username": "alice", "password": "Abcdef1!"})
    assert response.status_code == 200

    response = await client.post(f"{API}/signin", json={"username": "alice", "password": "Abcdef1!"})
    assert response.status_code == 200
    token = response.json()["token"]

    response = await client.post(
        f"{API}/content",
        json={"link": "http://x", "type": "article", "title": "t"},
        headers={"Authorization": token},
    )
    assert response.status_code == 200

    [item] = await _list(client, token)
    assert item["title"] == "t"
    assert item["embedding"]


async def test_create_failure_returns_500_and_saves_nothing(
    client, register, embedding_client, monkeypatch
):
    token = await register("alice")

    async def broken_insert(self, **kwargs):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(ContentRepository, "create_item", broken_insert)

    response = await client.post(
        f"{API}/content",
        json={"link": "http://x", "type": "article", "title": "python"},
        headers={"Authorization": token},
    )

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"
    assert embedding_client.calls == []

    assert await _list(client, token) == []
