"""Tests for semantic search."""

from .conftest import API


async def _search(client, token, q):
    return await client.get(f"{API}/search", params={"q": q}, headers={"Authorization": token})


async def test_search_returns_matching_items_with_scores(client, register, add_content):
    token = await register("alice")
    python_id = await add_content(token, "python", content_type="youtube")
    await add_content(token, "cooking")

    response = await _search(client, token, "python")

    assert response.status_code == 200
    results = response.json()["results"]
    assert [r["id"] for r in results] == [python_id]
    assert results[0]["score"] >= 0.75
    assert results[0]["title"] == "python"
    assert results[0]["user"]["username"] == "alice"


async def test_search_results_are_sorted_thresholded_and_capped(client, register, add_content):
    token = await register("alice")
    for i in range(12):
        await add_content(token, f"python{' python' * (i % 3)}")
    await add_content(token, "music")

    results = (await _search(client, token, "python")).json()["results"]

    scores = [r["score"] for r in results]
    assert len(results) == 10
    assert all(score >= 0.75 for score in scores)
    assert scores == sorted(scores, reverse=True)
    assert all("python" in r["title"] for r in results)


async def test_search_never_returns_other_users_items(client, register, add_content):
    alice = await register("alice")
    bob = await register("bob")
    await add_content(alice, "python")

    response = await _search(client, bob, "python")

    assert response.status_code == 200
    assert response.json()["results"] == []


async def test_search_without_matches_is_empty(client, register, add_content):
    token = await register("alice")
    await add_content(token, "python")

    response = await _search(client, token, "gardening")

    assert response.json()["results"] == []


async def test_query_is_stripped_before_embedding(client, register, embedding_client):
    token = await register("alice")

    await _search(client, token, "  python  ")

    assert embedding_client.calls[-1] == "python"


async def test_blank_or_missing_query_is_400(client, register):
    token = await register("alice")

    for params in ({"q": ""}, {"q": "   "}, {}):
        response = await client.get(f"{API}/search", params=params, headers={"Authorization": token})
        assert response.status_code == 400


async def test_provider_failure_is_500(client, register, add_content, embedding_client):
    token = await register("alice")
    await add_content(token, "python")
    embedding_client.fail = True

    response = await _search(client, token, "python")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"


async def test_search_requires_auth(client):
    response = await client.get(f"{API}/search", params={"q": "python"})

    assert response.status_code == 404


async def test_blank_query_error_names_the_field(client, register):
    token = await register("alice")

    response = await _search(client, token, " ")

    [error] = response.json()["error"]["details"]["errors"]
    assert error["field"] == "q"
