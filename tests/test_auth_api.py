"""Tests for signup, signin and the token dependency."""

import uuid

from httpx import ASGITransport, AsyncClient

from brainvault.api.main import create_application
from brainvault.shared.repositories.user_repository import UserRepository
from brainvault.shared.utils.security import SecurityUtils

from .conftest import API, PASSWORD


async def test_signup_then_signin_yields_verifiable_token(client, test_settings):
    response = await client.post(f"{API}/signup", json={"username": "alice", "password": PASSWORD})
    assert response.status_code == 200
    assert response.json() == {"message": "User signed up"}

    response = await client.post(f"{API}/signin", json={"username": "alice", "password": PASSWORD})
    assert response.status_code == 200

    payload = SecurityUtils.decode_access_token(response.json()["token"], test_settings.SECRET_KEY)
    assert uuid.UUID(payload["id"])
    assert "exp" not in payload


async def test_duplicate_signup_is_conflict_regardless_of_password(client, register):
    await register("alice")

    response = await client.post(
        f"{API}/signup", json={"username": "alice", "password": "Zyxwvu9#"}
    )

    assert response.status_code == 403
    assert response.json()["error"]["message"] == "User already exists"


async def test_signup_validation_errors_are_structured(client):
    response = await client.post(f"{API}/signup", json={"username": "al", "password": "weak"})

    assert response.status_code == 400
    body = response.json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    fields = {error["field"] for error in body["details"]["errors"]}
    assert fields == {"username", "password"}


async def test_signup_with_missing_body_is_400(client):
    response = await client.post(f"{API}/signup")

    assert response.status_code == 400


async def test_signin_wrong_password_is_403(client, register):
    await register("alice")

    response = await client.post(f"{API}/signin", json={"username": "alice", "password": "Wrong1!x"})

    assert response.status_code == 403
    assert "token" not in response.json()
    assert response.json()["error"]["code"] == "INCORRECT_PASSWORD"


async def test_signin_unknown_user_is_404(client):
    response = await client.post(f"{API}/signin", json={"username": "nobody", "password": PASSWORD})

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "User does not exist"


async def test_missing_token_is_incorrect_credentials(client):
    response = await client.get(f"{API}/content")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Incorrect Credentials"
    assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


async def test_bearer_prefix_is_not_stripped(client, register):
    token = await register("alice")

    response = await client.get(f"{API}/content", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 404


async def test_raw_token_is_accepted(client, register):
    token = await register("alice")

    response = await client.get(f"{API}/content", headers={"Authorization": token})

    assert response.status_code == 200


async def test_forged_token_is_rejected(client):
    token = SecurityUtils.create_access_token({"id": str(uuid.uuid4())}, "not-the-secret")

    response = await client.get(f"{API}/content", headers={"Authorization": token})

    assert response.status_code == 404


async def test_token_without_usable_id_is_rejected(client, test_settings):
    for payload in ({"sub": "x"}, {"id": "not-a-uuid"}):
        token = SecurityUtils.create_access_token(payload, test_settings.SECRET_KEY)

        response = await client.get(f"{API}/content", headers={"Authorization": token})

        assert response.status_code == 404


async def test_auth_failure_status_is_configurable(test_settings, database, vector_db, embedding_client):
    settings = test_settings.model_copy(update={"AUTH_FAILURE_STATUS_CODE": 401})
    app = create_application(
        settings=settings,
        database=database,
        vector_db=vector_db,
        embedding_client=embedding_client,
    )

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get(f"{API}/content")

    assert response.status_code == 401


async def test_password_cost_follows_app_settings(test_settings, database, vector_db, embedding_client):
    settings = test_settings.model_copy(update={"PASSWORD_HASH_ROUNDS": 6})
    app = create_application(
        settings=settings,
        database=database,
        vector_db=vector_db,
        embedding_client=embedding_client,
    )

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.post(
            f"{API}/signup", json={"username": "carol", "password": PASSWORD}
        )
        assert response.status_code == 200
        response = await ac.post(
            f"{API}/signin", json={"username": "carol", "password": PASSWORD}
        )
        assert response.status_code == 200

    async with database.session_factory() as session:
        user = await UserRepository(session).get_by_username("carol")

    assert user.password_hash.split("$")[2] == "06"
