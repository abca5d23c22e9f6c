"""
Writes are committed before the response leaves the app.

Each request is driven through the raw ASGI interface; when the last body
message is sent, the table is counted over a separate engine.
"""

import asyncio
import json

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import create_async_engine

from brainvault.shared.models import ContentItem, ShareLink, User

from .conftest import API, PASSWORD


@pytest.fixture
async def observer(test_settings):
    engine = create_async_engine(test_settings.DATABASE_URL)
    yield engine
    await engine.dispose()


async def _count_when_response_sent(app, observer, model, method, path, body, token=None):
    """Run one request; returns (status, rows visible when the body went out)."""
    payload = json.dumps(body).encode()
    headers = [
        (b"host", b"test"),
        (b"content-type", b"application/json"),
        (b"content-length", str(len(payload)).encode()),
    ]
    if token:
        headers.append((b"authorization", token.encode()))

    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": b"",
        "headers": headers,
        "client": ("127.0.0.1", 50000),
        "server": ("test", 80),
    }

    request_sent = False
    response_done = asyncio.Event()
    seen = {}

    async def receive():
        nonlocal request_sent
        if not request_sent:
            request_sent = True
            return {"type": "http.request", "body": payload, "more_body": False}
        await response_done.wait()
        return {"type": "http.disconnect"}

    async def send(message):
        if message["type"] == "http.response.start":
            seen["status"] = message["status"]
        elif message["type"] == "http.response.body" and not message.get("more_body", False):
            async with observer.connect() as conn:
                seen["rows"] = await conn.scalar(select(func.count()).select_from(model))
            response_done.set()

    await app(scope, receive, send)
    return seen["status"], seen["rows"]


async def test_signup_row_is_committed_before_response(app, observer):
    status, rows = await _count_when_response_sent(
        app,
        observer,
        User,
        "POST",
        f"{API}/signup",
        {"username": "alice", "password": PASSWORD},
    )

    assert status == 200
    assert rows == 1


async def test_share_link_is_committed_before_response(app, observer, register):
    token = await register("alice")

    status, rows = await _count_when_response_sent(
        app, observer, ShareLink, "POST", f"{API}/brain/share", {"share": True}, token
    )

    assert status == 200
    assert rows == 1


async def test_delete_is_committed_before_response(app, observer, register, add_content):
    token = await register("alice")
    content_id = await add_content(token, "python")

    status, rows = await _count_when_response_sent(
        app, observer, ContentItem, "DELETE", f"{API}/content", {"content_id": content_id}, token
    )

    assert status == 200
    assert rows == 0


async def test_signup_then_signin_immediately(client):
    response = await client.post(
        f"{API}/signup", json={"username": "bob", "password": PASSWORD}
    )
    assert response.status_code == 200

    response = await client.post(
        f"{API}/signin", json={"username": "bob", "password": PASSWORD}
    )
    assert response.status_code == 200
    assert response.json()["token"]
