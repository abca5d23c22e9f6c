"""
Shared fixtures.

The application is built through ``create_application`` with its
collaborators injected: a file-backed SQLite database, an in-memory Qdrant
collection with 4-dimensional vectors, and a keyword-based fake embedding
client whose vectors make similarity predictable.
"""

import math
from typing import List

import pytest
from httpx import ASGITransport, AsyncClient
from qdrant_client import AsyncQdrantClient

from brainvault.api.main import create_application
from brainvault.config.settings import Settings
from brainvault.shared.adapters.vector_db import VectorDBAdapter
from brainvault.shared.core.exceptions import ProviderError
from brainvault.shared.db.session import Database
from brainvault.shared.services.embedding_service import EmbeddingService


API = "/api/v1"
PASSWORD = "Abcdef1!"

# One axis per topic; the last axis keeps every vector non-zero
TOPICS = ("python", "cooking", "music")
VECTOR_SIZE = len(TOPICS) + 1


class FakeEmbeddingClient:
    """
    Deterministic stand-in for the hosted embedding model.

    Each topic word in the text adds 1 to its axis, so texts about the same
    topic score ~1.0 against each other and ~0.0 against other topics.
    """

    def __init__(self) -> None:
        self.calls: List[str] = []
        self.fail = False
        self.closed = False

    async def embed(self, text: str) -> List[float]:
        self.calls.append(text)
        if self.fail:
            raise ProviderError("Embedding request timed out")
        words = text.lower().split()
        return [float(words.count(topic)) for topic in TOPICS] + [0.01]

    async def close(self) -> None:
        self.closed = True


def cosine(a: List[float], b: List[float]) -> float:
    dot = sum(x * y for x, y in zip(a, b))
    return dot / (math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b)))


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        APP_ENV="test",
        SECRET_KEY="test-secret",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'brainvault.db'}",
        EMBEDDING_API_KEY="test-key",
        EMBEDDING_DIMENSIONS=VECTOR_SIZE,
        QDRANT_COLLECTION="test_content",
    )


@pytest.fixture
async def database(test_settings):
    db = Database(test_settings.DATABASE_URL)
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
async def vector_db():
    adapter = VectorDBAdapter(
        collection_name="test_content",
        vector_size=VECTOR_SIZE,
        client=AsyncQdrantClient(location=":memory:"),
    )
    yield adapter
    await adapter.close()


@pytest.fixture
def embedding_client() -> FakeEmbeddingClient:
    return FakeEmbeddingClient()


@pytest.fixture
def embedding_service(embedding_client, vector_db) -> EmbeddingService:
    return EmbeddingService(embedding_client=embedding_client, vector_db=vector_db)


@pytest.fixture
def app(test_settings, database, vector_db, embedding_client):
    return create_application(
        settings=test_settings,
        database=database,
        vector_db=vector_db,
        embedding_client=embedding_client,
    )


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def register(client):
    """Sign up and sign in a user; returns the raw token."""

    async def _register(username: str, password: str = PASSWORD) -> str:
        response = await client.post(
            f"{API}/signup", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        response = await client.post(
            f"{API}/signin", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        return response.json()["token"]

    return _register


@pytest.fixture
def add_content(client):
    """Save one item as the token's owner; returns its id."""

    async def _add(token: str, title: str, content_type: str = "article", link: str = "http://x"):
        response = await client.post(
            f"{API}/content",
            json={"link": link, "type": content_type, "title": title},
            headers={"Authorization": token},
        )
        assert response.status_code == 200, response.text
        return response.json()["content_id"]

    return _add
