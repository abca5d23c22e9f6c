"""Tests for the embedding client and prompt building."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from brainvault.shared.adapters.embedding_client import EmbeddingClient
from brainvault.shared.core.exceptions import ProviderError
from brainvault.shared.models.enums import ContentType
from brainvault.shared.services.embedding_service import build_content_prompt

REQUEST = httpx.Request("POST", "https://models.github.ai/inference/embeddings")


def _sdk(create: AsyncMock) -> MagicMock:
    sdk = MagicMock()
    sdk.embeddings.create = create
    sdk.close = AsyncMock()
    return sdk


def _response(*vectors):
    return SimpleNamespace(data=[SimpleNamespace(embedding=list(v)) for v in vectors])


async def test_embed_returns_vector():
    create = AsyncMock(return_value=_response([0.1, 0.2, 0.3]))
    client = EmbeddingClient(api_key="k", model="text-embedding-3-small", client=_sdk(create))

    assert await client.embed("hello") == [0.1, 0.2, 0.3]
    create.assert_awaited_once_with(model="text-embedding-3-small", input="hello")


@pytest.mark.parametrize(
    "error",
    [
        openai.APITimeoutError(request=REQUEST),
        openai.APIConnectionError(request=REQUEST),
        openai.APIStatusError(
            "rate limited",
            response=httpx.Response(429, request=REQUEST),
            body=None,
        ),
    ],
)
async def test_sdk_errors_become_provider_error(error):
    client = EmbeddingClient(api_key="k", client=_sdk(AsyncMock(side_effect=error)))

    with pytest.raises(ProviderError) as exc_info:
        await client.embed("hello")

    assert exc_info.value.status_code == 500
    assert exc_info.value.error_code == "PROVIDER_ERROR"


@pytest.mark.parametrize("response", [_response(), _response([])])
async def test_empty_response_is_provider_error(response):
    client = EmbeddingClient(api_key="k", client=_sdk(AsyncMock(return_value=response)))

    with pytest.raises(ProviderError):
        await client.embed("hello")


async def test_missing_credential_is_provider_error():
    client = EmbeddingClient(api_key="")

    with pytest.raises(ProviderError):
        await client.embed("hello")


def test_sdk_client_has_timeout_and_no_retries():
    client = EmbeddingClient(api_key="k", base_url="https://example.test/v1", timeout=10.0)

    assert client.client.max_retries == 0
    assert client.client.timeout == 10.0


async def test_close_releases_sdk_client():
    sdk = _sdk(AsyncMock())
    client = EmbeddingClient(api_key="k", client=sdk)

    await client.close()

    sdk.close.assert_awaited_once()


@pytest.mark.parametrize(
    "content_type, expected",
    [
        (ContentType.YOUTUBE, "FastAPI youtube video content tutorial"),
        (ContentType.ARTICLE, "FastAPI article blog post written content"),
        (ContentType.TWITTER, "FastAPI tweet social media post thread"),
        (ContentType.AUDIO, "FastAPI audio podcast recording"),
    ],
)
def test_content_prompt_appends_type_hint(content_type, expected):
    assert build_content_prompt("FastAPI", content_type) == expected


def test_content_prompt_accepts_raw_type_value():
    assert build_content_prompt("t", "article") == "t article blog post written content"
