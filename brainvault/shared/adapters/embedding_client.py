"""
Embedding client - hosted embedding model over the OpenAI API.

Provides:
- Text embeddings (text-embedding-3-small by default)

The endpoint is OpenAI-compatible but not necessarily OpenAI itself: the
default base URL is the GitHub Models inference API, authenticated with the
``EMBEDDING_API_KEY`` credential. Calls time out after
``EMBEDDING_TIMEOUT_SECONDS`` and are never retried.
"""

from typing import List, Optional

from openai import AsyncOpenAI, APIStatusError, APITimeoutError, OpenAIError

from brainvault.config.settings import settings
from brainvault.shared.core.exceptions import ProviderError
from brainvault.shared.core.logging import get_logger

logger = get_logger("embedding_client")


class EmbeddingClient:
    """
    Adapter for the remote embedding model.

    Any SDK failure (timeout, connection error, non-2xx status) or a response
    without a vector is turned into ``ProviderError``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        """
        Initialize the embedding client.

        Args:
            api_key: Provider credential. If not provided, uses settings.
            base_url: OpenAI-compatible endpoint. If not provided, uses settings.
            model: Embedding model name. If not provided, uses settings.
            timeout: Request timeout in seconds. If not provided, uses settings.
            client: Pre-built SDK client (tests inject a mock here)
        """
        self.api_key = api_key if api_key is not None else settings.EMBEDDING_API_KEY
        self.base_url = base_url or settings.EMBEDDING_BASE_URL
        self.model = model or settings.EMBEDDING_MODEL
        self.timeout = timeout if timeout is not None else settings.EMBEDDING_TIMEOUT_SECONDS
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        """Lazy-loaded SDK client."""
        if self._client is None:
            if not self.api_key:
                raise ProviderError("Embedding provider credential not configured")
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    async def embed(self, text: str) -> List[float]:
        """
        Generate the embedding for one text.

        Args:
            text: Text to embed

        Returns:
            Embedding vector

        Raises:
            ProviderError: On timeout, transport or API failure, or an empty response
        """
        try:
            response = await self.client.embeddings.create(
                model=self.model,
                input=text,
            )
        except APITimeoutError as e:
            logger.error("Embedding request timed out", timeout_seconds=self.timeout)
            raise ProviderError("Embedding request timed out") from e
        except APIStatusError as e:
            logger.error("Embedding provider rejected request", status_code=e.status_code)
            raise ProviderError(
                "Embedding provider returned an error",
                details={"status_code": e.status_code},
            ) from e
        except OpenAIError as e:
            logger.error("Embedding request failed", error=str(e), error_type=type(e).__name__)
            raise ProviderError() from e

        if not response.data or not response.data[0].embedding:
            logger.error("Embedding provider returned no vector", model=self.model)
            raise ProviderError("Embedding provider returned no vector")

        return list(response.data[0].embedding)

    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        if self._client is not None:
            await self._client.close()
            self._client = None
