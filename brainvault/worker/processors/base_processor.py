"""
Job dispatch for the embedding worker.

A job is a plain dict with a ``job_type`` key:

    {"job_type": "embed_content", "content_id": "<uuid>"}
    {"job_type": "backfill_embeddings", "batch_size": 100}
"""

from typing import Any, Awaitable, Callable, Dict


class BaseProcessor:
    """Routes a job message to the handler for its ``job_type``."""

    def _handlers(self) -> Dict[str, Callable[[dict], Awaitable[Any]]]:
        return {
            "embed_content": self.handle_embed,
            "backfill_embeddings": self.handle_backfill,
        }

    async def process(self, message: dict) -> Any:
        job_type = message.get("job_type")
        handler = self._handlers().get(job_type)
        if handler is None:
            raise ValueError(f"Unknown job type: {job_type}")
        return await handler(message)

    async def handle_embed(self, message: dict) -> Any:
        """Embed one item named by ``content_id``."""
        raise NotImplementedError

    async def handle_backfill(self, message: dict) -> Any:
        """Embed every item still missing a vector."""
        raise NotImplementedError
