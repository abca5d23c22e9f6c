"""
Background worker.

Embeds content outside the request path. The API schedules
EmbeddingPipeline runs as background tasks; ``python -m brainvault.worker.main``
backfills items whose embedding never got written.
"""
