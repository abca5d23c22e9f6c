"""Job processors."""

from .base_processor import BaseProcessor
from .embedding_processor import BackfillReport, EmbeddingProcessor

__all__ = ["BaseProcessor", "BackfillReport", "EmbeddingProcessor"]
