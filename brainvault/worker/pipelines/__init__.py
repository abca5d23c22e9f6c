"""Processing pipelines."""

from .embedding_pipeline import EmbeddingPipeline, PipelineResult

__all__ = ["EmbeddingPipeline", "PipelineResult"]
