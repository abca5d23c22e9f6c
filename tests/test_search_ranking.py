"""Tests for the ranking step applied to raw vector hits."""

from brainvault.shared.adapters.vector_db import VectorSearchResult
from brainvault.shared.services.search_service import rank_hits


def _hit(score: float, point_id: str = "p") -> VectorSearchResult:
    return VectorSearchResult(id=point_id, score=score, payload={})


def test_drops_hits_below_threshold():
    ranked = rank_hits([_hit(0.9), _hit(0.74), _hit(0.2)], threshold=0.75, top_k=10)

    assert [hit.score for hit in ranked] == [0.9]


def test_threshold_is_inclusive():
    ranked = rank_hits([_hit(0.75)], threshold=0.75, top_k=10)

    assert len(ranked) == 1


def test_sorts_descending():
    ranked = rank_hits([_hit(0.8, "a"), _hit(0.95, "b"), _hit(0.85, "c")], threshold=0.75, top_k=10)

    assert [hit.id for hit in ranked] == ["b", "c", "a"]


def test_keeps_at_most_top_k():
    hits = [_hit(0.76 + i / 100, str(i)) for i in range(20)]

    ranked = rank_hits(hits, threshold=0.75, top_k=10)

    assert len(ranked) == 10
    assert ranked[0].score == max(hit.score for hit in hits)
    assert all(a.score >= b.score for a, b in zip(ranked, ranked[1:]))


def test_empty_input():
    assert rank_hits([], threshold=0.75, top_k=10) == []
