"""Unit tests for relevance accumulation and ranking."""

from __future__ import annotations

import math

import pytest

from search_server.search.document_store import DocumentStore
from search_server.search.inverted_index import InvertedIndex
from search_server.search.models import DocumentStatus, Query, ScoredDocument
from search_server.search.relevance import RelevanceEngine, rank_documents


pytestmark = pytest.mark.unit


def _engine(documents: dict[int, list[str]], ratings: dict[int, int] | None = None) -> RelevanceEngine:
    index = InvertedIndex()
    store = DocumentStore()
    for document_id, terms in documents.items():
        rating = (ratings or {}).get(document_id, 1)
        store.add(document_id, DocumentStatus.ACTUAL, [rating])
        index.add_document(document_id, terms)
    return RelevanceEngine(index, store)


def _query(plus: set[str] = frozenset(), minus: set[str] = frozenset()) -> Query:
    return Query(plus_terms=frozenset(plus), minus_terms=frozenset(minus))


def _scored(document_id: int, relevance: float, rating: int = 0) -> ScoredDocument:
    return ScoredDocument(document_id=document_id, relevance=relevance, status=DocumentStatus.ACTUAL, rating=rating)


class TestRelevanceEngine:
    def test_relevance_is_idf_times_tf(self) -> None:
        engine = _engine({0: ["one"], 1: ["two", "three"], 2: ["three", "four", "five"]})

        results = engine.evaluate(_query({"one", "three"}))

        by_id = {doc.document_id: doc.relevance for doc in results}
        assert by_id[0] == pytest.approx(math.log(3))
        assert by_id[1] == pytest.approx(math.log(3 / 2) / 2)
        assert by_id[2] == pytest.approx(math.log(3 / 2) / 3)

    def test_results_are_in_ascending_id_order(self) -> None:
        engine = _engine({5: ["cat"], 1: ["cat", "dog"], 3: ["cat", "cat"]})

        results = engine.evaluate(_query({"cat", "dog"}))

        assert [doc.document_id for doc in results] == [1, 3, 5]

    def test_minus_term_excludes_documents_entirely(self) -> None:
        engine = _engine({0: ["cat", "in", "the", "city"], 1: ["cat", "in", "boots"]})

        results = engine.evaluate(_query({"cat"}, {"boots"}))

        assert [doc.document_id for doc in results] == [0]

    def test_minus_only_query_matches_nothing(self) -> None:
        engine = _engine({0: ["cat"], 1: ["dog"]})

        assert engine.evaluate(_query(minus={"cat"})) == []

    def test_unknown_terms_contribute_nothing(self) -> None:
        engine = _engine({0: ["cat"], 1: ["dog"]})

        results = engine.evaluate(_query({"cat", "bird"}, {"fish"}))

        assert [doc.document_id for doc in results] == [0]

    def test_term_in_every_document_still_matches_with_zero_relevance(self) -> None:
        engine = _engine({0: ["cat"], 1: ["cat", "dog"]})

        results = engine.evaluate(_query({"cat"}))

        assert [doc.document_id for doc in results] == [0, 1]
        assert all(doc.relevance == 0.0 for doc in results)

    def test_empty_store_returns_nothing(self) -> None:
        assert _engine({}).evaluate(_query({"cat"})) == []

    def test_results_carry_stored_rating_and_status(self) -> None:
        engine = _engine({0: ["cat"], 1: ["dog"]}, ratings={0: 7})

        (result,) = engine.evaluate(_query({"cat"}))

        assert result.rating == 7
        assert result.status is DocumentStatus.ACTUAL


class TestRankDocuments:
    def test_sorts_by_relevance_descending(self) -> None:
        ranked = rank_documents([_scored(0, 0.1), _scored(1, 0.3), _scored(2, 0.2)], limit=5)

        assert [doc.document_id for doc in ranked] == [1, 2, 0]

    def test_near_ties_are_broken_by_rating(self) -> None:
        documents = [_scored(0, 0.5, rating=1), _scored(1, 0.5 + 1e-9, rating=9), _scored(2, 0.4, rating=100)]

        ranked = rank_documents(documents, limit=5)

        assert [doc.document_id for doc in ranked] == [1, 0, 2]

    def test_full_ties_keep_ascending_document_id(self) -> None:
        documents = [_scored(9, 0.5, 3), _scored(2, 0.5, 3), _scored(4, 0.5, 3)]

        ranked = rank_documents(documents, limit=5)

        assert [doc.document_id for doc in ranked] == [2, 4, 9]

    def test_truncates_to_limit(self) -> None:
        documents = [_scored(i, i / 10) for i in range(8)]

        ranked = rank_documents(documents, limit=5)

        assert [doc.document_id for doc in ranked] == [7, 6, 5, 4, 3]

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit_returns_nothing(self, limit: int) -> None:
        assert rank_documents([_scored(0, 1.0)], limit=limit) == []

    def test_adjacent_pairs_respect_ranking_order(self) -> None:
        documents = [_scored(i, (i % 3) / 7, rating=i % 4) for i in range(12)]

        ranked = rank_documents(documents, limit=12)

        for lhs, rhs in zip(ranked, ranked[1:]):
            assert lhs.relevance > rhs.relevance or (
                abs(lhs.relevance - rhs.relevance) < 1e-6 and lhs.rating >= rhs.rating
            )
