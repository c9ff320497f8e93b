"""TF-IDF relevance accumulation and deterministic ranking."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from functools import cmp_to_key
import logging

from search_server.search.document_store import DocumentStore
from search_server.search.inverted_index import InvertedIndex
from search_server.search.models import Query, ScoredDocument
from search_server.search.stats import calculate_idf, nearly_equal


logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-6


class RelevanceEngine:
    """Score documents in an :class:`InvertedIndex` against a parsed query."""

    def __init__(self, index: InvertedIndex, store: DocumentStore) -> None:
        self.index = index
        self.store = store

    def evaluate(self, query: Query) -> list[ScoredDocument]:
        """Return every document matching ``query`` with its relevance.

        Plus terms accumulate ``idf * tf``. Minus terms are applied after all
        accumulation and drop a document outright. Results come back in
        ascending document id order.
        """

        total_docs = len(self.store)
        if total_docs == 0 or query.is_empty():
            return []

        relevance: dict[int, float] = defaultdict(float)
        for term in sorted(query.plus_terms):
            if term not in self.index:
                continue
            idf = calculate_idf(self.index.document_frequency(term), total_docs)
            for document_id, tf in self.index.postings(term).items():
                relevance[document_id] += idf * tf

        for term in query.minus_terms:
            for document_id in self.index.postings(term):
                relevance.pop(document_id, None)

        logger.debug(
            "Evaluated query plus=%d minus=%d matched=%d",
            len(query.plus_terms),
            len(query.minus_terms),
            len(relevance),
        )

        results: list[ScoredDocument] = []
        for document_id in sorted(relevance):
            record = self.store.get(document_id)
            results.append(
                ScoredDocument(
                    document_id=document_id,
                    relevance=relevance[document_id],
                    status=record.status,
                    rating=record.rating,
                )
            )
        return results


def rank_documents(
    documents: Iterable[ScoredDocument],
    *,
    limit: int,
    epsilon: float = DEFAULT_EPSILON,
) -> list[ScoredDocument]:
    """Sort by relevance (descending), then rating (descending), then id.

    Relevances closer than ``epsilon`` count as equal. Documents that tie on
    both keys keep ascending document id order. The result is capped at
    ``limit``.
    """

    if limit <= 0:
        return []

    def compare(lhs: ScoredDocument, rhs: ScoredDocument) -> int:
        if not nearly_equal(lhs.relevance, rhs.relevance, epsilon):
            return -1 if lhs.relevance > rhs.relevance else 1
        if lhs.rating != rhs.rating:
            return -1 if lhs.rating > rhs.rating else 1
        return 0

    ordered = sorted(documents, key=lambda document: document.document_id)
    ordered.sort(key=cmp_to_key(compare))
    return ordered[:limit]
