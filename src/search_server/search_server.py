"""Search server: the public API over the in-memory index.

``SearchServer`` hides the analyzer pipeline, inverted index, document store
and relevance engine behind a handful of methods:

    server = SearchServer("и в на")
    server.add_document(0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3])
    server.find_top_documents("пушистый ухоженный кот")

The server is single-threaded: callers sharing one instance across threads
must serialize ``add_document`` against the read operations themselves.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
import logging

from search_server.config import Settings
from search_server.errors import InvalidConfigError, InvalidDocumentError, InvalidQueryError
from search_server.search.analyzers import (
    AnalyzerPipeline,
    StopFilter,
    WhitespaceTokenizer,
    has_control_characters,
    make_unique_non_empty_strings,
    split_into_words,
)
from search_server.search.document_store import DocumentStore
from search_server.search.inverted_index import InvertedIndex
from search_server.search.metrics import MetricsCollector, QueryMetrics
from search_server.search.models import DocumentPredicate, DocumentStatus, MatchResult, ScoredDocument
from search_server.search.query import QueryParser
from search_server.search.relevance import RelevanceEngine, rank_documents


logger = logging.getLogger(__name__)


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Return a predicate accepting only documents with ``status``."""

    def _matches(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return _matches


def _coerce_status(status: DocumentStatus | str, error_type: type[Exception]) -> DocumentStatus:
    try:
        return DocumentStatus(status)
    except ValueError as exc:
        raise error_type(f"Unknown document status {status!r}") from exc


class SearchServer:
    """In-memory TF-IDF document index with plus/minus term queries."""

    def __init__(self, stop_words: str | Iterable[str] = (), *, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)
        unique_stop_words = make_unique_non_empty_strings(stop_words)
        invalid = sorted(word for word in unique_stop_words if has_control_characters(word))
        if invalid:
            raise InvalidConfigError(f"Stop words contain control characters: {invalid!r}")

        self._stop_words = frozenset(unique_stop_words)
        self._analyzer = AnalyzerPipeline(WhitespaceTokenizer(), [StopFilter(self._stop_words)])
        self._query_parser = QueryParser(self._stop_words)
        self._index = InvertedIndex()
        self._store = DocumentStore()
        self._engine = RelevanceEngine(self._index, self._store)
        self.metrics = MetricsCollector(
            window_size=self.settings.metrics_window_size,
            slow_query_ms=self.settings.slow_query_ms,
        )

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        """Index ``text`` under ``document_id``.

        Raises InvalidDocumentError for a negative or duplicate id, an unknown
        status, or control characters in ``text``. Nothing is recorded when
        validation fails.
        """
        if document_id < 0:
            raise InvalidDocumentError(f"Document id must be non-negative, got {document_id}")
        if document_id in self._store:
            raise InvalidDocumentError(f"Document id {document_id} already added")
        if has_control_characters(text):
            raise InvalidDocumentError(f"Document {document_id} text contains control characters")
        status = _coerce_status(status, InvalidDocumentError)

        terms = self._analyzer.terms(text)
        record = self._store.add(document_id, status, list(ratings))
        self._index.add_document(document_id, terms)
        self.metrics.increment("documents_added")
        logger.debug(
            "Added document %d",
            document_id,
            extra={
                "terms": len(terms),
                "position": record.insertion_order,
                "index_terms": len(self._index),
                "status": record.status,
                "rating": record.rating,
            },
        )

    def find_top_documents(
        self,
        raw_query: str,
        predicate: DocumentPredicate | DocumentStatus | str | None = None,
        *,
        limit: int | None = None,
    ) -> list[ScoredDocument]:
        """Return the best matching documents for ``raw_query``.

        ``predicate`` receives ``(document_id, status, rating)``; a
        DocumentStatus (or its name) is accepted as shorthand for an equality
        check; an unknown name raises InvalidQueryError. The default keeps only
        ACTUAL documents. Results are ordered by relevance,
        then rating, then ascending document id, and capped at ``limit``
        (``max_result_document_count`` when omitted).
        """
        if predicate is None:
            predicate = status_predicate(DocumentStatus.ACTUAL)
        elif isinstance(predicate, str):
            predicate = status_predicate(_coerce_status(predicate, InvalidQueryError))
        if limit is None:
            limit = self.settings.max_result_document_count

        started = self.metrics.start_timer()
        query = self._query_parser.parse(raw_query)
        matched = self._engine.evaluate(query)
        filtered = [doc for doc in matched if predicate(doc.document_id, doc.status, doc.rating)]
        ranked = rank_documents(filtered, limit=limit, epsilon=self.settings.relevance_epsilon)

        self.metrics.record_query(
            QueryMetrics(
                latency_ms=self.metrics.elapsed_ms(started),
                result_count=len(ranked),
                matched_count=len(matched),
                query_terms=len(query.plus_terms) + len(query.minus_terms),
            )
        )
        return ranked

    def find_top_documents_by_status(
        self,
        raw_query: str,
        status: DocumentStatus | str = DocumentStatus.ACTUAL,
        *,
        limit: int | None = None,
    ) -> list[ScoredDocument]:
        predicate = status_predicate(_coerce_status(status, InvalidQueryError))
        return self.find_top_documents(raw_query, predicate, limit=limit)

    def match_document(self, raw_query: str, document_id: int) -> MatchResult:
        """Return the query's plus terms found in one document, and its status.

        If any minus term occurs in the document the matched terms are empty.
        """
        query = self._query_parser.parse(raw_query)
        record = self._store.get(document_id)

        if any(self._index.contains(term, document_id) for term in query.minus_terms):
            return MatchResult(matched_terms=(), status=record.status)

        matched = sorted(term for term in query.plus_terms if self._index.contains(term, document_id))
        return MatchResult(matched_terms=tuple(matched), status=record.status)

    def get_document_count(self) -> int:
        return len(self._store)

    def get_document_id(self, index: int) -> int:
        return self._store.document_id_at(index)

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Return term -> tf for one document; empty for unknown ids."""
        return self._index.term_frequencies(document_id)

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[int]:
        return iter(self._store)
