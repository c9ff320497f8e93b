"""In-memory inverted index mapping terms to per-document term frequencies."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from search_server.search.stats import term_frequencies


_EMPTY_POSTINGS: Mapping[int, float] = MappingProxyType({})


class InvertedIndex:
    """Inverted index: term -> {document_id -> tf}.

    Postings are written once per document and never updated. Read accessors
    return read-only views so callers cannot mutate the index.
    """

    def __init__(self) -> None:
        self._postings: dict[str, dict[int, float]] = {}
        self._document_terms: dict[int, dict[str, float]] = {}

    def add_document(self, document_id: int, terms: Sequence[str]) -> None:
        """Record postings for ``terms``; an empty sequence records nothing."""

        frequencies = term_frequencies(terms)
        for term, tf in frequencies.items():
            self._postings.setdefault(term, {})[document_id] = tf
        if frequencies:
            self._document_terms[document_id] = frequencies

    def postings(self, term: str) -> Mapping[int, float]:
        postings = self._postings.get(term)
        if postings is None:
            return _EMPTY_POSTINGS
        return MappingProxyType(postings)

    def document_frequency(self, term: str) -> int:
        return len(self._postings.get(term, ()))

    def contains(self, term: str, document_id: int) -> bool:
        return document_id in self._postings.get(term, ())

    def term_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Return the per-document view of the postings."""

        frequencies = self._document_terms.get(document_id)
        if frequencies is None:
            return MappingProxyType({})
        return MappingProxyType(frequencies)

    def __contains__(self, term: str) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)
