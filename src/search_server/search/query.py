"""Query parsing into plus and minus term sets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from search_server.errors import InvalidQueryError
from search_server.search.analyzers import AnalyzerPipeline, StopFilter, WhitespaceTokenizer, has_control_characters
from search_server.search.models import Query


MINUS_PREFIX = "-"


@dataclass(frozen=True)
class QueryTerm:
    """A single classified query term."""

    text: str
    is_minus: bool
    is_stop: bool


class QueryParser:
    """Turn raw query text into a :class:`Query`.

    Stop words are removed before classification, and a minus term whose
    stripped text is a stop word is dropped as well. A term that occurs both
    as a plus and a minus term is kept only as a minus term so the two sets
    stay disjoint.
    """

    def __init__(self, stop_words: Iterable[str] | None = None) -> None:
        self._stop_filter = StopFilter(stop_words)
        self._analyzer = AnalyzerPipeline(WhitespaceTokenizer(), [self._stop_filter])

    def parse_term(self, text: str) -> QueryTerm:
        if has_control_characters(text):
            raise InvalidQueryError(f"Query term {text!r} contains control characters")
        if MINUS_PREFIX * 2 in text:
            raise InvalidQueryError(f"Query term {text!r} contains a double minus")
        is_minus = text.startswith(MINUS_PREFIX)
        if is_minus:
            if text == MINUS_PREFIX:
                raise InvalidQueryError(f"Invalid minus term {text!r}")
            text = text[len(MINUS_PREFIX) :]
        return QueryTerm(text=text, is_minus=is_minus, is_stop=text in self._stop_filter)

    def parse(self, raw_query: str) -> Query:
        plus_terms: set[str] = set()
        minus_terms: set[str] = set()
        for token in self._analyzer(raw_query):
            term = self.parse_term(token.text)
            if term.is_stop:
                continue
            if term.is_minus:
                minus_terms.add(term.text)
            else:
                plus_terms.add(term.text)
        return Query(plus_terms=frozenset(plus_terms - minus_terms), minus_terms=frozenset(minus_terms))
