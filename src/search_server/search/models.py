"""Search data models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class DocumentStatus(str, Enum):
    """Lifecycle status attached to every indexed document."""

    ACTUAL = "ACTUAL"
    IRRELEVANT = "IRRELEVANT"
    BANNED = "BANNED"
    REMOVED = "REMOVED"

    def __str__(self) -> str:
        return self.value


DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


@dataclass(frozen=True)
class DocumentRecord:
    """Stored metadata for one document. Immutable once added."""

    document_id: int
    rating: int
    status: DocumentStatus
    insertion_order: int


@dataclass(frozen=True)
class ScoredDocument:
    """A document produced by query evaluation."""

    document_id: int
    relevance: float
    status: DocumentStatus
    rating: int


@dataclass(frozen=True)
class Query:
    """Parsed query: terms that must match and terms that must be absent."""

    plus_terms: frozenset[str] = frozenset()
    minus_terms: frozenset[str] = frozenset()

    def is_empty(self) -> bool:
        return not self.plus_terms and not self.minus_terms


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching a query against a single document."""

    matched_terms: tuple[str, ...]
    status: DocumentStatus

    @property
    def matched_term_set(self) -> frozenset[str]:
        return frozenset(self.matched_terms)

    def __iter__(self):
        # Allows ``terms, status = server.match_document(...)``
        yield self.matched_terms
        yield self.status
