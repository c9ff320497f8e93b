"""In-memory TF-IDF search server."""

from search_server.config import Settings
from search_server.errors import (
    DocumentIndexOutOfRangeError,
    InvalidConfigError,
    InvalidDocumentError,
    InvalidQueryError,
    SearchServerError,
    UnknownDocumentError,
)
from search_server.search.models import DocumentPredicate, DocumentStatus, MatchResult, Query, ScoredDocument
from search_server.search_server import SearchServer, status_predicate


__all__ = [
    "DocumentIndexOutOfRangeError",
    "DocumentPredicate",
    "DocumentStatus",
    "InvalidConfigError",
    "InvalidDocumentError",
    "InvalidQueryError",
    "MatchResult",
    "Query",
    "ScoredDocument",
    "SearchServer",
    "SearchServerError",
    "Settings",
    "UnknownDocumentError",
    "status_predicate",
]
