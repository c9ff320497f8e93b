"""Error taxonomy for the search server.

Every failure is raised synchronously to the immediate caller. Each error also
derives from the closest builtin so callers can catch ``ValueError`` or
``KeyError`` without importing this module.
"""


class SearchServerError(Exception):
    """Base error for the search server."""


class InvalidConfigError(SearchServerError, ValueError):
    """Raised when the server is configured with an invalid stop word."""


class InvalidDocumentError(SearchServerError, ValueError):
    """Raised when a document cannot be added (bad id, duplicate id, bad text)."""


class InvalidQueryError(SearchServerError, ValueError):
    """Raised when a query contains a malformed minus term or control characters."""


class UnknownDocumentError(SearchServerError, KeyError):
    """Raised when a document id was never added."""

    def __init__(self, document_id: int) -> None:
        super().__init__(document_id)
        self.document_id = document_id

    def __str__(self) -> str:
        return f"Unknown document id {self.document_id}"


class DocumentIndexOutOfRangeError(SearchServerError, IndexError):
    """Raised when an insertion-order index is past the document count."""
