"""Per-document metadata: rating, status and insertion order."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from search_server.errors import DocumentIndexOutOfRangeError, UnknownDocumentError
from search_server.search.models import DocumentRecord, DocumentStatus


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Return the integer average of ``ratings``, truncated toward zero.

    ``[8, -3]`` -> 2, ``[-7, 2]`` -> -2, ``[]`` -> 0.
    """

    if not ratings:
        return 0
    total = sum(ratings)
    quotient = abs(total) // len(ratings)
    return quotient if total >= 0 else -quotient


class DocumentStore:
    """Registry of added documents keyed by id, remembering insertion order."""

    def __init__(self) -> None:
        self._records: dict[int, DocumentRecord] = {}
        self._order: list[int] = []

    def add(self, document_id: int, status: DocumentStatus, ratings: Sequence[int]) -> DocumentRecord:
        record = DocumentRecord(
            document_id=document_id,
            rating=compute_average_rating(ratings),
            status=DocumentStatus(status),
            insertion_order=len(self._order),
        )
        self._records[document_id] = record
        self._order.append(document_id)
        return record

    def get(self, document_id: int) -> DocumentRecord:
        try:
            return self._records[document_id]
        except KeyError:
            raise UnknownDocumentError(document_id) from None

    def document_id_at(self, index: int) -> int:
        if not 0 <= index < len(self._order):
            raise DocumentIndexOutOfRangeError(
                f"Document index {index} out of range for {len(self._order)} documents"
            )
        return self._order[index]

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._records

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[int]:
        return iter(self._order)
