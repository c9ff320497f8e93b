"""Load documents from line-oriented input and print ranked query results.

Input layout (stdin or --input FILE):

    line 1              stop words, whitespace separated
    line 2              number of documents N
    next 2*N lines      document text, then "<count> <r1> <r2> ... [STATUS]"
    remaining lines     one query per line

Documents get ids 0..N-1 in input order. The optional trailing STATUS on a
ratings line (ACTUAL, IRRELEVANT, BANNED or REMOVED, any case) sets the
document status; it defaults to ACTUAL.
"""

# ruff: noqa: T201  # CLI intentionally prints results

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
import sys
from typing import TextIO

import orjson

from search_server.config import Settings
from search_server.errors import SearchServerError
from search_server.observability.logging import configure_logging
from search_server.search.models import DocumentStatus, ScoredDocument
from search_server.search_server import SearchServer


class InputFormatError(ValueError):
    """Raised when the input does not follow the documented line layout."""


@dataclass(slots=True)
class DocumentInput:
    text: str
    ratings: list[int]
    status: DocumentStatus = DocumentStatus.ACTUAL


@dataclass(slots=True)
class ServerInput:
    stop_words: str
    documents: list[DocumentInput] = field(default_factory=list)
    queries: list[str] = field(default_factory=list)


def format_status(status: DocumentStatus) -> str:
    return DocumentStatus(status).value


def format_document(document: ScoredDocument) -> str:
    return (
        f"{{ document_id = {document.document_id}, relevance = {document.relevance:g}, "
        f"rating = {document.rating} }}"
    )


def parse_status(value: str) -> DocumentStatus:
    try:
        return DocumentStatus(value.upper())
    except ValueError:
        choices = ", ".join(status.value for status in DocumentStatus)
        raise InputFormatError(f"Unknown status {value!r} (choose from {choices})") from None


def parse_ratings(line: str) -> list[int]:
    """Parse ``"<count> <r1> ... <rcount>"`` into the rating list."""

    try:
        values = [int(value) for value in line.split()]
    except ValueError as exc:
        raise InputFormatError(f"Ratings line must contain integers: {line!r}") from exc
    if not values:
        return []
    count, ratings = values[0], values[1:]
    if count < 0 or len(ratings) < count:
        raise InputFormatError(f"Ratings line declares {count} ratings but has {len(ratings)}")
    return ratings[:count]


def parse_document_line(line: str) -> tuple[list[int], DocumentStatus]:
    """Parse a ratings line with an optional trailing status word."""

    words = line.split()
    if words and not words[-1].lstrip("+-").isdigit():
        return parse_ratings(" ".join(words[:-1])), parse_status(words[-1])
    return parse_ratings(line), DocumentStatus.ACTUAL


def read_server_input(lines: Iterator[str]) -> ServerInput:
    def next_line(what: str) -> str:
        try:
            return next(lines).rstrip("\r\n")
        except StopIteration:
            raise InputFormatError(f"Unexpected end of input while reading {what}") from None

    payload = ServerInput(stop_words=next_line("stop words"))
    count_line = next_line("document count").strip()
    try:
        document_count = int(count_line)
    except ValueError as exc:
        raise InputFormatError(f"Document count must be an integer: {count_line!r}") from exc
    if document_count < 0:
        raise InputFormatError(f"Document count must be non-negative: {document_count}")

    for position in range(document_count):
        text = next_line(f"document {position}")
        ratings, status = parse_document_line(next_line(f"ratings for document {position}"))
        payload.documents.append(DocumentInput(text=text, ratings=ratings, status=status))

    payload.queries = [line.rstrip("\r\n") for line in lines if line.strip()]
    return payload


def build_server(payload: ServerInput, settings: Settings | None = None) -> SearchServer:
    server = SearchServer(payload.stop_words, settings=settings)
    for document_id, document in enumerate(payload.documents):
        server.add_document(document_id, document.text, document.status, document.ratings)
    return server


def run(
    payload: ServerInput,
    *,
    out: TextIO,
    status: DocumentStatus = DocumentStatus.ACTUAL,
    limit: int | None = None,
    settings: Settings | None = None,
    show_stats: bool = False,
) -> None:
    server = build_server(payload, settings)
    for query in payload.queries:
        print(f"Results for query: {query} [{format_status(status)}]", file=out)
        for document in server.find_top_documents_by_status(query, status, limit=limit):
            print(format_document(document), file=out)
    if show_stats:
        print(orjson.dumps(server.metrics.get_stats(), option=orjson.OPT_INDENT_2).decode("utf-8"), file=out)


def _parse_status(value: str) -> DocumentStatus:
    try:
        return parse_status(value)
    except InputFormatError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read input from FILE instead of stdin",
    )
    parser.add_argument(
        "--status",
        type=_parse_status,
        default=DocumentStatus.ACTUAL,
        help="Only return documents with this status (default: ACTUAL)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum results per query (default: SEARCH_SERVER_MAX_RESULT_DOCUMENT_COUNT or 5)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level override (default: SEARCH_SERVER_LOG_LEVEL or info)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit structured JSON logs on stderr",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print query metrics after all queries",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logging(args.log_level or settings.log_level, json_output=args.json_logs or settings.log_json)

    try:
        if args.input is not None:
            with args.input.open(encoding="utf-8") as handle:
                payload = read_server_input(iter(handle))
        else:
            payload = read_server_input(iter(sys.stdin))
    except (OSError, InputFormatError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        run(
            payload,
            out=sys.stdout,
            status=args.status,
            limit=args.limit,
            settings=settings,
            show_stats=args.stats,
        )
    except SearchServerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
