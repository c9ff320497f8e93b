"""Analyzer utilities for the search server.

Text is split on whitespace only: no lowercasing, no stemming, no punctuation
handling. Terms keep their exact spelling, so "Cat" and "cat" are different
terms. The pieces follow a composable tokenizer/filter design so the same
pipeline is shared by document indexing and query parsing.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
import re
from typing import Protocol


# C-locale whitespace. str.split() would also split on \x1c-\x1f, which must
# stay inside terms so the validators can reject them.
_WHITESPACE_PATTERN = r"[^ \t\n\v\f\r]+"
_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f]")


@dataclass
class Token:
    """Represents a term emitted by the tokenizer."""

    text: str
    position: int
    start_char: int
    end_char: int


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class WhitespaceTokenizer:
    """Splits text on runs of whitespace and yields tokens lazily."""

    def __init__(self) -> None:
        self.pattern = re.compile(_WHITESPACE_PATTERN)

    def __call__(self, text: str) -> Iterator[Token]:
        for position, match in enumerate(self.pattern.finditer(text)):
            yield Token(
                text=match.group(0),
                position=position,
                start_char=match.start(),
                end_char=match.end(),
            )


class StopFilter:
    """Removes stop words from the stream using exact string comparison."""

    def __init__(self, stop_words: Iterable[str] | None = None) -> None:
        self.stop_words = frozenset(stop_words or ())

    def __contains__(self, word: str) -> bool:
        return word in self.stop_words

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text not in self.stop_words:
                yield token


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[Token]:
        stream: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        tokens = list(stream)
        for idx, token in enumerate(tokens):  # normalize positions post-filtering
            token.position = idx
        return tokens

    def terms(self, text: str) -> list[str]:
        return [token.text for token in self(text)]


def split_into_words(text: str) -> list[str]:
    """Return the whitespace-delimited words of ``text``."""

    return [token.text for token in WhitespaceTokenizer()(text)]


def has_control_characters(text: str) -> bool:
    """Return True when ``text`` contains any character with code 0..31."""

    return _CONTROL_CHARACTERS.search(text) is not None


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    return {value for value in strings if value}
