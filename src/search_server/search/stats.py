"""Statistical helpers for TF-IDF scoring.

The functions here stay independent of the index structures so they can be
unit tested on plain numbers.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
import math


def term_frequencies(terms: Sequence[str]) -> dict[str, float]:
    """Return ``occurrences / len(terms)`` for every distinct term.

    An empty sequence yields an empty mapping, so no zero-weight entries are
    ever produced.
    """

    if not terms:
        return {}
    step = 1.0 / len(terms)
    return {term: count * step for term, count in Counter(terms).items()}


def calculate_idf(doc_freq: int, total_docs: int) -> float:
    """Return ``ln(total_docs / doc_freq)``.

    Not floored: a term present in every document yields 0.0. Non-positive
    counts yield 0.0 instead of raising.
    """

    if total_docs <= 0 or doc_freq <= 0:
        return 0.0
    return math.log(total_docs / doc_freq)


def nearly_equal(lhs: float, rhs: float, epsilon: float) -> bool:
    return abs(lhs - rhs) < epsilon
