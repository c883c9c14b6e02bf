"""Ranking of occurrence tables by descending count.

Ties are broken by ascending value.  Both helpers sort ``(value, count)``
pairs that arrive in value order, and both rely on the sort being stable.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from operator import itemgetter

_COUNT = itemgetter(1)


def rank_counts(counts: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return ``(value, count)`` pairs sorted by descending count.

    :param counts: Pairs to rank, e.g. ``enumerate(byte_counts)`` or
        ``dict.items()``.
    :returns: A new list, most frequent first.
    """
    return sorted(sorted(counts), key=_COUNT, reverse=True)


def top_counts(counts: Iterable[tuple[int, int]], k: int) -> list[tuple[int, int]]:
    """Return the first *k* items of :func:`rank_counts` without a full sort.

    ``heapq.nlargest`` with a key is documented to be equivalent to
    ``sorted(iterable, key=key, reverse=True)[:n]``, so the tie-break order
    matches :func:`rank_counts`.
    """
    if k <= 0:
        return []
    return heapq.nlargest(k, sorted(counts), key=_COUNT)
