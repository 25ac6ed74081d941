"""Measuring how far a stack is from sorted."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

SCALE = 10000


def compute_disorder(values: Iterable[int]) -> int:
    """Share of out-of-order pairs, in hundredths of a percent (0 to 10000)."""
    values = list(values)
    pairs = len(values) * (len(values) - 1) // 2
    mistakes = sum(1 for x, y in combinations(values, 2) if x > y)
    return mistakes * SCALE // max(pairs, 1)