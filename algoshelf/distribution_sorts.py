"""Sorts that distribute items by value rather than comparing pairs."""

from __future__ import annotations

from typing import Iterable


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return non-negative integers in ascending order by counting occurrences."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _digit_pass(items: list[int], exp: int) -> list[int]:
    buckets: list[list[int]] = [[] for _ in range(10)]
    for value in items:
        buckets[(value // exp) % 10].append(value)
    return [value for bucket in buckets for value in bucket]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return non-negative integers sorted digit by digit, least significant first."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        items = _digit_pass(items, exp)
        exp *= 10
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Return numbers in [0, 1) sorted via one bucket per item."""
    items = list(values)
    n = len(items)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(n * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]