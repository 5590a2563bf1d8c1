"""Searching in sequences and text, and counting occurrences."""

from __future__ import annotations

from collections import Counter
from typing import Any, Hashable, Iterable, Sequence

ALPHABET_SIZE = 256
DEFAULT_MODULUS = 2**31 - 1


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in ascending ``values``, or None if absent."""
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return None


def interpolation_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in ascending integers, probing by value.

    Returns None if ``target`` is not present.
    """
    lo, hi = 0, len(values) - 1
    while lo <= hi and values[lo] <= target <= values[hi]:
        if values[hi] == values[lo]:
            return lo if values[lo] == target else None
        pos = lo + (hi - lo) * (target - values[lo]) // (values[hi] - values[lo])
        if values[pos] == target:
            return pos
        if target < values[pos]:
            hi = pos - 1
        else:
            lo = pos + 1
    return None


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)


def rabin_karp(text: str, pattern: str, modulus: int = DEFAULT_MODULUS) -> list[int]:
    """Return every index where ``pattern`` occurs in ``text`` (rolling hash).

    Overlapping occurrences are all reported. An empty pattern matches at
    every position from 0 to ``len(text)``.
    """
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    m, n = len(pattern), len(text)
    if m == 0:
        return list(range(n + 1))
    if m > n:
        return []

    high = pow(ALPHABET_SIZE, m - 1, modulus)
    pattern_hash = window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (ALPHABET_SIZE * pattern_hash + ord(p_char)) % modulus
        window_hash = (ALPHABET_SIZE * window_hash + ord(t_char)) % modulus

    matches = []
    for i in range(n - m + 1):
        if pattern_hash == window_hash and text[i : i + m] == pattern:
            matches.append(i)
        if i < n - m:
            window_hash = (
                ALPHABET_SIZE * (window_hash - ord(text[i]) * high) + ord(text[i + m])
            ) % modulus
    return matches


def count_frequencies(values: Iterable[Hashable]) -> dict[Hashable, int]:
    """Map each distinct value to its count, in order of first appearance."""
    return dict(Counter(values))