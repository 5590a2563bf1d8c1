"""Plane geometry: distances and the closest pair of points."""

from __future__ import annotations

import math
from itertools import combinations
from typing import Iterable, Sequence

Point = tuple[float, float]


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the Euclidean distance between two points ``(x, y)``."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def _pair_length(pair: tuple[Point, Point]) -> float:
    return distance(*pair)


def _brute_force(points: list[Point]) -> tuple[Point, Point]:
    return min(combinations(points, 2), key=_pair_length)


def _closest(by_x: list[Point]) -> tuple[Point, Point]:
    """Closest pair among points already sorted by x, then y."""
    if len(by_x) <= 3:
        return _brute_force(by_x)

    mid = len(by_x) // 2
    mid_x = by_x[mid][0]
    best = min(_closest(by_x[:mid]), _closest(by_x[mid:]), key=_pair_length)
    best_distance = distance(*best)

    strip = sorted(
        (p for p in by_x if abs(p[0] - mid_x) < best_distance),
        key=lambda p: p[1],
    )
    for i, p in enumerate(strip):
        for q in strip[i + 1 :]:
            if q[1] - p[1] >= best_distance:
                break
            gap = distance(p, q)
            if gap < best_distance:
                best, best_distance = (p, q), gap
    return best


def closest_pair(points: Iterable[Sequence[float]]) -> tuple[Point, Point]:
    """Return the two points that lie nearest to each other.

    Uses divide and conquer over the points sorted by x. Raises ValueError
    when fewer than two points are given.
    """
    pts = [(p[0], p[1]) for p in points]
    if len(pts) < 2:
        raise ValueError(f"need at least two points, got {len(pts)}")
    return _closest(sorted(pts))