"""Greedy algorithms and Kadane's maximum subarray."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Any, Iterable, Sequence


@dataclass(frozen=True)
class Job:
    """A job that earns ``profit`` if done in a unit slot no later than ``deadline``."""

    id: int
    deadline: int
    profit: int


def _kadane(values: Iterable[int]) -> tuple[int, list[int]]:
    items = list(values)
    if not items:
        raise ValueError("need at least one value")
    best: int | None = None
    best_range = (0, 1)
    running = 0
    start = 0
    for i, value in enumerate(items):
        running += value
        if best is None or running > best:
            best = running
            best_range = (start, i + 1)
        if running < 0:
            running = 0
            start = i + 1
    return best, items[best_range[0] : best_range[1]]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    return _kadane(values)[0]


def max_subarray(values: Iterable[int]) -> list[int]:
    """Return the first non-empty contiguous run of ``values`` with the largest sum."""
    return _kadane(values)[1]


def _largest_gap(coords: Iterable[int], limit: int) -> int:
    ordered = sorted(coords)
    if not ordered:
        return limit
    gaps = [ordered[0] - 1, limit - ordered[-1]]
    gaps.extend(b - a - 1 for a, b in pairwise(ordered))
    return max(gaps)


def largest_undefended_area(
    width: int, height: int, towers: Iterable[Sequence[int]]
) -> int:
    """Return the largest rectangle of cells no tower's row or column covers.

    Cells and tower positions ``(x, y)`` are numbered from 1.
    """
    towers = list(towers)
    return _largest_gap((t[0] for t in towers), width) * _largest_gap(
        (t[1] for t in towers), height
    )


def max_activities(intervals: Iterable[Sequence[int]]) -> int:
    """Return how many ``(start, end)`` activities fit; one may start as another ends."""
    ordered = sorted((tuple(i) for i in intervals), key=lambda pair: pair[1])
    if not ordered:
        return 0
    count = 1
    limit = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= limit:
            limit = end
            count += 1
    return count


def max_meetings(starts: Iterable[int], ends: Iterable[int]) -> int:
    """Return how many meetings fit in one room; each must start after the last ends."""
    starts, ends = list(starts), list(ends)
    if len(starts) != len(ends):
        raise ValueError(f"got {len(starts)} starts but {len(ends)} ends")
    ordered = sorted(zip(starts, ends), key=lambda pair: (pair[1], pair[0]))
    if not ordered:
        return 0
    count = 1
    limit = ordered[0][1]
    for start, end in ordered[1:]:
        if start > limit:
            limit = end
            count += 1
    return count


def balance_load(loads: Iterable[int]) -> int | None:
    """Return the rounds needed to even out ``loads`` between neighbours.

    Returns None when the total cannot be split evenly.
    """
    loads = list(loads)
    if not loads:
        raise ValueError("need at least one load")
    total = sum(loads)
    if total % len(loads):
        return None
    target = total // len(loads)
    surplus = 0
    worst = 0
    for load in loads:
        surplus += load - target
        worst = max(worst, abs(surplus))
    return worst


def ranking_badness(preferences: Iterable[tuple[Any, int]]) -> int:
    """Return the least total distance between preferred and given places.

    ``preferences`` holds ``(team, preferred_place)`` pairs; places run from 1.
    """
    ranks = sorted(rank for _, rank in preferences)
    return sum(abs(rank - place) for place, rank in enumerate(ranks, start=1))


def chopstick_pairs(lengths: Iterable[int], limit: int) -> int:
    """Return the most disjoint pairs whose lengths differ by at most ``limit``."""
    ordered = sorted(lengths)
    pairs = 0
    i = 0
    while i < len(ordered) - 1:
        if ordered[i + 1] - ordered[i] <= limit:
            pairs += 1
            i += 2
        else:
            i += 1
    return pairs


def job_scheduling(jobs: Iterable[Job]) -> tuple[int, int]:
    """Return ``(jobs_done, total_profit)`` taking the most profitable jobs first.

    Each job takes the latest free slot on or before its deadline.
    """
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    if not ordered:
        return 0, 0
    taken = [False] * (max(max(job.deadline for job in ordered), 0) + 1)
    done = profit = 0
    for job in ordered:
        for slot in range(job.deadline, 0, -1):
            if not taken[slot]:
                taken[slot] = True
                done += 1
                profit += job.profit
                break
    return done, profit


def min_platforms(arrivals: Iterable[int], departures: Iterable[int]) -> int:
    """Return the fewest platforms so no train waits.

    A train arriving at the very time another departs needs its own platform.
    """
    arrivals, departures = sorted(arrivals), sorted(departures)
    if len(arrivals) != len(departures):
        raise ValueError(f"got {len(arrivals)} arrivals but {len(departures)} departures")
    n = len(arrivals)
    if n == 0:
        return 0
    platforms = best = 1
    i, j = 1, 0
    while i < n and j < n:
        if arrivals[i] <= departures[j]:
            platforms += 1
            i += 1
        else:
            platforms -= 1
            j += 1
        best = max(best, platforms)
    return best