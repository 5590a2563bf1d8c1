"""Divide-and-conquer sorts: heap, merge, quick and a run-based hybrid."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

DEFAULT_RUN = 32


def heapify(heap: list[Any], size: int, root: int) -> None:
    """Sift ``heap[root]`` down so the subtree under ``root`` is a max-heap.

    Only the first ``size`` items take part. The subtrees below ``root``
    must already be max-heaps. The list is changed in place.
    """
    while True:
        largest = root
        left = 2 * root + 1
        right = 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order (heap sort)."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        heapify(items, n, i)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two ascending sequences into one; ties take from ``left`` first."""
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order (stable merge sort)."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def partition(items: list[Any], start: int, end: int) -> int:
    """Partition ``items[start..end]`` (inclusive) around ``items[start]``.

    The pivot is moved to its final place; everything before it is <= pivot
    and everything after it is > pivot. Returns the pivot's index.
    """
    if not 0 <= start <= end < len(items):
        raise IndexError(f"bad partition bounds {start}..{end} for {len(items)} items")
    pivot = items[start]
    count = sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    pivot_index = start + count
    items[pivot_index], items[start] = items[start], items[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order (quick sort)."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        p = partition(items, start, end)
        pending.append((start, p - 1))
        pending.append((p + 1, end))
    return items


def _insertion_sort_range(items: list[Any], left: int, right: int) -> None:
    for i in range(left + 1, right + 1):
        key = items[i]
        j = i - 1
        while j >= left and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def tim_sort(values: Iterable[Any], run: int = DEFAULT_RUN) -> list[Any]:
    """Return ``values`` sorted by insertion-sorting runs, then merging them.

    ``run`` is the length of the blocks sorted by insertion before merging.
    """
    if run < 1:
        raise ValueError(f"run length must be positive, got {run}")
    items = list(values)
    n = len(items)
    for start in range(0, n, run):
        _insertion_sort_range(items, start, min(start + run - 1, n - 1))

    size = run
    while size < n:
        for left in range(0, n, 2 * size):
            mid = left + size - 1
            right = min(left + 2 * size - 1, n - 1)
            if mid < right:
                items[left : right + 1] = merge(items[left : mid + 1], items[mid + 1 : right + 1])
        size *= 2
    return items