"""Counting and optimisation problems solved with small dynamic programmes."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def ladder_ways(n: int, k: int) -> int:
    """Count the ways to climb ``n`` steps taking between 1 and ``k`` at a time."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    ways = [1]
    for step in range(1, n + 1):
        ways.append(sum(ways[max(0, step - k) : step]))
    return ways[n]


def unique_paths(rows: int, cols: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of a grid."""
    if rows < 1 or cols < 1:
        raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
    row = [1] * cols
    for _ in range(rows - 1):
        row = list(accumulate(row))
    return row[-1]


def wine_profit(prices: Iterable[int]) -> int:
    """Return the best profit selling bottles from either end, one per year.

    A bottle sold in year ``y`` (counting from 1) earns ``price * y``.
    """
    prices = list(prices)
    n = len(prices)
    best = [0] * (n + 1)
    for length in range(1, n + 1):
        year = n - length + 1
        best = [
            max(
                prices[i] * year + best[i + 1],
                prices[i + length - 1] * year + best[i],
            )
            for i in range(n - length + 1)
        ]
    return best[0]


def matrix_chain_order(dims: Iterable[int]) -> int:
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dims[i] x dims[i+1]``. Fewer than two matrices cost 0.
    """
    dims = list(dims)
    count = len(dims) - 1
    if count < 2:
        return 0
    cost = [[0] * count for _ in range(count)]
    for span in range(1, count):
        for i in range(count - span):
            j = i + span
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                for k in range(i, j)
            )
    return cost[0][count - 1]


def _reductions(m: int) -> list[int]:
    options = [m - 1]
    if m % 2 == 0:
        options.append(m // 2)
    if m % 3 == 0:
        options.append(m // 3)
    return options


def min_steps_to_one(n: int) -> int:
    """Return the fewest steps to reach 1 by dividing by 3, by 2, or subtracting 1.

    Works top-down, solving only the values that ``n`` leads to.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    memo = {1: 0}
    pending = [n]
    while pending:
        m = pending[-1]
        if m in memo:
            pending.pop()
            continue
        options = _reductions(m)
        missing = [option for option in options if option not in memo]
        if missing:
            pending.extend(missing)
            continue
        memo[m] = 1 + min(memo[option] for option in options)
        pending.pop()
    return memo[n]


def min_steps_to_one_bottom_up(n: int) -> int:
    """Return the same count as :func:`min_steps_to_one`, filling a table from 1 up."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    steps = [0, 0]
    for m in range(2, n + 1):
        steps.append(1 + min(steps[option] for option in _reductions(m)))
    return steps[n]