"""Knapsack-style dynamic programmes over item weights, values and coins."""

from __future__ import annotations

import math
from typing import Iterable


def _capacity(amount: int, name: str) -> int:
    if amount < 0:
        raise ValueError(f"{name} must be non-negative, got {amount}")
    return amount


def _items(weights: Iterable[int], values: Iterable[int]) -> list[tuple[int, int]]:
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError(
            f"got {len(weights)} weights but {len(values)} values; they must match"
        )
    return list(zip(weights, values))


def knapsack_01(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Return the best total value using each item at most once within ``capacity``."""
    _capacity(capacity, "capacity")
    best = [0] * (capacity + 1)
    for weight, value in _items(weights, values):
        if weight < 0:
            raise ValueError(f"weights must be non-negative, got {weight}")
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def unbounded_knapsack(
    capacity: int, weights: Iterable[int], values: Iterable[int]
) -> int:
    """Return the best total value when every item may be used any number of times."""
    _capacity(capacity, "capacity")
    best = [0] * (capacity + 1)
    for weight, value in _items(weights, values):
        if weight <= 0:
            raise ValueError(f"weights must be positive, got {weight}")
        for room in range(weight, capacity + 1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def rod_cutting(prices: Iterable[int]) -> int:
    """Return the best price for a rod whose piece of length ``i`` sells for ``prices[i-1]``.

    The rod is as long as ``prices``.
    """
    prices = list(prices)
    length = len(prices)
    return unbounded_knapsack(length, range(1, length + 1), prices)


def subset_sum_exists(values: Iterable[int], total: int) -> bool:
    """Tell whether some subset of the non-negative ``values`` adds up to ``total``."""
    _capacity(total, "total")
    reachable = [True] + [False] * total
    for value in values:
        if value < 0:
            raise ValueError(f"values must be non-negative, got {value}")
        for target in range(total, max(value, 1) - 1, -1):
            if reachable[target - value]:
                reachable[target] = True
    return reachable[total]


def count_subsets(values: Iterable[int], total: int) -> int:
    """Count the subsets of the non-negative ``values`` that add up to ``total``.

    A total of 0 is always counted once, the empty subset.
    """
    _capacity(total, "total")
    counts = [1] + [0] * total
    for value in values:
        if value < 0:
            raise ValueError(f"values must be non-negative, got {value}")
        for target in range(total, max(value, 1) - 1, -1):
            counts[target] += counts[target - value]
    return counts[total]


def _coins(coins: Iterable[int]) -> list[int]:
    coins = list(coins)
    for coin in coins:
        if coin <= 0:
            raise ValueError(f"coins must be positive, got {coin}")
    return coins


def coin_change_ways(coins: Iterable[int], amount: int) -> int:
    """Count the ways to make ``amount`` from unlimited ``coins``, ignoring order."""
    _capacity(amount, "amount")
    ways = [1] + [0] * amount
    for coin in _coins(coins):
        for target in range(coin, amount + 1):
            ways[target] += ways[target - coin]
    return ways[amount]


def min_coins(coins: Iterable[int], amount: int) -> int | None:
    """Return the fewest ``coins`` that make ``amount``, or None if it cannot be made."""
    _capacity(amount, "amount")
    fewest: list[float] = [0] + [math.inf] * amount
    for coin in _coins(coins):
        for target in range(coin, amount + 1):
            fewest[target] = min(fewest[target], fewest[target - coin] + 1)
    result = fewest[amount]
    return None if math.isinf(result) else int(result)