from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoshelf.geometry import closest_pair, distance


def test_distance_of_three_four_triangle():
    assert distance((0, 0), (3, 4)) == 5.0


def test_distance_is_symmetric_and_zero_on_self():
    a, b = (2, -7), (-5, 11)
    assert distance(a, b) == distance(b, a)
    assert distance(a, a) == 0


def test_closest_pair_finds_the_obvious_pair():
    points = [(0, 0), (10, 10), (50, 50), (10, 11), (-40, 3)]
    assert set(closest_pair(points)) == {(10, 10), (10, 11)}


def test_closest_pair_with_two_points_returns_them():
    assert set(closest_pair([(1, 2), (7, 9)])) == {(1, 2), (7, 9)}


def test_duplicate_points_are_closest():
    points = [(5, 5), (1, 9), (20, 3), (5, 5), (14, -2)]
    p, q = closest_pair(points)
    assert p == q == (5, 5)


@pytest.mark.parametrize("points", [[], [(1, 1)]])
def test_too_few_points(points):
    with pytest.raises(ValueError):
        closest_pair(points)


coordinates = st.integers(min_value=-1000, max_value=1000)


@given(st.lists(st.tuples(coordinates, coordinates), min_size=2, max_size=40))
def test_no_pair_is_closer_than_the_result(points):
    p, q = closest_pair(points)
    found = distance(p, q)
    assert p in points and q in points
    assert all(distance(a, b) >= found for a, b in combinations(points, 2))