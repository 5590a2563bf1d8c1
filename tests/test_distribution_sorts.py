from collections import Counter

import pytest
from hypothesis import given, strategies as st

from algoshelf.distribution_sorts import bucket_sort, counting_sort, radix_sort

naturals = st.lists(st.integers(0, 5000), max_size=80)
unit_floats = st.lists(
    st.floats(min_value=0, max_value=1, exclude_max=True), max_size=80
)


@given(values=naturals)
def test_counting_sort_matches_sorted(values):
    assert counting_sort(values) == sorted(values)


@given(values=naturals)
def test_radix_sort_matches_sorted(values):
    assert radix_sort(values) == sorted(values)


@given(values=unit_floats)
def test_bucket_sort_matches_sorted(values):
    result = bucket_sort(values)
    assert result == sorted(values)
    assert Counter(result) == Counter(values)


def test_radix_source_example():
    values = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(values) == sorted(values)


def test_bucket_source_example():
    values = [0.897, 0.565, 0.656, 0.1234, 0.665, 0.3434]
    assert bucket_sort(values) == sorted(values)


def test_counting_sort_with_zeros_and_duplicates():
    values = [3, 0, 3, 1, 0, 3]
    assert counting_sort(values) == sorted(values)


@pytest.mark.parametrize("sorter", [counting_sort, radix_sort, bucket_sort])
def test_empty(sorter):
    assert sorter([]) == []


@pytest.mark.parametrize("sorter", [counting_sort, radix_sort])
def test_negative_values_rejected(sorter):
    with pytest.raises(ValueError):
        sorter([3, -1, 2])


@pytest.mark.parametrize("bad", [1.0, -0.25, 1.5])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort([0.5, bad])


def test_input_not_mutated():
    values = [9, 3, 7, 3]
    counting_sort(values)
    radix_sort(values)
    assert values == [9, 3, 7, 3]