# algoshelf

A small, dependency-free collection of classic algorithms written as plain
Python functions. The functions take ordinary Python values (lists, strings,
tuples) and return their results. Apart from the building blocks `heapify`
and `partition`, which rearrange the list they are given in place, they leave
their inputs untouched.

## Installation

```
pip install algoshelf
```

To run the test suite:

```
pip install "algoshelf[test]"
pytest
```

## What is on the shelf

| Module | Contents |
| --- | --- |
| `algoshelf.distribution_sorts` | `counting_sort`, `radix_sort` (non-negative integers), `bucket_sort` (numbers in `[0, 1)`) |
| `algoshelf.divide_sorts` | `heap_sort`, `merge_sort`, `quick_sort`, `tim_sort` (with an optional `run` length, default 32), and the building blocks `heapify`, `merge`, `partition` |
| `algoshelf.searching` | `binary_search`, `interpolation_search`, `linear_search` (each returns an index or `None`), `rabin_karp` (all match positions), `count_frequencies` |
| `algoshelf.knapsack` | `knapsack_01`, `unbounded_knapsack`, `rod_cutting`, `subset_sum_exists`, `count_subsets`, `coin_change_ways`, `min_coins` |
| `algoshelf.counting_dp` | `fibonacci`, `ladder_ways`, `unique_paths`, `wine_profit`, `matrix_chain_order`, `min_steps_to_one`, `min_steps_to_one_bottom_up` |
| `algoshelf.string_dp` | `lcs_length`, `longest_common_subsequence`, `longest_common_substring`, `longest_palindromic_subsequence`, `longest_repeating_subsequence`, `min_insertions_deletions`, `shortest_common_supersequence_length`, `shortest_common_supersequence`, `palindromic_partition` |
| `algoshelf.geometry` | `distance`, `closest_pair` |
| `algoshelf.graphs` | `Graph` with `add_edge` and `topological_sort`, and `dijkstra` over an adjacency matrix |
| `algoshelf.backtracking` | `solve_n_queens`, `rat_in_maze` |
| `algoshelf.trees` | `TreeNode`, `height`, `spiral_order` |
| `algoshelf.number_theory` | `gcd`, `extended_gcd`, `lcm`, `is_prime`, `is_perfect_square`, `is_power_of_two`, `power`, `to_binary`, `from_binary`, `sieve`, `odd_even_element` |
| `algoshelf.greedy` | `max_subarray_sum`, `max_subarray`, `largest_undefended_area`, `max_activities`, `max_meetings`, `balance_load`, `ranking_badness`, `chopstick_pairs`, `Job`, `job_scheduling`, `min_platforms` |

## Examples

```python
from algoshelf.divide_sorts import merge_sort
from algoshelf.searching import binary_search
from algoshelf.string_dp import longest_common_subsequence
from algoshelf.backtracking import solve_n_queens

merge_sort([12, 11, 13, 5, 6, 7])                # [5, 6, 7, 11, 12, 13]
binary_search([2, 3, 4, 10, 40], 10)             # 3
binary_search([2, 3, 4, 10, 40], 5)              # None
longest_common_subsequence("ABCDGH", "AEDFHR")   # "ADH"
len(solve_n_queens(4))                           # 2
```

Graphs are built edge by edge:

```python
from algoshelf.graphs import Graph

g = Graph(6)
for source, target in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
    g.add_edge(source, target)
g.topological_sort()   # [5, 4, 2, 3, 1, 0]
```

Job scheduling works on `Job` records:

```python
from algoshelf.greedy import Job, job_scheduling

jobs = [Job(1, 4, 20), Job(2, 1, 10), Job(3, 1, 40), Job(4, 1, 30)]
job_scheduling(jobs)   # (2, 60): jobs done, total profit
```

## Errors

Where an input makes no sense for an algorithm (a negative value passed to
counting sort, an empty list where a result needs at least one element,
mismatched lengths of paired lists), the functions raise `ValueError`.
Vertices or bounds out of range raise `IndexError`.

## What it does not do

The package is a library only: it has no command-line tool. Its sorts are
the distribution sorts and divide-and-conquer sorts listed above; it offers
no simple exchange sorts such as bubble, insertion or selection sort, and no
reports counting passes, comparisons or swaps.