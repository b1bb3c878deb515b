# drills

A collection of classic algorithms, small data structures and short
contest-style exercises, each written as a plain Python function or class.
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `drills.sorting`: `bubble_sort`, `heap_sort`, `insertion_sort`,
  `selection_sort`, `merge_sort`, `merge_sorted` and `pancake_sort`. Each
  takes any iterable and returns a new ascending list; `pancake_sort` returns
  a `PancakeResult` holding the sorted `values` and the prefix lengths it
  flipped (`flips`).
- `drills.searching`: `linear_search` and `binary_search`, both returning an
  index or `None`.
- `drills.numbers`: `nth_prime`, `is_armstrong`, `power_mod` (modulus
  defaults to `DEFAULT_MODULUS`, 1 000 000 007), `fibonacci` (1, 1, 2, 3, ...
  indexed from 0), `gcd_weighted_sum`, `kth_permutation`, and `hanoi_moves`,
  a generator of `Move` tuples (`disk`, `source`, `target`).
- `drills.matrix`: `transpose` and `n_queens`, a generator of 0/1 boards.
- `drills.calculator`: `add`, `subtract`, `multiply`, `divide` (integer
  division truncating toward zero), `square`, `square_root`, and the
  interactive `main`.
- `drills.arrays`: `knapsack` (0/1 knapsack), `min_pages` (book allocation;
  `None` when there are fewer books than students), `max_subarray_sum`
  (Kadane), `max_subarray_sum_brute`, `max_window_sum` and
  `digit_removal_cost`.
- `drills.strings`: `are_anagrams` and `char_frequency`.
- `drills.hashing`: `LinearProbingTable`, a fixed-size integer table (8 slots
  by default) using linear probing with replacement; `insert` raises
  `OverflowError` when full, `search` returns a slot or `None`, `slots()`
  shows the contents.
- `drills.queues`: `BoundedQueue` (capacity 5 by default) with `enqueue`,
  `dequeue` and `index_of`; iteration runs from the newest item to the oldest.
- `drills.stacks`: `BoundedStack` (capacity 100 by default) with `push`,
  `pop` and `peek`, and `is_balanced` for round, square and curly brackets.
- `drills.linked_lists`: `DoublyLinkedList` (`push_front`, `remove`,
  forward and reverse iteration) and `CircularLinkedList` (`push`, `remove`).
  `remove` raises `ValueError` when the value is absent.
- `drills.trees`: `TreeNode`, `inorder_recursive`, `inorder_iterative`,
  `preorder_recursive`, `preorder_iterative` and `leaf_sums_by_level`.
- `drills.graphs`: `dijkstra` (returns `ShortestPaths` with `distances` and
  `predecessors`, `None` for unreachable vertices), `adjacency_matrix`,
  `adjacency_list`, `bfs_order` and `dfs_order`. The edge-list functions
  number vertices from 1 and treat edges as undirected.
- `drills.contest`: one function per beginner contest problem, such as
  `can_split_watermelon`, `abbreviate`, `bit_plus_plus`, `queue_after` and
  `wrong_subtraction`.

## Examples

```python
from drills.sorting import merge_sort
from drills.arrays import knapsack
from drills.numbers import kth_permutation
from drills.stacks import is_balanced

merge_sort([12, 11, 13, 5, 6, 7])           # [5, 6, 7, 11, 12, 13]
knapsack(50, [10, 20, 30], [60, 100, 120])  # 220
kth_permutation(3, 3)                       # "213"
is_balanced("{[()]}")                       # True
```

## Calculator

An interactive, menu-driven integer calculator is installed as a command:

```
drills-calculator
```

It reads whitespace-separated integers from standard input and offers
addition of any number of values, subtraction, multiplication, integer
division (asking again while the divisor is zero), square and square root.
It keeps showing the menu until you choose 7 (Exit) or the input ends; an
unknown choice or unreadable number prints `Something is wrong..!!`.