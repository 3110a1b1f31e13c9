# algobox

A small library of classic algorithms and data structures, written to be read
and experimented with. It has no dependencies beyond the standard library and
runs on Python 3.10 and later.

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.linked_list` | `SinglyLinkedList` with insertion at the front, the back or after a position, deletion, search, and `remove_smaller_than_right`; the function `remove_nodes_with_greater_right` |
| `algobox.stacks` | `TwoStacks` (two stacks sharing one fixed array), `is_balanced`, `evaluate_postfix` |
| `algobox.circular_deque` | `CircularDeque`, a bounded double-ended queue on a ring buffer (capacity 1 to 100) |
| `algobox.searching` | `binary_search`, `exponential_search`, `search_sorted_matrix`, `prefix_function`, `kmp_search`, `count_anagrams` |
| `algobox.sequences` | `longest_increasing_subsequence`, `min_max`, `sliding_window_max`, `count_triplets_below`, `min_refuels`, `are_equal` |
| `algobox.backtracking` | `is_safe`, `solve_sudoku`, `solve_n_queens`, `solve_rat_maze` |
| `algobox.number_theory` | `binomial`, `catalan`, `primes_up_to`, `hanoi_moves` (returning `Move` tuples), `count_decodings` |
| `algobox.crc` | `crc_remainder`, `encode`, `check` for bitwise cyclic redundancy checks |
| `algobox.rover` | `Rover` and `Orientation` for the Mars rover grid exercise |
| `algobox.trees` | `TreeNode`, `build_tree`, `height`, `inorder`, `sorted_to_bst`, `merge_bsts` |
| `algobox.graphs` | `DisjointSet`, `connected_components`, `kruskal_mst_weight`, `prim_mst` (returning `MstEdge` tuples) |

## A few examples

```python
from algobox.number_theory import catalan, primes_up_to
from algobox.stacks import is_balanced, evaluate_postfix
from algobox.searching import kmp_search, count_anagrams
from algobox.graphs import kruskal_mst_weight
from algobox.rover import Rover

[catalan(n) for n in range(10)]
# [1, 1, 2, 5, 14, 42, 132, 429, 1430, 4862]

primes_up_to(30)
# [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

is_balanced("{[()]}")    # True
is_balanced("([)]")      # False

evaluate_postfix("231*+9-")   # -4

kmp_search("ABABCABAB", "ABABDABACDABABCABAB")   # [10]
count_anagrams("for", "forxxorfxdofr")           # 3

edges = [(0, 1, 1), (1, 3, 3), (3, 2, 4), (2, 0, 2), (0, 3, 2), (1, 2, 2)]
kruskal_mst_weight(4, edges)   # 5

rover = Rover(3, 3, "E")
rover.process("MMRMMRMRRM")
str(rover)   # "5 1 E"
```

Searches that find nothing return `None` rather than a sentinel index, and
solvers return `None` when no solution exists.

Data structures behave like ordinary Python containers: a
`SinglyLinkedList` or `CircularDeque` can be iterated over and measured with
`len()`. Operations that cannot be carried out raise an exception instead of
printing a message: popping an empty `TwoStacks` stack or deleting from an
empty list or deque raises `IndexError`, pushing onto a full `TwoStacks` or
inserting into a full `CircularDeque` raises `OverflowError`, and malformed
input (a postfix expression missing operands, a non-square maze, bits other
than 0 and 1) raises `ValueError`.

## What it does not do

algobox is a library only: it installs no command-line program and reads
nothing from standard input. It has no sorting routines of its own (use
Python's built-in `sorted`) and no threading examples.

## Running the tests

The test suite uses pytest and is declared in the `test` extra:

```
pip install -e ".[test]"
pytest
```