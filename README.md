# practicealgos

A library of small, self-contained algorithm exercises: recursion, dynamic
programming, searching, greedy strategies, string puzzles, number puzzles,
grids, binary trees and a trie. Every function takes plain Python values and
returns its result; nothing is printed. Invalid input (negative sizes, empty
sequences, unknown characters, values that are not found) raises
`ValueError`, or `IndexError` for a flood-fill start outside the grid.

Requires Python 3.10 or later and has no dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `practicealgos.anagrams` | `count_anagram_windows`, `count_anagram_windows_sliding`, `is_even_letter_string`, `smallest_char_count`, `count_smaller_frequencies`, `split_words` |
| `practicealgos.strings` | `camel_case_word_count`, `super_reduce`, `sort_by_length`, `count_abc_subsequences`, `split_clues` |
| `practicealgos.expressions` | `priority`, `infix_to_postfix` |
| `practicealgos.trie` | the `Trie` class with `insert`, `search` and `in` |
| `practicealgos.recursion` | `handshakes`, `grid_paths`, `pattern`, `power_sum_ways`, `sequence_sum`, `square_sequence_sum`, `min_operations`, `max_exchange`, `paths_to_origin`, `staircase_ways`, `coin_ways`, `distinct_occurrences`, `egg_drop`, `subsets`, `bit_subsets`, `remove_middle` |
| `practicealgos.numbers` | `largest_power_of_two`, `trailing_zeros`, `next_happy`, `is_prime`, `primes_between`, `josephus`, `has_distinct_subarray_ors`, `distinct_subsets`, `recurrence_value` |
| `practicealgos.dynamic` | `distinct_occurrences_dp`, `lis_length`, `lis_table`, `coin_ways_dp`, `count_ways_stairs`, `egg_drop_dp`, `max_exchange_dp`, `count_paths`, `count_strings`, `catalan`, `min_coins`, `edit_distance`, `kadane`, `lcs_length`, `longest_increasing_run`, `max_submatrix_sum`, `staircase_table` |
| `practicealgos.searching` | `binary_search`, `step_search`, `jump_search`, `closest_value`, `count_occurrences`, `largest_window` |
| `practicealgos.greedy` | `luck_balance`, `marc_cakewalk`, `maximum_perimeter_triangle`, `minimum_absolute_difference`, `grid_challenge` |
| `practicealgos.setops` | `set_union` and `set_intersection` that keep order, `format_set` |
| `practicealgos.grids` | `flood_fill`, `rotate_matrix`, `to_sparse`, `sparse_transpose`, `from_sparse` |
| `practicealgos.trees` | `Node`, `build_tree`, recursive and iterative traversals, `count_subtrees_with_sum` |

## Examples

```python
from practicealgos.dynamic import edit_distance, kadane, catalan
from practicealgos.expressions import infix_to_postfix
from practicealgos.numbers import trailing_zeros, primes_between
from practicealgos.strings import super_reduce
from practicealgos.trie import Trie

edit_distance("sunday", "saturday")        # 3
kadane([-2, -3, 4, -1, -2, 1, 5, -3])      # 7
catalan(5)                                 # 42
infix_to_postfix("a+b*c")                  # "abc*+"
trailing_zeros(100)                        # 24
primes_between(1, 10)                      # [2, 3, 5, 7]
super_reduce("aaabccddd")                  # "abd"

trie = Trie(["the", "a", "there", "answer"])
"the" in trie                              # True
trie.search("these")                       # False
```

Trees are built from a preorder sequence in which `-1` (or `None`) marks a
missing child:

```python
from practicealgos.trees import build_tree, inorder

root = build_tree([1, 2, -1, -1, 3, -1, -1])
inorder(root)                              # [2, 1, 3]
```

## What it does not do

The package is a library only. It has no command-line program and reads no
input of its own: feed the functions values from your own code.