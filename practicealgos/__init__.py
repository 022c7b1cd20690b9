"""Classic algorithm exercises: recursion, dynamic programming, searching, greedy strategies, grids, trees, strings and a trie."""

__version__ = "0.1.0"