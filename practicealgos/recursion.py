"""Counting problems solved by recursion and small memo tables."""

import math
from functools import lru_cache


def handshakes(n):
    """Count the ways ``n`` people around a table can shake hands without crossing.

    An odd or negative number of people has no way to do it.
    """
    if n < 0:
        return 0
    table = [1]
    for size in range(1, n + 1):
        table.append(
            sum(table[i - 2] * table[size - i] for i in range(2, size + 1, 2))
        )
    return table[n]


def grid_paths(m, n):
    """Count monotone paths across an ``m`` by ``n`` grid of cells."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be at least 1")
    return math.comb(m + n - 2, m - 1)


def pattern(n):
    """Return the sequence that counts down from ``n`` in steps of 5 and back.

    The descent stops at the first value not above zero, which appears once.
    """
    descent = [n]
    while descent[-1] > 0:
        descent.append(descent[-1] - 5)
    return descent + descent[-2::-1]


def power_sum_ways(x, n):
    """Count sets of distinct positive integers whose ``n``-th powers sum to ``x``."""
    if n < 1:
        raise ValueError("the power must be at least 1")

    def count(remaining, smallest):
        if remaining == 0:
            return 1
        total = 0
        value = smallest
        while value ** n <= remaining:
            total += count(remaining - value ** n, value + 1)
            value += 1
        return total

    return count(x, 1)


def sequence_sum(n):
    """Sum 1 + 2*3 + 4*5*6 + ... over the first ``n`` groups of consecutive integers."""
    total = 1
    start = 2
    for size in range(2, n + 1):
        total += math.prod(range(start, start + size))
        start += size
    return total


def square_sequence_sum(n):
    """Sum the products of the first ``n`` groups, group ``k`` holding ``k`` integers."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = 0
    for size in range(1, n + 1):
        first = size * (size - 1) // 2
        total += math.prod(first + i for i in range(1, size + 1))
    return total


def min_operations(n):
    """Count the steps to reach 0 from ``n`` by halving when even and subtracting 1 when odd."""
    if n < 0:
        raise ValueError("n must not be negative")
    steps = 0
    while n:
        n = n // 2 if n % 2 == 0 else n - 1
        steps += 1
    return steps


def max_exchange(n):
    """Return the most that ``n`` is worth when it may be split into n/2, n/3 and n/4."""
    if n < 0:
        raise ValueError("n must not be negative")

    @lru_cache(maxsize=None)
    def best(value):
        if value <= 1:
            return value
        return max(best(value // 2) + best(value // 3) + best(value // 4), value)

    return best(n)


def paths_to_origin(n, m):
    """Count the paths from point (n, m) to the origin moving down or left."""
    if n < 0 or m < 0:
        raise ValueError("coordinates must not be negative")
    return math.comb(n + m, n)


def staircase_ways(n):
    """Count the ways to climb ``n`` stairs taking one or two at a time."""
    if n < 0:
        return 0
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return current


def coin_ways(amount, coins=(1, 2, 5)):
    """Count the combinations of ``coins`` that make up ``amount``."""
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if amount < 0:
        return 0
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def distinct_occurrences(s, t):
    """Count the ways ``t`` occurs in ``s`` as a subsequence."""

    @lru_cache(maxsize=None)
    def count(n, m):
        if m == 0:
            return 1
        if n == 0:
            return 0
        if s[n - 1] != t[m - 1]:
            return count(n - 1, m)
        return count(n - 1, m) + count(n - 1, m - 1)

    return count(len(s), len(t))


def egg_drop(eggs, floors):
    """Return the fewest drops that always find the critical floor."""
    if eggs < 1:
        raise ValueError("at least one egg is needed")
    if floors < 0:
        raise ValueError("floors must not be negative")
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = []
        for height in range(floors + 1):
            if height <= 1:
                current.append(height)
            else:
                current.append(
                    1
                    + min(
                        max(current[height - i], previous[i - 1])
                        for i in range(1, height + 1)
                    )
                )
        previous = current
    return previous[floors]


def subsets(n):
    """Yield every subset of 1..n, taking each element before leaving it out."""
    if n < 0:
        raise ValueError("n must not be negative")
    chosen = []

    def search(k):
        if k == n + 1:
            yield tuple(chosen)
            return
        chosen.append(k)
        yield from search(k + 1)
        chosen.pop()
        yield from search(k + 1)

    return search(1)


def bit_subsets(items):
    """List every subset of ``items`` in the order of the bit masks 0..2**len-1."""
    items = list(items)
    return [
        [item for bit, item in enumerate(items) if mask >> bit & 1]
        for mask in range(1 << len(items))
    ]


def remove_middle(stack):
    """Return the stack, listed bottom first, without its middle element."""
    items = list(stack)
    if items:
        del items[(len(items) - 1) // 2]
    return items