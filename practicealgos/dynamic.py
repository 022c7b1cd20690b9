"""Dynamic-programming exercises: subsequences, coins, paths and sums."""

from functools import lru_cache

from practicealgos.recursion import coin_ways, egg_drop, paths_to_origin


def distinct_occurrences_dp(s, t):
    """Count the ways ``t`` occurs in ``s`` as a subsequence, bottom up."""
    if len(t) > len(s):
        return 0
    # row[j] holds the count for the current prefix of t within s[:j]
    row = [1] * (len(s) + 1)
    for t_char in t:
        current = [0]
        for j, s_char in enumerate(s, start=1):
            ways = current[j - 1]
            if s_char == t_char:
                ways += row[j - 1]
            current.append(ways)
        row = current
    return row[-1]


def lis_table(values):
    """Return, for each position, the longest increasing subsequence ending there."""
    values = list(values)
    table = []
    for i, value in enumerate(values):
        best = 1
        for earlier, length in zip(values[:i], table):
            if earlier < value:
                best = max(best, length + 1)
        table.append(best)
    return table


def lis_length(values):
    """Return the length of the longest strictly increasing subsequence."""
    table = lis_table(values)
    if not table:
        raise ValueError("values must not be empty")
    return max(table)


def coin_ways_dp(amount, coins=(3, 5, 10)):
    """Count the combinations of ``coins`` that make up ``amount``."""
    return coin_ways(amount, coins)


def count_ways_stairs(m):
    """Count the ways to climb ``m`` stairs by ones and twos when order does not matter."""
    if m < 0:
        raise ValueError("m must not be negative")
    table = [1, 1]
    for i in range(2, m + 1):
        table.append(min(table[i - 2], table[i - 1]) + 1)
    return table[m]


def egg_drop_dp(eggs, floors):
    """Return the fewest drops that always find the critical floor."""
    return egg_drop(eggs, floors)


def max_exchange_dp(n):
    """Return the most ``n`` is worth when split into n/2, n/3 and n/4, bottom up."""
    if n < 0:
        raise ValueError("n must not be negative")
    table = [0, 1]
    for i in range(2, n + 1):
        table.append(max(table[i // 2] + table[i // 3] + table[i // 4], i))
    return table[n]


def count_paths(n, m):
    """Count the paths from point (n, m) to the origin moving down or left."""
    return paths_to_origin(n, m)


def count_strings(n, b_count=1, c_count=2):
    """Count strings of length ``n`` over a, b, c using at most ``b_count`` b's and ``c_count`` c's."""
    if n < 0:
        raise ValueError("n must not be negative")

    @lru_cache(maxsize=None)
    def count(length, bs, cs):
        if bs < 0 or cs < 0:
            return 0
        if length == 0 or (bs == 0 and cs == 0):
            return 1
        return (
            count(length - 1, bs, cs)
            + count(length - 1, bs - 1, cs)
            + count(length - 1, bs, cs - 1)
        )

    return count(n, b_count, c_count)


def catalan(n):
    """Return the ``n``-th Catalan number."""
    if n < 0:
        raise ValueError("n must not be negative")
    table = [1, 1]
    for i in range(2, n + 1):
        table.append(sum(table[j - 1] * table[i - j] for j in range(1, i + 1)))
    return table[n]


def min_coins(amount, coins=(1, 2, 3, 4, 5)):
    """Return the fewest coins that make up ``amount``."""
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")
    unreachable = float("inf")
    best = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if coin <= total and best[total - coin] + 1 < best[total]:
                best[total] = best[total - coin] + 1
    if best[amount] == unreachable:
        raise ValueError(f"{amount} cannot be made from the given coins")
    return best[amount]


def edit_distance(a, b):
    """Return the fewest insertions, deletions and substitutions turning ``a`` into ``b``."""
    previous = list(range(len(b) + 1))
    for i, a_char in enumerate(a, start=1):
        current = [i]
        for j, b_char in enumerate(b, start=1):
            if a_char == b_char:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], previous[j], current[j - 1]) + 1)
        previous = current
    return previous[-1]


def kadane(values):
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    best = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("values must not be empty")
    return best


def lcs_length(a, b):
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for a_char in a:
        current = [0]
        for j, b_char in enumerate(b, start=1):
            if a_char == b_char:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_increasing_run(values):
    """Return the length of the longest strictly increasing contiguous run."""
    best = 0
    run = 0
    previous = None
    for value in values:
        run = run + 1 if previous is not None and value > previous else 1
        best = max(best, run)
        previous = value
    return best


def max_submatrix_sum(matrix):
    """Return the largest sum of a non-empty rectangular block of ``matrix``."""
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must have equal length")
    best = None
    for left in range(width):
        sums = [0] * len(rows)
        for right in range(left, width):
            sums = [total + row[right] for total, row in zip(sums, rows)]
            candidate = kadane(sums)
            if best is None or candidate > best:
                best = candidate
    return best


def staircase_table(n):
    """Return the ways to climb 0..n stairs by ones and twos, as a list."""
    if n < 0:
        raise ValueError("n must not be negative")
    table = [1, 1]
    for _ in range(2, n + 1):
        table.append(table[-1] + table[-2])
    return table[: n + 1]