"""Searching sorted sequences: binary, stepped and jump search, and neighbours."""

import bisect
import math


def _not_found(target):
    return ValueError(f"{target!r} is not in the sequence")


def binary_search(values, target):
    """Return the index of ``target`` in the sorted sequence ``values``.

    Raises ValueError when ``target`` is absent.
    """
    values = list(values)
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if target < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    raise _not_found(target)


def step_search(values, target):
    """Find ``target`` in sorted ``values`` by jumps of halving length.

    Starting from index 0, the position advances by n/2, n/4, ... while the
    element jumped to is not above ``target``. Raises ValueError when absent.
    """
    values = list(values)
    n = len(values)
    position = 0
    step = n // 2
    while step >= 1:
        while position + step < n and values[position + step] <= target:
            position += step
        if values[position] == target:
            return position
        step //= 2
    if n and values[position] == target:
        return position
    raise _not_found(target)


def jump_search(values, target):
    """Find ``target`` in sorted ``values`` by blocks of about sqrt(n) elements.

    Raises ValueError when ``target`` is absent.
    """
    values = list(values)
    n = len(values)
    if not n:
        raise _not_found(target)
    step = max(1, math.isqrt(n))
    for start in range(0, n, step):
        if values[start] == target:
            return start
        if values[start] > target:
            for index in range(max(0, start - step), start):
                if values[index] == target:
                    return index
            raise _not_found(target)
    last_sampled = (n - 1) // step * step
    for index in range(last_sampled + 1, n):
        if values[index] == target:
            return index
    raise _not_found(target)


def closest_value(values, target):
    """Return the element of ``values`` nearest to ``target``.

    On a tie the larger element wins. Raises ValueError for no values.
    """
    ordered = sorted(set(values))
    if not ordered:
        raise ValueError("values must not be empty")
    position = bisect.bisect_left(ordered, target)
    if position == 0:
        return ordered[0]
    if position == len(ordered):
        return ordered[-1]
    above = ordered[position]
    below = ordered[position - 1]
    return below if target - below < above - target else above


def count_occurrences(values, target):
    """Count how often ``target`` occurs in ``values``."""
    return sum(1 for value in values if value == target)


def largest_window(values, n):
    """Return the lexicographically largest run of ``n`` consecutive values."""
    values = list(values)
    if not 1 <= n <= len(values):
        raise ValueError("window length must lie between 1 and the number of values")
    return max(values[start:start + n] for start in range(len(values) - n + 1))