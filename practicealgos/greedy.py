"""Greedy exercises: luck balance, cakewalk, triangles, differences and grids."""

from itertools import pairwise


def luck_balance(k, contests):
    """Return the most luck kept when at most ``k`` important contests are lost.

    ``contests`` holds (luck, importance) pairs; importance 1 marks an
    important contest. Every unimportant contest is lost.
    """
    important = []
    unimportant = []
    for luck, importance in contests:
        (important if importance == 1 else unimportant).append(luck)
    important.sort(reverse=True)
    lost = max(k, 0)
    return sum(important[:lost]) - sum(important[lost:]) + sum(unimportant)


def marc_cakewalk(calories):
    """Return the fewest miles to walk: eat the largest cupcakes first."""
    return sum(
        (2 ** index) * calorie
        for index, calorie in enumerate(sorted(calories, reverse=True))
    )


def maximum_perimeter_triangle(sticks):
    """Return the sides of the non-degenerate triangle with the largest perimeter.

    The sides come in ascending order; None when no triangle can be formed.
    """
    ordered = sorted(sticks)
    for start in range(len(ordered) - 3, -1, -1):
        a, b, c = ordered[start:start + 3]
        if a + b > c:
            return (a, b, c)
    return None


def minimum_absolute_difference(values):
    """Return the smallest absolute difference between any two values."""
    ordered = sorted(values)
    if len(ordered) < 2:
        raise ValueError("at least two values are needed")
    return min(later - earlier for earlier, later in pairwise(ordered))


def grid_challenge(grid):
    """Tell whether sorting each row also leaves every column in order."""
    rows = ["".join(sorted(row)) for row in grid]
    if len({len(row) for row in rows}) > 1:
        raise ValueError("grid rows must have equal length")
    return all(
        upper <= lower
        for column in zip(*rows)
        for upper, lower in pairwise(column)
    )