import math

import pytest

from practicealgos.numbers import (
    MODULUS,
    RECURRENCE_LIMIT,
    distinct_subsets,
    has_distinct_subarray_ors,
    is_prime,
    josephus,
    largest_power_of_two,
    next_happy,
    primes_between,
    recurrence_value,
    trailing_zeros,
)


@pytest.mark.parametrize("n", [1, 2, 3, 7, 8, 100, 1023, 1024])
def test_largest_power_of_two(n):
    power = largest_power_of_two(n)
    assert power & (power - 1) == 0
    assert power <= n < 2 * power


def test_largest_power_of_two_rejects_zero():
    with pytest.raises(ValueError):
        largest_power_of_two(0)


@pytest.mark.parametrize("n", [0, 4, 5, 24, 25, 100, 137])
def test_trailing_zeros_matches_factorial(n):
    digits = str(math.factorial(n))
    assert trailing_zeros(n) == len(digits) - len(digits.rstrip("0"))


def test_next_happy_known():
    assert next_happy(8) == 10


@pytest.mark.parametrize("n", [0, 1, 10, 50, 999])
def test_next_happy_is_above_and_stable(n):
    result = next_happy(n)
    assert result > n
    assert next_happy(result - 1) == result
    assert all(next_happy(k) == result for k in range(n, result))


def test_next_happy_rejects_negative():
    with pytest.raises(ValueError):
        next_happy(-1)


def test_is_prime_small_values():
    assert not is_prime(1)
    assert is_prime(2)
    assert not is_prime(4)


@pytest.mark.parametrize("m,n", [(1, 50), (100, 200), (7, 7)])
def test_primes_between(m, n):
    primes = primes_between(m, n)
    assert primes == sorted(primes)
    assert all(m <= p <= n for p in primes)
    for p in primes:
        assert all(p % d for d in range(2, p))
    composites = set(range(max(m, 2), n + 1)) - set(primes)
    for c in composites:
        assert any(c % d == 0 for d in range(2, c))


def test_primes_between_empty_range():
    assert primes_between(10, 5) == []


def test_josephus_examples():
    assert josephus(3, 2) == 3
    assert josephus(5, 3) == 4


@pytest.mark.parametrize("n", range(2, 12))
def test_josephus_step_one_keeps_last(n):
    assert josephus(n, 1) == n


@pytest.mark.parametrize("n,k", [(7, 3), (10, 4), (41, 3)])
def test_josephus_survivor_in_circle(n, k):
    assert 1 <= josephus(n, k) <= n


def test_josephus_rejects_bad_input():
    with pytest.raises(ValueError):
        josephus(1, 2)
    with pytest.raises(ValueError):
        josephus(5, 0)


def test_has_distinct_subarray_ors():
    assert has_distinct_subarray_ors([1, 2])
    assert not has_distinct_subarray_ors([1, 1])


def test_has_distinct_subarray_ors_empty():
    assert has_distinct_subarray_ors([])


def test_has_distinct_subarray_ors_too_long():
    assert not has_distinct_subarray_ors([1 << i for i in range(63)])


@pytest.mark.parametrize("n", range(1, 20))
def test_distinct_subsets_doubles(n):
    assert distinct_subsets(n + 1) == 2 * distinct_subsets(n)


def test_distinct_subsets_base_and_error():
    assert distinct_subsets(1) == 1
    with pytest.raises(ValueError):
        distinct_subsets(0)


def test_recurrence_base():
    assert recurrence_value(0) == 0
    assert recurrence_value(1) == 1


@pytest.mark.parametrize("i", [2, 3, 10, 1000, 50000])
def test_recurrence_relation(i):
    previous = recurrence_value(i - 1)
    assert recurrence_value(i) == (previous * (i + 1) + i) % MODULUS


def test_recurrence_values_are_reduced():
    assert all(0 <= recurrence_value(i) < MODULUS for i in range(0, 2000))


def test_recurrence_limits():
    with pytest.raises(ValueError):
        recurrence_value(-1)
    with pytest.raises(ValueError):
        recurrence_value(RECURRENCE_LIMIT + 1)