"""Number-theory exercises: powers, factorials, primes and friends."""

MODULUS = 1000000007
RECURRENCE_LIMIT = 1000000
_HAPPY_SEARCH = 100
_HAPPY_DEPTH = 100
_MAX_OR_LENGTH = 62

_recurrence = [0, 1]


def largest_power_of_two(n):
    """Return the largest power of two not above ``n``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return 1 << (n.bit_length() - 1)


def trailing_zeros(n):
    """Count the trailing zeros of ``n!``."""
    count = 0
    while n >= 5:
        n //= 5
        count += n
    return count


def _is_happy(number):
    for _ in range(_HAPPY_DEPTH):
        number = sum(int(digit) ** 2 for digit in str(number))
        if number == 1:
            return True
    return False


def next_happy(n):
    """Return the smallest happy number above ``n``, searching the next 99 numbers."""
    if n < 0:
        raise ValueError("n must not be negative")
    for candidate in range(n + 1, n + _HAPPY_SEARCH):
        if _is_happy(candidate):
            return candidate
    raise ValueError(f"no happy number found after {n}")


def is_prime(n):
    """Tell whether ``n`` is prime, by trial division."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def primes_between(m, n):
    """List the primes from ``m`` to ``n`` inclusive."""
    return [value for value in range(m, n + 1) if is_prime(value)]


def josephus(n, k):
    """Return the survivor when every ``k``-th of ``n`` people in a circle leaves."""
    if n < 2:
        raise ValueError("at least two people are needed")
    if k < 1:
        raise ValueError("k must be at least 1")
    people = list(range(1, n + 1))
    step = k - 1
    position = step
    while len(people) != 2:
        position %= len(people)
        del people[position]
        position += step
    return people[1] if position % 2 == 0 else people[0]


def has_distinct_subarray_ors(values):
    """Tell whether the bitwise ORs of all contiguous subarrays are distinct."""
    values = list(values)
    n = len(values)
    if n > _MAX_OR_LENGTH:
        return False
    results = set()
    for start in range(n):
        accumulated = 0
        for value in values[start:]:
            accumulated |= value
            results.add(accumulated)
    return len(results) == n * (n + 1) // 2


def distinct_subsets(n):
    """Return 2**(n-1), the count of distinct subsets for a string of length ``n``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return 2 ** (n - 1)


def recurrence_value(n):
    """Return a(n) modulo 1e9+7, where a(1) = 1 and a(i) = a(i-1)*(i+1) + i."""
    if not 0 <= n <= RECURRENCE_LIMIT:
        raise ValueError(f"n must lie between 0 and {RECURRENCE_LIMIT}")
    for i in range(len(_recurrence), n + 1):
        previous = _recurrence[-1]
        _recurrence.append((previous * i + previous + i) % MODULUS)
    return _recurrence[n]