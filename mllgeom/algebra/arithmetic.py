"""Integer arithmetic: greatest common divisors via the Euclidean algorithm."""

from collections.abc import Iterable, Sequence


def euclidean_algorithm(n: int, m: int, previous_remainders: Sequence[int]) -> list[int]:
    """Run the Euclidean algorithm on n and m.

    Returns the remainder sequence, starting from ``previous_remainders``
    (reversed whenever the arguments are swapped) and ending just after the
    first zero remainder.
    """
    remainders = list(previous_remainders)
    while True:
        if n < m:
            remainders.reverse()
            n, m = m, n
            continue
        if m == 0:
            return remainders
        rem = n % m
        remainders.append(rem)
        if rem == 0:
            return remainders
        n, m = m, rem


def gcd(n: int, m: int) -> int:
    """Return the non-negative greatest common divisor of n and m."""
    n_abs = abs(n)
    m_abs = abs(m)
    remainders = euclidean_algorithm(n_abs, m_abs, [n_abs, m_abs])
    return remainders[-2]


def gcd_all(ns: Iterable[int]) -> int:
    """Return the greatest common divisor of all numbers; 0 for none."""
    values = list(ns)
    if not values:
        return 0
    current = values[0]
    for value in values:
        current = gcd(value, current)
    return current