"""Number-theory helpers: primes, digit properties, Fibonacci, big powers, factorisation."""

from __future__ import annotations

import math
from collections.abc import Iterable
from functools import lru_cache, reduce


def sieve_primes(limit: int) -> list[int]:
    """Return every prime from 2 up to and including limit (sieve of Eratosthenes)."""
    if limit < 2:
        return []
    is_prime = [True] * (limit + 1)
    is_prime[0] = is_prime[1] = False
    for candidate in range(2, math.isqrt(limit) + 1):
        if is_prime[candidate]:
            is_prime[candidate * candidate :: candidate] = [False] * len(
                range(candidate * candidate, limit + 1, candidate)
            )
    return [number for number, prime in enumerate(is_prime) if prime]


def is_buzz_number(n: int) -> bool:
    """A buzz number is divisible by 7 or has 7 as its last digit."""
    return n % 7 == 0 or (n > 0 and n % 10 == 7)


def gcd_of(numbers: Iterable[int]) -> int:
    """Greatest common divisor of all the numbers, by repeated division."""
    values = list(numbers)
    if not values:
        raise ValueError("at least one number is needed")
    return reduce(math.gcd, values)


def _digit_sum(n: int) -> int:
    return sum(int(digit) for digit in str(n))


def is_happy_number(n: int) -> bool:
    """True when summing the digits repeatedly down to one digit ends at 1."""
    if n < 0:
        return False
    while n > 9:
        n = _digit_sum(n)
    return n == 1


def is_palindrome_number(n: int) -> bool:
    """True when the decimal text of n reads the same both ways."""
    text = str(n)
    return text == text[::-1]


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n == 0:
        return 0
    if n in (1, 2):
        return 1
    if n % 2:
        k = (n + 1) // 2
        return _fib(k) ** 2 + _fib(k - 1) ** 2
    k = n // 2
    return (2 * _fib(k - 1) + _fib(k)) * _fib(k)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, by the doubling identities with memoisation."""
    if n < 0:
        raise ValueError("fibonacci index must not be negative")
    return _fib(n)


def power_digits(base: int, exponent: int) -> str:
    """Decimal digits of base raised to exponent, exact for any size."""
    if base < 0 or exponent < 0:
        raise ValueError("base and exponent must not be negative")
    return str(base**exponent)


def prime_factorization(n: int) -> list[tuple[int, int]]:
    """Prime factors of n with their multiplicities, smallest prime first."""
    if n < 1:
        raise ValueError("only positive numbers can be factorised")
    factors = []
    remaining = n
    for prime in sieve_primes(n):
        if remaining == 1:
            break
        count = 0
        while remaining % prime == 0:
            remaining //= prime
            count += 1
        if count:
            factors.append((prime, count))
    return factors