import math

import pytest

from algocollection.number_theory import (
    fibonacci,
    gcd_of,
    is_buzz_number,
    is_happy_number,
    is_palindrome_number,
    power_digits,
    prime_factorization,
    sieve_primes,
)


def test_sieve_below_two_is_empty():
    assert sieve_primes(1) == []
    assert sieve_primes(0) == []
    assert sieve_primes(-5) == []


def test_sieve_small_primes():
    assert sieve_primes(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_sieve_is_exactly_the_primes():
    limit = 300
    primes = sieve_primes(limit)
    found = set(primes)
    assert primes == sorted(primes)
    for n in range(2, limit + 1):
        has_divisor = any(n % d == 0 for d in range(2, math.isqrt(n) + 1))
        assert (n in found) == (not has_divisor)


def test_sieve_includes_limit_when_prime():
    assert sieve_primes(97)[-1] == 97


def test_buzz_multiples_of_seven():
    assert all(is_buzz_number(7 * k) for k in range(1, 60))


def test_buzz_ending_in_seven():
    assert all(is_buzz_number(10 * k + 7) for k in range(0, 60))


def test_not_buzz():
    assert not any(is_buzz_number(n) for n in (1, 2, 3, 4, 5, 6, 8, 9, 10, 11, 12, 13))


def test_gcd_single_value():
    assert gcd_of([42]) == 42


def test_gcd_divides_all_and_is_greatest():
    values = [84, 126, 210]
    g = gcd_of(values)
    assert all(v % g == 0 for v in values)
    assert not any(all(v % d == 0 for v in values) for d in range(g + 1, min(values) + 1))


def test_gcd_scales():
    values = [9, 15, 21]
    assert gcd_of([5 * v for v in values]) == 5 * gcd_of(values)


def test_gcd_empty_raises():
    with pytest.raises(ValueError):
        gcd_of([])


@pytest.mark.parametrize("n", [1, 10, 19, 100, 1000])
def test_happy(n):
    assert is_happy_number(n) is True


@pytest.mark.parametrize("n", [0, 2, 12, 99, -1])
def test_not_happy(n):
    assert is_happy_number(n) is False


def test_happiness_ignores_trailing_zeros():
    assert all(is_happy_number(n) == is_happy_number(n * 10) for n in range(1, 200))


@pytest.mark.parametrize("n", [0, 7, 121, 12321])
def test_palindrome(n):
    assert is_palindrome_number(n) is True


@pytest.mark.parametrize("n", [10, 123, -121])
def test_not_palindrome(n):
    assert is_palindrome_number(n) is False


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    assert fibonacci(2) == 1


def test_fibonacci_recurrence():
    for n in range(2, 200):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_power_zero_exponent():
    assert power_digits(7, 0) == "1"


def test_power_step():
    for exponent in range(1, 40):
        assert int(power_digits(13, exponent)) == 13 * int(power_digits(13, exponent - 1))


def test_power_of_ten_digits():
    assert power_digits(10, 50) == "1" + "0" * 50


def test_power_negative_raises():
    with pytest.raises(ValueError):
        power_digits(2, -1)


def test_factorization_known():
    assert prime_factorization(360) == [(2, 3), (3, 2), (5, 1)]


def test_factorization_of_one():
    assert prime_factorization(1) == []


def test_factorization_invariants():
    for n in range(2, 500):
        factors = prime_factorization(n)
        primes = set(sieve_primes(n))
        assert math.prod(p**c for p, c in factors) == n
        assert all(p in primes and c > 0 for p, c in factors)
        assert [p for p, _ in factors] == sorted(p for p, _ in factors)


def test_factorization_non_positive_raises():
    with pytest.raises(ValueError):
        prime_factorization(0)