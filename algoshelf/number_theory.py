"""Integer arithmetic helpers: gcd, primes, powers and binary strings."""

from __future__ import annotations

import math


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers (Euclid)."""
    while b:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(x, y, g)`` with ``a*x + b*y == g == gcd(a, b)``."""
    if b == 0:
        return 1, 0, a
    x, y, g = extended_gcd(b, a % b)
    return y, x - (a // b) * y, g


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``; lcm(0, 0) is 0."""
    divisor = gcd(a, b)
    if divisor == 0:
        return 0
    return a // divisor * b


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime, testing divisors of the form 6k +/- 1."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def is_perfect_square(n: int) -> bool:
    """Tell whether ``n`` is the square of an integer; negatives never are."""
    if n < 0:
        return False
    root = math.isqrt(n)
    return root * root == n


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two (1 counts)."""
    return n > 0 and n & (n - 1) == 0


def power(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def to_binary(n: int) -> str:
    """Return the binary digits of ``n``; zero gives the empty string."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    digits: list[str] = []
    while n > 0:
        digits.append(str(n % 2))
        n //= 2
    return "".join(reversed(digits))


def from_binary(text: str) -> int:
    """Return the value of a string of binary digits; the empty string is 0."""
    value = 0
    for char in text:
        if char not in "01":
            raise ValueError(f"not a binary digit: {char!r}")
        value = value * 2 + (char == "1")
    return value


def sieve(n: int) -> list[int]:
    """Return every prime up to and including ``n`` (Sieve of Eratosthenes)."""
    if n < 2:
        return []
    prime = [True] * (n + 1)
    prime[0] = prime[1] = False
    p = 2
    while p * p <= n:
        if prime[p]:
            prime[p * p :: p] = [False] * len(range(p * p, n + 1, p))
        p += 1
    return [value for value, flag in enumerate(prime) if flag]


def odd_even_element(n: int, k: int) -> int:
    """Return the ``k``-th number (from 1) when 1..n lists its odds, then its evens."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if not 1 <= k <= n:
        raise ValueError(f"k must lie in 1..{n}, got {k}")
    odd_count = (n + 1) // 2
    if k <= odd_count:
        return 2 * k - 1
    return 2 * (k - odd_count)