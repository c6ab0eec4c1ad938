"""Clebsch-Gordan coefficients computed from tabulated log-factorials."""

from __future__ import annotations

import math
from functools import lru_cache

MAX_FACTORIAL = 100
MAX_DOUBLED = 100

_LOG_FACTORIALS: tuple[float, ...] = tuple(
    math.fsum(math.log(i) for i in range(1, n + 1)) for n in range(MAX_FACTORIAL + 1)
)


def log_factorial(n: int) -> float:
    """Return log(n!) for 0 <= n <= 100."""
    if n < 0 or n > MAX_FACTORIAL:
        raise ValueError(f"factorial argument {n} out of range [0, {MAX_FACTORIAL}]")
    return _LOG_FACTORIALS[n]


def log_factorial_doubled(two_n: int) -> float:
    """Return log((two_n // 2)!) for a doubled argument 0 <= two_n <= 100."""
    if two_n < 0 or two_n > MAX_DOUBLED:
        raise ValueError(
            f"doubled factorial argument {two_n} out of range [0, {MAX_DOUBLED}]"
        )
    return log_factorial(two_n // 2)


@lru_cache(maxsize=4096)
def clebschgordan_doublearg(
    two_j1: int, two_m1: int, two_j2: int, two_m2: int, two_j: int, two_m: int
) -> float:
    """Coefficient <j1 m1; j2 m2 | j m> with all arguments doubled.

    The overall sign is inverted relative to the Condon-Shortley convention.
    """
    if abs(two_m1) > two_j1 or abs(two_m2) > two_j2 or abs(two_m) > two_j:
        return 0.0
    if two_m1 + two_m2 != two_m or not (
        abs(two_j1 - two_j2) <= two_j <= two_j1 + two_j2
    ):
        return 0.0

    lf = log_factorial_doubled
    prefactor = math.sqrt(two_j + 1.0) * math.exp(
        (
            lf(two_j1 + two_j2 - two_j)
            + lf(two_j1 + two_j - two_j2)
            + lf(two_j2 + two_j - two_j1)
            - lf(two_j1 + two_j2 + two_j + 2)
            + lf(two_j1 + two_m1)
            + lf(two_j1 - two_m1)
            + lf(two_j2 + two_m2)
            + lf(two_j2 - two_m2)
            + lf(two_j + two_m)
            + lf(two_j - two_m)
        )
        / 2.0
    )

    two_t_min = max(0, two_j2 - two_m1 - two_j, two_j1 + two_m2 - two_j)
    two_t_max = min(two_j1 + two_j2 - two_j, two_j1 - two_m1, two_j2 + two_m2)

    total = 0.0
    for two_t in range(two_t_min, two_t_max + 1, 2):
        logs = (
            lf(two_t)
            + lf(two_j - two_j2 + two_m1 + two_t)
            + lf(two_j - two_j1 - two_m2 + two_t)
            + lf(two_j1 + two_j2 - two_j - two_t)
            + lf(two_j1 - two_m1 - two_t)
            + lf(two_j2 + two_m2 - two_t)
        )
        sign = -1.0 if abs(two_t) % 4 == 2 else 1.0
        total += sign * math.exp(-logs)

    return -(total * prefactor)


def clebschgordan(j1: int, m1: int, j2: int, m2: int, j: int, m: int) -> float:
    """Coefficient for integer angular momenta."""
    return clebschgordan_doublearg(2 * j1, 2 * m1, 2 * j2, 2 * m2, 2 * j, 2 * m)


def cg(j1: int, m1: int, j2: int, m2: int, j: int, m: int) -> float:
    """Shorthand for :func:`clebschgordan`."""
    return clebschgordan(j1, m1, j2, m2, j, m)


def _lf_truncated(x: float) -> float:
    return log_factorial(int(x))


def cg_doublearg(
    two_j1: int, two_m1: int, two_j2: int, two_m2: int, two_j: int, two_m: int
) -> float:
    """Coefficient from the Racah formula in the Condon-Shortley convention.

    Half-integer factorial arguments are truncated toward zero.
    """
    if two_m != two_m1 + two_m2:
        return 0.0
    if two_j < abs(two_j1 - two_j2) or two_j > two_j1 + two_j2:
        return 0.0

    j1, m1 = two_j1 / 2.0, two_m1 / 2.0
    j2, m2 = two_j2 / 2.0, two_m2 / 2.0
    j, m = two_j / 2.0, two_m / 2.0

    if abs(m1) > j1 or abs(m2) > j2 or abs(m) > j:
        return 0.0

    lf = _lf_truncated
    norm = math.sqrt(
        (2.0 * j + 1.0)
        * math.exp(lf(j1 + j2 - j) + lf(j + j1 - j2) + lf(j + j2 - j1) - lf(j1 + j2 + j + 1.0))
    )
    norm *= math.sqrt(
        math.exp(
            lf(j1 + m1) + lf(j1 - m1) + lf(j2 + m2) + lf(j2 - m2) + lf(j + m) + lf(j - m)
        )
    )

    max_k = min(j1 + j2 - j, j1 - m1, j2 + m2)
    total = 0.0
    k = 0.0
    while k <= max_k:
        if j - j2 + m1 + k >= 0.0 and j - j1 - m2 + k >= 0.0:
            total += (-1.0) ** k / math.exp(
                lf(k)
                + lf(j1 + j2 - j - k)
                + lf(j1 - m1 - k)
                + lf(j2 + m2 - k)
                + lf(j - j2 + m1 + k)
                + lf(j - j1 - m2 + k)
            )
        k += 1.0

    return norm * total