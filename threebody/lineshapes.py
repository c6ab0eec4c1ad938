"""Resonance lineshapes as callables of the invariant mass squared."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass
from typing import Callable

Lineshape = Callable[[float], complex]


def _sqrt_or_nan(x: float) -> float:
    return math.sqrt(x) if x >= 0.0 else math.nan


@dataclass(frozen=True)
class BreitWigner:
    """Relativistic Breit-Wigner with constant width."""

    mass: float
    width: float

    def __call__(self, sigma: float) -> complex:
        return 1.0 / complex(self.mass * self.mass - sigma, -self.mass * self.width)


@dataclass(frozen=True)
class Flatte:
    """Two-channel Flatte lineshape."""

    mass: float
    g1: float
    g2: float
    m1: float
    m2: float

    def __call__(self, sigma: float) -> complex:
        rho1 = _sqrt_or_nan(1.0 - 4.0 * self.m1 * self.m1 / sigma)
        rho2 = _sqrt_or_nan(1.0 - 4.0 * self.m2 * self.m2 / sigma)
        running_width = complex(0.0, self.mass * (self.g1 * rho1 + self.g2 * rho2))
        return 1.0 / (complex(self.mass * self.mass - sigma, 0.0) - running_width)


@dataclass(frozen=True)
class BuggBW:
    """Bugg Breit-Wigner with an Adler zero and exponential damping.

    ``s1`` is kept as a parameter but does not enter the formula.
    """

    mass: float
    width: float
    s0: float
    s1: float
    s2: float

    def __call__(self, sigma: float) -> complex:
        m2 = self.mass * self.mass
        denominator = complex(m2 - sigma)
        numerator = self.mass * (sigma - self.s0) / (m2 - self.s0)
        width_term = self.width * cmath.exp(-self.s2 * sigma)
        return 1.0 / (denominator - 1j * numerator * width_term)


def make_breit_wigner(mass: float, width: float) -> Lineshape:
    """Return a Breit-Wigner lineshape callable."""
    return BreitWigner(mass, width)


def make_flatte(mass: float, g1: float, g2: float, m1: float, m2: float) -> Lineshape:
    """Return a Flatte lineshape callable."""
    return Flatte(mass, g1, g2, m1, m2)


def make_bugg_bw(mass: float, width: float, s0: float, s1: float, s2: float) -> Lineshape:
    """Return a Bugg Breit-Wigner lineshape callable."""
    return BuggBW(mass, width, s0, s1, s2)