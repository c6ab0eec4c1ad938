"""Helicity recoupling schemes for the two vertices of a decay chain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Sequence

Recoupling = Callable[[Sequence[int], Sequence[int]], complex]


class RecouplingType(Enum):
    """Kind of recoupling applied at a decay vertex."""

    NO_RECOUPLING = auto()
    PARITY_RECOUPLING = auto()
    LS_RECOUPLING = auto()


@dataclass(frozen=True)
class NoRecoupling:
    """Selects exactly one pair of doubled helicities."""

    two_λa: int
    two_λb: int

    def __call__(self, two_ms: Sequence[int], two_js: Sequence[int]) -> complex:
        if self.two_λa == two_ms[0] and self.two_λb == two_ms[1]:
            return complex(1.0, 0.0)
        return complex(0.0, 0.0)


@dataclass(frozen=True)
class ParityRecoupling:
    """Selects a helicity pair and its mirror, the mirror weighted by a parity phase."""

    two_λa: int
    two_λb: int
    ηηη_phase_is_plus: bool

    def __call__(self, two_ms: Sequence[int], two_js: Sequence[int]) -> complex:
        if self.two_λa == two_ms[0] and self.two_λb == two_ms[1]:
            return complex(1.0, 0.0)
        if self.two_λa == -two_ms[0] and self.two_λb == -two_ms[1]:
            return complex(2 * int(self.ηηη_phase_is_plus) - 1, 0.0)
        return complex(0.0, 0.0)


@dataclass(frozen=True)
class LSCoupling:
    """Doubled orbital and spin couplings at the two vertices of a chain.

    ``two_ls`` belongs to the (i, j) vertex, ``two_LS`` to the (R, k) vertex.
    """

    two_ls: tuple[int, int]
    two_LS: tuple[int, int]