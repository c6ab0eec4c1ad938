"""Three-body system description and the decay chain built on it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from threebody.recoupling import Recoupling

_SIZE = 4


def _four(values: Iterable, what: str) -> tuple:
    items = tuple(values)
    if len(items) != _SIZE:
        raise ValueError(f"{what} must have exactly {_SIZE} entries, got {len(items)}")
    return items


@dataclass(frozen=True)
class ThreeBodySystem:
    """Masses and doubled spins of the three daughters and the parent (index 3)."""

    ms: tuple[float, float, float, float]
    two_js: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "ms", tuple(float(m) for m in _four(self.ms, "ms")))
        object.__setattr__(
            self, "two_js", tuple(int(j) for j in _four(self.two_js, "two_js"))
        )

    @classmethod
    def from_spins(cls, ms: Sequence[float], spins: Sequence[int]) -> "ThreeBodySystem":
        """Build a system from masses and spins; the spins are stored doubled."""
        return cls(tuple(ms), tuple(2 * s for s in _four(spins, "spins")))


@dataclass(frozen=True)
class DecayChain:
    """One resonance in channel ``k`` with its lineshape and vertex functions."""

    k: int
    two_j: int
    xlineshape: Callable[[float], complex]
    hrk: Recoupling
    hij: Recoupling
    tbs: ThreeBodySystem