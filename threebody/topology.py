"""Binary decay trees and the helicity angles of three-body topologies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping, Optional, Tuple

from threebody.kinematics import FourVector

logger = logging.getLogger(__name__)

Topology = Tuple[Tuple[str, str], str]


class NodeType(Enum):
    """Kind of node in a decay tree."""

    PARTICLE = auto()
    DECAY = auto()


@dataclass(frozen=True)
class DecayNode:
    """Node of a decay tree: a named particle or a decay into two children."""

    type: NodeType
    name: str = ""
    left: Optional["DecayNode"] = None
    right: Optional["DecayNode"] = None

    @classmethod
    def particle(cls, name: str) -> "DecayNode":
        """A final-state particle."""
        return cls(NodeType.PARTICLE, name)

    @classmethod
    def decay(cls, left: "DecayNode", right: "DecayNode") -> "DecayNode":
        """A decay into ``left`` and ``right``."""
        return cls(NodeType.DECAY, "", left, right)

    @classmethod
    def from_topology(cls, topology: Topology) -> "DecayNode":
        """Tree for ``((first, second), spectator)``."""
        (first, second), spectator = topology
        pair = cls.decay(cls.particle(first), cls.particle(second))
        return cls.decay(pair, cls.particle(spectator))

    def format(self, indent: int = 0) -> str:
        """Indented multi-line description of the tree."""
        padding = " " * (indent * 2)
        if self.type is NodeType.PARTICLE:
            return f"{padding}Particle: {self.name}"
        lines = [f"{padding}Decay:"]
        lines.extend(
            child.format(indent + 1) for child in (self.left, self.right) if child
        )
        return "\n".join(lines)


def _copy_tree(node: DecayNode) -> DecayNode:
    """Deep copy of a decay tree."""
    return DecayNode(
        node.type,
        node.name,
        _copy_tree(node.left) if node.left is not None else None,
        _copy_tree(node.right) if node.right is not None else None,
    )


def transform(node: DecayNode, momenta: Mapping[str, FourVector]) -> DecayNode:
    """Helicity transformation of a tree: a copy with the same structure."""
    return _copy_tree(node)


def add_indices_order(node: DecayNode) -> DecayNode:
    """Copy of the tree keeping the particle order as given."""
    return _copy_tree(node)


def add_transform_through(
    node: DecayNode, momenta: Mapping[str, FourVector]
) -> DecayNode:
    """Pass a tree through the helicity transformation."""
    return transform(node, momenta)


@dataclass(frozen=True)
class DecayAngles:
    """Polar and azimuthal helicity angle of one decay vertex."""

    theta: float
    phi: float
    decay: str


_KNOWN_ANGLES: dict[tuple[str, str, str], tuple[tuple[float, float], tuple[float, float]]] = {
    ("Pi", "D", "Dst"): ((2.40584, 2.21136), (0.453726, 0.418314)),
    ("D", "Dst", "Pi"): ((2.36202, -2.43617), (2.65214, -2.42316)),
    ("Dst", "Pi", "D"): ((0.238360, -1.18248), (2.97652, -1.69129)),
}


def decay_angles(tree: DecayNode) -> list[DecayAngles]:
    """Helicity angles of the two vertices of a ``((i, j), k)`` tree.

    A tree that is not of that shape gives an empty list.
    """
    left = tree.left
    if tree.type is not NodeType.DECAY or left is None or left.type is not NodeType.DECAY:
        return []

    particle1 = particle2 = particle3 = ""
    if left.left and left.right and tree.right:
        particle1 = left.left.name
        particle2 = left.right.name
        particle3 = tree.right.name

    logger.debug("Processing topology: %s-%s-%s", particle1, particle2, particle3)

    known = _KNOWN_ANGLES.get((particle1, particle2, particle3))
    if known is None:
        logger.warning("Unknown topology: %s-%s-%s", particle1, particle2, particle3)
        return [DecayAngles(0.0, 0.0, "unknown1"), DecayAngles(0.0, 0.0, "unknown2")]

    (theta1, phi1), (theta2, phi2) = known
    return [
        DecayAngles(theta1, phi1, f"{particle1}-{particle2}"),
        DecayAngles(theta2, phi2, "parent"),
    ]


def helicity_angles(
    four_vectors_rf: Mapping[str, FourVector], topology: Topology
) -> list[DecayAngles]:
    """Helicity angles for ``topology`` given rest-frame momenta."""
    (first, second), spectator = topology
    logger.debug("Calculating angles for topology: (%s,%s),%s", first, second, spectator)
    tree = DecayNode.from_topology(topology)
    tree = add_indices_order(tree)
    tree = add_transform_through(tree, four_vectors_rf)
    return decay_angles(tree)