"""Four-vectors, rotations and boosts used to bring momenta into a rest frame."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class FourVector:
    """Four-momentum (px, py, pz, E)."""

    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    e: float = 0.0

    def mass(self) -> float:
        """Invariant mass; zero when the invariant mass squared is not positive."""
        m2 = self.e * self.e - self.px * self.px - self.py * self.py - self.pz * self.pz
        return math.sqrt(m2) if m2 > 0 else 0.0

    def __add__(self, other: "FourVector") -> "FourVector":
        if not isinstance(other, FourVector):
            return NotImplemented
        return FourVector(
            self.px + other.px,
            self.py + other.py,
            self.pz + other.pz,
            self.e + other.e,
        )

    def boost(self, bx: float, by: float, bz: float) -> "FourVector":
        """Lorentz boost by the velocity (bx, by, bz)."""
        b2 = bx * bx + by * by + bz * bz
        if b2 >= 1.0:
            raise ValueError("Boost velocity must be less than the speed of light")
        gamma = 1.0 / math.sqrt(1.0 - b2)
        bp = bx * self.px + by * self.py + bz * self.pz
        gamma2 = (gamma - 1.0) / b2 if b2 > 0 else 0.0
        return FourVector(
            self.px + gamma2 * bp * bx + gamma * bx * self.e,
            self.py + gamma2 * bp * by + gamma * by * self.e,
            self.pz + gamma2 * bp * bz + gamma * bz * self.e,
            gamma * (self.e + bp),
        )

    def boost_z(self, beta: float) -> "FourVector":
        """Lorentz boost along the z axis by velocity ``beta``."""
        if beta * beta >= 1.0:
            raise ValueError("Boost velocity must be less than the speed of light")
        gamma = 1.0 / math.sqrt(1.0 - beta * beta)
        return FourVector(
            self.px,
            self.py,
            gamma * (self.pz + beta * self.e),
            gamma * (self.e + beta * self.pz),
        )

    def rotate_y(self, angle: float) -> "FourVector":
        """Rotation about the y axis."""
        c, s = math.cos(angle), math.sin(angle)
        return FourVector(
            c * self.px + s * self.pz,
            self.py,
            -s * self.px + c * self.pz,
            self.e,
        )

    def rotate_z(self, angle: float) -> "FourVector":
        """Rotation about the z axis."""
        c, s = math.cos(angle), math.sin(angle)
        return FourVector(
            c * self.px - s * self.py,
            s * self.px + c * self.py,
            self.pz,
            self.e,
        )


@dataclass(frozen=True)
class SphericalCoordinates:
    """Direction of a three-momentum as cos(theta) and phi."""

    cos_theta: float
    phi: float


def spherical_coordinates(p: FourVector) -> SphericalCoordinates:
    """Polar cosine and azimuth of the momentum of ``p``."""
    pt = math.hypot(p.px, p.py)
    r = math.sqrt(pt * pt + p.pz * p.pz)
    cos_theta = p.pz / r if r > 0 else 1.0
    phi = math.atan2(p.py, p.px) if pt > 0 else 0.0
    return SphericalCoordinates(cos_theta, phi)


def boost_gamma(p: FourVector) -> float:
    """Lorentz factor E / m of ``p``."""
    mass = p.mass()
    if mass == 0.0:
        raise ValueError("Lorentz factor is undefined for a massless vector")
    return p.e / mass


def rz(phi: float, p: FourVector) -> FourVector:
    """Rotate ``p`` about z by ``phi``."""
    return p.rotate_z(phi)


def ry(theta: float, p: FourVector) -> FourVector:
    """Rotate ``p`` about y by ``theta``."""
    return p.rotate_y(theta)


def bz(gamma: float, p: FourVector) -> FourVector:
    """Boost ``p`` along z into the frame moving with Lorentz factor ``gamma``."""
    beta = math.sqrt(1.0 - 1.0 / (gamma * gamma))
    return p.boost_z(-beta)


def pure_b(p: FourVector, p_ref: FourVector) -> FourVector:
    """Boost ``p`` into the rest frame of ``p_ref`` without net rotation."""
    coords = spherical_coordinates(p_ref)
    theta = math.acos(coords.cos_theta)
    phi = coords.phi
    gamma = boost_gamma(p_ref)

    result = rz(-phi, p)
    result = ry(-theta, result)
    result = bz(-gamma, result)
    result = ry(theta, result)
    return rz(phi, result)


def pure_b_system(system: Mapping[str, FourVector]) -> dict[str, FourVector]:
    """Boost every momentum of ``system`` into the frame of their total.

    The result is keyed by name in sorted order.
    """
    names = sorted(system)
    total = sum((system[name] for name in names), FourVector())
    return {name: pure_b(system[name], total) for name in names}