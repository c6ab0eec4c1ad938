"""Clebsch-Gordan coefficients, lineshapes, recouplings, kinematics and decay trees for three-body decays."""

__version__ = "0.1.0"

__all__ = [
    "clebsch_gordan",
    "lineshapes",
    "recoupling",
    "system",
    "kinematics",
    "topology",
]