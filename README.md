# threebody

Building blocks for amplitude analyses of three-body decays. It is plain
Python and has no third-party dependencies.

## Modules

- `threebody.clebsch_gordan`: Clebsch-Gordan coefficients.
  - `clebschgordan(j1, m1, j2, m2, j, m)` and its shorthand `cg` take integer
    spins.
  - `clebschgordan_doublearg(...)` takes every argument doubled (`2j`, `2m`),
    so half-integer spins can be passed as whole numbers. Its overall sign is
    the opposite of the Condon-Shortley convention.
  - `cg_doublearg(...)` evaluates the Racah formula in the Condon-Shortley
    convention. Half-integer factorial arguments are truncated.
  - `log_factorial(n)` covers `0 <= n <= 100`. `log_factorial_doubled(two_n)`
    covers `0 <= two_n <= 100`. Both raise `ValueError` outside their range.
  - Combinations that are not allowed give `0.0`: `m` outside `[-j, j]`,
    `m1 + m2 != m`, or `j` outside the triangle.
- `threebody.lineshapes`: frozen dataclasses that can be called with the
  invariant mass squared `sigma` and return a complex amplitude.
  - `BreitWigner(mass, width)`
  - `Flatte(mass, g1, g2, m1, m2)`
  - `BuggBW(mass, width, s0, s1, s2)`. It keeps `s1` but does not use it.
  - The factories `make_breit_wigner`, `make_flatte` and `make_bugg_bw` build
    these objects.
- `threebody.recoupling`: vertex helicity functions that take
  `(two_ms, two_js)`.
  - `NoRecoupling(two_λa, two_λb)` returns 1 for that one helicity pair and 0
    for any other.
  - `ParityRecoupling(two_λa, two_λb, ηηη_phase_is_plus)` also accepts the
    mirrored pair, weighted by ±1.
  - It also provides the `RecouplingType` enumeration and the `LSCoupling`
    record.
- `threebody.system`: two frozen records.
  - `ThreeBodySystem(ms, two_js)` holds four masses and four doubled spins,
    with the parent last. `ThreeBodySystem.from_spins(ms, spins)` doubles the
    spins it is given.
  - `DecayChain(k, two_j, xlineshape, hrk, hij, tbs)` ties a lineshape and
    two vertex functions to a system.
- `threebody.kinematics`: `FourVector(px, py, pz, e)`.
  - Its methods are `mass()`, `+`, `boost`, `boost_z`, `rotate_y` and
    `rotate_z`. A boost at or above the speed of light raises `ValueError`.
  - The helpers are `spherical_coordinates`, `boost_gamma`, `rz`, `ry`, `bz`
    and `pure_b`.
  - `pure_b_system(mapping)` boosts a set of named momenta into their common
    rest frame. The result is keyed in sorted name order.
- `threebody.topology`: decay trees and their angles.
  - Decay trees are built from `DecayNode` and `NodeType`, using
    `DecayNode.particle`, `DecayNode.decay` and `DecayNode.from_topology`.
    `DecayNode.format` gives an indented text view of a tree.
  - `helicity_angles(four_vectors_rf, ((i, j), k))` and `decay_angles(tree)`
    return two `DecayAngles` records.

## Examples

```python
from threebody.clebsch_gordan import clebschgordan, clebschgordan_doublearg

clebschgordan(2, 0, 1, 0, 1, 0)             # about 0.632456
clebschgordan_doublearg(1, 1, 1, -1, 0, 0)  # about -0.707107
```

```python
from threebody.kinematics import FourVector, pure_b_system

momenta = {
    "Dst": FourVector(0.0570074, -0.026685, 0.0479813, 2.0085299),
    "D": FourVector(-0.108349, -0.056907, -0.295222, 1.8967276),
    "Pi": FourVector(0.1034199, 0.0873037, 0.2482869, 0.3153471),
}
rest_frame = pure_b_system(momenta)
total = sum(rest_frame.values(), FourVector())
# total has zero three-momentum; each particle keeps its mass
```

```python
from threebody.lineshapes import make_breit_wigner

bw = make_breit_wigner(1.5195, 0.0156)
bw(2.5)  # complex amplitude at sigma = 2.5
```

## What it does not do

- It does not evaluate full decay amplitudes or intensities. There are no
  Wigner rotations, no Dalitz-plot variable conversions, no enumeration of
  allowed LS couplings and no model that sums decay chains.
- `DecayChain` only holds its parts.
- `decay_angles` does not compute angles from the momenta. It returns fixed,
  tabulated values for the three topologies of particles named `Pi`, `D` and
  `Dst`: `(Pi, D), Dst`, `(D, Dst), Pi` and `(Dst, Pi), D`.
  - For any other three-particle tree it returns zero angles labelled
    `unknown1` and `unknown2`.
  - `transform` and `add_transform_through` return a copy of the tree.

## Running the tests

```
pip install -e ".[test]"
pytest
```