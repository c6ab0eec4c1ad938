import math

import pytest

from threebody.kinematics import (
    FourVector,
    boost_gamma,
    bz,
    pure_b,
    pure_b_system,
    ry,
    rz,
    spherical_coordinates,
)


@pytest.fixture
def four_vectors():
    return {
        "Dst": FourVector(0.0570074, -0.026685, 0.0479813, 2.0085299),
        "D": FourVector(-0.108349, -0.056907, -0.295222, 1.8967276),
        "Pi": FourVector(0.1034199, 0.0873037, 0.2482869, 0.3153471),
    }


def test_masses(four_vectors):
    assert four_vectors["Dst"].mass() == pytest.approx(2.0069699, abs=1e-6)
    assert four_vectors["D"].mass() == pytest.approx(1.87, abs=0.01)
    assert four_vectors["Pi"].mass() == pytest.approx(0.14, abs=0.01)
    total = four_vectors["Dst"] + four_vectors["D"] + four_vectors["Pi"]
    assert total.mass() == pytest.approx(4.22028, abs=0.01)


def test_pure_boost_total_momentum_vanishes(four_vectors):
    rf = pure_b_system(four_vectors)
    total = sum(rf.values(), FourVector())
    assert total.px == pytest.approx(0.0, abs=1e-10)
    assert total.py == pytest.approx(0.0, abs=1e-10)
    assert total.pz == pytest.approx(0.0, abs=1e-10)


def test_pure_boost_preserves_masses(four_vectors):
    rf = pure_b_system(four_vectors)
    for name, p in four_vectors.items():
        assert rf[name].mass() == pytest.approx(p.mass(), abs=1e-10)


@pytest.mark.parametrize(
    "name, px, py, pz, e",
    [
        ("Dst", 0.0322264, -0.0284512, 0.0474835, 2.00799),
        ("D", -0.131764, -0.0585758, -0.295692, 1.89833),
        ("Pi", 0.0995372, 0.087027, 0.248209, 0.313957),
    ],
)
def test_pure_boost_values(four_vectors, name, px, py, pz, e):
    p = pure_b_system(four_vectors)[name]
    assert p.px == pytest.approx(px, abs=1e-6)
    assert p.py == pytest.approx(py, abs=1e-6)
    assert p.pz == pytest.approx(pz, abs=1e-6)
    assert p.e == pytest.approx(e, abs=1e-5)


def test_pure_boost_keys_sorted(four_vectors):
    assert list(pure_b_system(four_vectors)) == ["D", "Dst", "Pi"]


def test_pure_b_of_reference_is_at_rest():
    p = FourVector(0.3, -0.4, 1.2, 5.0)
    rest = pure_b(p, p)
    assert rest.px == pytest.approx(0.0, abs=1e-12)
    assert rest.py == pytest.approx(0.0, abs=1e-12)
    assert rest.pz == pytest.approx(0.0, abs=1e-12)
    assert rest.e == pytest.approx(p.mass(), rel=1e-12)


def test_boost_faster_than_light_raises():
    with pytest.raises(ValueError):
        FourVector(0, 0, 0, 1).boost(0.6, 0.6, 0.6)


def test_boost_zero_is_identity():
    p = FourVector(1.0, 2.0, 3.0, 10.0)
    assert p.boost(0.0, 0.0, 0.0) == p


def test_boost_along_z_matches_boost_z():
    p = FourVector(0.1, 0.2, 0.3, 2.0)
    a = p.boost(0.0, 0.0, 0.5)
    b = p.boost_z(0.5)
    assert a.pz == pytest.approx(b.pz)
    assert a.e == pytest.approx(b.e)
    assert a.px == pytest.approx(b.px)


def test_boost_z_rest_particle():
    p = FourVector(0, 0, 0, 1.0).boost_z(0.6)
    assert p.pz == pytest.approx(0.75)
    assert p.e == pytest.approx(1.25)


def test_rotations_preserve_mass():
    p = FourVector(0.5, -0.2, 0.7, 3.0)
    assert rz(0.7, p).mass() == pytest.approx(p.mass())
    assert ry(-1.3, p).mass() == pytest.approx(p.mass())


def test_rotate_z_quarter_turn():
    p = FourVector(1.0, 0.0, 0.0, 2.0).rotate_z(math.pi / 2)
    assert p.px == pytest.approx(0.0, abs=1e-12)
    assert p.py == pytest.approx(1.0)


def test_rotate_y_quarter_turn():
    p = FourVector(0.0, 0.0, 1.0, 2.0).rotate_y(math.pi / 2)
    assert p.px == pytest.approx(1.0)
    assert p.pz == pytest.approx(0.0, abs=1e-12)


def test_spherical_coordinates():
    c = spherical_coordinates(FourVector(0.0, 1.0, 0.0, 2.0))
    assert c.cos_theta == pytest.approx(0.0)
    assert c.phi == pytest.approx(math.pi / 2)
    zero = spherical_coordinates(FourVector(0.0, 0.0, 0.0, 1.0))
    assert (zero.cos_theta, zero.phi) == (1.0, 0.0)


def test_mass_of_spacelike_is_zero():
    assert FourVector(2.0, 0.0, 0.0, 1.0).mass() == 0.0


def test_boost_gamma():
    assert boost_gamma(FourVector(0, 0, 0.75, 1.25)) == pytest.approx(1.25)


def test_boost_gamma_massless_raises():
    with pytest.raises(ValueError):
        boost_gamma(FourVector(1.0, 0, 0, 1.0))


def test_bz_brings_to_rest():
    p = FourVector(0, 0, 0.75, 1.25)
    rest = bz(1.25, p)
    assert rest.pz == pytest.approx(0.0, abs=1e-12)
    assert rest.e == pytest.approx(1.0)