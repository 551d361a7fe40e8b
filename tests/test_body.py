import math

import pytest

from gravsim import Body, CoincidentBodiesError, InvalidBodyError, Vec3


def _pair():
    a = Body(0.8, Vec3(0.2, 0.0, 0.0), Vec3(0.0, 0.1, 0.0))
    b = Body(0.2, Vec3(-0.8, 0.0, 0.0), Vec3(0.0, -0.4, 0.0))
    return [a, b]


def test_acceleration_points_to_other_body():
    a, b = bodies = _pair()
    # unit separation, G = 1
    assert a.acc(bodies).isclose(Vec3(-0.2, 0.0, 0.0), abs_tol=1e-15)
    assert b.acc(bodies).isclose(Vec3(0.8, 0.0, 0.0), abs_tol=1e-15)


def test_momentum_weighted_accelerations_cancel():
    bodies = [
        Body(1.0, Vec3(0.0, 0.0, 0.0), Vec3.zeros()),
        Body(2.0, Vec3(1.0, 2.0, -1.0), Vec3.zeros()),
        Body(0.5, Vec3(-3.0, 0.5, 2.0), Vec3.zeros()),
    ]
    total = Vec3.zeros()
    for b in bodies:
        total = total + b.acc(bodies) * b.mass
    assert total.norm() < 1e-14


def test_self_excluded_by_identity_not_value():
    a = Body(1.0, Vec3(0.0, 0.0, 0.0), Vec3.zeros())
    twin = Body(1.0, Vec3(1.0, 0.0, 0.0), Vec3.zeros())
    other = Body(1.0, Vec3(1.0, 0.0, 0.0), Vec3.zeros())
    assert a.acc([a]) == Vec3.zeros()
    assert a.potential_energy([a]) == 0.0
    # twin and other are equal in value but distinct objects
    assert a.acc([a, twin, other]).isclose(Vec3(2.0, 0.0, 0.0), abs_tol=1e-15)


def test_kinetic_and_potential_energy():
    a, b = bodies = _pair()
    assert math.isclose(a.kinetic_energy(), 0.5 * 0.8 * 0.01)
    assert math.isclose(b.kinetic_energy(), 0.5 * 0.2 * 0.16)
    assert math.isclose(a.potential_energy(bodies), -0.16)
    assert math.isclose(b.potential_energy(bodies), -0.16)


def test_energies_are_pure():
    a, b = bodies = _pair()
    assert a.acc(bodies) == a.acc(bodies)
    assert a.potential_energy(bodies) == a.potential_energy(bodies)
    assert a.pos == Vec3(0.2, 0.0, 0.0)
    assert a.vel == Vec3(0.0, 0.1, 0.0)


def test_mass_must_be_positive():
    with pytest.raises(InvalidBodyError):
        Body(0.0, Vec3.zeros(), Vec3.zeros())
    with pytest.raises(InvalidBodyError):
        Body(-1.0, Vec3.zeros(), Vec3.zeros())
    with pytest.raises(InvalidBodyError):
        Body(float("nan"), Vec3.zeros(), Vec3.zeros())


def test_mass_is_read_only():
    a, _ = _pair()
    with pytest.raises(AttributeError):
        a.mass = 2.0


def test_constructor_copies_vectors():
    pos = Vec3(1.0, 2.0, 3.0)
    b = Body(1.0, pos, Vec3.zeros())
    pos.fill(0.0)
    assert b.pos == Vec3(1.0, 2.0, 3.0)


def test_coincident_bodies_fail_fast():
    a = Body(1.0, Vec3(1.0, 1.0, 0.0), Vec3.zeros())
    b = Body(1.0, Vec3(1.0, 1.0, 0.0), Vec3.zeros())
    with pytest.raises(CoincidentBodiesError):
        a.acc([a, b])
    with pytest.raises(CoincidentBodiesError):
        a.potential_energy([a, b])


def test_momentum_and_angular_momentum():
    b = Body(2.0, Vec3(1.0, 0.0, 0.0), Vec3(0.0, 3.0, 0.0))
    assert b.momentum() == Vec3(0.0, 6.0, 0.0)
    assert b.angular_momentum() == Vec3(0.0, 0.0, 6.0)


def test_copy_is_independent():
    a, _ = _pair()
    c = a.copy()
    c.pos.fill(9.0)
    c.vel = Vec3(1.0, 1.0, 1.0)
    assert a.pos == Vec3(0.2, 0.0, 0.0)
    assert a.vel == Vec3(0.0, 0.1, 0.0)
    assert c.mass == a.mass
