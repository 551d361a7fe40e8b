import math

import numpy as np
import pytest

from gravsim import Vec3


def test_fill_overwrites_all_components():
    x = Vec3(1.0, 2.0, 3.0)
    assert x.fill(4.0) is None
    assert x == Vec3(4.0, 4.0, 4.0)
    assert (x.x, x.y, x.z) == (4.0, 4.0, 4.0)


def test_arithmetic_returns_new_vectors():
    u = Vec3(1.0, 2.0, 3.0)
    v = Vec3(4.0, 5.0, 6.0)
    assert u + v == Vec3(5.0, 7.0, 9.0)
    assert Vec3(5.0, 7.0, 9.0) - u == Vec3(4.0, 5.0, 6.0)
    assert -u == Vec3(-1.0, -2.0, -3.0)
    assert u * 4.0 == Vec3(4.0, 8.0, 12.0)
    assert 4.0 * u == Vec3(4.0, 8.0, 12.0)
    assert Vec3(2.0, 4.0, 6.0) / 2.0 == Vec3(1.0, 2.0, 3.0)
    # operands untouched
    assert u == Vec3(1.0, 2.0, 3.0)
    assert v == Vec3(4.0, 5.0, 6.0)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3(1.0, 2.0, 3.0) / 0.0


def test_dot_product():
    assert Vec3(1.0, 3.0, -5.0).dot(Vec3(4.0, -2.0, -1.0)) == 3.0


def test_dot_is_symmetric_and_bilinear():
    u = Vec3(0.5, -1.25, 2.0)
    v = Vec3(3.0, 0.75, -1.5)
    w = Vec3(-2.0, 1.0, 0.25)
    assert u.dot(v) == v.dot(u)
    assert math.isclose((u + w).dot(v), u.dot(v) + w.dot(v))
    assert math.isclose((u * 3.0).dot(v), 3.0 * u.dot(v))


def test_cross_product():
    assert Vec3(2.0, 3.0, 4.0).cross(Vec3(5.0, 6.0, 7.0)) == Vec3(-3.0, 6.0, -3.0)


def test_cross_is_anticommutative():
    u = Vec3(1.5, -2.0, 0.5)
    v = Vec3(-0.25, 4.0, 3.0)
    assert u.cross(v) == -v.cross(u)
    assert u.cross(u) == Vec3.zeros()


def test_norm():
    assert Vec3(1.0, 2.0, 2.0).norm() == 3.0
    assert Vec3.zeros().norm() == 0.0
    assert Vec3(0.0, 0.0, -1e-3).norm() > 0.0


def test_copy_is_independent():
    u = Vec3(1.0, 2.0, 3.0)
    c = u.copy()
    c.fill(0.0)
    assert u == Vec3(1.0, 2.0, 3.0)


def test_numpy_round_trip():
    u = Vec3(1.0, -2.0, 3.5)
    arr = u.to_array()
    np.testing.assert_array_equal(arr, np.array([1.0, -2.0, 3.5]))
    assert Vec3.from_array(arr) == u
    with pytest.raises(ValueError):
        Vec3.from_array([1.0, 2.0])


def test_isclose():
    assert Vec3(1.0, 2.0, 3.0).isclose(Vec3(1.0 + 1e-8, 2.0, 3.0 - 1e-8))
    assert not Vec3(1.0, 2.0, 3.0).isclose(Vec3(1.0, 2.0, 3.1))
