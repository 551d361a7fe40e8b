import numpy as np
import pytest

from gravsim import (
    Integrator,
    IntegratorKind,
    LeapfrogScheme,
    RK2Scheme,
    RK4Scheme,
    UnsupportedIntegratorError,
    make_simulation,
)


def _arrays(sim):
    return sim.masses, sim.positions, sim.velocities


def _acc(m, x):
    a = np.zeros_like(x)
    for i in range(len(m)):
        for j in range(len(m)):
            if i != j:
                r = x[j] - x[i]
                a[i] += r * m[j] / np.linalg.norm(r) ** 3
    return a


def _leapfrog(m, x, v, dt):
    v = v + _acc(m, x) * 0.5 * dt
    x = x + v * dt
    v = v + _acc(m, x) * 0.5 * dt
    return x, v


def _rk2(m, x, v, dt):
    half_v = v + _acc(m, x) * 0.5 * dt
    probe = x + v * 0.5 * dt
    v = v + _acc(m, probe) * dt
    return x + half_v * dt, v


def _rk4(m, x, v, dt):
    a0 = _acc(m, x)
    a1 = _acc(m, x + v * 0.5 * dt + a0 * 0.125 * dt * dt)
    a2 = _acc(m, x + v * dt + a1 * 0.5 * dt * dt)
    x_new = x + v * dt + (a0 + 2 * a1) * dt * dt / 6.0
    v_new = v + (a0 + 4 * a1 + a2) * dt / 6.0
    return x_new, v_new


REFERENCE = {
    IntegratorKind.LEAPFROG: _leapfrog,
    IntegratorKind.RK2: _rk2,
    IntegratorKind.RK4: _rk4,
}


@pytest.mark.parametrize("key", ["two_body", "figure8_kali", "broucke_a1"])
@pytest.mark.parametrize("kind", list(IntegratorKind))
def test_step_matches_whole_ensemble_update(key, kind):
    sim = make_simulation(key, dt=1e-2)
    m, x, v = _arrays(sim)
    for _ in range(5):
        x, v = REFERENCE[kind](m, x, v, sim.dt)
        sim.step(kind)
    np.testing.assert_allclose(sim.positions, x, rtol=0, atol=1e-12)
    np.testing.assert_allclose(sim.velocities, v, rtol=0, atol=1e-12)


def test_rk4_conserves_energy_better_than_rk2():
    errors = {}
    for kind in ("rk2", "rk4"):
        sim = make_simulation("figure8_kali", dt=1e-2)
        sim.evolve(kind, 0.5)
        errors[kind] = abs(sim.relative_energy_error())
    assert errors["rk4"] < errors["rk2"]


def test_integrator_builds_each_scheme_once():
    sim = make_simulation("two_body", dt=1e-3)
    integ = Integrator(sim)
    assert isinstance(integ.scheme("leapfrog"), LeapfrogScheme)
    assert isinstance(integ.scheme(IntegratorKind.RK2), RK2Scheme)
    assert isinstance(integ.scheme("rk4"), RK4Scheme)
    assert integ.scheme("rk4") is integ.scheme(IntegratorKind.RK4)


def test_integrator_counts_steps_per_kind():
    sim = make_simulation("two_body", dt=1e-3)
    for kind in ("rk4", "rk4", "leapfrog"):
        sim.step(kind)
    counts = sim._integrator.steps_by_kind
    assert counts[IntegratorKind.RK4] == 2
    assert counts[IntegratorKind.LEAPFROG] == 1
    assert counts[IntegratorKind.RK2] == 0


def test_parse_kind():
    assert IntegratorKind.parse("leapfrog") is IntegratorKind.LEAPFROG
    assert IntegratorKind.parse("RK2") is IntegratorKind.RK2
    assert IntegratorKind.parse(IntegratorKind.RK4) is IntegratorKind.RK4
    assert str(IntegratorKind.RK4) == "rk4"
    for bad in ("euler", "", None, 4):
        with pytest.raises(UnsupportedIntegratorError):
            IntegratorKind.parse(bad)
