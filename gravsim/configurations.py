from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple
from .body import Body
from .errors import UnknownConfigurationError
from .sim_config import SimConfig
from .simulation import NBodySimulation
from .vec3 import Vec3

"""
This module provides named initial conditions with known periodic solutions, used for demonstrations and as regression cases for the integrators. Each NBodyConfig records the solution name, the year it was discovered, its orbital period and its total energy (G = 1), together with the bodies as immutable (mass, position, velocity) triples. Simulations mutate their bodies in place, so make_bodies builds fresh Body objects on every call and a configuration can seed any number of runs. CONFIGURATIONS is a read-only table keyed by short names; get_config looks a key up and make_simulation builds a ready NBodySimulation from one.

The two-body orbit and the Chenciner-Montgomery figure-eight come from sections 3.1 and 5.1 of Hut and Makino, "Moving Stars Around" (http://www.artcompsci.org/kali/vol/n_body_problem/volume4.pdf). The remaining three-body solutions are from the gallery at http://suki.ipb.ac.rs/3body/.

"""

Triple = Tuple[float, float, float]


@dataclass(frozen=True)
class BodySpec:
    mass: float
    pos: Triple
    vel: Triple

    def make_body(self) -> Body:
        return Body(self.mass, Vec3(*self.pos), Vec3(*self.vel))


@dataclass(frozen=True)
class NBodyConfig:
    name: str
    discovered: int
    period: float
    energy: float
    bodies: Tuple[BodySpec, ...]

    @property
    def n_bodies(self) -> int:
        return len(self.bodies)

    def make_bodies(self) -> List[Body]:
        return [spec.make_body() for spec in self.bodies]


def _symmetric_three_body(name: str, discovered: int, period: float, energy: float,
                          p1: float, p2: float) -> NBodyConfig:
    # bodies at (-1, 0) and (1, 0) share velocity (p1, p2); the third sits at the origin
    return NBodyConfig(
        name,
        discovered,
        period,
        energy,
        (
            BodySpec(1.0, (-1.0, 0.0, 0.0), (p1, p2, 0.0)),
            BodySpec(1.0, (1.0, 0.0, 0.0), (p1, p2, 0.0)),
            BodySpec(1.0, (0.0, 0.0, 0.0), (-2.0 * p1, -2.0 * p2, 0.0)),
        ),
    )


TWO_BODY = NBodyConfig(
    "Two body",
    1687,
    2.714081,
    -0.14,
    (
        BodySpec(0.8, (0.2, 0.0, 0.0), (0.0, 0.1, 0.0)),
        BodySpec(0.2, (-0.8, 0.0, 0.0), (0.0, -0.4, 0.0)),
    ),
)

FIGURE8_KALI = NBodyConfig(
    "Figure-eight (Chenciner-Montgomery)",
    2000,
    6.325914,
    -1.287047,
    (
        BodySpec(1.0, (0.9700436, -0.24308753, 0.0), (0.466203685, 0.43236573, 0.0)),
        BodySpec(1.0, (-0.9700436, 0.24308753, 0.0), (0.466203685, 0.43236573, 0.0)),
        BodySpec(1.0, (0.0, 0.0, 0.0), (-0.93240737, -0.86473146, 0.0)),
    ),
)

BROUCKE_A1 = NBodyConfig(
    "Broucke A 1",
    1975,
    6.283213,
    -0.854131,
    (
        BodySpec(1.0, (-0.9892620043, 0.0, 0.0), (0.0, 1.9169244185, 0.0)),
        BodySpec(1.0, (2.2096177241, 0.0, 0.0), (0.0, 0.1910268738, 0.0)),
        BodySpec(1.0, (-1.2203557197, 0.0, 0.0), (0.0, -2.1079512924, 0.0)),
    ),
)

BROUCKE_A2 = NBodyConfig(
    "Broucke A 2",
    1975,
    7.702408,
    -1.751113,
    (
        BodySpec(1.0, (0.3361300950, 0.0, 0.0), (0.0, 1.5324315370, 0.0)),
        BodySpec(1.0, (0.7699893804, 0.0, 0.0), (0.0, -0.6287350978, 0.0)),
        BodySpec(1.0, (-1.1061194753, 0.0, 0.0), (0.0, -0.9036964391, 0.0)),
    ),
)

FIGURE8 = _symmetric_three_body("Figure 8", 1993, 6.324449, -1.287146, 0.347111, 0.532728)

BUTTERFLY_I = _symmetric_three_body("Butterfly I", 2012, 6.235641, -2.170195, 0.306893, 0.125507)


CONFIGURATIONS: Mapping[str, NBodyConfig] = MappingProxyType({
    "two_body": TWO_BODY,
    "figure8_kali": FIGURE8_KALI,
    "broucke_a1": BROUCKE_A1,
    "broucke_a2": BROUCKE_A2,
    "figure8": FIGURE8,
    "butterfly_i": BUTTERFLY_I,
})

# durations of the reference runs in Hut and Makino
TWO_BODY_DURATION = 10.0
FIGURE8_KALI_DURATION = 2.1088


def get_config(key: str) -> NBodyConfig:
    try:
        return CONFIGURATIONS[key]
    except KeyError:
        raise UnknownConfigurationError(
            f"unknown configuration {key!r}; known: {', '.join(CONFIGURATIONS)}"
        ) from None


def make_simulation(key: str, dt: float = 1.0e-4, cfg: Optional[SimConfig] = None) -> NBodySimulation:
    return NBodySimulation.from_config(get_config(key), dt, cfg)


def two_body_simulation(dt: float = 1.0e-4) -> NBodySimulation:
    return make_simulation("two_body", dt)


def figure8_kali_simulation(dt: float = 1.0e-4) -> NBodySimulation:
    return make_simulation("figure8_kali", dt)
