from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from .errors import UnsupportedIntegratorError

"""
This configuration module defines the integrator selector and the run parameters of a simulation. IntegratorKind is the closed set of stepping schemes (leapfrog, rk2, rk4); IntegratorKind.parse is the single place where a caller-supplied string is turned into a kind, and anything else raises UnsupportedIntegratorError. SimConfig groups the default time quantum, default integrator, energy reporting interval, minimum allowed separation between bodies at construction, and whether batch runs print progress. The copy method gives independent configurations for parameter sweeps. Defaults match the reference runs used to validate the integrators (dt = 1e-4, rk4).
"""


class IntegratorKind(str, Enum):
    LEAPFROG = "leapfrog"
    RK2 = "rk2"
    RK4 = "rk4"

    @classmethod
    def parse(cls, kind) -> "IntegratorKind":
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            key = kind.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise UnsupportedIntegratorError(kind)

    def __str__(self) -> str:
        return self.value


@dataclass
class SimConfig:
    dt: float = 1.0e-4
    integrator: str = "rk4"
    report_interval: int = 100
    min_separation: float = 0.0
    show_progress: bool = False

    def __post_init__(self) -> None:
        self.integrator = IntegratorKind.parse(self.integrator).value
        self.report_interval = max(1, int(self.report_interval))

    @property
    def integrator_kind(self) -> IntegratorKind:
        return IntegratorKind(self.integrator)

    def copy(self) -> "SimConfig":
        new = object.__new__(SimConfig)
        new.__dict__ = dict(getattr(self, "__dict__", {}))
        return new
