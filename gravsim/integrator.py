from __future__ import annotations
from typing import Dict, TYPE_CHECKING
from .integration_scheme_base import IntegrationScheme
from .leapfrog_scheme import LeapfrogScheme
from .rk2_scheme import RK2Scheme
from .rk4_scheme import RK4Scheme
from .sim_config import IntegratorKind

if TYPE_CHECKING:
	from .simulation import NBodySimulation

"""
This module implements the Integrator class that connects a simulation to its stepping schemes. The integrator resolves an IntegratorKind to the matching IntegrationScheme (leapfrog, rk2 or rk4), builds each scheme lazily the first time it is requested and reuses it afterwards, and advances the simulation's body ensemble by one time quantum with the chosen scheme. It also counts the steps taken per scheme so runs that switch integrators midway can be audited. Kind validation happens before any scheme code runs, so an unsupported kind never leaves the ensemble half updated. The integrator does not touch the simulation clock; NBodySimulation owns it.

"""

_SCHEMES = {
	IntegratorKind.LEAPFROG: LeapfrogScheme,
	IntegratorKind.RK2: RK2Scheme,
	IntegratorKind.RK4: RK4Scheme,
}


class Integrator:
	def __init__(self, sim: "NBodySimulation") -> None:
		self.sim = sim
		self._schemes: Dict[IntegratorKind, IntegrationScheme] = {}
		self.steps_by_kind: Dict[IntegratorKind, int] = {k: 0 for k in IntegratorKind}

	def _make_scheme(self, kind: IntegratorKind) -> IntegrationScheme:
		return _SCHEMES[kind](self)

	def scheme(self, kind) -> IntegrationScheme:
		kind = IntegratorKind.parse(kind)
		scheme = self._schemes.get(kind)
		if scheme is None:
			scheme = self._make_scheme(kind)
			self._schemes[kind] = scheme
		return scheme

	def step(self, kind, dt: float) -> None:
		kind = IntegratorKind.parse(kind)
		self.scheme(kind).step(float(dt))
		self.steps_by_kind[kind] += 1
