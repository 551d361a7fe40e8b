from __future__ import annotations
from typing import Dict, Tuple, TYPE_CHECKING
import numpy as np
from .vec3 import Vec3

if TYPE_CHECKING:
	from .simulation import NBodySimulation

"""
This module computes the conserved quantities used to judge a simulation's physical fidelity. The Diagnostics class provides the system kinetic energy as the sum of per-body kinetic energies, the potential energy as half the sum of per-body potential energies (every unordered pair is seen once from each side), the total energy, and the relative energy error against the baseline captured when the simulation was built. All of these are pure functions of the current ensemble, so calling them repeatedly between steps returns identical values. It also reports linear and angular momentum, the center of mass position and velocity, an energy breakdown dictionary, and per-step metrics computed with numpy over the ensemble arrays for reporting. Nothing here ever stops a run; drift thresholds belong to the caller.

"""


class Diagnostics:
	def __init__(self, simulation: "NBodySimulation") -> None:
		self.sim = simulation

	def kinetic_energy(self) -> float:
		s = 0.0
		for b in self.sim._bodies:
			s += b.kinetic_energy()
		return s

	def potential_energy(self) -> float:
		bodies = self.sim._bodies
		s = 0.0
		for b in bodies:
			s += b.potential_energy(bodies)
		return 0.5 * s

	def total_energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def relative_energy_error(self) -> float:
		e0 = self.sim.initial_energy
		return (self.total_energy() - e0) / e0

	def energy_breakdown(self) -> Dict[str, float]:
		T = self.kinetic_energy()
		V = self.potential_energy()
		E = T + V
		e0 = self.sim.initial_energy
		return dict(T=T, V=V, E=E, dE_rel=(E - e0) / e0)

	def linear_momentum(self) -> Vec3:
		p = Vec3.zeros()
		for b in self.sim._bodies:
			p = p + b.momentum()
		return p

	def angular_momentum(self) -> Vec3:
		L = Vec3.zeros()
		for b in self.sim._bodies:
			L = L + b.angular_momentum()
		return L

	def center_of_mass(self) -> Tuple[Vec3, Vec3]:
		M = 0.0
		for b in self.sim._bodies:
			M += b.mass
		if M == 0.0:
			return Vec3.zeros(), Vec3.zeros()
		xs = Vec3.zeros()
		for b in self.sim._bodies:
			xs = xs + b.pos * b.mass
		return xs / M, self.linear_momentum() / M

	def step_metrics(self) -> Dict[str, float]:
		sim = self.sim
		m = sim.masses
		pos = sim.positions
		vel = sim.velocities

		if m.size:
			M = float(np.sum(m))
			com = np.sum(m[:, None] * pos, axis=0) / M
			P = np.sum(m[:, None] * vel, axis=0)
			L = np.sum(m[:, None] * np.cross(pos, vel), axis=0)
		else:
			com = np.zeros(3)
			P = np.zeros(3)
			L = np.zeros(3)

		return dict(
			time=sim.time,
			com_drift=float(np.linalg.norm(com)),
			P_norm=float(np.linalg.norm(P)),
			L_norm=float(np.linalg.norm(L)),
			**self.energy_breakdown(),
		)
