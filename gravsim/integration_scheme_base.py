"""
This base class defines the interface shared by the fixed-step integration schemes.

The IntegrationScheme class holds a reference to the parent Integrator (and through it the
simulation's body ensemble) and provides the stage primitives every scheme is built from:
accelerations evaluates the acceleration of every body against the current ensemble into
a fresh list before anything is mutated, positions snapshots the current positions, and
kick and drift apply a per-body increment over the whole ensemble. Because each stage is
computed in full before the next one mutates the ensemble, no body ever sees a partially
updated neighbour within a stage. Subclasses implement step(dt) as a fixed sequence of
such stages; a scheme keeps no state between steps.
"""

from __future__ import annotations
from typing import List, TYPE_CHECKING
from .vec3 import Vec3

if TYPE_CHECKING:
	from .integrator import Integrator
	from .body import Body



class IntegrationScheme:
	name: str = "base"

	def __init__(self, integrator: "Integrator") -> None:
		self.integ = integrator

	@property
	def bodies(self) -> List["Body"]:
		return self.integ.sim._bodies

	def accelerations(self) -> List[Vec3]:
		bodies = self.bodies
		return [b.acc(bodies) for b in bodies]

	def positions(self) -> List[Vec3]:
		return [b.pos.copy() for b in self.bodies]

	def kick(self, acc: List[Vec3], h: float) -> None:
		for b, a in zip(self.bodies, acc):
			b.vel = b.vel + a * h

	def drift(self, h: float) -> None:
		for b in self.bodies:
			b.pos = b.pos + b.vel * h

	def step(self, dt: float) -> None:
		raise NotImplementedError(f"{type(self).__name__} does not implement step")
