"""
This module defines the Body class, a point mass taking part in the gravitational
interaction.

A body stores its mass (read-only after construction), position and velocity as Vec3.
Acceleration, kinetic energy and potential energy are derived on demand from a snapshot of
the whole ensemble passed in by the caller, with G = 1; the body excludes itself by
identity, so two distinct bodies with identical state still attract each other. Sums run in
ensemble order so results are reproducible bit for bit. A second body sitting at exactly
the same position raises CoincidentBodiesError instead of dividing by zero.
"""

from __future__ import annotations
import math
from typing import Sequence
from .vec3 import Vec3
from .errors import CoincidentBodiesError, InvalidBodyError



class Body:
	__slots__ = ("_mass", "pos", "vel")

	def __init__(self, mass: float, pos: Vec3, vel: Vec3) -> None:
		mass = float(mass)
		if not (mass > 0.0 and math.isfinite(mass)):
			raise InvalidBodyError(f"body mass must be positive and finite, got {mass!r}")
		self._mass = mass
		self.pos = pos.copy()
		self.vel = vel.copy()

	@property
	def mass(self) -> float:
		return self._mass

	def acc(self, bodies: Sequence["Body"]) -> Vec3:
		a = Vec3.zeros()
		for body in bodies:
			if body is self:
				continue
			r = body.pos - self.pos
			r2 = r.dot(r)
			if r2 == 0.0:
				raise CoincidentBodiesError(f"coincident bodies at {self.pos!r}")
			r3 = r2 * math.sqrt(r2)
			a = a + r * (body.mass / r3)
		return a

	def kinetic_energy(self) -> float:
		return 0.5 * self._mass * self.vel.dot(self.vel)

	def potential_energy(self, bodies: Sequence["Body"]) -> float:
		p = 0.0
		for body in bodies:
			if body is self:
				continue
			d = (body.pos - self.pos).norm()
			if d == 0.0:
				raise CoincidentBodiesError(f"coincident bodies at {self.pos!r}")
			p += body.mass / d
		return -self._mass * p

	def momentum(self) -> Vec3:
		return self.vel * self._mass

	def angular_momentum(self) -> Vec3:
		return self.pos.cross(self.vel) * self._mass

	def copy(self) -> "Body":
		return Body(self._mass, self.pos, self.vel)

	def __repr__(self) -> str:
		return f"Body(mass={self._mass}, pos={self.pos!r}, vel={self.vel!r})"
