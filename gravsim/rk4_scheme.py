"""
This module implements the classic fourth-order Runge-Kutta scheme for second-order
equations of motion.

Three acceleration evaluations are taken: a0 at the start positions, a1 at
x0 + v dt/2 + a0 dt^2/8, and a2 at x0 + v dt + a1 dt^2/2. Positions then advance to
x0 + v dt + (a0 + 2 a1) dt^2/6 and velocities by (a0 + 4 a1 + a2) dt/6. Every stage
moves all bodies to their stage estimate before the next acceleration evaluation, so the
stages are never interleaved per body. Velocities stay at their start values until the
final update.
"""

from __future__ import annotations
from .integration_scheme_base import IntegrationScheme



class RK4Scheme(IntegrationScheme):
	name = "rk4"

	def step(self, dt: float) -> None:
		bodies = self.bodies
		dt2 = dt * dt
		old_pos = self.positions()

		a0 = self.accelerations()
		for b, p0, a in zip(bodies, old_pos, a0):
			b.pos = p0 + b.vel * (0.5 * dt) + a * (0.125 * dt2)

		a1 = self.accelerations()
		for b, p0, a in zip(bodies, old_pos, a1):
			b.pos = p0 + b.vel * dt + a * (0.5 * dt2)

		a2 = self.accelerations()
		for i, b in enumerate(bodies):
			b.pos = old_pos[i] + b.vel * dt + (a0[i] + a1[i] * 2) * (1.0 / 6.0 * dt2)
		for i, b in enumerate(bodies):
			b.vel = b.vel + (a0[i] + a1[i] * 4 + a2[i]) * (1.0 / 6.0 * dt)
