"""
This module implements the leapfrog integration scheme in kick-drift-kick form.

The LeapfrogScheme class extends IntegrationScheme with the second-order symplectic
leapfrog: a half kick from accelerations at the current positions, a full drift with the
half-kicked velocities, and a second half kick from accelerations at the drifted
positions. Each of the three passes completes over all bodies before the next begins. Being
symplectic, the scheme keeps the energy error bounded over long runs instead of drifting.
"""

from __future__ import annotations
from .integration_scheme_base import IntegrationScheme



class LeapfrogScheme(IntegrationScheme):
	name = "leapfrog"

	def step(self, dt: float) -> None:
		h2 = 0.5 * dt
		self.kick(self.accelerations(), h2)
		self.drift(dt)
		self.kick(self.accelerations(), h2)
