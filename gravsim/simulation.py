"""
This module implements NBodySimulation, the simulator that owns a body ensemble and its
clock.

A simulation is built from a sequence of bodies and a fixed time quantum dt. Construction
validates both (InvalidTimeStepError, InvalidStateError), then captures the baseline total
energy exactly once; a baseline of exactly zero is rejected with ZeroBaselineEnergyError
because the relative energy error would be undefined from then on. step(kind) checks the
integrator kind before touching anything, runs the matching scheme over the ensemble and
advances the clock by dt. A step that fails with an NBodyError (coincident bodies) puts
every body back where it was and leaves the clock and step count untouched.
evolve(kind, duration) keeps stepping while the clock is more than half a quantum short
of duration, so the final time lands within dt/2 of the target even when duration is not
a multiple of dt. An optional on_step callback sees the simulation after every step.

Energy accessors delegate to Diagnostics. positions, velocities and masses return numpy
copies of the ensemble state for vectorized analysis. The simulation never inspects its own
energy error to stop a run; thresholds are a caller concern. Runs are blocking and
single-threaded; bound the duration to bound the run time.

Typical use:

	sim = NBodySimulation.from_config(get_config("figure8_kali"), 1e-4)
	sim.evolve("rk4", 2.1088)
	sim.relative_energy_error()
"""

from __future__ import annotations
from typing import Callable, List, Optional, Sequence, Tuple, TYPE_CHECKING
import numpy as np
from .body import Body
from .diagnostics import Diagnostics
from .errors import InvalidStateError, InvalidTimeStepError, NBodyError, ZeroBaselineEnergyError
from .integrator import Integrator
from .sim_config import IntegratorKind, SimConfig
from .simulation_validator import SimulationValidator

if TYPE_CHECKING:
	from .configurations import NBodyConfig



class NBodySimulation:
	def __init__(
		self,
		bodies: Sequence[Body],
		dt: Optional[float] = None,
		cfg: Optional[SimConfig] = None,
	) -> None:
		if cfg is None:
			cfg = SimConfig()
		self.cfg = cfg

		if dt is None:
			dt = cfg.dt
		if not SimulationValidator.dt_is_valid(dt):
			raise InvalidTimeStepError(f"time quantum must be finite and > 0, got {dt!r}")

		bodies = list(bodies)
		problems = SimulationValidator.state_problems(bodies, cfg.min_separation)
		if problems:
			SimulationValidator.report_invalid_state("NBodySimulation", problems=problems)
			raise InvalidStateError("; ".join(problems))

		self._bodies: List[Body] = bodies
		self._dt = float(dt)
		self._time = 0.0
		self._steps = 0
		self._integrator = Integrator(self)
		self._diag = Diagnostics(self)

		self._initial_energy = self._diag.total_energy()
		if self._initial_energy == 0.0:
			raise ZeroBaselineEnergyError(
				"baseline total energy is exactly zero; relative energy error is undefined"
			)

	@classmethod
	def from_config(cls, config: "NBodyConfig", dt: Optional[float] = None,
					cfg: Optional[SimConfig] = None) -> "NBodySimulation":
		return cls(config.make_bodies(), dt, cfg)

	@property
	def bodies(self) -> Tuple[Body, ...]:
		return tuple(self._bodies)

	@property
	def n_bodies(self) -> int:
		return len(self._bodies)

	@property
	def time(self) -> float:
		return self._time

	@property
	def dt(self) -> float:
		return self._dt

	@property
	def steps_taken(self) -> int:
		return self._steps

	@property
	def initial_energy(self) -> float:
		return self._initial_energy

	@property
	def diagnostics(self) -> Diagnostics:
		return self._diag

	@property
	def masses(self) -> np.ndarray:
		return np.array([b.mass for b in self._bodies], dtype=np.float64)

	@property
	def positions(self) -> np.ndarray:
		return np.array([tuple(b.pos) for b in self._bodies], dtype=np.float64).reshape(-1, 3)

	@property
	def velocities(self) -> np.ndarray:
		return np.array([tuple(b.vel) for b in self._bodies], dtype=np.float64).reshape(-1, 3)

	def snapshot(self) -> List[Body]:
		return [b.copy() for b in self._bodies]

	def _kind(self, kind) -> IntegratorKind:
		if kind is None:
			return self.cfg.integrator_kind
		return IntegratorKind.parse(kind)

	def _advance(self, kind: IntegratorKind) -> None:
		# schemes rebind pos/vel to new vectors and never mutate them in place
		saved = [(b.pos, b.vel) for b in self._bodies]
		try:
			self._integrator.step(kind, self._dt)
		except NBodyError:
			for b, (pos, vel) in zip(self._bodies, saved):
				b.pos = pos
				b.vel = vel
			raise
		self._time += self._dt
		self._steps += 1

	def step(self, kind=None) -> None:
		self._advance(self._kind(kind))

	def evolve(
		self,
		kind=None,
		duration: float = 0.0,
		on_step: Optional[Callable[["NBodySimulation"], None]] = None,
	) -> None:
		kind = self._kind(kind)
		t_end = float(duration) - 0.5 * self._dt
		while self._time < t_end:
			self._advance(kind)
			if on_step is not None:
				on_step(self)

	def kinetic_energy(self) -> float:
		return self._diag.kinetic_energy()

	def potential_energy(self) -> float:
		return self._diag.potential_energy()

	def total_energy(self) -> float:
		return self._diag.total_energy()

	def relative_energy_error(self) -> float:
		return self._diag.relative_energy_error()

	def __repr__(self) -> str:
		return (f"NBodySimulation(n_bodies={self.n_bodies}, dt={self._dt}, "
				f"time={self._time}, steps={self._steps})")
